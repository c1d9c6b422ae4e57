# app/schemas/note.py
from datetime import datetime
from typing import Optional

from pydantic import Field
from typing_extensions import Annotated

from app.enums import NoteColor
from app.schemas.base import CamelModel, NotNull, PartialText, RequiredText

SUGGESTED_CATEGORIES = ["geral", "planejamento", "processos", "pesquisa", "clientes"]


class NoteBase(CamelModel):
    title: RequiredText = Field(..., examples=["Processo de onboarding"])
    content: Optional[str] = None
    category: str = Field("geral", examples=SUGGESTED_CATEGORIES, description="Categoria livre")
    # Booleano de verdade; "true"/"false" em texto também são aceitos na entrada
    pinned: bool = False
    color: NoteColor = NoteColor.DEFAULT


class NoteCreate(NoteBase):
    pass


class NoteUpdate(CamelModel):
    title: PartialText = None
    content: Optional[str] = None
    category: Annotated[Optional[str], NotNull] = None
    pinned: Annotated[Optional[bool], NotNull] = None
    color: Annotated[Optional[NoteColor], NotNull] = None


class Note(NoteBase):
    id: str
    created_at: datetime
    updated_at: datetime
