# app/schemas/text.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel, PartialText, RequiredText


class TextBase(CamelModel):
    title: RequiredText = Field(..., examples=["Assinatura de e-mail"])
    content: Optional[str] = None


class TextCreate(TextBase):
    pass


class TextUpdate(CamelModel):
    title: PartialText = None
    content: Optional[str] = None


class Text(TextBase):
    id: str
    created_at: datetime
    updated_at: datetime
