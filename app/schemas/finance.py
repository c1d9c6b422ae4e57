# app/schemas/finance.py
import datetime as dt
from typing import Optional

from pydantic import Field
from typing_extensions import Annotated

from app.enums import FinanceType
from app.schemas.base import CamelModel, NotNull, PartialText, RequiredText

# Sugestões exibidas no formulário; a categoria continua livre
SUGGESTED_CATEGORIES = ["geral", "licenças", "serviços", "operacional", "pessoal", "marketing", "equipamentos"]


class FinanceBase(CamelModel):
    description: RequiredText = Field(..., examples=["Licença anual do ERP"])
    type: FinanceType = FinanceType.RECEITA
    category: str = Field("geral", examples=SUGGESTED_CATEGORIES, description="Categoria livre")
    amount: int = Field(0, ge=0, description="Valor em centavos; o sinal vem do tipo")
    date: dt.date
    notes: Optional[str] = None


class FinanceCreate(FinanceBase):
    pass


class FinanceUpdate(CamelModel):
    description: PartialText = None
    type: Annotated[Optional[FinanceType], NotNull] = None
    category: Annotated[Optional[str], NotNull] = None
    amount: Annotated[Optional[int], NotNull] = Field(None, ge=0)
    date: Annotated[Optional[dt.date], NotNull] = None
    notes: Optional[str] = None


class Finance(FinanceBase):
    id: str
    created_at: dt.datetime
