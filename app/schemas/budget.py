# app/schemas/budget.py
import datetime as dt
from typing import List, Optional

from pydantic import Field, model_validator
from typing_extensions import Annotated

from app.core.config import settings
from app.enums import BudgetStatus, TERMINAL_BUDGET_STATUSES
from app.schemas.base import BlankAsNone, CamelModel, NotNull, PartialText, RequiredText
from app.services import budget_calculations

OptionalDate = Annotated[Optional[dt.date], BlankAsNone]


class BudgetItem(CamelModel):
    # id é só a chave gerada pelo front para a linha; não é persistido como entidade
    id: Optional[str] = None
    quantity: int = Field(1, ge=0)
    description: str = ""
    unit_price: float = Field(0, ge=0, description="Preço unitário em reais (unidade maior)")
    warranty: Optional[str] = ""


class BudgetBase(CamelModel):
    client_id: Optional[str] = None
    client_name: RequiredText = Field(..., examples=["Acme Ltda"])
    title: RequiredText = Field(..., examples=["Notebooks para equipe comercial"])
    status: BudgetStatus = BudgetStatus.RASCUNHO
    total_value: int = Field(0, ge=0, description="Total em centavos")
    currency: str = settings.DEFAULT_CURRENCY
    validity_date: OptionalDate = None
    payment_terms: Optional[str] = None
    notes: Optional[str] = None
    items: List[BudgetItem] = []


class BudgetCreate(BudgetBase):
    pass


class BudgetUpdate(CamelModel):
    # proposal_id não é aceito: o número é atribuído uma única vez na criação
    client_id: Optional[str] = None
    client_name: PartialText = None
    title: PartialText = None
    status: Annotated[Optional[BudgetStatus], NotNull] = None
    total_value: Annotated[Optional[int], NotNull] = Field(None, ge=0)
    currency: Annotated[Optional[str], NotNull] = None
    validity_date: OptionalDate = None
    payment_terms: Optional[str] = None
    notes: Optional[str] = None
    items: Annotated[Optional[List[BudgetItem]], NotNull] = None


class Budget(BudgetBase):
    id: str
    proposal_id: Optional[int] = None
    created_at: dt.datetime

    # Campos derivados, calculados na leitura e nunca persistidos
    display_status: Optional[BudgetStatus] = None
    days_to_expiry: Optional[int] = None
    near_expiry: bool = False

    @model_validator(mode="after")
    def derive_expiry_fields(self):
        today = dt.date.today()
        self.display_status = budget_calculations.derive_display_status(
            self.status, self.validity_date, today
        )
        if self.status in TERMINAL_BUDGET_STATUSES:
            # Orçamento aprovado/rejeitado não mostra aviso de vencimento
            self.days_to_expiry = None
            self.near_expiry = False
        else:
            self.days_to_expiry = budget_calculations.days_to_expiry(self.validity_date, today)
            self.near_expiry = budget_calculations.is_near_expiry(
                self.validity_date, today, settings.NEAR_EXPIRY_WINDOW_DAYS
            )
        return self


class NextProposalId(CamelModel):
    next_id: int
