# app/crud/crud_budget.py
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.budget import Budget, ProposalCounter
from app.schemas.budget import BudgetCreate, BudgetItem, BudgetUpdate
from app.services import budget_calculations

logger = logging.getLogger(__name__)

PROPOSAL_COUNTER_ID = "budgets"


class CRUDBudget(CRUDBase[Budget, BudgetCreate, BudgetUpdate]):
    protected_fields = CRUDBase.protected_fields | {"proposal_id"}

    def get_multi(
        self,
        db: Session,
        *,
        search: Optional[str] = None,
        status: Optional[str] = None,
        today: Optional[date] = None,
    ) -> List[Budget]:
        query = self._query(db)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(Budget.title.ilike(pattern), Budget.client_name.ilike(pattern)))
        budgets = query.order_by(*self.order_by()).all()
        if status:
            # O filtro é pelo status exibido, que depende da data de hoje
            today = today or date.today()
            budgets = [
                b for b in budgets
                if budget_calculations.derive_display_status(b.status, b.validity_date, today) == status
            ]
        return budgets

    @staticmethod
    def _items_sent(obj_in: Union[BaseModel, Dict[str, Any]]) -> bool:
        if isinstance(obj_in, dict):
            return "items" in obj_in
        return "items" in obj_in.model_fields_set

    def _prepare_data(self, obj_in: Union[BaseModel, Dict[str, Any]], *, partial: bool) -> Dict[str, Any]:
        data = super()._prepare_data(obj_in, partial=partial)
        if data.get("items") is not None:
            # Itens são guardados no formato do front (camelCase) dentro do JSON
            items = [BudgetItem.model_validate(item).model_dump(by_alias=True) for item in data["items"]]
            data["items"] = items
            if items or self._items_sent(obj_in):
                # Com itens no payload (mesmo vazios) o total é sempre o calculado
                data["total_value"] = budget_calculations.compute_total(items)
        return data

    def _max_proposal_id(self, db: Session) -> int:
        return db.query(func.max(Budget.proposal_id)).scalar() or 0

    def _lock_counter(self, db: Session) -> ProposalCounter:
        counter = db.get(ProposalCounter, PROPOSAL_COUNTER_ID, with_for_update=True)
        if counter is None:
            counter = ProposalCounter(id=PROPOSAL_COUNTER_ID, value=0)
            db.add(counter)
        return counter

    def current_proposal_id(self, db: Session) -> int:
        current_max = self._max_proposal_id(db)
        counter = db.get(ProposalCounter, PROPOSAL_COUNTER_ID)
        return max(counter.value if counter else 0, current_max)

    def next_proposal_id(self, db: Session) -> int:
        """Número que a próxima criação receberá. Apenas informativo, não reserva nada."""
        return self.current_proposal_id(db) + 1

    def allocate_proposal_id(self, db: Session) -> int:
        """
        Reserva o próximo número de proposta dentro da transação corrente.

        A linha do contador fica bloqueada (SELECT ... FOR UPDATE) até o commit
        do orçamento, então criações concorrentes recebem números distintos.
        Números nunca são reutilizados, mesmo após excluir o último orçamento.
        """
        current_max = self._max_proposal_id(db)
        counter = self._lock_counter(db)
        counter.value = max(counter.value or 0, current_max) + 1
        return counter.value

    def create(self, db: Session, *, obj_in: Union[BudgetCreate, Dict[str, Any]]) -> Budget:
        data = self._prepare_data(obj_in, partial=False)
        # Número e orçamento entram no mesmo commit; qualquer falha desfaz os dois
        try:
            data["proposal_id"] = self.allocate_proposal_id(db)
            return self._insert(db, data)
        except SQLAlchemyError:
            db.rollback()
            raise


budget = CRUDBudget(Budget)
