# app/crud/crud_finance.py
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.enums import FinanceType
from app.models.finance import Finance
from app.schemas.finance import FinanceCreate, FinanceUpdate


class CRUDFinance(CRUDBase[Finance, FinanceCreate, FinanceUpdate]):
    def order_by(self) -> list:
        return [Finance.date.desc(), Finance.created_at.desc()]

    def get_multi(self, db: Session, *, type: Optional[str] = None) -> List[Finance]:
        query = self._query(db)
        if type:
            query = query.filter(Finance.type == FinanceType(type).value)
        return query.order_by(*self.order_by()).all()


finance = CRUDFinance(Finance)
