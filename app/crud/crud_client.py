# app/crud/crud_client.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.client import Client
from app.schemas.client import ClientCreate, ClientUpdate


class CRUDClient(CRUDBase[Client, ClientCreate, ClientUpdate]):
    def get_multi(self, db: Session, *, search: Optional[str] = None) -> List[Client]:
        query = self._query(db)
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Client.name.ilike(pattern),
                    Client.company.ilike(pattern),
                    Client.email.ilike(pattern),
                )
            )
        return query.order_by(*self.order_by()).all()

    def count(self, db: Session) -> int:
        return self._query(db).count()


client = CRUDClient(Client)
