# app/crud/base.py
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.db.base_class import Base, utcnow

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Operações comuns a todos os recursos: listar, obter, criar, atualizar e remover.

    Cada subclasse informa o modelo, a ordenação da listagem e se o registro
    guarda data de atualização (notas e textos).
    """

    tracks_updates: bool = False
    # Campos que nunca mudam por atualização parcial
    protected_fields = frozenset({"id", "created_at", "updated_at"})

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def order_by(self) -> list:
        return [self.model.created_at.desc()]

    def _query(self, db: Session) -> Query:
        return db.query(self.model)

    def get(self, db: Session, id: str) -> Optional[ModelType]:
        return self._query(db).filter(self.model.id == id).first()

    def get_multi(self, db: Session) -> List[ModelType]:
        return self._query(db).order_by(*self.order_by()).all()

    def _prepare_data(self, obj_in: Union[BaseModel, Dict[str, Any]], *, partial: bool) -> Dict[str, Any]:
        if isinstance(obj_in, dict):
            return dict(obj_in)
        return obj_in.model_dump(exclude_unset=partial)

    def _save(self, db: Session, db_obj: ModelType) -> ModelType:
        db.add(db_obj)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(db_obj)
        return db_obj

    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        return self._insert(db, self._prepare_data(obj_in, partial=False))

    def _insert(self, db: Session, data: Dict[str, Any]) -> ModelType:
        db_obj = self.model(**data)
        now = utcnow()
        db_obj.created_at = now
        if self.tracks_updates:
            db_obj.updated_at = now
        return self._save(db, db_obj)

    def update(
        self, db: Session, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        # Só os campos enviados são alterados
        update_data = self._prepare_data(obj_in, partial=True)
        for field, value in update_data.items():
            if field in self.protected_fields:
                continue
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        if self.tracks_updates:
            db_obj.updated_at = utcnow()
        return self._save(db, db_obj)

    def remove(self, db: Session, *, id: str) -> Optional[ModelType]:
        obj = self.get(db, id=id)
        if obj is None:
            return None
        db.delete(obj)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        return obj
