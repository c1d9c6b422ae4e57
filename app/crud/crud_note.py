# app/crud/crud_note.py
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.note import Note
from app.schemas.note import NoteCreate, NoteUpdate


class CRUDNote(CRUDBase[Note, NoteCreate, NoteUpdate]):
    tracks_updates = True

    def order_by(self) -> list:
        # Fixadas primeiro; dentro de cada grupo, as editadas mais recentemente
        return [Note.pinned.desc(), Note.updated_at.desc()]

    def get_multi(self, db: Session, *, category: Optional[str] = None) -> List[Note]:
        query = self._query(db)
        if category:
            query = query.filter(Note.category == category)
        return query.order_by(*self.order_by()).all()


note = CRUDNote(Note)
