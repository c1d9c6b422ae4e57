# app/models/note.py
from sqlalchemy import Boolean, Column, String, Text

from app.db.base_class import Base, UpdatedAtMixin
from app.enums import NoteColor


class Note(UpdatedAtMixin, Base):
    title = Column(String, nullable=False)
    content = Column(Text, nullable=True)
    category = Column(String, nullable=False, default="geral", index=True)
    pinned = Column(Boolean, nullable=False, default=False)
    color = Column(String, nullable=False, default=NoteColor.DEFAULT.value)
