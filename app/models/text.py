# app/models/text.py
from sqlalchemy import Column, String, Text as SAText

from app.db.base_class import Base, UpdatedAtMixin


class Text(UpdatedAtMixin, Base):
    title = Column(String, nullable=False)
    content = Column(SAText, nullable=True)
