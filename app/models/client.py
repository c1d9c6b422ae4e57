# app/models/client.py
from sqlalchemy import Column, String, Text

from app.db.base_class import Base


class Client(Base):
    # id e created_at são herdados da Base

    name = Column(String, nullable=False, index=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    company = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
