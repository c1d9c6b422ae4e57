# app/models/finance.py
from sqlalchemy import Column, Date, Integer, String, Text

from app.db.base_class import Base
from app.enums import FinanceType


class Finance(Base):
    description = Column(String, nullable=False)
    type = Column(String, nullable=False, default=FinanceType.RECEITA.value)
    category = Column(String, nullable=False, default="geral", index=True)
    amount = Column(Integer, nullable=False, default=0)  # centavos, sempre positivo
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)
