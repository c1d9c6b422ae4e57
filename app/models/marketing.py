# app/models/marketing.py
from sqlalchemy import Column, Date, Integer, String, Text

from app.db.base_class import Base
from app.enums import MarketingStatus, MarketingType


class MarketingCampaign(Base):
    __tablename__ = "marketing"

    name = Column(String, nullable=False)
    type = Column(String, nullable=False, default=MarketingType.EMAIL.value)
    status = Column(String, nullable=False, default=MarketingStatus.PLANEJADA.value)
    budget = Column(Integer, nullable=False, default=0)  # centavos
    spent = Column(Integer, nullable=False, default=0)  # centavos
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    description = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
