# app/models/meeting.py
from sqlalchemy import Column, Date, String, Text

from app.db.base_class import Base
from app.enums import MeetingStatus


class Meeting(Base):
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # HH:MM
    duration = Column(String, nullable=True, default="60 min")
    participants = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    status = Column(String, nullable=False, default=MeetingStatus.AGENDADA.value)
    notes = Column(Text, nullable=True)
