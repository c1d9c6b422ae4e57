# app/schemas/meeting.py
import datetime as dt
from typing import Optional

from pydantic import Field
from typing_extensions import Annotated

from app.enums import MeetingStatus
from app.schemas.base import CamelModel, NotNull, PartialText, RequiredText


class MeetingBase(CamelModel):
    title: RequiredText = Field(..., examples=["Apresentação da proposta"])
    description: Optional[str] = None
    date: dt.date
    time: RequiredText = Field(..., examples=["14:30"])
    duration: Optional[str] = "60 min"
    participants: Optional[str] = None
    location: Optional[str] = None
    status: MeetingStatus = MeetingStatus.AGENDADA
    notes: Optional[str] = None


class MeetingCreate(MeetingBase):
    pass


class MeetingUpdate(CamelModel):
    title: PartialText = None
    description: Optional[str] = None
    date: Annotated[Optional[dt.date], NotNull] = None
    time: PartialText = None
    duration: Optional[str] = None
    participants: Optional[str] = None
    location: Optional[str] = None
    status: Annotated[Optional[MeetingStatus], NotNull] = None
    notes: Optional[str] = None


class Meeting(MeetingBase):
    id: str
    created_at: dt.datetime
