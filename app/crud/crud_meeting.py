# app/crud/crud_meeting.py
from app.crud.base import CRUDBase
from app.models.meeting import Meeting
from app.schemas.meeting import MeetingCreate, MeetingUpdate


class CRUDMeeting(CRUDBase[Meeting, MeetingCreate, MeetingUpdate]):
    def order_by(self) -> list:
        return [Meeting.date.desc(), Meeting.created_at.desc()]


meeting = CRUDMeeting(Meeting)
