# app/api/endpoints/meetings.py
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import crud, schemas
from app.api import deps
from app.api.errors import backend_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.Meeting])
def read_meetings(db: Session = Depends(deps.get_db)) -> Any:
    """
    Lista as reuniões pela data, da mais recente para a mais antiga.
    """
    return crud.meeting.get_multi(db)


@router.get("/{meeting_id}", response_model=schemas.Meeting)
def read_meeting_by_id(meeting_id: str, db: Session = Depends(deps.get_db)) -> Any:
    db_meeting = crud.meeting.get(db=db, id=meeting_id)
    if not db_meeting:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reunião não encontrada")
    return db_meeting


@router.post("", response_model=schemas.Meeting, status_code=status.HTTP_201_CREATED)
def create_meeting(*, db: Session = Depends(deps.get_db), meeting_in: schemas.MeetingCreate) -> Any:
    """
    Agenda uma reunião.
    """
    try:
        db_meeting = crud.meeting.create(db=db, obj_in=meeting_in)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao agendar reunião: {backend_message(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=backend_message(e))
    logger.info(f"Reunião '{db_meeting.title}' agendada para {db_meeting.date} {db_meeting.time}")
    return db_meeting


@router.put("/{meeting_id}", response_model=schemas.Meeting)
def update_meeting(
    *,
    db: Session = Depends(deps.get_db),
    meeting_id: str,
    meeting_in: schemas.MeetingUpdate,
) -> Any:
    db_meeting = crud.meeting.get(db=db, id=meeting_id)
    if not db_meeting:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reunião não encontrada")
    return crud.meeting.update(db=db, db_obj=db_meeting, obj_in=meeting_in)


@router.delete("/{meeting_id}", response_model=schemas.DeleteResponse)
def delete_meeting(*, db: Session = Depends(deps.get_db), meeting_id: str) -> Any:
    if not crud.meeting.remove(db=db, id=meeting_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reunião não encontrada")
    logger.info(f"Reunião {meeting_id} removida")
    return {"success": True}
