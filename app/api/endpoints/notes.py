# app/api/endpoints/notes.py
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import crud, schemas
from app.api import deps
from app.api.errors import backend_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.Note])
def read_notes(
    db: Session = Depends(deps.get_db),
    category: Optional[str] = None,
) -> Any:
    """
    Lista as notas: fixadas primeiro e, dentro de cada grupo,
    as alteradas mais recentemente.
    """
    return crud.note.get_multi(db, category=category)


@router.get("/{note_id}", response_model=schemas.Note)
def read_note_by_id(note_id: str, db: Session = Depends(deps.get_db)) -> Any:
    db_note = crud.note.get(db=db, id=note_id)
    if not db_note:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nota não encontrada")
    return db_note


@router.post("", response_model=schemas.Note, status_code=status.HTTP_201_CREATED)
def create_note(*, db: Session = Depends(deps.get_db), note_in: schemas.NoteCreate) -> Any:
    try:
        db_note = crud.note.create(db=db, obj_in=note_in)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar nota: {backend_message(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=backend_message(e))
    logger.info(f"Nota {db_note.id} criada")
    return db_note


@router.put("/{note_id}", response_model=schemas.Note)
def update_note(
    *,
    db: Session = Depends(deps.get_db),
    note_id: str,
    note_in: schemas.NoteUpdate,
) -> Any:
    """
    Atualiza uma nota. A data de atualização sempre avança,
    mesmo que nenhum campo seja enviado (usado para fixar/desafixar).
    """
    db_note = crud.note.get(db=db, id=note_id)
    if not db_note:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nota não encontrada")
    return crud.note.update(db=db, db_obj=db_note, obj_in=note_in)


@router.delete("/{note_id}", response_model=schemas.DeleteResponse)
def delete_note(*, db: Session = Depends(deps.get_db), note_id: str) -> Any:
    if not crud.note.remove(db=db, id=note_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nota não encontrada")
    logger.info(f"Nota {note_id} removida")
    return {"success": True}
