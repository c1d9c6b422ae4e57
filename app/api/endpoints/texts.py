# app/api/endpoints/texts.py
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


@router.get("", response_model=List[schemas.Text])
def read_texts(db: Session = Depends(deps.get_db)) -> Any:
    return crud.text.get_multi(db)


@router.get("/{text_id}", response_model=schemas.Text)
def read_text_by_id(text_id: str, db: Session = Depends(deps.get_db)) -> Any:
    db_text = crud.text.get(db=db, id=text_id)
    if not db_text:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Texto não encontrado")
    return db_text


@router.post("", response_model=schemas.Text, status_code=status.HTTP_201_CREATED)
def create_text(*, db: Session = Depends(deps.get_db), text_in: schemas.TextCreate) -> Any:
    try:
        db_text = crud.text.create(db=db, obj_in=text_in)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar texto: {backend_message(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=backend_message(e))
    return db_text


@router.put("/{text_id}", response_model=schemas.Text)
def update_text(
    *,
    db: Session = Depends(deps.get_db),
    text_id: str,
    text_in: schemas.TextUpdate,
) -> Any:
    db_text = crud.text.get(db=db, id=text_id)
    if not db_text:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Texto não encontrado")
    return crud.text.update(db=db, db_obj=db_text, obj_in=text_in)


@router.delete("/{text_id}", response_model=schemas.DeleteResponse)
def delete_text(*, db: Session = Depends(deps.get_db), text_id: str) -> Any:
    if not crud.text.remove(db=db, id=text_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Texto não encontrado")
    return {"success": True}
