# app/api/endpoints/finances.py
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import crud, schemas
from app.api import deps
from app.api.errors import backend_message
from app.enums import FinanceType
from app.utils.money import format_currency

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.Finance])
def read_finances(
    db: Session = Depends(deps.get_db),
    type: Optional[FinanceType] = None,
) -> Any:
    """
    Lista os lançamentos financeiros pela data, do mais recente para o mais antigo.
    Pode ser filtrado por tipo (receita ou despesa).
    """
    return crud.finance.get_multi(db, type=type)


@router.get("/{finance_id}", response_model=schemas.Finance)
def read_finance_by_id(finance_id: str, db: Session = Depends(deps.get_db)) -> Any:
    db_finance = crud.finance.get(db=db, id=finance_id)
    if not db_finance:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lançamento não encontrado")
    return db_finance


@router.post("", response_model=schemas.Finance, status_code=status.HTTP_201_CREATED)
def create_finance(*, db: Session = Depends(deps.get_db), finance_in: schemas.FinanceCreate) -> Any:
    """
    Registra uma receita ou despesa. O valor é sempre positivo, em centavos.
    """
    try:
        db_finance = crud.finance.create(db=db, obj_in=finance_in)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao registrar lançamento: {backend_message(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=backend_message(e))
    logger.info(f"Lançamento de {db_finance.type} registrado: {format_currency(db_finance.amount)}")
    return db_finance


@router.put("/{finance_id}", response_model=schemas.Finance)
def update_finance(
    *,
    db: Session = Depends(deps.get_db),
    finance_id: str,
    finance_in: schemas.FinanceUpdate,
) -> Any:
    db_finance = crud.finance.get(db=db, id=finance_id)
    if not db_finance:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lançamento não encontrado")
    return crud.finance.update(db=db, db_obj=db_finance, obj_in=finance_in)


@router.delete("/{finance_id}", response_model=schemas.DeleteResponse)
def delete_finance(*, db: Session = Depends(deps.get_db), finance_id: str) -> Any:
    if not crud.finance.remove(db=db, id=finance_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lançamento não encontrado")
    logger.info(f"Lançamento {finance_id} removido")
    return {"success": True}
