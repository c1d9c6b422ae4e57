# app/api/endpoints/clients.py
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


@router.get("", response_model=List[schemas.Client])
def read_clients(
    db: Session = Depends(deps.get_db),
    search: Optional[str] = None,
) -> Any:
    """
    Lista os clientes, do mais recente para o mais antigo.
    `search` filtra por nome, empresa ou e-mail.
    """
    return crud.client.get_multi(db, search=search)


@router.get("/{client_id}", response_model=schemas.Client)
def read_client_by_id(client_id: str, db: Session = Depends(deps.get_db)) -> Any:
    """
    Recupera um cliente pelo seu ID.
    """
    db_client = crud.client.get(db=db, id=client_id)
    if not db_client:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
    return db_client


@router.post("", response_model=schemas.Client, status_code=status.HTTP_201_CREATED)
def create_client(*, db: Session = Depends(deps.get_db), client_in: schemas.ClientCreate) -> Any:
    """
    Cria um novo cliente.
    """
    try:
        db_client = crud.client.create(db=db, obj_in=client_in)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar cliente: {backend_message(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=backend_message(e))
    logger.info(f"Cliente {db_client.id} criado: {db_client.name}")
    return db_client


@router.put("/{client_id}", response_model=schemas.Client)
def update_client(
    *,
    db: Session = Depends(deps.get_db),
    client_id: str,
    client_in: schemas.ClientUpdate,
) -> Any:
    """
    Atualiza um cliente. Só os campos enviados são alterados.
    """
    db_client = crud.client.get(db=db, id=client_id)
    if not db_client:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
    db_client = crud.client.update(db=db, db_obj=db_client, obj_in=client_in)
    logger.info(f"Cliente {client_id} atualizado")
    return db_client


@router.delete("/{client_id}", response_model=schemas.DeleteResponse)
def delete_client(*, db: Session = Depends(deps.get_db), client_id: str) -> Any:
    """
    Remove um cliente.
    Orçamentos que referenciam o cliente não são alterados (a referência é fraca).
    """
    if not crud.client.remove(db=db, id=client_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado")
    logger.info(f"Cliente {client_id} removido")
    return {"success": True}
