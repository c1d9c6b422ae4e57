# app/api/endpoints/budgets.py
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import crud, schemas
from app.api import deps
from app.api.errors import backend_message
from app.enums import BudgetStatus
from app.utils.money import format_currency

logger = logging.getLogger(__name__)

router = APIRouter()
# Rota fora do prefixo /budgets: GET /budgets-next-id
next_id_router = APIRouter()


@next_id_router.get("/budgets-next-id", response_model=schemas.NextProposalId)
def read_next_proposal_id(db: Session = Depends(deps.get_db)) -> Any:
    """
    Prévia do número que o próximo orçamento receberá.
    Apenas informativo: o número só é reservado na criação.
    """
    return {"next_id": crud.budget.next_proposal_id(db)}


@router.get("", response_model=List[schemas.Budget])
def read_budgets(
    db: Session = Depends(deps.get_db),
    search: Optional[str] = None,
    status_filter: Optional[BudgetStatus] = Query(None, alias="status"),
) -> Any:
    """
    Lista os orçamentos, do mais recente para o mais antigo.

    - `search`: trecho do título ou do nome do cliente
    - `status`: status **exibido** (um orçamento enviado com validade passada conta como vencido)
    """
    return crud.budget.get_multi(db, search=search, status=status_filter)


@router.get("/{budget_id}", response_model=schemas.Budget)
def read_budget_by_id(budget_id: str, db: Session = Depends(deps.get_db)) -> Any:
    db_budget = crud.budget.get(db=db, id=budget_id)
    if not db_budget:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Orçamento não encontrado")
    return db_budget


@router.post("", response_model=schemas.Budget, status_code=status.HTTP_201_CREATED)
def create_budget(*, db: Session = Depends(deps.get_db), budget_in: schemas.BudgetCreate) -> Any:
    """
    Cria um orçamento.
    O número da proposta é atribuído aqui e o total é recalculado a partir dos itens.
    """
    try:
        db_budget = crud.budget.create(db=db, obj_in=budget_in)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar orçamento: {backend_message(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=backend_message(e))
    logger.info(
        f"Orçamento #{db_budget.proposal_id} criado para {db_budget.client_name} "
        f"({format_currency(db_budget.total_value, db_budget.currency)})"
    )
    return db_budget


@router.put("/{budget_id}", response_model=schemas.Budget)
def update_budget(
    *,
    db: Session = Depends(deps.get_db),
    budget_id: str,
    budget_in: schemas.BudgetUpdate,
) -> Any:
    """
    Atualiza um orçamento (inclusive só o status).
    O número da proposta nunca muda.
    """
    db_budget = crud.budget.get(db=db, id=budget_id)
    if not db_budget:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Orçamento não encontrado")
    db_budget = crud.budget.update(db=db, db_obj=db_budget, obj_in=budget_in)
    logger.info(f"Orçamento #{db_budget.proposal_id} atualizado (status: {db_budget.status})")
    return db_budget


@router.delete("/{budget_id}", response_model=schemas.DeleteResponse)
def delete_budget(*, db: Session = Depends(deps.get_db), budget_id: str) -> Any:
    db_budget = crud.budget.get(db=db, id=budget_id)
    if not db_budget:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Orçamento não encontrado")
    proposal_id = db_budget.proposal_id
    crud.budget.remove(db=db, id=budget_id)
    logger.info(f"Orçamento #{proposal_id} removido")
    return {"success": True}
