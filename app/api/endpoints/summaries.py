# app/api/endpoints/summaries.py
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app import schemas
from app.api import deps
from app.services import summary_service

router = APIRouter()


@router.get("/dashboard-summary", response_model=schemas.DashboardSummary)
def read_dashboard_summary(db: Session = Depends(deps.get_db)) -> Any:
    """
    Indicadores do painel: quantidade e valor dos orçamentos, aprovados,
    pendentes, vencidos, próximos do vencimento e total por mês.
    """
    return summary_service.get_dashboard_summary(db)


@router.get("/finances-summary", response_model=schemas.FinanceSummary)
def read_finance_summary(db: Session = Depends(deps.get_db)) -> Any:
    """
    Total de receitas, despesas e saldo, com a quebra por categoria.
    """
    return summary_service.get_finance_summary(db)


@router.get("/marketing-summary", response_model=schemas.MarketingSummary)
def read_marketing_summary(db: Session = Depends(deps.get_db)) -> Any:
    return summary_service.get_marketing_summary(db)
