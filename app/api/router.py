from fastapi import APIRouter

from app.api.endpoints import (
    budgets,
    clients,
    finances,
    marketing,
    meetings,
    notes,
    summaries,
    texts,
)

api_router = APIRouter()

api_router.include_router(clients.router, prefix="/clients", tags=["Clientes"])
api_router.include_router(budgets.router, prefix="/budgets", tags=["Orçamentos"])
api_router.include_router(budgets.next_id_router, tags=["Orçamentos"])
api_router.include_router(finances.router, prefix="/finances", tags=["Finanças"])
api_router.include_router(meetings.router, prefix="/meetings", tags=["Reuniões"])
api_router.include_router(marketing.router, prefix="/marketing", tags=["Marketing"])
api_router.include_router(notes.router, prefix="/notes", tags=["Notas"])
api_router.include_router(texts.router, prefix="/texts", tags=["Textos"])
api_router.include_router(summaries.router, tags=["Resumos"])
