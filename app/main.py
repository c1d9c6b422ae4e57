import logging

import uvicorn
from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.errors import backend_message, register_exception_handlers
from app.api.router import api_router
from app.core.config import settings
from app.core.logging import setup_logging
from app.database import engine, get_db
from app.models import Base  # Importa todos os modelos para a criação de tabelas

# Configuração de logging
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API de gestão empresarial - clientes, orçamentos, finanças, reuniões, marketing, notas e textos",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    version=settings.PROJECT_VERSION,
    contact={
        "name": "Suporte Técnico",
        "email": settings.SUPPORT_EMAIL,
    },
    license_info={
        "name": "MIT",
    },
)

# Configuração de CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Todas as respostas de erro no formato {"message": ...}
register_exception_handlers(app)

# Criar tabelas automaticamente apenas em desenvolvimento
if settings.ENVIRONMENT == "development":
    @app.on_event("startup")
    def create_tables():
        Base.metadata.create_all(bind=engine)
        logger.info("Tabelas criadas com sucesso (apenas em desenvolvimento)")


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"])
def read_root():
    return {
        "message": f"Bem-vindo à API {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}",
        "docs": f"{settings.API_PREFIX}/docs",
        "status": "operacional",
        "environment": settings.ENVIRONMENT,
    }


@app.get("/health", tags=["Health Check"])
def health_check(db: Session = Depends(get_db)):
    """Endpoint para verificação de saúde da API e da conexão com o banco"""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Banco de dados indisponível: {backend_message(e)}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "database": "disconnected",
                "environment": settings.ENVIRONMENT,
            },
        )
    return {
        "status": "healthy",
        "database": "connected",
        "environment": settings.ENVIRONMENT,
    }


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.ENVIRONMENT == "development")
