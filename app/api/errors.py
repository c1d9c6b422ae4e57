# app/api/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Partes do "loc" do pydantic que não são nomes de campo
_LOC_SOURCES = {"body", "query", "path"}


def backend_message(exc: SQLAlchemyError) -> str:
    """Mensagem original do banco, sem o SQL que o SQLAlchemy anexa."""
    return str(getattr(exc, "orig", None) or exc)


def format_validation_error(error: dict) -> str:
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in _LOC_SOURCES)
    message = error.get("msg", "valor inválido")
    return f"{field}: {message}" if field else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "; ".join(format_validation_error(error) for error in exc.errors())
    logger.info(f"Requisição inválida em {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


async def backend_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    message = backend_message(exc)
    logger.error(f"Erro de banco em {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Todas as respostas de erro saem no formato {"message": ...}."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, backend_exception_handler)
