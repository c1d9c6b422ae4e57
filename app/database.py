# app/database.py
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings


def engine_options(url: str) -> dict:
    """Opções do engine conforme o banco: timeouts no Postgres, threads no SQLite."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    options = {
        "pool_pre_ping": True,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
    }
    if url.startswith("postgresql"):
        options["connect_args"] = {
            "connect_timeout": settings.DB_CONNECT_TIMEOUT,
            "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}",
        }
    return options


# Define o motor de banco de dados
engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

# Cria uma fábrica de sessões
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependência para obter uma sessão de banco de dados
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
