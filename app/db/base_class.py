import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import as_declarative, declared_attr


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@as_declarative()
class Base:
    """
    Base class which provides automated table name,
    an opaque string primary key and the creation timestamp.
    """

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"  # Ex: Client -> clients

    # Identificador opaco gerado no servidor (UUID em texto)
    id = Column(String(36), primary_key=True, default=generate_id, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class UpdatedAtMixin:
    """Registros editáveis (notas, textos) que guardam a data da última alteração."""

    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
