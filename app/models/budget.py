# app/models/budget.py
from sqlalchemy import JSON, Column, Date, Integer, String, Text

from app.db.base_class import Base
from app.enums import BudgetStatus


class Budget(Base):
    # Número sequencial exibido ao usuário, atribuído uma única vez na criação
    proposal_id = Column(Integer, nullable=True, index=True)

    # Referência fraca ao cliente (sem FK): o nome fica copiado no orçamento
    client_id = Column(String(36), nullable=True, index=True)
    client_name = Column(String, nullable=False)

    title = Column(String, nullable=False)
    status = Column(String, nullable=False, default=BudgetStatus.RASCUNHO.value)
    total_value = Column(Integer, nullable=False, default=0)  # centavos
    currency = Column(String(8), nullable=False, default="BRL")
    validity_date = Column(Date, nullable=True)
    payment_terms = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    # Lista ordenada de itens no formato do cliente: quantity, description, unitPrice, warranty
    items = Column(JSON, nullable=False, default=list)


class ProposalCounter(Base):
    """Contador persistente dos números de proposta; uma linha por sequência."""

    __tablename__ = "proposal_counters"

    value = Column(Integer, nullable=False, default=0)
