# Todos os modelos são reexportados aqui para que Base.metadata conheça as tabelas
from app.db.base_class import Base

from .client import Client
from .budget import Budget, ProposalCounter
from .finance import Finance
from .meeting import Meeting
from .marketing import MarketingCampaign
from .note import Note
from .text import Text

__all__ = [
    "Base",
    "Client",
    "Budget",
    "ProposalCounter",
    "Finance",
    "Meeting",
    "MarketingCampaign",
    "Note",
    "Text",
]
