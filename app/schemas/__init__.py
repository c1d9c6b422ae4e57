# app/schemas/__init__.py
from .base import DeleteResponse
from .client import Client, ClientCreate, ClientUpdate
from .budget import Budget, BudgetCreate, BudgetItem, BudgetUpdate, NextProposalId
from .finance import Finance, FinanceCreate, FinanceUpdate
from .meeting import Meeting, MeetingCreate, MeetingUpdate
from .marketing import MarketingCampaign, MarketingCampaignCreate, MarketingCampaignUpdate
from .note import Note, NoteCreate, NoteUpdate
from .text import Text, TextCreate, TextUpdate
from .summary import (
    DashboardSummary,
    FinanceCategoryTotal,
    FinanceSummary,
    MarketingSummary,
    MonthlyTotal,
)
