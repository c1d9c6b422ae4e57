# app/crud/__init__.py
from .crud_client import client
from .crud_budget import budget
from .crud_finance import finance
from .crud_meeting import meeting
from .crud_marketing import marketing
from .crud_note import note
from .crud_text import text
