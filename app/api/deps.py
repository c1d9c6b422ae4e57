# app/api/deps.py
# Dependências compartilhadas pelos endpoints
from app.database import get_db

__all__ = ["get_db"]
