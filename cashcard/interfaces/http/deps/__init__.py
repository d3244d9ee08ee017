"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .cash_cards import get_cash_card_repository, get_cash_card_service

__all__ = [
    "get_db_session",
    "get_cash_card_repository",
    "get_cash_card_service",
]
