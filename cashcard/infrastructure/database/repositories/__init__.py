"""SQLAlchemy-backed repository implementations."""

from .cash_card_repository import SqlCashCardRepository

__all__ = [
    "SqlCashCardRepository",
]
