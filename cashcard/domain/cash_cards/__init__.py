"""Cash card domain exports"""

from .exceptions import CashCardError, CashCardNotFoundError, CashCardStoreError
from .models import CashCard
from .repository import CashCardRepository
from .service import CashCardService

__all__ = [
    "CashCard",
    "CashCardError",
    "CashCardNotFoundError",
    "CashCardRepository",
    "CashCardService",
    "CashCardStoreError",
]
