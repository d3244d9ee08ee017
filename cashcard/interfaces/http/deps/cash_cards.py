"""Cash card related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cashcard.core.config import Settings, get_settings
from cashcard.domain.cash_cards.service import CashCardService
from cashcard.infrastructure.database.repositories.cash_card_repository import SqlCashCardRepository

from .database import get_db_session


# The session commits before the response goes out, so a 201 always refers
# to a stored card.
def get_cash_card_repository(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> SqlCashCardRepository:
    return SqlCashCardRepository(db)


def get_cash_card_service(
    repository: SqlCashCardRepository = Depends(get_cash_card_repository),
    settings: Settings = Depends(get_settings),
) -> CashCardService:
    return CashCardService(repository, settings.paging)


__all__ = [
    "get_cash_card_repository",
    "get_cash_card_service",
]
