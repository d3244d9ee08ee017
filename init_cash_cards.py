"""
Seed sample cash cards.

Inserts the demo cards used throughout the docs when the table is empty.
"""
import asyncio
import logging
from decimal import Decimal

from cashcard.core.config import get_settings
from cashcard.core.logging import setup_logging
from cashcard.domain.cash_cards import CashCardService
from cashcard.infrastructure.database import dispose_engine, get_session, init_db

SAMPLE_AMOUNTS = (Decimal("123.45"), Decimal("1.00"), Decimal("150.00"))

logger = logging.getLogger("init_cash_cards")


async def seed_cash_cards() -> None:
    """Create the sample cards unless cards already exist."""
    settings = get_settings()
    setup_logging(settings)
    await init_db()

    async for db in get_session():
        service = CashCardService.with_session(db, settings.paging)

        existing = await service.count()
        if existing:
            logger.info("%d cash cards already stored, nothing to seed", existing)
        else:
            for amount in SAMPLE_AMOUNTS:
                card = await service.create(amount)
                logger.info("Seeded cash card %s with amount %s", card.id, card.amount)

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(seed_cash_cards())
