"""Repository protocol for cash card persistence operations."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from cashcard.domain.common.paging import SortOrder
from cashcard.infrastructure.database.models import CashCard as CashCardModel


class CashCardRepository(Protocol):
    async def insert(self, amount: Decimal) -> CashCardModel:
        ...

    async def get_by_id(self, cash_card_id: int) -> CashCardModel | None:
        ...

    async def list_page(
        self, offset: int, limit: int, sort: Sequence[SortOrder]
    ) -> Sequence[CashCardModel]:
        ...

    async def count(self) -> int:
        ...
