"""Domain service orchestrating cash card workflows."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cashcard.core.config import PagingSettings
from cashcard.domain.common.paging import (
    Direction,
    InvalidPageRequestError,
    Page,
    PageRequest,
    SortOrder,
)
from cashcard.infrastructure.database.models import CashCard as CashCardModel
from cashcard.infrastructure.database.repositories.cash_card_repository import (
    SqlCashCardRepository,
)

from .exceptions import CashCardNotFoundError, CashCardStoreError
from .models import CashCard
from .repository import CashCardRepository

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = frozenset({"id", "amount"})
TIE_BREAKER = SortOrder("id", Direction.ASC)


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Cash card store failed to %s", action)
        raise CashCardStoreError(f"Failed to {action}") from exc


@dataclass(slots=True)
class CashCardService:
    repository: CashCardRepository
    paging: PagingSettings = field(default_factory=PagingSettings)

    @classmethod
    def with_session(
        cls, session: AsyncSession, paging: Optional[PagingSettings] = None
    ) -> "CashCardService":
        return cls(SqlCashCardRepository(session), paging or PagingSettings())

    async def create(self, amount: Decimal) -> CashCard:
        with _store_errors("create cash card"):
            model = await self.repository.insert(amount)
        card = self._to_domain(model)
        logger.info("Created cash card %s", card.id)
        return card

    async def find_by_id(self, cash_card_id: int) -> CashCard:
        with _store_errors("load cash card"):
            model = await self.repository.get_by_id(cash_card_id)
        if model is None:
            logger.debug("Cash card %s not found", cash_card_id)
            raise CashCardNotFoundError(cash_card_id)
        return self._to_domain(model)

    async def list_cash_cards(
        self,
        page: Optional[int] = None,
        size: Optional[int] = None,
        sort: Optional[Sequence[SortOrder]] = None,
    ) -> Page[CashCard]:
        request = self.build_page_request(page, size, sort)
        logger.debug(
            "Listing cash cards page=%s size=%s sort=%s",
            request.page,
            request.size,
            request.sort,
        )
        with _store_errors("list cash cards"):
            total = await self.repository.count()
            # Offsets past the last row may not even fit the store's integer type.
            if request.offset >= total:
                models = []
            else:
                models = await self.repository.list_page(
                    request.offset, request.size, request.sort
                )
        return Page(
            content=[self._to_domain(model) for model in models],
            page=request.page,
            size=request.size,
            total=total,
            sort=request.sort,
        )

    async def count(self) -> int:
        with _store_errors("count cash cards"):
            return await self.repository.count()

    def build_page_request(
        self,
        page: Optional[int],
        size: Optional[int],
        sort: Optional[Sequence[SortOrder]],
    ) -> PageRequest:
        """Apply paging defaults, clamp the size and settle the sort order.

        Without an explicit sort the listing is ordered by the default sort
        field ascending.  ``id`` ascending is appended as the final key so
        equal values always come back in the same order.
        """
        if size is None:
            size = self.paging.default_size
        orders = tuple(sort) if sort else (SortOrder(self.paging.default_sort_field),)
        for order in orders:
            if order.field not in SORTABLE_FIELDS:
                raise InvalidPageRequestError(f"Cannot sort by {order.field!r}")
        if all(order.field != TIE_BREAKER.field for order in orders):
            orders += (TIE_BREAKER,)
        return PageRequest(
            page=0 if page is None else page,
            size=min(size, self.paging.max_size),
            sort=orders,
        )

    @staticmethod
    def _to_domain(model: CashCardModel) -> CashCard:
        return CashCard.from_orm(model)
