"""SQLAlchemy powered repository for cash card persistence."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import asc, desc, func, select

from cashcard.domain.common.paging import Direction, SortOrder
from cashcard.domain.common.repository import AsyncRepository
from cashcard.infrastructure.database.models import CashCard as CashCardModel

_SORT_COLUMNS = {
    "id": CashCardModel.id,
    "amount": CashCardModel.amount,
}


class SqlCashCardRepository(AsyncRepository[CashCardModel]):
    async def insert(self, amount: Decimal) -> CashCardModel:
        return await self.add(CashCardModel(amount=amount))

    async def get_by_id(self, cash_card_id: int) -> CashCardModel | None:
        stmt = select(CashCardModel).where(CashCardModel.id == cash_card_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_page(
        self, offset: int, limit: int, sort: Sequence[SortOrder]
    ) -> Sequence[CashCardModel]:
        stmt = select(CashCardModel)
        for order in sort:
            try:
                column = _SORT_COLUMNS[order.field]
            except KeyError:
                raise ValueError(f"Unsupported sort field: {order.field}") from None
            stmt = stmt.order_by(desc(column) if order.direction is Direction.DESC else asc(column))
        stmt = stmt.offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def count(self) -> int:
        total = (await self.session.execute(select(func.count(CashCardModel.id)))).scalar()
        return int(total or 0)
