"""Cash card domain models."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from cashcard.infrastructure.database import models as orm


@dataclass(frozen=True, slots=True)
class CashCard:
    id: Optional[int]
    amount: Decimal

    @classmethod
    def from_orm(cls, instance: orm.CashCard) -> "CashCard":
        return cls(id=int(instance.id), amount=Decimal(instance.amount))
