from decimal import Decimal
from typing import Sequence

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

import cashcard.infrastructure.database.session as session_module
from cashcard.core.config import get_settings
from cashcard.domain.common.paging import Direction, SortOrder
from cashcard.infrastructure.database import dispose_engine, get_session_factory, init_db
from cashcard.infrastructure.database.models import CashCard as CashCardModel
from cashcard.main import create_app


@pytest.fixture(autouse=True)
def use_temp_db(tmp_path, monkeypatch):
    """Each test uses a fresh temporary SQLite database."""
    test_db = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{test_db}")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setattr(session_module, "_engine", None)
    monkeypatch.setattr(session_module, "AsyncSessionFactory", None)
    get_settings.cache_clear()
    yield test_db
    get_settings.cache_clear()


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db_session():
    await init_db()
    async with get_session_factory()() as session:
        yield session
    await dispose_engine()


class InMemoryCashCardRepository:
    """Dictionary backed stand-in for the SQL repository."""

    def __init__(self) -> None:
        self.rows: dict[int, CashCardModel] = {}
        self._next_id = 1

    async def insert(self, amount: Decimal) -> CashCardModel:
        model = CashCardModel(id=self._next_id, amount=amount)
        self.rows[model.id] = model
        self._next_id += 1
        return model

    async def get_by_id(self, cash_card_id: int) -> CashCardModel | None:
        return self.rows.get(cash_card_id)

    async def list_page(
        self, offset: int, limit: int, sort: Sequence[SortOrder]
    ) -> Sequence[CashCardModel]:
        rows = list(self.rows.values())
        # Stable sorts applied last key first give a multi-key ordering.
        for order in reversed(sort):
            rows.sort(
                key=lambda row: getattr(row, order.field),
                reverse=order.direction is Direction.DESC,
            )
        return rows[offset : offset + limit]

    async def count(self) -> int:
        return len(self.rows)


class BrokenCashCardRepository:
    """Repository whose every call fails like an unreachable database."""

    def _fail(self):
        raise OperationalError("SELECT 1", {}, Exception("unable to open database file"))

    async def insert(self, amount):
        self._fail()

    async def get_by_id(self, cash_card_id):
        self._fail()

    async def list_page(self, offset, limit, sort):
        self._fail()

    async def count(self):
        self._fail()


@pytest.fixture
def memory_repository():
    return InMemoryCashCardRepository()


@pytest.fixture
def broken_repository():
    return BrokenCashCardRepository()
