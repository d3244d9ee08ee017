import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from cashcard.core.config import get_settings
from cashcard.domain.cash_cards import CashCardService
from cashcard.interfaces.http.deps import get_cash_card_service
from cashcard.main import create_app


def _create(client, amount):
    response = client.post("/cashcards", json={"amount": amount})
    assert response.status_code == 201
    return response.headers["location"]


@pytest.fixture
def seeded(client):
    return [_create(client, amount) for amount in (123.45, 1.00, 150.00)]


# ── Create ────────────────────────────────────────────────────────

class TestCreate:
    def test_create_returns_location_and_empty_body(self, client):
        response = client.post("/cashcards", json={"amount": 250.00})
        assert response.status_code == 201
        assert response.content == b""
        assert response.headers["location"].startswith("/cashcards/")

    def test_location_resolves_to_new_card(self, client):
        location = _create(client, 250.00)
        new_id = int(location.rsplit("/", 1)[1])

        response = client.get(location)
        assert response.status_code == 200
        assert response.json() == {"id": new_id, "amount": 250.00}

    def test_client_supplied_id_is_ignored(self, client):
        location = _create(client, 10.00)
        _create(client, 11.00)
        client_chosen = client.post("/cashcards", json={"id": 1, "amount": 12.50})
        assert client_chosen.status_code == 201
        assert client_chosen.headers["location"] != location

        body = client.get(client_chosen.headers["location"]).json()
        assert body["id"] != 1
        assert body["amount"] == 12.50
        assert client.get(location).json()["amount"] == 10.00

    def test_missing_amount_is_bad_request(self, client):
        response = client.post("/cashcards", json={})
        assert response.status_code == 400

    def test_non_numeric_amount_is_bad_request(self, client):
        response = client.post("/cashcards", json={"amount": "lots"})
        assert response.status_code == 400

    def test_non_finite_amount_is_bad_request(self, client):
        response = client.post(
            "/cashcards",
            content=b'{"amount": 1e400}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert all("input" not in error for error in response.json()["detail"])

    def test_failed_commit_is_not_reported_as_created(self, client, monkeypatch):
        async def failing_commit(self):
            raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

        with monkeypatch.context() as patch:
            patch.setattr(AsyncSession, "commit", failing_commit)
            response = client.post("/cashcards", json={"amount": 9.99})

        assert response.status_code == 500
        assert "location" not in response.headers
        assert client.get("/cashcards").json() == []


# ── Read ──────────────────────────────────────────────────────────

class TestFindById:
    def test_unknown_id_is_not_found_with_empty_body(self, client):
        response = client.get("/cashcards/1000")
        assert response.status_code == 404
        assert response.content == b""

    def test_non_integer_id_is_bad_request(self, client):
        response = client.get("/cashcards/abc")
        assert response.status_code == 400

    def test_negative_id_is_bad_request(self, client):
        response = client.get("/cashcards/-1")
        assert response.status_code == 400


# ── List ──────────────────────────────────────────────────────────

class TestList:
    def test_default_listing_sorted_by_amount(self, client, seeded):
        response = client.get("/cashcards")
        assert response.status_code == 200
        assert [card["amount"] for card in response.json()] == [1.00, 123.45, 150.00]

    def test_listing_is_a_bare_array(self, client, seeded):
        body = client.get("/cashcards").json()
        assert isinstance(body, list)
        assert set(body[0]) == {"id", "amount"}

    def test_first_page_descending(self, client, seeded):
        response = client.get("/cashcards", params={"page": 0, "size": 1, "sort": "amount,desc"})
        assert response.status_code == 200
        assert [card["amount"] for card in response.json()] == [150.00]

    def test_second_page_descending(self, client, seeded):
        response = client.get("/cashcards?page=1&size=1&sort=amount,desc")
        assert [card["amount"] for card in response.json()] == [123.45]

    def test_page_beyond_end_is_empty(self, client, seeded):
        response = client.get("/cashcards?page=10&size=1")
        assert response.status_code == 200
        assert response.json() == []

    def test_page_index_past_integer_range_is_empty(self, client, seeded):
        response = client.get("/cashcards?page=10000000000000000&size=2000")
        assert response.status_code == 200
        assert response.json() == []

    def test_empty_store(self, client):
        response = client.get("/cashcards")
        assert response.status_code == 200
        assert response.json() == []

    def test_repeated_sort_parameters(self, client):
        for amount in (5.00, 5.00, 1.00):
            _create(client, amount)
        response = client.get("/cashcards?sort=amount,desc&sort=id,desc")
        cards = response.json()
        assert [card["amount"] for card in cards] == [5.00, 5.00, 1.00]
        assert cards[0]["id"] > cards[1]["id"]

    def test_properties_share_one_direction(self, client):
        for amount in (5.00, 5.00, 1.00):
            _create(client, amount)
        cards = client.get("/cashcards?sort=amount,id,desc").json()
        assert [card["amount"] for card in cards] == [5.00, 5.00, 1.00]
        assert cards[0]["id"] > cards[1]["id"]

    @pytest.mark.parametrize(
        "query",
        [
            "page=abc",
            "page=-1",
            "size=0",
            "size=ten",
            "sort=amount,sideways",
            "sort=owner,asc",
            "sort=,desc",
        ],
    )
    def test_malformed_parameters_are_bad_request(self, client, query):
        response = client.get(f"/cashcards?{query}")
        assert response.status_code == 400
        assert "detail" in response.json()


# ── Routing contract ──────────────────────────────────────────────

class TestRouting:
    def test_wrong_verb_on_item_is_method_not_allowed(self, client):
        assert client.put("/cashcards/1", json={"amount": 1.00}).status_code == 405
        assert client.delete("/cashcards/1").status_code == 405

    def test_wrong_verb_on_collection_is_method_not_allowed(self, client):
        assert client.delete("/cashcards").status_code == 405

    def test_unmapped_path_is_not_found(self, client):
        assert client.get("/wallets").status_code == 404


# ── Store failures ────────────────────────────────────────────────

class TestStoreFailure:
    @pytest.fixture
    def broken_client(self, client, broken_repository):
        client.app.dependency_overrides[get_cash_card_service] = lambda: CashCardService(
            broken_repository
        )
        yield client
        client.app.dependency_overrides.clear()

    def test_create_reports_server_error(self, broken_client):
        response = broken_client.post("/cashcards", json={"amount": 1.00})
        assert response.status_code == 500
        assert response.json() == {"detail": "Cash card store unavailable"}

    def test_list_reports_server_error(self, broken_client):
        assert broken_client.get("/cashcards").status_code == 500

    def test_find_reports_server_error(self, broken_client):
        assert broken_client.get("/cashcards/1").status_code == 500


def test_location_includes_api_prefix(monkeypatch):
    monkeypatch.setenv("API_PREFIX", "/api")
    get_settings.cache_clear()
    with TestClient(create_app()) as client:
        response = client.post("/api/cashcards", json={"amount": 3.50})
        assert response.status_code == 201
        location = response.headers["location"]
        assert location.startswith("/api/cashcards/")
        assert client.get(location).json()["amount"] == 3.50
        assert client.get("/cashcards").status_code == 404
