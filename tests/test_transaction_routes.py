"""HTTP tests for the transaction routes."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sqlalchemy.exc import OperationalError

from fintrack.infra.repositories import SQLModelTransactionRepository


def _create(client, **overrides):
    payload = {
        "description": "Salary",
        "amount": 100,
        "type": "income",
        "category": "salary",
        "date": "2025-01-05",
    }
    payload.update(overrides)
    return client.post("/transactions", json=payload)


def test_create_transaction_returns_201(client):
    response = _create(client, amount="1234.5")

    assert response.status_code == 201
    body = response.get_json()
    assert body["id"] > 0
    assert body["amount"] == "1234.50"
    assert body["type"] == "income"
    assert body["date"] == "2025-01-05T00:00:00+00:00"
    assert body["createdAt"]


def test_create_transaction_rejects_negative_amount(client):
    response = _create(client, amount=-5)

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "validation_error"
    assert body["message"] == "Validation error"
    assert "amount" in body["errors"]

    assert client.get("/transactions/summary").get_json()["transactionCount"] == 0


def test_create_transaction_rejects_non_object_body(client):
    response = client.post("/transactions", data="[1, 2]", content_type="application/json")

    assert response.status_code == 400
    assert "body" in response.get_json()["errors"]


def test_list_transactions_newest_first_and_category_filter(client):
    _create(client, date="2025-01-05", category="salary")
    _create(client, date="2025-03-05", type="expense", category="food", amount=12)

    listing = client.get("/transactions").get_json()
    assert [tx["date"][:10] for tx in listing] == ["2025-03-05", "2025-01-05"]

    food = client.get("/transactions?category=food").get_json()
    assert [tx["category"] for tx in food] == ["food"]


def test_summary_scenario(client):
    _create(client, amount=100, type="income", date="2025-01-05")
    _create(client, amount=40, type="expense", date="2025-01-05")
    _create(client, amount=60, type="expense", date="2025-02-10")

    response = client.get("/transactions/summary")

    assert response.status_code == 200
    body = response.get_json()
    assert body["totalIncome"] == "100.00"
    assert body["totalExpenses"] == "100.00"
    assert body["netIncome"] == "0.00"
    assert body["transactionCount"] == 3


def test_summary_of_empty_store(client):
    body = client.get("/transactions/summary").get_json()

    assert (body["totalIncome"], body["totalExpenses"], body["netIncome"], body["transactionCount"]) == (
        "0.00",
        "0.00",
        "0.00",
        0,
    )


def test_range_is_inclusive(client):
    _create(client, date="2025-01-15")
    _create(client, date="2025-02-15T18:45:00")
    _create(client, date="2025-02-16")

    response = client.get("/transactions/range?startDate=2025-01-15&endDate=2025-02-15")

    assert response.status_code == 200
    assert sorted(tx["date"][:10] for tx in response.get_json()) == ["2025-01-15", "2025-02-15"]


def test_range_requires_both_dates(client):
    response = client.get("/transactions/range?startDate=2025-01-15")

    assert response.status_code == 400
    assert "endDate" in response.get_json()["errors"]


def test_range_rejects_unparseable_dates(client):
    response = client.get("/transactions/range?startDate=soon&endDate=2025-02-15")

    assert response.status_code == 400


def test_trends_for_short_window(client):
    today = datetime.now(timezone.utc).date()
    _create(client, amount=10, type="income", date=today.isoformat())
    _create(client, amount=4, type="expense", date=today.isoformat())
    _create(client, amount=3, type="expense", date=(today - timedelta(days=2)).isoformat())
    _create(client, amount=99, type="income", date=(today - timedelta(days=400)).isoformat())

    response = client.get("/transactions/trends?window=short")

    assert response.status_code == 200
    body = response.get_json()
    assert body["window"] == "short"
    assert body["endDate"] == today.isoformat()
    series = body["series"]
    assert [point["period"] for point in series] == [
        (today - timedelta(days=2)).isoformat(),
        today.isoformat(),
    ]
    assert series[-1]["income"] == "10.00"
    assert series[-1]["expenses"] == "4.00"


def test_trends_defaults_and_aliases(client):
    assert client.get("/transactions/trends").get_json()["window"] == "short"
    assert client.get("/transactions/trends?window=1Y").get_json()["window"] == "long"
    assert client.get("/transactions/trends").get_json()["series"] == []


def test_trends_rejects_unknown_window(client):
    response = client.get("/transactions/trends?window=forever")

    assert response.status_code == 400
    assert "window" in response.get_json()["errors"]


def test_get_single_transaction(client):
    created = _create(client).get_json()

    response = client.get(f"/transactions/{created['id']}")

    assert response.status_code == 200
    assert response.get_json() == created
    assert client.get("/transactions/9999").status_code == 404


def test_delete_transaction(client):
    created = _create(client).get_json()

    response = client.delete(f"/transactions/{created['id']}")

    assert response.status_code == 204
    assert response.data == b""
    assert client.get("/transactions").get_json() == []


def test_delete_missing_transaction_is_not_found(client):
    response = client.delete("/transactions/4242")

    assert response.status_code == 404
    assert response.get_json() == {"error": "not_found", "message": "Transaction not found"}


def test_out_of_range_id_is_not_found(client):
    huge = "99999999999999999999999"

    for response in (client.get(f"/transactions/{huge}"), client.delete(f"/transactions/{huge}")):
        assert response.status_code == 404
        assert response.get_json() == {"error": "not_found", "message": "Transaction not found"}


def test_delete_with_non_integer_id_is_bad_request(client):
    response = client.delete("/transactions/abc")

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid transaction ID"


def test_store_failure_maps_to_500(client, monkeypatch):
    def _boom(self, *, category=None):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(SQLModelTransactionRepository, "list_all", _boom)

    response = client.get("/transactions")

    assert response.status_code == 500
    assert response.get_json()["error"] == "store_failure"


def test_categories_vocabulary(client):
    body = client.get("/categories").get_json()

    assert {"value": "food", "label": "Food & Dining", "type": "expense"} in body
    assert {entry["type"] for entry in body} == {"income", "expense", "both"}
