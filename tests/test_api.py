"""
Tests for the HTTP API.
"""
import pytest
from fastapi.testclient import TestClient

import app.api as api
from services.transaction_service import TransactionService


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(api, "transaction_service", TransactionService())
    return TestClient(api.app)


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_quick_create(client):
    response = client.post("/api/transactions/quick", json={"input": "coffee 50k"})
    assert response.status_code == 201

    body = response.json()
    assert body["success"] is True
    assert body["data"]["amount"] == 50000
    assert body["data"]["note"] == "coffee"
    assert body["data"]["type"] == "EXPENSE"
    assert body["data"]["id"]


def test_quick_create_with_explicit_type(client):
    response = client.post("/api/transactions/quick", json={"input": "coffee 50k", "type": "income"})
    assert response.status_code == 201
    assert response.json()["data"]["type"] == "INCOME"


def test_quick_create_rejects_unknown_type(client):
    response = client.post("/api/transactions/quick", json={"input": "coffee 50k", "type": "OTHER"})
    assert response.status_code == 422


def test_quick_create_missing_input(client):
    response = client.post("/api/transactions/quick", json={})
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": {"code": "INVALID_INPUT", "message": "Input is required"},
    }


def test_quick_create_unparseable(client):
    response = client.post("/api/transactions/quick", json={"input": "just words"})
    assert response.status_code == 400

    error = response.json()["error"]
    assert error["code"] == "PARSE_ERROR"
    assert '"breakfast 50k"' in error["message"]


def test_preview(client):
    response = client.post("/api/transactions/quick/preview", json={"input": "lương 10m"})
    assert response.status_code == 200
    assert response.json()["data"] == {"amount": 10000000, "note": "lương", "type": "INCOME"}

    listing = client.get("/api/transactions")
    assert listing.json()["data"] == []


def test_preview_unknown_type(client):
    response = client.post("/api/transactions/quick/preview", json={"input": "xyz 123"})
    assert response.json()["data"]["type"] == "UNKNOWN"


def test_list_transactions(client):
    client.post("/api/transactions/quick", json={"input": "coffee 50k"})
    client.post("/api/transactions/quick", json={"input": "lương 10m"})

    response = client.get("/api/transactions", params={"type": "INCOME"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data) == 1
    assert data[0]["note"] == "lương"

    response = client.get("/api/transactions", params={"limit": 1})
    assert [t["note"] for t in response.json()["data"]] == ["lương"]


def test_oversized_amount_is_rejected_and_listing_still_works(client):
    text = "coffee " + "9" * 310

    response = client.post("/api/transactions/quick", json={"input": text})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "PARSE_ERROR"

    response = client.post("/api/transactions/quick/preview", json={"input": text})
    assert response.status_code == 400

    listing = client.get("/api/transactions")
    assert listing.status_code == 200
    assert listing.json()["data"] == []


def test_preview_unexpected_error_uses_envelope(client, monkeypatch):
    def broken_preview(input_text, explicit_type=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(api.transaction_service, "preview", broken_preview)

    response = client.post("/api/transactions/quick/preview", json={"input": "coffee 50k"})
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": {"code": "PREVIEW_ERROR", "message": "Failed to parse input"},
    }
