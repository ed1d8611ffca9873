#!/usr/bin/env python3
"""
End-to-end tests: HTTP API over a real SQLite-backed ledger
"""

import logging
import pytest
import sys
import os

from fastapi.testclient import TestClient

# Add the project root to the path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from connect_db import create_db_engine, create_session_factory, init_db
from main import create_app
from services.ledger_service import DatabaseLedger


@pytest.fixture
def client():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    app = create_app(ledger=DatabaseLedger(create_session_factory(engine)))
    with TestClient(app) as test_client:
        yield test_client
    engine.dispose()


def post_expense(client, expense):
    response = client.post("/expenses", json=expense)
    assert response.status_code == 200, response.json()
    return response.json()["expense_id"]


def test_recorded_expenses_are_returned_by_date(client):
    coffee_id = post_expense(client, {"payee": "Starbucks", "amount": 5.75, "date": "2017-06-10"})
    zoo_id = post_expense(client, {"payee": "Zoo", "amount": 15.25, "date": "2017-06-10"})
    post_expense(client, {"payee": "Whole Foods", "amount": 95.20, "date": "2017-06-11"})

    response = client.get("/expenses/2017-06-10")

    assert response.status_code == 200
    assert [record["expense_id"] for record in response.json()] == [coffee_id, zoo_id]
    assert {record["payee"] for record in response.json()} == {"Starbucks", "Zoo"}


def test_incomplete_expense_is_rejected(client):
    response = client.post("/expenses", json={"amount": 5.75, "date": "2017-06-10"})

    assert response.status_code == 422
    assert response.json() == {"error": "Invalid expense: `payee` is required"}
    assert client.get("/expenses/2017-06-10").json() == []


def test_date_without_expenses_returns_empty_array(client):
    response = client.get("/expenses/2017-06-12")

    assert response.status_code == 200
    assert response.json() == []


def test_default_app_builds_database_ledger_on_startup(tmp_path, monkeypatch):
    from core.config import settings

    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite:///{tmp_path / 'expenses.db'}")

    with TestClient(create_app()) as test_client:
        expense_id = post_expense(
            test_client, {"payee": "Starbucks", "amount": 5.75, "date": "2017-06-10"}
        )
        response = test_client.get("/expenses/2017-06-10")

    assert response.json()[0]["expense_id"] == expense_id


@pytest.mark.parametrize("amount", ["Infinity", "-Infinity", "NaN", "1" + "0" * 400])
def test_unstorable_amount_is_rejected_and_date_stays_readable(client, amount):
    body = '{"payee": "Starbucks", "amount": %s, "date": "2017-06-10"}' % amount

    response = client.post(
        "/expenses",
        content=body.encode(),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json() == {"error": "Invalid expense: `amount` must be a number"}

    response = client.get("/expenses/2017-06-10")
    assert response.status_code == 200
    assert response.json() == []


def test_rejection_is_logged_once(client, caplog):
    with caplog.at_level(logging.INFO, logger="expense_tracker"):
        client.post("/expenses", json={"amount": 5.75, "date": "2017-06-10"})

    rejections = [record for record in caplog.records if "`payee` is required" in record.getMessage()]
    assert len(rejections) == 1
    assert rejections[0].levelno == logging.WARNING


def test_create_tables_module_has_no_import_side_effects(tmp_path, monkeypatch):
    import importlib
    from core.config import settings

    database_file = tmp_path / "expenses.db"
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite:///{database_file}")

    sys.modules.pop("create_tables", None)
    importlib.import_module("create_tables")

    assert not database_file.exists()
