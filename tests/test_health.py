import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from config.settings import Settings
from main import create_app

UNREACHABLE_DB = "sqlite:////nonexistent-dir/contacts.db"


def test_health_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.text == "OK"


def test_health_db_down(client, app):
    app.state.engine = create_engine(UNREACHABLE_DB)

    response = client.get("/health")
    assert response.status_code == 500
    assert response.text == "DB down"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


def test_startup_fails_without_schema():
    app = create_app(Settings(), engine=create_engine(UNREACHABLE_DB))

    with pytest.raises(Exception):
        with TestClient(app):
            pass


def test_create_app_configures_logging(engine, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    create_app(Settings(log_level="DEBUG"), engine=engine)
    assert calls[0]["level"] == "DEBUG"


def test_requests_are_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="main")

    client.get("/health")
    assert "GET /health 200" in caplog.text
