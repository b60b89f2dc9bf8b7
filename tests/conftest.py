import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from config.settings import Settings
from database import create_session_factory, init_schema
from main import create_app


@pytest.fixture(scope="function")
def engine():
    # One shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def app(engine):
    return create_app(Settings(), engine=engine)


@pytest.fixture(scope="function")
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def db(engine):
    init_schema(engine)
    session = create_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def create(client):
    """POST a contact and return the decoded body."""
    def _create(**body):
        response = client.post("/api/contacts", json=body)
        assert response.status_code == 201, response.text
        return response.json()
    return _create
