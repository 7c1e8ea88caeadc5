"""
Pytest configuration and shared fixtures for MyNetwrk tests.

Every test gets its own in-memory SQLite database with the reference data
seeded. The API is exercised through FastAPI's TestClient with ``get_db``
overridden, so startup events (and the on-disk database) never run.

Test Categories:
- unit: Pure functions and crud/service calls against a session
- integration: Full request/response cycles through the API
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mynetwrk.db.base import create_all
from mynetwrk.db.seed import seed_reference_data
from mynetwrk.db.session import get_db, make_engine
from mynetwrk.main import app

ALICE = {"X-User-Id": "user-alice", "X-User-Name": "Alice", "X-User-Email": "alice@example.com"}
BOB = {"X-User-Id": "user-bob", "X-User-Name": "Bob"}


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: API tests through TestClient")


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    factory = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    with factory() as db:
        seed_reference_data(db)
    return factory


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def type_ids(client):
    """Name -> id of every interaction type Alice can use (the seeded global ones)."""
    response = client.get("/api/interaction-types", headers=ALICE)
    assert response.status_code == 200
    return {t["name"]: t["id"] for t in response.json()}


@pytest.fixture
def make_contact(client):
    def _make(headers=ALICE, **fields):
        payload = {"fullName": "John Smith"}
        payload.update(fields)
        response = client.post("/api/contacts", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_interaction(client):
    def _make(contact_id, type_id, date, notes=None, headers=ALICE):
        payload = {"contactId": contact_id, "typeId": type_id, "date": date}
        if notes is not None:
            payload["notes"] = notes
        response = client.post("/api/interactions", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
