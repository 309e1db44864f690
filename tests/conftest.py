import pytest
from fastapi.testclient import TestClient

from runtime.api.server import app
from runtime.store.session_persistence import SessionPersistence


@pytest.fixture
def session():
    """A bare session bag, as handed over by the web framework."""
    return {}


@pytest.fixture
def storage(session):
    return SessionPersistence(session)


@pytest.fixture
def client():
    # Each TestClient keeps its own cookie jar, so every test gets a fresh session.
    with TestClient(app) as c:
        yield c
