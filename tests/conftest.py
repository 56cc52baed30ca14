# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.core.storage import TicketStore, get_store
from app.main import app


@pytest.fixture()
def store():
    return TicketStore()


@pytest.fixture()
def client(store):
    # fresh collection per test so ids start at 1
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
