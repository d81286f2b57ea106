import os

# Settings are read once at import time; disable the artificial latency
# before anything from the application is imported.
os.environ.setdefault("SIMULATED_LATENCY_MS", "0")

import pytest
from fastapi.testclient import TestClient

from bookwise_api.app.main import create_app
from bookwise_api.app.schemas.user import UserRecord
from bookwise_api.app.services.catalog import Catalog


@pytest.fixture
def catalog():
    """Fresh seeded catalogue without latency."""
    return Catalog(latency_ms=0)


@pytest.fixture
def alice_token(catalog):
    # Alice (id "1") owns every seeded book and review
    return catalog.auth.issue_token("1")


@pytest.fixture
def bob_token(catalog):
    """Token of a second user who owns nothing yet."""
    with catalog.store.lock:
        bob = UserRecord(
            id=catalog.store.next_id("users"),
            name="Bob",
            email="bob@example.com",
            password="hunter2",
        )
        catalog.store.users.append(bob)
    return catalog.auth.issue_token(bob.id)


@pytest.fixture
def client(catalog):
    app = create_app(catalog)
    with TestClient(app) as test_client:
        yield test_client


