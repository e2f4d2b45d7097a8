"""
Pytest configuration and shared fixtures.
"""

import pytest
import structlog
from fastapi.testclient import TestClient

from api.config import APIConfig
from api.main import create_app
from api.models import BookRequest
from api.store import BookStore, seed_books
from utilities.logger import remove_handlers


@pytest.fixture
def store():
    """Create a store seeded with the six sample books."""
    return BookStore(seed_books())


@pytest.fixture
def empty_store():
    """Create a store with no books."""
    return BookStore()


@pytest.fixture
def settings():
    """Create API settings for testing."""
    return APIConfig(log_level="DEBUG", log_format="console")


@pytest.fixture
def app(settings, store):
    """Create an application serving the seeded store."""
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def book_request():
    """Create a valid create/update payload."""
    return BookRequest(title="X", author="Y", category="Z", rating=4)


@pytest.fixture
def book_payload():
    """Create a valid create/update JSON body."""
    return {"title": "X", "author": "Y", "category": "Z", "rating": 4}


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test reconfigures logging."""
    yield
    remove_handlers()
    structlog.reset_defaults()
