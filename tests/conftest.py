"""
pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

TOKEN = "secret-token"


@pytest.fixture
def settings() -> Settings:
    """Default test configuration with the sample products loaded."""
    return Settings(seed_products=True, auth_token=TOKEN, api_prefix="/api")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": TOKEN}


@pytest.fixture
def mug_payload() -> dict:
    return {"name": "Mug", "description": "Ceramic", "price": 10, "category": "kitchen"}
