"""Shared fixtures: an in-memory product collection wired into the app."""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.database import get_product_collection
from app.main import app

SAMPLE_IMAGE_URL = "https://cdn.britannica.com/94/151894-050-F72A5317/Brown-eggs.jpg"


@pytest.fixture
def product_payload():
    return {
        "name": "Test Product",
        "description": "Test Description",
        "price": 99.99,
        "imageUrl": SAMPLE_IMAGE_URL,
    }


@pytest.fixture
def product_collection():
    """A fresh mock collection per test, so no state leaks between tests."""
    return AsyncMongoMockClient()["products"]["Product"]


def override_collection(collection):
    app.dependency_overrides[get_product_collection] = lambda: collection


@pytest.fixture
def client(product_collection):
    # The lifespan only runs inside `with TestClient(...)`, so no real server is contacted
    override_collection(product_collection)
    yield TestClient(app)
    app.dependency_overrides.clear()
