import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

# Seeded by default: admin/admin123 and three demo customers with ids 1..3


@pytest.fixture
def settings():
    return Settings(_env_file=None, bcrypt_rounds=4)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def db(app):
    return app.state.db


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_customer(client):
    """Create a customer through the admin API and return the customer JSON."""
    counter = {"n": 0}

    def _make(username=None, email=None, password="secret-pass"):
        counter["n"] += 1
        username = username or f"couple_{counter['n']}"
        email = email or f"{username}@example.com"
        response = client.post("/api/admin/customers", json={
            "username": username,
            "email": email,
            "password": password,
        })
        assert response.status_code == 201, response.text
        return response.json()["customer"]

    return _make


@pytest.fixture
def make_gallery(client):
    """Create a gallery for a customer and return the gallery JSON."""

    def _make(customer_id=1, **fields):
        payload = {"title": "Our Wedding", "coupleNames": "A & B", **fields}
        response = client.post(f"/api/customer/{customer_id}/galleries", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
