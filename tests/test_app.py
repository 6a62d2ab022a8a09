from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from database.memory import MemoryDatabase


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_uses_error_shape(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_unexpected_errors_are_generic_500(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "secret" not in response.text


def test_each_app_gets_its_own_store():
    first = TestClient(create_app(Settings(_env_file=None, bcrypt_rounds=4)))
    second = TestClient(create_app(Settings(_env_file=None, bcrypt_rounds=4)))

    first.post("/api/admin/customers", json={"username": "only_here", "email": "oh@example.com", "password": "pw"})

    assert "only_here" in [c["username"] for c in first.get("/api/admin/customers").json()]
    assert "only_here" not in [c["username"] for c in second.get("/api/admin/customers").json()]


def test_injected_store_is_used_as_is():
    store = MemoryDatabase()
    client = TestClient(create_app(Settings(_env_file=None, bcrypt_rounds=4), database=store))

    assert client.get("/api/admin/customers").json() == []
    assert client.post("/api/admin/login", json={"username": "admin", "password": "admin123"}).status_code == 401


def test_demo_seed_can_be_disabled():
    client = TestClient(create_app(Settings(_env_file=None, bcrypt_rounds=4, seed_demo_customers=False)))

    assert client.get("/api/admin/customers").json() == []
    assert client.post("/api/admin/login", json={"username": "admin", "password": "admin123"}).status_code == 200


def test_custom_admin_credentials():
    settings = Settings(_env_file=None, bcrypt_rounds=4, admin_username="owner", admin_password="letmein")
    client = TestClient(create_app(settings))

    assert client.post("/api/admin/login", json={"username": "owner", "password": "letmein"}).status_code == 200
    assert client.post("/api/admin/login", json={"username": "admin", "password": "admin123"}).status_code == 401


def test_legacy_user_creation(client):
    response = client.post("/api/users", json={"username": "old_timer", "password": "pw"})

    assert response.status_code == 201
    assert response.json() == {"id": 1, "username": "old_timer"}

    duplicate = client.post("/api/users", json={"username": "old_timer", "password": "pw"})
    assert duplicate.status_code == 400
    assert duplicate.json() == {"message": "Username already exists"}


def test_app_settings_control_password_cost():
    settings = Settings(_env_file=None, bcrypt_rounds=5, seed_demo_customers=False)
    app = create_app(settings)
    client = TestClient(app)

    created = client.post("/api/admin/customers", json={"username": "cost_check", "email": "cc@example.com", "password": "pw"})
    assert created.status_code == 201

    store = app.state.db
    assert store.find_one("admins", username="admin")["password_hash"].startswith("$2b$05$")
    assert store.find_one("customers", username="cost_check")["password_hash"].startswith("$2b$05$")
    assert client.post("/api/customer/login", json={"username": "cost_check", "password": "pw"}).status_code == 200
