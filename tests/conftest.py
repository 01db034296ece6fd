from __future__ import annotations
from decimal import Decimal
import pytest
from material_management import create_app
from material_management.config import TestConfig
from material_management.extensions import db
from material_management.models import Category, Material
from material_management.repositories import UserRepository
from material_management.utils.security import ROLE_ADMIN, ROLE_USER


@pytest.fixture()
def app():
    app = create_app(TestConfig())
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def users(app):
    repo = UserRepository()
    repo.create_user("admin@example.com", "admin-pass", email="admin@example.com", roles=[ROLE_ADMIN])
    repo.create_user("user@example.com", "user-pass", email="user@example.com", roles=[ROLE_USER])
    db.session.commit()
    return repo


def login_token(client, username, password):
    rv = client.post("/api/auth/login", json={"username": username, "password": password})
    assert rv.status_code == 200
    return rv.get_json()["data"]["access_token"]


def auth_hdr(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(client, users):
    return auth_hdr(login_token(client, "admin@example.com", "admin-pass"))


@pytest.fixture()
def user_headers(client, users):
    return auth_hdr(login_token(client, "user@example.com", "user-pass"))


@pytest.fixture()
def inventory(app):
    """Two categories and three materials, committed."""
    electronics = Category(name="Electronics", description="Boards and parts")
    hardware = Category(name="Hardware")
    db.session.add_all([electronics, hardware])
    db.session.flush()
    db.session.add_all([
        Material(name="Arduino Uno", sku="ELEC-ARD-001", category_id=electronics.id,
                 quantity=50, minimum_quantity=10, unit_price=Decimal("25.99")),
        Material(name="Arduino Nano", sku="ELEC-ARD-002", category_id=electronics.id,
                 quantity=3, minimum_quantity=5, unit_price=Decimal("19.50")),
        Material(name="Screwdriver Set", sku="HARD-SCR-001", category_id=hardware.id,
                 quantity=5, minimum_quantity=8, unit_price=Decimal("29.99")),
    ])
    db.session.commit()
    return {"electronics": electronics.id, "hardware": hardware.id}


@pytest.fixture()
def material_payload():
    def make(category_id, **overrides):
        payload = {
            "name": "Soldering Iron",
            "description": "60W adjustable",
            "sku": "ELEC-SOL-001",
            "category_id": category_id,
            "quantity": 12,
            "minimum_quantity": 4,
            "unit_price": "34.50",
        }
        payload.update(overrides)
        return payload

    return make
