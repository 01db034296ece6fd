from __future__ import annotations
from material_management.extensions import db
from material_management.models import User
from material_management.repositories import UserRepository


def test_login(client, users):
    rv = client.post("/api/auth/login", json={"username": "admin@example.com", "password": "admin-pass"})
    assert rv.status_code == 200
    data = rv.get_json()["data"]
    assert "access_token" in data and "refresh_token" in data
    assert data["user"]["role_names"] == ["Admin"]
    assert client.get_cookie("access_token_cookie") is not None


def test_login_wrong_password(client, users):
    rv = client.post("/api/auth/login", json={"username": "admin@example.com", "password": "nope"})
    assert rv.status_code == 401


def test_login_missing_fields(client):
    rv = client.post("/api/auth/login", json={"username": "someone"})
    assert rv.status_code == 400


def test_me_and_bad_token(client, user_headers):
    rv = client.get("/api/auth/me", headers=user_headers)
    assert rv.status_code == 200
    assert rv.get_json()["data"]["username"] == "user@example.com"

    rv = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert rv.status_code == 401


def test_refresh(client, users):
    rv = client.post("/api/auth/login", json={"username": "user@example.com", "password": "user-pass"})
    refresh_token = rv.get_json()["data"]["refresh_token"]
    rv = client.post("/api/auth/refresh", headers={"Authorization": f"Bearer {refresh_token}"})
    assert rv.status_code == 200
    assert "access_token" in rv.get_json()["data"]


def test_register_gives_user_role(app, users):
    client = app.test_client()
    rv = client.post("/api/auth/register", json={"email": "New@Example.com", "password": "secret1"})
    assert rv.status_code == 201
    assert rv.get_json()["data"]["role_names"] == ["User"]

    rv = client.post("/api/auth/register", json={"email": "new@example.com", "password": "secret1"})
    assert rv.status_code == 409

    rv = client.post("/api/auth/login", json={"username": "new@example.com", "password": "secret1"})
    assert rv.status_code == 200


def test_logout_clears_cookies(app, users):
    client = app.test_client()
    client.post("/api/auth/login", json={"username": "user@example.com", "password": "user-pass"})
    assert client.get("/api/auth/me").status_code == 200
    client.post("/api/auth/logout")
    assert client.get("/api/auth/me").status_code == 401


def test_unknown_route_is_json(client):
    rv = client.get("/api/nowhere")
    assert rv.status_code == 404
    assert rv.get_json()["ok"] is False


def test_register_race_on_unique_username(app, users, monkeypatch):
    # the lookup misses, as it would for a request that raced a concurrent signup
    monkeypatch.setattr(UserRepository, "find_by_username", lambda self, username: None)
    client = app.test_client()
    rv = client.post("/api/auth/register", json={"email": "user@example.com", "password": "secret1"})
    assert rv.status_code == 409
    assert rv.get_json()["errors"][0]["field"] == "email"

    # session is usable again after the rollback
    assert db.session.query(User).count() == 2
