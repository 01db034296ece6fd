from __future__ import annotations
from material_management.extensions import db
from material_management.models import Material


def test_list_requires_login(app, inventory):
    rv = app.test_client().get("/api/materials")
    assert rv.status_code == 401
    assert rv.get_json()["ok"] is False


def test_list_filter_and_categories(client, user_headers, inventory):
    rv = client.get("/api/materials?q=arduino", headers=user_headers)
    assert rv.status_code == 200
    data = rv.get_json()["data"]
    assert [m["name"] for m in data["items"]] == ["Arduino Nano", "Arduino Uno"]
    assert [c["name"] for c in data["categories"]] == ["Electronics", "Hardware"]
    assert data["filter"] == {"q": "arduino", "category_id": None}

    rv = client.get(f"/api/materials?category_id={inventory['hardware']}", headers=user_headers)
    assert [m["sku"] for m in rv.get_json()["data"]["items"]] == ["HARD-SCR-001"]

    # garbage category id is ignored rather than rejected
    rv = client.get("/api/materials?category_id=abc", headers=user_headers)
    assert len(rv.get_json()["data"]["items"]) == 3


def test_detail_and_not_found(client, user_headers, inventory):
    m = db.session.query(Material).filter_by(sku="HARD-SCR-001").one()
    rv = client.get(f"/api/materials/{m.id}", headers=user_headers)
    assert rv.status_code == 200
    data = rv.get_json()["data"]
    assert data["is_low_stock"] is True
    assert data["unit_price"] == "29.99"
    assert data["category"]["name"] == "Hardware"
    assert data["category_name"] == "Hardware"

    rv = client.get("/api/materials/9999", headers=user_headers)
    assert rv.status_code == 404


def test_create_material(client, user_headers, inventory, material_payload):
    rv = client.post("/api/materials", json=material_payload(inventory["electronics"]), headers=user_headers)
    assert rv.status_code == 201
    data = rv.get_json()["data"]
    assert rv.headers["Location"].endswith(f"/api/materials/{data['id']}")
    assert data["version_id"] == 1
    assert data["unit_price"] == "34.50"
    assert data["is_low_stock"] is False


def test_create_invalid_reports_fields(client, user_headers, inventory, material_payload):
    payload = material_payload(inventory["electronics"], name="", quantity=-3, unit_price="abc")
    rv = client.post("/api/materials", json=payload, headers=user_headers)
    assert rv.status_code == 400
    body = rv.get_json()
    assert {e["field"] for e in body["errors"]} == {"name", "quantity", "unit_price"}
    assert db.session.query(Material).count() == 3


def test_create_unknown_category(client, user_headers, inventory, material_payload):
    rv = client.post("/api/materials", json=material_payload(4242), headers=user_headers)
    assert rv.status_code == 400
    assert rv.get_json()["errors"] == [{"field": "category_id", "message": "Category does not exist"}]


def test_create_duplicate_sku(client, user_headers, inventory, material_payload):
    rv = client.post(
        "/api/materials",
        json=material_payload(inventory["electronics"], sku="ELEC-ARD-001"),
        headers=user_headers,
    )
    assert rv.status_code == 409
    assert rv.get_json()["errors"][0]["field"] == "sku"


def test_non_json_body(client, user_headers, inventory):
    rv = client.post("/api/materials", data="name=x", headers=user_headers)
    assert rv.status_code == 400


def test_edit_requires_admin(client, user_headers, inventory, material_payload):
    m = db.session.query(Material).filter_by(sku="ELEC-ARD-001").one()
    payload = material_payload(inventory["electronics"], sku=m.sku, version_id=m.version_id)
    rv = client.put(f"/api/materials/{m.id}", json=payload, headers=user_headers)
    assert rv.status_code == 403


def test_edit_full_overwrite(client, admin_headers, inventory, material_payload):
    m = db.session.query(Material).filter_by(sku="ELEC-ARD-001").one()
    payload = material_payload(inventory["hardware"], sku="ELEC-ARD-001", quantity=7, version_id=1)
    rv = client.put(f"/api/materials/{m.id}", json=payload, headers=admin_headers)
    assert rv.status_code == 200
    data = rv.get_json()["data"]
    assert data["name"] == "Soldering Iron"
    assert data["category_id"] == inventory["hardware"]
    assert data["quantity"] == 7
    assert data["version_id"] == 2


def test_edit_with_stale_version_conflicts(client, admin_headers, inventory, material_payload):
    m = db.session.query(Material).filter_by(sku="ELEC-ARD-001").one()
    # both editors loaded version 1
    first = material_payload(inventory["electronics"], sku=m.sku, quantity=40, version_id=1)
    second = material_payload(inventory["electronics"], sku=m.sku, quantity=99, version_id=1)

    assert client.put(f"/api/materials/{m.id}", json=first, headers=admin_headers).status_code == 200
    rv = client.put(f"/api/materials/{m.id}", json=second, headers=admin_headers)
    assert rv.status_code == 409
    assert rv.get_json()["current_version"] == 2

    rv = client.get(f"/api/materials/{m.id}", headers=admin_headers)
    assert rv.get_json()["data"]["quantity"] == 40


def test_edit_missing_version(client, admin_headers, inventory, material_payload):
    m = db.session.query(Material).filter_by(sku="ELEC-ARD-001").one()
    rv = client.put(f"/api/materials/{m.id}", json=material_payload(inventory["electronics"]), headers=admin_headers)
    assert rv.status_code == 400
    assert "version_id" in {e["field"] for e in rv.get_json()["errors"]}


def test_edit_missing_material(client, admin_headers, inventory, material_payload):
    rv = client.put("/api/materials/9999", json=material_payload(inventory["electronics"], version_id=1),
                    headers=admin_headers)
    assert rv.status_code == 404


def test_delete(client, admin_headers, user_headers, inventory):
    mid = db.session.query(Material).filter_by(sku="HARD-SCR-001").one().id
    assert client.delete(f"/api/materials/{mid}", headers=user_headers).status_code == 403

    rv = client.delete(f"/api/materials/{mid}", headers=admin_headers)
    assert rv.status_code == 200
    assert rv.get_json()["data"] == {"id": mid, "deleted": True}

    assert client.delete(f"/api/materials/{mid}", headers=admin_headers).status_code == 404


def test_cookie_writes_need_csrf_token(app, users, inventory, material_payload):
    browser = app.test_client()
    rv = browser.post("/api/auth/login", json={"username": "user@example.com", "password": "user-pass"})
    assert rv.status_code == 200

    # cookie auth is enough for reads
    assert browser.get("/api/materials").status_code == 200

    payload = material_payload(inventory["electronics"])
    assert browser.post("/api/materials", json=payload).status_code == 401

    csrf = browser.get_cookie("csrf_access_token").value
    rv = browser.post("/api/materials", json=payload, headers={"X-CSRF-TOKEN": csrf})
    assert rv.status_code == 201


def test_oversized_integers_are_field_errors(client, user_headers, inventory, material_payload):
    payload = material_payload(inventory["electronics"], quantity=10**20)
    rv = client.post("/api/materials", json=payload, headers=user_headers)
    assert rv.status_code == 400
    assert [e["field"] for e in rv.get_json()["errors"]] == ["quantity"]

    rv = client.post("/api/materials", json=material_payload(10**20), headers=user_headers)
    assert rv.status_code == 400
    assert [e["field"] for e in rv.get_json()["errors"]] == ["category_id"]
    assert db.session.query(Material).count() == 3


def test_oversized_ids_are_not_found(client, user_headers, admin_headers, inventory):
    huge = 10**20
    assert client.get(f"/api/materials/{huge}", headers=user_headers).status_code == 404
    assert client.delete(f"/api/materials/{huge}", headers=admin_headers).status_code == 404
    assert client.get(f"/api/categories/{huge}", headers=user_headers).status_code == 404

    rv = client.get(f"/api/materials?category_id={huge}", headers=user_headers)
    assert rv.status_code == 200
    assert len(rv.get_json()["data"]["items"]) == 3
