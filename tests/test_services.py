from __future__ import annotations
import logging
import pytest
from material_management.errors import ValidationFailed, UniqueConstraintViolation
from material_management.extensions import db
from material_management.models import Material
from material_management.services import CategoryService, DashboardService, MaterialService


def test_invalid_material_is_not_written(inventory, material_payload):
    with pytest.raises(ValidationFailed) as exc:
        MaterialService().create_material(material_payload(inventory["electronics"], minimum_quantity=-1))
    assert [v.field for v in exc.value.violations] == ["minimum_quantity"]
    assert db.session.query(Material).count() == 3


def test_duplicate_sku_rolls_back(inventory, material_payload):
    service = MaterialService()
    with pytest.raises(UniqueConstraintViolation):
        service.create_material(material_payload(inventory["electronics"], sku="HARD-SCR-001"))
    # session is usable again after the rollback
    created = service.create_material(material_payload(inventory["electronics"]))
    assert created.sku == "ELEC-SOL-001"


def test_writes_are_audited(inventory, material_payload, caplog, monkeypatch):
    # the audit logger does not propagate to root, where caplog listens
    monkeypatch.setattr(logging.getLogger("app.audit"), "propagate", True)
    with caplog.at_level(logging.INFO, logger="app.audit"):
        m = MaterialService().create_material(material_payload(inventory["electronics"]), user_id=7)
        mid = m.id
        MaterialService().delete_material(mid, user_id=7)
    actions = [(r.action, r.resource, r.user_id) for r in caplog.records if r.name == "app.audit"]
    assert actions == [("create", f"material:{mid}", 7), ("delete", f"material:{mid}", 7)]


def test_list_materials_returns_categories(inventory):
    result = MaterialService().list_materials("uno")
    assert [m.sku for m in result["items"]] == ["ELEC-ARD-001"]
    assert [c.name for c in result["categories"]] == ["Electronics", "Hardware"]


def test_category_update_overwrites_description(inventory):
    category = CategoryService().update_category(
        inventory["electronics"], {"name": "Electronics", "version_id": 1}
    )
    assert category.description is None
    assert category.version_id == 2


def test_dashboard_summary(inventory):
    summary = DashboardService().summary()
    assert summary["total_materials"] == 3
    assert summary["total_categories"] == 2
    assert summary["low_stock_items"] == 2
    assert len(summary["recent_materials"]) == 3
