"""Categories API:
- GET    /api/categories          list with material counts (login)
- GET    /api/categories/<id>     detail with its materials (login)
- POST   /api/categories          create (login)
- PUT    /api/categories/<id>     full overwrite with version_id (Admin)
- DELETE /api/categories/<id>     delete, refused while materials reference it (Admin)
"""

from __future__ import annotations

from flask import Blueprint, url_for
from flask_jwt_extended import jwt_required

from ..models import MAX_DB_INT
from ..schemas import CategoryResponseSchema
from ..services import CategoryService
from ..utils.helpers import json_body, ok
from ..utils.security import ROLE_ADMIN, current_user_id, roles_required
from .materials import serialize_material

bp = Blueprint("categories", __name__, url_prefix="/api/categories")


def serialize_category(category, material_count=None) -> dict:
    out = CategoryResponseSchema.model_validate(category)
    out.material_count = material_count
    return out.model_dump(mode="json")


@bp.route("", methods=["GET"])
@jwt_required()
def list_categories():
    rows = CategoryService().list_categories()
    return ok({"items": [serialize_category(c, count) for c, count in rows]})


@bp.route(f"/<int(max={MAX_DB_INT}):category_id>", methods=["GET"])
@jwt_required()
def get_category(category_id: int):
    category = CategoryService().get_category(category_id)
    materials = sorted(category.materials, key=lambda m: (m.name, m.id))
    data = serialize_category(category, len(materials))
    data["materials"] = [serialize_material(m) for m in materials]
    return ok(data)


@bp.route("", methods=["POST"])
@jwt_required()
def create_category():
    category = CategoryService().create_category(json_body(), user_id=current_user_id())
    return ok(
        serialize_category(category, 0),
        status=201,
        location=url_for("categories.get_category", category_id=category.id),
    )


@bp.route(f"/<int(max={MAX_DB_INT}):category_id>", methods=["PUT"])
@roles_required(ROLE_ADMIN)
def update_category(category_id: int):
    category = CategoryService().update_category(category_id, json_body(), user_id=current_user_id())
    return ok(serialize_category(category))


@bp.route(f"/<int(max={MAX_DB_INT}):category_id>", methods=["DELETE"])
@roles_required(ROLE_ADMIN)
def delete_category(category_id: int):
    CategoryService().delete_category(category_id, user_id=current_user_id())
    return ok({"id": category_id, "deleted": True})
