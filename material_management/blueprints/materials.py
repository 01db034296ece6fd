"""Materials API:
- GET    /api/materials?q=&category_id=   list/filter (login)
- GET    /api/materials/<id>              detail (login)
- POST   /api/materials                   create (login)
- PUT    /api/materials/<id>              full overwrite with version_id (Admin)
- DELETE /api/materials/<id>              delete (Admin)

Cookie-authenticated writes must send X-CSRF-TOKEN (see config.JWT_COOKIE_CSRF_PROTECT).
"""

from __future__ import annotations

from flask import Blueprint, request, url_for
from flask_jwt_extended import jwt_required

from ..models import MAX_DB_INT
from ..schemas import CategoryResponseSchema, MaterialResponseSchema
from ..services import MaterialService
from ..utils.helpers import int_arg, json_body, ok
from ..utils.security import ROLE_ADMIN, current_user_id, roles_required

bp = Blueprint("materials", __name__, url_prefix="/api/materials")


def serialize_material(material) -> dict:
    return MaterialResponseSchema.from_material(material).model_dump(mode="json")


@bp.route("", methods=["GET"])
@jwt_required()
def list_materials():
    """List materials filtered by free text (name/SKU) and category, ordered by name."""
    term = (request.args.get("q") or "").strip()
    category_id = int_arg("category_id")
    result = MaterialService().list_materials(term, category_id)
    return ok(
        {
            "items": [serialize_material(m) for m in result["items"]],
            "categories": [
                {"id": c.id, "name": c.name} for c in result["categories"]
            ],
            "filter": {"q": term or None, "category_id": category_id},
        }
    )


@bp.route(f"/<int(max={MAX_DB_INT}):material_id>", methods=["GET"])
@jwt_required()
def get_material(material_id: int):
    material = MaterialService().get_material(material_id)
    data = serialize_material(material)
    data["category"] = CategoryResponseSchema.model_validate(material.category).model_dump(mode="json")
    return ok(data)


@bp.route("", methods=["POST"])
@jwt_required()
def create_material():
    material = MaterialService().create_material(json_body(), user_id=current_user_id())
    return ok(
        serialize_material(material),
        status=201,
        location=url_for("materials.get_material", material_id=material.id),
    )


@bp.route(f"/<int(max={MAX_DB_INT}):material_id>", methods=["PUT"])
@roles_required(ROLE_ADMIN)
def update_material(material_id: int):
    material = MaterialService().update_material(material_id, json_body(), user_id=current_user_id())
    return ok(serialize_material(material))


@bp.route(f"/<int(max={MAX_DB_INT}):material_id>", methods=["DELETE"])
@roles_required(ROLE_ADMIN)
def delete_material(material_id: int):
    MaterialService().delete_material(material_id, user_id=current_user_id())
    return ok({"id": material_id, "deleted": True})
