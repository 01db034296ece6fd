"""Dashboard: headline counts, stock value and the most recently added materials."""
from __future__ import annotations
from flask import Blueprint
from flask_jwt_extended import jwt_required
from ..services import DashboardService
from ..utils.helpers import ok
from .materials import serialize_material

bp = Blueprint("dashboard", __name__, url_prefix="/api")


@bp.route("/dashboard")
@jwt_required()
def dashboard():
    summary = DashboardService().summary()
    summary["total_value"] = f"{summary['total_value']:.2f}"
    summary["recent_materials"] = [serialize_material(m) for m in summary["recent_materials"]]
    return ok(summary)
