"""Shared helpers for the JSON blueprints: response envelope and query parsing."""
from __future__ import annotations
from typing import Any, Optional
from flask import jsonify, request
from ..models import MAX_DB_INT


def ok(data: Any = None, status: int = 200, location: Optional[str] = None):
    resp = jsonify({"ok": True, "data": data})
    resp.status_code = status
    if location:
        resp.headers["Location"] = location
    return resp


def fail(message: str, status: int, errors: Optional[list] = None):
    payload: dict[str, Any] = {"ok": False, "message": message}
    if errors:
        payload["errors"] = errors
    return jsonify(payload), status


def int_arg(name: str) -> Optional[int]:
    """Optional integer query parameter; blanks, garbage and out-of-range values count as absent."""
    raw = (request.args.get(name) or "").strip()
    try:
        value = int(raw) if raw else None
    except ValueError:
        return None
    if value is not None and abs(value) > MAX_DB_INT:
        return None
    return value


def json_body() -> Any:
    """Request JSON, or None when the body is missing or not JSON."""
    return request.get_json(silent=True)
