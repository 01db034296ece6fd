"""Security helpers: password hashing, role checks and the current user."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional

from flask import abort
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request
from werkzeug.security import check_password_hash, generate_password_hash

ROLE_ADMIN = "Admin"
ROLE_USER = "User"
ROLE_NAMES = (ROLE_ADMIN, ROLE_USER)


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(pw_hash: str, password: str) -> bool:
    return check_password_hash(pw_hash, password)


def require_roles(*roles: str) -> None:
    """Call inside a view to make sure the current JWT carries one of `roles`."""
    verify_jwt_in_request()
    user_roles = set(get_jwt().get("roles") or [])
    if not user_roles.intersection(roles):
        abort(403, description="Insufficient permissions")


def roles_required(*roles: str) -> Callable:
    """Decorator form of require_roles."""

    def decorator(fn: Callable) -> Callable:
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any):
            require_roles(*roles)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def current_user_id() -> Optional[int]:
    """User id of the verified JWT; the identity is stored as a string."""
    identity = get_jwt_identity()
    return int(identity) if identity is not None else None
