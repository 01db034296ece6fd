"""Authentication API (JWT).
- POST /api/auth/login      tokens in the body and as cookies
- POST /api/auth/refresh    new access token from a refresh token
- POST /api/auth/logout     clears the JWT cookies
- POST /api/auth/register   self-service account in the User role
- GET  /api/auth/me         current user
"""
from __future__ import annotations
from flask import Blueprint, jsonify, request
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    jwt_required,
    set_access_cookies,
    set_refresh_cookies,
    unset_jwt_cookies,
)
from sqlalchemy.exc import IntegrityError
from ..extensions import db
from ..models import User
from ..repositories import UserRepository
from ..schemas import LoginSchema, RegisterSchema, UserResponseSchema, parse
from ..utils.helpers import fail, json_body, ok
from ..utils.logging_utils import get_logger
from ..utils.security import ROLE_USER, current_user_id

bp = Blueprint("auth", __name__, url_prefix="/api/auth")
logger = get_logger("security")


def _claims(user: User) -> dict:
    return {"roles": user.role_names, "username": user.username}


@bp.route("/login", methods=["POST"])
def login():
    creds = parse(LoginSchema, json_body())
    user = UserRepository().authenticate(creds.username, creds.password)
    if user is None:
        logger.warning("Failed login for %s from %s", creds.username, request.remote_addr)
        return fail("Invalid username or password", 401)
    access_token = create_access_token(identity=str(user.id), additional_claims=_claims(user))
    refresh_token = create_refresh_token(identity=str(user.id))
    resp = jsonify({
        "ok": True,
        "data": {
            "access_token": access_token,
            "refresh_token": refresh_token,
            "user": UserResponseSchema.model_validate(user).model_dump(),
        },
    })
    set_access_cookies(resp, access_token)
    set_refresh_cookies(resp, refresh_token)
    logger.info("User %s logged in", user.id)
    return resp


@bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    user = UserRepository().find(current_user_id())
    if user is None or not user.is_active:
        return fail("Account is no longer active", 401)
    access_token = create_access_token(identity=str(user.id), additional_claims=_claims(user))
    resp = jsonify({"ok": True, "data": {"access_token": access_token}})
    set_access_cookies(resp, access_token)
    return resp


@bp.route("/logout", methods=["POST"])
def logout():
    resp = jsonify({"ok": True, "data": None})
    unset_jwt_cookies(resp)
    return resp


@bp.route("/register", methods=["POST"])
def register():
    form = parse(RegisterSchema, json_body())
    users = UserRepository()
    if users.find_by_username(form.email) is not None:
        return _already_registered()
    try:
        user = users.create_user(form.email, form.password, email=form.email, roles=[ROLE_USER])
        db.session.commit()
    except IntegrityError:
        # a concurrent registration took the name after our lookup
        db.session.rollback()
        return _already_registered()
    logger.info("User %s registered", user.id)
    return ok(UserResponseSchema.model_validate(user).model_dump(), status=201)


def _already_registered():
    return fail("An account with this email already exists", 409,
                errors=[{"field": "email", "message": "already registered"}])


@bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    user = UserRepository().find(current_user_id())
    if user is None:
        return fail("User not found", 404)
    return ok(UserResponseSchema.model_validate(user).model_dump())
