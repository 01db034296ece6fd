"""App factory and initialization.
Registers extensions, blueprints, JSON error handlers, the seed CLI command
and runs the startup seed.
"""
from __future__ import annotations
import os
import click
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from .config import Config
from .errors import InventoryError
from .extensions import db, jwt, migrate, swagger
from .utils.bootstrap import ensure_seed_data
from .utils.logging_utils import get_logger, setup_logging


def create_app(config_object: object | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # base configuration
    app.config.from_object(config_object or Config())

    setup_logging(app.config["LOG_DIR"], app.config["LOG_LEVEL"], app.config["LOG_TO_FILE"])
    logger = get_logger("startup")

    # extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    swagger.init_app(app)

    # make sure the SQLite data directory exists
    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite:///"):
        os.makedirs(app.config["DATA_DIR"], exist_ok=True)

    # blueprints
    from .blueprints import auth, categories, dashboard, health, materials
    app.register_blueprint(auth.bp)
    app.register_blueprint(categories.bp)
    app.register_blueprint(materials.bp)
    app.register_blueprint(dashboard.bp)
    app.register_blueprint(health.bp)

    _register_error_handlers(app)
    _register_jwt_callbacks()

    @app.cli.command("seed")
    def seed_command():
        """Create tables and insert roles, admin account and sample data."""
        db.create_all()
        report = ensure_seed_data(db.session, app.config["ADMIN_EMAIL"], app.config["ADMIN_PASSWORD"])
        click.echo(f"Seed complete: {report}")

    # create tables and seed; a failing seed must not keep the app from starting
    with app.app_context():
        db.create_all()
        if app.config.get("SEED_ON_STARTUP"):
            try:
                ensure_seed_data(db.session, app.config["ADMIN_EMAIL"], app.config["ADMIN_PASSWORD"])
            except Exception:
                db.session.rollback()
                logger.exception("Seeding the database failed; continuing startup")

    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(InventoryError)
    def handle_inventory_error(err: InventoryError):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException):
        return jsonify({"ok": False, "message": err.description}), err.code


def _register_jwt_callbacks() -> None:
    @jwt.unauthorized_loader
    def missing_token(reason: str):
        return jsonify({"ok": False, "message": reason}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason: str):
        return jsonify({"ok": False, "message": reason}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):  # type: ignore[no-untyped-def]
        return jsonify({"ok": False, "message": "Token has expired"}), 401
