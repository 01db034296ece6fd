"""Application configuration.
Every value can be overridden through environment variables; the default
store is a local SQLite file under DATA_DIR.
"""
from __future__ import annotations
import os
from datetime import timedelta
from pathlib import Path


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    BASE_DIR: Path = Path(__file__).resolve().parent.parent  # project root
    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY: str = os.environ.get("JWT_SECRET", "dev-jwt-secret-change-me-please-32b")
    DATA_DIR: str = os.environ.get("DATA_DIR", str((BASE_DIR / "data").resolve()))
    # absolute SQLite path, forward slashes on Windows too
    _default_db_path = str((Path(DATA_DIR) / "materials.sqlite").resolve()).replace("\\", "/")
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("DATABASE_URL", f"sqlite:///{_default_db_path}")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # JWT: bearer header for API clients, cookies (with CSRF double submit) for browsers
    JWT_TOKEN_LOCATION = ["headers", "cookies"]
    JWT_COOKIE_CSRF_PROTECT: bool = True
    JWT_COOKIE_SECURE: bool = _env_flag("JWT_COOKIE_SECURE", "false")
    JWT_COOKIE_SAMESITE: str = "Lax"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=int(os.environ.get("JWT_ACCESS_MIN", "30")))
    JWT_REFRESH_TOKEN_EXPIRES = timedelta(days=int(os.environ.get("JWT_REFRESH_DAYS", "7")))

    # Logging
    LOG_DIR: str = os.environ.get("LOG_DIR", str((BASE_DIR / "logs").resolve()))
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = _env_flag("LOG_TO_FILE", "true")

    # Startup seed
    SEED_ON_STARTUP: bool = _env_flag("SEED_ON_STARTUP", "true")
    ADMIN_EMAIL: str = os.environ.get("ADMIN_EMAIL", "admin@materialmanagement.com")
    ADMIN_PASSWORD: str = os.environ.get("ADMIN_PASSWORD", "Admin@123")

    # Swagger
    SWAGGER = {
        "title": "Material Management API",
        "uiversion": 3,
        "openapi": "3.0.2",
    }


class TestConfig(Config):
    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = "sqlite://"
    SEED_ON_STARTUP: bool = False
    LOG_TO_FILE: bool = False
    LOG_LEVEL: str = "WARNING"
    ADMIN_PASSWORD: str = "Admin@123"
