"""
Structured logging configuration for the Material Management service.
Provides application, error and audit logs for monitoring and auditing.
"""
import json
import logging
import logging.config
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def build_logging_config(log_dir: str, level: str = "INFO", to_file: bool = True) -> Dict[str, Any]:
    """dictConfig for the `app.*` loggers; file handlers only when `to_file`."""
    handlers: Dict[str, Any] = {
        "console": {
            "level": level,
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": sys.stdout,
        }
    }
    app_handlers = ["console"]
    audit_handlers = ["console"]
    if to_file:
        handlers.update({
            "file": {
                "level": "DEBUG",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, "application.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
            },
            "error_file": {
                "level": "ERROR",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, "error.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
            },
            "audit_file": {
                "level": "INFO",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "json",
                "filename": os.path.join(log_dir, "audit.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 10,
            },
        })
        app_handlers = ["console", "file", "error_file"]
        audit_handlers = ["audit_file"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
            },
            "json": {
                "()": JSONFormatter,
            },
        },
        "handlers": handlers,
        "loggers": {
            "app": {
                "level": "DEBUG",
                "handlers": app_handlers,
                "propagate": False,
            },
            "app.audit": {
                "level": "INFO",
                "handlers": audit_handlers,
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "level": "WARNING",
                "handlers": ["file"] if to_file else ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": "INFO",
            "handlers": ["console"],
        },
    }


class JSONFormatter(logging.Formatter):
    """JSON lines formatter for the audit log."""

    EXTRA_FIELDS = ("user_id", "request_id", "ip_address", "action", "resource", "result", "details")

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for name in self.EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        return json.dumps(log_entry, default=str)


def setup_logging(log_dir: str = "logs", level: str = "INFO", to_file: bool = True) -> logging.Logger:
    """Initialize logging configuration."""
    if to_file:
        os.makedirs(log_dir, exist_ok=True)

    logging.config.dictConfig(build_logging_config(log_dir, level, to_file))

    logger = logging.getLogger("app")
    logger.debug("Logging system initialized")
    return logger


class AuditLogger:
    """Specialized logger for audit events."""

    def __init__(self):
        self.logger = logging.getLogger("app.audit")

    def log_user_action(
        self,
        user_id: Optional[int],
        action: str,
        resource: str,
        result: str,
        details: Dict[str, Any] = None,
        ip_address: str = None,
    ):
        """Log user actions for audit purposes."""
        extra = {
            "user_id": user_id,
            "action": action,
            "resource": resource,
            "result": result,
            "details": details or {},
        }
        if ip_address:
            extra["ip_address"] = ip_address

        self.logger.info(
            f"User {user_id} performed {action} on {resource}: {result}",
            extra=extra,
        )


class PerformanceLogger:
    """Logger for performance monitoring."""

    def __init__(self):
        self.logger = logging.getLogger("app.performance")

    def log_request_timing(
        self,
        endpoint: str,
        method: str,
        duration_ms: float,
        status_code: int,
    ):
        """Log API request performance."""
        if duration_ms > 5000:  # > 5 seconds
            log_level = "warning"
        elif duration_ms > 2000:  # > 2 seconds
            log_level = "info"
        else:
            log_level = "debug"

        log_method = getattr(self.logger, log_level)
        log_method(
            f"{method} {endpoint} completed in {duration_ms:.2f}ms (status: {status_code})",
            extra={"endpoint": endpoint, "method": method, "duration_ms": duration_ms, "status_code": status_code},
        )


# Global instances
audit_logger = AuditLogger()
performance_logger = PerformanceLogger()


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name."""
    return logging.getLogger(f"app.{name}")
