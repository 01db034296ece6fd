"""Inventory error hierarchy.

Every error carries the HTTP status the API surfaces it with, so the app
factory can register a single JSON handler for the whole family.

Exception hierarchy:
    InventoryError
    ├── ValidationFailed               400, per-field violations
    ├── NotFound                       404
    ├── ConcurrencyConflict            409, stale version_id
    ├── ReferentialIntegrityViolation  409, missing or still-referenced parent
    └── UniqueConstraintViolation      409, duplicate SKU
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Violation:
    """One failed field constraint."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class InventoryError(Exception):
    """Base class for errors recovered at the handler boundary."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "message": self.message}


class ValidationFailed(InventoryError):
    """Raised when submitted data violates one or more field constraints."""

    status_code = 400

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        fields = ", ".join(sorted({v.field for v in self.violations}))
        super().__init__(f"Validation failed: {fields}")

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = [v.to_dict() for v in self.violations]
        return payload


class NotFound(InventoryError):
    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class ConcurrencyConflict(InventoryError):
    """Raised when a record changed between the client's read and its write."""

    status_code = 409

    def __init__(self, entity: str, entity_id: Any, expected: Optional[int] = None, actual: Optional[int] = None):
        self.entity = entity
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{entity} with ID {entity_id} was modified by another request; reload and retry"
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        if self.actual is not None:
            payload["current_version"] = self.actual
        return payload


class ReferentialIntegrityViolation(InventoryError):
    status_code = 409

    def __init__(self, message: str, dependents: int = 0):
        self.dependents = dependents
        super().__init__(message)


class UniqueConstraintViolation(InventoryError):
    status_code = 409

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"{field} '{value}' is already in use")

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = [{"field": self.field, "message": self.message}]
        return payload
