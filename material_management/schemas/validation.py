"""
Turns pydantic errors into the flat violation list the services report.
"""
from typing import Any, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationFailed, Violation

M = TypeVar("M", bound=BaseModel)

_ROOT = "__all__"


def _message(error: dict) -> str:
    msg = error.get("msg", "Invalid value")
    # "Value error, name cannot be blank" -> "name cannot be blank"
    if error.get("type") == "value_error" and msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return msg


def violations_from(exc: PydanticValidationError) -> List[Violation]:
    violations = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = ".".join(str(part) for part in loc) or _ROOT
        violations.append(Violation(field=field, message=_message(error)))
    return violations


def check(schema: Type[M], data: Any) -> Tuple[Optional[M], List[Violation]]:
    """Validate `data` against `schema`; returns (model, []) or (None, violations)."""
    if not isinstance(data, dict):
        return None, [Violation(field=_ROOT, message="Request body must be a JSON object")]
    try:
        return schema.model_validate(data), []
    except PydanticValidationError as exc:
        return None, violations_from(exc)


def parse(schema: Type[M], data: Any) -> M:
    """Like `check` but raises ValidationFailed instead of returning violations."""
    model, violations = check(schema, data)
    if violations:
        raise ValidationFailed(violations)
    return model
