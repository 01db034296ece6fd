"""
Pydantic schemas for category operations.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import Violation
from ..models import MAX_DB_INT
from .validation import check


def _strip(v: Any) -> Any:
    return v.strip() if isinstance(v, str) else v


class CategorySchema(BaseModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    description: Optional[str] = Field(None, max_length=500, description="Category description")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        v = _strip(v)
        if v == "":
            raise ValueError("Category name cannot be empty")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def blank_description_is_none(cls, v):
        v = _strip(v)
        return v or None


class CategoryUpdateSchema(CategorySchema):
    """Full-record overwrite; version_id is the version the client last read."""

    version_id: int = Field(..., ge=1, le=MAX_DB_INT, description="Concurrency token from the last read")


class CategoryResponseSchema(BaseModel):
    """Schema for category API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str]
    version_id: int
    created_at: datetime
    updated_at: datetime

    material_count: Optional[int] = None


def validate_category(data: Any, *, require_version: bool = False) -> List[Violation]:
    """Return the list of constraint violations for a submitted category."""
    schema = CategoryUpdateSchema if require_version else CategorySchema
    _, violations = check(schema, data)
    return violations
