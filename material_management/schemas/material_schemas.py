"""
Pydantic schemas for material operations.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..errors import Violation
from ..models import MAX_DB_INT
from .category_schemas import _strip
from .validation import check


class MaterialSchema(BaseModel):
    """Schema for creating a material."""

    name: str = Field(..., min_length=1, max_length=200, description="Material name")
    description: Optional[str] = Field(None, max_length=1000, description="Material description")
    sku: str = Field(..., min_length=1, max_length=50, description="Unique stock-keeping code")
    category_id: int = Field(..., gt=0, le=MAX_DB_INT, description="Owning category")
    quantity: int = Field(..., ge=0, le=MAX_DB_INT, description="Quantity on hand")
    minimum_quantity: int = Field(..., ge=0, le=MAX_DB_INT, description="Low stock threshold")
    unit_price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2, description="Unit price")

    @field_validator("name", "sku", mode="before")
    @classmethod
    def validate_required_text(cls, v, info):
        v = _strip(v)
        if v == "":
            raise ValueError(f"{info.field_name} cannot be empty")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def blank_description_is_none(cls, v):
        v = _strip(v)
        return v or None

    @field_validator("unit_price", mode="before")
    @classmethod
    def price_from_text(cls, v):
        # floats go through str() so 25.99 stays 25.99 instead of its binary expansion
        if isinstance(v, float):
            return Decimal(str(v))
        return _strip(v)


class MaterialUpdateSchema(MaterialSchema):
    """Full-record overwrite; version_id is the version the client last read."""

    version_id: int = Field(..., ge=1, le=MAX_DB_INT, description="Concurrency token from the last read")


class MaterialResponseSchema(BaseModel):
    """Schema for material API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str]
    sku: str
    category_id: int
    category_name: Optional[str] = None
    quantity: int
    minimum_quantity: int
    unit_price: Decimal
    is_low_stock: bool
    version_id: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("unit_price")
    def serialize_price(self, v: Decimal) -> str:
        return f"{v:.2f}"

    @classmethod
    def from_material(cls, material) -> "MaterialResponseSchema":
        out = cls.model_validate(material)
        if material.category is not None:
            out.category_name = material.category.name
        return out


def validate_material(data: Any, *, require_version: bool = False) -> List[Violation]:
    """Return the list of constraint violations for a submitted material."""
    schema = MaterialUpdateSchema if require_version else MaterialSchema
    _, violations = check(schema, data)
    return violations
