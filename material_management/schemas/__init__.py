"""
Pydantic schemas for data validation and serialization.
Provides type-safe data models for API requests and responses.
"""
from .category_schemas import (
    CategorySchema,
    CategoryUpdateSchema,
    CategoryResponseSchema,
    validate_category,
)
from .material_schemas import (
    MaterialSchema,
    MaterialUpdateSchema,
    MaterialResponseSchema,
    validate_material,
)
from .user_schemas import (
    LoginSchema,
    RegisterSchema,
    UserResponseSchema,
)
from .validation import check, parse, violations_from

__all__ = [
    # Category schemas
    'CategorySchema',
    'CategoryUpdateSchema',
    'CategoryResponseSchema',
    'validate_category',

    # Material schemas
    'MaterialSchema',
    'MaterialUpdateSchema',
    'MaterialResponseSchema',
    'validate_material',

    # User schemas
    'LoginSchema',
    'RegisterSchema',
    'UserResponseSchema',

    # Helpers
    'check',
    'parse',
    'violations_from',
]
