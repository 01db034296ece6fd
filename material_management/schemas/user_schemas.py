"""
Pydantic schemas for authentication.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginSchema(BaseModel):
    username: str = Field(..., min_length=1, max_length=256)
    password: str = Field(..., min_length=1)

    @field_validator("username", mode="before")
    @classmethod
    def normalize_username(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class RegisterSchema(BaseModel):
    """Self-service sign up; new accounts get the plain User role."""

    email: str = Field(..., min_length=3, max_length=256)
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            if "@" not in v or v.startswith("@") or v.endswith("@"):
                raise ValueError("Invalid email address")
        return v


class UserResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: Optional[str]
    is_active: bool
    role_names: List[str]
