"""SQLAlchemy models (SQLite compatible).
Tables: roles, users, user_roles, categories, materials.

`version_id` on the inventory tables is the optimistic concurrency token:
SQLAlchemy adds it to the WHERE clause of every UPDATE/DELETE and bumps it,
and the gateway compares it with the version the client last read.
"""
from __future__ import annotations
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import Column, ForeignKey, Numeric, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .extensions import db

# largest value the INTEGER columns accept on every supported backend
MAX_DB_INT = 2_147_483_647


def utcnow() -> datetime:
    # naive UTC, which is what the DateTime columns store and return
    return datetime.now(timezone.utc).replace(tzinfo=None)


# helper mixin
class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow, nullable=False)


user_roles = Table(
    "user_roles",
    db.Model.metadata,
    Column("user_id", ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class Role(db.Model):
    __tablename__ = "roles"
    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Role {self.name}>"


class User(db.Model, TimestampMixin):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(String(256), nullable=False, unique=True, index=True)
    email: Mapped[Optional[str]] = mapped_column(String(256), nullable=True, index=True)
    password_hash: Mapped[str] = mapped_column(nullable=False)
    is_active: Mapped[bool] = mapped_column(nullable=False, default=True)

    roles: Mapped[List[Role]] = relationship(secondary=user_roles, lazy="selectin")

    @property
    def role_names(self) -> list[str]:
        return sorted(r.name for r in self.roles)

    def has_role(self, name: str) -> bool:
        return any(r.name == name for r in self.roles)


class Category(db.Model, TimestampMixin):
    __tablename__ = "categories"
    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    version_id: Mapped[int] = mapped_column(nullable=False, default=1)

    # back reference only, deletes never cascade to materials
    materials: Mapped[List["Material"]] = relationship(
        back_populates="category", passive_deletes="all"
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r}>"


class Material(db.Model, TimestampMixin):
    __tablename__ = "materials"
    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    sku: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(nullable=False, default=0)
    minimum_quantity: Mapped[int] = mapped_column(nullable=False, default=0)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=Decimal("0.00"))
    version_id: Mapped[int] = mapped_column(nullable=False, default=1)

    category: Mapped[Category] = relationship(back_populates="materials", lazy="joined")

    __mapper_args__ = {"version_id_col": version_id}

    @property
    def is_low_stock(self) -> bool:
        # derived, never persisted
        return self.quantity <= self.minimum_quantity

    def __repr__(self) -> str:
        return f"<Material id={self.id} sku={self.sku!r}>"
