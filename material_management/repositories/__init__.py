"""
Repository pattern implementation for data access abstraction.

`InventoryContext` is the gateway: one session, one typed repository per
inventory entity, and explicit commit/rollback.
"""
from typing import Optional

from sqlalchemy.orm import Session

from ..extensions import db
from .base_repository import BaseRepository
from .category_repository import CategoryRepository
from .material_repository import MaterialRepository
from .user_repository import UserRepository


class InventoryContext:
    """Unit of work over the categories and materials tables."""

    def __init__(self, session: Optional[Session] = None):
        self.session = session or db.session
        self.categories = CategoryRepository(self.session)
        self.materials = MaterialRepository(self.session)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "InventoryContext",
    "MaterialRepository",
    "UserRepository",
]
