"""
Category Repository implementation with category-specific operations.
"""
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import ReferentialIntegrityViolation
from ..models import Category, Material
from .base_repository import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category-specific operations."""

    entity_name = "Category"

    def __init__(self, session: Optional[Session] = None):
        super().__init__(Category, session)

    def find_by_name(self, name: str) -> Optional[Category]:
        return self.session.query(Category).filter(Category.name == name).first()

    def dependents_count(self, category_id: int) -> int:
        """Number of materials that reference the category."""
        return self.session.query(Material).filter(Material.category_id == category_id).count()

    def list_with_material_counts(self) -> List[Tuple[Category, int]]:
        """All categories ordered by name, each paired with its material count."""
        return (
            self.session.query(Category, func.count(Material.id))
            .outerjoin(Material, Material.category_id == Category.id)
            .group_by(Category.id)
            .order_by(Category.name.asc(), Category.id.asc())
            .all()
        )

    def _before_delete(self, entity: Category) -> None:
        dependents = self.dependents_count(entity.id)
        if dependents:
            raise ReferentialIntegrityViolation(
                f"Cannot delete category '{entity.name}': used by {dependents} material(s)",
                dependents=dependents,
            )

    def _translate_integrity_error(self, exc: IntegrityError, values: Dict[str, Any]) -> Exception:
        # only the FK restrict rule can fire here, when a material lands concurrently
        return ReferentialIntegrityViolation("Category is still referenced by materials")
