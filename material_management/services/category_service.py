"""
Category Service - business logic for material categories.
"""

from typing import Any, List, Optional, Tuple

from ..models import Category
from ..schemas import CategorySchema, CategoryUpdateSchema, parse
from ..utils.logging_utils import get_logger
from .base_service import BaseService

logger = get_logger("categories")


class CategoryService(BaseService):
    """Service for category domain operations."""

    def list_categories(self) -> List[Tuple[Category, int]]:
        """Categories ordered by name, each with the number of materials in it."""
        return self.ctx.categories.list_with_material_counts()

    def get_category(self, category_id: int) -> Category:
        return self.ctx.categories.get(category_id)

    def create_category(self, data: Any, user_id: Optional[int] = None) -> Category:
        values = parse(CategorySchema, data).model_dump()
        try:
            category = self.ctx.categories.insert(**values)
            self.commit()
        except Exception:
            self.rollback()
            raise

        logger.info("Category %s (%s) created", category.id, category.name)
        self.audit(user_id, "create", f"category:{category.id}")
        return category

    def update_category(self, category_id: int, data: Any, user_id: Optional[int] = None) -> Category:
        self.ctx.categories.get(category_id)
        values = parse(CategoryUpdateSchema, data).model_dump()
        expected_version = values.pop("version_id")
        try:
            category = self.ctx.categories.update(category_id, expected_version, **values)
            self.commit()
        except Exception:
            self.rollback()
            raise

        self.audit(user_id, "update", f"category:{category.id}", details={"version_id": category.version_id})
        return category

    def delete_category(self, category_id: int, user_id: Optional[int] = None) -> None:
        """Delete a category; refused while any material still references it."""
        try:
            self.ctx.categories.delete(category_id)
            self.commit()
        except Exception:
            self.rollback()
            raise

        logger.info("Category %s deleted", category_id)
        self.audit(user_id, "delete", f"category:{category_id}")
