"""
Material Service - business logic for the materials inventory.
Validates submitted records, talks to the gateway and owns the transaction.
"""

from typing import Any, Dict, Optional

from ..errors import ValidationFailed, Violation
from ..models import Material
from ..schemas import MaterialSchema, MaterialUpdateSchema, check
from ..utils.logging_utils import get_logger
from .base_service import BaseService

logger = get_logger("materials")


class MaterialService(BaseService):
    """Service for material domain operations."""

    def list_materials(
        self, term: Optional[str] = None, category_id: Optional[int] = None
    ) -> Dict[str, Any]:
        """Filtered materials ordered by name, plus every category for the filter picker."""
        return {
            "items": self.ctx.materials.search(term, category_id),
            "categories": self.ctx.categories.list_all(),
        }

    def get_material(self, material_id: int) -> Material:
        return self.ctx.materials.get(material_id)

    def create_material(self, data: Any, user_id: Optional[int] = None) -> Material:
        """Validate and insert a new material."""
        values = self._validated(MaterialSchema, data)
        try:
            material = self.ctx.materials.insert(**values)
            self.commit()
        except Exception:
            self.rollback()
            raise

        logger.info("Material %s (%s) created", material.id, material.sku)
        self.audit(user_id, "create", f"material:{material.id}", details={"sku": material.sku})
        return material

    def update_material(self, material_id: int, data: Any, user_id: Optional[int] = None) -> Material:
        """Full-record overwrite guarded by the submitted version_id."""
        self.ctx.materials.get(material_id)
        values = self._validated(MaterialUpdateSchema, data)
        expected_version = values.pop("version_id")
        try:
            material = self.ctx.materials.update(material_id, expected_version, **values)
            self.commit()
        except Exception:
            self.rollback()
            raise

        logger.info("Material %s updated to version %s", material.id, material.version_id)
        self.audit(user_id, "update", f"material:{material.id}", details={"version_id": material.version_id})
        return material

    def delete_material(self, material_id: int, user_id: Optional[int] = None) -> None:
        try:
            self.ctx.materials.delete(material_id)
            self.commit()
        except Exception:
            self.rollback()
            raise

        logger.info("Material %s deleted", material_id)
        self.audit(user_id, "delete", f"material:{material_id}")

    def _validated(self, schema, data: Any) -> Dict[str, Any]:
        model, violations = check(schema, data)
        if model is not None and not self.ctx.categories.exists(model.category_id):
            violations = [Violation("category_id", "Category does not exist")]
        if violations:
            raise ValidationFailed(violations)
        return model.model_dump()
