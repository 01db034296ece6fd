"""
Material Repository implementation with material-specific operations.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import ReferentialIntegrityViolation, UniqueConstraintViolation
from ..models import Category, Material
from .base_repository import BaseRepository

CENT = Decimal("0.01")


class MaterialRepository(BaseRepository[Material]):
    """Repository for Material-specific operations."""

    entity_name = "Material"

    def __init__(self, session: Optional[Session] = None):
        super().__init__(Material, session)

    def find_by_sku(self, sku: str) -> Optional[Material]:
        """Find material by SKU."""
        return self.session.query(Material).filter(Material.sku == sku).first()

    def sku_taken(self, sku: str, exclude_id: Optional[int] = None) -> bool:
        query = self.session.query(Material.id).filter(Material.sku == sku)
        if exclude_id is not None:
            query = query.filter(Material.id != exclude_id)
        return query.first() is not None

    def search(self, term: Optional[str] = None, category_id: Optional[int] = None) -> List[Material]:
        """Case-insensitive substring match on name or SKU, optionally within one category.

        Results are ordered by name. A category_id of None or <= 0 means all categories.
        """
        query = self.session.query(Material)
        term = (term or "").strip()
        if term:
            query = query.filter(
                or_(
                    Material.name.icontains(term, autoescape=True),
                    Material.sku.icontains(term, autoescape=True),
                )
            )
        if category_id is not None and category_id > 0:
            query = query.filter(Material.category_id == category_id)
        return query.order_by(Material.name.asc(), Material.id.asc()).all()

    def count_low_stock(self) -> int:
        return self.session.query(Material).filter(Material.quantity <= Material.minimum_quantity).count()

    def total_value(self) -> Decimal:
        """Sum of quantity * unit_price over all materials, to the cent."""
        # summed in Python: SQLite would do this arithmetic in floating point
        rows = self.session.query(Material.quantity, Material.unit_price).all()
        total = sum((Decimal(qty) * Decimal(price) for qty, price in rows), Decimal("0"))
        return total.quantize(CENT)

    def recent(self, limit: int = 5) -> List[Material]:
        return (
            self.session.query(Material)
            .order_by(Material.created_at.desc(), Material.id.desc())
            .limit(limit)
            .all()
        )

    def _before_write(self, entity: Optional[Material], values: Dict[str, Any]) -> None:
        category_id = values.get("category_id")
        if category_id is not None and self.session.get(Category, category_id) is None:
            raise ReferentialIntegrityViolation(f"Category with ID {category_id} does not exist")
        sku = values.get("sku")
        if sku is not None and self.sku_taken(sku, exclude_id=entity.id if entity else None):
            raise UniqueConstraintViolation("sku", sku)

    def _translate_integrity_error(self, exc: IntegrityError, values: Dict[str, Any]) -> Exception:
        text = str(exc.orig).lower()
        if "foreign key" in text:
            return ReferentialIntegrityViolation(
                f"Category with ID {values.get('category_id')} does not exist"
            )
        # unique index on sku, hit by a writer racing past sku_taken()
        return UniqueConstraintViolation("sku", values.get("sku"))
