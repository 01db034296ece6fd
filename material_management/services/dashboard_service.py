"""
Dashboard Service - headline inventory statistics.
"""

from typing import Any, Dict

from .base_service import BaseService


class DashboardService(BaseService):

    RECENT_LIMIT = 5

    def summary(self) -> Dict[str, Any]:
        return {
            "total_materials": self.ctx.materials.count(),
            "total_categories": self.ctx.categories.count(),
            "low_stock_items": self.ctx.materials.count_low_stock(),
            "total_value": self.ctx.materials.total_value(),
            "recent_materials": self.ctx.materials.recent(self.RECENT_LIMIT),
        }
