"""
Service layer: validation, transactions and auditing on top of the repositories.
"""
from .base_service import BaseService
from .category_service import CategoryService
from .dashboard_service import DashboardService
from .material_service import MaterialService

__all__ = [
    "BaseService",
    "CategoryService",
    "DashboardService",
    "MaterialService",
]
