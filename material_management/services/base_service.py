"""
Base Service class providing common business operations.
"""

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from ..extensions import db
from ..repositories import InventoryContext
from ..utils.logging_utils import audit_logger


class BaseService:
    """Base service providing common business operations."""

    def __init__(self, session: Optional[Session] = None):
        self.session = session or db.session
        self.ctx = InventoryContext(self.session)

    def commit(self) -> None:
        """Commit current session."""
        self.session.commit()

    def rollback(self) -> None:
        """Rollback current session."""
        self.session.rollback()

    def audit(
        self,
        user_id: Optional[int],
        action: str,
        resource: str,
        result: str = "success",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        audit_logger.log_user_action(user_id, action, resource, result, details)
