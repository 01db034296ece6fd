"""
Base Repository class providing common CRUD operations.
Implements the Repository pattern for data access abstraction.

Writes only flush; committing or rolling back is the caller's job.
"""
from typing import Any, Dict, Generic, List, Optional, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from ..errors import ConcurrencyConflict, NotFound
from ..extensions import db
from ..models import utcnow

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """Base repository providing common data operations."""

    entity_name = "Entity"

    def __init__(self, model_class: type[T], session: Optional[Session] = None):
        self.model_class = model_class
        self.session = session or db.session

    def find(self, entity_id: int) -> Optional[T]:
        """Get entity by ID, or None."""
        return self.session.get(self.model_class, entity_id)

    def get(self, entity_id: int) -> T:
        """Get entity by ID; raises NotFound if absent."""
        entity = self.find(entity_id)
        if entity is None:
            raise NotFound(self.entity_name, entity_id)
        return entity

    def exists(self, entity_id: int) -> bool:
        return self.find(entity_id) is not None

    def list_all(self) -> List[T]:
        """Get all entities, ordered by name."""
        return self.session.query(self.model_class).order_by(
            self.model_class.name.asc(), self.model_class.id.asc()
        ).all()

    def count(self) -> int:
        return self.session.query(self.model_class).count()

    def insert(self, **values) -> T:
        """Create a new entity."""
        self._before_write(None, values)
        entity = self.model_class(**values)
        self.session.add(entity)
        self._flush(entity, values)
        return entity

    def update(self, entity_id: int, expected_version: int, **values) -> T:
        """Overwrite an entity if nobody changed it since `expected_version` was read."""
        entity = self.get(entity_id)
        if entity.version_id != expected_version:
            raise ConcurrencyConflict(
                self.entity_name, entity_id, expected=expected_version, actual=entity.version_id
            )
        self._before_write(entity, values)
        for key, value in values.items():
            setattr(entity, key, value)
        # always issue the UPDATE so the version and timestamp move
        entity.updated_at = utcnow()
        self._flush(entity, values)
        return entity

    def delete(self, entity_id: int) -> None:
        """Delete entity by ID; raises NotFound if absent."""
        entity = self.get(entity_id)
        self._before_delete(entity)
        self.session.delete(entity)
        self._flush(entity, {})

    def _before_write(self, entity: Optional[T], values: Dict[str, Any]) -> None:
        """Hook for integrity checks before insert/update; `entity` is None on insert."""

    def _before_delete(self, entity: T) -> None:
        """Hook for integrity checks before delete."""

    def _translate_integrity_error(self, exc: IntegrityError, values: Dict[str, Any]) -> Exception:
        return exc

    def _flush(self, entity: T, values: Dict[str, Any]) -> None:
        # read the key up front; a failed flush leaves the session unable to load it
        identity = inspect(entity).identity
        entity_id = identity[0] if identity else None
        try:
            self.session.flush()
        except StaleDataError:
            # row changed or vanished between our read and the UPDATE/DELETE
            raise ConcurrencyConflict(self.entity_name, entity_id)
        except IntegrityError as exc:
            raise self._translate_integrity_error(exc, values) from exc
