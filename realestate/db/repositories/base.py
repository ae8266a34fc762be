"""
Generic repository.

Every read goes through `_active_query`, which filters out soft-deleted rows
explicitly; nothing relies on a global ORM query rewrite.
"""
from __future__ import annotations

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from realestate.db.models import SoftDeleteMixin, now_utc

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SoftDeleteMixin)


class Repository(Generic[T]):
    """Create/read/update/soft-delete/exists over one model type."""

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    def _active_query(self, *options) -> Query:
        q = self.db.query(self.model).filter(self.model.is_deleted == False)  # noqa: E712
        if options:
            q = q.options(*options)
        return q

    def get_all(self, *options) -> List[T]:
        """Return all active rows; ``options`` are loader options such as ``joinedload``."""
        return self._active_query(*options).all()

    def get_by_id(self, entity_id: int, *options) -> Optional[T]:
        return self._active_query(*options).filter(self.model.id == entity_id).first()

    def find(self, *criteria) -> List[T]:
        """Return active rows matching the given SQLAlchemy filter expressions."""
        return self._active_query().filter(*criteria).all()

    def add(self, entity: T) -> T:
        entity.created_date = now_utc()
        entity.is_deleted = False
        self.db.add(entity)
        self._commit(entity)
        logger.debug("%s %s created", self.model.__name__, entity.id)
        return entity

    def update(self, entity: T) -> T:
        """Persist a live instance the caller has already fetched and mutated."""
        entity.modified_date = now_utc()
        self._commit(entity)
        logger.debug("%s %s updated", self.model.__name__, entity.id)
        return entity

    def delete(self, entity_id: int) -> bool:
        entity = self.get_by_id(entity_id)
        if entity is None:
            logger.warning(f"{self.model.__name__} with ID: {entity_id} not found for deletion.")
            return False
        entity.is_deleted = True
        entity.modified_date = now_utc()
        self._commit(entity)
        logger.info(f"{self.model.__name__} {entity_id} soft-deleted.")
        return True

    def exists(self, entity_id: int) -> bool:
        return self.db.query(
            self._active_query().filter(self.model.id == entity_id).exists()
        ).scalar()

    def _commit(self, entity: T) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(entity)
