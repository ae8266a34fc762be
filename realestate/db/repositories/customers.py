"""
Customer repository: generic CRUD plus the email lookups behind the
uniqueness rule.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from realestate.db import models
from .base import Repository


class CustomerRepository(Repository[models.Customer]):

    def __init__(self, db: Session):
        super().__init__(db, models.Customer)

    def get_by_email(self, email: str) -> Optional[models.Customer]:
        return self._active_query().filter(models.Customer.email == email).first()

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """True when an active customer other than ``exclude_id`` uses ``email``."""
        q = self._active_query().filter(models.Customer.email == email)
        if exclude_id is not None:
            q = q.filter(models.Customer.id != exclude_id)
        return self.db.query(q.exists()).scalar()
