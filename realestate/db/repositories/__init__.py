"""
Repositories over the ORM models.

`Repository` implements the generic soft-delete aware CRUD contract for any
model carrying the `SoftDeleteMixin` columns; `CustomerRepository` adds the
email lookups used to keep customer emails unique.
"""

from .base import Repository
from .customers import CustomerRepository

__all__ = ["Repository", "CustomerRepository"]
