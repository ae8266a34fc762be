"""
ORM models split by domain, re-exported for a single import point.

Exposes `Base`, `now_utc`, the `SoftDeleteMixin` contract and all entity
classes.
"""

from .base import Base, SoftDeleteMixin, now_utc  # re-export

from .customers import Customer
from .catalog import Category, Location
from .properties import Property
from .invoices import Invoice

__all__ = [
    # base
    "Base",
    "SoftDeleteMixin",
    "now_utc",
    # entities
    "Customer",
    "Category",
    "Location",
    "Property",
    "Invoice",
]
