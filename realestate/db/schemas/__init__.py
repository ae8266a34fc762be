"""
Pydantic transfer schemas split by domain, re-exported for a single import point.
"""

from .customers import CustomerBase, CustomerCreate, CustomerUpdate, Customer
from .catalog import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    Category,
    LocationBase,
    LocationCreate,
    LocationUpdate,
    Location,
)
from .properties import PropertyBase, PropertyCreate, PropertyUpdate, Property
from .invoices import InvoiceBase, InvoiceCreate, InvoiceUpdate, Invoice

__all__ = [
    # Customers
    "CustomerBase",
    "CustomerCreate",
    "CustomerUpdate",
    "Customer",
    # Categories / locations
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "Category",
    "LocationBase",
    "LocationCreate",
    "LocationUpdate",
    "Location",
    # Properties
    "PropertyBase",
    "PropertyCreate",
    "PropertyUpdate",
    "Property",
    # Invoices
    "InvoiceBase",
    "InvoiceCreate",
    "InvoiceUpdate",
    "Invoice",
]
