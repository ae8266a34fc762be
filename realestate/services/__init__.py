"""Domain services enforcing the business rules for each entity."""

from .customer_service import CustomerService
from .category_service import CategoryService
from .location_service import LocationService
from .property_service import PropertyService
from .invoice_service import InvoiceService

__all__ = [
    "CustomerService",
    "CategoryService",
    "LocationService",
    "PropertyService",
    "InvoiceService",
]
