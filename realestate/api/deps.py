"""
API dependency helpers.

Provides one service instance per request, bound to the request's session.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from realestate.db.database import get_db
from realestate.services import (
    CategoryService,
    CustomerService,
    InvoiceService,
    LocationService,
    PropertyService,
)


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_location_service(db: Session = Depends(get_db)) -> LocationService:
    return LocationService(db)


def get_property_service(db: Session = Depends(get_db)) -> PropertyService:
    return PropertyService(db)


def get_invoice_service(db: Session = Depends(get_db)) -> InvoiceService:
    return InvoiceService(db)
