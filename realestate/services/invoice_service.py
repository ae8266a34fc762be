"""
Invoice service.

Rejects non-positive totals before touching the store, validates the
customer reference, then persists and re-reads the row joined with its
customer to fill in ``customer_name``.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from realestate.db import models, schemas
from realestate.db.repositories import Repository, CustomerRepository
from realestate.errors import InvalidAmountError, InvalidReferenceError, RetrievalFailureError

logger = logging.getLogger(__name__)

_WITH_CUSTOMER = (joinedload(models.Invoice.customer),)


class InvoiceService:
    """Service class for invoice operations."""

    def __init__(
        self,
        db: Session,
        invoice_repository: Optional[Repository[models.Invoice]] = None,
        customer_repository: Optional[Repository[models.Customer]] = None,
    ):
        self.db = db
        self.invoices = invoice_repository or Repository(db, models.Invoice)
        self.customers = customer_repository or CustomerRepository(db)

    def get_all_invoices(self) -> List[schemas.Invoice]:
        return [self._to_schema(i) for i in self.invoices.get_all(*_WITH_CUSTOMER)]

    def get_invoice(self, invoice_id: int) -> Optional[schemas.Invoice]:
        invoice = self.invoices.get_by_id(invoice_id, *_WITH_CUSTOMER)
        return self._to_schema(invoice) if invoice else None

    def create_invoice(self, data: schemas.InvoiceCreate) -> schemas.Invoice:
        self._validate(data)
        created = self.invoices.add(models.Invoice(**data.model_dump()))
        return self._reload(created.id)

    def update_invoice(self, invoice_id: int, data: schemas.InvoiceUpdate) -> Optional[schemas.Invoice]:
        invoice = self.invoices.get_by_id(invoice_id)
        if invoice is None:
            return None
        self._validate(data)
        for key, value in data.model_dump().items():
            setattr(invoice, key, value)
        self.invoices.update(invoice)
        return self._reload(invoice_id)

    def delete_invoice(self, invoice_id: int) -> bool:
        return self.invoices.delete(invoice_id)

    def _validate(self, data: schemas.InvoiceBase) -> None:
        # Amount first: a bad total is rejected without any store round trip.
        if data.total_amount <= 0:
            logger.info("invoice_rejected: non-positive amount %s", data.total_amount)
            raise InvalidAmountError(data.total_amount)
        if not self.customers.exists(data.customer_id):
            logger.info("invoice_rejected: customer %s missing", data.customer_id)
            raise InvalidReferenceError("Customer", data.customer_id)

    def _reload(self, invoice_id: int) -> schemas.Invoice:
        invoice = self.invoices.get_by_id(invoice_id, *_WITH_CUSTOMER)
        if invoice is None:
            raise RetrievalFailureError("Failed to retrieve created invoice.")
        return self._to_schema(invoice)

    @staticmethod
    def _to_schema(invoice: models.Invoice) -> schemas.Invoice:
        customer = invoice.customer
        if customer is not None and not customer.is_deleted:
            customer_name = customer.full_name
        else:
            customer_name = ''
        return schemas.Invoice(
            id=invoice.id,
            serial_number=invoice.serial_number,
            total_amount=invoice.total_amount,
            invoice_date=invoice.invoice_date,
            customer_id=invoice.customer_id,
            customer_name=customer_name,
            status=invoice.status,
            created_date=invoice.created_date,
        )
