from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field


class InvoiceBase(BaseModel):
    serial_number: str = Field(max_length=50)
    total_amount: Decimal = Field(max_digits=18, decimal_places=2)
    invoice_date: datetime
    customer_id: int
    status: str = Field(max_length=50)


class InvoiceCreate(InvoiceBase):
    pass


class InvoiceUpdate(InvoiceBase):
    pass


class Invoice(InvoiceBase):
    """Transfer shape; customer_name is copied from the joined customer."""
    id: int
    customer_name: str = ''
    created_date: datetime
