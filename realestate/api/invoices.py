"""
Invoices API endpoints.

Non-positive totals and unknown customers map to 400.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from realestate.api.deps import get_invoice_service
from realestate.db import schemas
from realestate.errors import DomainError
from realestate.services import InvoiceService

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=List[schemas.Invoice])
def get_all_invoices_endpoint(service: InvoiceService = Depends(get_invoice_service)):
    return service.get_all_invoices()


@router.get("/{invoice_id}", response_model=schemas.Invoice)
def get_invoice_endpoint(invoice_id: int, service: InvoiceService = Depends(get_invoice_service)):
    invoice = service.get_invoice(invoice_id)
    if invoice is None:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.post("", response_model=schemas.Invoice, status_code=status.HTTP_201_CREATED)
def create_invoice_endpoint(
    invoice: schemas.InvoiceCreate,
    request: Request,
    response: Response,
    service: InvoiceService = Depends(get_invoice_service),
):
    try:
        created = service.create_invoice(invoice)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = str(request.url_for("get_invoice_endpoint", invoice_id=created.id))
    return created


@router.put("/{invoice_id}", response_model=schemas.Invoice)
def update_invoice_endpoint(
    invoice_id: int,
    invoice: schemas.InvoiceUpdate,
    service: InvoiceService = Depends(get_invoice_service),
):
    try:
        updated = service.update_invoice(invoice_id, invoice)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return updated


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_invoice_endpoint(invoice_id: int, service: InvoiceService = Depends(get_invoice_service)):
    if not service.delete_invoice(invoice_id):
        raise HTTPException(status_code=404, detail="Invoice not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
