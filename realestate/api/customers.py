"""
Customers API endpoints.

CRUD for customer resources; duplicate emails map to 400, missing rows to 404.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from realestate.api.deps import get_customer_service
from realestate.db import schemas
from realestate.errors import DomainError
from realestate.services import CustomerService


router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[schemas.Customer])
def get_all_customers_endpoint(service: CustomerService = Depends(get_customer_service)):
    return service.get_all_customers()


@router.get("/by-email", response_model=schemas.Customer)
def get_customer_by_email_endpoint(email: str, service: CustomerService = Depends(get_customer_service)):
    customer = service.get_customer_by_email(email)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("/{customer_id}", response_model=schemas.Customer)
def get_customer_endpoint(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    customer = service.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("", response_model=schemas.Customer, status_code=status.HTTP_201_CREATED)
def create_customer_endpoint(
    customer: schemas.CustomerCreate,
    request: Request,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        created = service.create_customer(customer)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = str(request.url_for("get_customer_endpoint", customer_id=created.id))
    return created


@router.put("/{customer_id}", response_model=schemas.Customer)
def update_customer_endpoint(
    customer_id: int,
    customer: schemas.CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        updated = service.update_customer(customer_id, customer)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return updated


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer_endpoint(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    if not service.delete_customer(customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
