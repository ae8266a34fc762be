"""
Properties API endpoints.

Unknown or soft-deleted category/location ids are rejected with 400.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from realestate.api.deps import get_property_service
from realestate.db import schemas
from realestate.errors import DomainError
from realestate.services import PropertyService

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=List[schemas.Property])
def get_all_properties_endpoint(service: PropertyService = Depends(get_property_service)):
    return service.get_all_properties()


@router.get("/{property_id}", response_model=schemas.Property)
def get_property_endpoint(property_id: int, service: PropertyService = Depends(get_property_service)):
    prop = service.get_property(property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.post("", response_model=schemas.Property, status_code=status.HTTP_201_CREATED)
def create_property_endpoint(
    prop: schemas.PropertyCreate,
    request: Request,
    response: Response,
    service: PropertyService = Depends(get_property_service),
):
    try:
        created = service.create_property(prop)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = str(request.url_for("get_property_endpoint", property_id=created.id))
    return created


@router.put("/{property_id}", response_model=schemas.Property)
def update_property_endpoint(
    property_id: int,
    prop: schemas.PropertyUpdate,
    service: PropertyService = Depends(get_property_service),
):
    try:
        updated = service.update_property(property_id, prop)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return updated


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property_endpoint(property_id: int, service: PropertyService = Depends(get_property_service)):
    if not service.delete_property(property_id):
        raise HTTPException(status_code=404, detail="Property not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
