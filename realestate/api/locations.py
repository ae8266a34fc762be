"""
Locations API endpoints.

Domain errors are translated to 400 here as for every other resource, even
though location writes have no business rule of their own today.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from realestate.api.deps import get_location_service
from realestate.db import schemas
from realestate.errors import DomainError
from realestate.services import LocationService

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=List[schemas.Location])
def get_all_locations_endpoint(service: LocationService = Depends(get_location_service)):
    return service.get_all_locations()


@router.get("/{location_id}", response_model=schemas.Location)
def get_location_endpoint(location_id: int, service: LocationService = Depends(get_location_service)):
    location = service.get_location(location_id)
    if location is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@router.post("", response_model=schemas.Location, status_code=status.HTTP_201_CREATED)
def create_location_endpoint(
    location: schemas.LocationCreate,
    request: Request,
    response: Response,
    service: LocationService = Depends(get_location_service),
):
    try:
        created = service.create_location(location)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = str(request.url_for("get_location_endpoint", location_id=created.id))
    return created


@router.put("/{location_id}", response_model=schemas.Location)
def update_location_endpoint(
    location_id: int,
    location: schemas.LocationUpdate,
    service: LocationService = Depends(get_location_service),
):
    try:
        updated = service.update_location(location_id, location)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return updated


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location_endpoint(location_id: int, service: LocationService = Depends(get_location_service)):
    if not service.delete_location(location_id):
        raise HTTPException(status_code=404, detail="Location not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
