"""
Categories API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from realestate.api.deps import get_category_service
from realestate.db import schemas
from realestate.errors import DomainError
from realestate.services import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[schemas.Category])
def get_all_categories_endpoint(service: CategoryService = Depends(get_category_service)):
    return service.get_all_categories()


@router.get("/{category_id}", response_model=schemas.Category)
def get_category_endpoint(category_id: int, service: CategoryService = Depends(get_category_service)):
    category = service.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("", response_model=schemas.Category, status_code=status.HTTP_201_CREATED)
def create_category_endpoint(
    category: schemas.CategoryCreate,
    request: Request,
    response: Response,
    service: CategoryService = Depends(get_category_service),
):
    try:
        created = service.create_category(category)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = str(request.url_for("get_category_endpoint", category_id=created.id))
    return created


@router.put("/{category_id}", response_model=schemas.Category)
def update_category_endpoint(
    category_id: int,
    category: schemas.CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    try:
        updated = service.update_category(category_id, category)
    except DomainError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return updated


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category_endpoint(category_id: int, service: CategoryService = Depends(get_category_service)):
    if not service.delete_category(category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
