"""
Property service.

Creates and updates only after both the category and the location resolve to
active rows, then re-reads the committed row joined with both so the
denormalized names always reflect stored state.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from realestate.db import models, schemas
from realestate.db.repositories import Repository
from realestate.errors import InvalidReferenceError, RetrievalFailureError

logger = logging.getLogger(__name__)

_WITH_CATEGORY_AND_LOCATION = (
    joinedload(models.Property.category),
    joinedload(models.Property.location),
)


class PropertyService:
    """Service class for property operations."""

    def __init__(
        self,
        db: Session,
        property_repository: Optional[Repository[models.Property]] = None,
        category_repository: Optional[Repository[models.Category]] = None,
        location_repository: Optional[Repository[models.Location]] = None,
    ):
        self.db = db
        self.properties = property_repository or Repository(db, models.Property)
        self.categories = category_repository or Repository(db, models.Category)
        self.locations = location_repository or Repository(db, models.Location)

    def get_all_properties(self) -> List[schemas.Property]:
        return [self._to_schema(p) for p in self.properties.get_all(*_WITH_CATEGORY_AND_LOCATION)]

    def get_property(self, property_id: int) -> Optional[schemas.Property]:
        prop = self.properties.get_by_id(property_id, *_WITH_CATEGORY_AND_LOCATION)
        return self._to_schema(prop) if prop else None

    def create_property(self, data: schemas.PropertyCreate) -> schemas.Property:
        self._validate_references(data)
        created = self.properties.add(models.Property(**data.model_dump()))
        return self._reload(created.id)

    def update_property(self, property_id: int, data: schemas.PropertyUpdate) -> Optional[schemas.Property]:
        prop = self.properties.get_by_id(property_id)
        if prop is None:
            return None
        self._validate_references(data)
        for key, value in data.model_dump().items():
            setattr(prop, key, value)
        self.properties.update(prop)
        return self._reload(property_id)

    def delete_property(self, property_id: int) -> bool:
        return self.properties.delete(property_id)

    def _validate_references(self, data: schemas.PropertyBase) -> None:
        if not self.categories.exists(data.category_id):
            logger.info("property_rejected: category %s missing", data.category_id)
            raise InvalidReferenceError("Category", data.category_id)
        if not self.locations.exists(data.location_id):
            logger.info("property_rejected: location %s missing", data.location_id)
            raise InvalidReferenceError("Location", data.location_id)

    def _reload(self, property_id: int) -> schemas.Property:
        prop = self.properties.get_by_id(property_id, *_WITH_CATEGORY_AND_LOCATION)
        if prop is None:
            raise RetrievalFailureError(f"Failed to retrieve property {property_id} after write.")
        return self._to_schema(prop)

    @staticmethod
    def _to_schema(prop: models.Property) -> schemas.Property:
        # A soft-deleted parent still satisfies the foreign key but is hidden
        # from reads, so its name is not shown.
        category = prop.category if prop.category is not None and not prop.category.is_deleted else None
        location = prop.location if prop.location is not None and not prop.location.is_deleted else None
        return schemas.Property(
            id=prop.id,
            title=prop.title,
            block_number=prop.block_number,
            parcel_number=prop.parcel_number,
            square_meters=prop.square_meters,
            price=prop.price,
            category_id=prop.category_id,
            category_name=category.name if category else '',
            location_id=prop.location_id,
            location_city_name=location.city_name if location else '',
            is_available=prop.is_available,
            created_date=prop.created_date,
        )
