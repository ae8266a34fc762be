"""
Location service: plain CRUD, city names may repeat.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from realestate.db import models, schemas
from realestate.db.repositories import Repository


class LocationService:

    def __init__(self, db: Session, repository: Optional[Repository[models.Location]] = None):
        self.db = db
        self.locations = repository or Repository(db, models.Location)

    def get_all_locations(self) -> List[schemas.Location]:
        return [schemas.Location.model_validate(loc) for loc in self.locations.get_all()]

    def get_location(self, location_id: int) -> Optional[schemas.Location]:
        location = self.locations.get_by_id(location_id)
        return schemas.Location.model_validate(location) if location else None

    def create_location(self, data: schemas.LocationCreate) -> schemas.Location:
        created = self.locations.add(models.Location(**data.model_dump()))
        return schemas.Location.model_validate(created)

    def update_location(self, location_id: int, data: schemas.LocationUpdate) -> Optional[schemas.Location]:
        location = self.locations.get_by_id(location_id)
        if location is None:
            return None
        location.city_name = data.city_name
        location.plate_code = data.plate_code
        return schemas.Location.model_validate(self.locations.update(location))

    def delete_location(self, location_id: int) -> bool:
        return self.locations.delete(location_id)
