"""
Category service: plain CRUD, no uniqueness rule on names.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from realestate.db import models, schemas
from realestate.db.repositories import Repository


class CategoryService:

    def __init__(self, db: Session, repository: Optional[Repository[models.Category]] = None):
        self.db = db
        self.categories = repository or Repository(db, models.Category)

    def get_all_categories(self) -> List[schemas.Category]:
        return [schemas.Category.model_validate(c) for c in self.categories.get_all()]

    def get_category(self, category_id: int) -> Optional[schemas.Category]:
        category = self.categories.get_by_id(category_id)
        return schemas.Category.model_validate(category) if category else None

    def create_category(self, data: schemas.CategoryCreate) -> schemas.Category:
        created = self.categories.add(models.Category(**data.model_dump()))
        return schemas.Category.model_validate(created)

    def update_category(self, category_id: int, data: schemas.CategoryUpdate) -> Optional[schemas.Category]:
        category = self.categories.get_by_id(category_id)
        if category is None:
            return None
        category.name = data.name
        category.description = data.description
        return schemas.Category.model_validate(self.categories.update(category))

    def delete_category(self, category_id: int) -> bool:
        return self.categories.delete(category_id)
