from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class CategoryBase(BaseModel):
    name: str = Field(max_length=100)
    description: str = Field(default='', max_length=500)


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    pass


class Category(CategoryBase):
    id: int
    created_date: datetime
    model_config = ConfigDict(from_attributes=True)


class LocationBase(BaseModel):
    city_name: str = Field(max_length=100)
    plate_code: str = Field(max_length=10)


class LocationCreate(LocationBase):
    pass


class LocationUpdate(LocationBase):
    pass


class Location(LocationBase):
    id: int
    created_date: datetime
    model_config = ConfigDict(from_attributes=True)
