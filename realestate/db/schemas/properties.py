from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field


class PropertyBase(BaseModel):
    title: str = Field(max_length=200)
    block_number: str = Field(default='', max_length=50)
    parcel_number: str = Field(default='', max_length=50)
    square_meters: Decimal = Field(default=Decimal('0'), max_digits=18, decimal_places=2)
    price: Decimal = Field(default=Decimal('0'), max_digits=18, decimal_places=2)
    category_id: int
    location_id: int
    is_available: bool = True


class PropertyCreate(PropertyBase):
    pass


class PropertyUpdate(PropertyBase):
    pass


class Property(PropertyBase):
    """Transfer shape; category/location names are copied from the joined rows."""
    id: int
    category_name: str = ''
    location_city_name: str = ''
    created_date: datetime
