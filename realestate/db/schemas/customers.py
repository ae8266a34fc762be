from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field


class CustomerBase(BaseModel):
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    identity_number: str = Field(default='', max_length=20)
    balance: Decimal = Field(default=Decimal('0'), max_digits=18, decimal_places=2)
    phone_number: str = Field(default='', max_length=20)


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CustomerBase):
    pass


class Customer(CustomerBase):
    id: int
    created_date: datetime
    model_config = ConfigDict(from_attributes=True)
