"""
Customer service: CRUD with the active-email uniqueness rule.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from realestate.db import models, schemas
from realestate.db.repositories import CustomerRepository
from realestate.errors import DuplicateEmailError

logger = logging.getLogger(__name__)


class CustomerService:
    """Service class for customer operations."""

    def __init__(self, db: Session, repository: Optional[CustomerRepository] = None):
        self.db = db
        self.customers = repository or CustomerRepository(db)

    def get_all_customers(self) -> List[schemas.Customer]:
        return [self._to_schema(c) for c in self.customers.get_all()]

    def get_customer(self, customer_id: int) -> Optional[schemas.Customer]:
        customer = self.customers.get_by_id(customer_id)
        return self._to_schema(customer) if customer else None

    def get_customer_by_email(self, email: str) -> Optional[schemas.Customer]:
        customer = self.customers.get_by_email(email)
        return self._to_schema(customer) if customer else None

    def create_customer(self, data: schemas.CustomerCreate) -> schemas.Customer:
        """Create a customer; raises DuplicateEmailError if the email is taken."""
        if self.customers.email_exists(data.email):
            logger.info("customer_create_rejected: duplicate email %s", data.email)
            raise DuplicateEmailError(data.email)

        customer = models.Customer(**data.model_dump())
        try:
            created = self.customers.add(customer)
        except IntegrityError as e:
            # A concurrent writer won the race; the partial unique index caught it.
            raise DuplicateEmailError(data.email) from e
        return self._to_schema(created)

    def update_customer(self, customer_id: int, data: schemas.CustomerUpdate) -> Optional[schemas.Customer]:
        """Replace all mutable fields; returns None when the customer is missing."""
        customer = self.customers.get_by_id(customer_id)
        if customer is None:
            return None

        if self.customers.email_exists(data.email, exclude_id=customer_id):
            logger.info("customer_update_rejected: duplicate email %s for customer %s", data.email, customer_id)
            raise DuplicateEmailError(data.email)

        for key, value in data.model_dump().items():
            setattr(customer, key, value)
        try:
            updated = self.customers.update(customer)
        except IntegrityError as e:
            raise DuplicateEmailError(data.email) from e
        return self._to_schema(updated)

    def delete_customer(self, customer_id: int) -> bool:
        return self.customers.delete(customer_id)

    @staticmethod
    def _to_schema(customer: models.Customer) -> schemas.Customer:
        return schemas.Customer.model_validate(customer)
