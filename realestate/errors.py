"""Domain-level exception hierarchy raised by the service layer.

Business-rule violations derive from ``DomainError``; routers translate them
into 400 responses. A missing row is not an exception: services return
``None`` (or ``False`` for deletes) and routers answer 404.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for business-rule failures."""


class DuplicateEmailError(DomainError):
    """Another active customer already uses this email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email '{email}' already exists.")


class InvalidAmountError(DomainError):
    """Invoice total must be strictly positive."""

    def __init__(self, amount):
        self.amount = amount
        super().__init__("Invoice amount must be greater than zero.")


class InvalidReferenceError(DomainError):
    """A referenced row is missing or soft-deleted."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} does not exist.")


class RetrievalFailureError(RuntimeError):
    """A row written in this request could not be read back.

    Indicates store inconsistency. Not a ``DomainError``: it surfaces as a
    server error.
    """
