from sqlalchemy import Column, String, Numeric, Index, text
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


class Customer(SoftDeleteMixin, Base):
    __tablename__ = 'customers'
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    identity_number = Column(String(20), nullable=False, default='')
    balance = Column(Numeric(18, 2), nullable=False, default=0)
    phone_number = Column(String(20), nullable=False, default='')

    invoices = relationship("Invoice", back_populates="customer")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    __table_args__ = (
        # Uniqueness only binds active rows so a soft-deleted customer's
        # email can be reused.
        Index(
            'uq_customers_email_active',
            'email',
            unique=True,
            postgresql_where=text('is_deleted = false'),
            sqlite_where=text('is_deleted = 0'),
        ),
    )
