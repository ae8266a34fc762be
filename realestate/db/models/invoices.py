from sqlalchemy import Column, String, Numeric, DateTime, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin, now_utc


class Invoice(SoftDeleteMixin, Base):
    __tablename__ = 'invoices'
    serial_number = Column(String(50), nullable=False)
    total_amount = Column(Numeric(18, 2), nullable=False)
    invoice_date = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    # Free-form label (Pending, Paid, Cancelled...); no transitions are enforced.
    status = Column(String(50), nullable=False)
    customer_id = Column(Integer, ForeignKey('customers.id', ondelete='RESTRICT'), nullable=False)

    customer = relationship("Customer", back_populates="invoices")

    __table_args__ = (
        Index('idx_invoices_customer_id', 'customer_id'),
    )
