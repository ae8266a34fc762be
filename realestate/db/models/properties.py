from sqlalchemy import Column, String, Numeric, Boolean, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


class Property(SoftDeleteMixin, Base):
    __tablename__ = 'properties'
    title = Column(String(200), nullable=False)
    block_number = Column(String(50), nullable=False, default='')
    parcel_number = Column(String(50), nullable=False, default='')
    square_meters = Column(Numeric(18, 2), nullable=False, default=0)
    price = Column(Numeric(18, 2), nullable=False, default=0)
    is_available = Column(Boolean, nullable=False, default=True)
    category_id = Column(Integer, ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False)
    location_id = Column(Integer, ForeignKey('locations.id', ondelete='RESTRICT'), nullable=False)

    category = relationship("Category", back_populates="properties")
    location = relationship("Location", back_populates="properties")

    __table_args__ = (
        Index('idx_properties_category_id', 'category_id'),
        Index('idx_properties_location_id', 'location_id'),
    )
