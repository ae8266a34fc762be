from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


class Category(SoftDeleteMixin, Base):
    __tablename__ = 'categories'
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False, default='')

    properties = relationship("Property", back_populates="category")


class Location(SoftDeleteMixin, Base):
    __tablename__ = 'locations'
    city_name = Column(String(100), nullable=False)
    plate_code = Column(String(10), nullable=False)

    properties = relationship("Property", back_populates="location")
