"""ORM model for cars offered for rent."""

from sqlalchemy import Boolean, Column, Integer, String

from carrental.models.base import Base, TimestampMixin


class Car(TimestampMixin, Base):
    """A rentable car. price is the daily rent in whole currency units."""

    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    size = Column(String(16), nullable=False, index=True)
    image = Column(String(1024), nullable=True)
    is_currently_rented = Column(Boolean, nullable=False, default=False)
