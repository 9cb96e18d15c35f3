"""ORM model for access roles."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from carrental.models.base import Base


class RoleName:
    """Role names recognised by the application."""

    PUBLIC = "PUBLIC"
    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"

    ALL = (PUBLIC, ADMIN, CUSTOMER)


class Role(Base):
    """Named access level. Static reference data seeded by the initial migration."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(32), nullable=False, unique=True)

    users = relationship("User", back_populates="role")
