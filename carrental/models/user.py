"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from carrental.models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    email is stored lowercased; encrypted_password is a bcrypt digest and is
    never part of any response schema.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    encrypted_password = Column(String(255), nullable=False)
    image = Column(String(1024), nullable=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)

    role = relationship("Role", back_populates="users")
