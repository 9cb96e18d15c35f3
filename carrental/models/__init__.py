"""SQLAlchemy ORM models."""

from carrental.models.base import Base
from carrental.models.car import Car
from carrental.models.role import Role, RoleName
from carrental.models.user import User

__all__ = ["Base", "Car", "Role", "RoleName", "User"]
