"""Pydantic request/response schemas."""

from carrental.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RoleClaims,
    RoleResponse,
    SessionClaims,
    TokenResponse,
    UserResponse,
)
from carrental.schemas.cars import (
    CarCreate,
    CarListMeta,
    CarListResponse,
    CarResponse,
    Pagination,
)

__all__ = [
    "CarCreate",
    "CarListMeta",
    "CarListResponse",
    "CarResponse",
    "LoginRequest",
    "Pagination",
    "RegisterRequest",
    "RoleClaims",
    "RoleResponse",
    "SessionClaims",
    "TokenResponse",
    "UserResponse",
]
