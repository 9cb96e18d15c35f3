"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from carrental.schemas.base import CamelModel


def _normalize_email(v: str) -> str:
    return v.strip().lower()


class LoginRequest(BaseModel):
    """Credentials for login. email is matched case-insensitively."""

    email: str = Field(..., min_length=1, max_length=255, description="Email address")
    password: str = Field(..., min_length=1, max_length=128, description="Password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class RegisterRequest(BaseModel):
    """New customer account."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., min_length=3, max_length=255, description="Email address")
    password: str = Field(..., min_length=1, max_length=128, description="Password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = _normalize_email(v)
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v


class TokenResponse(CamelModel):
    """JWT access token returned after login or registration."""

    access_token: str = Field(..., description="JWT access token")


class RoleClaims(BaseModel):
    id: int
    name: str


class SessionClaims(BaseModel):
    """Decoded token payload attached to authorized requests."""

    id: int
    name: str
    email: str
    image: str | None = None
    role: RoleClaims


class RoleResponse(CamelModel):
    id: int
    name: str


class UserResponse(CamelModel):
    """User record as returned to clients (no password digest)."""

    id: int
    name: str
    email: str
    image: str | None = None
    role_id: int
    role: RoleResponse
    created_at: datetime | None = None
    updated_at: datetime | None = None
