"""Request/response schemas for the car catalogue."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from carrental.schemas.base import CamelModel

CarSize = Literal["SMALL", "MEDIUM", "LARGE"]


class CarCreate(CamelModel):
    """Body for POST /cars (admin only)."""

    name: str = Field(..., min_length=1, max_length=255)
    price: int = Field(..., ge=0, description="Daily rent")
    size: CarSize
    image: str | None = Field(default=None, max_length=1024)


class CarResponse(CamelModel):
    id: int
    name: str
    price: int
    size: CarSize
    image: str | None = None
    is_currently_rented: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Pagination(CamelModel):
    page: int
    page_count: int
    page_size: int
    count: int


class CarListMeta(CamelModel):
    pagination: Pagination


class CarListResponse(CamelModel):
    """Response for GET /cars: one page of cars plus pagination metadata."""

    cars: list[CarResponse]
    meta: CarListMeta
