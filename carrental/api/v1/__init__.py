"""API v1 routes."""

from fastapi import APIRouter

from carrental.api.v1 import cars

router = APIRouter()
router.include_router(cars.router, prefix="/cars", tags=["cars"])
