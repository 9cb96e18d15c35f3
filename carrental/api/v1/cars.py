"""Car catalogue endpoints: public listing/detail, admin create/delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from carrental.api.v1.auth import authorize
from carrental.core.config import Settings, get_settings
from carrental.core.database import get_db
from carrental.models import RoleName
from carrental.schemas.auth import SessionClaims
from carrental.schemas.cars import CarCreate, CarListResponse, CarResponse, CarSize
from carrental.services.cars import create_car, delete_car, get_car, list_cars
from carrental.services.stores import CarStore

router = APIRouter()


def get_car_store(db: Annotated[Session, Depends(get_db)]) -> CarStore:
    return CarStore(db)


@router.get("", response_model=CarListResponse)
def get_cars(
    store: Annotated[CarStore, Depends(get_car_store)],
    settings: Annotated[Settings, Depends(get_settings)],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int | None, Query(alias="pageSize", ge=1)] = None,
    size: CarSize | None = None,
) -> CarListResponse:
    """
    List cars one page at a time, ordered by id.

    pageSize defaults to CARS_DEFAULT_PAGE_SIZE and may not exceed CARS_MAX_PAGE_SIZE.
    """
    if page_size is None:
        page_size = settings.CARS_DEFAULT_PAGE_SIZE
    if page_size > settings.CARS_MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"pageSize must be at most {settings.CARS_MAX_PAGE_SIZE}.",
        )
    return list_cars(store, page=page, page_size=page_size, size=size)


@router.get("/{car_id}", response_model=CarResponse)
def get_car_detail(
    car_id: int,
    store: Annotated[CarStore, Depends(get_car_store)],
) -> CarResponse:
    return CarResponse.model_validate(get_car(store, car_id))


@router.post("", response_model=CarResponse, status_code=status.HTTP_201_CREATED)
def post_car(
    body: CarCreate,
    store: Annotated[CarStore, Depends(get_car_store)],
    admin: Annotated[SessionClaims, Depends(authorize(RoleName.ADMIN))],
) -> CarResponse:
    """Add a car to the catalogue (ADMIN only)."""
    return CarResponse.model_validate(create_car(store, body, created_by=admin.id))


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_car(
    car_id: int,
    store: Annotated[CarStore, Depends(get_car_store)],
    admin: Annotated[SessionClaims, Depends(authorize(RoleName.ADMIN))],
) -> Response:
    """Delete a car (ADMIN only)."""
    delete_car(store, car_id, deleted_by=admin.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
