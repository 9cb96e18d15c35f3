"""Car catalogue: paginated listing and admin create/delete."""

import logging
import math

from carrental.core.errors import RecordNotFoundError
from carrental.models import Car
from carrental.schemas.cars import (
    CarCreate,
    CarListMeta,
    CarListResponse,
    CarResponse,
    Pagination,
)
from carrental.services.stores import CarStore

logger = logging.getLogger(__name__)


def list_cars(
    store: CarStore,
    page: int,
    page_size: int,
    size: str | None = None,
) -> CarListResponse:
    """
    Return one page of cars with pagination metadata.

    page_count is 0 when there are no cars; pages past the end are empty.
    """
    count = store.count(size=size)
    cars = store.list_page(page=page, page_size=page_size, size=size)
    return CarListResponse(
        cars=[CarResponse.model_validate(c) for c in cars],
        meta=CarListMeta(
            pagination=Pagination(
                page=page,
                page_count=math.ceil(count / page_size),
                page_size=page_size,
                count=count,
            )
        ),
    )


def get_car(store: CarStore, car_id: int) -> Car:
    car = store.find_by_id(car_id)
    if car is None:
        raise RecordNotFoundError(store.model_name)
    return car


def create_car(store: CarStore, body: CarCreate, created_by: int | None = None) -> Car:
    car = store.create(name=body.name, price=body.price, size=body.size, image=body.image)
    logger.info("Car created: car_id=%s by user_id=%s", car.id, created_by)
    return car


def delete_car(store: CarStore, car_id: int, deleted_by: int | None = None) -> None:
    car = get_car(store, car_id)
    store.delete(car)
    logger.info("Car deleted: car_id=%s by user_id=%s", car_id, deleted_by)
