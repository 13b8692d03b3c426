"""Application service (use case) for Car operations."""

import logging
from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from carrental.application.interfaces import CarLookup, CarRepository
from carrental.application.services.row_counts import ensure_single_row
from carrental.domain.entities import Car
from carrental.domain.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidEntityError,
)
from carrental.infrastructure.database.session import transaction

logger = logging.getLogger(__name__)


class CarService(CarLookup):
    """Stores cars and keeps registration numbers unique.

    Every call runs in its own transaction opened from ``session_factory``;
    ``repository_factory`` binds a CarRepository to that transaction.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        repository_factory: Callable[[AsyncSession], CarRepository],
    ) -> None:
        if session_factory is None or repository_factory is None:
            raise ConfigurationError("CarService needs a session factory and a repository factory")
        self._session_factory = session_factory
        self._repository_factory = repository_factory

    async def create_car(self, car: Car) -> Car:
        if car is None:
            raise InvalidArgumentError("car is None")
        if car.id is not None:
            raise InvalidArgumentError("car id is already set")
        _validate(car)

        async with transaction(self._session_factory, f"inserting car {car}") as session:
            repository = self._repository_factory(session)
            await _ensure_registration_unique(repository, car)
            try:
                created = await repository.create(car)
            except IntegrityError as exc:
                raise _duplicate_registration(car) from exc

        car.id = created.id
        logger.info("Created car %s (%s)", car.id, car.registration_number)
        return car

    async def get_car(self, car_id: int) -> Car:
        if car_id is None:
            raise InvalidArgumentError("Trying to retrieve car with None id")
        async with transaction(self._session_factory, f"retrieving car {car_id}") as session:
            car = await self._repository_factory(session).get_by_id(car_id)
        if car is None:
            raise EntityNotFoundError("Car", car_id)
        return car

    async def update_car(self, car: Car) -> Car:
        if car is None:
            raise InvalidArgumentError("car is None")
        if car.id is None:
            raise InvalidArgumentError("car id is None")
        _validate(car)

        async with transaction(self._session_factory, f"updating car {car}") as session:
            repository = self._repository_factory(session)
            await _ensure_registration_unique(repository, car)
            try:
                count = await repository.update(car)
            except IntegrityError as exc:
                raise _duplicate_registration(car) from exc
            ensure_single_row(count, "Car", car.id, "update")

        logger.info("Updated car %s", car.id)
        return car

    async def delete_car(self, car: Car) -> None:
        """Delete a car row.

        Rents referencing the car are left in place; reading them afterwards
        raises InternalError.
        """
        if car is None:
            raise InvalidArgumentError("car is None")
        if car.id is None:
            raise InvalidArgumentError("car id is None")

        async with transaction(self._session_factory, f"deleting car {car}") as session:
            count = await self._repository_factory(session).delete(car.id)
            ensure_single_row(count, "Car", car.id, "delete")

        logger.info("Deleted car %s", car.id)

    async def find_all_cars(self) -> list[Car]:
        async with transaction(self._session_factory, "retrieving all cars") as session:
            return await self._repository_factory(session).get_all()

    async def find_cars_by_brand(self, brand: str) -> list[Car]:
        if brand is None:
            raise InvalidArgumentError("brand is None")
        async with transaction(self._session_factory, f"retrieving cars by brand {brand}") as session:
            return await self._repository_factory(session).get_all(brand=brand)


def _validate(car: Car) -> None:
    if not car.brand:
        raise InvalidEntityError("car brand is empty")
    if not car.registration_number:
        raise InvalidEntityError("car registration number is empty")


async def _ensure_registration_unique(repository: CarRepository, car: Car) -> None:
    holder = await repository.get_by_registration_number(car.registration_number)
    if holder is not None and holder.id != car.id:
        raise _duplicate_registration(car)


def _duplicate_registration(car: Car) -> InvalidEntityError:
    return InvalidEntityError(
        f"Car with registration number '{car.registration_number}' already exists"
    )
