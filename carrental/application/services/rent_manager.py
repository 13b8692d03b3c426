"""Rent Manager — validates and persists rents without overlapping a car's bookings.

A rent write is accepted only if no *other* rent of the same car shares a
calendar day with it. The availability check and the write run as one
atomic unit:

    1. Per-car asyncio lock (CarLockRegistry) — queues writers in this process.
    2. One transaction per call.
    3. ``SELECT ... FOR UPDATE`` on the car row (PostgreSQL), or the database
       write lock SQLite takes at ``BEGIN IMMEDIATE`` — serializes writers in other
       managers and processes.
    4. Availability check against the rents visible to that transaction.
    5. Insert / update, commit, release the lock.

Reads resolve the stored customer and car ids through the injected
CarLookup / CustomerLookup collaborators.
"""

import logging
from collections.abc import Callable
from dataclasses import replace

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from carrental.application.interfaces import CarLookup, CustomerLookup, RentRepository
from carrental.application.services.availability_checker import AvailabilityChecker
from carrental.application.services.car_locks import CarLockRegistry
from carrental.application.services.row_counts import ensure_single_row
from carrental.domain.entities import Car, Customer, Rent, RentRecord
from carrental.domain.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InternalError,
    InvalidArgumentError,
    InvalidEntityError,
)
from carrental.infrastructure.database.session import transaction

logger = logging.getLogger(__name__)


class RentManager:
    """Validates, persists and queries rents with the availability rule enforced.

    All collaborators are required at construction time; a manager is never
    half-configured.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        repository_factory: Callable[[AsyncSession], RentRepository],
        car_lookup: CarLookup,
        customer_lookup: CustomerLookup,
        car_locks: CarLockRegistry | None = None,
    ) -> None:
        missing = [
            name
            for name, value in (
                ("session_factory", session_factory),
                ("repository_factory", repository_factory),
                ("car_lookup", car_lookup),
                ("customer_lookup", customer_lookup),
            )
            if value is None
        ]
        if missing:
            raise ConfigurationError(f"RentManager is missing: {', '.join(missing)}")

        self._session_factory = session_factory
        self._repository_factory = repository_factory
        self._car_lookup = car_lookup
        self._customer_lookup = customer_lookup
        self._car_locks = car_locks or CarLockRegistry()

    # ── Writes ───────────────────────────────────────────────────────

    async def create_rent(self, rent: Rent) -> Rent:
        """Insert a new rent and assign its generated id onto ``rent``."""
        if rent is None:
            raise InvalidArgumentError("rent is None")
        if rent.id is not None:
            raise InvalidArgumentError("rent id is already set")
        _validate(rent)
        record = RentRecord.from_rent(rent)

        async with self._car_locks.hold(record.car_id):
            async with transaction(self._session_factory, f"inserting rent {rent}") as session:
                repository = self._repository_factory(session)
                await _check_references(repository, record)
                await _check_availability(repository, record)
                created = await repository.create(record)
                if created.id is None:
                    raise InternalError(f"No key generated when inserting rent {rent}")

        rent.id = created.id
        logger.info(
            "Created rent %s: car %s for customer %s from %s",
            rent.id, record.car_id, record.customer_id, record.interval,
        )
        return rent

    async def update_rent(self, rent: Rent) -> Rent:
        """Overwrite every field of a stored rent."""
        if rent is None:
            raise InvalidArgumentError("rent is None")
        if rent.id is None:
            raise InvalidArgumentError("rent id is None")
        _validate(rent)
        record = RentRecord.from_rent(rent)

        async with self._car_locks.hold(record.car_id):
            async with transaction(self._session_factory, f"updating rent {rent}") as session:
                repository = self._repository_factory(session)
                if await repository.get_by_id(record.id) is None:
                    raise EntityNotFoundError("Rent", record.id)
                await _check_references(repository, record)
                await _check_availability(repository, record)
                count = await repository.update(record)
                ensure_single_row(count, "Rent", record.id, "update")

        logger.info("Updated rent %s: car %s, %s", rent.id, record.car_id, record.interval)
        return rent

    async def delete_rent(self, rent: Rent) -> None:
        if rent is None:
            raise InvalidArgumentError("rent is None")
        if rent.id is None:
            raise InvalidArgumentError("rent id is None")

        async with transaction(self._session_factory, f"deleting rent {rent.id}") as session:
            count = await self._repository_factory(session).delete(rent.id)
            ensure_single_row(count, "Rent", rent.id, "delete")

        logger.info("Deleted rent %s", rent.id)

    # ── Reads ────────────────────────────────────────────────────────

    async def get_rent(self, rent_id: int) -> Rent:
        if rent_id is None:
            raise InvalidArgumentError("Trying to retrieve rent with None id")
        async with transaction(self._session_factory, f"retrieving rent {rent_id}") as session:
            record = await self._repository_factory(session).get_by_id(rent_id)
        if record is None:
            raise EntityNotFoundError("Rent", rent_id)
        rents = await self._resolve([record])
        return rents[0]

    async def find_all_rents(self) -> list[Rent]:
        async with transaction(self._session_factory, "retrieving all rents") as session:
            records = await self._repository_factory(session).get_all()
        return await self._resolve(records)

    async def find_rents_for_customer(self, customer: Customer) -> list[Rent]:
        if customer is None:
            raise InvalidArgumentError("customer is None")
        if customer.id is None:
            raise InvalidArgumentError("customer id is None")
        async with transaction(
            self._session_factory, f"retrieving rents for customer {customer.id}"
        ) as session:
            records = await self._repository_factory(session).get_all(customer_id=customer.id)
        return await self._resolve(records)

    async def find_rents_for_car(self, car: Car) -> list[Rent]:
        if car is None:
            raise InvalidArgumentError("car is None")
        if car.id is None:
            raise InvalidArgumentError("car id is None")
        async with transaction(
            self._session_factory, f"retrieving rents for car {car.id}"
        ) as session:
            records = await self._repository_factory(session).get_all(car_id=car.id)
        return await self._resolve(records)

    async def _resolve(self, records: list[RentRecord]) -> list[Rent]:
        """Turn stored rows into rents carrying full Car and Customer objects.

        Each referenced entity is looked up once per call. A reference to a
        missing entity means the ledger is corrupt and raises InternalError.
        """
        cars: dict[int, Car] = {}
        customers: dict[int, Customer] = {}
        rents: list[Rent] = []

        for record in records:
            try:
                if record.car_id not in cars:
                    cars[record.car_id] = await self._car_lookup.get_car(record.car_id)
                if record.customer_id not in customers:
                    customers[record.customer_id] = await self._customer_lookup.get_customer(
                        record.customer_id
                    )
            except EntityNotFoundError as exc:
                logger.error("Rent %s references a missing entity: %s", record.id, exc)
                raise InternalError(
                    f"Rent {record.id} references missing {exc.entity_type} {exc.entity_id}"
                ) from exc

            rents.append(
                Rent(
                    id=record.id,
                    customer=replace(customers[record.customer_id]),
                    car=replace(cars[record.car_id]),
                    price_per_day=record.price_per_day,
                    beginning_date=record.beginning_date,
                    expected_return_date=record.expected_return_date,
                    real_return_date=record.real_return_date,
                )
            )
        return rents


def _validate(rent: Rent) -> None:
    """Field-level checks that need no I/O."""
    if rent.customer is None:
        raise InvalidEntityError("rent customer is None")
    if rent.customer.id is None:
        raise InvalidEntityError("rent customer id is None")
    if rent.car is None:
        raise InvalidEntityError("rent car is None")
    if rent.car.id is None:
        raise InvalidEntityError("rent car id is None")
    if rent.price_per_day is None or rent.price_per_day <= 0:
        raise InvalidEntityError("rent price per day must be greater than 0")
    if rent.beginning_date is None:
        raise InvalidEntityError("rent beginning date is None")
    if rent.expected_return_date is not None and rent.expected_return_date < rent.beginning_date:
        raise InvalidEntityError("rent expected return date is before beginning date")
    if rent.real_return_date is not None and rent.real_return_date < rent.beginning_date:
        raise InvalidEntityError("rent real return date is before beginning date")


async def _check_references(repository: RentRepository, record: RentRecord) -> None:
    # Locking the car row doubles as the existence check.
    if not await repository.lock_car(record.car_id):
        raise InvalidEntityError(f"rent car {record.car_id} does not exist")
    if not await repository.customer_exists(record.customer_id):
        raise InvalidEntityError(f"rent customer {record.customer_id} does not exist")


async def _check_availability(repository: RentRepository, record: RentRecord) -> None:
    checker = AvailabilityChecker(repository)
    conflict = await checker.find_conflict(
        record.car_id, record.interval, exclude_rent_id=record.id
    )
    if conflict is not None:
        logger.info(
            "Rejected rent for car %s in %s: overlaps rent %s",
            record.car_id, record.interval, conflict,
        )
        raise InvalidEntityError(
            f"car {record.car_id} already rented in this interval {record.interval} "
            f"(conflicts with rent {conflict})"
        )
