"""Dependency wiring — builds fully-configured services on top of the database."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from carrental.application.services import (
    CarLockRegistry,
    CarService,
    CustomerService,
    RentManager,
)
from carrental.infrastructure.database import Base
from carrental.infrastructure.database.repositories import (
    SQLAlchemyCarRepository,
    SQLAlchemyCustomerRepository,
    SQLAlchemyRentRepository,
)


@dataclass(frozen=True)
class CarRentalServices:
    """The services of one ledger, sharing a session factory."""

    cars: CarService
    customers: CustomerService
    rents: RentManager


async def init_database(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def build_services(
    session_factory: async_sessionmaker[AsyncSession],
    car_locks: CarLockRegistry | None = None,
) -> CarRentalServices:
    """Wire the SQLAlchemy repositories into the application services."""
    cars = CarService(session_factory, SQLAlchemyCarRepository)
    customers = CustomerService(session_factory, SQLAlchemyCustomerRepository)
    rents = RentManager(
        session_factory,
        SQLAlchemyRentRepository,
        car_lookup=cars,
        customer_lookup=customers,
        car_locks=car_locks,
    )
    return CarRentalServices(cars=cars, customers=customers, rents=rents)
