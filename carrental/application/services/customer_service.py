"""Application service (use case) for Customer operations."""

import logging
from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from carrental.application.interfaces import CustomerLookup, CustomerRepository
from carrental.application.services.row_counts import ensure_single_row
from carrental.domain.entities import Customer
from carrental.domain.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidEntityError,
)
from carrental.infrastructure.database.session import transaction

logger = logging.getLogger(__name__)


class CustomerService(CustomerLookup):
    """Orchestrates customer CRUD logic. Depends on the repository port (DI)."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        repository_factory: Callable[[AsyncSession], CustomerRepository],
    ) -> None:
        if session_factory is None or repository_factory is None:
            raise ConfigurationError(
                "CustomerService needs a session factory and a repository factory"
            )
        self._session_factory = session_factory
        self._repository_factory = repository_factory

    async def create_customer(self, customer: Customer) -> Customer:
        if customer is None:
            raise InvalidArgumentError("customer is None")
        if customer.id is not None:
            raise InvalidArgumentError("customer id is already set")
        _validate(customer)

        async with transaction(
            self._session_factory, f"inserting customer {customer}"
        ) as session:
            created = await self._repository_factory(session).create(customer)

        customer.id = created.id
        logger.info("Created customer %s", customer.id)
        return customer

    async def get_customer(self, customer_id: int) -> Customer:
        if customer_id is None:
            raise InvalidArgumentError("Trying to retrieve customer with None id")
        async with transaction(
            self._session_factory, f"retrieving customer {customer_id}"
        ) as session:
            customer = await self._repository_factory(session).get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)
        return customer

    async def update_customer(self, customer: Customer) -> Customer:
        if customer is None:
            raise InvalidArgumentError("customer is None")
        if customer.id is None:
            raise InvalidArgumentError("customer id is None")
        _validate(customer)

        async with transaction(
            self._session_factory, f"updating customer {customer}"
        ) as session:
            count = await self._repository_factory(session).update(customer)
            ensure_single_row(count, "Customer", customer.id, "update")

        logger.info("Updated customer %s", customer.id)
        return customer

    async def delete_customer(self, customer: Customer) -> None:
        """Delete a customer row.

        Rents referencing the customer are left in place; reading them
        afterwards raises InternalError.
        """
        if customer is None:
            raise InvalidArgumentError("customer is None")
        if customer.id is None:
            raise InvalidArgumentError("customer id is None")

        async with transaction(
            self._session_factory, f"deleting customer {customer}"
        ) as session:
            count = await self._repository_factory(session).delete(customer.id)
            ensure_single_row(count, "Customer", customer.id, "delete")

        logger.info("Deleted customer %s", customer.id)

    async def find_all_customers(self) -> list[Customer]:
        async with transaction(self._session_factory, "retrieving all customers") as session:
            return await self._repository_factory(session).get_all()

    async def find_customers_by_name(self, name: str) -> list[Customer]:
        if name is None:
            raise InvalidArgumentError("name is None")
        async with transaction(
            self._session_factory, f"retrieving customers by name {name}"
        ) as session:
            return await self._repository_factory(session).get_all(name=name)

    async def find_customers_by_surname(self, surname: str) -> list[Customer]:
        if surname is None:
            raise InvalidArgumentError("surname is None")
        async with transaction(
            self._session_factory, f"retrieving customers by surname {surname}"
        ) as session:
            return await self._repository_factory(session).get_all(surname=surname)


def _validate(customer: Customer) -> None:
    if not customer.name:
        raise InvalidEntityError("Name of customer is empty")
    if not customer.surname:
        raise InvalidEntityError("Surname of customer is empty")
    if not customer.phone_number:
        raise InvalidEntityError("Phone number of customer is empty")
