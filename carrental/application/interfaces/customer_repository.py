"""Abstract repository interface (port) for Customer persistence."""

from abc import ABC, abstractmethod

from carrental.domain.entities import Customer


class CustomerRepository(ABC):
    """Port for customer persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Customer | None:
        """Retrieve a single customer by its ID."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        name: str | None = None,
        surname: str | None = None,
    ) -> list[Customer]:
        """Retrieve all customers, optionally filtered by name or surname."""
        ...

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """Persist a new customer and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, customer: Customer) -> int:
        """Overwrite a stored customer. Returns the number of rows changed."""
        ...

    @abstractmethod
    async def delete(self, customer_id: int) -> int:
        """Delete a customer. Returns the number of rows removed."""
        ...
