"""Abstract repository interface (port) for Rent persistence."""

from abc import ABC, abstractmethod

from carrental.domain.entities import RentInterval, RentRecord


class RentRepository(ABC):
    """Port for rent persistence — implemented in the infrastructure layer.

    Works on ``RentRecord`` rows, which carry only the customer and car
    ids. Resolving them into full objects is the service's job.
    """

    @abstractmethod
    async def get_by_id(self, rent_id: int) -> RentRecord | None:
        """Retrieve a single rent row by its ID."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        car_id: int | None = None,
        customer_id: int | None = None,
    ) -> list[RentRecord]:
        """Retrieve rent rows ordered by beginning date, optionally filtered."""
        ...

    @abstractmethod
    async def get_intervals_for_car(
        self,
        car_id: int,
        *,
        exclude_rent_id: int | None = None,
    ) -> list[tuple[int, RentInterval]]:
        """Return ``(rent_id, interval)`` for every rent of the car, oldest first."""
        ...

    @abstractmethod
    async def lock_car(self, car_id: int) -> bool:
        """Lock the car's row until the transaction ends.

        Returns False if no such car exists.
        """
        ...

    @abstractmethod
    async def customer_exists(self, customer_id: int) -> bool:
        ...

    @abstractmethod
    async def create(self, record: RentRecord) -> RentRecord:
        """Persist a new rent row and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, record: RentRecord) -> int:
        """Overwrite a stored rent row. Returns the number of rows changed."""
        ...

    @abstractmethod
    async def delete(self, rent_id: int) -> int:
        """Delete a rent row. Returns the number of rows removed."""
        ...
