"""Abstract repository interface (port) for Car persistence."""

from abc import ABC, abstractmethod

from carrental.domain.entities import Car


class CarRepository(ABC):
    """Port for car persistence — implemented in the infrastructure layer.

    A repository is bound to one open transaction; committing is the
    caller's job.
    """

    @abstractmethod
    async def get_by_id(self, car_id: int) -> Car | None:
        """Retrieve a single car by its ID."""
        ...

    @abstractmethod
    async def get_by_registration_number(self, registration_number: str) -> Car | None:
        """Retrieve the car holding the given registration number, if any."""
        ...

    @abstractmethod
    async def get_all(self, *, brand: str | None = None) -> list[Car]:
        """Retrieve all cars, optionally only those of one brand."""
        ...

    @abstractmethod
    async def create(self, car: Car) -> Car:
        """Persist a new car and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, car: Car) -> int:
        """Overwrite a stored car. Returns the number of rows changed."""
        ...

    @abstractmethod
    async def delete(self, car_id: int) -> int:
        """Delete a car. Returns the number of rows removed."""
        ...
