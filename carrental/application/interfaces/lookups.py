"""Collaborator ports the rent manager uses to resolve rent references."""

from abc import ABC, abstractmethod

from carrental.domain.entities import Car, Customer


class CarLookup(ABC):
    """Resolves a car id into a ``Car``."""

    @abstractmethod
    async def get_car(self, car_id: int) -> Car:
        """Return the car, raising ``EntityNotFoundError`` if it does not exist."""
        ...


class CustomerLookup(ABC):
    """Resolves a customer id into a ``Customer``."""

    @abstractmethod
    async def get_customer(self, customer_id: int) -> Customer:
        """Return the customer, raising ``EntityNotFoundError`` if it does not exist."""
        ...
