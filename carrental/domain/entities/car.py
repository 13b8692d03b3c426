"""Domain entity — a car available for rent."""

from dataclasses import dataclass


@dataclass
class Car:
    """A rentable car.

    ``registration_number`` is unique across all cars. ``id`` stays ``None``
    until the car is persisted.
    """

    brand: str
    registration_number: str
    id: int | None = None
