"""Domain entity — a rent linking one car to one customer for a period."""

from dataclasses import dataclass
from datetime import date

from .car import Car
from .customer import Customer
from .rent_interval import RentInterval


@dataclass
class Rent:
    """A rental of ``car`` by ``customer`` starting on ``beginning_date``.

    Only the customer and car ids are persisted; the full objects are
    resolved again when a rent is read back. A rent with no
    ``real_return_date`` is *open*: the car is still out and the rent
    occupies it indefinitely.
    """

    customer: Customer | None
    car: Car | None
    price_per_day: int
    beginning_date: date | None
    expected_return_date: date | None = None
    real_return_date: date | None = None
    id: int | None = None

    @property
    def is_open(self) -> bool:
        return self.real_return_date is None

    @property
    def interval(self) -> RentInterval:
        """Days the car is occupied, ending at the real return date."""
        return RentInterval(begin=self.beginning_date, end=self.real_return_date)

    def close(self, returned_on: date) -> None:
        """Record the day the car came back."""
        self.real_return_date = returned_on


@dataclass
class RentRecord:
    """Persisted shape of a rent: references are kept as ids only."""

    customer_id: int
    car_id: int
    price_per_day: int
    beginning_date: date
    expected_return_date: date | None = None
    real_return_date: date | None = None
    id: int | None = None

    @property
    def interval(self) -> RentInterval:
        return RentInterval(begin=self.beginning_date, end=self.real_return_date)

    @classmethod
    def from_rent(cls, rent: Rent) -> "RentRecord":
        """Flatten a validated rent into its persisted shape."""
        return cls(
            id=rent.id,
            customer_id=rent.customer.id,
            car_id=rent.car.id,
            price_per_day=rent.price_per_day,
            beginning_date=rent.beginning_date,
            expected_return_date=rent.expected_return_date,
            real_return_date=rent.real_return_date,
        )
