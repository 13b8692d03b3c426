from .car import Car
from .customer import Customer
from .rent import Rent, RentRecord
from .rent_interval import RentInterval

__all__ = [
    "Car",
    "Customer",
    "Rent",
    "RentRecord",
    "RentInterval",
]
