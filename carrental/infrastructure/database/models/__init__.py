from .car import CarModel
from .customer import CustomerModel
from .rent import RentModel

__all__ = [
    "CarModel",
    "CustomerModel",
    "RentModel",
]
