from .car_repository import CarRepository
from .customer_repository import CustomerRepository
from .lookups import CarLookup, CustomerLookup
from .rent_repository import RentRepository

__all__ = [
    "CarRepository",
    "CustomerRepository",
    "CarLookup",
    "CustomerLookup",
    "RentRepository",
]
