from .availability_checker import AvailabilityChecker
from .car_locks import CarLockRegistry
from .car_service import CarService
from .customer_service import CustomerService
from .rent_manager import RentManager

__all__ = [
    "AvailabilityChecker",
    "CarLockRegistry",
    "CarService",
    "CustomerService",
    "RentManager",
]
