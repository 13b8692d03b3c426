from .car_repository import SQLAlchemyCarRepository
from .customer_repository import SQLAlchemyCustomerRepository
from .rent_repository import SQLAlchemyRentRepository

__all__ = [
    "SQLAlchemyCarRepository",
    "SQLAlchemyCustomerRepository",
    "SQLAlchemyRentRepository",
]
