from .base import Base
from .session import (
    create_engine_from_settings,
    create_session_factory,
    transaction,
)
from .models import CarModel, CustomerModel, RentModel

__all__ = [
    "Base",
    "create_engine_from_settings",
    "create_session_factory",
    "transaction",
    "CarModel",
    "CustomerModel",
    "RentModel",
]
