"""Domain entity — a customer who rents cars."""

from dataclasses import dataclass


@dataclass
class Customer:
    """A customer. No field is unique across customers."""

    name: str
    surname: str
    phone_number: str
    id: int | None = None
