"""SQLAlchemy ORM model for the Car entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from carrental.infrastructure.database.base import Base


class CarModel(Base):
    """ORM model — maps to the 'cars' table."""

    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    brand: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    registration_number: Mapped[str] = mapped_column(
        String(32), nullable=False, unique=True
    )

    def __repr__(self) -> str:
        return f"<CarModel(id={self.id}, registration='{self.registration_number}')>"
