"""SQLAlchemy ORM model for the Rent entity."""

from datetime import date

from sqlalchemy import Date, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from carrental.infrastructure.database.base import Base


class RentModel(Base):
    """ORM model — maps to the 'rents' table.

    ``customer_id`` and ``car_id`` reference the 'customers' and 'cars'
    tables without database foreign keys; the rent manager checks them.
    """

    __tablename__ = "rents"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(Integer, nullable=False)
    car_id: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_day: Mapped[int] = mapped_column(Integer, nullable=False)
    beginning_date: Mapped[date] = mapped_column(Date, nullable=False)
    expected_return_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    real_return_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        Index("ix_rents_car_beginning", "car_id", "beginning_date"),
        Index("ix_rents_customer", "customer_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<RentModel(id={self.id}, car={self.car_id}, "
            f"customer={self.customer_id}, from={self.beginning_date})>"
        )
