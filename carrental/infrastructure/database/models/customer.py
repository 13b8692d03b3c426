"""SQLAlchemy ORM model for the Customer entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from carrental.infrastructure.database.base import Base


class CustomerModel(Base):
    """ORM model — maps to the 'customers' table."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    surname: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return f"<CustomerModel(id={self.id}, name='{self.name} {self.surname}')>"
