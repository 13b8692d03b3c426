"""Concrete repository implementation for Customer backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.application.interfaces import CustomerRepository
from carrental.domain.entities import Customer
from carrental.infrastructure.database.models import CustomerModel


class SQLAlchemyCustomerRepository(CustomerRepository):
    """Implements the CustomerRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Map ORM model → domain entity."""
        return Customer(
            id=model.id,
            name=model.name,
            surname=model.surname,
            phone_number=model.phone_number,
        )

    def _to_model(self, entity: Customer) -> CustomerModel:
        """Map domain entity → ORM model (for creation)."""
        return CustomerModel(
            name=entity.name,
            surname=entity.surname,
            phone_number=entity.phone_number,
        )

    async def get_by_id(self, customer_id: int) -> Customer | None:
        result = await self._session.get(CustomerModel, customer_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        name: str | None = None,
        surname: str | None = None,
    ) -> list[Customer]:
        stmt = select(CustomerModel)

        if name is not None:
            stmt = stmt.where(CustomerModel.name == name)
        if surname is not None:
            stmt = stmt.where(CustomerModel.surname == surname)

        stmt = stmt.order_by(CustomerModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, customer: Customer) -> Customer:
        model = self._to_model(customer)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, customer: Customer) -> int:
        stmt = (
            update(CustomerModel)
            .where(CustomerModel.id == customer.id)
            .values(
                name=customer.name,
                surname=customer.surname,
                phone_number=customer.phone_number,
            )
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, customer_id: int) -> int:
        stmt = delete(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        return result.rowcount
