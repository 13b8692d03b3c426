"""Concrete repository implementation for Car backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.application.interfaces import CarRepository
from carrental.domain.entities import Car
from carrental.infrastructure.database.models import CarModel


class SQLAlchemyCarRepository(CarRepository):
    """Implements the CarRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: CarModel) -> Car:
        """Map ORM model → domain entity."""
        return Car(
            id=model.id,
            brand=model.brand,
            registration_number=model.registration_number,
        )

    def _to_model(self, entity: Car) -> CarModel:
        """Map domain entity → ORM model (for creation)."""
        return CarModel(
            brand=entity.brand,
            registration_number=entity.registration_number,
        )

    async def get_by_id(self, car_id: int) -> Car | None:
        result = await self._session.get(CarModel, car_id)
        return self._to_entity(result) if result else None

    async def get_by_registration_number(self, registration_number: str) -> Car | None:
        stmt = select(CarModel).where(CarModel.registration_number == registration_number)
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def get_all(self, *, brand: str | None = None) -> list[Car]:
        stmt = select(CarModel)
        if brand is not None:
            stmt = stmt.where(CarModel.brand == brand)
        stmt = stmt.order_by(CarModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, car: Car) -> Car:
        model = self._to_model(car)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, car: Car) -> int:
        stmt = (
            update(CarModel)
            .where(CarModel.id == car.id)
            .values(brand=car.brand, registration_number=car.registration_number)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, car_id: int) -> int:
        result = await self._session.execute(delete(CarModel).where(CarModel.id == car_id))
        return result.rowcount
