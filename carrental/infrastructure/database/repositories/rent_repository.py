"""Concrete repository implementation for Rent backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.application.interfaces import RentRepository
from carrental.domain.entities import RentInterval, RentRecord
from carrental.infrastructure.database.models import CarModel, CustomerModel, RentModel


class SQLAlchemyRentRepository(RentRepository):
    """Implements the RentRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_record(self, model: RentModel) -> RentRecord:
        """Map ORM model → persisted rent record."""
        return RentRecord(
            id=model.id,
            customer_id=model.customer_id,
            car_id=model.car_id,
            price_per_day=model.price_per_day,
            beginning_date=model.beginning_date,
            expected_return_date=model.expected_return_date,
            real_return_date=model.real_return_date,
        )

    def _to_model(self, record: RentRecord) -> RentModel:
        """Map rent record → ORM model (for creation)."""
        return RentModel(
            customer_id=record.customer_id,
            car_id=record.car_id,
            price_per_day=record.price_per_day,
            beginning_date=record.beginning_date,
            expected_return_date=record.expected_return_date,
            real_return_date=record.real_return_date,
        )

    async def get_by_id(self, rent_id: int) -> RentRecord | None:
        result = await self._session.get(RentModel, rent_id)
        return self._to_record(result) if result else None

    async def get_all(
        self,
        *,
        car_id: int | None = None,
        customer_id: int | None = None,
    ) -> list[RentRecord]:
        stmt = select(RentModel)

        if car_id is not None:
            stmt = stmt.where(RentModel.car_id == car_id)
        if customer_id is not None:
            stmt = stmt.where(RentModel.customer_id == customer_id)

        stmt = stmt.order_by(RentModel.beginning_date, RentModel.id)
        result = await self._session.execute(stmt)
        return [self._to_record(row) for row in result.scalars().all()]

    async def get_intervals_for_car(
        self,
        car_id: int,
        *,
        exclude_rent_id: int | None = None,
    ) -> list[tuple[int, RentInterval]]:
        stmt = select(
            RentModel.id, RentModel.beginning_date, RentModel.real_return_date
        ).where(RentModel.car_id == car_id)
        if exclude_rent_id is not None:
            stmt = stmt.where(RentModel.id != exclude_rent_id)
        stmt = stmt.order_by(RentModel.beginning_date, RentModel.id)

        result = await self._session.execute(stmt)
        return [
            (rent_id, RentInterval(begin=begin, end=end))
            for rent_id, begin, end in result.all()
        ]

    async def lock_car(self, car_id: int) -> bool:
        # FOR UPDATE is dropped by the SQLite dialect; there BEGIN IMMEDIATE
        # already holds the database write lock.
        stmt = select(CarModel.id).where(CarModel.id == car_id).with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def customer_exists(self, customer_id: int) -> bool:
        stmt = select(CustomerModel.id).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, record: RentRecord) -> RentRecord:
        model = self._to_model(record)
        self._session.add(model)
        await self._session.flush()
        return self._to_record(model)

    async def update(self, record: RentRecord) -> int:
        stmt = (
            update(RentModel)
            .where(RentModel.id == record.id)
            .values(
                customer_id=record.customer_id,
                car_id=record.car_id,
                price_per_day=record.price_per_day,
                beginning_date=record.beginning_date,
                expected_return_date=record.expected_return_date,
                real_return_date=record.real_return_date,
            )
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, rent_id: int) -> int:
        result = await self._session.execute(delete(RentModel).where(RentModel.id == rent_id))
        return result.rowcount
