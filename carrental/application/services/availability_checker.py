"""Decides whether a car is free for a candidate rental interval."""

from carrental.application.interfaces import RentRepository
from carrental.domain.entities import RentInterval


class AvailabilityChecker:
    """Read-only check of a candidate interval against a car's existing rents.

    The checker sees whatever the repository's transaction sees, so it must
    be built on the same session as the write it guards.
    """

    def __init__(self, repository: RentRepository):
        self._repository = repository

    async def find_conflict(
        self,
        car_id: int,
        interval: RentInterval,
        *,
        exclude_rent_id: int | None = None,
    ) -> int | None:
        """Return the id of the earliest rent of the car overlapping ``interval``.

        ``exclude_rent_id`` is skipped so that a rent being edited does not
        conflict with its own stored version. Returns None if the car is free.
        """
        existing = await self._repository.get_intervals_for_car(
            car_id, exclude_rent_id=exclude_rent_id
        )
        for rent_id, occupied in existing:
            if occupied.overlaps(interval):
                return rent_id
        return None

    async def is_available(
        self,
        car_id: int,
        interval: RentInterval,
        *,
        exclude_rent_id: int | None = None,
    ) -> bool:
        conflict = await self.find_conflict(
            car_id, interval, exclude_rent_id=exclude_rent_id
        )
        return conflict is None
