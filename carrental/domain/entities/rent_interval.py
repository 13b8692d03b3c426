"""Value object for the date interval a car is occupied by a rent."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class RentInterval:
    """Closed date interval ``[begin, end]``.

    ``end`` of ``None`` means the car has not been returned yet and the
    interval is unbounded. Both boundaries are inclusive: a car returned on
    a given day cannot be rented again on that same day.
    """

    begin: date
    end: date | None = None

    def __post_init__(self) -> None:
        if self.end is not None and self.end < self.begin:
            raise ValueError(f"end must not precede begin: {self.end} < {self.begin}")

    @property
    def is_open(self) -> bool:
        return self.end is None

    def overlaps(self, other: "RentInterval") -> bool:
        """True if both intervals share at least one calendar day."""
        starts_before_other_ends = other.end is None or self.begin <= other.end
        other_starts_before_self_ends = self.end is None or other.begin <= self.end
        return starts_before_other_ends and other_starts_before_self_ends

    def contains(self, day: date) -> bool:
        return self.begin <= day and (self.end is None or day <= self.end)

    def __str__(self) -> str:
        end = self.end.isoformat() if self.end is not None else "open"
        return f"[{self.begin.isoformat()}, {end}]"
