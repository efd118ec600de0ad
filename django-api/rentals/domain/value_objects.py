"""Domain primitives that enforce validity at creation time."""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Self
from uuid import UUID

RENTAL_PERIOD_MONTHS = 1


def add_months(start: date, months: int) -> date:
    """Move ``start`` forward by calendar months, clamping to the month's last day."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


@dataclass(frozen=True)
class RentalId:
    """Public identifier for a Rental."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RentalPeriod:
    """The window an artwork is lent for."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("Rental period must end after it starts")

    @classmethod
    def starting(cls, start: date, months: int = RENTAL_PERIOD_MONTHS) -> Self:
        return cls(start=start, end=add_months(start, months))
