"""Calendar instant primitives used by the interpreter.

The interpreter never reads or rebuilds ``datetime`` fields itself. It goes
through an ``InstantBackend`` which provides the handful of operations it needs:
- weekday lookup
- shifting by a calendar offset
- replacing the time-of-day or calendar-date fields
- building an instant from explicit fields, with validation

``DateTimeBackend`` is the stock implementation over ``datetime`` values
(naive or timezone-aware). Ordering and equality come from the instant type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from dateutil.relativedelta import relativedelta

from timeclue.parsing.models import Weekday


class InstantBackend(ABC):
    """Capabilities the interpreter requires from a date-time library."""

    @abstractmethod
    def weekday(self, instant: Any) -> Weekday:
        """Return the weekday of ``instant``."""

    @abstractmethod
    def shift(self, instant: Any, offset: relativedelta) -> Any:
        """Return ``instant`` moved by ``offset`` (negative offsets go back).

        Raises:
            OverflowError: If the result leaves the representable range
        """

    @abstractmethod
    def with_time(self, instant: Any, hour: int, minute: int, second: int) -> Any:
        """Return ``instant`` with its clock replaced, sub-second part cleared.

        Raises:
            ValueError: If the fields do not form a valid time of day
        """

    @abstractmethod
    def with_date(self, instant: Any, year: int, month: int, day: int) -> Any:
        """Return ``instant`` moved onto another calendar date, same clock.

        Raises:
            ValueError: If the fields do not form a valid calendar date
        """

    def build(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        like: Any,
    ) -> Any:
        """Construct an instant from explicit fields in the zone of ``like``.

        Raises:
            ValueError: If the fields do not form a real date-time
        """
        return self.with_time(self.with_date(like, year, month, day), hour, minute, second)


class DateTimeBackend(InstantBackend):
    """``InstantBackend`` for stdlib ``datetime`` values.

    Arithmetic is wall-clock arithmetic: a timezone-aware instant keeps its
    ``tzinfo`` and shifting by one day keeps the clock reading.
    """

    def weekday(self, instant: datetime) -> Weekday:
        return Weekday(instant.weekday())

    def shift(self, instant: datetime, offset: relativedelta) -> datetime:
        try:
            return instant + offset
        except ValueError as exc:
            # dateutil reports an out-of-range year as ValueError
            raise OverflowError(str(exc)) from exc

    def with_time(self, instant: datetime, hour: int, minute: int, second: int) -> datetime:
        return instant.replace(hour=hour, minute=minute, second=second, microsecond=0)

    def with_date(self, instant: datetime, year: int, month: int, day: int) -> datetime:
        return instant.replace(year=year, month=month, day=day)


__all__ = [
    "Weekday",
    "InstantBackend",
    "DateTimeBackend",
]
