"""Evaluation of time clues against a reference instant.

Every clue resolves to exactly one instant or fails with an
``EvaluationError``; nothing is retried and nothing falls back to the
reference instant. Clock fields from every variant go through ``check_hms``
so all of them share the same range rules.

Week arithmetic uses the weekday index (0 for Monday through 6 for Sunday):
the current calendar week starts on the Monday on or before the reference
instant.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from dateutil.relativedelta import relativedelta

from timeclue.configuration.settings import EvaluationConfig
from timeclue.errors import (
    InvalidIsoDateError,
    InvalidTimeAmPmError,
    InvalidTimeError,
    OffsetOutOfRangeError,
)
from timeclue.evaluation.instant import DateTimeBackend, InstantBackend
from timeclue.parsing.models import (
    HMS,
    AmPm,
    Iso,
    Modifier,
    Now,
    Quantifier,
    Relative,
    RelativeDayAt,
    RelativeFuture,
    SameWeekDayAt,
    ShortcutDayAt,
    Time,
    TimeClue,
    Weekday,
)

logger = logging.getLogger(__name__)


MIDNIGHT: HMS = (0, 0, 0)

# One unit of each quantifier. A month is a flat 30 days.
QUANTIFIER_UNITS: Dict[Quantifier, Callable[[int], relativedelta]] = {
    Quantifier.MINUTES: lambda n: relativedelta(minutes=n),
    Quantifier.HOURS: lambda n: relativedelta(hours=n),
    Quantifier.DAYS: lambda n: relativedelta(days=n),
    Quantifier.WEEKS: lambda n: relativedelta(days=7 * n),
    Quantifier.MONTHS: lambda n: relativedelta(days=30 * n),
}


def check_hms(hms: HMS, am_or_pm: Optional[AmPm] = None) -> HMS:
    """Validate a clock reading, applying the am/pm marker.

    PM adds 12 to the hour before checking; AM leaves it unchanged. Hour 12
    gets no special treatment, so "12 pm" is out of range and "12 am" stays
    at noon.

    Returns:
        The 24-hour ``(hour, minute, second)``

    Raises:
        InvalidTimeAmPmError: If out of range and a marker was given
        InvalidTimeError: If out of range without a marker
    """
    hour, minute, second = hms
    hour_24 = hour + 12 if am_or_pm is AmPm.PM else hour
    if hour_24 < 24 and minute < 60 and second < 60:
        return (hour_24, minute, second)
    if am_or_pm is not None:
        raise InvalidTimeAmPmError(hour, minute, second, am_or_pm)
    raise InvalidTimeError(hour, minute, second)


class TimeClueInterpreter:
    """Resolve time clues into instants.

    Instants are only handled through ``backend``, so the interpreter works
    with whatever instant type the backend understands.
    """

    def __init__(self, backend: Optional[InstantBackend] = None) -> None:
        self.backend = backend or DateTimeBackend()

    def evaluate(self, time_clue: TimeClue, config: EvaluationConfig) -> Any:
        """Evaluate ``time_clue`` against ``config.reference_instant``.

        Args:
            time_clue: Parsed clue
            config: Reference instant and roll-forward toggle

        Returns:
            The resolved instant, in the reference instant's zone

        Raises:
            EvaluationError: If the clue does not resolve to a real instant
        """
        now = config.reference_instant
        resolved = self._resolve(time_clue, now, config.roll_forward_if_past)
        logger.debug(f"Evaluated {time_clue.to_dict()} against {now!r}: {resolved!r}")
        return resolved

    def _resolve(self, clue: TimeClue, now: Any, roll_forward_if_past: bool) -> Any:
        if isinstance(clue, Now):
            return now

        if isinstance(clue, Time):
            hour, minute, second = check_hms(clue.hms, clue.am_or_pm)
            resolved = self.backend.with_time(now, hour, minute, second)
            if roll_forward_if_past and resolved < now:
                resolved = self._offset(resolved, 1, Quantifier.DAYS, sign=1)
            return resolved

        if isinstance(clue, Relative):
            return self._offset(now, clue.count, clue.quantifier, sign=-1)

        if isinstance(clue, RelativeFuture):
            return self._offset(now, clue.count, clue.quantifier, sign=1)

        if isinstance(clue, RelativeDayAt):
            hms = check_hms(clue.hms or MIDNIGHT, clue.am_or_pm)
            return self._on_day(now, self._relative_day_offset(now, clue.modifier, clue.weekday), hms)

        if isinstance(clue, SameWeekDayAt):
            hms = check_hms(clue.hms or MIDNIGHT, clue.am_or_pm)
            return self._on_day(now, self._same_week_day_offset(now, clue.weekday), hms)

        if isinstance(clue, ShortcutDayAt):
            hms = check_hms(clue.hms or MIDNIGHT, clue.am_or_pm)
            return self._on_day(now, clue.shortcut_day.day_offset, hms)

        if isinstance(clue, Iso):
            return self._iso(now, clue)

        raise TypeError(f"Unsupported time clue: {type(clue).__name__}")

    # -----------------------------------------------------------------------
    # Private: Day Arithmetic
    # -----------------------------------------------------------------------

    def _same_week_day_offset(self, now: Any, weekday: Weekday) -> int:
        """Days from ``now`` to ``weekday`` within the current calendar week."""
        return weekday.days_from_monday - self.backend.weekday(now).days_from_monday

    def _relative_day_offset(self, now: Any, modifier: Modifier, weekday: Weekday) -> int:
        """Days from ``now`` to the last or next occurrence of ``weekday``.

        The same weekday as ``now`` is never kept: "last sunday" on a Sunday
        is a week back and "next sunday" a week ahead.
        """
        today = self.backend.weekday(now).days_from_monday
        offset = self._same_week_day_offset(now, weekday)
        if modifier is Modifier.LAST:
            return offset if weekday.days_from_monday < today else offset - 7
        return offset if weekday.days_from_monday > today else offset + 7

    def _on_day(self, now: Any, day_offset: int, hms: HMS) -> Any:
        hour, minute, second = hms
        day = self._offset(now, day_offset, Quantifier.DAYS, sign=1)
        return self.backend.with_time(day, hour, minute, second)

    def _offset(self, now: Any, count: int, quantifier: Quantifier, sign: int) -> Any:
        offset = QUANTIFIER_UNITS[quantifier](sign * count)
        try:
            return self.backend.shift(now, offset)
        except OverflowError as exc:
            logger.debug(f"Offset of {count} {quantifier.value} from {now!r} overflows: {exc}")
            raise OffsetOutOfRangeError(count, quantifier) from exc

    def _iso(self, now: Any, clue: Iso) -> Any:
        year, month, day = clue.ymd
        hour, minute, second = clue.hms
        try:
            return self.backend.build(year, month, day, hour, minute, second, like=now)
        except (ValueError, OverflowError) as exc:
            logger.debug(f"Invalid calendar fields {clue.to_dict()}: {exc}")
            raise InvalidIsoDateError(year, month, day, hour, minute, second) from exc


_default_interpreter: Optional[TimeClueInterpreter] = None


def get_interpreter() -> TimeClueInterpreter:
    """Return the shared interpreter instance, building it on first use."""
    global _default_interpreter
    if _default_interpreter is None:
        _default_interpreter = TimeClueInterpreter()
    return _default_interpreter


def evaluate_with_config(time_clue: TimeClue, config: EvaluationConfig) -> Any:
    """Evaluate ``time_clue`` with an explicit configuration."""
    return get_interpreter().evaluate(time_clue, config)


def evaluate_time_clue(
    time_clue: TimeClue,
    now: datetime,
    roll_forward_if_past: bool = False,
) -> datetime:
    """Evaluate ``time_clue`` given reference time ``now``.

    Args:
        time_clue: Parsed clue
        now: Reference instant
        roll_forward_if_past: If true, a bare time of day earlier than ``now``
            is read as that time on the following day (19:43 means tomorrow
            at 19:43 when it is already 20:00). If false, it stays on the
            current day.
    """
    return evaluate_with_config(time_clue, EvaluationConfig.at(now, roll_forward_if_past))


def evaluate(time_clue: TimeClue, now: datetime) -> datetime:
    """Same as ``evaluate_time_clue(time_clue, now, False)``."""
    return evaluate_time_clue(time_clue, now, False)


__all__ = [
    "MIDNIGHT",
    "QUANTIFIER_UNITS",
    "check_hms",
    "TimeClueInterpreter",
    "get_interpreter",
    "evaluate_with_config",
    "evaluate_time_clue",
    "evaluate",
]
