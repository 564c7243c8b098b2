"""Time clue data models.

A time clue is the structured reading of a recognized phrase. It records
*what kind* of time expression was given together with the raw numeric and
enumerated fields, and nothing else:
- clock and calendar fields are unvalidated (``(25, 99, 0)`` is a legal HMS)
- clues are frozen and hold no reference to the grammar that produced them
- evaluation against a reference instant lives in ``timeclue.evaluation``
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple

HMS = Tuple[int, int, int]
YMD = Tuple[int, int, int]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Weekday(IntEnum):
    """Day of the week, valued by its zero-based position from Monday."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def days_from_monday(self) -> int:
        return int(self)

    def __str__(self) -> str:
        return self.name.lower()


class AmPm(str, Enum):
    """Twelve-hour clock marker."""

    AM = "am"
    PM = "pm"

    def __str__(self) -> str:
        return self.value


class Modifier(str, Enum):
    """Direction applied to a weekday: the previous or the following one."""

    LAST = "last"
    NEXT = "next"


class Quantifier(str, Enum):
    """Unit of a relative offset.

    A month is a fixed 30 days, not a calendar month.
    """

    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"


class ShortcutDay(str, Enum):
    """Named day relative to the reference instant."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"

    @property
    def day_offset(self) -> int:
        return _SHORTCUT_DAY_OFFSETS[self]


_SHORTCUT_DAY_OFFSETS = {
    ShortcutDay.TODAY: 0,
    ShortcutDay.YESTERDAY: -1,
    ShortcutDay.TOMORROW: 1,
}


def _enum_value(member: Optional[Enum]) -> Optional[str]:
    if member is None:
        return None
    if isinstance(member, Weekday):
        return str(member)
    return member.value


# ---------------------------------------------------------------------------
# Time Clues
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeClue:
    """Base of the closed family of time clue variants."""

    kind = "time_clue"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and inspection."""
        return {"kind": self.kind}


@dataclass(frozen=True)
class Now(TimeClue):
    """The reference instant itself: "now"."""

    kind = "now"


@dataclass(frozen=True)
class Time(TimeClue):
    """Time without date: "19:43:42", "18", "7pm", "3am"."""

    hms: HMS
    am_or_pm: Optional[AmPm] = None

    kind = "time"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "hms": list(self.hms),
            "am_or_pm": _enum_value(self.am_or_pm),
        }


@dataclass(frozen=True)
class Relative(TimeClue):
    """Offset into the past: "4 min ago"."""

    count: int
    quantifier: Quantifier

    kind = "relative"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "count": self.count,
            "quantifier": self.quantifier.value,
        }


@dataclass(frozen=True)
class RelativeFuture(TimeClue):
    """Offset into the future: "in 4 min"."""

    count: int
    quantifier: Quantifier

    kind = "relative_future"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "count": self.count,
            "quantifier": self.quantifier.value,
        }


@dataclass(frozen=True)
class RelativeDayAt(TimeClue):
    """Last/next weekday at an optional time: "last friday at 12"."""

    modifier: Modifier
    weekday: Weekday
    hms: Optional[HMS] = None
    am_or_pm: Optional[AmPm] = None

    kind = "relative_day_at"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "modifier": self.modifier.value,
            "weekday": _enum_value(self.weekday),
            "hms": list(self.hms) if self.hms is not None else None,
            "am_or_pm": _enum_value(self.am_or_pm),
        }


@dataclass(frozen=True)
class SameWeekDayAt(TimeClue):
    """Weekday of the current calendar week: "monday at 4"."""

    weekday: Weekday
    hms: Optional[HMS] = None
    am_or_pm: Optional[AmPm] = None

    kind = "same_week_day_at"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "weekday": _enum_value(self.weekday),
            "hms": list(self.hms) if self.hms is not None else None,
            "am_or_pm": _enum_value(self.am_or_pm),
        }


@dataclass(frozen=True)
class ShortcutDayAt(TimeClue):
    """Named day at an optional time: "yesterday at 4", "tomorrow"."""

    shortcut_day: ShortcutDay
    hms: Optional[HMS] = None
    am_or_pm: Optional[AmPm] = None

    kind = "shortcut_day_at"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "shortcut_day": self.shortcut_day.value,
            "hms": list(self.hms) if self.hms is not None else None,
            "am_or_pm": _enum_value(self.am_or_pm),
        }


@dataclass(frozen=True)
class Iso(TimeClue):
    """Explicit calendar date and time: "2020-12-25T19:43:00", "25/12/2020"."""

    ymd: YMD
    hms: HMS = (0, 0, 0)

    kind = "iso"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "ymd": list(self.ymd),
            "hms": list(self.hms),
        }


__all__ = [
    "HMS",
    "YMD",
    "Weekday",
    "AmPm",
    "Modifier",
    "Quantifier",
    "ShortcutDay",
    "TimeClue",
    "Now",
    "Time",
    "Relative",
    "RelativeFuture",
    "RelativeDayAt",
    "SameWeekDayAt",
    "ShortcutDayAt",
    "Iso",
]
