"""Conversion from typed phrase nodes to time clues.

This is the second parsing pass. It reads the raw token text kept by the
grammar and builds the matching ``TimeClue``:
- integer tokens must fit the numeric type of their slot
- weekday, shortcut day, modifier, quantifier and am/pm tokens must be one of
  the known literals (compared case-insensitively)

No range checking happens here. "25:99" is a perfectly good ``Time`` clue;
the interpreter decides whether it exists on a clock.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from timeclue.errors import (
    InvalidIntegerError,
    UnknownAmPmError,
    UnknownModifierError,
    UnknownQuantifierError,
    UnknownShortcutDayError,
    UnknownWeekdayError,
)
from timeclue.parsing.grammar import (
    ClockNode,
    DateNode,
    DayAtNode,
    IsoNode,
    NowNode,
    PhraseGrammar,
    PhraseNode,
    RelativeFutureNode,
    RelativeNode,
    TimeNode,
    get_grammar,
)
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
    ShortcutDay,
    ShortcutDayAt,
    Time,
    TimeClue,
    Weekday,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Token Vocabularies
# ---------------------------------------------------------------------------

WEEKDAYS: Dict[str, Weekday] = {
    "monday": Weekday.MONDAY,
    "mon": Weekday.MONDAY,
    "tuesday": Weekday.TUESDAY,
    "tue": Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "wed": Weekday.WEDNESDAY,
    "thursday": Weekday.THURSDAY,
    "thu": Weekday.THURSDAY,
    "friday": Weekday.FRIDAY,
    "fri": Weekday.FRIDAY,
    "saturday": Weekday.SATURDAY,
    "sat": Weekday.SATURDAY,
    "sunday": Weekday.SUNDAY,
    "sun": Weekday.SUNDAY,
}

SHORTCUT_DAYS: Dict[str, ShortcutDay] = {
    "today": ShortcutDay.TODAY,
    "yesterday": ShortcutDay.YESTERDAY,
    "tomorrow": ShortcutDay.TOMORROW,
}

MODIFIERS: Dict[str, Modifier] = {
    "last": Modifier.LAST,
    "next": Modifier.NEXT,
}

QUANTIFIERS: Dict[str, Quantifier] = {
    "min": Quantifier.MINUTES,
    "h": Quantifier.HOURS,
    "hour": Quantifier.HOURS,
    "hours": Quantifier.HOURS,
    "d": Quantifier.DAYS,
    "day": Quantifier.DAYS,
    "days": Quantifier.DAYS,
    "w": Quantifier.WEEKS,
    "week": Quantifier.WEEKS,
    "weeks": Quantifier.WEEKS,
    "month": Quantifier.MONTHS,
    "months": Quantifier.MONTHS,
}

AM_PM: Dict[str, AmPm] = {
    "am": AmPm.AM,
    "pm": AmPm.PM,
}


# ---------------------------------------------------------------------------
# Numeric Slots
# ---------------------------------------------------------------------------

# Inclusive bounds, by slot kind
UNSIGNED_32 = (0, 2**32 - 1)
UNSIGNED_64 = (0, 2**64 - 1)
SIGNED_32 = (-(2**31), 2**31 - 1)

INTEGER_BOUNDS: Dict[str, Tuple[int, int]] = {
    "hour": UNSIGNED_32,
    "minute": UNSIGNED_32,
    "second": UNSIGNED_32,
    "count": UNSIGNED_64,
    "year": SIGNED_32,
    "month": UNSIGNED_32,
    "day": UNSIGNED_32,
}


def parse_integer(token: str, kind: str) -> int:
    """Read an integer token for the slot ``kind``.

    Raises:
        InvalidIntegerError: If the token is not a decimal integer or does not
            fit the slot's numeric type
    """
    try:
        value = int(token)
    except ValueError as exc:
        raise InvalidIntegerError(token, kind) from exc
    low, high = INTEGER_BOUNDS[kind]
    if not low <= value <= high:
        raise InvalidIntegerError(token, kind)
    return value


def weekday_from(token: str) -> Weekday:
    try:
        return WEEKDAYS[token.lower()]
    except KeyError:
        raise UnknownWeekdayError(token) from None


def shortcut_day_from(token: str) -> ShortcutDay:
    try:
        return SHORTCUT_DAYS[token.lower()]
    except KeyError:
        raise UnknownShortcutDayError(token) from None


def modifier_from(token: str) -> Modifier:
    try:
        return MODIFIERS[token.lower()]
    except KeyError:
        raise UnknownModifierError(token) from None


def quantifier_from(token: str) -> Quantifier:
    try:
        return QUANTIFIERS[token.lower()]
    except KeyError:
        raise UnknownQuantifierError(token) from None


def am_or_pm_from(token: str) -> AmPm:
    try:
        return AM_PM[token.lower()]
    except KeyError:
        raise UnknownAmPmError(token) from None


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TimeClueParser:
    """Turn phrases into time clues.

    Example:
        >>> TimeClueParser().parse("last friday at 9")
        RelativeDayAt(modifier=<Modifier.LAST: 'last'>, weekday=<Weekday.FRIDAY: 4>, hms=(9, 0, 0), am_or_pm=None)
    """

    def __init__(self, grammar: Optional[PhraseGrammar] = None) -> None:
        self.grammar = grammar or get_grammar()

    def parse(self, text: str) -> TimeClue:
        """Parse ``text`` into a time clue.

        Args:
            text: Phrase such as "2 days ago" or "tomorrow at 7pm"

        Returns:
            The time clue the phrase describes

        Raises:
            ParseError: If the phrase is not recognized or carries a token
                that does not fit its slot
        """
        node = self.grammar.parse_tree(text)
        clue = self.convert(node)
        logger.debug(f"Parsed {text!r} as {clue.to_dict()}")
        return clue

    def convert(self, node: PhraseNode) -> TimeClue:
        """Build the time clue for a typed phrase node."""
        if isinstance(node, NowNode):
            return Now()

        if isinstance(node, TimeNode):
            hms, am_or_pm = self._time(node)
            return Time(hms, am_or_pm)

        if isinstance(node, RelativeNode):
            return Relative(
                parse_integer(node.count, "count"),
                quantifier_from(node.quantifier),
            )

        if isinstance(node, RelativeFutureNode):
            return RelativeFuture(
                parse_integer(node.count, "count"),
                quantifier_from(node.quantifier),
            )

        if isinstance(node, DayAtNode):
            return self._day_at(node)

        if isinstance(node, IsoNode):
            ymd = (
                parse_integer(node.year, "year"),
                parse_integer(node.month, "month"),
                parse_integer(node.day, "day"),
            )
            return Iso(ymd, self._clock(node.clock))

        if isinstance(node, DateNode):
            ymd = (
                parse_integer(node.year, "year"),
                parse_integer(node.month, "month"),
                parse_integer(node.day, "day"),
            )
            return Iso(ymd, (0, 0, 0))

        raise TypeError(f"Unsupported phrase node: {type(node).__name__}")

    # -----------------------------------------------------------------------
    # Private: Node Conversion
    # -----------------------------------------------------------------------

    def _clock(self, clock: ClockNode) -> HMS:
        hour = parse_integer(clock.hour, "hour")
        minute = parse_integer(clock.minute, "minute") if clock.minute is not None else 0
        second = parse_integer(clock.second, "second") if clock.second is not None else 0
        return (hour, minute, second)

    def _time(self, node: TimeNode) -> Tuple[HMS, Optional[AmPm]]:
        hms = self._clock(node.clock)
        am_or_pm = am_or_pm_from(node.am_or_pm) if node.am_or_pm is not None else None
        return hms, am_or_pm

    def _day_at(self, node: DayAtNode) -> TimeClue:
        hms: Optional[HMS] = None
        am_or_pm: Optional[AmPm] = None
        if node.time is not None:
            hms, am_or_pm = self._time(node.time)

        if node.shortcut_day is not None:
            return ShortcutDayAt(shortcut_day_from(node.shortcut_day), hms, am_or_pm)

        if node.weekday is None:
            raise TypeError("Day node carries neither a weekday nor a shortcut day")

        if node.modifier is not None:
            return RelativeDayAt(
                modifier_from(node.modifier),
                weekday_from(node.weekday),
                hms,
                am_or_pm,
            )
        return SameWeekDayAt(weekday_from(node.weekday), hms, am_or_pm)


_default_parser: Optional[TimeClueParser] = None


def get_parser() -> TimeClueParser:
    """Return the shared parser instance, building it on first use."""
    global _default_parser
    if _default_parser is None:
        _default_parser = TimeClueParser()
    return _default_parser


def parse_time_clue(text: str) -> TimeClue:
    """Parse time clue from ``text``.

    Provided for callers that want to inspect or evaluate time clues
    themselves; ``timeclue.parse`` does both steps at once.
    """
    return get_parser().parse(text)


__all__ = [
    "WEEKDAYS",
    "SHORTCUT_DAYS",
    "MODIFIERS",
    "QUANTIFIERS",
    "AM_PM",
    "parse_integer",
    "weekday_from",
    "shortcut_day_from",
    "modifier_from",
    "quantifier_from",
    "am_or_pm_from",
    "TimeClueParser",
    "get_parser",
    "parse_time_clue",
]
