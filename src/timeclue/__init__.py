"""timeclue: read human time expressions as calendar instants.

Turns phrases such as "last friday at 19:43", "2 days ago", "in 3 h",
"tomorrow at 7pm" or "2020-12-25T19:43:00" into a ``datetime`` relative to a
reference instant. Parsing yields a ``TimeClue``; evaluation resolves it.

Example:
    >>> from datetime import datetime
    >>> from timeclue import parse
    >>> parse("last friday at 19:43", datetime(2020, 12, 24, 23, 45))
    datetime.datetime(2020, 12, 18, 19, 43)
"""

from __future__ import annotations

from datetime import datetime

from timeclue.configuration import EvaluationConfig
from timeclue.errors import (
    EvaluationError,
    GrammarMismatchError,
    InvalidIntegerError,
    InvalidIsoDateError,
    InvalidTimeAmPmError,
    InvalidTimeError,
    OffsetOutOfRangeError,
    ParseError,
    TimeClueError,
    UnknownAmPmError,
    UnknownModifierError,
    UnknownQuantifierError,
    UnknownShortcutDayError,
    UnknownTokenError,
    UnknownWeekdayError,
    handle_error,
)
from timeclue.evaluation import (
    DateTimeBackend,
    InstantBackend,
    TimeClueInterpreter,
    check_hms,
    evaluate,
    evaluate_time_clue,
    evaluate_with_config,
)
from timeclue.parsing import (
    HMS,
    YMD,
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
    TimeClueParser,
    Weekday,
    parse_time_clue,
)


def parse(text: str, reference_instant: datetime) -> datetime:
    """Read ``text`` as an instant relative to ``reference_instant``.

    A bare time of day stays on the reference day even when it is already
    past; use ``parse_with_config`` to roll it forward.

    Raises:
        ParseError: If the phrase is not recognized
        EvaluationError: If it does not resolve to a real instant
    """
    return parse_with_config(text, EvaluationConfig.at(reference_instant))


def parse_with_config(text: str, config: EvaluationConfig) -> datetime:
    """Read ``text`` as an instant using an explicit evaluation config.

    Raises:
        ParseError: If the phrase is not recognized
        EvaluationError: If it does not resolve to a real instant
    """
    time_clue = parse_time_clue(text)
    return evaluate_with_config(time_clue, config)


__all__ = [
    # Entry points
    "parse",
    "parse_with_config",
    "parse_time_clue",
    "evaluate",
    "evaluate_time_clue",
    "evaluate_with_config",
    "check_hms",
    # Configuration
    "EvaluationConfig",
    # Parser / interpreter
    "TimeClueParser",
    "TimeClueInterpreter",
    "InstantBackend",
    "DateTimeBackend",
    # Models
    "HMS",
    "YMD",
    "AmPm",
    "Modifier",
    "Quantifier",
    "ShortcutDay",
    "Weekday",
    "TimeClue",
    "Now",
    "Time",
    "Relative",
    "RelativeFuture",
    "RelativeDayAt",
    "SameWeekDayAt",
    "ShortcutDayAt",
    "Iso",
    # Errors
    "TimeClueError",
    "ParseError",
    "GrammarMismatchError",
    "InvalidIntegerError",
    "UnknownTokenError",
    "UnknownWeekdayError",
    "UnknownShortcutDayError",
    "UnknownModifierError",
    "UnknownQuantifierError",
    "UnknownAmPmError",
    "EvaluationError",
    "InvalidTimeError",
    "InvalidTimeAmPmError",
    "InvalidIsoDateError",
    "OffsetOutOfRangeError",
    "handle_error",
]
