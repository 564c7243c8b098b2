"""Phrase parsing: grammar, typed parse tree and time clue models."""

from timeclue.parsing.models import (
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
    Weekday,
)
from timeclue.parsing.grammar import PhraseGrammar, parse_tree
from timeclue.parsing.parser import TimeClueParser, parse_time_clue

__all__ = [
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
    # Grammar
    "PhraseGrammar",
    "parse_tree",
    # Parser
    "TimeClueParser",
    "parse_time_clue",
]
