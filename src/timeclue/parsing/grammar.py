"""Phrase grammar and typed parse tree.

The surface syntax is described once, as a lark grammar. Parsing runs in two
passes:
1. lark recognizes the text and yields a generic rule tree
2. ``PhraseTreeBuilder`` turns that tree into one typed node per grammar rule

Nodes keep the raw token text. Turning that text into numbers and enumerated
values (and rejecting what does not fit) is the job of
``timeclue.parsing.parser``.

Matching is case-insensitive and whitespace between tokens is optional, so
"2 min ago", "2min ago" and "2minago" read the same.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from timeclue.errors import GrammarMismatchError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

# The am/pm slot takes any letter followed by "m" so that a misspelled marker
# reaches the conversion pass as an unknown token instead of a mismatch.
PHRASE_GRAMMAR = r"""
start: now
     | time
     | relative
     | relative_future
     | day_at
     | iso
     | date

now: "now"i

time: clock AM_OR_PM?
clock: INT (":" INT (":" INT)?)?

relative: INT QUANTIFIER "ago"i
relative_future: "in"i INT QUANTIFIER

day_at: (MODIFIER WEEKDAY | WEEKDAY | SHORTCUT_DAY) ("at"i time)?

iso: YEAR "-" DIGITS "-" DIGITS "t"i clock
date: DIGITS "/" DIGITS "/" YEAR
    | DIGITS "-" DIGITS "-" YEAR

INT: /[0-9]+/
YEAR: /[0-9]{4}/
DIGITS: /[0-9]{1,2}/

AM_OR_PM: /[a-z]m/i
MODIFIER: "last"i | "next"i
SHORTCUT_DAY: "today"i | "yesterday"i | "tomorrow"i
QUANTIFIER: "min"i
          | "hours"i | "hour"i | "h"i
          | "days"i | "day"i | "d"i
          | "weeks"i | "week"i | "w"i
          | "months"i | "month"i
WEEKDAY: "monday"i | "mon"i
       | "tuesday"i | "tue"i
       | "wednesday"i | "wed"i
       | "thursday"i | "thu"i
       | "friday"i | "fri"i
       | "saturday"i | "sat"i
       | "sunday"i | "sun"i

%import common.WS
%ignore WS
"""


# ---------------------------------------------------------------------------
# Typed Parse Tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NowNode:
    """``now``"""


@dataclass(frozen=True)
class ClockNode:
    """``H``, ``H:M`` or ``H:M:S``; absent fields are ``None``."""

    hour: str
    minute: Optional[str] = None
    second: Optional[str] = None


@dataclass(frozen=True)
class TimeNode:
    """A clock reading with an optional am/pm marker."""

    clock: ClockNode
    am_or_pm: Optional[str] = None


@dataclass(frozen=True)
class RelativeNode:
    """``<count> <unit> ago``"""

    count: str
    quantifier: str


@dataclass(frozen=True)
class RelativeFutureNode:
    """``in <count> <unit>``"""

    count: str
    quantifier: str


@dataclass(frozen=True)
class DayAtNode:
    """A day reference with an optional time.

    Exactly one of three shapes: ``modifier`` + ``weekday``, ``weekday``
    alone, or ``shortcut_day``.
    """

    modifier: Optional[str] = None
    weekday: Optional[str] = None
    shortcut_day: Optional[str] = None
    time: Optional[TimeNode] = None


@dataclass(frozen=True)
class IsoNode:
    """``YYYY-MM-DDTclock``"""

    year: str
    month: str
    day: str
    clock: ClockNode


@dataclass(frozen=True)
class DateNode:
    """``DD/MM/YYYY`` or ``DD-MM-YYYY``"""

    day: str
    month: str
    year: str


PhraseNode = Union[
    NowNode,
    TimeNode,
    RelativeNode,
    RelativeFutureNode,
    DayAtNode,
    IsoNode,
    DateNode,
]


class PhraseTreeBuilder(Transformer):
    """Transform the lark rule tree into typed phrase nodes."""

    def start(self, children):
        return children[0]

    def now(self, children):
        return NowNode()

    def clock(self, children):
        fields = [str(token) for token in children]
        return ClockNode(*fields)

    def time(self, children):
        clock = children[0]
        am_or_pm = str(children[1]) if len(children) > 1 else None
        return TimeNode(clock=clock, am_or_pm=am_or_pm)

    def relative(self, children):
        count, quantifier = children
        return RelativeNode(count=str(count), quantifier=str(quantifier))

    def relative_future(self, children):
        count, quantifier = children
        return RelativeFutureNode(count=str(count), quantifier=str(quantifier))

    def day_at(self, children):
        fields = {}
        for child in children:
            if isinstance(child, TimeNode):
                fields["time"] = child
            elif isinstance(child, Token):
                fields[child.type.lower()] = str(child)
        return DayAtNode(**fields)

    def iso(self, children):
        year, month, day, clock = children
        return IsoNode(year=str(year), month=str(month), day=str(day), clock=clock)

    def date(self, children):
        day, month, year = children
        return DateNode(day=str(day), month=str(month), year=str(year))


# ---------------------------------------------------------------------------
# Grammar Front End
# ---------------------------------------------------------------------------


class PhraseGrammar:
    """Recognize a phrase and return its typed parse tree.

    The underlying lark parser is built once per instance and keeps no state
    between calls, so one instance can serve any number of threads.
    """

    def __init__(self) -> None:
        self._lark = Lark(PHRASE_GRAMMAR, parser="earley", lexer="dynamic")
        self._builder = PhraseTreeBuilder()

    def parse_tree(self, text: str) -> PhraseNode:
        """Parse ``text`` into a typed phrase node.

        Raises:
            GrammarMismatchError: If no production matches ``text``
        """
        try:
            tree = self._lark.parse(text)
        except UnexpectedInput as exc:
            column = getattr(exc, "column", None)
            if not isinstance(column, int) or column < 1:
                column = None
            logger.debug(f"No production matches {text!r}: {exc}")
            raise GrammarMismatchError(text, column) from exc
        return self._builder.transform(tree)


_default_grammar: Optional[PhraseGrammar] = None


def get_grammar() -> PhraseGrammar:
    """Return the shared grammar instance, building it on first use."""
    global _default_grammar
    if _default_grammar is None:
        _default_grammar = PhraseGrammar()
    return _default_grammar


def parse_tree(text: str) -> PhraseNode:
    """Parse ``text`` into a typed phrase node with the shared grammar."""
    return get_grammar().parse_tree(text)


__all__ = [
    "PHRASE_GRAMMAR",
    "NowNode",
    "ClockNode",
    "TimeNode",
    "RelativeNode",
    "RelativeFutureNode",
    "DayAtNode",
    "IsoNode",
    "DateNode",
    "PhraseNode",
    "PhraseTreeBuilder",
    "PhraseGrammar",
    "get_grammar",
    "parse_tree",
]
