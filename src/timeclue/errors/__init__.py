"""Centralized error definitions for timeclue.

Every failure of the library is a ``TimeClueError``. Two disjoint families sit
below it:
- ``ParseError``: the phrase is not recognized, or one of its tokens is not
- ``EvaluationError``: the phrase was recognized but does not resolve to a
  real instant against the reference

Usage:
    from timeclue import parse
    from timeclue.errors import TimeClueError, handle_error

    try:
        when = parse(text, now)
    except TimeClueError as e:
        print(handle_error(e))
"""

from __future__ import annotations

from typing import Any, Optional

from timeclue.errors.user_messages import (
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class TimeClueError(Exception):
    """Base exception for all timeclue errors.

    Attributes:
        code: Error code for categorization
        message: Technical message, including the offending values
        details: Structured context (offending fields or token text)
    """

    code: str = "TIMECLUE_ERROR"
    default_message: str = "Could not resolve the time expression"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
        }


# =============================================================================
# Parse Errors
# =============================================================================


class ParseError(TimeClueError):
    """Base error for phrases that cannot be turned into a time clue."""

    code = "PARSE_ERROR"
    default_message = "Could not parse the time expression"


class GrammarMismatchError(ParseError):
    """No grammar production matches the input."""

    code = "GRAMMAR_MISMATCH"
    default_message = "Unexpected non matching pattern"

    def __init__(self, text: str, column: Optional[int] = None) -> None:
        self.text = text
        self.column = column
        if column is None:
            message = f"unexpected non matching pattern: `{text}`"
        else:
            message = f"unexpected non matching pattern at column {column}: `{text}`"
        super().__init__(message, details={"text": text, "column": column})


class InvalidIntegerError(ParseError):
    """An integer token does not fit the numeric type of its slot."""

    code = "INVALID_INTEGER"
    default_message = "Invalid integer"

    def __init__(self, token: str, kind: str) -> None:
        self.token = token
        self.kind = kind
        super().__init__(
            f"invalid integer for {kind}: `{token}`",
            details={"token": token, "kind": kind},
        )


class UnknownTokenError(ParseError):
    """A token in a known category matches none of its literals."""

    code = "UNKNOWN_TOKEN"
    category: str = "token"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"unknown {self.category}: `{token}`",
            details={"token": token, "category": self.category},
        )


class UnknownWeekdayError(UnknownTokenError):
    code = "UNKNOWN_WEEKDAY"
    category = "weekday"


class UnknownShortcutDayError(UnknownTokenError):
    code = "UNKNOWN_SHORTCUT_DAY"
    category = "shortcut day"


class UnknownModifierError(UnknownTokenError):
    code = "UNKNOWN_MODIFIER"
    category = "modifier"


class UnknownQuantifierError(UnknownTokenError):
    code = "UNKNOWN_QUANTIFIER"
    category = "quantifier"


class UnknownAmPmError(UnknownTokenError):
    code = "UNKNOWN_AM_PM"
    category = "am or pm"


# =============================================================================
# Evaluation Errors
# =============================================================================


class EvaluationError(TimeClueError):
    """Base error for clues that do not resolve against the reference instant."""

    code = "EVALUATION_ERROR"
    default_message = "Could not evaluate the time expression"


class InvalidTimeError(EvaluationError):
    """Hour, minute or second out of range."""

    code = "INVALID_TIME"
    default_message = "Invalid time"

    def __init__(self, hour: int, minute: int, second: int) -> None:
        self.hour = hour
        self.minute = minute
        self.second = second
        super().__init__(
            f"invalid time: {hour}:{minute}:{second}",
            details={"hour": hour, "minute": minute, "second": second},
        )


class InvalidTimeAmPmError(EvaluationError):
    """Hour, minute or second out of range once the am/pm marker is applied."""

    code = "INVALID_TIME_AM_PM"
    default_message = "Invalid time"

    def __init__(self, hour: int, minute: int, second: int, am_or_pm: Any) -> None:
        self.hour = hour
        self.minute = minute
        self.second = second
        self.am_or_pm = am_or_pm
        super().__init__(
            f"invalid time: {hour}:{minute}:{second} {am_or_pm}",
            details={
                "hour": hour,
                "minute": minute,
                "second": second,
                "am_or_pm": str(am_or_pm),
            },
        )


class InvalidIsoDateError(EvaluationError):
    """Calendar fields do not form a real date-time."""

    code = "INVALID_ISO_DATE"
    default_message = "Invalid ISO date"

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
    ) -> None:
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour
        self.minute = minute
        self.second = second
        super().__init__(
            f"invalid ISO date: {year}-{month}-{day}T{hour}:{minute}:{second}",
            details={
                "year": year,
                "month": month,
                "day": day,
                "hour": hour,
                "minute": minute,
                "second": second,
            },
        )


class OffsetOutOfRangeError(EvaluationError):
    """A relative offset leaves the representable calendar range."""

    code = "OFFSET_OUT_OF_RANGE"
    default_message = "Offset out of range"

    def __init__(self, count: int, quantifier: Any) -> None:
        self.count = count
        self.quantifier = quantifier
        unit = getattr(quantifier, "value", quantifier)
        super().__init__(
            f"offset out of range: {count} {unit}",
            details={"count": count, "quantifier": unit},
        )


# =============================================================================
# Error Handler
# =============================================================================


def handle_error(error: Exception) -> str:
    """Handle an error and return a user-friendly message.

    Args:
        error: The exception to handle

    Returns:
        User-friendly error message with recovery suggestion
    """
    return format_error_for_user(error)


__all__ = [
    # Base
    "TimeClueError",
    # Parse
    "ParseError",
    "GrammarMismatchError",
    "InvalidIntegerError",
    "UnknownTokenError",
    "UnknownWeekdayError",
    "UnknownShortcutDayError",
    "UnknownModifierError",
    "UnknownQuantifierError",
    "UnknownAmPmError",
    # Evaluation
    "EvaluationError",
    "InvalidTimeError",
    "InvalidTimeAmPmError",
    "InvalidIsoDateError",
    "OffsetOutOfRangeError",
    # Handlers
    "handle_error",
]
