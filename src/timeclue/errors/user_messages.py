"""User-friendly error messages for timeclue.

Maps error codes to short human-readable messages and hints on which phrasings
are understood, so callers accepting time input can show something better than
the technical message.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Parse errors
    "PARSE_ERROR": "We couldn't understand that time.",
    "GRAMMAR_MISMATCH": "That doesn't look like a time we understand.",
    "INVALID_INTEGER": "One of the numbers is too large.",
    "UNKNOWN_TOKEN": "One of the words wasn't recognized.",
    "UNKNOWN_WEEKDAY": "That day of the week wasn't recognized.",
    "UNKNOWN_SHORTCUT_DAY": "Only today, yesterday and tomorrow are recognized.",
    "UNKNOWN_MODIFIER": "Only 'last' and 'next' can precede a weekday.",
    "UNKNOWN_QUANTIFIER": "That time unit wasn't recognized.",
    "UNKNOWN_AM_PM": "Use 'am' or 'pm' after the hour.",
    # Evaluation errors
    "EVALUATION_ERROR": "That time couldn't be placed on the calendar.",
    "INVALID_TIME": "That time of day doesn't exist.",
    "INVALID_TIME_AM_PM": "That time of day doesn't exist once am/pm is applied.",
    "INVALID_ISO_DATE": "That date doesn't exist on the calendar.",
    "OFFSET_OUT_OF_RANGE": "That offset reaches too far from now.",
    # Generic
    "TIMECLUE_ERROR": "We couldn't resolve that time.",
    "UNKNOWN_ERROR": "Something went wrong while reading that time.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    # Parse errors
    "PARSE_ERROR": "Try 'now', '9:30', '2 days ago' or '2020-12-25T19:43:00'.",
    "GRAMMAR_MISMATCH": "Try 'last friday at 9', 'in 3 hours' or '25/12/2020'.",
    "INVALID_INTEGER": "Use smaller numbers.",
    "UNKNOWN_TOKEN": "Check the spelling.",
    "UNKNOWN_WEEKDAY": "Use a full name like 'friday' or an abbreviation like 'fri'.",
    "UNKNOWN_SHORTCUT_DAY": "Use 'today', 'yesterday' or 'tomorrow'.",
    "UNKNOWN_MODIFIER": "Write 'last friday' or 'next friday'.",
    "UNKNOWN_QUANTIFIER": "Use min, h/hours, d/days, w/weeks or months.",
    "UNKNOWN_AM_PM": "Write '7pm' or '7 am', or use the 24-hour clock.",
    # Evaluation errors
    "EVALUATION_ERROR": "Check the numbers in the expression.",
    "INVALID_TIME": "Hours go up to 23, minutes and seconds up to 59.",
    "INVALID_TIME_AM_PM": "With am/pm, hours go up to 11. Use the 24-hour clock otherwise.",
    "INVALID_ISO_DATE": "Check the day exists in that month, e.g. no 30th of February.",
    "OFFSET_OUT_OF_RANGE": "Use a smaller amount or an explicit date.",
    # Generic
    "TIMECLUE_ERROR": "Try a simpler expression such as 'yesterday at 19:43'.",
    "UNKNOWN_ERROR": "Try a simpler expression such as 'now'.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        User-friendly error message
    """
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        Recovery suggestion
    """
    return RECOVERY_SUGGESTIONS.get(_error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"])


def format_error_for_user(error: Any) -> str:
    """Format a complete user-friendly error message.

    Args:
        error: The error to format

    Returns:
        Complete error message with recovery suggestion
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)

    return f"{message}\n\nSuggestion: {suggestion}"


__all__ = [
    "ERROR_MESSAGES",
    "RECOVERY_SUGGESTIONS",
    "get_user_message",
    "get_recovery_suggestion",
    "format_error_for_user",
]
