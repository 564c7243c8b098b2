"""Tests for the error hierarchy and user-facing messages."""

import pytest

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
from timeclue.errors.user_messages import (
    ERROR_MESSAGES,
    RECOVERY_SUGGESTIONS,
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)
from timeclue.parsing.models import AmPm, Quantifier


PARSE_ERRORS = [
    GrammarMismatchError("whenever", 1),
    InvalidIntegerError("99999999999", "hour"),
    UnknownWeekdayError("caturday"),
    UnknownShortcutDayError("overmorrow"),
    UnknownModifierError("this"),
    UnknownQuantifierError("fortnight"),
    UnknownAmPmError("xm"),
]

EVALUATION_ERRORS = [
    InvalidTimeError(25, 0, 0),
    InvalidTimeAmPmError(13, 0, 0, AmPm.PM),
    InvalidIsoDateError(2020, 2, 30, 0, 0, 0),
    OffsetOutOfRangeError(10**12, Quantifier.WEEKS),
]


class TestHierarchy:
    @pytest.mark.parametrize("error", PARSE_ERRORS)
    def test_parse_family(self, error):
        assert isinstance(error, ParseError)
        assert isinstance(error, TimeClueError)
        assert not isinstance(error, EvaluationError)

    @pytest.mark.parametrize("error", EVALUATION_ERRORS)
    def test_evaluation_family(self, error):
        assert isinstance(error, EvaluationError)
        assert isinstance(error, TimeClueError)
        assert not isinstance(error, ParseError)

    def test_unknown_tokens_share_a_base(self):
        for error in PARSE_ERRORS[2:]:
            assert isinstance(error, UnknownTokenError)


class TestErrorCodes:
    @pytest.mark.parametrize("error", PARSE_ERRORS + EVALUATION_ERRORS)
    def test_every_code_has_catalog_entries(self, error):
        assert error.code in ERROR_MESSAGES
        assert error.code in RECOVERY_SUGGESTIONS

    def test_codes_are_distinct(self):
        codes = [error.code for error in PARSE_ERRORS + EVALUATION_ERRORS]

        assert len(codes) == len(set(codes))


class TestMessages:
    def test_grammar_mismatch_with_column(self):
        error = GrammarMismatchError("9 o'clock", 3)

        assert str(error) == "unexpected non matching pattern at column 3: `9 o'clock`"
        assert error.details == {"text": "9 o'clock", "column": 3}

    def test_grammar_mismatch_without_column(self):
        error = GrammarMismatchError("")

        assert str(error) == "unexpected non matching pattern: ``"
        assert error.column is None

    def test_invalid_integer(self):
        error = InvalidIntegerError("18446744073709551616", "count")

        assert str(error) == "invalid integer for count: `18446744073709551616`"
        assert error.details == {"token": "18446744073709551616", "kind": "count"}

    @pytest.mark.parametrize(
        "error, text",
        [
            (UnknownWeekdayError("caturday"), "unknown weekday: `caturday`"),
            (UnknownShortcutDayError("overmorrow"), "unknown shortcut day: `overmorrow`"),
            (UnknownModifierError("this"), "unknown modifier: `this`"),
            (UnknownQuantifierError("fortnight"), "unknown quantifier: `fortnight`"),
            (UnknownAmPmError("xm"), "unknown am or pm: `xm`"),
        ],
    )
    def test_unknown_token(self, error, text):
        assert str(error) == text
        assert error.details["token"] == error.token

    def test_invalid_time(self):
        error = InvalidTimeError(19, 63, 42)

        assert str(error) == "invalid time: 19:63:42"
        assert (error.hour, error.minute, error.second) == (19, 63, 42)

    def test_invalid_time_am_pm(self):
        error = InvalidTimeAmPmError(19, 43, 42, AmPm.PM)

        assert str(error) == "invalid time: 19:43:42 pm"
        assert error.details["am_or_pm"] == "pm"

    def test_invalid_iso_date(self):
        error = InvalidIsoDateError(2020, 2, 30, 10, 0, 0)

        assert str(error) == "invalid ISO date: 2020-2-30T10:0:0"
        assert error.details["day"] == 30

    def test_offset_out_of_range(self):
        error = OffsetOutOfRangeError(5, Quantifier.MONTHS)

        assert str(error) == "offset out of range: 5 months"
        assert error.details == {"count": 5, "quantifier": "months"}


class TestUserMessages:
    def test_user_message_from_catalog(self):
        error = UnknownWeekdayError("caturday")

        assert error.user_message == ERROR_MESSAGES["UNKNOWN_WEEKDAY"]
        assert error.recovery_suggestion == RECOVERY_SUGGESTIONS["UNKNOWN_WEEKDAY"]

    def test_explicit_user_message_wins(self):
        error = TimeClueError("boom", user_message="Try again later.")

        assert error.user_message == "Try again later."

    def test_default_message(self):
        assert str(ParseError()) == "Could not parse the time expression"
        assert str(EvaluationError()) == "Could not evaluate the time expression"

    def test_to_dict(self):
        data = InvalidTimeError(25, 0, 0).to_dict()

        assert data == {
            "code": "INVALID_TIME",
            "message": "invalid time: 25:0:0",
            "user_message": ERROR_MESSAGES["INVALID_TIME"],
            "details": {"hour": 25, "minute": 0, "second": 0},
        }

    def test_lookup_by_code_string(self):
        assert get_user_message("INVALID_ISO_DATE") == ERROR_MESSAGES["INVALID_ISO_DATE"]
        assert get_recovery_suggestion("INVALID_ISO_DATE") == RECOVERY_SUGGESTIONS["INVALID_ISO_DATE"]

    def test_foreign_exception_falls_back(self):
        assert get_user_message(KeyError("x")) == ERROR_MESSAGES["UNKNOWN_ERROR"]
        assert get_recovery_suggestion(KeyError("x")) == RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"]


class TestHandleError:
    def test_formats_message_and_suggestion(self):
        error = OffsetOutOfRangeError(10**12, Quantifier.WEEKS)

        assert handle_error(error) == (
            f"{ERROR_MESSAGES['OFFSET_OUT_OF_RANGE']}\n\n"
            f"Suggestion: {RECOVERY_SUGGESTIONS['OFFSET_OUT_OF_RANGE']}"
        )

    def test_matches_format_error_for_user(self):
        error = GrammarMismatchError("whenever")

        assert handle_error(error) == format_error_for_user(error)
