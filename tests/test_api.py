"""End-to-end tests for the top-level parse entry points."""

from datetime import datetime, timedelta

import pytest

import timeclue
from timeclue import (
    EvaluationConfig,
    EvaluationError,
    GrammarMismatchError,
    InvalidIsoDateError,
    InvalidTimeAmPmError,
    ParseError,
    TimeClueError,
    UnknownAmPmError,
    handle_error,
    parse,
    parse_with_config,
)


class TestParse:
    def test_last_friday_at(self, christmas_eve):
        assert parse("last friday at 19:43", christmas_eve) == datetime(2020, 12, 18, 19, 43)

    def test_next_friday(self, sunday_noon):
        assert parse("next friday", sunday_noon) == datetime(2020, 7, 17, 0, 0)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("now", datetime(2020, 7, 12, 12, 45)),
            ("8", datetime(2020, 7, 12, 8, 0)),
            ("7:15:05pm", datetime(2020, 7, 12, 19, 15, 5)),
            ("2 days ago", datetime(2020, 7, 10, 12, 45)),
            ("2minago", datetime(2020, 7, 12, 12, 43)),
            ("in 3 h", datetime(2020, 7, 12, 15, 45)),
            ("in 1 month", datetime(2020, 8, 11, 12, 45)),
            ("yesterday at 19:43", datetime(2020, 7, 11, 19, 43)),
            ("tomorrow at 7pm", datetime(2020, 7, 13, 19, 0)),
            ("today", datetime(2020, 7, 12, 0, 0)),
            ("monday at 4", datetime(2020, 7, 6, 4, 0)),
            ("last sunday", datetime(2020, 7, 5, 0, 0)),
            ("2020-12-25T19:43:00", datetime(2020, 12, 25, 19, 43)),
            ("25/12/2020", datetime(2020, 12, 25, 0, 0)),
        ],
    )
    def test_phrases(self, sunday_noon, text, expected):
        assert parse(text, sunday_noon) == expected

    def test_aware_reference(self, paris_summer):
        result = parse("tomorrow at 9", paris_summer)

        assert result.utcoffset() == timedelta(hours=2)
        assert (result.day, result.hour, result.microsecond) == (16, 9, 0)

    def test_bare_time_stays_on_day(self, sunday_noon):
        assert parse("8", sunday_noon) < sunday_noon


class TestParseWithConfig:
    def test_roll_forward(self, sunday_noon):
        config = EvaluationConfig.at(sunday_noon, roll_forward_if_past=True)

        assert parse_with_config("8", config) == datetime(2020, 7, 13, 8, 0)

    def test_roll_forward_only_affects_bare_times(self, sunday_noon):
        config = EvaluationConfig.at(sunday_noon, roll_forward_if_past=True)

        assert parse_with_config("today at 8", config) == datetime(2020, 7, 12, 8, 0)


class TestErrors:
    def test_unrecognized_phrase(self, sunday_noon):
        with pytest.raises(GrammarMismatchError):
            parse("the day after tomorrow", sunday_noon)

    def test_unknown_marker(self, sunday_noon):
        with pytest.raises(UnknownAmPmError):
            parse("9 xm", sunday_noon)

    def test_pm_out_of_range(self, sunday_noon):
        with pytest.raises(InvalidTimeAmPmError):
            parse("yesterday at 19:43 pm", sunday_noon)

    def test_impossible_date(self, sunday_noon):
        with pytest.raises(InvalidIsoDateError):
            parse("2020-02-30T10:00", sunday_noon)

    @pytest.mark.parametrize(
        "text, family",
        [
            ("whenever", ParseError),
            ("9 xm", ParseError),
            ("25:00", EvaluationError),
            ("30/02/2021", EvaluationError),
        ],
    )
    def test_families(self, sunday_noon, text, family):
        with pytest.raises(family):
            parse(text, sunday_noon)

    def test_handle_error(self, sunday_noon):
        with pytest.raises(TimeClueError) as exc_info:
            parse("whenever", sunday_noon)

        assert handle_error(exc_info.value).startswith(exc_info.value.user_message)


class TestPublicSurface:
    def test_all_names_exported(self):
        for name in timeclue.__all__:
            assert hasattr(timeclue, name)
