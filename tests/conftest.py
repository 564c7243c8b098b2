"""Shared fixtures for timeclue tests.

Reference instants are fixed so every expectation is reproducible:
- ``sunday_noon``: Sunday 2020-07-12 12:45:00
- ``christmas_eve``: Thursday 2020-12-24 23:45:00
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from timeclue.configuration import EvaluationConfig
from timeclue.evaluation import TimeClueInterpreter
from timeclue.parsing import TimeClueParser


@pytest.fixture
def sunday_noon():
    """Sunday 2020-07-12 12:45:00, naive."""
    return datetime(2020, 7, 12, 12, 45, 0)


@pytest.fixture
def christmas_eve():
    """Thursday 2020-12-24 23:45:00, naive."""
    return datetime(2020, 12, 24, 23, 45, 0)


@pytest.fixture
def paris_summer():
    """Wednesday 2020-07-15 10:30:15.250 at UTC+2."""
    return datetime(2020, 7, 15, 10, 30, 15, 250000, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture
def parser():
    return TimeClueParser()


@pytest.fixture
def interpreter():
    return TimeClueInterpreter()


@pytest.fixture
def config_at():
    """Factory for evaluation configs."""

    def _make(now: datetime, roll_forward_if_past: bool = False) -> EvaluationConfig:
        return EvaluationConfig(
            reference_instant=now,
            roll_forward_if_past=roll_forward_if_past,
        )

    return _make
