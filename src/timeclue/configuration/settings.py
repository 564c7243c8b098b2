"""Typed evaluation settings.

Wraps the reference instant and the evaluation toggles in a Pydantic model so
the interpreter can rely on validated input.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EvaluationConfig(BaseModel):
    """Reference instant and toggles for evaluating a time clue."""

    model_config = ConfigDict(frozen=True)

    reference_instant: datetime = Field(
        ..., description="Instant relative and partial expressions resolve against"
    )
    roll_forward_if_past: bool = Field(
        False,
        description=(
            "Move a bare time of day to the following day when it falls "
            "before the reference instant"
        ),
    )

    @classmethod
    def at(cls, now: datetime, roll_forward_if_past: bool = False) -> "EvaluationConfig":
        """Build a configuration for the reference instant ``now``."""
        return cls(reference_instant=now, roll_forward_if_past=roll_forward_if_past)


__all__ = ["EvaluationConfig"]
