"""Evaluation configuration."""

from timeclue.configuration.settings import EvaluationConfig

__all__ = ["EvaluationConfig"]
