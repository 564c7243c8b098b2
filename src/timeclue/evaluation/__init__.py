"""Time clue evaluation against a reference instant."""

from timeclue.evaluation.instant import DateTimeBackend, InstantBackend
from timeclue.evaluation.interpreter import (
    TimeClueInterpreter,
    check_hms,
    evaluate,
    evaluate_time_clue,
    evaluate_with_config,
)

__all__ = [
    "InstantBackend",
    "DateTimeBackend",
    "TimeClueInterpreter",
    "check_hms",
    "evaluate",
    "evaluate_time_clue",
    "evaluate_with_config",
]
