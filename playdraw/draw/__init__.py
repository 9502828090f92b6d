"""The daily playtime draw: eligibility, weighted sampling and claims."""

from .eligibility import (
    PlaytimeCounter,
    ProgressionResult,
    REQUIRED_PLAYTIME_IN_SECONDS,
    evaluate_progression,
)
from .sampler import (
    DrawResult,
    ItemEntry,
    drop_item,
    drop_probabilities,
    select_entry,
    simulate_drops,
)
from .service import DailyPlaytimeDrawService, NOT_ENOUGH_PLAYTIME_MESSAGE

__all__ = [
    "DailyPlaytimeDrawService",
    "DrawResult",
    "ItemEntry",
    "NOT_ENOUGH_PLAYTIME_MESSAGE",
    "PlaytimeCounter",
    "ProgressionResult",
    "REQUIRED_PLAYTIME_IN_SECONDS",
    "drop_item",
    "drop_probabilities",
    "evaluate_progression",
    "select_entry",
    "simulate_drops",
]
