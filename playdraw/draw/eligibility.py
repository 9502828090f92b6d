"""Playtime eligibility and progression."""

from __future__ import annotations

from dataclasses import dataclass

REQUIRED_PLAYTIME_IN_SECONDS = 2 * 3600


@dataclass(frozen=True)
class PlaytimeCounter:
    """Seconds of play accumulated today toward the two-hour requirement."""

    two_hours_counter: int


@dataclass(frozen=True)
class ProgressionResult:
    """Whether the player may draw, and how far along they are (0-100)."""

    can_draw: bool
    progress: int


def evaluate_progression(
    counter: PlaytimeCounter,
    required_seconds: int = REQUIRED_PLAYTIME_IN_SECONDS,
) -> ProgressionResult:
    """Compare ``counter`` against ``required_seconds``.

    ``progress`` is the floored percentage of the requirement met, capped at
    100 once the requirement is exceeded and never below 0.
    """
    if required_seconds <= 0:
        raise ValueError("required_seconds must be positive")

    seconds = max(0, int(counter.two_hours_counter))
    progress = min(seconds, required_seconds) * 100 // required_seconds
    return ProgressionResult(
        can_draw=seconds >= required_seconds,
        progress=progress,
    )


__all__ = [
    "PlaytimeCounter",
    "ProgressionResult",
    "REQUIRED_PLAYTIME_IN_SECONDS",
    "evaluate_progression",
]
