"""Exception taxonomy for the daily playtime draw."""

from __future__ import annotations

from typing import Optional


class PlaytimeDrawError(Exception):
    """Base class for every error raised by this package."""


class UpstreamReadError(PlaytimeDrawError):
    """The player-record store could not provide a playtime counter."""


class DeliveryError(PlaytimeDrawError):
    """The gift-box service rejected or failed to accept a reward.

    Attributes
    ----------
    status_code : Optional[int]
        HTTP status returned by the delivery service, when one was received.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CatalogError(PlaytimeDrawError):
    """A drop table source exists but cannot be read or parsed."""


class ConfigurationError(PlaytimeDrawError, ValueError):
    """An environment setting is missing or malformed."""


__all__ = [
    "CatalogError",
    "ConfigurationError",
    "DeliveryError",
    "PlaytimeDrawError",
    "UpstreamReadError",
]
