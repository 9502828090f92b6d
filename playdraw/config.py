"""Runtime configuration for the daily playtime draw."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_CATALOG_KEY = "playtime_draw_data"
DEFAULT_REWARD_LABEL = "Daily Playtime Reward"
DEFAULT_SOURCE_TAG = "ChestSys"


@dataclass(frozen=True)
class DrawConfig:
    """Settings handed to :class:`~playdraw.draw.DailyPlaytimeDrawService`.

    Attributes
    ----------
    catalog_key : str
        Key of the drop table requested from the catalog loader.
    reward_label : str
        Reward category label forwarded to the gift-box service.
    source_tag : str
        Source-system tag forwarded to the gift-box service.
    draw_trigger : Optional[int]
        Value of ``DAILY_PLAYTIME_DRAW_TRIGGER``. Carried for the surrounding
        request handler; the draw itself does not consume it.
    giftbox_base_url : Optional[str]
        Base URL of the gift-box delivery service.
    giftbox_token : Optional[str]
        Bearer token for the gift-box delivery service.
    catalog_dir : Optional[str]
        Directory holding JSON drop tables for :class:`~playdraw.catalog.JsonCatalogLoader`.
    """

    catalog_key: str = DEFAULT_CATALOG_KEY
    reward_label: str = DEFAULT_REWARD_LABEL
    source_tag: str = DEFAULT_SOURCE_TAG
    draw_trigger: Optional[int] = None
    giftbox_base_url: Optional[str] = None
    giftbox_token: Optional[str] = None
    catalog_dir: Optional[str] = None


def _parse_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(
            f"Environment variable '{name}' must be an integer, got {raw!r}"
        ) from exc


def load_config(env: Optional[Mapping[str, str]] = None) -> DrawConfig:
    """Build a :class:`DrawConfig` from environment variables.

    Parameters
    ----------
    env : Optional[Mapping[str, str]], default: None
        Mapping to read from. When omitted, ``.env`` is loaded with
        :func:`dotenv.load_dotenv` and ``os.environ`` is used.

    Returns
    -------
    DrawConfig
        The populated configuration.

    Raises
    ------
    ConfigurationError
        If ``DAILY_PLAYTIME_DRAW_TRIGGER`` is set but not an integer.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    return DrawConfig(
        draw_trigger=_parse_int(
            "DAILY_PLAYTIME_DRAW_TRIGGER", env.get("DAILY_PLAYTIME_DRAW_TRIGGER")
        ),
        giftbox_base_url=env.get("GIFTBOX_BASE_URL") or None,
        giftbox_token=env.get("GIFTBOX_API_TOKEN") or None,
        catalog_dir=env.get("PLAYTIME_CATALOG_DIR") or None,
    )


__all__ = [
    "DEFAULT_CATALOG_KEY",
    "DEFAULT_REWARD_LABEL",
    "DEFAULT_SOURCE_TAG",
    "DrawConfig",
    "load_config",
]
