"""Contracts the draw service depends on.

The service only ever talks to these protocols. Reference implementations
live in :mod:`playdraw.players`, :mod:`playdraw.catalog` and
:mod:`playdraw.delivery`; tests substitute their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence

if TYPE_CHECKING:
    from .draw.eligibility import PlaytimeCounter
    from .draw.sampler import DrawResult, ItemEntry


class PlayerRecordStore(Protocol):
    async def get_daily_playtime_counter(self, player_id: str) -> "PlaytimeCounter":
        """Return today's counter; raise ``UpstreamReadError`` on failure."""
        ...


class CatalogLoader(Protocol):
    def get_items(self, catalog_key: str) -> Sequence["ItemEntry"]:
        """Return the ordered drop table stored under ``catalog_key``."""
        ...


class DeliveryService(Protocol):
    async def send_reward(
        self,
        reward_item: "DrawResult",
        player_id: str,
        nickname: str,
        reward_label: str,
        source_tag: str,
    ) -> None:
        """Deliver ``reward_item``; raise ``DeliveryError`` on failure."""
        ...


class Logger(Protocol):
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


__all__ = ["CatalogLoader", "DeliveryService", "Logger", "PlayerRecordStore"]
