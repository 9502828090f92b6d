"""Per-player service that gates the daily draw on accumulated playtime."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..collaborators import CatalogLoader, DeliveryService, Logger, PlayerRecordStore
from ..config import DrawConfig
from ..rng import RandomSource, get_rng
from .eligibility import (
    REQUIRED_PLAYTIME_IN_SECONDS,
    ProgressionResult,
    evaluate_progression,
)
from .sampler import DrawResult, ItemEntry, drop_item

logger = logging.getLogger(__name__)

NOT_ENOUGH_PLAYTIME_MESSAGE = "Not enough playtime to draw"


class DailyPlaytimeDrawService:
    """Draw a reward for one player once two hours of daily playtime are reached.

    An instance is scoped to a single player's request. The drop table is
    loaded once, at construction, and never reloaded.
    """

    def __init__(
        self,
        player_id: str,
        player_nickname: str,
        *,
        player_store: PlayerRecordStore,
        catalog_loader: CatalogLoader,
        delivery: DeliveryService,
        config: Optional[DrawConfig] = None,
        rng: Optional[RandomSource] = None,
        log: Optional[Logger] = None,
    ) -> None:
        """Create a draw service for ``player_id``.

        Parameters
        ----------
        player_id : str
            Identifier used for playtime lookups and reward delivery.
        player_nickname : str
            Display name of the player.
        player_store : PlayerRecordStore
            Source of the daily playtime counter.
        catalog_loader : CatalogLoader
            Source of the drop table. Called once, here.
        delivery : DeliveryService
            Gift-box service that receives claimed rewards.
        config : Optional[DrawConfig], default: None
            Catalog key and reward labels. Defaults to :class:`DrawConfig()`.
        rng : Optional[RandomSource], default: None
            Uniform random source for the sampler. An unseeded
            :class:`~playdraw.rng.SeededRandomSource` is used when omitted.
        log : Optional[Logger], default: None
            Logger for draw outcomes. Defaults to this module's logger.
        """
        self.player_id = player_id
        self.player_nickname = player_nickname
        self.config = config or DrawConfig()
        self._player_store = player_store
        self._delivery = delivery
        self._rng = rng or get_rng()
        self._log = log or logger
        self.item_pool: tuple[ItemEntry, ...] = tuple(
            catalog_loader.get_items(self.config.catalog_key)
        )

    @property
    def required_playtime_in_seconds(self) -> int:
        return REQUIRED_PLAYTIME_IN_SECONDS

    def __repr__(self) -> str:
        return (
            f"<DailyPlaytimeDrawService(player_id={self.player_id!r}, "
            f"items={len(self.item_pool)})>"
        )

    async def check_eligibility(self) -> ProgressionResult:
        """Fetch today's playtime and compare it to the requirement.

        Raises
        ------
        UpstreamReadError
            Propagated from the player-record store.
        """
        counter = await self._player_store.get_daily_playtime_counter(self.player_id)
        return evaluate_progression(counter, self.required_playtime_in_seconds)

    async def get_progression(self) -> ProgressionResult:
        """Progress toward today's draw, for display. Same as :meth:`check_eligibility`."""
        return await self.check_eligibility()

    def drop_item(self, pool: Sequence[ItemEntry]) -> Optional[DrawResult]:
        """Sample ``pool`` with this service's random source.

        Only ``pool`` is consulted, not :attr:`item_pool`.
        """
        return drop_item(pool, self._rng)

    async def draw(self) -> Optional[DrawResult]:
        """Draw from the drop table if the player has played enough today.

        Returns
        -------
        Optional[DrawResult]
            The dropped item, or ``None`` when the player is not eligible or
            the drop table is empty or zero-weighted.
        """
        eligibility = await self.check_eligibility()
        if not eligibility.can_draw:
            self._log.warning(NOT_ENOUGH_PLAYTIME_MESSAGE)
            return None

        result = self.drop_item(self.item_pool)
        if result is None:
            self._log.info(f"Drop table {self.config.catalog_key!r} yielded nothing")
        else:
            self._log.info(
                f"Player {self.player_id} drew {result.dropped_item_name} "
                f"({result.dropped_item_id})"
            )
        return result

    async def claim_reward(self, reward_item: DrawResult, nickname: str) -> None:
        """Hand ``reward_item`` to the gift-box service.

        Raises
        ------
        DeliveryError
            Propagated unchanged from the delivery service.
        """
        await self._delivery.send_reward(
            reward_item,
            self.player_id,
            nickname,
            self.config.reward_label,
            self.config.source_tag,
        )


__all__ = ["DailyPlaytimeDrawService", "NOT_ENOUGH_PLAYTIME_MESSAGE"]
