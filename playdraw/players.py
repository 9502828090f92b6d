"""Relational player-record store backing the playtime counter."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .draw.eligibility import PlaytimeCounter
from .errors import UpstreamReadError
from .models import DailyPlaytime, Player

logger = logging.getLogger(__name__)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class SqlPlayerRecordStore:
    """Read and accumulate daily playtime with SQLAlchemy.

    Blocking session work runs in a worker thread via :func:`asyncio.to_thread`.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        clock: Optional[Callable[[], date]] = None,
    ) -> None:
        """
        Parameters
        ----------
        session_factory : sessionmaker[Session]
            Factory producing sessions bound to the player database.
        clock : Optional[Callable[[], date]], default: None
            Returns the current play date. Defaults to today's UTC date.
        """
        self._session_factory = session_factory
        self._clock = clock or _utc_today

    async def get_daily_playtime_counter(self, player_id: str) -> PlaytimeCounter:
        """Return today's counter for ``player_id``.

        A player with no row for today has a counter of 0.

        Raises
        ------
        UpstreamReadError
            If the player does not exist or the database cannot be read.
        """
        return await asyncio.to_thread(self._read_counter, player_id, self._clock())

    async def add_playtime(self, player_id: str, seconds: int) -> int:
        """Add ``seconds`` to today's counter and return the new total.

        Raises
        ------
        ValueError
            If ``seconds`` is negative.
        UpstreamReadError
            If the player does not exist or the database cannot be written.
        """
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        return await asyncio.to_thread(
            self._accumulate, player_id, int(seconds), self._clock()
        )

    def _require_player(self, session: Session, player_id: str) -> Player:
        player = Player.get_by_in_app_id(session, player_id)
        if player is None:
            raise UpstreamReadError(f"Unknown player '{player_id}'")
        return player

    def _read_counter(self, player_id: str, play_date: date) -> PlaytimeCounter:
        try:
            with self._session_factory() as session:
                player = self._require_player(session, player_id)
                row = player.playtime_on(session, play_date)
                seconds = row.two_hours_counter if row is not None else 0
        except SQLAlchemyError as exc:
            logger.error(f"Playtime read failed for player {player_id}: {exc}")
            raise UpstreamReadError(
                f"Failed to read playtime for player '{player_id}'"
            ) from exc

        logger.debug(f"Player {player_id} has {seconds}s of playtime on {play_date}")
        return PlaytimeCounter(two_hours_counter=seconds)

    def _accumulate(self, player_id: str, seconds: int, play_date: date) -> int:
        try:
            with self._session_factory.begin() as session:
                player = self._require_player(session, player_id)
                row = player.playtime_on(session, play_date)
                if row is None:
                    row = DailyPlaytime(player=player, play_date=play_date)
                    session.add(row)
                row.two_hours_counter = (row.two_hours_counter or 0) + seconds
                session.flush()
                total = row.two_hours_counter
        except SQLAlchemyError as exc:
            logger.error(f"Playtime update failed for player {player_id}: {exc}")
            raise UpstreamReadError(
                f"Failed to update playtime for player '{player_id}'"
            ) from exc
        return total


__all__ = ["SqlPlayerRecordStore"]
