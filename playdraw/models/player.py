"""Player records and their daily playtime counters."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, UniqueConstraint, func, select
from sqlalchemy.orm import Mapped, Session, mapped_column, relationship

from .base import Base
from .id_type import ID_TYPE


class Player(Base):
    """A player whose playtime gates the daily draw."""

    def __init__(
        self,
        in_app_id: str,
        nickname: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """Create a new :class:`Player` record.

        Parameters
        ----------
        in_app_id : str
            Player's ID in the game client. This is the ``player_id`` the draw
            service is keyed by.
        nickname : str, optional
            Display name.
        created_at : datetime, optional
            Explicit creation timestamp.
        updated_at : datetime, optional
            Explicit last update timestamp.
        """
        self.in_app_id = in_app_id
        self.nickname = nickname
        if created_at is not None:
            self.created_at = created_at
        if updated_at is not None:
            self.updated_at = updated_at

    __tablename__ = "players"

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    in_app_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    nickname: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    playtimes: Mapped[list["DailyPlaytime"]] = relationship(
        back_populates="player", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Player(id={self.id}, in_app_id='{self.in_app_id}', nickname='{self.nickname}')>"

    @classmethod
    def get_by_in_app_id(cls, session: Session, in_app_id: str) -> Optional["Player"]:
        """Retrieve a player by their in_app_id."""
        return session.scalar(select(cls).where(cls.in_app_id == in_app_id))

    def playtime_on(self, session: Session, play_date: date) -> Optional["DailyPlaytime"]:
        """Return this player's counter row for ``play_date``, if any."""
        return session.scalar(
            select(DailyPlaytime).where(
                DailyPlaytime.player_id == self.id,
                DailyPlaytime.play_date == play_date,
            )
        )


class DailyPlaytime(Base):
    """Seconds a player accumulated on one UTC calendar day."""

    __tablename__ = "daily_playtimes"

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    player_id: Mapped[int] = mapped_column(
        ID_TYPE, ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    play_date: Mapped[date] = mapped_column(Date, nullable=False)
    two_hours_counter: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    """Seconds counted toward the two-hour draw requirement."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    player: Mapped["Player"] = relationship(back_populates="playtimes")

    __table_args__ = (
        UniqueConstraint(
            "player_id", "play_date", name="daily_playtimes_player_id_play_date_key"
        ),
    )

    def __init__(
        self,
        *,
        player_id: Optional[int] = None,
        play_date: date,
        two_hours_counter: int = 0,
        player: Optional[Player] = None,
    ) -> None:
        if player is not None:
            self.player = player
        if player_id is not None:
            self.player_id = player_id
        self.play_date = play_date
        self.two_hours_counter = two_hours_counter

    def __repr__(self) -> str:  # pragma: no cover - repr is trivial
        return (
            f"<DailyPlaytime(player_id={self.player_id}, play_date={self.play_date}, "
            f"two_hours_counter={self.two_hours_counter})>"
        )
