from __future__ import annotations

import unittest
from datetime import date, timedelta

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from playdraw.draw import PlaytimeCounter
from playdraw.errors import UpstreamReadError
from playdraw.models import Base, DailyPlaytime, Player
from playdraw.players import SqlPlayerRecordStore

TODAY = date(2026, 10, 19)


class SqlPlayerRecordStoreTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        # One shared connection so the worker threads see the same in-memory DB.
        self.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(
            bind=self.engine, future=True, expire_on_commit=False
        )
        with self.Session.begin() as session:
            player = Player(in_app_id="player123", nickname="TestPlayer")
            session.add(player)
            session.flush()
            self.player_pk = player.id
        self.store = SqlPlayerRecordStore(self.Session, clock=lambda: TODAY)

    def tearDown(self) -> None:
        self.engine.dispose()

    async def test_missing_row_reads_as_zero(self) -> None:
        counter = await self.store.get_daily_playtime_counter("player123")
        self.assertEqual(counter, PlaytimeCounter(two_hours_counter=0))

    async def test_reads_todays_row_only(self) -> None:
        with self.Session.begin() as session:
            session.add_all(
                [
                    DailyPlaytime(
                        player_id=self.player_pk,
                        play_date=TODAY - timedelta(days=1),
                        two_hours_counter=7200,
                    ),
                    DailyPlaytime(
                        player_id=self.player_pk, play_date=TODAY, two_hours_counter=3600
                    ),
                ]
            )
        counter = await self.store.get_daily_playtime_counter("player123")
        self.assertEqual(counter.two_hours_counter, 3600)

    async def test_unknown_player(self) -> None:
        with self.assertRaises(UpstreamReadError):
            await self.store.get_daily_playtime_counter("nobody")

    async def test_add_playtime_accumulates(self) -> None:
        self.assertEqual(await self.store.add_playtime("player123", 1800), 1800)
        self.assertEqual(await self.store.add_playtime("player123", 1800), 3600)
        counter = await self.store.get_daily_playtime_counter("player123")
        self.assertEqual(counter.two_hours_counter, 3600)

        with self.Session() as session:
            player = Player.get_by_in_app_id(session, "player123")
            self.assertEqual(len(player.playtimes), 1)

    async def test_add_playtime_rejects_negative(self) -> None:
        with self.assertRaises(ValueError):
            await self.store.add_playtime("player123", -1)

    async def test_add_playtime_unknown_player(self) -> None:
        with self.assertRaises(UpstreamReadError):
            await self.store.add_playtime("nobody", 10)

    async def test_database_errors_become_upstream_errors(self) -> None:
        Base.metadata.drop_all(self.engine)
        with self.assertRaises(UpstreamReadError) as ctx:
            await self.store.get_daily_playtime_counter("player123")
        self.assertIsNotNone(ctx.exception.__cause__)


if __name__ == "__main__":
    unittest.main()
