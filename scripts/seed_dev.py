from datetime import datetime, timezone
from pathlib import Path

from playdraw.catalog import JsonCatalogLoader
from playdraw.config import DEFAULT_CATALOG_KEY
from playdraw.db.engine import get_sessionmaker, make_engine
from playdraw.draw import REQUIRED_PLAYTIME_IN_SECONDS
from playdraw.models import Base, DailyPlaytime, DrawCatalogItem, Player

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def main() -> None:
    """Seed the development database with players, playtime and the drop table."""
    engine = make_engine()
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    Session = get_sessionmaker(engine)

    now = datetime.now(timezone.utc)
    today = now.date()

    with Session.begin() as session:
        alice = Player(in_app_id="player_01", nickname="Alice", created_at=now, updated_at=now)
        bob = Player(in_app_id="player_02", nickname="Bob", created_at=now, updated_at=now)
        session.add_all([alice, bob])
        session.flush()

        # Alice has finished today's two hours; Bob is halfway.
        session.add_all(
            [
                DailyPlaytime(
                    player_id=alice.id,
                    play_date=today,
                    two_hours_counter=REQUIRED_PLAYTIME_IN_SECONDS,
                ),
                DailyPlaytime(
                    player_id=bob.id,
                    play_date=today,
                    two_hours_counter=REQUIRED_PLAYTIME_IN_SECONDS // 2,
                ),
            ]
        )

        items = JsonCatalogLoader(DATA_DIR).get_items(DEFAULT_CATALOG_KEY)
        for position, item in enumerate(items):
            session.add(
                DrawCatalogItem(
                    catalog_key=DEFAULT_CATALOG_KEY,
                    position=position,
                    item_name=item.item_name,
                    item_option=item.item_option,
                    item_id=item.item_id,
                    drop_rate=item.drop_rate,
                )
            )

    print(f"Seeded 2 players and {len(items)} drop table entries.")


if __name__ == "__main__":
    main()
