"""initial schema: players, daily playtime, drop tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "players",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("in_app_id", sa.String(length=64), nullable=False),
        sa.Column("nickname", sa.String(length=50), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="players_pkey"),
        sa.UniqueConstraint("in_app_id", name="players_in_app_id_key"),
    )
    op.create_table(
        "daily_playtimes",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("player_id", ID_TYPE, nullable=False),
        sa.Column("play_date", sa.Date(), nullable=False),
        sa.Column("two_hours_counter", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["player_id"],
            ["players.id"],
            name="daily_playtimes_player_id_fkey",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="daily_playtimes_pkey"),
        sa.UniqueConstraint(
            "player_id", "play_date", name="daily_playtimes_player_id_play_date_key"
        ),
    )
    op.create_index(
        "ix_daily_playtimes_player_id", "daily_playtimes", ["player_id"], unique=False
    )
    op.create_table(
        "draw_catalog_items",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("catalog_key", sa.String(length=100), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("item_name", sa.String(length=255), nullable=False),
        sa.Column("item_option", sa.String(length=255), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("drop_rate", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="draw_catalog_items_pkey"),
        sa.UniqueConstraint(
            "catalog_key",
            "position",
            name="draw_catalog_items_catalog_key_position_key",
        ),
    )
    op.create_index(
        "ix_draw_catalog_items_catalog_key",
        "draw_catalog_items",
        ["catalog_key"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_draw_catalog_items_catalog_key", table_name="draw_catalog_items")
    op.drop_table("draw_catalog_items")
    op.drop_index("ix_daily_playtimes_player_id", table_name="daily_playtimes")
    op.drop_table("daily_playtimes")
    op.drop_table("players")
