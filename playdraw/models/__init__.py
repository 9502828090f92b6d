from .base import Base

# import models so Alembic/autoloaders can discover mappers
from .player import DailyPlaytime, Player  # noqa: F401
from .catalog import DrawCatalogItem  # noqa: F401

__all__ = [
    "Base",
    "DailyPlaytime",
    "DrawCatalogItem",
    "Player",
]
