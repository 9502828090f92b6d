"""Drop table loaders."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .draw.sampler import ItemEntry
from .errors import CatalogError
from .models import DrawCatalogItem

logger = logging.getLogger(__name__)

# Field names used by exported drop-table JSON files.
REQUIRED_FIELDS = ("itemName", "itemId", "dropRate")


def item_from_record(record: Mapping[str, Any]) -> ItemEntry:
    """Convert one camelCase drop-table record into an :class:`ItemEntry`.

    Raises
    ------
    CatalogError
        If a required field is missing or has the wrong type.
    """
    missing = [field for field in REQUIRED_FIELDS if field not in record]
    if missing:
        raise CatalogError(f"Drop table record is missing {', '.join(missing)}: {record!r}")
    try:
        return ItemEntry(
            item_name=str(record["itemName"]),
            item_option=str(record.get("itemOption") or ""),
            item_id=int(record["itemId"]),
            drop_rate=float(record["dropRate"]),
        )
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Invalid drop table record {record!r}: {exc}") from exc


class JsonCatalogLoader:
    """Load ``<directory>/<catalog_key>.json`` drop tables."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def get_items(self, catalog_key: str) -> list[ItemEntry]:
        path = self.directory / f"{catalog_key}.json"
        if not path.exists():
            logger.warning(f"Drop table {catalog_key!r} not found at {path}")
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(f"Cannot read drop table {path}: {exc}") from exc

        if not isinstance(records, list):
            raise CatalogError(f"Drop table {path} must contain a JSON array")
        items = [item_from_record(record) for record in records]
        logger.debug(f"Loaded {len(items)} entries for drop table {catalog_key!r}")
        return items


class SqlCatalogLoader:
    """Load drop tables from :class:`~playdraw.models.DrawCatalogItem` rows."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_items(self, catalog_key: str) -> list[ItemEntry]:
        try:
            with self._session_factory() as session:
                rows = DrawCatalogItem.for_catalog(session, catalog_key)
                items = [
                    ItemEntry(
                        item_name=row.item_name,
                        item_option=row.item_option or "",
                        item_id=row.item_id,
                        drop_rate=row.drop_rate,
                    )
                    for row in rows
                ]
        except SQLAlchemyError as exc:
            raise CatalogError(f"Cannot read drop table {catalog_key!r}: {exc}") from exc
        except ValueError as exc:
            raise CatalogError(f"Invalid row in drop table {catalog_key!r}: {exc}") from exc
        if not items:
            logger.warning(f"Drop table {catalog_key!r} has no entries")
        return items


class StaticCatalogLoader:
    """Serve drop tables from an in-memory mapping."""

    def __init__(self, tables: Mapping[str, Sequence[ItemEntry]]) -> None:
        self._tables = {key: tuple(items) for key, items in tables.items()}

    def get_items(self, catalog_key: str) -> list[ItemEntry]:
        return list(self._tables.get(catalog_key, ()))


__all__ = [
    "JsonCatalogLoader",
    "SqlCatalogLoader",
    "StaticCatalogLoader",
    "item_from_record",
]
