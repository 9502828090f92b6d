"""Drop tables stored in the database."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Float, Integer, String, UniqueConstraint, select
from sqlalchemy.orm import Mapped, Session, mapped_column

from .base import Base
from .id_type import ID_TYPE


class DrawCatalogItem(Base):
    """One ordered row of a named drop table."""

    __tablename__ = "draw_catalog_items"

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    catalog_key: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    """Order of the entry in the table; defines the cumulative-weight walk."""

    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    item_option: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    item_id: Mapped[int] = mapped_column(Integer, nullable=False)
    drop_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    __table_args__ = (
        UniqueConstraint(
            "catalog_key", "position", name="draw_catalog_items_catalog_key_position_key"
        ),
    )

    def __init__(
        self,
        *,
        catalog_key: str,
        position: int,
        item_name: str,
        item_id: int,
        drop_rate: float,
        item_option: Optional[str] = None,
    ) -> None:
        self.catalog_key = catalog_key
        self.position = position
        self.item_name = item_name
        self.item_id = item_id
        self.drop_rate = drop_rate
        self.item_option = item_option or ""

    def __repr__(self) -> str:  # pragma: no cover - repr is trivial
        return (
            f"<DrawCatalogItem(catalog_key={self.catalog_key!r}, position={self.position}, "
            f"item_name={self.item_name!r}, drop_rate={self.drop_rate})>"
        )

    @classmethod
    def for_catalog(cls, session: Session, catalog_key: str) -> list["DrawCatalogItem"]:
        """Return every row of ``catalog_key`` in table order."""
        stmt = (
            select(cls)
            .where(cls.catalog_key == catalog_key)
            .order_by(cls.position.asc(), cls.id.asc())
        )
        return list(session.scalars(stmt))
