"""Cumulative-weight sampling over an ordered drop table."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence

from ..rng import RandomSource


@dataclass(frozen=True)
class ItemEntry:
    """One row of a drop table.

    Attributes
    ----------
    item_name : str
        Display name of the item.
    item_option : str
        Free-form option string (e.g. a rolled stat), ``""`` when absent.
    item_id : int
        Catalog identifier of the item. Several entries may share an id.
    drop_rate : float
        Non-negative weight. Weights need not sum to 1; only their relative
        share of the pool's total matters.
    """

    item_name: str
    item_option: str
    item_id: int
    drop_rate: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.drop_rate) or self.drop_rate < 0:
            raise ValueError(
                f"drop_rate must be a finite non-negative number, got {self.drop_rate} for {self.item_name!r}"
            )


@dataclass(frozen=True)
class DrawResult:
    """The item chosen by a draw."""

    dropped_item_name: str
    dropped_item_id: int


def total_weight(pool: Sequence[ItemEntry]) -> float:
    """Return the sum of every entry's ``drop_rate``."""
    return sum(entry.drop_rate for entry in pool)


def select_entry(pool: Sequence[ItemEntry], value: float) -> Optional[ItemEntry]:
    """Return the entry whose cumulative range contains ``value``.

    Parameters
    ----------
    pool : Sequence[ItemEntry]
        Ordered drop table.
    value : float
        Uniform draw in ``[0, 1)``; it is scaled by the pool's total weight.

    Returns
    -------
    Optional[ItemEntry]
        ``None`` when the pool is empty or every weight is zero. Otherwise the
        first entry whose running sum strictly exceeds ``value * total``, so a
        value sitting exactly on a boundary belongs to the following entry and
        zero-weight entries are never chosen.
    """
    total = total_weight(pool)
    if not pool or total == 0:
        return None

    target = value * total
    running = 0.0
    last_selectable: Optional[ItemEntry] = None
    for entry in pool:
        if entry.drop_rate == 0:
            continue
        running += entry.drop_rate
        last_selectable = entry
        if running > target:
            return entry
    # Float rounding can leave the final running sum a hair under the target.
    return last_selectable


def drop_item(pool: Sequence[ItemEntry], rng: RandomSource) -> Optional[DrawResult]:
    """Draw at most one item from ``pool`` using a single call to ``rng``.

    An empty or all-zero pool yields ``None`` without consuming randomness.
    """
    if not pool or total_weight(pool) == 0:
        return None
    entry = select_entry(pool, rng.next())
    if entry is None:
        return None
    return DrawResult(dropped_item_name=entry.item_name, dropped_item_id=entry.item_id)


def drop_probabilities(pool: Sequence[ItemEntry]) -> dict[int, float]:
    """Return each selectable position's share of the pool's total weight.

    Keys are positions in ``pool`` rather than item ids because ids are not
    required to be unique.
    """
    total = total_weight(pool)
    if total == 0:
        return {}
    return {
        index: entry.drop_rate / total
        for index, entry in enumerate(pool)
        if entry.drop_rate > 0
    }


def simulate_drops(
    pool: Sequence[ItemEntry], rng: RandomSource, simulations: int
) -> Counter[str]:
    """Run ``simulations`` draws and count the dropped item names."""
    if simulations < 1:
        raise ValueError("simulations must be at least 1")

    counts: Counter[str] = Counter()
    for _ in range(simulations):
        result = drop_item(pool, rng)
        if result is None:
            break
        counts[result.dropped_item_name] += 1
    return counts


__all__ = [
    "DrawResult",
    "ItemEntry",
    "drop_item",
    "drop_probabilities",
    "select_entry",
    "simulate_drops",
    "total_weight",
]
