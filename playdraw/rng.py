"""Random sources used by the weighted sampler."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Optional, Protocol


class RandomSource(Protocol):
    """Anything that yields uniform floats in ``[0, 1)``."""

    def next(self) -> float: ...


class SeededRandomSource:
    """:class:`random.Random` behind the :class:`RandomSource` interface.

    Passing the same ``seed`` always reproduces the same sequence of draws.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()


class SequenceRandomSource:
    """Replay a fixed list of values, e.g. to reproduce a reported draw."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values: Iterator[float] = iter(list(values))

    def next(self) -> float:
        try:
            value = float(next(self._values))
        except StopIteration as exc:
            raise RuntimeError("SequenceRandomSource is exhausted") from exc
        if not 0.0 <= value < 1.0:
            raise ValueError(f"random values must lie in [0, 1), got {value}")
        return value


def get_rng(seed: Optional[int] = None) -> RandomSource:
    """Return a seeded source, or an unseeded one when ``seed`` is ``None``."""
    return SeededRandomSource(seed)


__all__ = ["RandomSource", "SeededRandomSource", "SequenceRandomSource", "get_rng"]
