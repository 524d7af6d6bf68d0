# random_source.py - number generators implementing RandomSource

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from .errors import InvalidArgument


class RandomNumberGenerator:
    """RandomSource backed by its own random.Random, seedable for reproducible runs."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def next_below(self, bound: int) -> int:
        if bound <= 0:
            raise InvalidArgument(f"bound must be positive, got {bound}")
        return self._rng.randrange(bound)


class ListNumberGenerator:
    """
    Deterministic RandomSource that replays a fixed list of values, cycling
    back to the start when it runs out. Every value must be below the bound
    it is drawn against.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        if not self._values:
            raise InvalidArgument("ListNumberGenerator needs at least one value")
        if any(v < 0 for v in self._values):
            raise InvalidArgument("ListNumberGenerator values must be non-negative")
        self._idx = 0

    def next_below(self, bound: int) -> int:
        if bound <= 0:
            raise InvalidArgument(f"bound must be positive, got {bound}")
        val = self._values[self._idx]
        if val >= bound:
            raise InvalidArgument(f"generated value {val} is not below bound {bound}")
        self._idx = (self._idx + 1) % len(self._values)
        return val
