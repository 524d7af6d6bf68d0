# distribution.py
# Frequency distribution over observed values with weighted random draw.

from __future__ import annotations
from collections import Counter
from typing import Generic, Hashable, Iterator, List, Tuple, TypeVar

from .errors import EmptyDistribution, InvalidArgument
from .protocols import RandomSource
from .sentinel import END

T = TypeVar("T", bound=Hashable)


def _draw_order(value):
    # real values ascending, END always last
    return (1, "") if value is END else (0, value)


class WeightedSampler(Generic[T]):
    """
    Records observations and draws a value with probability count / total.

    Draws walk the values in sorted order (END last), so the same sequence
    of random numbers always gives the same picks regardless of insertion
    order.
    """

    __slots__ = ("_counts", "_total")

    def __init__(self) -> None:
        self._counts: Counter = Counter()
        self._total: int = 0

    # recording ------------------------------------------------------------
    def record(self, value: T) -> None:
        """Add one observation of `value`."""
        self._counts[value] += 1
        self._total += 1

    # queries --------------------------------------------------------------
    def total(self) -> int:
        return self._total

    def count(self, value: T) -> int:
        return self._counts.get(value, 0)

    def values(self) -> List[T]:
        return sorted(self._counts, key=_draw_order)

    def items(self) -> List[Tuple[T, int]]:
        return [(v, self._counts[v]) for v in self.values()]

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, value: object) -> bool:
        return value in self._counts

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __repr__(self) -> str:
        body = ", ".join(f"{v!r}: {c}" for v, c in self.items())
        return f"WeightedSampler({{{body}}})"

    # drawing --------------------------------------------------------------
    def pick(self, rng: RandomSource) -> T:
        """
        Draw r uniformly from [0, total) and return the value whose cumulative
        count range contains r. Consumes exactly one draw from `rng`.
        """
        if rng is None:
            raise InvalidArgument("random source cannot be None")
        if self._total == 0:
            raise EmptyDistribution("cannot pick from an empty distribution")

        r = rng.next_below(self._total)
        for value, c in self.items():
            if r < c:
                return value
            r -= c
        # only reachable if rng broke its contract
        raise InvalidArgument(f"random source returned a value outside [0, {self._total})")
