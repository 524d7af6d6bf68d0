# markov_tweeter/core/protocols.py
"""
Protocol interfaces and typed structures shared by the core components.

The chain and the generator depend on the RandomSource protocol rather than on
the `random` module directly, so tests can supply a fixed sequence of draws.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from typing_extensions import TypedDict


@runtime_checkable
class RandomSource(Protocol):
    """Minimal interface for the number generator used by samplers and the generator."""

    def next_below(self, bound: int) -> int:
        """
        Return an integer in [0, bound). `bound` must be positive.
        """
        ...


class ChainStats(TypedDict):
    """
    Summary of a trained chain, used for logging and the CLI.

    Example:
      {"sentences": 12, "start_words": 9, "vocabulary": 57, "bigrams": 71}
    """
    sentences: int
    start_words: int
    vocabulary: int
    bigrams: int
