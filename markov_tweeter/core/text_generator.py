# text_generator.py
# Builds bounded-length, punctuated text from walks over a MarkovChain.

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import InvalidArgument
from .markov_chain import MarkovChain, WalkCursor
from .protocols import RandomSource
from markov_tweeter.utils.logger_utils import get_log

PUNCTUATION: Tuple[str, ...] = (".", "?", "!", ";")


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Length limits and the punctuation mix.

    With the defaults a finished walk is closed with "." 70% of the time and
    with each of ";", "?" and "!" 10% of the time.
    """
    max_length: int = 280          # platform character ceiling
    min_length: int = 2
    primary_mark: str = "."
    secondary_marks: Tuple[str, ...] = (";", "?", "!")
    punctuation_draw: int = 10     # bound for the punctuation draw

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise InvalidArgument("min_length must be at least 1")
        if self.max_length <= self.min_length:
            raise InvalidArgument("max_length must be greater than min_length")
        if self.punctuation_draw <= len(self.secondary_marks):
            raise InvalidArgument("punctuation_draw must leave room for the primary mark")
        for mark in (self.primary_mark, *self.secondary_marks):
            if mark not in PUNCTUATION:
                raise InvalidArgument(f"unsupported punctuation mark: {mark!r}")

    @property
    def max_target(self) -> int:
        # one character is kept free for the closing mark
        return self.max_length - 1


def is_punctuated(text: Optional[str]) -> bool:
    """True if `text` ends with one of the recognised punctuation marks."""
    if not text:
        return False
    return text[-1] in PUNCTUATION


class TextGenerator:
    """
    Produces one string per generate() call by walking the chain, starting
    a fresh walk (after a punctuation mark) whenever a walk ends before the
    requested length is reached.

    Every generated string ends with exactly one punctuation mark and is at
    most config.max_length characters long.
    """

    def __init__(self, chain: MarkovChain, rng: RandomSource, config: Optional[GeneratorConfig] = None) -> None:
        if chain is None:
            raise InvalidArgument("chain cannot be None")
        if rng is None:
            raise InvalidArgument("random source cannot be None")
        self.chain = chain
        self.rng = rng
        self.cfg = config or GeneratorConfig()

    def random_punctuation(self) -> str:
        """One draw: a secondary mark for small values, otherwise the primary mark."""
        m = self.rng.next_below(self.cfg.punctuation_draw)
        if m < len(self.cfg.secondary_marks):
            return self.cfg.secondary_marks[m]
        return self.cfg.primary_mark

    def _check_length(self, length: int) -> None:
        if not isinstance(length, int) or isinstance(length, bool):
            raise InvalidArgument(f"length must be an int, got {type(length).__name__}")
        if length < self.cfg.min_length or length > self.cfg.max_target:
            raise InvalidArgument(
                f"length must be between {self.cfg.min_length} and {self.cfg.max_target}, got {length}"
            )

    def _fits(self, text: str, token: str) -> bool:
        # room for the separator, the token and a closing mark
        sep = 1 if text else 0
        return len(text) + sep + len(token) + 1 <= self.cfg.max_length

    def _new_walk(self) -> WalkCursor:
        return self.chain.walk(rng=self.rng)

    def generate(self, length: int) -> str:
        """
        Generate text of roughly `length` characters.

        Stops once the accumulated text is at least `length` characters, or
        when the next word would push it past the ceiling. Raises
        InvalidArgument if length is outside [min_length, max_length - 1].
        """
        self._check_length(length)
        ceiling = self.cfg.max_length

        cursor = self._new_walk()
        first = cursor.advance()
        if not self._fits("", first):
            first = first[: ceiling - 1]
        text = first

        while len(text) < length and len(text) < ceiling:
            if cursor.has_next():
                if not self._fits(text, cursor.peek()):
                    break
                text = f"{text} {cursor.advance()}"
                continue

            # walk ended early: close the sentence and start another one
            if not is_punctuated(text):
                text += self.random_punctuation()
            if len(text) >= length or len(text) >= ceiling:
                break
            cursor = self._new_walk()
            if not self._fits(text, cursor.peek()):
                break
            text = f"{text} {cursor.advance()}"

        if not is_punctuated(text):
            text += self.random_punctuation()
        get_log().debug(f"generated {len(text)} chars (target {length})")
        return text

    def generate_many(self, count: int, length: int) -> List[str]:
        """Call generate(length) `count` times; count <= 0 gives an empty list."""
        return [self.generate(length) for _ in range(max(count, 0))]
