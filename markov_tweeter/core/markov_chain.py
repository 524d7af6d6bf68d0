# markov_chain.py
# first-order Markov chain over word bigrams, with per-walk cursors.

from __future__ import annotations
from typing import Dict, Iterable, Iterator, Optional, Union

from .distribution import WeightedSampler
from .errors import EmptyDistribution, ExhaustedWalk, InvalidArgument
from .protocols import ChainStats, RandomSource
from .sentinel import END, EndOfSentence
from markov_tweeter.utils.logger_utils import get_log

Word = str
Successor = Union[Word, EndOfSentence]


class WalkCursor:
    """
    One walk through a trained chain.

    State is either HOLDING(token) or EXHAUSTED. advance() returns the held
    token and moves to a successor drawn from the chain, or to EXHAUSTED
    when the drawn successor is END. Cursors are independent of each other
    and never modify the chain.
    """

    __slots__ = ("_chain", "_rng", "_current")

    def __init__(self, chain: "MarkovChain", rng: RandomSource, start: Optional[Word]) -> None:
        self._chain = chain
        self._rng = rng
        self._current: Optional[Word] = start

    def has_next(self) -> bool:
        return self._current is not None

    def peek(self) -> Optional[Word]:
        """Held token, or None once the walk is exhausted."""
        return self._current

    def advance(self) -> Word:
        """
        Return the held token and draw its successor (one random draw).
        A token with no recorded successors, only reachable through an
        explicit start word, ends the walk without drawing.
        """
        if self._current is None:
            raise ExhaustedWalk("no more words on this walk")
        out = self._current
        successors = self._chain.get(out)
        if successors is None:
            # explicit start word never seen in training
            self._current = None
            return out
        nxt = successors.pick(self._rng)
        self._current = None if nxt is END else nxt
        return out

    def __iter__(self) -> Iterator[Word]:
        return self

    def __next__(self) -> Word:
        if self._current is None:
            raise StopIteration
        return self.advance()


class MarkovChain:
    """
    Bigram transition table: word -> WeightedSampler over successor words
    (END marks "sentence ends here"), plus a sampler over start words.

    The chain keeps a default cursor so it can be walked directly with
    reset() / has_next() / next(); walk() hands out independent cursors
    that share the trained table.
    """

    def __init__(self, rng: RandomSource) -> None:
        if rng is None:
            raise InvalidArgument("random source cannot be None")
        self.rng = rng
        self._chain: Dict[Word, WeightedSampler[Successor]] = {}
        self._start_words: WeightedSampler[Word] = WeightedSampler()
        self._sentences = 0
        self._bigrams = 0
        self._cursor = WalkCursor(self, rng, None)

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def add_bigram(self, first: Word, second: Successor) -> None:
        """Record one observation of `second` following `first`."""
        if first is None:
            raise InvalidArgument("first word of a bigram cannot be None")
        if second is None:
            raise InvalidArgument("use END, not None, to end a sentence")
        sampler = self._chain.get(first)
        if sampler is None:
            sampler = self._chain[first] = WeightedSampler()
        sampler.record(second)
        self._bigrams += 1

    def train(self, sentence: Iterable[Word]) -> None:
        """
        Add one sentence of training data. The first word becomes a start
        word, each adjacent pair a transition, and the last word transitions
        to END. An empty sentence is ignored.
        """
        if sentence is None:
            raise InvalidArgument("sentence cannot be None")
        words = list(sentence)
        if not words:
            return
        if any(w is None for w in words):
            raise InvalidArgument("sentence contains a None token")
        self._start_words.record(words[0])
        for first, second in zip(words, words[1:]):
            self.add_bigram(first, second)
        self.add_bigram(words[-1], END)
        self._sentences += 1
        get_log().debug(f"trained sentence #{self._sentences}, vocabulary={len(self._chain)}")

    # ------------------------------------------------------------------
    # Table access
    # ------------------------------------------------------------------
    def get(self, token: Word) -> Optional[WeightedSampler[Successor]]:
        """Successor distribution for `token`, or None if it was never seen."""
        return self._chain.get(token)

    @property
    def start_words(self) -> WeightedSampler[Word]:
        return self._start_words

    def vocabulary_size(self) -> int:
        return len(self._chain)

    def stats(self) -> ChainStats:
        return ChainStats(
            sentences=self._sentences,
            start_words=len(self._start_words),
            vocabulary=len(self._chain),
            bigrams=self._bigrams,
        )

    def __contains__(self, token: object) -> bool:
        return token in self._chain

    # ------------------------------------------------------------------
    # Walking
    # ------------------------------------------------------------------
    def walk(self, start: Optional[Word] = None, *, rng: Optional[RandomSource] = None) -> WalkCursor:
        """
        New cursor positioned on `start`, or on a start word drawn by
        observed frequency when no start is given. `rng` overrides the
        chain's random source for this walk only.
        """
        rng = self.rng if rng is None else rng
        if self._start_words.total() == 0:
            raise EmptyDistribution("chain has no start words; train it first")
        if start is None:
            start = self._start_words.pick(rng)
        return WalkCursor(self, rng, start)

    def walk_from(self, start: Word) -> WalkCursor:
        if start is None:
            raise InvalidArgument("start word cannot be None")
        return self.walk(start)

    def reset(self, start: Optional[Word] = None) -> None:
        """Begin a new walk on the chain's own cursor."""
        if start is None:
            self._cursor = self.walk()
        else:
            self._cursor = self.walk_from(start)

    def has_next(self) -> bool:
        return self._cursor.has_next()

    def peek(self) -> Optional[Word]:
        return self._cursor.peek()

    def next(self) -> Word:
        return self._cursor.advance()

    def __iter__(self) -> Iterator[Word]:
        return self

    def __next__(self) -> Word:
        return next(self._cursor)
