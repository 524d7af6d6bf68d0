"""
markov_tweeter.core

The Markov engine:
 - weighted frequency sampling (WeightedSampler)
 - the bigram transition table and its walks (MarkovChain, WalkCursor)
 - bounded-length, punctuated text generation (TextGenerator)
 - injectable random sources for reproducible runs
"""

from .errors import MarkovError, InvalidArgument, EmptyDistribution, ExhaustedWalk
from .sentinel import END
from .protocols import RandomSource, ChainStats
from .random_source import RandomNumberGenerator, ListNumberGenerator
from .distribution import WeightedSampler
from .markov_chain import MarkovChain, WalkCursor
from .text_generator import GeneratorConfig, TextGenerator, PUNCTUATION, is_punctuated

__all__ = [
    "MarkovError",
    "InvalidArgument",
    "EmptyDistribution",
    "ExhaustedWalk",
    "END",
    "RandomSource",
    "ChainStats",
    "RandomNumberGenerator",
    "ListNumberGenerator",
    "WeightedSampler",
    "MarkovChain",
    "WalkCursor",
    "GeneratorConfig",
    "TextGenerator",
    "PUNCTUATION",
    "is_punctuated",
]
