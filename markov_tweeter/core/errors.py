# errors.py - exceptions raised by the Markov core


class MarkovError(Exception):
    """Base class for contract violations in the Markov core."""


class InvalidArgument(MarkovError, ValueError):
    """Raised for a missing required input or an out-of-range argument."""


class EmptyDistribution(MarkovError, LookupError):
    """Raised when drawing from a sampler (or chain) with no observations."""


class ExhaustedWalk(MarkovError, LookupError):
    """Raised when advancing a walk that already reached the end of a sentence."""
