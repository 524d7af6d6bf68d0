# tests/conftest.py - shared fixtures
import pytest

from markov_tweeter.core.random_source import ListNumberGenerator
from markov_tweeter.utils.logger_utils import configure_logging, get_log


@pytest.fixture(autouse=True)
def isolated_log(tmp_path):
    """Send all log output to a per-test file and restore the shared logger afterwards."""
    log = get_log()
    saved = (log.path, log.level, log.echo)
    configure_logging(path=str(tmp_path / "test.log"), level="DEBUG", echo=False)
    yield log
    log.path, log.level, log.echo = saved


@pytest.fixture
def zeros():
    """Random source that always draws 0."""
    return ListNumberGenerator([0])


class CountingRandom:
    """Wraps a RandomSource and records every bound it was asked for."""

    def __init__(self, inner):
        self.inner = inner
        self.bounds = []

    def next_below(self, bound):
        self.bounds.append(bound)
        return self.inner.next_below(bound)


@pytest.fixture
def counting_zeros():
    return CountingRandom(ListNumberGenerator([0]))
