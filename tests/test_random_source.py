# tests/test_random_source.py
import pytest

from markov_tweeter.core.errors import InvalidArgument
from markov_tweeter.core.protocols import RandomSource
from markov_tweeter.core.random_source import ListNumberGenerator, RandomNumberGenerator


def test_list_generator_cycles():
    rng = ListNumberGenerator([2, 0, 1])
    assert [rng.next_below(5) for _ in range(7)] == [2, 0, 1, 2, 0, 1, 2]


def test_list_generator_rejects_value_at_bound():
    rng = ListNumberGenerator([3])
    with pytest.raises(InvalidArgument):
        rng.next_below(3)


@pytest.mark.parametrize("values", [[], [-1]])
def test_list_generator_rejects_bad_values(values):
    with pytest.raises(InvalidArgument):
        ListNumberGenerator(values)


def test_seeded_generator_is_reproducible():
    a = RandomNumberGenerator(seed=42)
    b = RandomNumberGenerator(seed=42)
    draws_a = [a.next_below(100) for _ in range(20)]
    assert draws_a == [b.next_below(100) for _ in range(20)]
    assert all(0 <= d < 100 for d in draws_a)


@pytest.mark.parametrize("rng", [RandomNumberGenerator(1), ListNumberGenerator([0])])
def test_non_positive_bound_raises(rng):
    with pytest.raises(InvalidArgument):
        rng.next_below(0)


def test_generators_satisfy_protocol():
    assert isinstance(RandomNumberGenerator(), RandomSource)
    assert isinstance(ListNumberGenerator([0]), RandomSource)
