import os
import random
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from geometry_2d import angular_distance
from sampling import AngleSampler, InfeasibleConstraintError, rand_len, validate_bounds


class ScriptedRandom:
    """Restituisce valori prefissati a randrange."""

    def __init__(self, values):
        self.values = iter(values)
        self.calls = 0

    def randrange(self, n):
        self.calls += 1
        return next(self.values)


@pytest.fixture
def rng():
    return random.Random(1234)


def test_generated_triples_respect_separation(rng):
    sampler = AngleSampler(rng)
    for _ in range(200):
        a, b, c = sampler.sample()
        assert all(0 <= x < 360 for x in (a, b, c))
        assert angular_distance(a, b) >= 90
        assert angular_distance(a, c) >= 90
        assert angular_distance(b, c) >= 90


def test_rejects_and_resamples_whole_triple():
    scripted = ScriptedRandom([0, 45, 200, 0, 90, 200])
    assert AngleSampler(scripted).sample() == (0, 90, 200)
    assert scripted.calls == 6


def test_is_valid_boundary():
    sampler = AngleSampler(random.Random(0))
    assert sampler.is_valid((0, 90, 180))
    assert sampler.is_valid((0, 120, 240))
    assert not sampler.is_valid((0, 45, 200))


def test_exhaustion_raises():
    sampler = AngleSampler(ScriptedRandom([0] * 30), max_attempts=10)
    with pytest.raises(InfeasibleConstraintError):
        sampler.sample()


def test_impossible_separation_raises(rng):
    with pytest.raises(InfeasibleConstraintError):
        AngleSampler(rng, min_separation=121, max_attempts=200).sample()


def test_rand_len_in_bounds(rng):
    values = [rand_len(rng, 10, 20) for _ in range(500)]
    assert min(values) >= 10
    assert max(values) <= 20
    assert set(values) == set(range(10, 21))


def test_rand_len_fallback_on_bad_range(rng):
    assert rand_len(rng, 30, 20) == 50


@pytest.mark.parametrize("raw_min,raw_max,expected", [
    ("10", "400", (10, 400)),
    ("abc", "xyz", (1, 400)),
    ("", "", (1, 400)),
    (None, None, (1, 400)),
    ("0", "500", (1, 400)),
    ("-5", "100", (1, 100)),
    ("50", "20", (50, 51)),
    ("50", "50", (50, 51)),
    ("400", "400", (399, 400)),
    ("500", "600", (399, 400)),
    ("12.7", "300", (12, 300)),
    (" 25 ", "30", (25, 30)),
    (5, 6, (5, 6)),
])
def test_validate_bounds(raw_min, raw_max, expected):
    assert validate_bounds(raw_min, raw_max) == expected
