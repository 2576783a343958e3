"""Tests for RandomTaskGenerator."""

import pytest

from heapsched.task_generator import RandomTaskGenerator, Task, make_rng


def test_next_within_configured_ranges():
    """Test random tasks stay inside the default ranges."""
    generator = RandomTaskGenerator(make_rng(42))
    for _ in range(300):
        task = generator.next()
        assert isinstance(task, Task)
        assert 0 <= task.priority <= 10
        assert 0 <= task.duration <= 50
        assert task.name.startswith("W")
        assert 1 <= int(task.name[1:]) <= 10


def test_next_covers_range_bounds():
    """Test both ends of the closed ranges are reachable."""
    generator = RandomTaskGenerator(make_rng(3))
    priorities = {generator.next().priority for _ in range(1000)}
    assert 0 in priorities
    assert 10 in priorities


def test_next_is_reproducible_with_seed():
    """Test the same seed gives the same task sequence."""
    first = RandomTaskGenerator(make_rng(99))
    second = RandomTaskGenerator(make_rng(99))
    for _ in range(20):
        a, b = first.next(), second.next()
        assert (a.name, a.priority, a.duration) == (b.name, b.priority, b.duration)


def test_custom_ranges():
    """Test config overrides narrow the draws."""
    generator = RandomTaskGenerator(make_rng(0), {
        'priority_min': 4, 'priority_max': 4,
        'duration_min': 2, 'duration_max': 2,
        'name_prefix': 'Z', 'name_min': 5, 'name_max': 5,
    })
    task = generator.next()
    assert (task.name, task.priority, task.duration) == ("Z5", 4, 2)


def test_sentinel_check_matches_single_draws():
    """Test each sentinel check consumes one draw in [0, 100] and hits on 2."""
    generator = RandomTaskGenerator(make_rng(7))
    results = [generator.arrival_check() for _ in range(500)]

    rng = make_rng(7)
    expected = [int(rng.integers(0, 100, endpoint=True)) == 2 for _ in range(500)]
    assert results == expected


def test_sentinel_check_rate():
    """Test the sentinel check arrives roughly once per 101 checks."""
    generator = RandomTaskGenerator(make_rng(2024))
    hits = sum(generator.arrival_check() for _ in range(20000))
    assert 120 < hits < 280


def test_sentinel_check_explicit_arguments():
    """Test explicit sentinel and upper bound."""
    generator = RandomTaskGenerator(make_rng(1))
    assert all(generator.arrival_check(0, 0) for _ in range(10))
    assert not any(generator.arrival_check(-1, 100) for _ in range(200))


def test_bernoulli_mode():
    """Test bernoulli mode never arrives at probability 0 and refuses certainty."""
    never = RandomTaskGenerator(make_rng(5), {'mode': 'bernoulli', 'probability': 0.0})
    assert not any(never.arrival_check() for _ in range(1000))

    with pytest.raises(ValueError):
        RandomTaskGenerator(make_rng(5), {'mode': 'bernoulli', 'probability': 1.0})


def test_disabled_arrivals():
    generator = RandomTaskGenerator(make_rng(5), {'enabled': False})
    assert not any(generator.arrival_check(0, 0) for _ in range(100))


@pytest.mark.parametrize("config", [
    {'priority_min': 5, 'priority_max': 1},
    {'duration_min': 10, 'duration_max': 0},
    {'mode': 'poisson'},
    {'probability': 1.5},
    {'probability': -0.1},
    {'mode': 'bernoulli', 'probability': 1.0},
    {'check_upper': 0, 'check_value': 0},
    {'check_upper': -1},
])
def test_invalid_config(config):
    """Test invalid arrival configuration is rejected."""
    with pytest.raises(ValueError):
        RandomTaskGenerator(make_rng(0), config)


def test_default_config_not_mutated():
    """Test overrides do not leak into the shared defaults."""
    from heapsched.config.params import ARRIVAL

    RandomTaskGenerator(make_rng(0), {'name_prefix': 'Q'})
    assert ARRIVAL['name_prefix'] == 'W'
