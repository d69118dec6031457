"""
Unit tests for rng.py - Random Variate Source.
"""
import pytest
from umbral_creation.rng import RandomVariateSource, spawn_sources


class TestRandomVariateSource:
    """Tests for RandomVariateSource."""

    def test_draws_stay_in_range(self):
        source = RandomVariateSource(seed=1)
        draws = [source.next_in_range(1, 191) for _ in range(5000)]
        assert min(draws) >= 1
        assert max(draws) <= 191

    def test_both_ends_reachable(self):
        """The range is inclusive on both ends."""
        source = RandomVariateSource(seed=2)
        draws = {source.next_in_range(1, 3) for _ in range(500)}
        assert draws == {1, 2, 3}

    def test_single_value_range(self):
        assert RandomVariateSource().next_in_range(14, 14) == 14

    def test_empty_range_rejected(self):
        with pytest.raises(ValueError):
            RandomVariateSource().next_in_range(5, 4)

    def test_same_seed_same_draws(self):
        a = RandomVariateSource(seed=77)
        b = RandomVariateSource(seed=77)
        assert [a.next_in_range(1, 248) for _ in range(50)] == [b.next_in_range(1, 248) for _ in range(50)]


class TestSpawnSources:
    """Tests for spawn_sources()."""

    def test_count(self):
        assert len(spawn_sources(7)) == 7

    def test_sources_are_distinct_objects(self):
        sources = spawn_sources(4, seed=5)
        assert len({id(s) for s in sources}) == 4

    def test_seeded_sources_differ_from_each_other(self):
        first, second = spawn_sources(2, seed=5)
        assert [first.next_in_range(1, 10**9) for _ in range(5)] != \
            [second.next_in_range(1, 10**9) for _ in range(5)]

    def test_seeded_spawn_is_reproducible(self):
        run_a = [s.next_in_range(1, 131) for s in spawn_sources(3, seed=11)]
        run_b = [s.next_in_range(1, 131) for s in spawn_sources(3, seed=11)]
        assert run_a == run_b
