"""Tests for deterministic drafting randomness."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pocketdraft.utils.rng import generate_seed, make_rng, shuffled


class TestGenerateSeed:
    """Tests for generate_seed function."""

    def test_basic_seed_generation(self):
        assert generate_seed("Celts", 30, "heuristic", "game-1") == "Celts:30:heuristic:game-1"

    def test_different_parameters_produce_different_seeds(self):
        seeds = {
            generate_seed("Celts", 30, "heuristic", "a"),
            generate_seed("Romans", 30, "heuristic", "a"),
            generate_seed("Celts", 40, "heuristic", "a"),
            generate_seed("Celts", 30, "simple", "a"),
            generate_seed("Celts", 30, "heuristic", "b"),
        }
        assert len(seeds) == 5

    def test_negative_points_raises_error(self):
        with pytest.raises(ValueError, match="points must be non-negative"):
            generate_seed("Celts", -1, "simple", "test")

    def test_empty_faction_raises_error(self):
        with pytest.raises(ValueError, match="faction must not be empty"):
            generate_seed("", 10, "simple", "test")

    @given(
        points=st.integers(min_value=0, max_value=10000),
        context=st.text(min_size=1),
    )
    def test_seed_generation_properties(self, points, context):
        seed = generate_seed("Elves", points, "heuristic", context)
        assert seed == f"Elves:{points}:heuristic:{context}"


class TestMakeRng:
    """Tests for seeded random sources."""

    def test_same_seed_same_sequence(self):
        first = make_rng("seed")
        second = make_rng("seed")
        assert [first.random() for _ in range(5)] == [second.random() for _ in range(5)]

    def test_different_seeds_differ(self):
        first = [make_rng("a").random() for _ in range(3)]
        second = [make_rng("b").random() for _ in range(3)]
        assert first != second

    def test_unseeded_rng_is_private(self):
        rng = make_rng()
        assert 0.0 <= rng.random() < 1.0

    def test_shuffled_returns_copy(self):
        items = list(range(10))
        result = shuffled(make_rng("shuffle"), items)
        assert items == list(range(10))
        assert sorted(result) == items
        assert result == shuffled(make_rng("shuffle"), items)
