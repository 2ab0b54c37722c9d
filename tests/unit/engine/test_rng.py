"""Tests for the combat random stream."""

from __future__ import annotations

import pytest

from rpg_combat.engine.rng import CombatRandom


class TestCombatRandom:
    """Tests for CombatRandom."""

    def test_seeded_streams_repeat(self) -> None:
        """Test two streams with the same seed produce the same draws."""
        first = CombatRandom(seed=42)
        second = CombatRandom(seed=42)

        assert [first.random() for _ in range(20)] == [second.random() for _ in range(20)]
        assert first.seed == 42

    def test_randint_inclusive(self) -> None:
        """Test randint covers both ends of the range."""
        rng = CombatRandom(seed=7)

        values = {rng.randint(1, 3) for _ in range(500)}

        assert values == {1, 2, 3}

    def test_randint_degenerate_range(self) -> None:
        """Test an empty or single-value range returns the low bound."""
        rng = CombatRandom(seed=7)

        assert rng.randint(4, 4) == 4
        assert rng.randint(5, 2) == 5

    def test_chance_extremes(self) -> None:
        """Test certain and impossible Bernoulli trials."""
        rng = CombatRandom(seed=3)

        assert all(rng.chance(1.0) for _ in range(1000))
        assert not any(rng.chance(0.0) for _ in range(1000))

    def test_uniform_bounds(self) -> None:
        """Test uniform draws stay in the half-open interval."""
        rng = CombatRandom(seed=11)

        assert all(2.0 <= rng.uniform(2.0, 5.0) < 5.0 for _ in range(200))

    def test_choice(self) -> None:
        """Test choice picks from the sequence and rejects empty ones."""
        rng = CombatRandom(seed=5)

        assert rng.choice(["a", "b", "c"]) in {"a", "b", "c"}
        with pytest.raises(IndexError):
            rng.choice([])
