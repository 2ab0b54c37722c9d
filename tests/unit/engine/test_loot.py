"""Tests for loot generation."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rpg_combat.core.config import RulesSettings
from rpg_combat.engine.loot import LootGenerator
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.models.actors import Actor
from rpg_combat.models.loot import ItemDrop, LootTable, ValueRange


@pytest.fixture
def seeded_loot(rules: RulesSettings) -> LootGenerator:
    """Loot generator on a real seeded stream."""
    return LootGenerator(CombatRandom(seed=1234), rules)


class TestLootIndependence:
    """Tests for per-item Bernoulli trials."""

    def test_certain_and_impossible_items(
        self,
        seeded_loot: LootGenerator,
        make_actor: Callable[..., Actor],
    ) -> None:
        """Test a 1.0 item always drops and a 0.0 item never does."""
        actor = make_actor(
            loot_table=LootTable(items=(ItemDrop(id="always", chance=1.0), ItemDrop(id="never", chance=0.0))),
        )

        results = [seeded_loot.roll([actor]) for _ in range(1000)]

        assert all("always" in result.items for result in results)
        assert not any("never" in result.items for result in results)

    def test_duplicates_kept(self, seeded_loot: LootGenerator, make_actor: Callable[..., Actor]) -> None:
        """Test drops from several actors are concatenated."""
        table = LootTable(
            gold=ValueRange(min=5, max=5),
            experience=ValueRange(min=10, max=10),
            items=(ItemDrop(id="pelt", chance=1.0),),
        )
        actors = [make_actor("Wolf", loot_table=table), make_actor("Wolf", loot_table=table)]

        result = seeded_loot.roll(actors)

        assert result.items == ["pelt", "pelt"]
        assert result.gold == 10
        assert result.experience == 20


class TestRanges:
    """Tests for gold and experience ranges."""

    def test_range_bounds(self, seeded_loot: LootGenerator) -> None:
        """Test rolls stay inside the inclusive range and reach both ends."""
        value_range = ValueRange(min=3, max=6)

        values = {seeded_loot.roll_range(value_range) for _ in range(1000)}

        assert values == {3, 4, 5, 6}

    def test_experience_level_bonus(self, seeded_loot: LootGenerator, make_actor: Callable[..., Actor]) -> None:
        """Test actors above their template level give more experience."""
        table = LootTable(experience=ValueRange(min=10, max=10))
        actor = make_actor(loot_table=table)
        actor.level = 3

        assert seeded_loot.experience_factor(actor) == pytest.approx(1.2)
        assert seeded_loot.roll([actor]).experience == 12


class TestItemLoss:
    """Tests for the defeat penalty."""

    def test_certain_loss(self, make_actor: Callable[..., Actor]) -> None:
        """Test every held stack is lost at chance 1."""
        generator = LootGenerator(CombatRandom(seed=1), RulesSettings(defeat_item_loss_chance=1.0))

        lost = generator.roll_item_loss({"hp-potion": 2, "mana-potion": 1, "empty": 0})

        assert lost == ["hp-potion", "mana-potion"]

    def test_no_loss(self) -> None:
        """Test nothing is lost at chance 0."""
        generator = LootGenerator(CombatRandom(seed=1), RulesSettings(defeat_item_loss_chance=0.0))

        assert generator.roll_item_loss({"hp-potion": 2}) == []
