"""Tests for derived stats and reward application."""

from __future__ import annotations

import pytest

from rpg_combat.engine.catalog import GameData
from rpg_combat.engine.progression import apply_rewards, derive_stats
from rpg_combat.models.enums import Outcome
from rpg_combat.models.player import ClassDefinition, EquipmentBonuses, PlayerProfile
from rpg_combat.models.session import RewardSummary


@pytest.fixture
def warrior(game_data: GameData) -> ClassDefinition:
    class_def = game_data.classes.get("warrior")
    assert class_def is not None
    return class_def


@pytest.fixture
def profile() -> PlayerProfile:
    return PlayerProfile(name="Aria", class_id="warrior")


class TestDeriveStats:
    """Tests for stat derivation."""

    def test_level_one_warrior(self, profile: PlayerProfile, warrior: ClassDefinition) -> None:
        """Test the base warrior stat block."""
        stats = derive_stats(profile, warrior)

        assert stats.max_health == 100
        assert stats.max_mana == 36
        assert stats.attack == 12
        assert stats.magic_attack == 12
        assert stats.defense == 0
        assert stats.attributes["strength"] == 12

    def test_growth_and_equipment(self, warrior: ClassDefinition) -> None:
        """Test level growth and equipment bonuses."""
        profile = PlayerProfile(
            name="Aria",
            class_id="warrior",
            level=3,
            equipment=EquipmentBonuses(attack=4, defense=3, health=10),
        )

        stats = derive_stats(profile, warrior)

        assert stats.max_health == 100 + 2 * 10 + 10
        assert stats.max_mana == 36 + 2 * 2
        assert stats.attack == 16
        assert stats.defense == 3

    def test_fractional_attributes_floored(self, warrior: ClassDefinition) -> None:
        """Test fractional attributes are floored where they are used."""
        profile = PlayerProfile(
            name="Aria",
            class_id="warrior",
            attributes={"strength": 14.5, "agility": 8.5, "intelligence": 8.5, "constitution": 13.5},
        )

        stats = derive_stats(profile, warrior)

        assert stats.attributes["strength"] == 14
        assert stats.attack == 11 + 3


class TestApplyRewards:
    """Tests for folding a reward summary into the profile."""

    def test_gold_experience_and_items(self, profile: PlayerProfile, warrior: ClassDefinition) -> None:
        """Test currency, loot and consumed items."""
        start = profile.model_copy(update={"inventory": {"hp-potion": 2}})
        summary = RewardSummary(
            outcome=Outcome.VICTORY,
            experience_gained=30,
            gold_gained=12,
            loot_item_ids=("wolf-pelt", "wolf-pelt"),
            consumed_items={"hp-potion": 1},
            final_health=80,
            final_mana=20,
        )

        result = apply_rewards(start, summary, warrior)

        assert result.profile.experience == 30
        assert result.profile.gold == 62
        assert result.profile.inventory == {"hp-potion": 1, "wolf-pelt": 2}
        assert result.profile.health == 80
        assert result.profile.mana == 20
        assert result.leveled_up is False

    def test_level_up_carries_overflow(self, warrior: ClassDefinition) -> None:
        """Test a level-up keeps the overflow and grows the threshold."""
        profile = PlayerProfile(name="Aria", class_id="warrior", experience=90)
        summary = RewardSummary(outcome=Outcome.VICTORY, experience_gained=30, final_health=50, final_mana=10)

        result = apply_rewards(profile, summary, warrior)

        assert result.levels_gained == 1
        assert result.profile.level == 2
        assert result.profile.experience == 20
        assert result.profile.experience_to_next_level == 150
        assert result.profile.attributes is not None
        assert result.profile.attributes["strength"] == pytest.approx(14.5)
        assert result.profile.health == 60
        assert result.profile.mana is None

    def test_multiple_level_ups(self, profile: PlayerProfile, warrior: ClassDefinition) -> None:
        """Test a large reward can grant several levels."""
        summary = RewardSummary(outcome=Outcome.VICTORY, experience_gained=260, final_health=100)

        result = apply_rewards(profile, summary, warrior)

        assert result.levels_gained == 2
        assert result.profile.level == 3
        assert result.profile.experience == 10
        assert result.profile.experience_to_next_level == 225

    def test_stolen_gold_floors_at_zero(self, warrior: ClassDefinition) -> None:
        """Test gold never goes negative."""
        profile = PlayerProfile(name="Aria", class_id="warrior", gold=5)
        summary = RewardSummary(outcome=Outcome.RETREAT, gold_lost=20, final_health=40)

        assert apply_rewards(profile, summary, warrior).profile.gold == 0

    def test_defeat_recovers_and_loses_items(self, warrior: ClassDefinition) -> None:
        """Test defeat removes lost stacks and recovers the pools."""
        profile = PlayerProfile(
            name="Aria",
            class_id="warrior",
            health=30,
            inventory={"hp-potion": 3, "mana-potion": 1},
        )
        summary = RewardSummary(outcome=Outcome.DEFEAT, lost_item_ids=("hp-potion",), final_health=0)

        result = apply_rewards(profile, summary, warrior)

        assert result.profile.inventory == {"mana-potion": 1}
        assert result.items_lost == ("hp-potion",)
        assert result.profile.health is None
        assert result.profile.mana is None
