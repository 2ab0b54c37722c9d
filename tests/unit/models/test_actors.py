"""Tests for the runtime actor model."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from pydantic import ValidationError

from rpg_combat.models.abilities import AbilityDefinition
from rpg_combat.models.actors import AbilitySlot, ActiveEffect, Actor, ActorTemplate
from rpg_combat.models.enums import AbilityKind, StatType, StatusType


class TestActorPools:
    """Tests for health and mana bounds."""

    def test_take_damage_clamps_at_zero(self, make_actor: Callable[..., Actor]) -> None:
        """Test health never drops below zero."""
        actor = make_actor(health=10)

        lost = actor.take_damage(25)

        assert lost == 10
        assert actor.health == 0
        assert actor.defeated is True

    def test_negative_damage_ignored(self, make_actor: Callable[..., Actor]) -> None:
        """Test negative damage does not heal."""
        actor = make_actor(health=10)

        assert actor.take_damage(-5) == 0
        assert actor.health == 10

    def test_restore_health_clamps_at_max(self, make_actor: Callable[..., Actor]) -> None:
        """Test healing never exceeds max_health."""
        actor = make_actor(health=20, max_health=30)

        restored = actor.restore_health(50)

        assert restored == 10
        assert actor.health == 30

    def test_health_above_max_rejected(self) -> None:
        """Test construction rejects health above the maximum."""
        with pytest.raises(ValidationError):
            Actor(name="Broken", template_id="broken", max_health=10, health=11)

    def test_assignment_validated(self, make_actor: Callable[..., Actor]) -> None:
        """Test assigning health above the maximum is rejected."""
        actor = make_actor(health=10)

        with pytest.raises(ValidationError):
            actor.health = 11

    def test_half_defined_mana_rejected(self) -> None:
        """Test mana and max_mana must be set together."""
        with pytest.raises(ValidationError):
            Actor(name="Broken", template_id="broken", max_health=10, health=10, mana=5)

    def test_mana_spending(self, make_actor: Callable[..., Actor]) -> None:
        """Test mana checks and spending."""
        actor = make_actor(mana=20)

        assert actor.has_mana_for(15) is True
        actor.spend_mana(15)
        assert actor.mana == 5
        assert actor.has_mana_for(15) is False
        assert actor.restore_mana(100) == 15
        assert actor.mana == 20

    def test_actor_without_mana_can_always_pay(self, make_actor: Callable[..., Actor]) -> None:
        """Test actors without a mana pool ignore mana costs."""
        actor = make_actor()

        assert actor.has_mana_for(999) is True
        actor.spend_mana(999)
        assert actor.mana is None
        assert actor.restore_mana(10) == 0


class TestActorStats:
    """Tests for derived current stats."""

    def test_recompute_applies_modifiers(self, make_actor: Callable[..., Actor]) -> None:
        """Test current stats are base plus active modifiers."""
        actor = make_actor(attack=10, defense=4)
        actor.status_effects.append(
            ActiveEffect(type=StatusType.ATTACK_UP, remaining_duration=2, magnitude=3, stat=StatType.ATTACK)
        )
        actor.status_effects.append(
            ActiveEffect(type=StatusType.DEFENSE_DOWN, remaining_duration=2, magnitude=-10, stat=StatType.DEFENSE)
        )

        actor.recompute_stats()

        assert actor.current_attack == 13
        assert actor.current_defense == 0

    def test_miss_chance_from_accuracy(self, make_actor: Callable[..., Actor]) -> None:
        """Test negative accuracy turns into a miss chance."""
        actor = make_actor()
        assert actor.miss_chance == 0.0

        actor.status_effects.append(
            ActiveEffect(type=StatusType.ACCURACY_DOWN, remaining_duration=1, magnitude=-50, stat=StatType.ACCURACY)
        )

        assert actor.miss_chance == 0.5

    def test_effective_agility(self, make_actor: Callable[..., Actor]) -> None:
        """Test agility modifiers apply on top of the attribute."""
        actor = make_actor(attributes={"agility": 8})
        actor.status_effects.append(
            ActiveEffect(type=StatusType.AGILITY_DOWN, remaining_duration=1, magnitude=-5, stat=StatType.AGILITY)
        )

        assert actor.effective_agility == 3

    def test_stat_value(self, make_actor: Callable[..., Actor]) -> None:
        """Test the scaling stat lookup."""
        actor = make_actor(attack=7, magic_attack=15)

        assert actor.stat_value(StatType.ATTACK) == 7
        assert actor.stat_value(StatType.MAGIC_ATTACK) == 15


class TestAbilitySlot:
    """Tests for per-actor cooldown tracking."""

    def test_cooldown_cycle(self) -> None:
        """Test trigger and countdown."""
        definition = AbilityDefinition(
            id="smash", name="Smash", kind=AbilityKind.ATTACK, damage_multiplier=2.0, cooldown=2
        )
        slot = AbilitySlot.from_definition(definition)

        assert slot.is_ready
        slot.trigger()
        assert slot.cooldown_remaining == 2
        slot.tick_cooldown()
        assert not slot.is_ready
        slot.tick_cooldown()
        assert slot.is_ready
        slot.tick_cooldown()
        assert slot.cooldown_remaining == 0


class TestActorTemplate:
    """Tests for static templates."""

    def test_frozen(self) -> None:
        """Test templates are immutable."""
        template = ActorTemplate(id="rat", name="Rat", max_health=5, attack=1)

        with pytest.raises(ValidationError):
            template.attack = 10  # type: ignore[misc]
