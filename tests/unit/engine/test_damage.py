"""Tests for the damage and heal pipeline."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rpg_combat.engine.damage import AttackContext, DamageResolver
from rpg_combat.engine.status import StatusEffectEngine
from rpg_combat.models.abilities import AbilityDefinition, HealSpec, StatusEffectSpec
from rpg_combat.models.actors import Actor
from rpg_combat.models.enums import AbilityKind, StatType, StatusType


class TestMitigation:
    """Tests for base damage and mitigation."""

    def test_mitigation_floor(
        self,
        resolver: DamageResolver,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test overwhelming defense still lets exactly one damage through."""
        attacker = make_actor("Weakling", attack=5)
        defender = make_actor("Wall", health=100, defense=50)

        result = resolver.resolve_attack(attacker, defender, make_ability())

        assert result.amount_dealt == 1
        assert defender.health == 99

    def test_basic_damage(
        self,
        resolver: DamageResolver,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test attack minus defense."""
        attacker = make_actor(attack=10)
        defender = make_actor(health=30, defense=2)

        result = resolver.resolve_attack(attacker, defender, make_ability())

        assert result.amount_dealt == 8
        assert result.defender_health == 22
        assert result.was_critical is False

    def test_multiplier_and_magic_scaling(
        self,
        resolver: DamageResolver,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test the multiplier applies to the ability's scaling stat."""
        attacker = make_actor(attack=2, magic_attack=10)
        defender = make_actor(health=50, defense=3)
        ability = make_ability("bolt", damage_multiplier=1.5, scaling_stat=StatType.MAGIC_ATTACK)

        result = resolver.resolve_attack(attacker, defender, ability)

        assert result.amount_dealt == 12

    def test_armor_piercing(
        self,
        resolver: DamageResolver,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test armor piercing ignores part of the defense."""
        attacker = make_actor(attack=10)
        defender = make_actor(health=50, defense=10)

        result = resolver.resolve_attack(attacker, defender, make_ability(armor_piercing=0.5))

        assert result.amount_dealt == 5

    def test_defending_halves_before_mitigation(
        self,
        resolver: DamageResolver,
        status_engine: StatusEffectEngine,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test a defending target takes half damage, then mitigates."""
        attacker = make_actor(attack=20)
        defender = make_actor(health=50, defense=2)
        status_engine.apply_stance(defender, StatusType.DEFENDING, 1)

        result = resolver.resolve_attack(attacker, defender, make_ability())

        assert result.amount_dealt == 8


class TestRolls:
    """Tests for dodge and critical rolls."""

    def test_player_crit(
        self,
        resolver: DamageResolver,
        rng: Any,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test the player's baseline critical chance and multiplier."""
        player = make_actor("Hero", attack=10, is_player=True)
        defender = make_actor(health=30, defense=2)
        rng.push(0.1)

        result = resolver.resolve_attack(player, defender, make_ability())

        assert result.was_critical is True
        assert result.amount_dealt == 12

    def test_enemy_has_no_crit_baseline(
        self,
        resolver: DamageResolver,
        rng: Any,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test hostiles make no critical roll by default."""
        attacker = make_actor(attack=10)
        defender = make_actor("Hero", health=30, is_player=True)

        resolver.resolve_attack(attacker, defender, make_ability())

        assert rng.consumed == 0

    def test_ability_crit_override(
        self,
        resolver: DamageResolver,
        rng: Any,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test an ability's own crit chance and multiplier win."""
        attacker = make_actor(attack=10)
        defender = make_actor(health=50)
        rng.push(0.5)

        result = resolver.resolve_attack(attacker, defender, make_ability(crit_chance=0.6, crit_multiplier=2.0))

        assert result.amount_dealt == 20

    def test_dodge_evades(
        self,
        resolver: DamageResolver,
        status_engine: StatusEffectEngine,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test a certain dodge evades the hit and its on-hit status."""
        attacker = make_actor(attack=10)
        defender = make_actor(health=30)
        status_engine.apply_stance(defender, StatusType.DODGE, 1, magnitude=1.0)
        ability = make_ability(status_effect=StatusEffectSpec(type=StatusType.STUN, chance=1.0))

        result = resolver.resolve_attack(attacker, defender, ability)

        assert result.was_evaded is True
        assert result.amount_dealt == 0
        assert result.status_applied is False
        assert defender.health == 30
        assert not defender.has_effect(StatusType.STUN)

    def test_miss_from_accuracy(
        self,
        resolver: DamageResolver,
        status_engine: StatusEffectEngine,
        rng: Any,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test lowered accuracy makes attacks miss."""
        from rpg_combat.models.abilities import StatModifierSpec

        attacker = make_actor(attack=10)
        defender = make_actor(health=30)
        status_engine.apply_modifier(attacker, StatModifierSpec(stat=StatType.ACCURACY, magnitude=-50, duration=1))
        rng.push(0.3)

        result = resolver.resolve_attack(attacker, defender, make_ability())

        assert result.was_evaded is True
        assert defender.health == 30


class TestMultiHitAndReflect:
    """Tests for multi-hit abilities and reflect."""

    def test_hits_are_summed(
        self,
        resolver: DamageResolver,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test every hit resolves independently and sums."""
        attacker = make_actor(attack=10)
        defender = make_actor(health=50, defense=4)

        result = resolver.resolve_attack(attacker, defender, make_ability(hits=3, damage_multiplier=0.8))

        assert result.hits == [4, 4, 4]
        assert result.amount_dealt == 12
        assert defender.health == 38

    def test_reflect_without_recursion(
        self,
        resolver: DamageResolver,
        status_engine: StatusEffectEngine,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test reflected damage skips mitigation and does not bounce back."""
        attacker = make_actor("Attacker", health=50, attack=20, defense=5)
        defender = make_actor("Mirror", health=50)
        status_engine.apply_stance(attacker, StatusType.REFLECT, 2, magnitude=0.5, chance=1.0)
        status_engine.apply_stance(defender, StatusType.REFLECT, 2, magnitude=0.5, chance=1.0)

        result = resolver.resolve_attack(attacker, defender, make_ability())

        assert result.amount_dealt == 20
        assert result.reflected is not None
        assert result.reflected.amount_dealt == 10
        assert result.reflected.reflected is None
        assert attacker.health == 40
        assert defender.health == 30


class TestOnHitStatus:
    """Tests for on-hit status effects."""

    def test_status_applied(
        self,
        resolver: DamageResolver,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test a certain on-hit status lands."""
        attacker = make_actor(attack=10)
        defender = make_actor(health=50)
        ability = make_ability(status_effect=StatusEffectSpec(type=StatusType.BLEED, chance=1.0, duration=2))

        result = resolver.resolve_attack(attacker, defender, ability)

        assert result.status_applied is True
        assert result.status_type is StatusType.BLEED
        assert defender.has_effect(StatusType.BLEED)


class TestHeals:
    """Tests for heal resolution."""

    def test_heal_formula(self, resolver: DamageResolver, make_actor: Callable[..., Actor]) -> None:
        """Test base, percentage, attribute and level terms."""
        healer = make_actor(health=10, max_health=100, attributes={"wisdom": 12}, level=3)
        heal = HealSpec(base_amount=5, percent_of_max=0.1, scaling_attribute="wisdom", scaling_factor=0.5, level_factor=2)

        restored = resolver.resolve_heal(healer, healer, heal)

        assert restored == 5 + 10 + 6 + 6
        assert healer.health == 37

    def test_heal_clamped(self, resolver: DamageResolver, make_actor: Callable[..., Actor]) -> None:
        """Test heals report only what was restored."""
        healer = make_actor(health=95, max_health=100)

        restored = resolver.resolve_heal(healer, healer, HealSpec(base_amount=50))

        assert restored == 5
        assert healer.health == 100

    def test_lifesteal(
        self,
        resolver: DamageResolver,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test lifesteal heals a fraction of the damage dealt."""
        attacker = make_actor(health=10, max_health=50, attack=10)
        defender = make_actor(health=50)
        ability = make_ability("siphon", kind=AbilityKind.ATTACK_HEAL, heal=HealSpec(lifesteal=0.5))

        result = resolver.resolve_attack(attacker, defender, ability)
        healed = resolver.resolve_lifesteal(attacker, result, HealSpec(lifesteal=0.5))

        assert healed == 5
        assert attacker.health == 15

    def test_explicit_context(
        self,
        resolver: DamageResolver,
        make_actor: Callable[..., Actor],
        make_ability: Callable[..., AbilityDefinition],
    ) -> None:
        """Test a fixed base damage without mitigation."""
        attacker = make_actor(attack=1)
        defender = make_actor(health=50, defense=10)

        result = resolver.resolve_attack(
            attacker,
            defender,
            make_ability(),
            AttackContext(base_damage=7, mitigate=False, allow_dodge=False),
        )

        assert result.amount_dealt == 7
