"""Damage and heal resolution.

``resolve_attack`` runs the attack pipeline in a fixed order:

1. base damage from the attacker's scaling stat and the ability multiplier
2. halved against a defending target
3. mitigation by defense (reduced by armor piercing), floored at 1
4. dodge roll (target dodge stance combined with attacker inaccuracy)
5. critical roll
6. steps 1-5 repeated per hit and summed
7. reflect: part of the final damage is resolved straight back at the
   attacker through this same pipeline, without reflect or dodge
8. on-hit status roll against the defender
9. damage applied to the defender

The resolver returns structured results; formatting log text is left to
the presentation layer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rpg_combat.core.config import RulesSettings
from rpg_combat.core.constants import DEFENDING_DAMAGE_FACTOR, MIN_DAMAGE, REFLECT_ABILITY_ID
from rpg_combat.core.logging import get_logger
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.engine.status import StatusEffectEngine
from rpg_combat.models.abilities import AbilityDefinition, HealSpec
from rpg_combat.models.actors import Actor
from rpg_combat.models.enums import AbilityKind, StatusType


logger = get_logger(__name__)


REFLECT_ABILITY = AbilityDefinition(
    id=REFLECT_ABILITY_ID,
    name="Reflect",
    kind=AbilityKind.ATTACK,
    damage_multiplier=1.0,
)
"""Synthetic ability carrying reflected damage back to the attacker."""


@dataclass
class AttackContext:
    """Per-resolution switches.

    Attributes:
        crit_chance: Baseline critical chance when the ability has none.
        crit_multiplier: Default critical multiplier.
        allow_dodge: Whether step 4 runs.
        allow_reflect: Whether step 7 runs.
        base_damage: Fixed base damage replacing step 1; used for reflect.
        mitigate: Whether step 3 subtracts defense.
    """

    crit_chance: float = 0.0
    crit_multiplier: float = 1.5
    allow_dodge: bool = True
    allow_reflect: bool = True
    base_damage: float | None = None
    mitigate: bool = True


@dataclass
class DamageResult:
    """Resolved outcome of one attack against one defender.

    Attributes:
        attacker_id: Attacking actor id.
        defender_id: Defending actor id.
        ability_id: Ability used.
        amount_dealt: Final damage after every step.
        was_critical: At least one hit was critical.
        was_evaded: Every hit was evaded.
        reflected: Retaliation resolved against the attacker, if any.
        status_applied: The on-hit status landed.
        status_type: The on-hit status attempted, if any.
        hits: Damage of each individual hit.
        defender_health: Defender health after step 9.
    """

    attacker_id: str
    defender_id: str
    ability_id: str
    amount_dealt: int = 0
    was_critical: bool = False
    was_evaded: bool = False
    reflected: DamageResult | None = None
    status_applied: bool = False
    status_type: StatusType | None = None
    hits: list[int] = field(default_factory=list)
    defender_health: int = 0


class DamageResolver:
    """Resolves attacks and heals against the shared random stream.

    Example:
        >>> resolver = DamageResolver(rng, status_engine, settings.rules)
        >>> result = resolver.resolve_attack(player, goblin, catalog.basic_attack())
        >>> result.amount_dealt >= 1
        True
    """

    def __init__(
        self,
        rng: CombatRandom,
        status_engine: StatusEffectEngine,
        rules: RulesSettings,
    ) -> None:
        self._rng = rng
        self._status = status_engine
        self._rules = rules

    def context_for(self, attacker: Actor) -> AttackContext:
        """Default context: player and hostiles use different crit baselines."""
        crit_chance = (
            self._rules.player_crit_chance if attacker.is_player else self._rules.enemy_crit_chance
        )
        return AttackContext(crit_chance=crit_chance, crit_multiplier=self._rules.crit_multiplier)

    # -------------------------------------------------------------------------
    # Attacks
    # -------------------------------------------------------------------------

    def resolve_attack(
        self,
        attacker: Actor,
        defender: Actor,
        ability: AbilityDefinition,
        context: AttackContext | None = None,
    ) -> DamageResult:
        """Resolve one attack of ``attacker`` against ``defender``.

        Args:
            attacker: Acting actor.
            defender: Target actor.
            ability: Ability being used (the caller's copy).
            context: Switches; defaults to ``context_for(attacker)``.

        Returns:
            The resolved damage result. The defender (and, through
            reflect, the attacker) have already taken the damage.
        """
        ctx = context or self.context_for(attacker)
        result = DamageResult(
            attacker_id=attacker.id,
            defender_id=defender.id,
            ability_id=ability.id,
        )

        evaded_hits = 0
        for _ in range(ability.hits):
            amount, critical, evaded = self._resolve_hit(attacker, defender, ability, ctx)
            result.hits.append(amount)
            result.amount_dealt += amount
            result.was_critical = result.was_critical or critical
            evaded_hits += int(evaded)
        result.was_evaded = evaded_hits == ability.hits

        if ctx.allow_reflect and result.amount_dealt > 0:
            result.reflected = self._reflect(attacker, defender, result.amount_dealt)

        if ability.status_effect is not None and not result.was_evaded:
            result.status_type = ability.status_effect.type
            result.status_applied = bool(
                self._status.apply(defender, ability.status_effect, source_id=attacker.id)
            )

        defender.take_damage(result.amount_dealt)
        result.defender_health = defender.health

        logger.debug(
            "Attack resolved",
            attacker=attacker.name,
            defender=defender.name,
            ability=ability.id,
            amount=result.amount_dealt,
            critical=result.was_critical,
            evaded=result.was_evaded,
            reflected=result.reflected.amount_dealt if result.reflected else 0,
        )
        return result

    def _resolve_hit(
        self,
        attacker: Actor,
        defender: Actor,
        ability: AbilityDefinition,
        ctx: AttackContext,
    ) -> tuple[int, bool, bool]:
        if ctx.base_damage is not None:
            damage = ctx.base_damage
        else:
            multiplier = 1.0 if ability.damage_multiplier is None else ability.damage_multiplier
            damage = attacker.stat_value(ability.scaling_stat) * multiplier
            variance = self._rules.damage_variance
            if variance > 0:
                damage *= self._rng.uniform(1.0 - variance, 1.0 + variance)

        if defender.has_effect(StatusType.DEFENDING):
            damage *= DEFENDING_DAMAGE_FACTOR

        if ctx.mitigate:
            mitigation = defender.current_defense * (1.0 - ability.armor_piercing)
            damage -= mitigation
        amount = max(MIN_DAMAGE, math.floor(damage))

        if ctx.allow_dodge:
            evade_chance = self._evade_chance(attacker, defender)
            if evade_chance > 0 and self._rng.chance(evade_chance):
                return 0, False, True

        crit_chance = ability.crit_chance if ability.crit_chance is not None else ctx.crit_chance
        if crit_chance > 0 and self._rng.chance(crit_chance):
            multiplier = ability.crit_multiplier or ctx.crit_multiplier
            return math.floor(amount * multiplier), True, False
        return amount, False, False

    @staticmethod
    def _evade_chance(attacker: Actor, defender: Actor) -> float:
        dodge = defender.get_effect(StatusType.DODGE)
        dodge_chance = (dodge.magnitude or 0.0) if dodge else 0.0
        miss_chance = attacker.miss_chance
        return 1.0 - (1.0 - min(1.0, dodge_chance)) * (1.0 - miss_chance)

    def _reflect(self, attacker: Actor, defender: Actor, amount: int) -> DamageResult | None:
        reflect = defender.get_effect(StatusType.REFLECT)
        if reflect is None:
            return None
        chance = 1.0 if reflect.chance is None else reflect.chance
        if not self._rng.chance(chance):
            return None
        reflected = math.floor(amount * (reflect.magnitude or 0.0))
        if reflected <= 0:
            return None
        return self.resolve_attack(
            defender,
            attacker,
            REFLECT_ABILITY,
            AttackContext(
                allow_dodge=False,
                allow_reflect=False,
                base_damage=reflected,
                mitigate=False,
            ),
        )

    # -------------------------------------------------------------------------
    # Heals
    # -------------------------------------------------------------------------

    def resolve_heal(self, healer: Actor, target: Actor, heal: HealSpec) -> int:
        """Heal ``target`` by the formula in ``heal``.

        ``amount = base + floor(max_health * percent_of_max)
        + floor(attribute * scaling_factor) + floor(level * level_factor)``,
        where attribute and level are the healer's.

        Returns:
            Health actually restored, which may be less than the amount
            when the target is near full.
        """
        attribute = healer.attributes.get(heal.scaling_attribute, 0) if heal.scaling_attribute else 0
        amount = (
            heal.base_amount
            + math.floor(target.max_health * heal.percent_of_max)
            + math.floor(attribute * heal.scaling_factor)
            + math.floor(healer.level * heal.level_factor)
        )
        restored = target.restore_health(amount)
        logger.debug("Heal resolved", healer=healer.name, target=target.name, requested=amount, restored=restored)
        return restored

    def resolve_lifesteal(self, attacker: Actor, result: DamageResult, heal: HealSpec) -> int:
        """Heal the attacker for a fraction of the damage just dealt."""
        if attacker.defeated or heal.lifesteal <= 0:
            return 0
        return attacker.restore_health(math.floor(result.amount_dealt * heal.lifesteal))


__all__ = [
    "REFLECT_ABILITY",
    "AttackContext",
    "DamageResult",
    "DamageResolver",
]
