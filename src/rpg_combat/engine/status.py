"""Status effect engine.

Applies, refreshes, ticks and expires status effects on actors. An actor
never carries two effects of the same type: re-applying a type replaces
the remaining duration and strength of the existing entry. Passive
abilities are kept in a separate list and are never refreshed by a
timed effect.

Ticks happen once at the start of each of the actor's turns. Every
effect applies its consequence and counts down by one; effects that reach
zero are removed afterwards, and the damage of all effects lands on the
actor in a single update.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rpg_combat.core.constants import BLEED_HEALTH_FRACTION, DOT_HEALTH_FRACTION
from rpg_combat.core.logging import get_logger
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.models.abilities import AbilityDefinition, StatModifierSpec, StatusEffectSpec
from rpg_combat.models.actors import ActiveEffect, Actor
from rpg_combat.models.enums import AbilityKind, StatusType


logger = get_logger(__name__)


@dataclass
class StatusApplication:
    """Outcome of one status application attempt.

    Truthy iff the effect was applied (new or refreshed).

    Attributes:
        actor_id: Target actor id.
        status_type: Effect type.
        applied: False if the target resisted.
        refreshed: True if an existing entry was refreshed.
        remaining_duration: Duration after the application.
    """

    actor_id: str
    status_type: StatusType
    applied: bool
    refreshed: bool = False
    remaining_duration: int | None = None

    def __bool__(self) -> bool:
        return self.applied


@dataclass
class TickResult:
    """Outcome of ticking an actor's effects at turn start.

    Attributes:
        actor_id: Ticked actor id.
        total_damage: Health lost to damage over time.
        total_healing: Health restored by regeneration.
        descriptions: One human-readable line per processed effect.
        stunned: The actor skips its action this turn.
        immobilized: The actor may not retreat this turn.
        feared: The actor may only use basic attacks this turn.
        expired: Effect types removed by this tick.
    """

    actor_id: str
    total_damage: int = 0
    total_healing: int = 0
    descriptions: list[str] = field(default_factory=list)
    stunned: bool = False
    immobilized: bool = False
    feared: bool = False
    expired: list[StatusType] = field(default_factory=list)


class StatusEffectEngine:
    """Applies and ticks status effects using the shared random stream.

    Example:
        >>> engine = StatusEffectEngine(CombatRandom(seed=1))
        >>> engine.apply(goblin, StatusEffectSpec(type=StatusType.STUN, duration=1))
    """

    def __init__(self, rng: CombatRandom) -> None:
        self._rng = rng

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    def apply(
        self,
        actor: Actor,
        spec: StatusEffectSpec,
        chance_override: float | None = None,
        *,
        source_id: str | None = None,
    ) -> StatusApplication:
        """Roll to apply a status effect.

        The effect lands iff ``random() < chance``, where chance is the
        override if given, else the spec's chance.

        Args:
            actor: Target actor.
            spec: Effect to apply.
            chance_override: Replaces the spec's chance.
            source_id: Id of the actor that caused the effect.

        Returns:
            The application outcome.
        """
        chance = spec.chance if chance_override is None else chance_override
        if not self._rng.chance(chance):
            logger.debug("Status resisted", actor=actor.name, status=spec.type, chance=chance)
            return StatusApplication(actor_id=actor.id, status_type=spec.type, applied=False)

        effect = ActiveEffect(
            type=spec.type,
            remaining_duration=spec.duration,
            damage=spec.damage,
            magnitude=spec.magnitude,
            source_id=source_id,
        )
        return self._attach(actor, effect)

    def apply_modifier(
        self,
        actor: Actor,
        modifier: StatModifierSpec,
        *,
        source_id: str | None = None,
    ) -> StatusApplication:
        """Attach a stat modifier; modifiers from abilities always land."""
        effect = ActiveEffect(
            type=modifier.status_type,
            remaining_duration=modifier.duration,
            magnitude=modifier.magnitude,
            stat=modifier.stat,
            source_id=source_id,
        )
        return self._attach(actor, effect)

    def apply_stance(
        self,
        actor: Actor,
        status_type: StatusType,
        duration: int | None,
        *,
        magnitude: float | None = None,
        chance: float | None = None,
        source_id: str | None = None,
    ) -> StatusApplication:
        """Attach a self-applied stance such as defending, dodge or reflect."""
        effect = ActiveEffect(
            type=status_type,
            remaining_duration=duration,
            magnitude=magnitude,
            chance=chance,
            source_id=source_id,
        )
        return self._attach(actor, effect)

    def apply_passive(self, actor: Actor, ability: AbilityDefinition) -> StatusApplication | None:
        """Attach the permanent effect of a passive ability.

        Passive effects live in ``actor.passive_effects``, keyed by the
        ability id, so a timed effect of the same type never refreshes or
        removes them.

        Returns:
            The application, or None if the ability is not passive.
        """
        if ability.kind is AbilityKind.PASSIVE_BUFF and ability.stat_modifier is not None:
            effect = ActiveEffect(
                type=ability.stat_modifier.status_type,
                magnitude=ability.stat_modifier.magnitude,
                stat=ability.stat_modifier.stat,
                source_id=ability.id,
            )
        elif ability.kind is AbilityKind.PASSIVE_HEAL and ability.heal is not None:
            effect = ActiveEffect(
                type=StatusType.REGENERATION,
                magnitude=float(ability.heal.base_amount),
                source_id=ability.id,
            )
        else:
            return None

        refreshed = any(existing.source_id == ability.id for existing in actor.passive_effects)
        actor.passive_effects = [
            *(existing for existing in actor.passive_effects if existing.source_id != ability.id),
            effect,
        ]
        if effect.stat is not None:
            actor.recompute_stats()
        logger.debug("Passive applied", actor=actor.name, ability=ability.id, status=effect.type)
        return StatusApplication(
            actor_id=actor.id,
            status_type=effect.type,
            applied=True,
            refreshed=refreshed,
        )

    def _attach(self, actor: Actor, effect: ActiveEffect) -> StatusApplication:
        existing = actor.get_effect(effect.type)
        if existing is not None:
            existing.remaining_duration = effect.remaining_duration
            existing.damage = effect.damage
            existing.magnitude = effect.magnitude
            existing.chance = effect.chance
            existing.stat = effect.stat
            existing.source_id = effect.source_id
            refreshed = True
        else:
            actor.status_effects.append(effect)
            refreshed = False

        if effect.stat is not None:
            actor.recompute_stats()

        logger.debug(
            "Status applied",
            actor=actor.name,
            status=effect.type,
            duration=effect.remaining_duration,
            refreshed=refreshed,
        )
        return StatusApplication(
            actor_id=actor.id,
            status_type=effect.type,
            applied=True,
            refreshed=refreshed,
            remaining_duration=effect.remaining_duration,
        )

    def remove(self, actor: Actor, status_type: StatusType) -> bool:
        """Remove an effect by type; returns whether one was removed."""
        effect = actor.get_effect(status_type)
        if effect is None:
            return False
        actor.status_effects.remove(effect)
        if effect.stat is not None:
            actor.recompute_stats()
        return True

    # -------------------------------------------------------------------------
    # Ticking
    # -------------------------------------------------------------------------

    def tick(self, actor: Actor) -> TickResult:
        """Process every active effect at the start of the actor's turn.

        Args:
            actor: The actor whose turn is starting.

        Returns:
            Damage, healing, restriction flags and per-effect descriptions.
        """
        result = TickResult(actor_id=actor.id)
        stats_changed = False

        for effect in actor.passive_effects:
            self._process(actor, effect, result)

        for effect in actor.status_effects:
            if not effect.is_permanent and (effect.remaining_duration or 0) <= 0:
                continue
            self._process(actor, effect, result)
            if not effect.is_permanent:
                effect.remaining_duration = (effect.remaining_duration or 0) - 1

        remaining: list[ActiveEffect] = []
        for effect in actor.status_effects:
            if not effect.is_permanent and effect.remaining_duration == 0:
                result.expired.append(effect.type)
                result.descriptions.append(f"{actor.name}'s {effect.type} wore off")
                stats_changed = stats_changed or effect.stat is not None
            else:
                remaining.append(effect)
        actor.status_effects = remaining
        if stats_changed:
            actor.recompute_stats()

        if result.total_damage:
            result.total_damage = actor.take_damage(result.total_damage)
        if result.total_healing and not actor.defeated:
            result.total_healing = actor.restore_health(result.total_healing)
        else:
            result.total_healing = 0

        if result.descriptions:
            logger.debug(
                "Status effects ticked",
                actor=actor.name,
                damage=result.total_damage,
                healing=result.total_healing,
                stunned=result.stunned,
                expired=[str(t) for t in result.expired],
            )
        return result

    def _process(self, actor: Actor, effect: ActiveEffect, result: TickResult) -> None:
        status = effect.type
        if status in (StatusType.POISON, StatusType.BURN):
            damage = (
                effect.damage
                if effect.damage is not None
                else max(1, math.floor(actor.max_health * DOT_HEALTH_FRACTION))
            )
            result.total_damage += damage
            result.descriptions.append(f"{actor.name} takes {damage} {status} damage")
        elif status is StatusType.BLEED:
            damage = math.ceil(actor.max_health * BLEED_HEALTH_FRACTION)
            result.total_damage += damage
            result.descriptions.append(f"{actor.name} bleeds for {damage} damage")
        elif status.prevents_action:
            result.stunned = True
            result.descriptions.append(f"{actor.name} is {'frozen' if status is StatusType.FREEZE else 'stunned'}")
        elif status is StatusType.IMMOBILIZE:
            result.immobilized = True
            result.descriptions.append(f"{actor.name} is immobilized")
        elif status is StatusType.FEAR:
            result.feared = True
            result.descriptions.append(f"{actor.name} is terrified")
        elif status is StatusType.REGENERATION:
            healing = max(0, math.floor(effect.magnitude or 0))
            result.total_healing += healing
            result.descriptions.append(f"{actor.name} regenerates {healing} health")


__all__ = [
    "StatusApplication",
    "TickResult",
    "StatusEffectEngine",
]
