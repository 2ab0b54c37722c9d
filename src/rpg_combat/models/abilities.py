"""Declarative ability definitions.

Abilities are a closed set of effect primitives described by data. Each
AbilityKind carries its own payload fields, and a model validator rejects
records whose payload does not match their kind, so malformed tables fail
at load time instead of mid-combat.

Example:
    >>> fireball = AbilityDefinition(
    ...     id="fireball",
    ...     name="Fireball",
    ...     kind=AbilityKind.ATTACK,
    ...     damage_multiplier=1.5,
    ...     status_effect=StatusEffectSpec(type=StatusType.BURN, chance=0.4, duration=2, damage=3),
    ... )
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rpg_combat.models.enums import AbilityKind, StatType, StatusType
from rpg_combat.models.loot import Chance, ValueRange


Duration = Annotated[int, Field(ge=1, description="Duration in rounds")]


# =============================================================================
# Payload Specs
# =============================================================================


class StatusEffectSpec(BaseModel):
    """Status effect an ability may inflict.

    Attributes:
        type: Status effect type.
        chance: Probability the target fails to resist.
        duration: Rounds the effect stays active.
        damage: Flat damage per tick for poison and burn.
        magnitude: Optional strength parameter.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: StatusType
    chance: Chance = 1.0
    duration: Duration = 1
    damage: Annotated[int, Field(ge=0)] | None = None
    magnitude: float | None = None


class StatModifierSpec(BaseModel):
    """Signed modifier to one combat stat.

    A ``duration`` of None means the modifier never expires, which is how
    passive buffs are expressed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    stat: StatType
    magnitude: float = Field(description="Signed amount added to the stat")
    duration: Duration | None = None

    @model_validator(mode="after")
    def validate_nonzero(self) -> "StatModifierSpec":
        """A zero modifier has no direction and no effect."""
        if self.magnitude == 0:
            msg = "Stat modifier magnitude must be non-zero"
            raise ValueError(msg)
        return self

    @property
    def status_type(self) -> StatusType:
        """Status type that carries this modifier."""
        return StatusType.for_modifier(self.stat, self.magnitude)


class HealSpec(BaseModel):
    """Healing formula.

    ``amount = base + floor(max_health * percent_of_max)
    + floor(attribute * scaling_factor) + floor(level * level_factor)``.
    For attack-heal abilities ``lifesteal`` is the fraction of damage
    dealt that returns to the attacker.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_amount: Annotated[int, Field(ge=0)] = 0
    percent_of_max: Annotated[float, Field(ge=0.0, le=1.0)] = 0.0
    scaling_attribute: str | None = None
    scaling_factor: Annotated[float, Field(ge=0.0)] = 0.0
    level_factor: Annotated[float, Field(ge=0.0)] = 0.0
    lifesteal: Annotated[float, Field(ge=0.0, le=1.0)] = 0.0


class SummonSpec(BaseModel):
    """Reinforcements called by a summon ability."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    actor_template_id: str = Field(min_length=1)
    count: ValueRange = Field(default_factory=lambda: ValueRange(min=1, max=1))


class ReflectSpec(BaseModel):
    """Self-applied effect that returns part of incoming damage."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    chance: Chance = 1.0
    fraction: Annotated[float, Field(gt=0.0, le=1.0)]
    duration: Duration = 1


class DodgeSpec(BaseModel):
    """Self-applied effect that evades incoming attacks."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    chance: Chance
    duration: Duration = 1


class StealSpec(BaseModel):
    """Attempt to take gold from the opponent."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    chance: Chance = 1.0
    gold: ValueRange


# =============================================================================
# Ability Definition
# =============================================================================


class AbilityDefinition(BaseModel):
    """Catalog record for one ability.

    Attributes:
        id: Globally unique ability identifier.
        name: Display name.
        kind: Effect primitive; decides which payload fields are required.
        damage_multiplier: Scales the attacker's effective attack stat.
        scaling_stat: Stat the multiplier applies to (attack or magic attack).
        area_effect: Hit every opposing actor instead of one.
        hits: Number of independent strikes.
        crit_chance: Overrides the baseline critical chance.
        crit_multiplier: Overrides the default critical multiplier.
        armor_piercing: Fraction of defender mitigation ignored.
        priority: Resolves before normal actions in the same phase.
        cooldown: Rounds that must elapse before reuse.
        mana_cost: Mana consumed on use (ignored for actors without mana).
        status_effect: On-hit status for attacks, or the inflicted status
            for debuffs.
        stat_modifier: Stat change for buffs, debuffs and passive buffs.
        heal: Healing formula for heal, attack-heal and passive heal.
        summon: Reinforcement spec for summons.
        reflect: Reflect stance for specials.
        dodge: Dodge stance for specials.
        steal: Gold theft for specials.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    id: str = Field(min_length=1, description="Unique ability identifier")
    name: str = Field(min_length=1, description="Display name")
    kind: AbilityKind
    description: str = ""

    damage_multiplier: Annotated[float, Field(ge=0.0)] | None = None
    scaling_stat: StatType = StatType.ATTACK
    area_effect: bool = False
    hits: Annotated[int, Field(ge=1)] = 1
    crit_chance: Chance | None = None
    crit_multiplier: Annotated[float, Field(ge=1.0)] | None = None
    armor_piercing: Annotated[float, Field(ge=0.0, le=1.0)] = 0.0
    priority: bool = False

    cooldown: Annotated[int, Field(ge=0)] = 0
    mana_cost: Annotated[int, Field(ge=0)] = 0

    status_effect: StatusEffectSpec | None = None
    stat_modifier: StatModifierSpec | None = None
    heal: HealSpec | None = None
    summon: SummonSpec | None = None
    reflect: ReflectSpec | None = None
    dodge: DodgeSpec | None = None
    steal: StealSpec | None = None

    @model_validator(mode="after")
    def validate_kind_payload(self) -> "AbilityDefinition":
        """Ensure the payload matches the declared kind.

        Raises:
            ValueError: If a required payload is missing.
        """
        kind = self.kind
        missing: str | None = None
        if kind.deals_damage and self.damage_multiplier is None:
            missing = "damage_multiplier"
        elif kind is AbilityKind.ATTACK_HEAL and self.heal is None:
            missing = "heal"
        elif kind in (AbilityKind.HEAL, AbilityKind.PASSIVE_HEAL) and self.heal is None:
            missing = "heal"
        elif kind in (AbilityKind.BUFF, AbilityKind.DEBUFF) and (
            self.stat_modifier is None and self.status_effect is None
        ):
            missing = "stat_modifier or status_effect"
        elif kind is AbilityKind.PASSIVE_BUFF and self.stat_modifier is None:
            missing = "stat_modifier"
        elif kind is AbilityKind.SUMMON and self.summon is None:
            missing = "summon"
        elif kind is AbilityKind.SPECIAL and not (self.reflect or self.dodge or self.steal):
            missing = "reflect, dodge or steal"

        if missing:
            msg = f"Ability '{self.id}' of kind '{kind}' requires {missing}"
            raise ValueError(msg)

        if self.scaling_stat not in (StatType.ATTACK, StatType.MAGIC_ATTACK):
            msg = f"Ability '{self.id}' must scale with attack or magic_attack"
            raise ValueError(msg)
        return self

    @property
    def is_passive(self) -> bool:
        """Whether the ability is applied at spawn instead of selected."""
        return self.kind.is_passive


__all__ = [
    "StatusEffectSpec",
    "StatModifierSpec",
    "HealSpec",
    "SummonSpec",
    "ReflectSpec",
    "DodgeSpec",
    "StealSpec",
    "AbilityDefinition",
]
