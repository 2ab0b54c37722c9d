"""Actor models: static templates and runtime combatants.

An ActorTemplate is the static record an enemy is spawned from. An Actor
is the runtime combatant (player or hostile) owned by one encounter
session. Health and mana are kept inside their bounds by validation on
every assignment, and current stats are derived from base stats plus the
signed magnitudes of the active stat-modifier effects.
"""

from __future__ import annotations

import math
from typing import Annotated
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from rpg_combat.models.abilities import AbilityDefinition
from rpg_combat.models.enums import StatType, StatusType
from rpg_combat.models.loot import LootTable


NonNegativeInt = Annotated[int, Field(ge=0)]


# =============================================================================
# Static Template
# =============================================================================


class ActorTemplate(BaseModel):
    """Static enemy record.

    Attributes:
        id: Unique template identifier.
        name: Display name.
        level: Base level.
        max_health: Base maximum health.
        attack: Base attack.
        defense: Base defense.
        magic_attack: Base magic attack.
        ability_ids: Abilities resolved through the catalog on spawn.
        loot_table: Rewards rolled when an instance is defeated.
        is_boss: Whether the template is a zone boss.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    level: Annotated[int, Field(ge=1)] = 1
    max_health: Annotated[int, Field(ge=1)]
    attack: NonNegativeInt
    defense: NonNegativeInt = 0
    magic_attack: NonNegativeInt = 0
    ability_ids: tuple[str, ...] = ()
    loot_table: LootTable = Field(default_factory=LootTable)
    is_boss: bool = False


# =============================================================================
# Runtime Components
# =============================================================================


class ActiveEffect(BaseModel):
    """A status effect currently attached to an actor.

    ``remaining_duration`` of None marks a permanent effect (passives); it
    is processed on every tick but never counts down.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    type: StatusType
    remaining_duration: NonNegativeInt | None = None
    damage: NonNegativeInt | None = None
    magnitude: float | None = None
    chance: Annotated[float, Field(ge=0.0, le=1.0)] | None = None
    stat: StatType | None = None
    source_id: str | None = None

    @property
    def is_permanent(self) -> bool:
        """Whether the effect never expires."""
        return self.remaining_duration is None


class AbilitySlot(BaseModel):
    """An actor's private copy of an ability plus its cooldown counter."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    ability_id: str
    base_cooldown: NonNegativeInt = 0
    cooldown_remaining: NonNegativeInt = 0
    definition: AbilityDefinition

    @classmethod
    def from_definition(cls, definition: AbilityDefinition) -> AbilitySlot:
        """Create a ready slot for a catalog copy."""
        return cls(
            ability_id=definition.id,
            base_cooldown=definition.cooldown,
            definition=definition,
        )

    @property
    def is_ready(self) -> bool:
        """Whether the cooldown has elapsed."""
        return self.cooldown_remaining == 0

    def trigger(self) -> None:
        """Start the cooldown after use."""
        self.cooldown_remaining = self.base_cooldown

    def tick_cooldown(self) -> None:
        """Count the cooldown down by one round, flooring at zero."""
        if self.cooldown_remaining > 0:
            self.cooldown_remaining -= 1


# =============================================================================
# Actor
# =============================================================================


class Actor(BaseModel):
    """Runtime combatant.

    Attributes:
        id: Unique instance id, used in combat events.
        name: Display name.
        template_id: Template (or class) the actor was built from.
        template_level: Level of the template before any modifier.
        level: Resolved level (display and reward scaling only).
        is_player: Whether this is the player's actor.
        is_boss: Whether the actor was built with boss scaling.
        max_health: Maximum health.
        health: Current health, always within ``[0, max_health]``.
        max_mana: Maximum mana, None for actors without a mana pool.
        mana: Current mana, None for actors without a mana pool.
        base_attack: Attack before modifiers.
        base_defense: Defense before modifiers.
        base_magic_attack: Magic attack before modifiers.
        current_attack: Attack after active modifiers.
        current_defense: Defense after active modifiers.
        current_magic_attack: Magic attack after active modifiers.
        attributes: Raw attributes (strength, agility, ...) for formulas.
        abilities: Ability slots with cooldown counters.
        status_effects: Active effects, at most one per type.
        passive_effects: Permanent effects of passive abilities, kept apart
            from ``status_effects`` so a timed effect cannot replace them.
        loot_table: Rewards rolled when the actor is defeated.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = Field(min_length=1)
    template_id: str
    template_level: Annotated[int, Field(ge=1)] = 1
    level: Annotated[int, Field(ge=1)] = 1
    is_player: bool = False
    is_boss: bool = False

    max_health: Annotated[int, Field(ge=1)]
    health: NonNegativeInt
    max_mana: NonNegativeInt | None = None
    mana: NonNegativeInt | None = None

    base_attack: NonNegativeInt = 0
    base_defense: NonNegativeInt = 0
    base_magic_attack: NonNegativeInt = 0
    current_attack: NonNegativeInt = 0
    current_defense: NonNegativeInt = 0
    current_magic_attack: NonNegativeInt = 0

    attributes: dict[str, int] = Field(default_factory=dict)
    abilities: list[AbilitySlot] = Field(default_factory=list)
    status_effects: list[ActiveEffect] = Field(default_factory=list)
    passive_effects: list[ActiveEffect] = Field(default_factory=list)
    loot_table: LootTable = Field(default_factory=LootTable)

    @model_validator(mode="after")
    def validate_pools(self) -> "Actor":
        """Ensure health and mana stay within their maximums.

        Raises:
            ValueError: If a pool exceeds its maximum or mana is half-defined.
        """
        if self.health > self.max_health:
            msg = f"health {self.health} exceeds max_health {self.max_health}"
            raise ValueError(msg)
        if (self.mana is None) != (self.max_mana is None):
            msg = "mana and max_mana must both be set or both be None"
            raise ValueError(msg)
        if self.mana is not None and self.max_mana is not None and self.mana > self.max_mana:
            msg = f"mana {self.mana} exceeds max_mana {self.max_mana}"
            raise ValueError(msg)
        return self

    @computed_field(description="Whether the actor has been defeated")
    @property
    def defeated(self) -> bool:
        """An actor is defeated once its health reaches zero."""
        return self.health <= 0

    # -------------------------------------------------------------------------
    # Pools
    # -------------------------------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Reduce health, clamped at zero.

        Returns:
            Health actually lost.
        """
        amount = max(0, int(amount))
        lost = min(self.health, amount)
        self.health -= lost
        return lost

    def restore_health(self, amount: int) -> int:
        """Increase health, clamped at max_health.

        Returns:
            Health actually restored.
        """
        amount = max(0, int(amount))
        restored = min(self.max_health - self.health, amount)
        self.health += restored
        return restored

    def restore_mana(self, amount: int) -> int:
        """Increase mana, clamped at max_mana. Actors without mana gain nothing."""
        if self.mana is None or self.max_mana is None:
            return 0
        amount = max(0, int(amount))
        restored = min(self.max_mana - self.mana, amount)
        self.mana += restored
        return restored

    def has_mana_for(self, cost: int) -> bool:
        """Actors without a mana pool can always pay."""
        return self.mana is None or self.mana >= cost

    def spend_mana(self, cost: int) -> None:
        """Deduct mana for an ability; no-op for actors without a pool."""
        if self.mana is not None and cost > 0:
            self.mana = max(0, self.mana - cost)

    # -------------------------------------------------------------------------
    # Abilities and effects
    # -------------------------------------------------------------------------

    def get_slot(self, ability_id: str) -> AbilitySlot | None:
        """Find the actor's slot for an ability id."""
        return next((slot for slot in self.abilities if slot.ability_id == ability_id), None)

    def get_effect(self, status_type: StatusType) -> ActiveEffect | None:
        """Find the active effect of a type."""
        return next((effect for effect in self.status_effects if effect.type == status_type), None)

    def has_effect(self, status_type: StatusType) -> bool:
        """Whether an effect of the type is active."""
        return self.get_effect(status_type) is not None

    def modifier_total(self, stat: StatType) -> float:
        """Sum of the signed magnitudes of timed and passive modifiers on a stat."""
        return sum(
            effect.magnitude or 0.0
            for effect in [*self.status_effects, *self.passive_effects]
            if effect.stat == stat
        )

    def recompute_stats(self) -> None:
        """Derive current stats from base stats and active modifiers."""
        self.current_attack = max(
            0, math.floor(self.base_attack + self.modifier_total(StatType.ATTACK))
        )
        self.current_defense = max(
            0, math.floor(self.base_defense + self.modifier_total(StatType.DEFENSE))
        )
        self.current_magic_attack = max(
            0, math.floor(self.base_magic_attack + self.modifier_total(StatType.MAGIC_ATTACK))
        )

    @property
    def effective_agility(self) -> int:
        """Agility attribute plus active agility modifiers."""
        return max(
            0, math.floor(self.attributes.get("agility", 0) + self.modifier_total(StatType.AGILITY))
        )

    @property
    def miss_chance(self) -> float:
        """Chance the actor's attacks miss, from negative accuracy modifiers."""
        accuracy = self.modifier_total(StatType.ACCURACY)
        if accuracy >= 0:
            return 0.0
        return min(1.0, -accuracy / 100.0)

    def stat_value(self, stat: StatType) -> int:
        """Current value of an offensive stat."""
        if stat is StatType.MAGIC_ATTACK:
            return self.current_magic_attack
        return self.current_attack


__all__ = [
    "ActorTemplate",
    "ActiveEffect",
    "AbilitySlot",
    "Actor",
]
