"""Enumeration types for the combat engine.

These enums form the closed vocabulary of the rules: ability kinds,
status effect types, combat stats, session phases and outcomes.
"""

from __future__ import annotations

from enum import StrEnum


class AbilityKind(StrEnum):
    """Closed set of ability effect primitives.

    Each kind requires its own payload on an AbilityDefinition; see
    ``AbilityDefinition.validate_kind_payload``.
    """

    ATTACK = "attack"
    HEAL = "heal"
    BUFF = "buff"
    DEBUFF = "debuff"
    SPECIAL = "special"
    SUMMON = "summon"
    ATTACK_HEAL = "attack_heal"
    PASSIVE_BUFF = "passive_buff"
    PASSIVE_HEAL = "passive_heal"

    @property
    def is_passive(self) -> bool:
        """Passive abilities are applied at spawn and never selected."""
        return self in (AbilityKind.PASSIVE_BUFF, AbilityKind.PASSIVE_HEAL)

    @property
    def deals_damage(self) -> bool:
        """Whether the ability goes through the damage resolver."""
        return self in (AbilityKind.ATTACK, AbilityKind.ATTACK_HEAL)


class StatType(StrEnum):
    """Combat stats that buffs and debuffs may modify."""

    ATTACK = "attack"
    DEFENSE = "defense"
    MAGIC_ATTACK = "magic_attack"
    AGILITY = "agility"
    ACCURACY = "accuracy"


class StatusType(StrEnum):
    """Status effect types.

    An actor carries at most one active effect of each type. Stat
    modifiers are split by direction so that a buff and a debuff on the
    same stat can coexist.
    """

    # Damage over time
    POISON = "poison"
    BURN = "burn"
    BLEED = "bleed"

    # Action restriction
    STUN = "stun"
    FREEZE = "freeze"
    IMMOBILIZE = "immobilize"
    FEAR = "fear"

    # Defensive stances
    DEFENDING = "defending"
    DODGE = "dodge"
    REFLECT = "reflect"

    # Healing over time
    REGENERATION = "regeneration"

    # Stat modifiers
    ATTACK_UP = "attack_up"
    ATTACK_DOWN = "attack_down"
    DEFENSE_UP = "defense_up"
    DEFENSE_DOWN = "defense_down"
    MAGIC_ATTACK_UP = "magic_attack_up"
    MAGIC_ATTACK_DOWN = "magic_attack_down"
    AGILITY_UP = "agility_up"
    AGILITY_DOWN = "agility_down"
    ACCURACY_UP = "accuracy_up"
    ACCURACY_DOWN = "accuracy_down"

    @classmethod
    def for_modifier(cls, stat: StatType, magnitude: float) -> StatusType:
        """Get the status type carrying a stat modifier.

        Args:
            stat: The modified stat.
            magnitude: Signed modifier; negative values map to ``_down``.

        Returns:
            The matching status type.
        """
        suffix = "down" if magnitude < 0 else "up"
        return cls(f"{stat.value}_{suffix}")

    @property
    def prevents_action(self) -> bool:
        """Whether the effect makes the actor skip its turn."""
        return self in (StatusType.STUN, StatusType.FREEZE)

    @property
    def is_damage_over_time(self) -> bool:
        """Whether the effect deals damage when it ticks."""
        return self in (StatusType.POISON, StatusType.BURN, StatusType.BLEED)


class Phase(StrEnum):
    """Whose turn it is within a round."""

    PLAYER = "player"
    ENEMY = "enemy"


class Outcome(StrEnum):
    """Terminal outcome of an encounter session."""

    NONE = "none"
    VICTORY = "victory"
    DEFEAT = "defeat"
    RETREAT = "retreat"

    @property
    def is_terminal(self) -> bool:
        """Whether the encounter has ended."""
        return self is not Outcome.NONE


class ActionType(StrEnum):
    """Actions the player may submit during the player phase."""

    BASIC_ATTACK = "basic_attack"
    ABILITY = "ability"
    USE_ITEM = "use_item"
    DEFEND = "defend"
    RETREAT = "retreat"


class ResourceType(StrEnum):
    """Pool restored by a consumable item."""

    HEALTH = "health"
    MANA = "mana"


__all__ = [
    "AbilityKind",
    "StatType",
    "StatusType",
    "Phase",
    "Outcome",
    "ActionType",
    "ResourceType",
]
