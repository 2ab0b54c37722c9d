"""Pydantic data models for the combat engine.

Static records (ability definitions, actor templates, loot tables, class
definitions, items) are frozen and validated when the data tables load.
Runtime state (actors, active effects, ability slots, encounter session)
is mutable with assignment validation, which keeps health and mana inside
their bounds.
"""

from __future__ import annotations

from rpg_combat.models.abilities import (
    AbilityDefinition,
    DodgeSpec,
    HealSpec,
    ReflectSpec,
    StatModifierSpec,
    StatusEffectSpec,
    StealSpec,
    SummonSpec,
)
from rpg_combat.models.actors import AbilitySlot, ActiveEffect, Actor, ActorTemplate
from rpg_combat.models.enums import (
    AbilityKind,
    ActionType,
    Outcome,
    Phase,
    ResourceType,
    StatType,
    StatusType,
)
from rpg_combat.models.loot import ItemDrop, LootTable, ValueRange
from rpg_combat.models.player import (
    Attributes,
    AttributeGrowth,
    ClassDefinition,
    EquipmentBonuses,
    ItemDefinition,
    PlayerProfile,
)
from rpg_combat.models.session import EncounterSession, PlayerAction, RewardSummary
from rpg_combat.models.zones import BossTier, SpawnBand, ZoneDefinition


__all__ = [
    # Enums
    "AbilityKind",
    "ActionType",
    "Outcome",
    "Phase",
    "ResourceType",
    "StatType",
    "StatusType",
    # Abilities
    "AbilityDefinition",
    "StatusEffectSpec",
    "StatModifierSpec",
    "HealSpec",
    "SummonSpec",
    "ReflectSpec",
    "DodgeSpec",
    "StealSpec",
    # Actors
    "ActorTemplate",
    "Actor",
    "AbilitySlot",
    "ActiveEffect",
    # Loot
    "ValueRange",
    "ItemDrop",
    "LootTable",
    # Player
    "Attributes",
    "AttributeGrowth",
    "EquipmentBonuses",
    "ClassDefinition",
    "PlayerProfile",
    "ItemDefinition",
    # Session
    "PlayerAction",
    "RewardSummary",
    "EncounterSession",
    # Zones
    "SpawnBand",
    "BossTier",
    "ZoneDefinition",
]
