"""Combat engine: random stream, registries, resolvers and the turn loop.

Submodules:
    rng: The single seedable random stream behind every roll
    catalog: Validated registries of abilities, actors, zones, classes, items
    status: Status effect application, refresh and ticking
    damage: Attack pipeline and heal resolution
    actors: Actor construction from templates, placeholders and profiles
    encounter: Hostile roster generation per zone and level
    loot: Loot tables and the defeat penalty
    progression: Derived player stats, experience and level-ups
    scheduler: Turn state machine and combat events
    controller: CombatEngine facade driving a session

Example:
    >>> from rpg_combat.engine import CombatEngine, CombatRandom
    >>> from rpg_combat.models import PlayerAction, PlayerProfile
    >>>
    >>> engine = CombatEngine(rng=CombatRandom(seed=3))
    >>> profile = PlayerProfile(name="Ayla", class_id="warrior")
    >>> step = engine.start_encounter(profile, "verdant-woods", 1)
    >>> while not step.is_over:
    ...     step = engine.play_turn(step.session, PlayerAction.basic_attack())
    >>> result = engine.apply_rewards(profile, step.reward)
"""

from __future__ import annotations

# =============================================================================
# Random Stream
# =============================================================================
from rpg_combat.engine.rng import CombatRandom

# =============================================================================
# Registries
# =============================================================================
from rpg_combat.engine.catalog import (
    AbilityCatalog,
    ActorCatalog,
    ClassCatalog,
    GameData,
    ItemCatalog,
    Registry,
    ZoneCatalog,
    load_game_data,
)

# =============================================================================
# Resolution
# =============================================================================
from rpg_combat.engine.status import StatusApplication, StatusEffectEngine, TickResult
from rpg_combat.engine.damage import AttackContext, DamageResolver, DamageResult
from rpg_combat.engine.actors import ActorFactory
from rpg_combat.engine.encounter import EncounterFactory, level_variance
from rpg_combat.engine.loot import LootGenerator, LootResult
from rpg_combat.engine.progression import (
    DerivedStats,
    ProgressionResult,
    apply_rewards,
    derive_stats,
)

# =============================================================================
# Turn Loop
# =============================================================================
from rpg_combat.engine.scheduler import CombatEvent, EventType, StatusChange, TurnScheduler
from rpg_combat.engine.controller import CombatEngine, StepResult


__all__ = [
    # Random stream
    "CombatRandom",
    # Registries
    "Registry",
    "AbilityCatalog",
    "ActorCatalog",
    "ZoneCatalog",
    "ClassCatalog",
    "ItemCatalog",
    "GameData",
    "load_game_data",
    # Resolution
    "StatusEffectEngine",
    "StatusApplication",
    "TickResult",
    "DamageResolver",
    "DamageResult",
    "AttackContext",
    "ActorFactory",
    "EncounterFactory",
    "level_variance",
    "LootGenerator",
    "LootResult",
    "DerivedStats",
    "ProgressionResult",
    "derive_stats",
    "apply_rewards",
    # Turn loop
    "EventType",
    "StatusChange",
    "CombatEvent",
    "TurnScheduler",
    "StepResult",
    "CombatEngine",
]
