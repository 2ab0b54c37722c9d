"""rpg_combat - Turn-based RPG combat rules engine.

One player fights a group of hostiles in rounds. The engine owns the
rules (damage, status effects, cooldowns, loot, progression) and a single
seedable random stream; the presentation layer submits actions and
renders the structured events it gets back.

Example:
    >>> from rpg_combat import CombatEngine, PlayerAction, PlayerProfile
    >>>
    >>> engine = CombatEngine()
    >>> profile = PlayerProfile(name="Ayla", class_id="mage")
    >>> step = engine.start_encounter(profile, "crystal-caverns", 2)
    >>> step = engine.play_turn(step.session, PlayerAction.ability("fireball"))

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas for static data and runtime state.
    data: Bundled ability, actor, zone, class and item tables.
    engine: Random stream, resolvers and the turn loop.
"""

from __future__ import annotations

# Core
from rpg_combat.core.config import Settings, get_settings
from rpg_combat.core.exceptions import CombatEngineError, RpgCombatError
from rpg_combat.core.logging import configure_logging, get_logger

# Models
from rpg_combat.models import (
    AbilityDefinition,
    Actor,
    ActorTemplate,
    EncounterSession,
    Outcome,
    Phase,
    PlayerAction,
    PlayerProfile,
    RewardSummary,
)

# Engine
from rpg_combat.engine import (
    CombatEngine,
    CombatEvent,
    CombatRandom,
    EventType,
    GameData,
    StepResult,
    load_game_data,
)


__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "RpgCombatError",
    "CombatEngineError",
    "configure_logging",
    "get_logger",
    # Models
    "AbilityDefinition",
    "ActorTemplate",
    "Actor",
    "PlayerProfile",
    "PlayerAction",
    "EncounterSession",
    "RewardSummary",
    "Outcome",
    "Phase",
    # Engine
    "CombatEngine",
    "CombatRandom",
    "CombatEvent",
    "EventType",
    "StepResult",
    "GameData",
    "load_game_data",
]
