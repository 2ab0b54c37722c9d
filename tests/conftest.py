"""Pytest configuration and shared fixtures.

This module provides common fixtures for the combat engine test suite,
most importantly a scripted random stream that lets a test decide every
roll the engine makes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

import pytest

from rpg_combat.core.config import EncounterSettings, RulesSettings, Settings
from rpg_combat.engine.actors import ActorFactory
from rpg_combat.engine.catalog import GameData, load_game_data
from rpg_combat.engine.controller import CombatEngine
from rpg_combat.engine.damage import DamageResolver
from rpg_combat.engine.loot import LootGenerator
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.engine.scheduler import TurnScheduler
from rpg_combat.engine.status import StatusEffectEngine
from rpg_combat.models.abilities import AbilityDefinition
from rpg_combat.models.actors import AbilitySlot, Actor
from rpg_combat.models.enums import AbilityKind
from rpg_combat.models.loot import LootTable
from rpg_combat.models.session import EncounterSession


if TYPE_CHECKING:
    from collections.abc import Generator


class ScriptedRandom(CombatRandom):
    """Random stream that replays queued rolls, then a fixed default.

    A default of 0.99 makes every Bernoulli trial below certainty fail,
    so unscripted dodges, crits and resists never happen.
    """

    def __init__(self, rolls: Iterable[float] = (), default: float = 0.99) -> None:
        super().__init__(seed=0)
        self.rolls = list(rolls)
        self.default = default
        self.consumed = 0

    def push(self, *rolls: float) -> None:
        """Queue more rolls."""
        self.rolls.extend(rolls)

    def random(self) -> float:
        self.consumed += 1
        if self.rolls:
            return self.rolls.pop(0)
        return self.default


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from rpg_combat.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def rules() -> RulesSettings:
    """Default combat rules."""
    return RulesSettings()


@pytest.fixture
def encounter_settings() -> EncounterSettings:
    """Default encounter generation settings."""
    return EncounterSettings()


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def rng() -> ScriptedRandom:
    """Scripted random stream; every unscripted roll is 0.99."""
    return ScriptedRandom()


@pytest.fixture
def game_data() -> GameData:
    """The bundled static data tables."""
    return load_game_data()


@pytest.fixture
def status_engine(rng: ScriptedRandom) -> StatusEffectEngine:
    return StatusEffectEngine(rng)


@pytest.fixture
def resolver(rng: ScriptedRandom, status_engine: StatusEffectEngine, rules: RulesSettings) -> DamageResolver:
    return DamageResolver(rng, status_engine, rules)


@pytest.fixture
def actor_factory(
    game_data: GameData,
    status_engine: StatusEffectEngine,
    rng: ScriptedRandom,
) -> ActorFactory:
    return ActorFactory(game_data.abilities, game_data.actors, status_engine, rng)


@pytest.fixture
def loot_generator(rng: ScriptedRandom, rules: RulesSettings) -> LootGenerator:
    return LootGenerator(rng, rules)


@pytest.fixture
def scheduler(
    status_engine: StatusEffectEngine,
    resolver: DamageResolver,
    actor_factory: ActorFactory,
    game_data: GameData,
    rng: ScriptedRandom,
    rules: RulesSettings,
    encounter_settings: EncounterSettings,
) -> TurnScheduler:
    return TurnScheduler(
        status_engine=status_engine,
        resolver=resolver,
        actor_factory=actor_factory,
        items=game_data.items,
        rng=rng,
        rules=rules,
        encounter=encounter_settings,
    )


@pytest.fixture
def engine(rng: ScriptedRandom, game_data: GameData) -> CombatEngine:
    """Combat engine on the scripted stream and bundled data."""
    return CombatEngine(Settings(), rng=rng, data=game_data)


# =============================================================================
# Actor Fixtures
# =============================================================================


@pytest.fixture
def make_actor() -> Callable[..., Actor]:
    """Factory for hand-built actors with explicit stats.

    Returns:
        A callable accepting stat keyword arguments.
    """

    def _make(
        name: str = "Dummy",
        *,
        health: int = 30,
        max_health: int | None = None,
        attack: int = 10,
        defense: int = 0,
        magic_attack: int = 0,
        is_player: bool = False,
        mana: int | None = None,
        attributes: dict[str, int] | None = None,
        abilities: Iterable[AbilityDefinition] = (),
        loot_table: LootTable | None = None,
        level: int = 1,
    ) -> Actor:
        actor = Actor(
            name=name,
            template_id=name.lower(),
            level=level,
            template_level=level,
            is_player=is_player,
            max_health=max_health or health,
            health=health,
            max_mana=mana,
            mana=mana,
            base_attack=attack,
            base_defense=defense,
            base_magic_attack=magic_attack,
            current_attack=attack,
            current_defense=defense,
            current_magic_attack=magic_attack,
            attributes=attributes or {},
            loot_table=loot_table or LootTable(),
        )
        for ability in abilities:
            actor.abilities.append(AbilitySlot.from_definition(ability))
        return actor

    return _make


@pytest.fixture
def make_ability() -> Callable[..., AbilityDefinition]:
    """Factory for ad-hoc ability definitions."""

    def _make(ability_id: str = "strike", kind: AbilityKind = AbilityKind.ATTACK, **fields: Any) -> AbilityDefinition:
        if kind.deals_damage:
            fields.setdefault("damage_multiplier", 1.0)
        return AbilityDefinition(id=ability_id, name=ability_id.replace("-", " ").title(), kind=kind, **fields)

    return _make


@pytest.fixture
def make_session(make_actor: Callable[..., Actor]) -> Callable[..., EncounterSession]:
    """Factory for sessions around hand-built actors."""

    def _make(
        player: Actor | None = None,
        hostiles: list[Actor] | None = None,
        **fields: Any,
    ) -> EncounterSession:
        return EncounterSession(
            zone_id="test-zone",
            player=player or make_actor("Hero", health=100, is_player=True),
            hostiles=hostiles if hostiles is not None else [make_actor("Goblin")],
            **fields,
        )

    return _make
