"""Combat engine controller.

CombatEngine wires the registries, the random stream and the resolvers
together and exposes the operations a presentation layer drives:

* ``start_encounter`` builds a session for a profile, zone and level.
* ``submit_player_action`` resolves the player's action for the turn.
* ``advance`` runs the enemy phase through to the next player turn.
* ``apply_rewards`` folds the finished encounter back into the profile.

Every call returns a StepResult carrying the session, the events in order
and, once the encounter is over, the reward summary.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rpg_combat.core.config import Settings, get_settings
from rpg_combat.core.exceptions import DataNotFoundError, InvalidGameStateError
from rpg_combat.core.logging import bind_context, get_logger, unbind_context
from rpg_combat.engine.actors import ActorFactory
from rpg_combat.engine.catalog import GameData, load_game_data
from rpg_combat.engine.damage import DamageResolver
from rpg_combat.engine.encounter import EncounterFactory
from rpg_combat.engine.loot import LootGenerator
from rpg_combat.engine.progression import ProgressionResult, apply_rewards
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.engine.scheduler import CombatEvent, TurnScheduler
from rpg_combat.engine.status import StatusEffectEngine
from rpg_combat.models.enums import Outcome, Phase
from rpg_combat.models.player import PlayerProfile
from rpg_combat.models.session import EncounterSession, PlayerAction, RewardSummary


logger = get_logger(__name__)


@dataclass
class StepResult:
    """Outcome of one engine call.

    Attributes:
        session: The session after the call.
        events: Events produced, in order.
        outcome: Session outcome after the call.
        reward: Reward summary once the outcome is terminal.
    """

    session: EncounterSession
    events: list[CombatEvent] = field(default_factory=list)
    outcome: Outcome = Outcome.NONE
    reward: RewardSummary | None = None

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal


class CombatEngine:
    """Turn-based combat engine for one player against a hostile group.

    The engine holds only static data and the random stream; encounter
    state lives in the EncounterSession passed to each call.

    Example:
        >>> engine = CombatEngine(rng=CombatRandom(seed=7))
        >>> step = engine.start_encounter(profile, "verdant-woods", 3)
        >>> step = engine.submit_player_action(step.session, PlayerAction.basic_attack())
        >>> if not step.is_over:
        ...     step = engine.advance(step.session)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        rng: CombatRandom | None = None,
        data: GameData | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            settings: Engine settings; defaults to the cached settings.
            rng: Random stream; defaults to one seeded from settings.
            data: Static registries; defaults to the bundled tables.
        """
        self.settings = settings or get_settings()
        self.rng = rng or CombatRandom(self.settings.seed)
        self.data = data or load_game_data()

        rules = self.settings.rules
        self.status = StatusEffectEngine(self.rng)
        self.resolver = DamageResolver(self.rng, self.status, rules)
        self.actors = ActorFactory(self.data.abilities, self.data.actors, self.status, self.rng)
        self.encounters = EncounterFactory(self.actors, self.data.zones, self.rng, self.settings.encounter)
        self.loot = LootGenerator(self.rng, rules)
        self.scheduler = TurnScheduler(
            status_engine=self.status,
            resolver=self.resolver,
            actor_factory=self.actors,
            items=self.data.items,
            rng=self.rng,
            rules=rules,
            encounter=self.settings.encounter,
        )

    # =========================================================================
    # Encounter lifecycle
    # =========================================================================

    def start_encounter(
        self,
        profile: PlayerProfile,
        zone_id: str,
        zone_level: int,
        *,
        is_boss: bool = False,
        count: int | None = None,
    ) -> StepResult:
        """Build a session and enter the first player turn.

        Args:
            profile: The player's persisted profile.
            zone_id: Zone to fight in; unknown zones use placeholders.
            zone_level: Level selecting eligible hostiles.
            is_boss: Fight the zone's boss.
            count: Number of hostiles for a regular encounter.

        Returns:
            The initial step.

        Raises:
            DataNotFoundError: If the profile's class is unknown.
        """
        class_def = self.data.classes.get(profile.class_id)
        if class_def is None:
            raise DataNotFoundError(
                f"Unknown class '{profile.class_id}'",
                kind="class",
                identifier=profile.class_id,
            )

        player = self.actors.create_player(profile, class_def)
        hostiles = self.encounters.build(zone_id, zone_level, count=count, is_boss=is_boss)
        session = EncounterSession(
            zone_id=zone_id,
            zone_level=max(1, zone_level),
            is_boss=is_boss,
            player=player,
            hostiles=hostiles,
            inventory=dict(profile.inventory),
            player_gold=profile.gold,
        )
        bind_context(encounter_id=session.id)
        logger.info(
            "Encounter started",
            player=player.name,
            zone_id=zone_id,
            zone_level=session.zone_level,
            boss=is_boss,
            hostiles=len(hostiles),
        )
        events = self.scheduler.begin_player_turn(session)
        return self._step(session, events)

    def submit_player_action(self, session: EncounterSession, action: PlayerAction) -> StepResult:
        """Resolve the player's action.

        Raises:
            CombatEngineError: If the action is rejected; the session is
                unchanged and the turn is not consumed.
        """
        logger.debug("Player action submitted", action=action.type, round=session.round_number)
        events = self.scheduler.submit_player_action(session, action)
        return self._step(session, events)

    def advance(self, session: EncounterSession) -> StepResult:
        """Run the enemy phase, RoundAdvance and the next player turn entry.

        A stunned player's turn is skipped on entry, so this keeps running
        enemy phases until the player can act or the encounter ends.

        Raises:
            InvalidGameStateError: If it is not the enemy phase.
        """
        events: list[CombatEvent] = []
        events.extend(self.scheduler.run_enemy_phase(session))
        while not session.is_over and session.phase is Phase.ENEMY:
            events.extend(self.scheduler.run_enemy_phase(session))
        return self._step(session, events)

    def play_turn(self, session: EncounterSession, action: PlayerAction) -> StepResult:
        """Submit an action and, if the encounter continues, run the enemy phase."""
        step = self.submit_player_action(session, action)
        if step.is_over or session.phase is Phase.PLAYER:
            return step
        follow = self.advance(session)
        return StepResult(
            session=session,
            events=[*step.events, *follow.events],
            outcome=follow.outcome,
            reward=follow.reward,
        )

    # =========================================================================
    # Rewards
    # =========================================================================

    def finish(self, session: EncounterSession) -> RewardSummary:
        """Compute the reward summary of a finished encounter once.

        Victory and retreat loot the hostiles defeated so far; defeat
        yields no loot and rolls the item loss penalty instead.

        Raises:
            InvalidGameStateError: If the encounter is still running.
        """
        if not session.is_over:
            raise InvalidGameStateError(
                "Encounter is still in progress",
                reason="encounter_running",
                current_state=str(session.phase),
            )
        if session.reward is not None:
            return session.reward

        player = session.player
        experience = gold = 0
        loot: list[str] = []
        lost: list[str] = []
        if session.outcome is Outcome.DEFEAT:
            lost = self.loot.roll_item_loss(session.inventory)
        else:
            rolled = self.loot.roll(session.defeated_hostiles())
            experience, gold, loot = rolled.experience, rolled.gold, rolled.items

        reward = RewardSummary(
            outcome=session.outcome,
            experience_gained=experience,
            gold_gained=gold + session.bonus_gold,
            loot_item_ids=tuple(loot),
            gold_lost=session.gold_stolen,
            lost_item_ids=tuple(lost),
            consumed_items=dict(session.consumed_items),
            rounds=session.round_number,
            final_health=player.health,
            final_mana=player.mana,
        )
        session.reward = reward
        logger.info(
            "Encounter rewards computed",
            outcome=reward.outcome,
            experience=reward.experience_gained,
            gold=reward.gold_gained,
            items=list(reward.loot_item_ids),
            lost=list(reward.lost_item_ids),
            rounds=reward.rounds,
        )
        unbind_context("encounter_id")
        return reward

    def apply_rewards(self, profile: PlayerProfile, reward: RewardSummary) -> ProgressionResult:
        """Fold a reward summary into the profile.

        Raises:
            DataNotFoundError: If the profile's class is unknown.
        """
        class_def = self.data.classes.get(profile.class_id)
        if class_def is None:
            raise DataNotFoundError(
                f"Unknown class '{profile.class_id}'",
                kind="class",
                identifier=profile.class_id,
            )
        return apply_rewards(profile, reward, class_def)

    def _step(self, session: EncounterSession, events: list[CombatEvent]) -> StepResult:
        reward = self.finish(session) if session.is_over else None
        return StepResult(session=session, events=events, outcome=session.outcome, reward=reward)


__all__ = [
    "StepResult",
    "CombatEngine",
]
