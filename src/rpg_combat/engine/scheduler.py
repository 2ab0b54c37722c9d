"""Turn scheduling state machine.

A round runs ``PlayerTurn -> EnemyTurn(0..n-1) -> RoundAdvance`` until a
terminal outcome is reached:

* PlayerTurn entry ticks the player's status effects. A stunned player
  skips straight to the enemy phase; otherwise exactly one action is
  accepted.
* The enemy phase plans one action per living hostile and orders the
  plans with priority abilities first (stable, so roster order holds
  within each group). Each hostile then ticks its status effects and
  acts before the next hostile's turn starts.
* RoundAdvance counts every cooldown down by one, increments the round
  and enters the next PlayerTurn.

Victory and defeat are checked after every damage application, so an
encounter ends the instant the last hostile or the player falls. If one
resolution fells both, defeat wins.

Rejected actions raise a CombatEngineError subclass before any mutation,
leaving the session untouched and the turn unconsumed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from rpg_combat.core.config import EncounterSettings, RulesSettings
from rpg_combat.core.constants import BASIC_ATTACK_ID
from rpg_combat.core.exceptions import (
    DataNotFoundError,
    ExhaustedResourceError,
    InvalidGameStateError,
)
from rpg_combat.core.logging import get_logger
from rpg_combat.engine.actors import ActorFactory
from rpg_combat.engine.catalog import ItemCatalog
from rpg_combat.engine.damage import DamageResolver, DamageResult
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.engine.status import StatusApplication, StatusEffectEngine, TickResult
from rpg_combat.models.abilities import AbilityDefinition
from rpg_combat.models.actors import Actor
from rpg_combat.models.enums import AbilityKind, ActionType, Outcome, Phase, ResourceType, StatusType
from rpg_combat.models.session import EncounterSession, PlayerAction


logger = get_logger(__name__)


# =============================================================================
# Events
# =============================================================================


class EventType(StrEnum):
    """Kinds of combat events emitted to the presentation layer."""

    ATTACK = "attack"
    HEAL = "heal"
    BUFF = "buff"
    DEBUFF = "debuff"
    STANCE = "stance"
    STEAL = "steal"
    SUMMON = "summon"
    ITEM_USED = "item_used"
    STATUS_TICK = "status_tick"
    TURN_SKIPPED = "turn_skipped"
    RETREAT_FAILED = "retreat_failed"
    RETREATED = "retreated"
    ACTOR_DEFEATED = "actor_defeated"
    ROUND_ADVANCED = "round_advanced"
    ENCOUNTER_ENDED = "encounter_ended"


@dataclass
class StatusChange:
    """One change to an actor's status effects.

    Attributes:
        actor_id: Affected actor.
        status_type: Effect type.
        change: ``applied``, ``refreshed``, ``resisted`` or ``expired``.
        remaining_duration: Duration after the change, if any.
    """

    actor_id: str
    status_type: StatusType
    change: str
    remaining_duration: int | None = None

    @classmethod
    def from_application(cls, application: StatusApplication) -> StatusChange:
        if not application.applied:
            change = "resisted"
        elif application.refreshed:
            change = "refreshed"
        else:
            change = "applied"
        return cls(
            actor_id=application.actor_id,
            status_type=application.status_type,
            change=change,
            remaining_duration=application.remaining_duration,
        )


@dataclass
class CombatEvent:
    """Per-step payload for rendering without re-deriving rules.

    Attributes:
        event_type: What happened.
        phase: Phase the event happened in.
        round_number: Round the event happened in.
        actor_id: Acting (or ticked) actor.
        target_id: Target actor, if any.
        ability_id: Ability used, if any.
        damage_result: Resolved damage, for attacks.
        heal_amount: Health actually restored.
        status_changes: Status effects applied, refreshed, resisted or expired.
        new_health: Target health after the event (actor health if no target).
        terminal: Outcome reached by this event, if any.
        descriptions: Human-readable status tick lines.
        details: Extra event-specific data.
    """

    event_type: EventType
    phase: Phase
    round_number: int
    actor_id: str
    target_id: str | None = None
    ability_id: str | None = None
    damage_result: DamageResult | None = None
    heal_amount: int = 0
    status_changes: list[StatusChange] = field(default_factory=list)
    new_health: int | None = None
    terminal: Outcome | None = None
    descriptions: list[str] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class PlannedAction:
    """A hostile's chosen action awaiting resolution.

    ``ability`` is None for a hostile that entered the phase unable to act.
    """

    order: int
    actor: Actor
    ability: AbilityDefinition | None

    @property
    def sort_key(self) -> tuple[int, int]:
        return (0 if self.ability is not None and self.ability.priority else 1, self.order)


# =============================================================================
# Scheduler
# =============================================================================


class TurnScheduler:
    """Drives an EncounterSession through its phases.

    The scheduler holds no session state of its own; every method takes
    the session explicitly and mutates only that session's actors.
    """

    def __init__(
        self,
        *,
        status_engine: StatusEffectEngine,
        resolver: DamageResolver,
        actor_factory: ActorFactory,
        items: ItemCatalog,
        rng: CombatRandom,
        rules: RulesSettings,
        encounter: EncounterSettings,
    ) -> None:
        self._status = status_engine
        self._resolver = resolver
        self._actors = actor_factory
        self._items = items
        self._rng = rng
        self._rules = rules
        self._encounter = encounter

    # -------------------------------------------------------------------------
    # Player phase
    # -------------------------------------------------------------------------

    def begin_player_turn(self, session: EncounterSession) -> list[CombatEvent]:
        """Enter PlayerTurn: tick the player and handle a stun.

        Returns:
            Tick events; a stunned player also gets a skip event and the
            session moves to the enemy phase.
        """
        session.phase = Phase.PLAYER
        player = session.player
        tick = self._status.tick(player)
        events = self._tick_events(session, player, tick)
        if session.is_over:
            return events

        session.player_immobilized = tick.immobilized
        session.player_feared = tick.feared
        if tick.stunned:
            events.append(self._event(session, EventType.TURN_SKIPPED, player, new_health=player.health))
            self._end_player_turn(session)
            logger.info("Player turn skipped", round=session.round_number)
        return events

    def submit_player_action(
        self,
        session: EncounterSession,
        action: PlayerAction,
    ) -> list[CombatEvent]:
        """Resolve the player's one action for this turn.

        Args:
            session: The live session.
            action: The submitted action.

        Returns:
            Events produced by the action.

        Raises:
            InvalidGameStateError: Out of phase, encounter over, bad target,
                or a restricted action.
            ExhaustedResourceError: Cooldown, mana or item missing.
            DataNotFoundError: Unknown ability or item id.
        """
        self._require_player_phase(session)
        player = session.player

        if action.type is ActionType.BASIC_ATTACK:
            target = self._resolve_target(session, action.target_id)
            ability = self._actors.abilities.basic_attack()
            events = self._execute(session, player, ability, target)
        elif action.type is ActionType.ABILITY:
            events = self._player_ability(session, action)
        elif action.type is ActionType.USE_ITEM:
            events = self._player_item(session, action)
        elif action.type is ActionType.DEFEND:
            application = self._status.apply_stance(player, StatusType.DEFENDING, 1, source_id=player.id)
            events = [
                self._event(
                    session,
                    EventType.STANCE,
                    player,
                    status_changes=[StatusChange.from_application(application)],
                    new_health=player.health,
                )
            ]
        else:
            events = self._player_retreat(session)
            if session.is_over or not self._rules.retreat_consumes_turn:
                return events

        if not session.is_over:
            self._end_player_turn(session)
        return events

    def _player_ability(self, session: EncounterSession, action: PlayerAction) -> list[CombatEvent]:
        player = session.player
        ability_id = action.ability_id or ""
        slot = player.get_slot(ability_id)
        if slot is None:
            raise DataNotFoundError(
                f"{player.name} does not know ability '{ability_id}'",
                kind="ability",
                identifier=ability_id,
            )
        ability = slot.definition
        if ability.is_passive:
            raise InvalidGameStateError(
                f"Ability '{ability_id}' is passive and cannot be used",
                reason="passive_ability",
            )
        if session.player_feared:
            raise InvalidGameStateError(
                f"{player.name} is terrified and can only attack",
                reason="feared",
            )
        if not slot.is_ready:
            raise ExhaustedResourceError(
                f"Ability '{ability_id}' is on cooldown",
                resource=ability_id,
                reason="cooldown",
                details={"cooldown_remaining": slot.cooldown_remaining},
            )
        if not player.has_mana_for(ability.mana_cost):
            raise ExhaustedResourceError(
                "Not enough mana",
                resource=ability_id,
                reason="mana",
                details={"mana": player.mana, "mana_cost": ability.mana_cost},
            )

        target = None
        if self._needs_opponent_target(ability):
            target = self._resolve_target(session, action.target_id)

        player.spend_mana(ability.mana_cost)
        slot.trigger()
        return self._execute(session, player, ability, target)

    def _player_item(self, session: EncounterSession, action: PlayerAction) -> list[CombatEvent]:
        player = session.player
        item_id = action.item_id or ""
        item = self._items.get(item_id)
        if item is None:
            raise DataNotFoundError(f"Unknown item '{item_id}'", kind="item", identifier=item_id)
        if session.inventory.get(item_id, 0) <= 0:
            raise ExhaustedResourceError(
                f"No '{item_id}' left in inventory",
                resource=item_id,
                reason="item_missing",
            )

        if item.restores is ResourceType.HEALTH:
            full = player.health >= player.max_health
        else:
            full = player.mana is None or player.max_mana is None or player.mana >= player.max_mana
        if full:
            raise InvalidGameStateError(
                f"Using '{item_id}' would have no effect",
                reason="no_effect",
                details={"item_id": item_id},
            )

        if item.restores is ResourceType.HEALTH:
            restored = player.restore_health(item.amount)
        else:
            restored = player.restore_mana(item.amount)

        inventory = dict(session.inventory)
        inventory[item_id] -= 1
        if inventory[item_id] <= 0:
            del inventory[item_id]
        session.inventory = inventory
        consumed = dict(session.consumed_items)
        consumed[item_id] = consumed.get(item_id, 0) + 1
        session.consumed_items = consumed

        logger.info("Item used", item=item_id, restored=restored, resource=item.restores)
        return [
            self._event(
                session,
                EventType.ITEM_USED,
                player,
                heal_amount=restored if item.restores is ResourceType.HEALTH else 0,
                new_health=player.health,
                details={"item_id": item_id, "resource": str(item.restores), "restored": restored},
            )
        ]

    def _player_retreat(self, session: EncounterSession) -> list[CombatEvent]:
        player = session.player
        if session.player_immobilized:
            raise InvalidGameStateError(
                f"{player.name} is immobilized and cannot retreat",
                reason="immobilized",
            )
        if session.player_feared:
            raise InvalidGameStateError(
                f"{player.name} is terrified and can only attack",
                reason="feared",
            )

        chance = self.retreat_chance(player)
        if self._rng.chance(chance):
            session.outcome = Outcome.RETREAT
            logger.info("Player retreated", round=session.round_number, chance=chance)
            return [
                self._event(
                    session,
                    EventType.RETREATED,
                    player,
                    new_health=player.health,
                    terminal=Outcome.RETREAT,
                    details={"chance": chance},
                )
            ]

        logger.info("Retreat failed", round=session.round_number, chance=chance)
        return [
            self._event(
                session,
                EventType.RETREAT_FAILED,
                player,
                new_health=player.health,
                details={"chance": chance, "turn_consumed": self._rules.retreat_consumes_turn},
            )
        ]

    def retreat_chance(self, player: Actor) -> float:
        """``min(cap, base + agility * factor)``."""
        return min(
            self._rules.retreat_max_chance,
            self._rules.retreat_base_chance + player.effective_agility * self._rules.retreat_agility_factor,
        )

    def _end_player_turn(self, session: EncounterSession) -> None:
        session.player_immobilized = False
        session.player_feared = False
        session.phase = Phase.ENEMY

    # -------------------------------------------------------------------------
    # Enemy phase
    # -------------------------------------------------------------------------

    def run_enemy_phase(self, session: EncounterSession) -> list[CombatEvent]:
        """Run every hostile turn, RoundAdvance and the next PlayerTurn entry.

        Hostiles summoned during this phase act from the next round.

        Returns:
            Events in the order they happened.

        Raises:
            InvalidGameStateError: If it is not the enemy phase.
        """
        if session.is_over:
            raise InvalidGameStateError(
                "Encounter is already over",
                reason="encounter_over",
                current_state=str(session.outcome),
            )
        if session.phase is not Phase.ENEMY:
            raise InvalidGameStateError(
                "It is not the enemy phase",
                reason="not_enemy_phase",
                current_state=str(session.phase),
                expected_states=[str(Phase.ENEMY)],
            )

        events: list[CombatEvent] = []
        planned = [
            PlannedAction(order=order, actor=actor, ability=self._plan(actor))
            for order, actor in enumerate(list(session.hostiles))
            if not actor.defeated
        ]

        for action in sorted(planned, key=lambda p: p.sort_key):
            actor = action.actor
            if actor.defeated:
                continue
            tick = self._status.tick(actor)
            events.extend(self._tick_events(session, actor, tick))
            if session.is_over:
                return events
            if actor.defeated:
                continue
            if tick.stunned or action.ability is None:
                events.append(self._event(session, EventType.TURN_SKIPPED, actor, new_health=actor.health))
                continue

            ability = action.ability
            if tick.feared and ability.id != BASIC_ATTACK_ID:
                ability = self._actors.abilities.basic_attack()
            slot = actor.get_slot(ability.id)
            if slot is not None:
                slot.trigger()
            actor.spend_mana(ability.mana_cost)
            target = session.player if self._needs_opponent_target(ability) else None
            events.extend(self._execute(session, actor, ability, target))
            if session.is_over:
                return events

        events.extend(self.advance_round(session))
        events.extend(self.begin_player_turn(session))
        return events

    def _plan(self, actor: Actor) -> AbilityDefinition | None:
        """Choose a hostile's ability from the effects it carries at phase start."""
        if any(effect.type.prevents_action for effect in actor.status_effects):
            return None
        return self._choose_ability(actor, feared=actor.has_effect(StatusType.FEAR))

    def _choose_ability(self, actor: Actor, *, feared: bool = False) -> AbilityDefinition:
        """Pick an ability with probability ``enemy_ability_chance``, else attack."""
        if not feared:
            available = [
                slot
                for slot in actor.abilities
                if not slot.definition.is_passive
                and slot.is_ready
                and actor.has_mana_for(slot.definition.mana_cost)
            ]
            if available and self._rng.chance(self._rules.enemy_ability_chance):
                return self._rng.choice(available).definition
        return self._actors.abilities.basic_attack()

    def advance_round(self, session: EncounterSession) -> list[CombatEvent]:
        """RoundAdvance: count cooldowns down and increment the round."""
        for actor in [session.player, *session.living_hostiles()]:
            for slot in actor.abilities:
                slot.tick_cooldown()
        session.round_number += 1
        logger.debug("Round advanced", round=session.round_number)
        return [
            self._event(
                session,
                EventType.ROUND_ADVANCED,
                session.player,
                details={"round": session.round_number},
            )
        ]

    # -------------------------------------------------------------------------
    # Ability execution
    # -------------------------------------------------------------------------

    @staticmethod
    def _needs_opponent_target(ability: AbilityDefinition) -> bool:
        if ability.kind.deals_damage or ability.kind is AbilityKind.DEBUFF:
            return True
        return ability.kind is AbilityKind.SPECIAL and ability.steal is not None

    def _opponents(self, session: EncounterSession, actor: Actor) -> list[Actor]:
        if actor.is_player:
            return session.living_hostiles()
        return [] if session.player.defeated else [session.player]

    def _execute(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
        target: Actor | None,
    ) -> list[CombatEvent]:
        kind = ability.kind
        if kind.deals_damage:
            return self._execute_attack(session, actor, ability, target)
        if kind is AbilityKind.HEAL:
            return self._execute_heal(session, actor, ability)
        if kind is AbilityKind.BUFF:
            return self._execute_buff(session, actor, ability)
        if kind is AbilityKind.DEBUFF:
            return self._execute_debuff(session, actor, ability, target)
        if kind is AbilityKind.SPECIAL:
            return self._execute_special(session, actor, ability, target)
        if kind is AbilityKind.SUMMON:
            return self._execute_summon(session, actor, ability)
        raise InvalidGameStateError(
            f"Ability '{ability.id}' cannot be used actively",
            reason="passive_ability",
        )

    def _targets(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
        target: Actor | None,
    ) -> list[Actor]:
        if ability.area_effect:
            return self._opponents(session, actor)
        return [target] if target is not None and not target.defeated else []

    def _execute_attack(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
        target: Actor | None,
    ) -> list[CombatEvent]:
        events: list[CombatEvent] = []
        for defender in self._targets(session, actor, ability, target):
            living_before = self._living_ids(session)
            result = self._resolver.resolve_attack(actor, defender, ability)

            heal_amount = 0
            if ability.kind is AbilityKind.ATTACK_HEAL and ability.heal is not None:
                heal_amount = self._resolver.resolve_lifesteal(actor, result, ability.heal)

            changes = []
            if result.status_type is not None:
                changes.append(
                    StatusChange(
                        actor_id=defender.id,
                        status_type=result.status_type,
                        change="applied" if result.status_applied else "resisted",
                        remaining_duration=(
                            ability.status_effect.duration if result.status_applied and ability.status_effect else None
                        ),
                    )
                )
            events.append(
                self._event(
                    session,
                    EventType.ATTACK,
                    actor,
                    target=defender,
                    ability_id=ability.id,
                    damage_result=result,
                    heal_amount=heal_amount,
                    status_changes=changes,
                    new_health=defender.health,
                )
            )
            events.extend(self._after_damage(session, living_before))
            if session.is_over:
                break
        return events

    def _execute_heal(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
    ) -> list[CombatEvent]:
        restored = self._resolver.resolve_heal(actor, actor, ability.heal) if ability.heal else 0
        return [
            self._event(
                session,
                EventType.HEAL,
                actor,
                target=actor,
                ability_id=ability.id,
                heal_amount=restored,
                new_health=actor.health,
            )
        ]

    def _execute_buff(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
    ) -> list[CombatEvent]:
        changes: list[StatusChange] = []
        if ability.stat_modifier is not None:
            application = self._status.apply_modifier(actor, ability.stat_modifier, source_id=actor.id)
            changes.append(StatusChange.from_application(application))
        if ability.status_effect is not None:
            application = self._status.apply(actor, ability.status_effect, source_id=actor.id)
            changes.append(StatusChange.from_application(application))
        return [
            self._event(
                session,
                EventType.BUFF,
                actor,
                target=actor,
                ability_id=ability.id,
                status_changes=changes,
                new_health=actor.health,
            )
        ]

    def _execute_debuff(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
        target: Actor | None,
    ) -> list[CombatEvent]:
        events: list[CombatEvent] = []
        for defender in self._targets(session, actor, ability, target):
            changes: list[StatusChange] = []
            if ability.stat_modifier is not None:
                application = self._status.apply_modifier(defender, ability.stat_modifier, source_id=actor.id)
                changes.append(StatusChange.from_application(application))
            if ability.status_effect is not None:
                application = self._status.apply(defender, ability.status_effect, source_id=actor.id)
                changes.append(StatusChange.from_application(application))
            events.append(
                self._event(
                    session,
                    EventType.DEBUFF,
                    actor,
                    target=defender,
                    ability_id=ability.id,
                    status_changes=changes,
                    new_health=defender.health,
                )
            )
        return events

    def _execute_special(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
        target: Actor | None,
    ) -> list[CombatEvent]:
        if ability.steal is not None:
            return self._execute_steal(session, actor, ability, target)

        changes: list[StatusChange] = []
        if ability.reflect is not None:
            application = self._status.apply_stance(
                actor,
                StatusType.REFLECT,
                ability.reflect.duration,
                magnitude=ability.reflect.fraction,
                chance=ability.reflect.chance,
                source_id=actor.id,
            )
            changes.append(StatusChange.from_application(application))
        if ability.dodge is not None:
            application = self._status.apply_stance(
                actor,
                StatusType.DODGE,
                ability.dodge.duration,
                magnitude=ability.dodge.chance,
                source_id=actor.id,
            )
            changes.append(StatusChange.from_application(application))
        return [
            self._event(
                session,
                EventType.STANCE,
                actor,
                target=actor,
                ability_id=ability.id,
                status_changes=changes,
                new_health=actor.health,
            )
        ]

    def _execute_steal(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
        target: Actor | None,
    ) -> list[CombatEvent]:
        steal = ability.steal
        amount = 0
        if steal is not None and target is not None and self._rng.chance(steal.chance):
            amount = self._rng.randint(steal.gold.min, steal.gold.max)
            if actor.is_player:
                session.bonus_gold += amount
            else:
                amount = min(amount, max(0, session.player_gold - session.gold_stolen))
                session.gold_stolen += amount
        logger.info("Steal attempted", thief=actor.name, amount=amount)
        return [
            self._event(
                session,
                EventType.STEAL,
                actor,
                target=target,
                ability_id=ability.id,
                new_health=target.health if target else None,
                details={"gold": amount, "succeeded": amount > 0},
            )
        ]

    def _execute_summon(
        self,
        session: EncounterSession,
        actor: Actor,
        ability: AbilityDefinition,
    ) -> list[CombatEvent]:
        summoned: list[str] = []
        summon = ability.summon
        if summon is not None and not actor.is_player:
            requested = self._rng.randint(summon.count.min, summon.count.max)
            capacity = max(0, self._encounter.max_hostiles - len(session.living_hostiles()))
            for _ in range(min(requested, capacity)):
                reinforcement = self._actors.instantiate(summon.actor_template_id)
                if reinforcement is None:
                    break
                session.hostiles = [*session.hostiles, reinforcement]
                summoned.append(reinforcement.id)
        logger.info("Summon resolved", summoner=actor.name, summoned=len(summoned))
        return [
            self._event(
                session,
                EventType.SUMMON,
                actor,
                ability_id=ability.id,
                new_health=actor.health,
                details={"summoned_ids": summoned},
            )
        ]

    # -------------------------------------------------------------------------
    # Terminal detection
    # -------------------------------------------------------------------------

    @staticmethod
    def _living_ids(session: EncounterSession) -> set[str]:
        ids = {actor.id for actor in session.living_hostiles()}
        if not session.player.defeated:
            ids.add(session.player.id)
        return ids

    def _after_damage(self, session: EncounterSession, living_before: set[str]) -> list[CombatEvent]:
        """Emit defeat events and check for a terminal outcome."""
        events: list[CombatEvent] = []
        for actor_id in sorted(living_before - self._living_ids(session)):
            fallen = session.find_actor(actor_id)
            if fallen is not None:
                events.append(self._event(session, EventType.ACTOR_DEFEATED, fallen, new_health=0))
                logger.info("Actor defeated", actor=fallen.name, round=session.round_number)
        outcome = self.check_terminal(session)
        if outcome is not None:
            events.append(
                self._event(session, EventType.ENCOUNTER_ENDED, session.player, terminal=outcome)
            )
        return events

    @staticmethod
    def check_terminal(session: EncounterSession) -> Outcome | None:
        """Set and return the terminal outcome if one has been reached."""
        if session.is_over:
            return None
        if session.player.defeated:
            session.outcome = Outcome.DEFEAT
        elif session.all_hostiles_defeated:
            session.outcome = Outcome.VICTORY
        else:
            return None
        logger.info("Encounter ended", outcome=session.outcome, round=session.round_number)
        return session.outcome

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_player_phase(self, session: EncounterSession) -> None:
        if session.is_over:
            raise InvalidGameStateError(
                "Encounter is already over",
                reason="encounter_over",
                current_state=str(session.outcome),
            )
        if session.phase is not Phase.PLAYER:
            raise InvalidGameStateError(
                "It is not the player's turn",
                reason="not_player_turn",
                current_state=str(session.phase),
                expected_states=[str(Phase.PLAYER)],
            )
        if session.player.defeated:
            raise InvalidGameStateError("The player has been defeated", reason="actor_defeated")

    def _resolve_target(self, session: EncounterSession, target_id: str | None) -> Actor:
        if target_id is None:
            target = session.first_living_hostile()
            if target is None:
                raise InvalidGameStateError("No living hostile to target", reason="no_target")
            return target
        target = next((actor for actor in session.hostiles if actor.id == target_id), None)
        if target is None:
            raise InvalidGameStateError(
                f"Unknown target '{target_id}'",
                reason="unknown_target",
                details={"target_id": target_id},
            )
        if target.defeated:
            raise InvalidGameStateError(
                f"{target.name} has already been defeated",
                reason="target_defeated",
                details={"target_id": target_id},
            )
        return target

    def _tick_events(self, session: EncounterSession, actor: Actor, tick: TickResult) -> list[CombatEvent]:
        if not tick.descriptions:
            return []
        living_before = self._living_ids(session) | ({actor.id} if tick.total_damage else set())
        events = [
            self._event(
                session,
                EventType.STATUS_TICK,
                actor,
                heal_amount=tick.total_healing,
                status_changes=[
                    StatusChange(actor_id=actor.id, status_type=status, change="expired", remaining_duration=0)
                    for status in tick.expired
                ],
                new_health=actor.health,
                descriptions=list(tick.descriptions),
                details={
                    "damage": tick.total_damage,
                    "stunned": tick.stunned,
                    "immobilized": tick.immobilized,
                    "feared": tick.feared,
                },
            )
        ]
        if tick.total_damage:
            events.extend(self._after_damage(session, living_before))
        return events

    @staticmethod
    def _event(
        session: EncounterSession,
        event_type: EventType,
        actor: Actor,
        *,
        target: Actor | None = None,
        **fields: Any,
    ) -> CombatEvent:
        return CombatEvent(
            event_type=event_type,
            phase=session.phase,
            round_number=session.round_number,
            actor_id=actor.id,
            target_id=target.id if target is not None else None,
            **fields,
        )


__all__ = [
    "EventType",
    "StatusChange",
    "CombatEvent",
    "PlannedAction",
    "TurnScheduler",
]
