"""Encounter session, player actions and the reward summary.

The EncounterSession is an explicit value that the controller passes to
every engine call. It owns its actors exclusively; nothing in the engine
keeps a reference to a session between calls.
"""

from __future__ import annotations

from typing import Annotated
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rpg_combat.models.actors import Actor
from rpg_combat.models.enums import ActionType, Outcome, Phase


NonNegativeInt = Annotated[int, Field(ge=0)]


class PlayerAction(BaseModel):
    """One action submitted during the player phase.

    Use the classmethod constructors rather than building it by hand.

    Example:
        >>> PlayerAction.ability("fireball", target_id=session.hostiles[1].id)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ActionType
    ability_id: str | None = None
    item_id: str | None = None
    target_id: str | None = None

    @model_validator(mode="after")
    def validate_payload(self) -> "PlayerAction":
        """Ability and item actions must name what they use."""
        if self.type is ActionType.ABILITY and not self.ability_id:
            msg = "ability action requires ability_id"
            raise ValueError(msg)
        if self.type is ActionType.USE_ITEM and not self.item_id:
            msg = "use_item action requires item_id"
            raise ValueError(msg)
        return self

    @classmethod
    def basic_attack(cls, target_id: str | None = None) -> PlayerAction:
        return cls(type=ActionType.BASIC_ATTACK, target_id=target_id)

    @classmethod
    def ability(cls, ability_id: str, target_id: str | None = None) -> PlayerAction:
        return cls(type=ActionType.ABILITY, ability_id=ability_id, target_id=target_id)

    @classmethod
    def use_item(cls, item_id: str) -> PlayerAction:
        return cls(type=ActionType.USE_ITEM, item_id=item_id)

    @classmethod
    def defend(cls) -> PlayerAction:
        return cls(type=ActionType.DEFEND)

    @classmethod
    def retreat(cls) -> PlayerAction:
        return cls(type=ActionType.RETREAT)


class RewardSummary(BaseModel):
    """Result of a finished encounter, written back by the caller.

    Attributes:
        outcome: Terminal outcome.
        experience_gained: Experience from defeated hostiles.
        gold_gained: Gold from defeated hostiles.
        loot_item_ids: Dropped items; duplicates are separate entries.
        gold_lost: Gold stolen during the encounter.
        lost_item_ids: Inventory stacks lost to the defeat penalty.
        consumed_items: Items used during the encounter.
        rounds: Round counter when the encounter ended.
        final_health: Player health at the end.
        final_mana: Player mana at the end.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    outcome: Outcome
    experience_gained: NonNegativeInt = 0
    gold_gained: NonNegativeInt = 0
    loot_item_ids: tuple[str, ...] = ()
    gold_lost: NonNegativeInt = 0
    lost_item_ids: tuple[str, ...] = ()
    consumed_items: dict[str, int] = Field(default_factory=dict)
    rounds: Annotated[int, Field(ge=1)] = 1
    final_health: NonNegativeInt = 0
    final_mana: NonNegativeInt | None = None


class EncounterSession(BaseModel):
    """State of one encounter from start to terminal outcome.

    Attributes:
        id: Session identifier, bound to log context.
        zone_id: Zone the encounter was built for.
        zone_level: Zone level used for the roster.
        is_boss: Whether this is a boss encounter.
        player: The player's actor.
        hostiles: Hostile actors in fixed roster order.
        round_number: Current round, starting at 1.
        phase: Whose turn it is.
        outcome: Terminal outcome, ``none`` while the encounter runs.
        inventory: Working copy of the player's inventory.
        consumed_items: Items used so far.
        player_gold: Gold the player carried in, bounding theft.
        gold_stolen: Gold taken by hostiles so far.
        bonus_gold: Gold taken from hostiles by the player.
        player_immobilized: The player may not retreat this turn.
        player_feared: The player may only use basic attacks this turn.
        reward: Summary computed once a terminal outcome is reached.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    zone_id: str
    zone_level: Annotated[int, Field(ge=1)] = 1
    is_boss: bool = False

    player: Actor
    hostiles: list[Actor] = Field(default_factory=list)

    round_number: Annotated[int, Field(ge=1)] = 1
    phase: Phase = Phase.PLAYER
    outcome: Outcome = Outcome.NONE

    inventory: dict[str, int] = Field(default_factory=dict)
    consumed_items: dict[str, int] = Field(default_factory=dict)
    player_gold: NonNegativeInt = 0
    gold_stolen: NonNegativeInt = 0
    bonus_gold: NonNegativeInt = 0

    player_immobilized: bool = False
    player_feared: bool = False

    reward: RewardSummary | None = None

    @property
    def is_over(self) -> bool:
        """Whether a terminal outcome has been reached."""
        return self.outcome.is_terminal

    def living_hostiles(self) -> list[Actor]:
        """Hostiles still in the fight, in roster order."""
        return [actor for actor in self.hostiles if not actor.defeated]

    def defeated_hostiles(self) -> list[Actor]:
        """Hostiles already defeated, in roster order."""
        return [actor for actor in self.hostiles if actor.defeated]

    @property
    def all_hostiles_defeated(self) -> bool:
        """Whether every hostile has been defeated."""
        return all(actor.defeated for actor in self.hostiles)

    def first_living_hostile(self) -> Actor | None:
        """Default target for player actions."""
        return next((actor for actor in self.hostiles if not actor.defeated), None)

    def find_actor(self, actor_id: str) -> Actor | None:
        """Look up the player or a hostile by instance id."""
        if self.player.id == actor_id:
            return self.player
        return next((actor for actor in self.hostiles if actor.id == actor_id), None)


__all__ = [
    "PlayerAction",
    "RewardSummary",
    "EncounterSession",
]
