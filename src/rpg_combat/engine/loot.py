"""Loot generation.

Each defeated actor rolls its own loot table independently: gold and
experience are separate ``floor(uniform(min, max + 1))`` draws, and every
item entry is its own Bernoulli trial. Duplicates across actors are kept
as separate entries.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from rpg_combat.core.config import RulesSettings
from rpg_combat.core.logging import get_logger
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.models.actors import Actor
from rpg_combat.models.loot import ValueRange


logger = get_logger(__name__)


@dataclass
class LootResult:
    """Rewards rolled over a set of defeated actors.

    Attributes:
        gold: Total gold.
        experience: Total experience.
        items: Dropped item ids, one entry per successful trial.
    """

    gold: int = 0
    experience: int = 0
    items: list[str] = field(default_factory=list)


class LootGenerator:
    """Rolls loot tables and the defeat penalty."""

    def __init__(self, rng: CombatRandom, rules: RulesSettings) -> None:
        self._rng = rng
        self._rules = rules

    def roll_range(self, value_range: ValueRange) -> int:
        """Integer uniformly drawn from an inclusive range."""
        value = math.floor(self._rng.uniform(value_range.min, value_range.max + 1))
        return max(value_range.min, min(value, value_range.max))

    def experience_factor(self, actor: Actor) -> float:
        """Experience multiplier for an actor spawned above or below its template level."""
        return 1.0 + self._rules.experience_level_bonus * (actor.level - actor.template_level)

    def roll(self, defeated: Iterable[Actor]) -> LootResult:
        """Roll every defeated actor's loot table.

        Args:
            defeated: Actors to roll for, in roster order.

        Returns:
            Summed gold and experience plus concatenated item drops.
        """
        result = LootResult()
        for actor in defeated:
            table = actor.loot_table
            gold = self.roll_range(table.gold)
            experience = math.floor(self.roll_range(table.experience) * self.experience_factor(actor))
            items = [entry.id for entry in table.items if self._rng.random() < entry.chance]

            result.gold += max(0, gold)
            result.experience += max(0, experience)
            result.items.extend(items)
            logger.debug(
                "Loot rolled",
                actor=actor.name,
                gold=gold,
                experience=experience,
                items=items,
            )
        return result

    def roll_item_loss(self, inventory: Mapping[str, int]) -> list[str]:
        """Roll the defeat penalty: each stack is lost independently.

        Returns:
            Ids of the stacks lost, in inventory order.
        """
        chance = self._rules.defeat_item_loss_chance
        lost = [
            item_id
            for item_id, quantity in inventory.items()
            if quantity > 0 and self._rng.random() < chance
        ]
        if lost:
            logger.info("Items lost on defeat", items=lost, chance=chance)
        return lost


__all__ = [
    "LootResult",
    "LootGenerator",
]
