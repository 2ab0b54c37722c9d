"""Player stat derivation and reward application.

``derive_stats`` turns a profile and its class into combat stats.
``apply_rewards`` folds a finished encounter's reward summary into a new
profile, handling level-ups. Both are pure: profiles are frozen and a new
one is returned.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rpg_combat.core.constants import (
    AGILITY_ATTACK_SCALE,
    CONSTITUTION_HEALTH_SCALE,
    EXPERIENCE_THRESHOLD_GROWTH,
    INTELLIGENCE_MAGIC_SCALE,
    INTELLIGENCE_MANA_SCALE,
    LEVEL_UP_HEALTH_RESTORE,
    STRENGTH_ATTACK_SCALE,
)
from rpg_combat.core.logging import get_logger
from rpg_combat.models.enums import Outcome
from rpg_combat.models.player import ClassDefinition, PlayerProfile
from rpg_combat.models.session import RewardSummary


logger = get_logger(__name__)


@dataclass(frozen=True)
class DerivedStats:
    """Combat stats derived from a profile.

    Attributes:
        max_health: Maximum health.
        max_mana: Maximum mana.
        attack: Physical attack.
        magic_attack: Magic attack.
        defense: Defense.
        attributes: Floored attribute values.
    """

    max_health: int
    max_mana: int
    attack: int
    magic_attack: int
    defense: int
    attributes: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ProgressionResult:
    """Outcome of applying a reward summary.

    Attributes:
        profile: The updated profile.
        levels_gained: Number of level-ups performed.
        items_added: Item ids added to the inventory.
        items_lost: Item ids whose stacks were removed.
    """

    profile: PlayerProfile
    levels_gained: int = 0
    items_added: tuple[str, ...] = ()
    items_lost: tuple[str, ...] = ()

    @property
    def leveled_up(self) -> bool:
        """Whether at least one level was gained."""
        return self.levels_gained > 0


def resolve_attributes(profile: PlayerProfile, class_def: ClassDefinition) -> dict[str, float]:
    """Profile attributes, falling back to the class base attributes."""
    attributes: dict[str, float] = {
        name: float(value) for name, value in class_def.base_attributes.model_dump().items()
    }
    if profile.attributes:
        attributes.update(profile.attributes)
    return attributes


def derive_stats(profile: PlayerProfile, class_def: ClassDefinition) -> DerivedStats:
    """Compute combat stats for a profile.

    Args:
        profile: The persisted stat block.
        class_def: The profile's class.

    Returns:
        Floored, non-negative derived stats.
    """
    attributes = resolve_attributes(profile, class_def)
    strength = attributes.get("strength", 0.0)
    agility = attributes.get("agility", 0.0)
    intelligence = attributes.get("intelligence", 0.0)
    constitution = attributes.get("constitution", 0.0)
    bonuses = profile.equipment
    growth_levels = profile.level - 1

    max_health = math.floor(
        class_def.base_health
        + class_def.health_growth * growth_levels
        + constitution * CONSTITUTION_HEALTH_SCALE
        + bonuses.health
    )
    max_mana = math.floor(
        class_def.base_mana
        + class_def.mana_growth * growth_levels
        + intelligence * INTELLIGENCE_MANA_SCALE
        + bonuses.mana
    )
    attack = (
        math.floor(strength * STRENGTH_ATTACK_SCALE)
        + math.floor(agility * AGILITY_ATTACK_SCALE)
        + bonuses.attack
    )
    magic_attack = math.floor(intelligence * INTELLIGENCE_MAGIC_SCALE) + bonuses.magic_attack

    return DerivedStats(
        max_health=max(1, max_health),
        max_mana=max(0, max_mana),
        attack=max(0, attack),
        magic_attack=max(0, magic_attack),
        defense=max(0, bonuses.defense),
        attributes={name: max(0, math.floor(value)) for name, value in attributes.items()},
    )


def _apply_inventory(
    inventory: dict[str, int],
    summary: RewardSummary,
) -> tuple[dict[str, int], tuple[str, ...]]:
    updated = dict(inventory)
    for item_id, quantity in summary.consumed_items.items():
        remaining = updated.get(item_id, 0) - quantity
        if remaining > 0:
            updated[item_id] = remaining
        else:
            updated.pop(item_id, None)

    lost = tuple(item_id for item_id in summary.lost_item_ids if updated.pop(item_id, None) is not None)

    for item_id in summary.loot_item_ids:
        updated[item_id] = updated.get(item_id, 0) + 1
    return updated, lost


def apply_rewards(
    profile: PlayerProfile,
    summary: RewardSummary,
    class_def: ClassDefinition,
) -> ProgressionResult:
    """Fold a reward summary into a new profile.

    Experience and gold are added (stolen gold subtracted, floor 0), loot
    is added to the inventory, lost and consumed items are removed, and
    the final health and mana are written back. A defeated player is
    carried back to town and recovers fully. Level-ups repeat while the
    experience reaches the threshold; each one carries the overflow,
    grows the threshold by x1.5, applies the class growth, restores some
    health and refills mana.

    Args:
        profile: Profile before the encounter.
        summary: Reward summary of the finished encounter.
        class_def: The profile's class.

    Returns:
        The updated profile with progression details.
    """
    inventory, lost = _apply_inventory(profile.inventory, summary)
    gold = max(0, profile.gold + summary.gold_gained - summary.gold_lost)

    health: int | None = summary.final_health
    mana: int | None = summary.final_mana
    if summary.outcome is Outcome.DEFEAT:
        health = None
        mana = None

    level = profile.level
    experience = profile.experience + summary.experience_gained
    threshold = profile.experience_to_next_level
    attributes = resolve_attributes(profile, class_def)
    growth = class_def.growth.model_dump()
    levels_gained = 0

    while experience >= threshold:
        experience -= threshold
        level += 1
        levels_gained += 1
        threshold = math.floor(threshold * EXPERIENCE_THRESHOLD_GROWTH)
        for name, gain in growth.items():
            attributes[name] = attributes.get(name, 0.0) + gain

    updated = profile.model_copy(
        update={
            "level": level,
            "experience": experience,
            "experience_to_next_level": threshold,
            "gold": gold,
            "attributes": attributes,
            "inventory": inventory,
            "health": health,
            "mana": mana,
        }
    )

    if levels_gained:
        stats = derive_stats(updated, class_def)
        current = stats.max_health if health is None else health
        updated = updated.model_copy(
            update={
                "health": min(stats.max_health, current + LEVEL_UP_HEALTH_RESTORE),
                "mana": None,
            }
        )
        logger.info(
            "Player leveled up",
            player=profile.name,
            level=level,
            levels_gained=levels_gained,
            next_threshold=threshold,
        )

    return ProgressionResult(
        profile=updated,
        levels_gained=levels_gained,
        items_added=summary.loot_item_ids,
        items_lost=lost,
    )


__all__ = [
    "DerivedStats",
    "ProgressionResult",
    "resolve_attributes",
    "derive_stats",
    "apply_rewards",
]
