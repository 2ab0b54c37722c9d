"""Actor construction.

Enemies are built from templates at their base stats: level only changes
the displayed level and reward scaling, never health or attack. Bosses get
a fixed post-scale on top of that. The player actor is derived from the
persisted profile and its class definition.
"""

from __future__ import annotations

import math

from rpg_combat.core.constants import (
    BOSS_ATTACK_MULTIPLIER,
    BOSS_HEALTH_MULTIPLIER,
    BOSS_LEVEL_BONUS,
)
from rpg_combat.core.logging import get_logger
from rpg_combat.engine.catalog import AbilityCatalog, ActorCatalog
from rpg_combat.engine.progression import derive_stats
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.engine.status import StatusEffectEngine
from rpg_combat.models.actors import AbilitySlot, Actor, ActorTemplate
from rpg_combat.models.loot import LootTable, ValueRange
from rpg_combat.models.player import ClassDefinition, PlayerProfile


logger = get_logger(__name__)

DEFAULT_ENEMY_TYPES = ("Wolf", "Bandit", "Spider", "Goblin")
DEFAULT_BOSS_TYPES = ("Alpha Wolf", "Bandit Chief", "Spider Queen", "Goblin King")
DEFAULT_TEMPLATE_ID = "default-enemy"
DEFAULT_BOSS_TEMPLATE_ID = "default-boss"
DEFAULT_ENEMY_ABILITY = "slash"


class ActorFactory:
    """Builds runtime actors from templates, placeholders and profiles.

    Attributes:
        abilities: Catalog used to resolve ability ids.
        templates: Catalog of actor templates.
    """

    def __init__(
        self,
        abilities: AbilityCatalog,
        templates: ActorCatalog,
        status_engine: StatusEffectEngine,
        rng: CombatRandom,
    ) -> None:
        self.abilities = abilities
        self.templates = templates
        self._status = status_engine
        self._rng = rng

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    def instantiate(self, template_id: str, level_modifier: int = 0) -> Actor | None:
        """Spawn an actor from a template at base stats.

        Args:
            template_id: Template to spawn.
            level_modifier: Added to the template level, floored at 1.

        Returns:
            The new actor, or None for an unknown template.
        """
        template = self.templates.get(template_id)
        if template is None:
            return None
        return self.from_template(template, level_modifier)

    def instantiate_boss(self, template_id: str, level_modifier: int = 0) -> Actor | None:
        """Spawn an actor and apply the boss post-scale."""
        actor = self.instantiate(template_id, level_modifier)
        if actor is None:
            return None
        return self.apply_boss_scaling(actor)

    def from_template(self, template: ActorTemplate, level_modifier: int = 0) -> Actor:
        """Spawn an actor from an already resolved template."""
        actor = Actor(
            name=template.name,
            template_id=template.id,
            template_level=template.level,
            level=max(1, template.level + level_modifier),
            is_boss=template.is_boss,
            max_health=template.max_health,
            health=template.max_health,
            base_attack=template.attack,
            base_defense=template.defense,
            base_magic_attack=template.magic_attack,
            current_attack=template.attack,
            current_defense=template.defense,
            current_magic_attack=template.magic_attack,
            loot_table=template.loot_table,
        )
        self._equip(actor, template.ability_ids)
        logger.debug(
            "Actor instantiated",
            template_id=template.id,
            level=actor.level,
            abilities=[slot.ability_id for slot in actor.abilities],
        )
        return actor

    @staticmethod
    def apply_boss_scaling(actor: Actor) -> Actor:
        """Apply the fixed boss post-scale in place.

        +2 level, x1.5 max health with health reset to the new max, and
        x1.2 attack (floored).
        """
        actor.is_boss = True
        actor.level += BOSS_LEVEL_BONUS
        actor.max_health = math.floor(actor.max_health * BOSS_HEALTH_MULTIPLIER)
        actor.health = actor.max_health
        actor.base_attack = math.floor(actor.base_attack * BOSS_ATTACK_MULTIPLIER)
        actor.recompute_stats()
        return actor

    # -------------------------------------------------------------------------
    # Placeholders
    # -------------------------------------------------------------------------

    def create_default(self, level: int, *, boss: bool = False) -> Actor:
        """Synthesize a placeholder hostile scaled only by level.

        Used when a zone is unknown or has nothing eligible, so an
        encounter can always start.
        """
        level = max(1, level)
        if boss:
            boss_level = level + BOSS_LEVEL_BONUS
            creature = self._rng.choice(DEFAULT_BOSS_TYPES)
            template = ActorTemplate(
                id=DEFAULT_BOSS_TEMPLATE_ID,
                name=creature,
                level=boss_level,
                max_health=50 + boss_level * 10,
                attack=8 + boss_level * 2,
                defense=4,
                ability_ids=(DEFAULT_ENEMY_ABILITY,),
                loot_table=LootTable(
                    gold=ValueRange(min=boss_level * 10, max=boss_level * 20),
                    experience=ValueRange(min=boss_level * 20, max=boss_level * 30),
                ),
                is_boss=True,
            )
        else:
            creature = self._rng.choice(DEFAULT_ENEMY_TYPES)
            template = ActorTemplate(
                id=DEFAULT_TEMPLATE_ID,
                name=f"Forest {creature}",
                level=level,
                max_health=20 + level * 5,
                attack=5 + level,
                defense=2,
                ability_ids=(DEFAULT_ENEMY_ABILITY,),
                loot_table=LootTable(
                    gold=ValueRange(min=level * 2, max=level * 5),
                    experience=ValueRange(min=level * 5, max=level * 10),
                ),
            )
        logger.info("Default actor synthesized", name=template.name, level=template.level, boss=boss)
        return self.from_template(template)

    # -------------------------------------------------------------------------
    # Player
    # -------------------------------------------------------------------------

    def create_player(self, profile: PlayerProfile, class_def: ClassDefinition) -> Actor:
        """Build the player's actor from the persisted profile.

        Health and mana come from the profile when stored, else full.
        Class abilities come first, followed by profile extras.
        """
        stats = derive_stats(profile, class_def)
        health = stats.max_health if profile.health is None else min(profile.health, stats.max_health)
        mana = stats.max_mana if profile.mana is None else min(profile.mana, stats.max_mana)
        actor = Actor(
            name=profile.name,
            template_id=class_def.id,
            level=profile.level,
            is_player=True,
            max_health=stats.max_health,
            health=health,
            max_mana=stats.max_mana,
            mana=mana,
            base_attack=stats.attack,
            base_defense=stats.defense,
            base_magic_attack=stats.magic_attack,
            current_attack=stats.attack,
            current_defense=stats.defense,
            current_magic_attack=stats.magic_attack,
            attributes=stats.attributes,
        )
        ability_ids = list(class_def.ability_ids)
        ability_ids.extend(aid for aid in profile.ability_ids if aid not in ability_ids)
        self._equip(actor, ability_ids)
        return actor

    def _equip(self, actor: Actor, ability_ids: tuple[str, ...] | list[str]) -> None:
        """Resolve ability ids into slots; apply passives as permanent effects."""
        for ability_id in ability_ids:
            definition = self.abilities.get(ability_id)
            if definition is None:
                logger.warning("Skipping unknown ability", actor=actor.name, ability_id=ability_id)
                continue
            actor.abilities.append(AbilitySlot.from_definition(definition))
            if definition.is_passive:
                self._status.apply_passive(actor, definition)


__all__ = [
    "ActorFactory",
    "DEFAULT_TEMPLATE_ID",
    "DEFAULT_BOSS_TEMPLATE_ID",
]
