"""Encounter roster generation.

Non-boss rosters draw templates uniformly from the zone's eligible pool
at the given zone level and jitter each actor's level by up to one. Boss
rosters hold exactly the zone's boss for that level with boss scaling.
Unknown zones and empty pools fall back to synthesized placeholders.
"""

from __future__ import annotations

import math

from rpg_combat.core.config import EncounterSettings
from rpg_combat.core.constants import LEVEL_JITTER_DIVISOR, MAX_LEVEL_JITTER
from rpg_combat.core.logging import get_logger
from rpg_combat.engine.actors import ActorFactory
from rpg_combat.engine.catalog import ZoneCatalog
from rpg_combat.engine.rng import CombatRandom
from rpg_combat.models.actors import Actor


logger = get_logger(__name__)


def level_variance(zone_level: int) -> int:
    """Jitter width: ``clamp(floor(zone_level / 4), 0, 1)``."""
    return max(0, min(MAX_LEVEL_JITTER, math.floor(zone_level / LEVEL_JITTER_DIVISOR)))


class EncounterFactory:
    """Builds hostile rosters for a zone and level."""

    def __init__(
        self,
        actor_factory: ActorFactory,
        zones: ZoneCatalog,
        rng: CombatRandom,
        settings: EncounterSettings,
    ) -> None:
        self._actors = actor_factory
        self._zones = zones
        self._rng = rng
        self._settings = settings

    def build(
        self,
        zone_id: str,
        zone_level: int,
        count: int | None = None,
        is_boss: bool = False,
    ) -> list[Actor]:
        """Assemble a hostile roster.

        Args:
            zone_id: Zone to draw from.
            zone_level: Level selecting the eligible bands.
            count: Number of hostiles; drawn from the configured group
                size when None. Ignored for bosses.
            is_boss: Build a single boss instead.

        Returns:
            The roster in acting order.
        """
        zone_level = max(1, zone_level)
        if is_boss:
            return [self._build_boss(zone_id, zone_level)]

        if count is None:
            count = self._rng.randint(self._settings.min_group_size, self._settings.max_group_size)
        count = max(1, min(count, self._settings.max_hostiles))

        zone = self._zones.get(zone_id)
        pool = zone.eligible_templates(zone_level) if zone else []
        if not pool:
            logger.warning("No eligible templates, using placeholders", zone_id=zone_id, zone_level=zone_level)

        variance = level_variance(zone_level)
        roster: list[Actor] = []
        for _ in range(count):
            actor: Actor | None = None
            if pool:
                template_id = self._rng.choice(pool)
                level_modifier = self._rng.randint(-variance, variance)
                actor = self._actors.instantiate(template_id, level_modifier)
            if actor is None:
                actor = self._actors.create_default(zone_level + self._rng.randint(-variance, variance))
            roster.append(actor)

        logger.info(
            "Encounter roster built",
            zone_id=zone_id,
            zone_level=zone_level,
            hostiles=[actor.template_id for actor in roster],
        )
        return roster

    def _build_boss(self, zone_id: str, zone_level: int) -> Actor:
        zone = self._zones.get(zone_id)
        template_id = zone.boss_for(zone_level) if zone else None
        boss = self._actors.instantiate_boss(template_id) if template_id else None
        if boss is None:
            logger.warning("No boss template, using placeholder", zone_id=zone_id, zone_level=zone_level)
            boss = self._actors.create_default(zone_level, boss=True)
        logger.info("Boss encounter built", zone_id=zone_id, boss=boss.template_id, level=boss.level)
        return boss


__all__ = [
    "level_variance",
    "EncounterFactory",
]
