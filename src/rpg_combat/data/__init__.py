"""Bundled static game data as plain records.

The records are validated into models by the registries in
:mod:`rpg_combat.engine.catalog`.
"""

from __future__ import annotations

from rpg_combat.data.abilities import ABILITY_RECORDS
from rpg_combat.data.actors import ACTOR_RECORDS
from rpg_combat.data.classes import CLASS_RECORDS
from rpg_combat.data.items import ITEM_RECORDS
from rpg_combat.data.zones import ZONE_RECORDS


__all__ = [
    "ABILITY_RECORDS",
    "ACTOR_RECORDS",
    "CLASS_RECORDS",
    "ITEM_RECORDS",
    "ZONE_RECORDS",
]
