"""Player class table.

Base attributes are listed as strength/agility/intelligence/constitution;
wisdom starts at 10 for every class.
"""

from __future__ import annotations

from typing import Any


def _attributes(strength: float, agility: float, intelligence: float, constitution: float) -> dict[str, float]:
    return {
        "strength": strength,
        "agility": agility,
        "intelligence": intelligence,
        "constitution": constitution,
    }


CLASS_RECORDS: list[dict[str, Any]] = [
    {
        "id": "warrior",
        "name": "Warrior",
        "primary_attribute": "strength",
        "base_attributes": _attributes(12, 8, 8, 12),
        "growth": _attributes(2.5, 0.5, 0.5, 1.5),
        "base_health": 40,
        "health_growth": 10,
        "base_mana": 30,
        "mana_growth": 2,
        "ability_ids": ["sweeping-cleave", "shield-bash", "battle-cry", "iron-skin"],
    },
    {
        "id": "mage",
        "name": "Mage",
        "primary_attribute": "intelligence",
        "base_attributes": _attributes(10, 10, 12, 8),
        "growth": _attributes(0.5, 1, 3, 0.5),
        "base_health": 60,
        "health_growth": 6,
        "base_mana": 100,
        "mana_growth": 10,
        "ability_ids": ["fireball", "ice-spike", "arcane-missiles"],
    },
    {
        "id": "rogue",
        "name": "Rogue",
        "primary_attribute": "agility",
        "base_attributes": _attributes(10, 12, 10, 8),
        "growth": _attributes(1, 2, 1, 1),
        "base_health": 60,
        "health_growth": 8,
        "base_mana": 40,
        "mana_growth": 3,
        "ability_ids": ["backstab", "poison-strike", "shadow-step"],
    },
    {
        "id": "cleric",
        "name": "Cleric",
        "primary_attribute": "intelligence",
        "base_attributes": _attributes(10, 10, 10, 10),
        "growth": _attributes(1.5, 1, 1.5, 1),
        "base_health": 50,
        "health_growth": 8,
        "base_mana": 80,
        "mana_growth": 6,
        "ability_ids": ["smite", "healing-word", "divine-protection"],
    },
    {
        "id": "ranger",
        "name": "Ranger",
        "primary_attribute": "agility",
        "base_attributes": _attributes(10, 12, 10, 8),
        "growth": _attributes(1, 2, 1.5, 0.5),
        "base_health": 60,
        "health_growth": 8,
        "base_mana": 45,
        "mana_growth": 3,
        "ability_ids": ["aimed-shot", "volley", "second-wind"],
    },
    {
        "id": "bard",
        "name": "Bard",
        "primary_attribute": "intelligence",
        "base_attributes": _attributes(10, 10, 10, 10),
        "growth": _attributes(1, 1.5, 2, 0.5),
        "base_health": 50,
        "health_growth": 8,
        "base_mana": 70,
        "mana_growth": 5,
        "ability_ids": ["dissonant-chord", "inspiring-tune", "siphon-song"],
    },
]


__all__ = ["CLASS_RECORDS"]
