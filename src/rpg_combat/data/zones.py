"""Zone table: spawn bands and boss tiers."""

from __future__ import annotations

from typing import Any


ZONE_RECORDS: list[dict[str, Any]] = [
    {
        "id": "verdant-woods",
        "name": "Verdant Woods",
        "min_level": 1,
        "max_level": 10,
        "difficulty": "Easy",
        "bands": [
            {
                "min_level": 1,
                "template_ids": ["forest-goblin", "wolf", "forest-spider", "mushroom-creature"],
            },
            {"min_level": 4, "template_ids": ["forest-bandit"]},
        ],
        "bosses": [
            {"min_level": 1, "template_id": "goblin-chief"},
            {"min_level": 6, "template_id": "alpha-wolf"},
        ],
    },
    {
        "id": "crystal-caverns",
        "name": "Crystal Caverns",
        "min_level": 10,
        "max_level": 20,
        "difficulty": "Challenging",
        "bands": [
            {"min_level": 1, "template_ids": ["cave-bat", "miner-ghost"]},
            {"min_level": 14, "template_ids": ["crystal-golem"]},
        ],
        "bosses": [
            {"min_level": 1, "template_id": "crystal-queen"},
        ],
    },
]


__all__ = ["ZONE_RECORDS"]
