"""Enemy and boss templates with their loot tables."""

from __future__ import annotations

from typing import Any


def _loot(
    gold: tuple[int, int],
    experience: tuple[int, int],
    *items: tuple[str, float],
) -> dict[str, Any]:
    """Build a loot table record from compact tuples."""
    return {
        "gold": {"min": gold[0], "max": gold[1]},
        "experience": {"min": experience[0], "max": experience[1]},
        "items": [{"id": item_id, "chance": chance} for item_id, chance in items],
    }


# =============================================================================
# Verdant Woods
# =============================================================================

FOREST_TEMPLATES: list[dict[str, Any]] = [
    {
        "id": "forest-goblin",
        "name": "Forest Goblin",
        "level": 1,
        "max_health": 25,
        "attack": 5,
        "defense": 2,
        "ability_ids": ["slash", "taunt"],
        "loot_table": _loot((5, 15), (10, 20), ("goblin-tooth", 0.3), ("crude-dagger", 0.1)),
    },
    {
        "id": "wolf",
        "name": "Wolf",
        "level": 2,
        "max_health": 35,
        "attack": 8,
        "defense": 3,
        "ability_ids": ["bite", "howl"],
        "loot_table": _loot((8, 20), (15, 25), ("wolf-pelt", 0.4), ("sharp-fang", 0.2)),
    },
    {
        "id": "forest-spider",
        "name": "Forest Spider",
        "level": 3,
        "max_health": 40,
        "attack": 7,
        "defense": 4,
        "ability_ids": ["poison-bite", "web"],
        "loot_table": _loot((10, 25), (20, 30), ("spider-silk", 0.5), ("venom-sac", 0.3)),
    },
    {
        "id": "forest-bandit",
        "name": "Forest Bandit",
        "level": 3,
        "max_health": 45,
        "attack": 9,
        "defense": 5,
        "ability_ids": ["slash", "steal", "quick-shot"],
        "loot_table": _loot(
            (15, 30),
            (25, 35),
            ("leather-scraps", 0.4),
            ("short-bow", 0.15),
            ("stolen-goods", 0.25),
        ),
    },
    {
        "id": "mushroom-creature",
        "name": "Myconid",
        "level": 2,
        "max_health": 30,
        "attack": 6,
        "defense": 7,
        "ability_ids": ["spore-cloud", "root-grab"],
        "loot_table": _loot((5, 15), (15, 25), ("glowing-spores", 0.6), ("healing-cap", 0.3)),
    },
]


# =============================================================================
# Crystal Caverns
# =============================================================================

CAVERN_TEMPLATES: list[dict[str, Any]] = [
    {
        "id": "cave-bat",
        "name": "Crystal Bat",
        "level": 4,
        "max_health": 30,
        "attack": 10,
        "defense": 3,
        "ability_ids": ["sonic-screech", "dive-attack"],
        "loot_table": _loot((10, 20), (20, 30), ("bat-wing", 0.5), ("echo-crystal", 0.2)),
    },
    {
        "id": "crystal-golem",
        "name": "Crystal Golem",
        "level": 6,
        "max_health": 80,
        "attack": 12,
        "defense": 10,
        "ability_ids": ["crystal-smash", "reflect-light", "harden"],
        "loot_table": _loot((30, 60), (50, 70), ("crystal-shard", 0.7), ("golem-core", 0.3)),
    },
    {
        "id": "miner-ghost",
        "name": "Spectral Miner",
        "level": 5,
        "max_health": 45,
        "attack": 15,
        "defense": 2,
        "ability_ids": ["ghostly-pickaxe", "terrifying-wail", "phase"],
        "loot_table": _loot(
            (40, 70),
            (40, 60),
            ("spectral-dust", 0.4),
            ("phantom-gem", 0.2),
            ("rusted-pickaxe", 0.3),
        ),
    },
]


# =============================================================================
# Bosses
# =============================================================================

BOSS_TEMPLATES: list[dict[str, Any]] = [
    {
        "id": "goblin-chief",
        "name": "Goblin Chief",
        "level": 5,
        "max_health": 100,
        "attack": 12,
        "defense": 8,
        "ability_ids": ["cleave", "rally", "throw-rock"],
        "loot_table": _loot(
            (50, 100),
            (100, 150),
            ("chieftain-club", 0.8),
            ("goblin-totem", 0.5),
            ("forest-key", 1.0),
        ),
        "is_boss": True,
    },
    {
        "id": "alpha-wolf",
        "name": "Alpha Wolf",
        "level": 7,
        "max_health": 120,
        "attack": 14,
        "defense": 7,
        "ability_ids": ["bite", "howl", "dive-attack"],
        "loot_table": _loot(
            (70, 120),
            (140, 190),
            ("alpha-pelt", 0.8),
            ("sharp-fang", 0.6),
            ("forest-key", 1.0),
        ),
        "is_boss": True,
    },
    {
        "id": "crystal-queen",
        "name": "Crystal Queen",
        "level": 8,
        "max_health": 150,
        "attack": 18,
        "defense": 12,
        "ability_ids": ["crystal-storm", "summon-shard", "blinding-light", "crystal-heal"],
        "loot_table": _loot(
            (100, 200),
            (200, 300),
            ("queen-crystal", 0.9),
            ("crown-shard", 0.6),
            ("cavern-key", 1.0),
        ),
        "is_boss": True,
    },
]


ACTOR_RECORDS: list[dict[str, Any]] = [
    *FOREST_TEMPLATES,
    *CAVERN_TEMPLATES,
    *BOSS_TEMPLATES,
]


__all__ = [
    "ACTOR_RECORDS",
    "FOREST_TEMPLATES",
    "CAVERN_TEMPLATES",
    "BOSS_TEMPLATES",
]
