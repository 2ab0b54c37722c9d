"""Ability table.

Records are plain dicts validated into AbilityDefinition when the catalog
is built. Identifiers must be unique across the whole table.
"""

from __future__ import annotations

from typing import Any


BASIC_ABILITIES: list[dict[str, Any]] = [
    {
        "id": "basic-attack",
        "name": "Attack",
        "kind": "attack",
        "damage_multiplier": 1.0,
        "description": "A plain weapon strike.",
    },
]


# =============================================================================
# Creature Abilities
# =============================================================================

CREATURE_ABILITIES: list[dict[str, Any]] = [
    {
        "id": "slash",
        "name": "Slash",
        "kind": "attack",
        "damage_multiplier": 1.0,
        "description": "A quick slash with a blade.",
    },
    {
        "id": "bite",
        "name": "Bite",
        "kind": "attack",
        "damage_multiplier": 1.2,
        "status_effect": {"type": "bleed", "chance": 0.3, "duration": 2},
        "description": "A vicious bite that may cause bleeding.",
    },
    {
        "id": "taunt",
        "name": "Taunt",
        "kind": "debuff",
        "stat_modifier": {"stat": "attack", "magnitude": -2, "duration": 2},
        "description": "Jeers that sap the target's attack.",
    },
    {
        "id": "howl",
        "name": "Howl",
        "kind": "buff",
        "stat_modifier": {"stat": "attack", "magnitude": 3, "duration": 2},
        "description": "A howl that raises the user's attack.",
    },
    {
        "id": "poison-bite",
        "name": "Poison Bite",
        "kind": "attack",
        "damage_multiplier": 0.8,
        "status_effect": {"type": "poison", "chance": 0.5, "duration": 3, "damage": 3},
        "description": "A venomous bite.",
    },
    {
        "id": "web",
        "name": "Web",
        "kind": "debuff",
        "stat_modifier": {"stat": "agility", "magnitude": -5, "duration": 2},
        "status_effect": {"type": "immobilize", "chance": 0.3, "duration": 1},
        "description": "Sticky silk that slows and may pin the target.",
    },
    {
        "id": "steal",
        "name": "Steal",
        "kind": "special",
        "steal": {"chance": 0.5, "gold": {"min": 5, "max": 15}},
        "description": "Attempts to lift some gold.",
    },
    {
        "id": "quick-shot",
        "name": "Quick Shot",
        "kind": "attack",
        "damage_multiplier": 0.8,
        "priority": True,
        "description": "A hasty shot that always goes first.",
    },
    {
        "id": "spore-cloud",
        "name": "Spore Cloud",
        "kind": "attack",
        "damage_multiplier": 0.7,
        "area_effect": True,
        "status_effect": {"type": "poison", "chance": 0.7, "duration": 3, "damage": 2},
        "description": "Releases a cloud of poisonous spores.",
    },
    {
        "id": "root-grab",
        "name": "Root Grab",
        "kind": "attack",
        "damage_multiplier": 0.9,
        "status_effect": {"type": "immobilize", "chance": 0.6, "duration": 2},
        "description": "Roots burst from the ground to hold the target.",
    },
    {
        "id": "sonic-screech",
        "name": "Sonic Screech",
        "kind": "debuff",
        "area_effect": True,
        "stat_modifier": {"stat": "defense", "magnitude": -3, "duration": 2},
        "description": "A piercing screech that weakens defenses.",
    },
    {
        "id": "dive-attack",
        "name": "Dive Attack",
        "kind": "attack",
        "damage_multiplier": 1.3,
        "cooldown": 2,
        "description": "A swooping strike from above.",
    },
    {
        "id": "crystal-smash",
        "name": "Crystal Smash",
        "kind": "attack",
        "damage_multiplier": 1.5,
        "cooldown": 3,
        "description": "A crushing blow with crystalline fists.",
    },
    {
        "id": "reflect-light",
        "name": "Reflect Light",
        "kind": "special",
        "reflect": {"chance": 0.7, "fraction": 0.3, "duration": 2},
        "description": "Mirrored facets turn part of each hit back on the attacker.",
    },
    {
        "id": "harden",
        "name": "Harden",
        "kind": "buff",
        "stat_modifier": {"stat": "defense", "magnitude": 5, "duration": 3},
        "description": "Hardens the body to raise defense.",
    },
    {
        "id": "ghostly-pickaxe",
        "name": "Ghostly Pickaxe",
        "kind": "attack",
        "damage_multiplier": 1.2,
        "armor_piercing": 0.3,
        "description": "A spectral swing that passes partly through armor.",
    },
    {
        "id": "terrifying-wail",
        "name": "Terrifying Wail",
        "kind": "debuff",
        "stat_modifier": {"stat": "attack", "magnitude": -4, "duration": 2},
        "status_effect": {"type": "fear", "chance": 0.4, "duration": 1},
        "description": "A wail that weakens and may terrify the target.",
    },
    {
        "id": "phase",
        "name": "Phase",
        "kind": "special",
        "dodge": {"chance": 1.0, "duration": 1},
        "cooldown": 4,
        "description": "Becomes incorporeal, evading the next attacks.",
    },
]


# =============================================================================
# Boss Abilities
# =============================================================================

BOSS_ABILITIES: list[dict[str, Any]] = [
    {
        "id": "cleave",
        "name": "Cleave",
        "kind": "attack",
        "damage_multiplier": 1.3,
        "area_effect": True,
        "description": "A wide swing that hits every opponent.",
    },
    {
        "id": "rally",
        "name": "Rally",
        "kind": "summon",
        "summon": {"actor_template_id": "forest-goblin", "count": {"min": 1, "max": 2}},
        "cooldown": 4,
        "description": "Calls goblin reinforcements.",
    },
    {
        "id": "throw-rock",
        "name": "Throw Rock",
        "kind": "attack",
        "damage_multiplier": 1.1,
        "status_effect": {"type": "stun", "chance": 0.3, "duration": 1},
        "description": "A thrown rock that may stun.",
    },
    {
        "id": "crystal-storm",
        "name": "Crystal Storm",
        "kind": "attack",
        "damage_multiplier": 1.4,
        "area_effect": True,
        "status_effect": {"type": "bleed", "chance": 0.5, "duration": 2},
        "cooldown": 3,
        "description": "A storm of razor shards.",
    },
    {
        "id": "summon-shard",
        "name": "Summon Shard",
        "kind": "summon",
        "summon": {"actor_template_id": "crystal-golem", "count": {"min": 1, "max": 1}},
        "cooldown": 5,
        "description": "Animates a crystal golem.",
    },
    {
        "id": "blinding-light",
        "name": "Blinding Light",
        "kind": "debuff",
        "area_effect": True,
        "stat_modifier": {"stat": "accuracy", "magnitude": -50, "duration": 2},
        "cooldown": 4,
        "description": "A flash that makes the target's attacks go wide.",
    },
    {
        "id": "crystal-heal",
        "name": "Crystal Heal",
        "kind": "heal",
        "heal": {"percent_of_max": 0.2},
        "cooldown": 3,
        "description": "Regrows crystal to restore health.",
    },
]


# =============================================================================
# Player Class Abilities
# =============================================================================

PLAYER_ABILITIES: list[dict[str, Any]] = [
    # Warrior
    {
        "id": "sweeping-cleave",
        "name": "Cleave",
        "kind": "attack",
        "damage_multiplier": 1.3,
        "area_effect": True,
        "mana_cost": 15,
        "description": "A powerful swing that hits every enemy.",
    },
    {
        "id": "shield-bash",
        "name": "Shield Bash",
        "kind": "attack",
        "damage_multiplier": 0.8,
        "status_effect": {"type": "stun", "chance": 0.6, "duration": 1},
        "mana_cost": 20,
        "description": "Bash with a shield, possibly stunning.",
    },
    {
        "id": "battle-cry",
        "name": "Battle Cry",
        "kind": "buff",
        "stat_modifier": {"stat": "attack", "magnitude": 5, "duration": 3},
        "mana_cost": 25,
        "description": "A rousing shout that raises attack.",
    },
    {
        "id": "iron-skin",
        "name": "Iron Skin",
        "kind": "passive_buff",
        "stat_modifier": {"stat": "defense", "magnitude": 2},
        "description": "Permanently toughened skin.",
    },
    # Mage
    {
        "id": "fireball",
        "name": "Fireball",
        "kind": "attack",
        "damage_multiplier": 1.5,
        "scaling_stat": "magic_attack",
        "status_effect": {"type": "burn", "chance": 0.4, "duration": 2, "damage": 3},
        "mana_cost": 20,
        "description": "A ball of fire that may burn.",
    },
    {
        "id": "ice-spike",
        "name": "Ice Spike",
        "kind": "attack",
        "damage_multiplier": 1.2,
        "scaling_stat": "magic_attack",
        "status_effect": {"type": "freeze", "chance": 0.3, "duration": 1},
        "mana_cost": 15,
        "description": "A spike of ice that may freeze.",
    },
    {
        "id": "arcane-missiles",
        "name": "Arcane Missiles",
        "kind": "attack",
        "damage_multiplier": 0.5,
        "scaling_stat": "magic_attack",
        "hits": 3,
        "mana_cost": 25,
        "description": "Three bolts of arcane energy.",
    },
    # Rogue
    {
        "id": "backstab",
        "name": "Backstab",
        "kind": "attack",
        "damage_multiplier": 2.0,
        "crit_chance": 0.3,
        "crit_multiplier": 1.5,
        "mana_cost": 15,
        "description": "A precise strike with a high critical chance.",
    },
    {
        "id": "poison-strike",
        "name": "Poison Strike",
        "kind": "attack",
        "damage_multiplier": 0.8,
        "status_effect": {"type": "poison", "chance": 0.8, "duration": 3, "damage": 5},
        "mana_cost": 20,
        "description": "A coated blade that poisons.",
    },
    {
        "id": "shadow-step",
        "name": "Shadow Step",
        "kind": "special",
        "dodge": {"chance": 0.5, "duration": 2},
        "mana_cost": 25,
        "description": "Melts into shadow, dodging attacks.",
    },
    # Cleric
    {
        "id": "smite",
        "name": "Smite",
        "kind": "attack",
        "damage_multiplier": 1.3,
        "scaling_stat": "magic_attack",
        "mana_cost": 15,
        "description": "Holy damage.",
    },
    {
        "id": "healing-word",
        "name": "Healing Word",
        "kind": "heal",
        "heal": {"base_amount": 30, "scaling_attribute": "wisdom", "scaling_factor": 0.7},
        "mana_cost": 20,
        "description": "Restores health.",
    },
    {
        "id": "divine-protection",
        "name": "Divine Protection",
        "kind": "buff",
        "stat_modifier": {"stat": "defense", "magnitude": 10, "duration": 3},
        "mana_cost": 25,
        "description": "A holy ward that raises defense.",
    },
    # Ranger
    {
        "id": "aimed-shot",
        "name": "Aimed Shot",
        "kind": "attack",
        "damage_multiplier": 1.4,
        "armor_piercing": 0.5,
        "cooldown": 2,
        "mana_cost": 15,
        "description": "A careful shot that finds gaps in armor.",
    },
    {
        "id": "volley",
        "name": "Volley",
        "kind": "attack",
        "damage_multiplier": 0.6,
        "area_effect": True,
        "hits": 2,
        "mana_cost": 20,
        "description": "Two quick arrows at every enemy.",
    },
    {
        "id": "second-wind",
        "name": "Second Wind",
        "kind": "passive_heal",
        "heal": {"base_amount": 2},
        "description": "Recovers a little health every turn.",
    },
    # Bard
    {
        "id": "dissonant-chord",
        "name": "Dissonant Chord",
        "kind": "debuff",
        "area_effect": True,
        "stat_modifier": {"stat": "attack", "magnitude": -3, "duration": 2},
        "mana_cost": 15,
        "description": "A jarring chord that weakens every enemy.",
    },
    {
        "id": "inspiring-tune",
        "name": "Inspiring Tune",
        "kind": "buff",
        "stat_modifier": {"stat": "magic_attack", "magnitude": 4, "duration": 3},
        "mana_cost": 20,
        "description": "A melody that sharpens spellcasting.",
    },
    {
        "id": "siphon-song",
        "name": "Siphon Song",
        "kind": "attack_heal",
        "damage_multiplier": 1.1,
        "scaling_stat": "magic_attack",
        "heal": {"lifesteal": 0.5},
        "cooldown": 2,
        "mana_cost": 20,
        "description": "Draws life from the target.",
    },
]


ABILITY_RECORDS: list[dict[str, Any]] = [
    *BASIC_ABILITIES,
    *CREATURE_ABILITIES,
    *BOSS_ABILITIES,
    *PLAYER_ABILITIES,
]


__all__ = [
    "ABILITY_RECORDS",
    "BASIC_ABILITIES",
    "CREATURE_ABILITIES",
    "BOSS_ABILITIES",
    "PLAYER_ABILITIES",
]
