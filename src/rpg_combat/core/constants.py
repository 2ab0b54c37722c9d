"""Fixed combat formula constants.

Values that are part of the rules themselves live here. Values a game
designer may want to tune live in :mod:`rpg_combat.core.config`.
"""

from __future__ import annotations

# =============================================================================
# Damage Formula
# =============================================================================

MIN_DAMAGE = 1
"""Smallest damage a connecting hit can deal after mitigation."""

DEFENDING_DAMAGE_FACTOR = 0.5
"""Multiplier applied to damage against a defending actor."""

REFLECT_ABILITY_ID = "reflect"
"""Identifier of the synthetic ability used for reflected damage."""

BASIC_ATTACK_ID = "basic-attack"
"""Identifier of the fallback ability every actor can always use."""

# =============================================================================
# Status Effects
# =============================================================================

BLEED_HEALTH_FRACTION = 0.05
"""Fraction of max health lost per bleed tick (rounded up)."""

DOT_HEALTH_FRACTION = 0.05
"""Fraction of max health lost per poison/burn tick without flat damage."""

# =============================================================================
# Boss Scaling
# =============================================================================

BOSS_LEVEL_BONUS = 2
"""Levels added to a boss on instantiation."""

BOSS_HEALTH_MULTIPLIER = 1.5
"""Max health multiplier for bosses."""

BOSS_ATTACK_MULTIPLIER = 1.2
"""Attack multiplier for bosses."""

# =============================================================================
# Encounter Generation
# =============================================================================

LEVEL_JITTER_DIVISOR = 4
"""Zone level divisor for the level jitter width."""

MAX_LEVEL_JITTER = 1
"""Largest level modifier applied by jitter."""

# =============================================================================
# Player Progression
# =============================================================================

STRENGTH_ATTACK_SCALE = 0.8
"""Attack gained per point of strength."""

AGILITY_ATTACK_SCALE = 0.4
"""Attack gained per point of agility."""

INTELLIGENCE_MAGIC_SCALE = 1.5
"""Magic attack gained per point of intelligence."""

INTELLIGENCE_MANA_SCALE = 0.75
"""Max mana gained per point of intelligence."""

CONSTITUTION_HEALTH_SCALE = 5
"""Max health gained per point of constitution."""

BASE_EXPERIENCE_TO_LEVEL = 100
"""Experience needed to reach level 2."""

EXPERIENCE_THRESHOLD_GROWTH = 1.5
"""Multiplier applied to the experience threshold at every level-up."""

LEVEL_UP_HEALTH_RESTORE = 10
"""Health restored on level-up."""

STARTING_GOLD = 50
"""Gold carried by a freshly created character."""


__all__ = [
    "MIN_DAMAGE",
    "DEFENDING_DAMAGE_FACTOR",
    "REFLECT_ABILITY_ID",
    "BASIC_ATTACK_ID",
    "BLEED_HEALTH_FRACTION",
    "DOT_HEALTH_FRACTION",
    "BOSS_LEVEL_BONUS",
    "BOSS_HEALTH_MULTIPLIER",
    "BOSS_ATTACK_MULTIPLIER",
    "LEVEL_JITTER_DIVISOR",
    "MAX_LEVEL_JITTER",
    "STRENGTH_ATTACK_SCALE",
    "AGILITY_ATTACK_SCALE",
    "INTELLIGENCE_MAGIC_SCALE",
    "INTELLIGENCE_MANA_SCALE",
    "CONSTITUTION_HEALTH_SCALE",
    "BASE_EXPERIENCE_TO_LEVEL",
    "EXPERIENCE_THRESHOLD_GROWTH",
    "LEVEL_UP_HEALTH_RESTORE",
    "STARTING_GOLD",
]
