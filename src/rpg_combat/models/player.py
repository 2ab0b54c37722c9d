"""Player-side models: class definitions, the persisted profile, items.

The PlayerProfile is the stat block the surrounding game persists between
encounters. The engine reads it at encounter start and returns a reward
summary that ``apply_rewards`` folds back into a new profile; the engine
itself never stores it.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field

from rpg_combat.core.constants import BASE_EXPERIENCE_TO_LEVEL, STARTING_GOLD
from rpg_combat.models.enums import ResourceType


NonNegativeInt = Annotated[int, Field(ge=0)]


# =============================================================================
# Attributes
# =============================================================================


class Attributes(BaseModel):
    """Raw character attributes feeding the derived combat stats."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: NonNegativeInt = 10
    agility: NonNegativeInt = 10
    intelligence: NonNegativeInt = 10
    constitution: NonNegativeInt = 10
    wisdom: NonNegativeInt = 10


class AttributeGrowth(BaseModel):
    """Attribute gain per level; fractional growth accumulates as floats."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: float = 0.0
    agility: float = 0.0
    intelligence: float = 0.0
    constitution: float = 0.0
    wisdom: float = 0.0


class EquipmentBonuses(BaseModel):
    """Flat bonuses granted by equipped items."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    attack: NonNegativeInt = 0
    defense: NonNegativeInt = 0
    magic_attack: NonNegativeInt = 0
    health: NonNegativeInt = 0
    mana: NonNegativeInt = 0


# =============================================================================
# Class Definition
# =============================================================================


class ClassDefinition(BaseModel):
    """Static player class record.

    Attributes:
        id: Class identifier (warrior, mage, ...).
        name: Display name.
        primary_attribute: Attribute the class leans on.
        base_attributes: Attributes at level 1.
        growth: Attribute gain per level.
        base_health: Health before constitution at level 1.
        health_growth: Health gained per level.
        base_mana: Mana before intelligence at level 1.
        mana_growth: Mana gained per level.
        ability_ids: Abilities every member of the class knows.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    primary_attribute: str = "strength"
    base_attributes: Attributes = Field(default_factory=Attributes)
    growth: AttributeGrowth = Field(default_factory=AttributeGrowth)
    base_health: NonNegativeInt
    health_growth: NonNegativeInt
    base_mana: NonNegativeInt
    mana_growth: NonNegativeInt
    ability_ids: tuple[str, ...] = ()


# =============================================================================
# Profile
# =============================================================================


class PlayerProfile(BaseModel):
    """Persisted player stat block.

    ``health`` and ``mana`` of None mean the pool is full. Attributes are
    stored as floats so fractional class growth is not lost between
    level-ups; formulas floor them when they are used.

    Example:
        >>> profile = PlayerProfile(name="Aria", class_id="warrior")
        >>> profile.experience_to_next_level
        100
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    class_id: str = Field(min_length=1)
    level: Annotated[int, Field(ge=1)] = 1
    experience: NonNegativeInt = 0
    experience_to_next_level: Annotated[int, Field(ge=1)] = BASE_EXPERIENCE_TO_LEVEL
    gold: NonNegativeInt = STARTING_GOLD
    attributes: dict[str, float] | None = Field(
        default=None,
        description="Attribute values; None uses the class base attributes",
    )
    health: NonNegativeInt | None = None
    mana: NonNegativeInt | None = None
    inventory: dict[str, int] = Field(default_factory=dict)
    equipment: EquipmentBonuses = Field(default_factory=EquipmentBonuses)
    ability_ids: tuple[str, ...] = ()

    @computed_field(description="Total number of items carried")
    @property
    def item_count(self) -> int:
        """Total quantity across inventory stacks."""
        return sum(self.inventory.values())


# =============================================================================
# Consumables
# =============================================================================


class ItemDefinition(BaseModel):
    """Consumable usable during combat."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    restores: ResourceType
    amount: Annotated[int, Field(ge=1)]


__all__ = [
    "Attributes",
    "AttributeGrowth",
    "EquipmentBonuses",
    "ClassDefinition",
    "PlayerProfile",
    "ItemDefinition",
]
