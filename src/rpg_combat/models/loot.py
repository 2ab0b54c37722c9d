"""Loot table models.

A loot table rolls gold and experience from inclusive integer ranges and
runs one independent Bernoulli trial per item entry.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator


Chance = Annotated[float, Field(ge=0.0, le=1.0, description="Probability in [0, 1]")]


class ValueRange(BaseModel):
    """Inclusive integer range ``[min, max]``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min: Annotated[int, Field(ge=0, description="Lower bound (inclusive)")] = 0
    max: Annotated[int, Field(ge=0, description="Upper bound (inclusive)")] = 0

    @model_validator(mode="after")
    def validate_order(self) -> "ValueRange":
        """Ensure min does not exceed max."""
        if self.min > self.max:
            msg = f"Range minimum {self.min} exceeds maximum {self.max}"
            raise ValueError(msg)
        return self


class ItemDrop(BaseModel):
    """One independent item roll in a loot table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Item identifier")
    chance: Chance


class LootTable(BaseModel):
    """Per-template reward specification.

    Attributes:
        gold: Gold range rolled once per defeated actor.
        experience: Experience range rolled once per defeated actor.
        items: Item entries, each rolled independently.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    gold: ValueRange = Field(default_factory=ValueRange)
    experience: ValueRange = Field(default_factory=ValueRange)
    items: tuple[ItemDrop, ...] = Field(default=())


__all__ = [
    "Chance",
    "ValueRange",
    "ItemDrop",
    "LootTable",
]
