"""Zone models: level-banded enemy pools and boss selection."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SpawnBand(BaseModel):
    """Templates that become eligible once the zone level reaches ``min_level``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_level: Annotated[int, Field(ge=1)] = 1
    template_ids: tuple[str, ...] = Field(min_length=1)


class BossTier(BaseModel):
    """Boss used from ``min_level`` upward, until a higher tier takes over."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_level: Annotated[int, Field(ge=1)] = 1
    template_id: str = Field(min_length=1)


class ZoneDefinition(BaseModel):
    """Encounter generation record for one zone.

    The eligible pool at a zone level is the union of every band whose
    threshold has been reached, so lower-level creatures stay eligible as
    the level rises.

    Attributes:
        id: Zone identifier.
        name: Display name.
        min_level: Recommended lowest player level.
        max_level: Recommended highest player level.
        difficulty: Display label.
        bands: Spawn bands.
        bosses: Boss tiers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    min_level: Annotated[int, Field(ge=1)] = 1
    max_level: Annotated[int, Field(ge=1)] = 1
    difficulty: str = "Normal"
    bands: tuple[SpawnBand, ...] = ()
    bosses: tuple[BossTier, ...] = ()

    @model_validator(mode="after")
    def validate_levels(self) -> "ZoneDefinition":
        """Ensure the recommended level range is ordered."""
        if self.min_level > self.max_level:
            msg = f"Zone '{self.id}' min_level exceeds max_level"
            raise ValueError(msg)
        return self

    def eligible_templates(self, zone_level: int) -> list[str]:
        """Template ids eligible at a zone level, without duplicates."""
        eligible: list[str] = []
        for band in sorted(self.bands, key=lambda b: b.min_level):
            if band.min_level > zone_level:
                break
            eligible.extend(tid for tid in band.template_ids if tid not in eligible)
        return eligible

    def boss_for(self, zone_level: int) -> str | None:
        """Boss template id for a zone level, or None if no tier applies."""
        chosen: str | None = None
        for tier in sorted(self.bosses, key=lambda t: t.min_level):
            if tier.min_level > zone_level:
                break
            chosen = tier.template_id
        return chosen

    def referenced_templates(self) -> set[str]:
        """Every template id named by the zone."""
        referenced = {tid for band in self.bands for tid in band.template_ids}
        referenced.update(tier.template_id for tier in self.bosses)
        return referenced


__all__ = [
    "SpawnBand",
    "BossTier",
    "ZoneDefinition",
]
