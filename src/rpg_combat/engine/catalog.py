"""Static data registries.

Each registry validates its records when it is built and fails fast with
DataIntegrityError on malformed records or duplicate identifiers.
Lookups never raise: an unknown id is logged and returns None, and the
caller substitutes a default.

The ability catalog hands out an independent deep copy on every lookup,
so a caller may attach state to its copy without touching the catalog.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from rpg_combat.core.constants import BASIC_ATTACK_ID
from rpg_combat.core.exceptions import DataIntegrityError
from rpg_combat.core.logging import get_logger
from rpg_combat.data import ABILITY_RECORDS, ACTOR_RECORDS, CLASS_RECORDS, ITEM_RECORDS, ZONE_RECORDS
from rpg_combat.models.abilities import AbilityDefinition
from rpg_combat.models.actors import ActorTemplate
from rpg_combat.models.enums import AbilityKind
from rpg_combat.models.player import ClassDefinition, ItemDefinition
from rpg_combat.models.zones import ZoneDefinition


logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Registry(Generic[ModelT]):
    """Id-keyed registry of validated static records.

    Subclasses set ``model`` and ``table``.
    """

    model: type[ModelT]
    table: str = "records"

    def __init__(self, records: Iterable[ModelT | Mapping[str, Any]]) -> None:
        """Validate records and index them by id.

        Args:
            records: Model instances or raw dicts.

        Raises:
            DataIntegrityError: On a malformed record or a duplicate id.
        """
        self._records: dict[str, ModelT] = {}
        for index, raw in enumerate(records):
            record = self._validate(raw, index)
            record_id = getattr(record, "id")
            if record_id in self._records:
                raise DataIntegrityError(
                    f"Duplicate {self.table} id '{record_id}'",
                    table=self.table,
                    record_id=record_id,
                )
            self._records[record_id] = record
        logger.debug("Registry built", table=self.table, count=len(self._records))

    def _validate(self, raw: ModelT | Mapping[str, Any], index: int) -> ModelT:
        if isinstance(raw, self.model):
            return raw
        try:
            return self.model.model_validate(raw)
        except PydanticValidationError as exc:
            record_id = raw.get("id") if isinstance(raw, Mapping) else None
            raise DataIntegrityError(
                f"Malformed {self.table} record at index {index}",
                table=self.table,
                record_id=record_id,
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    def _lookup(self, record_id: str) -> ModelT | None:
        record = self._records.get(record_id)
        if record is None:
            logger.warning("Unknown id", table=self.table, record_id=record_id)
        return record

    def get(self, record_id: str) -> ModelT | None:
        """Look up a record; unknown ids log a warning and return None."""
        return self._lookup(record_id)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[ModelT]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    @property
    def ids(self) -> list[str]:
        """Registered ids in insertion order."""
        return list(self._records)


# =============================================================================
# Concrete Registries
# =============================================================================


class AbilityCatalog(Registry[AbilityDefinition]):
    """Registry of ability definitions with copy-on-read lookups."""

    model = AbilityDefinition
    table = "ability"

    def get(self, record_id: str) -> AbilityDefinition | None:
        """Get an independent copy of an ability.

        Returns:
            A deep copy the caller owns, or None for an unknown id.
        """
        record = self._lookup(record_id)
        if record is None:
            return None
        return record.model_copy(deep=True)

    def basic_attack(self) -> AbilityDefinition:
        """Copy of the basic attack every actor can fall back to."""
        record = self._records.get(BASIC_ATTACK_ID)
        if record is not None:
            return record.model_copy(deep=True)
        return AbilityDefinition(
            id=BASIC_ATTACK_ID,
            name="Attack",
            kind=AbilityKind.ATTACK,
            damage_multiplier=1.0,
        )

    def get_or_default(self, record_id: str) -> AbilityDefinition:
        """Copy of an ability, or of the basic attack when the id is unknown."""
        return self.get(record_id) or self.basic_attack()


class ActorCatalog(Registry[ActorTemplate]):
    """Registry of actor templates."""

    model = ActorTemplate
    table = "actor"


class ZoneCatalog(Registry[ZoneDefinition]):
    """Registry of zone definitions."""

    model = ZoneDefinition
    table = "zone"


class ClassCatalog(Registry[ClassDefinition]):
    """Registry of player class definitions."""

    model = ClassDefinition
    table = "class"


class ItemCatalog(Registry[ItemDefinition]):
    """Registry of combat consumables."""

    model = ItemDefinition
    table = "item"


# =============================================================================
# Game Data Bundle
# =============================================================================


@dataclass
class GameData:
    """All static registries, cross-checked for dangling references.

    Attributes:
        abilities: Ability catalog.
        actors: Actor template catalog.
        zones: Zone catalog.
        classes: Player class catalog.
        items: Consumable catalog.
    """

    abilities: AbilityCatalog
    actors: ActorCatalog
    zones: ZoneCatalog
    classes: ClassCatalog
    items: ItemCatalog

    def __post_init__(self) -> None:
        self.validate_references()

    def validate_references(self) -> None:
        """Check references between tables.

        Zone pools, bosses, summons and class ability lists must resolve.
        Unknown ability ids on actor templates are tolerated; they are
        skipped with a warning when an actor is spawned.

        Raises:
            DataIntegrityError: On a dangling reference.
        """
        for zone in self.zones:
            for template_id in sorted(zone.referenced_templates()):
                if template_id not in self.actors:
                    raise DataIntegrityError(
                        f"Zone '{zone.id}' references unknown actor template '{template_id}'",
                        table="zone",
                        record_id=zone.id,
                    )
        for ability in self.abilities:
            if ability.summon and ability.summon.actor_template_id not in self.actors:
                raise DataIntegrityError(
                    f"Ability '{ability.id}' summons unknown actor template "
                    f"'{ability.summon.actor_template_id}'",
                    table="ability",
                    record_id=ability.id,
                )
        for class_def in self.classes:
            for ability_id in class_def.ability_ids:
                if ability_id not in self.abilities:
                    raise DataIntegrityError(
                        f"Class '{class_def.id}' references unknown ability '{ability_id}'",
                        table="class",
                        record_id=class_def.id,
                    )
        for template in self.actors:
            missing = [aid for aid in template.ability_ids if aid not in self.abilities]
            if missing:
                logger.warning(
                    "Actor template references unknown abilities",
                    template_id=template.id,
                    ability_ids=missing,
                )


def load_game_data(
    *,
    abilities: Iterable[AbilityDefinition | Mapping[str, Any]] | None = None,
    actors: Iterable[ActorTemplate | Mapping[str, Any]] | None = None,
    zones: Iterable[ZoneDefinition | Mapping[str, Any]] | None = None,
    classes: Iterable[ClassDefinition | Mapping[str, Any]] | None = None,
    items: Iterable[ItemDefinition | Mapping[str, Any]] | None = None,
) -> GameData:
    """Build every registry, defaulting to the bundled tables.

    Raises:
        DataIntegrityError: If any table is malformed or references dangle.
    """
    data = GameData(
        abilities=AbilityCatalog(ABILITY_RECORDS if abilities is None else abilities),
        actors=ActorCatalog(ACTOR_RECORDS if actors is None else actors),
        zones=ZoneCatalog(ZONE_RECORDS if zones is None else zones),
        classes=ClassCatalog(CLASS_RECORDS if classes is None else classes),
        items=ItemCatalog(ITEM_RECORDS if items is None else items),
    )
    logger.info(
        "Game data loaded",
        abilities=len(data.abilities),
        actors=len(data.actors),
        zones=len(data.zones),
        classes=len(data.classes),
        items=len(data.items),
    )
    return data


__all__ = [
    "Registry",
    "AbilityCatalog",
    "ActorCatalog",
    "ZoneCatalog",
    "ClassCatalog",
    "ItemCatalog",
    "GameData",
    "load_game_data",
]
