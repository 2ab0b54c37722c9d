"""Tests for the static data registries."""

from __future__ import annotations

from typing import Any

import pytest

from rpg_combat.core.exceptions import DataIntegrityError
from rpg_combat.data import ABILITY_RECORDS, ACTOR_RECORDS
from rpg_combat.engine.catalog import AbilityCatalog, ActorCatalog, GameData, load_game_data


def _zone(template_id: str) -> dict[str, Any]:
    return {
        "id": "test-zone",
        "name": "Test Zone",
        "bands": [{"min_level": 1, "template_ids": [template_id]}],
    }


class TestAbilityCatalog:
    """Tests for ability lookups."""

    def test_lookup_returns_independent_copies(self, game_data: GameData) -> None:
        """Test two lookups are equal but independently mutable."""
        first = game_data.abilities.get("fireball")
        second = game_data.abilities.get("fireball")

        assert first is not None and second is not None
        assert first == second
        assert first is not second

        first.damage_multiplier = 99.0
        first.name = "Changed"

        assert second.damage_multiplier != 99.0
        third = game_data.abilities.get("fireball")
        assert third is not None
        assert third.name == "Fireball"

    def test_unknown_returns_none(self, game_data: GameData) -> None:
        """Test unknown ids do not raise."""
        assert game_data.abilities.get("does-not-exist") is None

    def test_get_or_default(self, game_data: GameData) -> None:
        """Test unknown ids fall back to the basic attack."""
        assert game_data.abilities.get_or_default("does-not-exist").id == "basic-attack"

    def test_basic_attack_without_record(self) -> None:
        """Test a basic attack is synthesized when the table lacks one."""
        catalog = AbilityCatalog([])

        ability = catalog.basic_attack()

        assert ability.id == "basic-attack"
        assert ability.damage_multiplier == 1.0

    def test_duplicate_id_rejected(self) -> None:
        """Test duplicate ids fail fast."""
        record = {"id": "slash", "name": "Slash", "kind": "attack", "damage_multiplier": 1.0}

        with pytest.raises(DataIntegrityError) as exc_info:
            AbilityCatalog([record, dict(record)])

        assert exc_info.value.details["record_id"] == "slash"
        assert exc_info.value.details["table"] == "ability"

    def test_malformed_record_rejected(self) -> None:
        """Test a payload that does not match its kind fails fast."""
        with pytest.raises(DataIntegrityError) as exc_info:
            AbilityCatalog([{"id": "broken", "name": "Broken", "kind": "attack"}])

        assert exc_info.value.details["record_id"] == "broken"
        assert "errors" in exc_info.value.details


class TestRegistries:
    """Tests for generic registry behavior."""

    def test_bundled_tables_load(self, game_data: GameData) -> None:
        """Test the bundled tables validate and cross-reference."""
        assert len(game_data.abilities) == len(ABILITY_RECORDS)
        assert len(game_data.actors) == len(ACTOR_RECORDS)
        assert "verdant-woods" in game_data.zones
        assert "warrior" in game_data.classes
        assert "hp-potion" in game_data.items

    def test_ids_preserve_order(self) -> None:
        """Test ids come back in table order."""
        catalog = ActorCatalog(
            [
                {"id": "rat", "name": "Rat", "max_health": 5, "attack": 1},
                {"id": "bat", "name": "Bat", "max_health": 4, "attack": 2},
            ]
        )

        assert catalog.ids == ["rat", "bat"]
        assert [template.id for template in catalog] == ["rat", "bat"]


class TestReferenceValidation:
    """Tests for cross-table reference checks."""

    def test_dangling_zone_template(self) -> None:
        """Test zones must reference known templates."""
        with pytest.raises(DataIntegrityError) as exc_info:
            load_game_data(zones=[_zone("nonexistent")])

        assert exc_info.value.details["table"] == "zone"

    def test_dangling_class_ability(self) -> None:
        """Test classes must reference known abilities."""
        classes = [
            {
                "id": "monk",
                "name": "Monk",
                "base_health": 50,
                "health_growth": 5,
                "base_mana": 10,
                "mana_growth": 1,
                "ability_ids": ["flurry"],
            }
        ]

        with pytest.raises(DataIntegrityError):
            load_game_data(classes=classes)

    def test_dangling_summon(self) -> None:
        """Test summons must reference known templates."""
        abilities = [
            *ABILITY_RECORDS,
            {
                "id": "call-ghoul",
                "name": "Call Ghoul",
                "kind": "summon",
                "summon": {"actor_template_id": "ghoul"},
            },
        ]

        with pytest.raises(DataIntegrityError):
            load_game_data(abilities=abilities)

    def test_unknown_template_ability_tolerated(self) -> None:
        """Test unknown template abilities only warn."""
        actors = [
            *ACTOR_RECORDS,
            {"id": "odd", "name": "Odd", "max_health": 5, "attack": 1, "ability_ids": ["mystery"]},
        ]

        data = load_game_data(actors=actors)

        assert "odd" in data.actors
