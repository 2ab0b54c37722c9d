"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from rpg_combat.core.config import (
    EncounterSettings,
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from rpg_combat.core.exceptions import ConfigurationError


class TestRulesSettings:
    """Tests for RulesSettings configuration."""

    def test_default_values(self) -> None:
        """Test default rule parameters."""
        rules = RulesSettings()

        assert rules.enemy_ability_chance == 0.7
        assert rules.player_crit_chance == 0.2
        assert rules.enemy_crit_chance == 0.0
        assert rules.crit_multiplier == 1.5
        assert rules.retreat_base_chance == 0.4
        assert rules.retreat_max_chance == 0.7
        assert rules.retreat_consumes_turn is True
        assert rules.defeat_item_loss_chance == 0.7

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test rule parameters are read from the environment."""
        monkeypatch.setenv("RPG_COMBAT_RULES_ENEMY_ABILITY_CHANCE", "0.25")

        rules = RulesSettings()

        assert rules.enemy_ability_chance == 0.25

    def test_retreat_base_above_cap_rejected(self) -> None:
        """Test that the retreat base chance must not exceed its cap."""
        with pytest.raises(ConfigurationError) as exc_info:
            RulesSettings(retreat_base_chance=0.9, retreat_max_chance=0.5)

        assert "retreat_base_chance" in str(exc_info.value)


class TestEncounterSettings:
    """Tests for EncounterSettings configuration."""

    def test_default_values(self) -> None:
        """Test default group sizes."""
        settings = EncounterSettings()

        assert settings.min_group_size == 1
        assert settings.max_group_size == 2
        assert settings.max_hostiles == 6

    def test_min_above_max_rejected(self) -> None:
        """Test min_group_size must not exceed max_group_size."""
        with pytest.raises(ConfigurationError) as exc_info:
            EncounterSettings(min_group_size=3, max_group_size=2)

        assert exc_info.value.details["config_key"] == "min_group_size"

    def test_group_above_cap_rejected(self) -> None:
        """Test max_group_size must not exceed max_hostiles."""
        with pytest.raises(ConfigurationError):
            EncounterSettings(max_group_size=8, max_hostiles=4)


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_name == "RPG Combat Engine"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.seed is None
        assert isinstance(settings.rules, RulesSettings)
        assert isinstance(settings.encounter, EncounterSettings)

    def test_seed_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the random seed is read from the environment."""
        monkeypatch.setenv("RPG_COMBAT_SEED", "1234")
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.seed == 1234

    def test_is_production_property(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test is_production property."""
        monkeypatch.setenv("RPG_COMBAT_DEBUG", "true")
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.is_production is False


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_caching(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are cached."""
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        assert get_settings() is get_settings()

    def test_cache_clear(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that cache can be cleared."""
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_env_wrapped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that invalid environment values surface as ConfigurationError."""
        monkeypatch.setenv("RPG_COMBAT_LOG_LEVEL", "VERBOSE")
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        with pytest.raises(ConfigurationError):
            get_settings()
