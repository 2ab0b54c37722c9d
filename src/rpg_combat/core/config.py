"""Configuration management for the RPG combat engine.

Rule parameters that the original game hardcoded (enemy ability chance,
critical hit baseline, retreat odds, defeat penalty) are exposed here
using pydantic-settings, so they can be tuned through environment
variables or a ``.env`` file without touching the data tables.

Example:
    >>> from rpg_combat.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.enemy_ability_chance
    0.7

Environment Variables:
    RPG_COMBAT_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    RPG_COMBAT_JSON_LOGS: Emit JSON log lines
    RPG_COMBAT_LOG_FILE: Optional log file path
    RPG_COMBAT_SEED: Seed for the combat random stream
    RPG_COMBAT_RULES_<FIELD>: Combat rule parameters (see RulesSettings)
    RPG_COMBAT_ENCOUNTER_<FIELD>: Encounter generation parameters
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rpg_combat.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Tunable combat rule parameters.

    Attributes:
        enemy_ability_chance: Probability that a hostile uses an ability
            instead of a basic attack.
        player_crit_chance: Baseline critical chance for player attacks.
        enemy_crit_chance: Baseline critical chance for hostile attacks.
        crit_multiplier: Damage multiplier applied on a critical hit.
        damage_variance: Symmetric fractional jitter applied to base damage.
        retreat_base_chance: Retreat success chance before agility.
        retreat_agility_factor: Retreat chance added per point of agility.
        retreat_max_chance: Upper bound on retreat success chance.
        retreat_consumes_turn: Whether a failed retreat ends the player turn.
        defeat_item_loss_chance: Chance of losing each inventory stack on defeat.
        experience_level_bonus: Experience scaling per level above template level.
    """

    model_config = SettingsConfigDict(
        env_prefix="RPG_COMBAT_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enemy_ability_chance: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Chance a hostile picks an ability over a basic attack",
    )
    player_crit_chance: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Baseline critical chance for player attacks",
    )
    enemy_crit_chance: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Baseline critical chance for hostile attacks",
    )
    crit_multiplier: float = Field(
        default=1.5,
        ge=1.0,
        description="Default critical damage multiplier",
    )
    damage_variance: float = Field(
        default=0.0,
        ge=0.0,
        lt=1.0,
        description="Fractional jitter applied to base damage",
    )
    retreat_base_chance: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Retreat chance before agility",
    )
    retreat_agility_factor: float = Field(
        default=0.03,
        ge=0.0,
        description="Retreat chance per point of agility",
    )
    retreat_max_chance: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Retreat chance cap",
    )
    retreat_consumes_turn: bool = Field(
        default=True,
        description="A failed retreat ends the player turn",
    )
    defeat_item_loss_chance: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Chance of losing each inventory stack on defeat",
    )
    experience_level_bonus: float = Field(
        default=0.1,
        ge=0.0,
        description="Experience scaling per level above the template level",
    )

    @model_validator(mode="after")
    def validate_retreat_bounds(self) -> "RulesSettings":
        """Ensure the retreat base chance does not exceed its cap.

        Raises:
            ConfigurationError: If the base chance is above the cap.
        """
        if self.retreat_base_chance > self.retreat_max_chance:
            raise ConfigurationError(
                "retreat_base_chance must not exceed retreat_max_chance",
                config_key="retreat_base_chance",
            )
        return self


class EncounterSettings(BaseSettings):
    """Encounter generation parameters.

    Attributes:
        min_group_size: Fewest hostiles in a non-boss encounter.
        max_group_size: Most hostiles in a non-boss encounter.
        max_hostiles: Roster cap, including summoned reinforcements.
    """

    model_config = SettingsConfigDict(
        env_prefix="RPG_COMBAT_ENCOUNTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    min_group_size: int = Field(default=1, ge=1, description="Minimum hostiles per encounter")
    max_group_size: int = Field(default=2, ge=1, description="Maximum hostiles per encounter")
    max_hostiles: int = Field(default=6, ge=1, description="Roster cap including summons")

    @model_validator(mode="after")
    def validate_group_sizes(self) -> "EncounterSettings":
        """Ensure min_group_size <= max_group_size <= max_hostiles.

        Raises:
            ConfigurationError: If the sizes are inconsistent.
        """
        if self.min_group_size > self.max_group_size:
            raise ConfigurationError(
                "min_group_size must not exceed max_group_size",
                config_key="min_group_size",
            )
        if self.max_group_size > self.max_hostiles:
            raise ConfigurationError(
                "max_group_size must not exceed max_hostiles",
                config_key="max_group_size",
            )
        return self


class Settings(BaseSettings):
    """Main settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON log lines.
        log_file: Optional file receiving a copy of every log record.
        seed: Seed for the combat random stream; None seeds from the OS.
        rules: Combat rule parameters.
        encounter: Encounter generation parameters.
    """

    model_config = SettingsConfigDict(
        env_prefix="RPG_COMBAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="RPG Combat Engine", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")
    log_file: str | None = Field(default=None, description="Optional log file path")
    seed: int | None = Field(default=None, description="Combat random stream seed")

    rules: RulesSettings = Field(default_factory=RulesSettings)
    encounter: EncounterSettings = Field(default_factory=EncounterSettings)

    @property
    def is_production(self) -> bool:
        """True if not in debug mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached application settings.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "EncounterSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
