"""Core infrastructure: configuration, logging and exceptions.

Exports:
    Exceptions:
        RpgCombatError: Base exception for all engine errors.
        ConfigurationError: Invalid settings.
        DataIntegrityError: Malformed static data detected at load time.
        CombatEngineError: Base for recoverable engine rejections.
        DataNotFoundError: Unknown identifier at the action boundary.
        InvalidGameStateError: Action does not fit the encounter state.
        ExhaustedResourceError: Cooldown, mana or item missing.

    Configuration:
        Settings: Main settings class.
        get_settings: Get the cached settings.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up structlog.
        configure_from_settings: Set up structlog from Settings.
        get_logger: Get a configured logger.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from rpg_combat.core.config import (
    EncounterSettings,
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from rpg_combat.core.exceptions import (
    CombatEngineError,
    ConfigurationError,
    DataIntegrityError,
    DataNotFoundError,
    ExhaustedResourceError,
    InvalidGameStateError,
    RpgCombatError,
)
from rpg_combat.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
    unbind_context,
)


__all__ = [
    # Exceptions
    "RpgCombatError",
    "ConfigurationError",
    "DataIntegrityError",
    "CombatEngineError",
    "DataNotFoundError",
    "InvalidGameStateError",
    "ExhaustedResourceError",
    # Configuration
    "Settings",
    "RulesSettings",
    "EncounterSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
]
