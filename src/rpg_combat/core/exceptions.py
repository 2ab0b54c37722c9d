"""Custom exception hierarchy for the RPG combat rules engine.

This module defines the exception hierarchy used across the engine. All
exceptions inherit from RpgCombatError, enabling unified error handling
at the controller boundary while preserving domain-specific context.

Two families exist:

* Load-time errors (ConfigurationError, DataIntegrityError) are fatal and
  are raised before any encounter starts.
* Engine errors (CombatEngineError and subclasses) are recoverable
  rejections. Whenever one is raised the encounter session is left
  unchanged and the player's turn is not consumed.

Example:
    >>> from rpg_combat.core.exceptions import ExhaustedResourceError
    >>> raise ExhaustedResourceError("Ability on cooldown", resource="fireball", reason="cooldown")
"""

from __future__ import annotations

from typing import Any


class RpgCombatError(Exception):
    """Base exception for all combat engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception.

        Returns:
            String representation suitable for debugging.
        """
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration and Static Data Exceptions
# =============================================================================


class ConfigurationError(RpgCombatError):
    """Raised when there are configuration-related issues.

    This includes missing required settings, invalid values, or
    inconsistent combinations of rule parameters.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class DataIntegrityError(ConfigurationError):
    """Raised when static game data is malformed.

    Duplicate identifiers, dangling template references and records whose
    payload does not match their declared kind all end up here. The data
    tables are validated when the registries are built, so this error
    surfaces at startup rather than mid-encounter.
    """

    def __init__(
        self,
        message: str,
        *,
        table: str | None = None,
        record_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize data integrity error with record context.

        Args:
            message: Human-readable error description.
            table: Name of the data table being loaded.
            record_id: Identifier of the offending record.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if table:
            combined_details["table"] = table
        if record_id:
            combined_details["record_id"] = record_id
        super().__init__(message, details=combined_details)


# =============================================================================
# Combat Engine Exceptions
# =============================================================================


class CombatEngineError(RpgCombatError):
    """Base exception for all recoverable combat engine rejections.

    The engine never mutates the encounter session before raising one of
    these, so callers may simply re-prompt the player.
    """

    def __init__(
        self,
        message: str,
        *,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize engine error with a machine-readable reason code.

        Args:
            message: Human-readable error description.
            reason: Short reason code for the controller to branch on.
            details: Optional dictionary containing additional error context.
        """
        self.reason = reason
        combined_details = details or {}
        if reason:
            combined_details["reason"] = reason
        super().__init__(message, details=combined_details)


class DataNotFoundError(CombatEngineError):
    """Raised when a caller insists on an identifier that does not exist.

    Catalog lookups themselves never raise; this is used at the action
    boundary, for example when the player tries to use an unknown item.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: str | None = None,
        identifier: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not-found error with lookup context.

        Args:
            message: Human-readable error description.
            kind: Kind of record looked up (ability, actor, item, zone).
            identifier: The identifier that was not found.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if kind:
            combined_details["kind"] = kind
        if identifier:
            combined_details["identifier"] = identifier
        super().__init__(message, reason="not_found", details=combined_details)


class InvalidGameStateError(CombatEngineError):
    """Raised when an action does not fit the current encounter state.

    Typical causes are acting outside the player phase, acting after the
    encounter has ended, targeting a defeated actor, or attempting to
    retreat while immobilized.
    """

    def __init__(
        self,
        message: str,
        *,
        reason: str | None = None,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            reason: Short reason code for the rejection.
            current_state: The current state identifier.
            expected_states: List of valid states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, reason=reason, details=combined_details)


class ExhaustedResourceError(CombatEngineError):
    """Raised when an action needs a resource the actor does not have.

    Covers abilities still on cooldown, insufficient mana and items that
    are not in the inventory. The turn is not consumed.
    """

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exhausted resource error.

        Args:
            message: Human-readable error description.
            resource: Identifier of the ability or item involved.
            reason: One of ``cooldown``, ``mana`` or ``item_missing``.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if resource:
            combined_details["resource"] = resource
        super().__init__(message, reason=reason, details=combined_details)


__all__ = [
    "RpgCombatError",
    "ConfigurationError",
    "DataIntegrityError",
    "CombatEngineError",
    "DataNotFoundError",
    "InvalidGameStateError",
    "ExhaustedResourceError",
]
