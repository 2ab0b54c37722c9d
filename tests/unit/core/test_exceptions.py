"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from rpg_combat.core.exceptions import (
    CombatEngineError,
    ConfigurationError,
    DataIntegrityError,
    DataNotFoundError,
    ExhaustedResourceError,
    InvalidGameStateError,
    RpgCombatError,
)


class TestRpgCombatError:
    """Tests for the base RpgCombatError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = RpgCombatError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = RpgCombatError("Test error", details={"key": "value", "count": 42})
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(RpgCombatError("Test", details={"x": 1}))
        assert "RpgCombatError" in repr_str
        assert "x" in repr_str


class TestLoadTimeExceptions:
    """Tests for configuration and data integrity errors."""

    def test_configuration_error_key(self) -> None:
        """Test ConfigurationError records the offending key."""
        exc = ConfigurationError("Bad value", config_key="seed")
        assert exc.details["config_key"] == "seed"

    def test_data_integrity_error_context(self) -> None:
        """Test DataIntegrityError records table and record id."""
        exc = DataIntegrityError("Duplicate", table="ability", record_id="slash")
        assert exc.details == {"table": "ability", "record_id": "slash"}
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, RpgCombatError)


class TestCombatEngineExceptions:
    """Tests for recoverable engine rejections."""

    def test_reason_code(self) -> None:
        """Test the reason code is exposed and recorded in details."""
        exc = CombatEngineError("Nope", reason="not_player_turn")
        assert exc.reason == "not_player_turn"
        assert exc.details["reason"] == "not_player_turn"

    def test_not_found(self) -> None:
        """Test DataNotFoundError always uses the not_found reason."""
        exc = DataNotFoundError("Unknown item", kind="item", identifier="elixir")
        assert exc.reason == "not_found"
        assert exc.details["kind"] == "item"
        assert exc.details["identifier"] == "elixir"

    def test_invalid_state_context(self) -> None:
        """Test InvalidGameStateError records state context."""
        exc = InvalidGameStateError(
            "Wrong phase",
            reason="not_player_turn",
            current_state="enemy",
            expected_states=["player"],
        )
        assert exc.details["current_state"] == "enemy"
        assert exc.details["expected_states"] == ["player"]

    def test_exhausted_resource(self) -> None:
        """Test ExhaustedResourceError records the resource."""
        exc = ExhaustedResourceError("On cooldown", resource="fireball", reason="cooldown")
        assert exc.reason == "cooldown"
        assert exc.details["resource"] == "fireball"

    @pytest.mark.parametrize(
        "exc_class",
        [DataNotFoundError, InvalidGameStateError, ExhaustedResourceError],
    )
    def test_inheritance(self, exc_class: type[CombatEngineError]) -> None:
        """Test every rejection is a CombatEngineError."""
        exc = exc_class("Error")
        assert isinstance(exc, CombatEngineError)
        assert isinstance(exc, RpgCombatError)
        assert not isinstance(exc, ConfigurationError)
