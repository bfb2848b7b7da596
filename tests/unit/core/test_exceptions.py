"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from dungeonmind.core.exceptions import (
    AIConnectionError,
    AIControlError,
    AIRateLimitError,
    AIResponseError,
    ConfigurationError,
    DiceRollError,
    DungeonMindError,
    GameEngineError,
    InvalidGameStateError,
    TurnManagementError,
)


class TestDungeonMindError:
    """Tests for the base DungeonMindError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = DungeonMindError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = DungeonMindError("Test error", details={"key": "value", "count": 42})
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(DungeonMindError("Test", details={"x": 1}))
        assert "DungeonMindError" in repr_str
        assert "x" in repr_str


class TestEngineExceptions:
    """Tests for game engine exceptions."""

    def test_invalid_state_context(self) -> None:
        """Test InvalidGameStateError carries state context."""
        exc = InvalidGameStateError("Bad", current_state="ended", expected_states=["ready"])
        assert exc.details["current_state"] == "ended"
        assert exc.details["expected_states"] == ["ready"]

    def test_dice_roll_error_expression(self) -> None:
        """Test DiceRollError carries the expression."""
        exc = DiceRollError("Invalid", expression="1dX")
        assert exc.details["expression"] == "1dX"

    @pytest.mark.parametrize("cls", [InvalidGameStateError, DiceRollError, TurnManagementError])
    def test_engine_errors_share_base(self, cls: type[GameEngineError]) -> None:
        """Test all engine errors inherit from GameEngineError."""
        assert issubclass(cls, GameEngineError)
        assert issubclass(cls, DungeonMindError)


class TestAIExceptions:
    """Tests for AI-related exceptions."""

    def test_model_and_provider(self) -> None:
        """Test AIControlError records model and provider."""
        exc = AIResponseError("Empty", model="m", provider="openrouter")
        assert exc.details == {"model": "m", "provider": "openrouter"}

    def test_rate_limit_retry_after(self) -> None:
        """Test AIRateLimitError records the retry delay."""
        exc = AIRateLimitError("Slow down", retry_after_seconds=5.0, model="m")
        assert exc.details["retry_after_seconds"] == 5.0
        assert exc.details["model"] == "m"

    @pytest.mark.parametrize("cls", [AIConnectionError, AIResponseError, AIRateLimitError])
    def test_ai_errors_share_base(self, cls: type[AIControlError]) -> None:
        """Test AI errors can be caught as AIControlError."""
        assert issubclass(cls, AIControlError)

    def test_configuration_error_key(self) -> None:
        """Test ConfigurationError records the offending key."""
        exc = ConfigurationError("Missing", config_key="openai_api_key")
        assert exc.details["config_key"] == "openai_api_key"
