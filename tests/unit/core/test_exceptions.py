"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from vocab_battle.core.exceptions import (
    CatalogError,
    ConfigurationError,
    GameEngineError,
    InvalidGameStateError,
    PromptPoolEmptyError,
    VocabBattleError,
)


class TestVocabBattleError:
    """Tests for the base VocabBattleError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = VocabBattleError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = VocabBattleError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        exc = VocabBattleError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "VocabBattleError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestConfigurationExceptions:
    """Tests for configuration and catalog exceptions."""

    def test_configuration_error_with_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="player_max_hp")
        assert exc.details["config_key"] == "player_max_hp"

    def test_catalog_error_with_ids(self) -> None:
        """Test CatalogError with item and part ids."""
        exc = CatalogError("Unknown part", item_id="w_predict", part_id="pre")
        assert exc.details["item_id"] == "w_predict"
        assert exc.details["part_id"] == "pre"

    def test_prompt_pool_error_keeps_zero_difficulty(self) -> None:
        """Test PromptPoolEmptyError records the difficulty even when falsy."""
        exc = PromptPoolEmptyError("Empty pool", difficulty=0)
        assert exc.details["difficulty"] == 0

    def test_inheritance(self) -> None:
        """Test exception inheritance chain."""
        for exc in (CatalogError("Error"), PromptPoolEmptyError("Error")):
            assert isinstance(exc, ConfigurationError)
            assert isinstance(exc, VocabBattleError)
            assert isinstance(exc, Exception)


class TestGameEngineExceptions:
    """Tests for game engine exceptions."""

    def test_invalid_state_error(self) -> None:
        """Test InvalidGameStateError with state context."""
        exc = InvalidGameStateError(
            "Cannot change difficulty",
            current_state="answer",
            expected_states=["idle", "end"],
        )
        assert exc.details["current_state"] == "answer"
        assert exc.details["expected_states"] == ["idle", "end"]

    def test_game_engine_inheritance(self) -> None:
        """Test game engine exception inheritance."""
        exc = InvalidGameStateError("Error")
        assert isinstance(exc, GameEngineError)
        assert isinstance(exc, VocabBattleError)

    def test_catch_all_at_boundary(self) -> None:
        """Test the whole family can be caught through the base class."""
        with pytest.raises(VocabBattleError):
            raise PromptPoolEmptyError("Empty pool", difficulty=3)
