"""Custom exception hierarchy for the vocab battle engine.

User input never raises: an unknown word, an empty selection or an empty
AI answer pool all degrade to falsy outcomes. The exceptions here are
reserved for configuration and programming errors, such as a catalog
that references a missing part or a prompt pool with no entries for a
difficulty. All exceptions inherit from VocabBattleError so callers can
catch the whole family at the application boundary.

Example:
    >>> from vocab_battle.core.exceptions import CatalogError
    >>> raise CatalogError("Unknown part id", item_id="w_predict", part_id="pre")
"""

from __future__ import annotations

from typing import Any


class VocabBattleError(Exception):
    """Base exception for all vocab battle errors.

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
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Catalog Exceptions
# =============================================================================


class ConfigurationError(VocabBattleError):
    """Raised when application configuration is invalid.

    This includes invalid settings values and static data that cannot
    support a battle.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class CatalogError(ConfigurationError):
    """Raised when the part/word/prompt catalogs are inconsistent.

    Typical causes are duplicate ids, a word referencing a part that does
    not exist, or a word whose parts do not compose back into its text.
    """

    def __init__(
        self,
        message: str,
        *,
        item_id: str | None = None,
        part_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize catalog error with the offending entry.

        Args:
            message: Human-readable error description.
            item_id: Id of the catalog entry that failed validation.
            part_id: Part id involved in the failure, if any.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if item_id:
            combined_details["item_id"] = item_id
        if part_id:
            combined_details["part_id"] = part_id
        super().__init__(message, details=combined_details)


class PromptPoolEmptyError(ConfigurationError):
    """Raised when no prompt template is valid for a difficulty.

    This is a data-authoring bug, never a runtime condition to recover from.
    """

    def __init__(
        self,
        message: str,
        *,
        difficulty: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize prompt pool error with difficulty context.

        Args:
            message: Human-readable error description.
            difficulty: The difficulty that had no candidates.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if difficulty is not None:
            combined_details["difficulty"] = difficulty
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(VocabBattleError):
    """Base exception for all battle engine errors."""


class InvalidGameStateError(GameEngineError):
    """Raised when an engine operation is called in the wrong state.

    For example, changing difficulty while a battle is running.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current state identifier.
            expected_states: List of valid states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


__all__ = [
    "VocabBattleError",
    "ConfigurationError",
    "CatalogError",
    "PromptPoolEmptyError",
    "GameEngineError",
    "InvalidGameStateError",
]
