"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        VocabBattleError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        CatalogError: Inconsistent part/word/prompt data.
        PromptPoolEmptyError: No prompt available for a difficulty.
        GameEngineError: Battle engine errors.
        InvalidGameStateError: Operation called in the wrong battle state.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        unbind_context: Remove specific keys from logging context.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from vocab_battle.core.config import (
    BattleSettings,
    DamageSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from vocab_battle.core.exceptions import (
    CatalogError,
    ConfigurationError,
    GameEngineError,
    InvalidGameStateError,
    PromptPoolEmptyError,
    VocabBattleError,
)
from vocab_battle.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


__all__ = [
    # Exceptions
    "VocabBattleError",
    "ConfigurationError",
    "CatalogError",
    "PromptPoolEmptyError",
    "GameEngineError",
    "InvalidGameStateError",
    # Configuration
    "Settings",
    "BattleSettings",
    "DamageSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
]
