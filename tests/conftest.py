"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the vocab battle test suite.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from vocab_battle.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "VOCAB_BATTLE_DEBUG": "true",
        "VOCAB_BATTLE_LOG_LEVEL": "DEBUG",
        "VOCAB_BATTLE_BATTLE_PLAYER_MAX_HP": "60",
        "VOCAB_BATTLE_DAMAGE_BASE_DAMAGE": "12",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def battle_settings() -> Any:
    """Battle settings with the default phase delays.

    Returns:
        BattleSettings instance.
    """
    from vocab_battle.core.config import BattleSettings

    return BattleSettings(
        default_difficulty=2,
        player_max_hp=50,
        intro_delay_sec=1.0,
        judge_delay_sec=2.0,
        hp_delay_sec=1.0,
    )


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def dictionary() -> Any:
    """Dictionary over the bundled catalogs.

    Returns:
        Dictionary instance.
    """
    from vocab_battle.engine.dictionary import get_dictionary

    return get_dictionary()


@pytest.fixture
def re_port_template() -> Any:
    """Single 're- + port' template, answerable at every difficulty.

    Returns:
        PromptTemplate instance.
    """
    from vocab_battle.models import PromptTemplate

    return PromptTemplate(
        id="re_port",
        description="Carry back: combine 're-' with 'port'.",
        requires_parts=frozenset({"re", "port"}),
        min_difficulty=1,
        max_difficulty=5,
    )


@pytest.fixture
def re_port_prompt(re_port_template: Any) -> Any:
    """Prompt drawn from the 're- + port' template with a 10s window.

    Returns:
        Prompt instance.
    """
    from vocab_battle.models import Prompt

    return Prompt(
        template_id=re_port_template.id,
        description=re_port_template.description,
        time_limit_sec=10.0,
        requires_parts=re_port_template.requires_parts,
        difficulty=2,
    )


@pytest.fixture
def silent_profiles() -> Any:
    """Profile table whose opponents never know an answer.

    Returns:
        Mapping of difficulty to AIProfile.
    """
    from vocab_battle.data.profiles import AI_PROFILES

    return {
        level: profile.model_copy(update={"accuracy": 0.0})
        for level, profile in AI_PROFILES.items()
    }


@pytest.fixture
def perfect_profiles() -> Any:
    """Profile table whose opponents always answer correctly and fast.

    Returns:
        Mapping of difficulty to AIProfile.
    """
    from vocab_battle.data.profiles import AI_PROFILES

    return {
        level: profile.model_copy(
            update={"accuracy": 1.0, "vocab_level_max": 5, "base_answer_sec": 1.0, "jitter_sec": 0.0}
        )
        for level, profile in AI_PROFILES.items()
    }


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Create a random source with a fixed seed for reproducible tests.

    Returns:
        Seeded Random instance.
    """
    return random.Random(42)


@pytest.fixture
def scheduler() -> Any:
    """Create a ManualScheduler starting at t=0.

    Returns:
        ManualScheduler instance.
    """
    from vocab_battle.engine.scheduler import ManualScheduler

    return ManualScheduler()


@pytest.fixture
def engine(
    scheduler: Any,
    battle_settings: Any,
    silent_profiles: Any,
    re_port_template: Any,
) -> Any:
    """Create a BattleEngine with a silent opponent and one prompt template.

    Returns:
        BattleEngine instance that has not started a battle.
    """
    from vocab_battle.engine.battle import BattleEngine
    from vocab_battle.models import DamageRules

    return BattleEngine(
        scheduler=scheduler,
        seed=42,
        profiles=silent_profiles,
        templates=[re_port_template],
        settings=battle_settings,
        damage_rules=DamageRules(),
    )
