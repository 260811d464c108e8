"""Per-difficulty AI opponent profiles.

Higher difficulties answer more often, know rarer words, answer faster
and get a shorter answer window.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from vocab_battle.core.constants import PLAYER_MAX_HP
from vocab_battle.core.exceptions import InvalidGameStateError
from vocab_battle.models.battle import AIProfile


AI_PROFILES: Mapping[int, AIProfile] = MappingProxyType(
    {
        1: AIProfile(
            name="Apprentice Imp",
            max_hp=30,
            accuracy=0.35,
            vocab_level_max=1,
            base_answer_sec=4.0,
            jitter_sec=1.5,
            time_limit_sec=12.0,
        ),
        2: AIProfile(
            name="Word Goblin",
            max_hp=40,
            accuracy=0.5,
            vocab_level_max=2,
            base_answer_sec=3.0,
            jitter_sec=1.0,
            time_limit_sec=10.0,
        ),
        3: AIProfile(
            name="Lexicon Knight",
            max_hp=50,
            accuracy=0.65,
            vocab_level_max=3,
            base_answer_sec=2.8,
            jitter_sec=0.8,
            time_limit_sec=9.0,
        ),
        4: AIProfile(
            name="Etymology Sage",
            max_hp=60,
            accuracy=0.75,
            vocab_level_max=4,
            base_answer_sec=2.5,
            jitter_sec=0.6,
            time_limit_sec=8.0,
        ),
        5: AIProfile(
            name="Grand Lexicographer",
            max_hp=80,
            accuracy=0.85,
            vocab_level_max=5,
            base_answer_sec=2.0,
            jitter_sec=0.5,
            time_limit_sec=7.0,
        ),
    }
)


def get_ai_profile(
    difficulty: int,
    profiles: Mapping[int, AIProfile] | None = None,
) -> AIProfile:
    """Look up the profile for a difficulty.

    Args:
        difficulty: Difficulty level.
        profiles: Profile table, defaults to ``AI_PROFILES``.

    Returns:
        The matching AIProfile.

    Raises:
        InvalidGameStateError: If no profile exists for ``difficulty``.
    """
    table = AI_PROFILES if profiles is None else profiles
    try:
        return table[difficulty]
    except KeyError as exc:
        raise InvalidGameStateError(
            f"Unknown difficulty: {difficulty}",
            details={"difficulty": difficulty, "available": sorted(table)},
        ) from exc


__all__ = [
    "AI_PROFILES",
    "PLAYER_MAX_HP",
    "get_ai_profile",
]
