"""Battle-wide constants for the vocab battle engine.

Values that tune a battle per deployment (phase delays, damage weights,
player HP) live in ``vocab_battle.core.config`` instead. The constants here
are rules of the game that never change.
"""

from __future__ import annotations

# =============================================================================
# Difficulty
# =============================================================================

MIN_DIFFICULTY = 1
"""Easiest difficulty level."""

MAX_DIFFICULTY = 5
"""Hardest difficulty level."""

DEFAULT_DIFFICULTY = 2
"""Difficulty selected before the player changes it."""

MAX_VOCAB_LEVEL = 5
"""Highest vocabulary level a catalog word can have."""

# =============================================================================
# Combo
# =============================================================================

COMBO_MIN = 0
"""Combo streak after a miss."""

COMBO_CAP = 99
"""Highest combo streak a side can reach."""

# =============================================================================
# Health
# =============================================================================

PLAYER_MAX_HP = 50
"""Default player maximum HP."""

# =============================================================================
# AI Timing
# =============================================================================

MIN_AI_ANSWER_SEC = 0.2
"""Floor for the simulated AI answer latency, in seconds."""

# =============================================================================
# Phase Timing
# =============================================================================

INTRO_DELAY_SEC = 1.0
"""Pause showing the new prompt before the answer window opens."""

JUDGE_DELAY_SEC = 2.0
"""Time the judge result stays on screen before damage is applied."""

HP_DELAY_SEC = 1.0
"""Time the HP change stays on screen before the next turn or the end."""

# =============================================================================
# Display Placeholders
# =============================================================================

NO_ANSWER_LABEL = "(no answer)"
"""Shown for the player's word when nothing was submitted."""

WRONG_ANSWER_LABEL = "(wrong)"
"""Shown for the AI's word when it did not answer."""


__all__ = [
    "MIN_DIFFICULTY",
    "MAX_DIFFICULTY",
    "DEFAULT_DIFFICULTY",
    "MAX_VOCAB_LEVEL",
    "COMBO_MIN",
    "COMBO_CAP",
    "PLAYER_MAX_HP",
    "MIN_AI_ANSWER_SEC",
    "INTRO_DELAY_SEC",
    "JUDGE_DELAY_SEC",
    "HP_DELAY_SEC",
    "NO_ANSWER_LABEL",
    "WRONG_ANSWER_LABEL",
]
