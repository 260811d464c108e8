"""Pydantic V2 schemas for the vocab battle engine.

Submodules:
    enums: Enumeration types (PartType, TurnPhase, Winner, Difficulty)
    catalog: Static catalog entries (Part, Word, PromptTemplate)
    battle: Per-turn and per-battle values (Prompt, AIProfile, TurnResult, BattleState)
    progress: Caller-owned learning counters (Progress, ProgressCounter)
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from vocab_battle.models.enums import (
    Difficulty,
    PartType,
    TurnPhase,
    Winner,
)

# =============================================================================
# Catalog
# =============================================================================
from vocab_battle.models.catalog import (
    Part,
    PromptTemplate,
    Word,
    normalize_text,
)

# =============================================================================
# Battle
# =============================================================================
from vocab_battle.models.battle import (
    DEFAULT_DAMAGE_RULES,
    AIAnswer,
    AIProfile,
    BattleState,
    DamageBreakdown,
    DamageRules,
    Prompt,
    TurnResult,
)

# =============================================================================
# Progress
# =============================================================================
from vocab_battle.models.progress import (
    Progress,
    ProgressCounter,
)


__all__ = [
    # Enumerations
    "Difficulty",
    "PartType",
    "TurnPhase",
    "Winner",
    # Catalog
    "Part",
    "PromptTemplate",
    "Word",
    "normalize_text",
    # Battle
    "AIAnswer",
    "AIProfile",
    "BattleState",
    "DamageBreakdown",
    "DamageRules",
    "DEFAULT_DAMAGE_RULES",
    "Prompt",
    "TurnResult",
    # Progress
    "Progress",
    "ProgressCounter",
]
