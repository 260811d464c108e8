"""Static catalogs consumed by the battle engine.

Submodules:
    parts: Prefix, root and suffix catalog
    words: Whole-word catalog
    prompts: Prompt templates with difficulty ranges
    profiles: Per-difficulty AI opponent profiles
"""

from __future__ import annotations

from vocab_battle.data.parts import PARTS
from vocab_battle.data.profiles import AI_PROFILES, PLAYER_MAX_HP, get_ai_profile
from vocab_battle.data.prompts import PROMPT_TEMPLATES
from vocab_battle.data.words import WORDS


__all__ = [
    "PARTS",
    "WORDS",
    "PROMPT_TEMPLATES",
    "AI_PROFILES",
    "PLAYER_MAX_HP",
    "get_ai_profile",
]
