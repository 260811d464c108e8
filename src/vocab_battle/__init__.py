"""Vocab Battle - word-building battle engine.

The player builds English words from prefixes, roots and suffixes to
answer timed prompts while a simulated opponent answers the same prompt.
Correct answers deal damage; the first side to run out of HP loses.

ARCHITECTURE:
- Static catalogs (parts, words, prompt templates, opponent profiles) are data
- Pure functions judge words, compute damage and simulate the opponent
- BattleEngine owns the only mutable state and advances it on timers
- Frontends observe the engine through listeners and read-only properties

Example:
    >>> from vocab_battle import BattleEngine, ManualScheduler
    >>>
    >>> scheduler = ManualScheduler()
    >>> engine = BattleEngine(scheduler=scheduler, seed=1)
    >>> engine.add_turn_result_listener(lambda r: print(r.player_display_text))
    >>> engine.start_battle(difficulty=2)
    >>> scheduler.advance(engine.intro_delay_sec)
    >>> for part_id in ("pre", "dict"):
    ...     _ = engine.add_part(part_id)
    >>> engine.submit()
    predict
    True

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas for catalogs, turns and battle state.
    data: Bundled part, word, prompt and opponent catalogs.
    engine: Judging, damage, opponent simulation and the battle state machine.
"""

from __future__ import annotations

# Core
from vocab_battle.core.config import Settings, get_settings
from vocab_battle.core.exceptions import VocabBattleError
from vocab_battle.core.logging import configure_logging, get_logger

# Models
from vocab_battle.models import (
    AIProfile,
    BattleState,
    DamageBreakdown,
    Difficulty,
    Part,
    PartType,
    Progress,
    Prompt,
    PromptTemplate,
    TurnPhase,
    TurnResult,
    Winner,
    Word,
)

# Catalogs
from vocab_battle.data import (
    AI_PROFILES,
    PARTS,
    PLAYER_MAX_HP,
    PROMPT_TEMPLATES,
    WORDS,
    get_ai_profile,
)

# Engine
from vocab_battle.engine import (
    AsyncioScheduler,
    BattleEngine,
    Dictionary,
    ManualScheduler,
    build_word_from_parts,
    calc_damage,
    eligible_words_for_prompt,
    find_word,
    get_dictionary,
    pick_prompt,
    simulate_ai_answer,
    validate_against_prompt,
)


__version__ = "0.1.0"
__author__ = "Vocab Battle Team"
__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Core
    "VocabBattleError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "AIProfile",
    "BattleState",
    "DamageBreakdown",
    "Difficulty",
    "Part",
    "PartType",
    "Progress",
    "Prompt",
    "PromptTemplate",
    "TurnPhase",
    "TurnResult",
    "Winner",
    "Word",
    # Catalogs
    "AI_PROFILES",
    "PARTS",
    "PLAYER_MAX_HP",
    "PROMPT_TEMPLATES",
    "WORDS",
    "get_ai_profile",
    # Engine
    "AsyncioScheduler",
    "BattleEngine",
    "Dictionary",
    "ManualScheduler",
    "build_word_from_parts",
    "calc_damage",
    "eligible_words_for_prompt",
    "find_word",
    "get_dictionary",
    "pick_prompt",
    "simulate_ai_answer",
    "validate_against_prompt",
]
