"""Battle engine for the vocab word-building game.

This module provides the game logic: catalog lookups, prompt selection,
damage calculation, opponent simulation, turn judging and the timer-driven
battle state machine.

Submodules:
    dictionary: Part/word catalog index and prompt validation
    prompts: Difficulty-filtered prompt selection
    damage: Damage formula (base + speed + combo)
    opponent: AI opponent answer simulation
    scheduler: Cancellable timers (manual clock and asyncio)
    turn: Pure turn-judging helpers
    battle: BattleEngine phase state machine

Example:
    >>> from vocab_battle.engine import BattleEngine, ManualScheduler
    >>>
    >>> scheduler = ManualScheduler()
    >>> engine = BattleEngine(scheduler=scheduler, seed=42)
    >>> engine.start_battle(difficulty=2)
    >>> scheduler.advance(engine.intro_delay_sec)
    >>> engine.add_part("pre")
    True
"""

from __future__ import annotations

# =============================================================================
# Catalog
# =============================================================================
from vocab_battle.engine.dictionary import (
    Dictionary,
    build_word_from_parts,
    eligible_words_for_prompt,
    find_word,
    get_dictionary,
    validate_against_prompt,
)

# =============================================================================
# Prompts
# =============================================================================
from vocab_battle.engine.prompts import (
    candidate_templates,
    pick_prompt,
)

# =============================================================================
# Damage
# =============================================================================
from vocab_battle.engine.damage import (
    calc_damage,
    combo_bonus,
    speed_bonus,
)

# =============================================================================
# Opponent
# =============================================================================
from vocab_battle.engine.opponent import (
    draw_latency,
    simulate_ai_answer,
)

# =============================================================================
# Scheduling
# =============================================================================
from vocab_battle.engine.scheduler import (
    AsyncioScheduler,
    ManualScheduler,
    Scheduler,
    TimerHandle,
)

# =============================================================================
# Turns and Battle
# =============================================================================
from vocab_battle.engine.turn import (
    apply_damage,
    judge_turn,
    next_combo,
    resolve_winner,
)
from vocab_battle.engine.battle import (
    BattleEndListener,
    BattleEngine,
    PhaseListener,
    TurnResultListener,
)


__all__ = [
    # Catalog
    "Dictionary",
    "get_dictionary",
    "build_word_from_parts",
    "find_word",
    "eligible_words_for_prompt",
    "validate_against_prompt",
    # Prompts
    "candidate_templates",
    "pick_prompt",
    # Damage
    "calc_damage",
    "speed_bonus",
    "combo_bonus",
    # Opponent
    "draw_latency",
    "simulate_ai_answer",
    # Scheduling
    "Scheduler",
    "TimerHandle",
    "ManualScheduler",
    "AsyncioScheduler",
    # Turns and Battle
    "next_combo",
    "apply_damage",
    "resolve_winner",
    "judge_turn",
    "BattleEngine",
    "PhaseListener",
    "TurnResultListener",
    "BattleEndListener",
]
