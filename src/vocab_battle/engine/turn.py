"""Pure turn-judging helpers.

``judge_turn`` performs the whole judge step: player validation, AI
simulation, combo updates and damage. It does this in one call and
mutates nothing; ``BattleEngine`` stores the result and applies it.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from vocab_battle.core.constants import COMBO_CAP, COMBO_MIN
from vocab_battle.engine.damage import calc_damage
from vocab_battle.engine.dictionary import Dictionary, get_dictionary, validate_against_prompt
from vocab_battle.engine.opponent import simulate_ai_answer
from vocab_battle.models.battle import (
    DEFAULT_DAMAGE_RULES,
    AIProfile,
    DamageBreakdown,
    DamageRules,
    Prompt,
    TurnResult,
)
from vocab_battle.models.enums import Winner


def next_combo(current: int, correct: bool) -> int:
    """Streak after one answer: +1 (capped) when correct, reset otherwise."""
    if not correct:
        return COMBO_MIN
    return min(COMBO_CAP, max(COMBO_MIN, current) + 1)


def apply_damage(hp: int, damage: int) -> int:
    """HP after taking ``damage``, never below zero."""
    return max(0, hp - max(0, damage))


def resolve_winner(player_hp: int, ai_hp: int) -> Winner | None:
    """Battle outcome, or None while both sides stand.

    A simultaneous knockout is a draw.
    """
    player_down = player_hp <= 0
    ai_down = ai_hp <= 0
    if player_down and ai_down:
        return Winner.DRAW
    if ai_down:
        return Winner.PLAYER
    if player_down:
        return Winner.AI
    return None


def judge_turn(
    *,
    turn_index: int,
    prompt: Prompt,
    selected_parts: Sequence[str],
    submitted: bool,
    time_left_sec: float,
    player_combo: int,
    ai_combo: int,
    profile: AIProfile,
    rng: random.Random,
    dictionary: Dictionary | None = None,
    rules: DamageRules = DEFAULT_DAMAGE_RULES,
) -> TurnResult:
    """Judge both sides of one turn.

    Args:
        turn_index: Current turn number.
        prompt: Prompt being answered.
        selected_parts: Player's part ids in selection order.
        submitted: False when the countdown ran out; the selection is then ignored.
        time_left_sec: Player's remaining time at the moment of judging.
        player_combo: Player streak before this turn.
        ai_combo: Opponent streak before this turn.
        profile: Opponent profile.
        rng: Random source for the opponent simulation.
        dictionary: Catalog, defaults to the bundled one.
        rules: Damage weights.

    Returns:
        The TurnResult, including both updated streaks.
    """
    dictionary = dictionary or get_dictionary()

    player_text = dictionary.build_word_from_parts(selected_parts) if submitted else ""
    player_word = dictionary.find_word(player_text) if player_text else None
    player_correct = validate_against_prompt(player_word, prompt)

    ai_answer = simulate_ai_answer(profile, prompt, rng=rng, dictionary=dictionary)
    ai_correct = ai_answer.correct

    new_player_combo = next_combo(player_combo, player_correct)
    new_ai_combo = next_combo(ai_combo, ai_correct)

    player_damage = (
        calc_damage(max(0.0, time_left_sec), new_player_combo, rules=rules)
        if player_correct
        else DamageBreakdown.zero()
    )
    ai_damage = (
        calc_damage(ai_answer.remaining_sec, new_ai_combo, rules=rules)
        if ai_correct
        else DamageBreakdown.zero()
    )

    return TurnResult(
        turn_index=turn_index,
        prompt=prompt,
        player_submitted=submitted,
        player_word_text=player_text,
        player_word=player_word,
        ai_word=ai_answer.word,
        ai_latency_sec=ai_answer.latency_sec,
        player_correct=player_correct,
        ai_correct=ai_correct,
        player_damage_to_ai=player_damage,
        ai_damage_to_player=ai_damage,
        player_combo=new_player_combo,
        ai_combo=new_ai_combo,
    )


__all__ = [
    "next_combo",
    "apply_damage",
    "resolve_winner",
    "judge_turn",
]
