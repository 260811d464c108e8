"""Damage calculation for correct answers.

``calc_damage`` is a pure function of its arguments: the same remaining
time, streak and rules always give the same breakdown. Callers pass
``DamageBreakdown.zero()`` directly for incorrect answers.
"""

from __future__ import annotations

import math

from vocab_battle.core.constants import COMBO_CAP, COMBO_MIN
from vocab_battle.models.battle import DEFAULT_DAMAGE_RULES, DamageBreakdown, DamageRules


def speed_bonus(remaining_sec: float, rules: DamageRules = DEFAULT_DAMAGE_RULES) -> int:
    """Bonus for time left on the clock.

    Non-decreasing in ``remaining_sec``; zero when no time is left.
    """
    if remaining_sec <= 0:
        return 0
    return min(rules.speed_bonus_max, math.floor(remaining_sec * rules.speed_bonus_per_sec))


def combo_bonus(combo_streak: int, rules: DamageRules = DEFAULT_DAMAGE_RULES) -> int:
    """Bonus for consecutive correct answers.

    The first correct answer of a streak earns nothing extra. Non-decreasing
    in ``combo_streak``, which is clamped to the combo range first.
    """
    streak = max(COMBO_MIN, min(COMBO_CAP, combo_streak))
    return min(rules.combo_bonus_max, max(0, streak - 1) * rules.combo_bonus_per_streak)


def calc_damage(
    remaining_sec: float,
    combo_streak: int,
    *,
    rules: DamageRules = DEFAULT_DAMAGE_RULES,
) -> DamageBreakdown:
    """Damage dealt by a correct answer.

    Args:
        remaining_sec: Seconds left when the answer landed.
        combo_streak: Streak including this answer.
        rules: Damage weights.

    Returns:
        DamageBreakdown whose total is at least ``rules.base_damage``.

    Example:
        >>> calc_damage(4.0, 1).total
        14
    """
    base = rules.base_damage
    speed = speed_bonus(remaining_sec, rules)
    combo = combo_bonus(combo_streak, rules)
    return DamageBreakdown(
        base=base,
        speed_bonus=speed,
        combo_bonus=combo,
        total=base + speed + combo,
    )


__all__ = [
    "speed_bonus",
    "combo_bonus",
    "calc_damage",
]
