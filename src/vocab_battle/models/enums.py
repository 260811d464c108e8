"""Enumeration types for the vocab battle engine."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class PartType(StrEnum):
    """Position a word part takes inside a word."""

    PREFIX = "prefix"
    ROOT = "root"
    SUFFIX = "suffix"


class TurnPhase(StrEnum):
    """Phases of a battle turn.

    A turn cycles strictly through intro, answer, judge and hp, then
    either returns to intro or stops at end.
    """

    INTRO = "intro"
    """New prompt shown, answer window not yet open."""

    ANSWER = "answer"
    """Countdown running; the only phase accepting player input."""

    JUDGE = "judge"
    """Both answers judged, result on display."""

    HP = "hp"
    """Damage applied to both sides."""

    END = "end"
    """Battle over."""

    @property
    def accepts_input(self) -> bool:
        """Whether the player may edit or submit a selection."""
        return self is TurnPhase.ANSWER


class Winner(StrEnum):
    """Outcome of a finished battle."""

    PLAYER = "player"
    AI = "ai"
    DRAW = "draw"


class Difficulty(IntEnum):
    """Difficulty levels, each mapped to one AI profile."""

    NOVICE = 1
    EASY = 2
    NORMAL = 3
    HARD = 4
    MASTER = 5


__all__ = [
    "PartType",
    "TurnPhase",
    "Winner",
    "Difficulty",
]
