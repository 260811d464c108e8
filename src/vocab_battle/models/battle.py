"""Pydantic V2 schemas for prompts, damage, turns and battle state.

Prompts, damage breakdowns and turn results are produced fresh each turn
and never mutated, so they are frozen. ``BattleState`` is the one mutable
model: it is owned by ``BattleEngine`` and changed only by its phase
transitions.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vocab_battle.core.constants import (
    COMBO_CAP,
    MAX_DIFFICULTY,
    MAX_VOCAB_LEVEL,
    MIN_DIFFICULTY,
    NO_ANSWER_LABEL,
    WRONG_ANSWER_LABEL,
)
from vocab_battle.models.catalog import Word
from vocab_battle.models.enums import TurnPhase, Winner


DifficultyLevel = Annotated[int, Field(ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)]
ComboStreak = Annotated[int, Field(ge=0, le=COMBO_CAP)]


class Prompt(BaseModel):
    """A per-turn challenge.

    The id is fresh on every pick, even when the template repeats, so
    callers can detect a new turn by identity.

    Attributes:
        id: Unique id of this prompt instance.
        template_id: Template the prompt was drawn from.
        description: Challenge text.
        time_limit_sec: Seconds allowed to answer.
        requires_parts: Part ids every valid answer must contain.
        difficulty: Difficulty the prompt was picked for.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(default_factory=uuid4, description="Prompt instance id")
    template_id: str = Field(description="Source template id")
    description: str = Field(description="Challenge text")
    time_limit_sec: float = Field(gt=0, description="Answer window in seconds")
    requires_parts: frozenset[str] = Field(description="Required part ids")
    difficulty: DifficultyLevel


class AIProfile(BaseModel):
    """Per-difficulty opponent tuning.

    Knowledge (``accuracy``, ``vocab_level_max``) and speed
    (``base_answer_sec``, ``jitter_sec``) are tuned independently.

    Attributes:
        name: Opponent display name.
        max_hp: Opponent maximum HP.
        accuracy: Probability the opponent knows an answer.
        vocab_level_max: Highest vocabulary level it may answer with.
        base_answer_sec: Mean answer latency.
        jitter_sec: Maximum deviation from the mean latency.
        time_limit_sec: Answer window for prompts at this difficulty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Display name")
    max_hp: int = Field(ge=1, description="Maximum HP")
    accuracy: float = Field(ge=0.0, le=1.0, description="Knowledge probability")
    vocab_level_max: int = Field(ge=1, le=MAX_VOCAB_LEVEL, description="Vocabulary ceiling")
    base_answer_sec: float = Field(gt=0, description="Mean latency")
    jitter_sec: float = Field(default=0.0, ge=0, description="Latency jitter")
    time_limit_sec: float = Field(gt=0, description="Answer window")


class DamageRules(BaseModel):
    """Immutable damage weights consumed by ``calc_damage``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_damage: int = Field(default=10, ge=0)
    speed_bonus_per_sec: float = Field(default=1.0, ge=0)
    speed_bonus_max: int = Field(default=10, ge=0)
    combo_bonus_per_streak: int = Field(default=2, ge=0)
    combo_bonus_max: int = Field(default=10, ge=0)


DEFAULT_DAMAGE_RULES = DamageRules()


class DamageBreakdown(BaseModel):
    """Damage dealt by one side in one turn.

    Attributes:
        base: Flat damage for a correct answer.
        speed_bonus: Bonus for time left on the clock.
        combo_bonus: Bonus for the current streak.
        total: Sum of the three components.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base: int = Field(default=0, ge=0)
    speed_bonus: int = Field(default=0, ge=0)
    combo_bonus: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_total(self) -> "DamageBreakdown":
        """Ensure total equals the sum of its components."""
        expected = self.base + self.speed_bonus + self.combo_bonus
        if self.total != expected:
            raise ValueError(f"total ({self.total}) must equal component sum ({expected})")
        return self

    @classmethod
    def zero(cls) -> "DamageBreakdown":
        """Breakdown for an incorrect or missing answer."""
        return cls()


class AIAnswer(BaseModel):
    """Simulated opponent answer for one prompt.

    Attributes:
        word: Word the opponent chose, if it knew an answer.
        latency_sec: Simulated answer time.
        knows_answer: Outcome of the knowledge draw.
        in_time: Whether the latency fits the prompt's time limit.
        correct: True only when a word was chosen and it landed in time.
        remaining_sec: Time left on the clock when it answered.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    word: Word | None = None
    latency_sec: float = Field(gt=0)
    knows_answer: bool
    in_time: bool
    correct: bool
    remaining_sec: float = Field(ge=0)


class TurnResult(BaseModel):
    """Outcome of judging one turn.

    Produced once by the judge step and read-only thereafter. It carries
    enough to update per-part and per-word progress counters.

    Attributes:
        turn_index: Turn this result belongs to.
        prompt: Prompt that was answered.
        player_submitted: False when the countdown expired without a submit.
        player_word_text: Text the player composed, empty when nothing was submitted.
        player_word: Catalog word matching the composition, if any.
        ai_word: Word the opponent answered with, if any.
        ai_latency_sec: Simulated opponent answer time.
        player_correct: Whether the player's answer satisfied the prompt.
        ai_correct: Whether the opponent's answer counted.
        player_damage_to_ai: Damage dealt by the player.
        ai_damage_to_player: Damage dealt by the opponent.
        player_combo: Player streak after this turn.
        ai_combo: Opponent streak after this turn.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    turn_index: int = Field(ge=1)
    prompt: Prompt
    player_submitted: bool
    player_word_text: str = ""
    player_word: Word | None = None
    ai_word: Word | None = None
    ai_latency_sec: float = Field(default=0.0, ge=0)
    player_correct: bool
    ai_correct: bool
    player_damage_to_ai: DamageBreakdown = Field(default_factory=DamageBreakdown.zero)
    ai_damage_to_player: DamageBreakdown = Field(default_factory=DamageBreakdown.zero)
    player_combo: ComboStreak = 0
    ai_combo: ComboStreak = 0

    @property
    def ai_word_text(self) -> str:
        """Text of the word the opponent chose, empty when it knew none.

        A word chosen after the time limit is still shown; ``ai_correct`` is
        what decides whether it counted.
        """
        if self.ai_word is None:
            return ""
        return self.ai_word.text

    @property
    def player_display_text(self) -> str:
        """Player answer label for result panels."""
        return self.player_word_text or NO_ANSWER_LABEL

    @property
    def ai_display_text(self) -> str:
        """Opponent answer label for result panels."""
        return self.ai_word_text or WRONG_ANSWER_LABEL

    @property
    def involved_part_ids(self) -> frozenset[str]:
        """Parts the player saw this turn: the prompt's and their word's."""
        parts = set(self.prompt.requires_parts)
        if self.player_word is not None:
            parts.update(self.player_word.parts)
        return frozenset(parts)


class BattleState(BaseModel):
    """Mutable state of one battle, owned by the battle engine.

    Attributes:
        battle_id: Unique battle identifier.
        difficulty: Difficulty the battle runs at.
        player_hp: Player current HP.
        player_max_hp: Player maximum HP.
        ai_hp: Opponent current HP.
        ai_max_hp: Opponent maximum HP.
        player_combo: Player streak.
        ai_combo: Opponent streak.
        turn_index: Current turn, starting at 1.
        phase: Current phase, or None before a battle starts.
        selected_parts: Part ids the player has tapped, in order.
        prompt: Prompt for the current turn.
        last_result: Most recent judged turn.
        winner: Outcome once the battle has ended.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    battle_id: UUID = Field(default_factory=uuid4)
    difficulty: DifficultyLevel
    player_hp: int = Field(ge=0)
    player_max_hp: int = Field(ge=1)
    ai_hp: int = Field(ge=0)
    ai_max_hp: int = Field(ge=1)
    player_combo: ComboStreak = 0
    ai_combo: ComboStreak = 0
    turn_index: int = Field(default=1, ge=1)
    phase: TurnPhase | None = None
    selected_parts: list[str] = Field(default_factory=list)
    prompt: Prompt | None = None
    last_result: TurnResult | None = None
    winner: Winner | None = None

    @property
    def is_active(self) -> bool:
        """True while a battle is running."""
        return self.phase is not None and self.phase is not TurnPhase.END

    @property
    def player_hp_ratio(self) -> float:
        """Player HP as a fraction of maximum, clamped to [0, 1]."""
        return max(0.0, min(1.0, self.player_hp / self.player_max_hp))

    @property
    def ai_hp_ratio(self) -> float:
        """Opponent HP as a fraction of maximum, clamped to [0, 1]."""
        return max(0.0, min(1.0, self.ai_hp / self.ai_max_hp))


__all__ = [
    "Prompt",
    "AIProfile",
    "DamageRules",
    "DEFAULT_DAMAGE_RULES",
    "DamageBreakdown",
    "AIAnswer",
    "TurnResult",
    "BattleState",
]
