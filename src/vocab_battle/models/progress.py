"""Learning progress counters.

Progress is owned and persisted by the caller. The engine only emits
``TurnResult`` values; ``Progress.record_turn`` folds one of them into a new
progress snapshot without touching any storage.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from vocab_battle.models.battle import TurnResult


class ProgressCounter(BaseModel):
    """Seen/correct/wrong tally for one part or word."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    seen: int = Field(default=0, ge=0)
    correct: int = Field(default=0, ge=0)
    wrong: int = Field(default=0, ge=0)

    @property
    def accuracy(self) -> float:
        """Share of sightings answered correctly, 0.0 when never seen."""
        if self.seen == 0:
            return 0.0
        return self.correct / self.seen

    def record(self, correct: bool) -> "ProgressCounter":
        """Return a counter with one more sighting."""
        return ProgressCounter(
            seen=self.seen + 1,
            correct=self.correct + (1 if correct else 0),
            wrong=self.wrong + (0 if correct else 1),
        )


class Progress(BaseModel):
    """Per-part and per-word progress counters.

    Attributes:
        part: Counters keyed by part id.
        word: Counters keyed by word id.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    part: dict[str, ProgressCounter] = Field(default_factory=dict)
    word: dict[str, ProgressCounter] = Field(default_factory=dict)

    def part_counter(self, part_id: str) -> ProgressCounter:
        """Counter for a part, empty if never seen."""
        return self.part.get(part_id, ProgressCounter())

    def word_counter(self, word_id: str) -> ProgressCounter:
        """Counter for a word, empty if never seen."""
        return self.word.get(word_id, ProgressCounter())

    def record_turn(self, result: TurnResult) -> "Progress":
        """Fold a judged turn into a new progress snapshot.

        The player's matched word, if any, gets one sighting. Every part in
        ``result.involved_part_ids`` gets one sighting, counted once even
        when the prompt and the word share it.

        Args:
            result: The judged turn.

        Returns:
            A new Progress; ``self`` is unchanged.
        """
        correct = result.player_correct
        words = dict(self.word)
        if result.player_word is not None:
            word_id = result.player_word.id
            words[word_id] = self.word_counter(word_id).record(correct)

        parts = dict(self.part)
        for part_id in sorted(result.involved_part_ids):
            parts[part_id] = self.part_counter(part_id).record(correct)

        return Progress(part=parts, word=words)


__all__ = [
    "ProgressCounter",
    "Progress",
]
