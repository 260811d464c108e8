"""Pydantic V2 schemas for the static vocabulary catalogs.

Parts, words and prompt templates are authored once and never mutated,
so every model here is frozen. Cross-references between catalogs (a word's
part ids, a template's required parts) are checked by
``vocab_battle.engine.dictionary.Dictionary`` when the catalogs are loaded.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from vocab_battle.core.constants import MAX_DIFFICULTY, MAX_VOCAB_LEVEL, MIN_DIFFICULTY
from vocab_battle.models.enums import PartType


def normalize_text(text: str) -> str:
    """Canonical form used for dictionary lookups."""
    return text.strip().lower()


class Part(BaseModel):
    """An atomic sub-word unit.

    Attributes:
        id: Unique part identifier.
        type: Whether the part is a prefix, root or suffix.
        text: Surface text contributed when the part is composed.
        meaning: Short gloss shown alongside the part.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Unique part id")
    type: PartType = Field(description="Part position")
    text: str = Field(min_length=1, description="Surface text")
    meaning: str = Field(default="", description="Short gloss")

    @field_validator("text", mode="after")
    @classmethod
    def lowercase_text(cls, value: str) -> str:
        """Store surface text in canonical form."""
        return normalize_text(value)


class Word(BaseModel):
    """A whole word composed of catalog parts.

    Attributes:
        id: Unique word identifier.
        text: Canonical spelling, equal to its parts composed in order.
        parts: Ordered part ids.
        vocab_level: Vocabulary level from 1 (common) to 5 (rare).
        meaning: Short gloss.
        tags: Free-form labels (themes, word class).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Unique word id")
    text: str = Field(min_length=1, description="Canonical spelling")
    parts: tuple[str, ...] = Field(min_length=1, description="Ordered part ids")
    vocab_level: Annotated[int, Field(ge=1, le=MAX_VOCAB_LEVEL)] = 1
    meaning: str = Field(default="", description="Short gloss")
    tags: frozenset[str] = Field(default_factory=frozenset, description="Labels")

    @field_validator("text", mode="after")
    @classmethod
    def lowercase_text(cls, value: str) -> str:
        """Store spelling in canonical form."""
        return normalize_text(value)

    @property
    def part_set(self) -> frozenset[str]:
        """Part ids as a set, for constraint matching."""
        return frozenset(self.parts)


class PromptTemplate(BaseModel):
    """Authoring entry that prompts are drawn from.

    Attributes:
        id: Unique template identifier.
        description: Challenge text shown to the player.
        requires_parts: Part ids every valid answer must contain.
        min_difficulty: Lowest difficulty this template appears at.
        max_difficulty: Highest difficulty this template appears at.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Unique template id")
    description: str = Field(min_length=1, description="Challenge text")
    requires_parts: frozenset[str] = Field(min_length=1, description="Required part ids")
    min_difficulty: Annotated[int, Field(ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)] = MIN_DIFFICULTY
    max_difficulty: Annotated[int, Field(ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)] = MAX_DIFFICULTY

    @model_validator(mode="after")
    def validate_difficulty_range(self) -> "PromptTemplate":
        """Ensure the difficulty range is not inverted."""
        if self.min_difficulty > self.max_difficulty:
            raise ValueError(
                f"min_difficulty ({self.min_difficulty}) exceeds "
                f"max_difficulty ({self.max_difficulty})"
            )
        return self

    def is_valid_for(self, difficulty: int) -> bool:
        """Check whether this template may be picked at ``difficulty``."""
        return self.min_difficulty <= difficulty <= self.max_difficulty


__all__ = [
    "normalize_text",
    "Part",
    "Word",
    "PromptTemplate",
]
