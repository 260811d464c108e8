"""Word composition, lookup and prompt validation.

``Dictionary`` indexes the part and word catalogs and verifies their
integrity once at construction. Lookups never raise: an unknown part id,
an unmatched composition or an empty selection all degrade to "no word",
which ``validate_against_prompt`` reports as ``False``.

Example:
    >>> from vocab_battle.engine.dictionary import build_word_from_parts, find_word
    >>> find_word(build_word_from_parts(["pre", "dict"])).id
    'w_predict'
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from vocab_battle.core.exceptions import CatalogError
from vocab_battle.core.logging import get_logger
from vocab_battle.models.battle import Prompt
from vocab_battle.models.catalog import Part, PromptTemplate, Word, normalize_text
from vocab_battle.models.enums import PartType


logger = get_logger(__name__)


class Dictionary:
    """Indexed part and word catalogs.

    Attributes:
        parts: Parts in catalog order.
        words: Words in catalog order.
    """

    def __init__(self, parts: Iterable[Part], words: Iterable[Word]) -> None:
        """Index the catalogs and check their integrity.

        Args:
            parts: Part catalog.
            words: Word catalog.

        Raises:
            CatalogError: On duplicate ids or spellings, dangling part
                references, or a word whose parts do not spell it.
        """
        self.parts: tuple[Part, ...] = tuple(parts)
        self.words: tuple[Word, ...] = tuple(words)
        self._parts_by_id: dict[str, Part] = {}
        self._words_by_id: dict[str, Word] = {}
        self._words_by_text: dict[str, Word] = {}

        for part in self.parts:
            if part.id in self._parts_by_id:
                raise CatalogError("Duplicate part id", item_id=part.id)
            self._parts_by_id[part.id] = part

        for word in self.words:
            self._index_word(word)

        logger.debug(
            "Dictionary loaded",
            parts=len(self.parts),
            words=len(self.words),
        )

    def _index_word(self, word: Word) -> None:
        if word.id in self._words_by_id:
            raise CatalogError("Duplicate word id", item_id=word.id)
        for part_id in word.parts:
            if part_id not in self._parts_by_id:
                raise CatalogError(
                    "Word references an unknown part",
                    item_id=word.id,
                    part_id=part_id,
                )
        composed = self.build_word_from_parts(word.parts)
        if composed != word.text:
            raise CatalogError(
                f"Parts compose to {composed!r}, not {word.text!r}",
                item_id=word.id,
            )
        if word.text in self._words_by_text:
            raise CatalogError(
                "Duplicate word spelling",
                item_id=word.id,
                details={"text": word.text},
            )
        self._words_by_id[word.id] = word
        self._words_by_text[word.text] = word

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_part(self, part_id: str) -> Part | None:
        """Part by id, or None."""
        return self._parts_by_id.get(part_id)

    def get_word(self, word_id: str) -> Word | None:
        """Word by id, or None."""
        return self._words_by_id.get(word_id)

    def has_part(self, part_id: str) -> bool:
        """Whether ``part_id`` exists in the catalog."""
        return part_id in self._parts_by_id

    def parts_of_type(self, part_type: PartType) -> list[Part]:
        """Parts of one type, in catalog order."""
        return [p for p in self.parts if p.type == part_type]

    # -------------------------------------------------------------------------
    # Composition & validation
    # -------------------------------------------------------------------------

    def build_word_from_parts(self, part_ids: Sequence[str]) -> str:
        """Compose a candidate word from parts in the order they were picked.

        Unknown ids contribute the id itself.

        Args:
            part_ids: Part ids in selection order.

        Returns:
            The composed text, empty for an empty selection.
        """
        pieces = []
        for part_id in part_ids:
            part = self._parts_by_id.get(part_id)
            pieces.append(part.text if part is not None else part_id)
        return normalize_text("".join(pieces))

    def find_word(self, text: str) -> Word | None:
        """Look up a catalog word by its canonical spelling.

        Args:
            text: Candidate spelling.

        Returns:
            The matching Word, or None.
        """
        if not text:
            return None
        return self._words_by_text.get(normalize_text(text))

    def eligible_words_for_prompt(
        self,
        prompt: Prompt | PromptTemplate,
        vocab_level_max: int,
    ) -> list[Word]:
        """Words the AI may answer with.

        Args:
            prompt: Prompt (or template) the answer must satisfy.
            vocab_level_max: Highest vocabulary level allowed.

        Returns:
            Catalog words at or below the level cap that satisfy the prompt,
            in catalog order.
        """
        return [
            word
            for word in self.words
            if word.vocab_level <= vocab_level_max
            and validate_against_prompt(word, prompt)
        ]

    def check_templates(self, templates: Iterable[PromptTemplate]) -> None:
        """Verify that prompt templates reference known parts and are answerable.

        Args:
            templates: Templates to check.

        Raises:
            CatalogError: On a duplicate id, unknown part or unanswerable template.
        """
        top_level = max((w.vocab_level for w in self.words), default=0)
        seen: set[str] = set()
        for template in templates:
            if template.id in seen:
                raise CatalogError("Duplicate prompt template id", item_id=template.id)
            seen.add(template.id)
            for part_id in sorted(template.requires_parts):
                if not self.has_part(part_id):
                    raise CatalogError(
                        "Prompt template references an unknown part",
                        item_id=template.id,
                        part_id=part_id,
                    )
            if not self.eligible_words_for_prompt(template, top_level):
                raise CatalogError(
                    "Prompt template has no catalog answer",
                    item_id=template.id,
                )


def validate_against_prompt(word: Word | None, prompt: Prompt | PromptTemplate) -> bool:
    """Check whether a word satisfies a prompt.

    Args:
        word: Candidate word, or None when nothing matched.
        prompt: Prompt whose ``requires_parts`` must all appear in the word.

    Returns:
        True only if a word was given and it contains every required part.
    """
    if word is None:
        return False
    return prompt.requires_parts <= word.part_set


# Module-level dictionary over the bundled catalogs
_default_dictionary: Dictionary | None = None


def get_dictionary() -> Dictionary:
    """Dictionary over the bundled catalogs, built on first use."""
    global _default_dictionary  # noqa: PLW0603
    if _default_dictionary is None:
        from vocab_battle.data import PARTS, PROMPT_TEMPLATES, WORDS

        _default_dictionary = Dictionary(PARTS, WORDS)
        _default_dictionary.check_templates(PROMPT_TEMPLATES)
    return _default_dictionary


def build_word_from_parts(part_ids: Sequence[str]) -> str:
    """Compose text from the bundled catalog. See ``Dictionary.build_word_from_parts``."""
    return get_dictionary().build_word_from_parts(part_ids)


def find_word(text: str) -> Word | None:
    """Look up a word in the bundled catalog. See ``Dictionary.find_word``."""
    return get_dictionary().find_word(text)


def eligible_words_for_prompt(prompt: Prompt, vocab_level_max: int) -> list[Word]:
    """AI answer pool from the bundled catalog."""
    return get_dictionary().eligible_words_for_prompt(prompt, vocab_level_max)


__all__ = [
    "Dictionary",
    "get_dictionary",
    "build_word_from_parts",
    "find_word",
    "validate_against_prompt",
    "eligible_words_for_prompt",
]
