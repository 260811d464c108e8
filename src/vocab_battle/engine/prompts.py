"""Prompt selection.

Each call draws one template valid for the difficulty and wraps it in a
fresh ``Prompt`` with a new id, so a repeated template still reads as a
new turn.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from uuid import UUID

from vocab_battle.core.exceptions import PromptPoolEmptyError
from vocab_battle.core.logging import get_logger
from vocab_battle.models.battle import Prompt
from vocab_battle.models.catalog import PromptTemplate


logger = get_logger(__name__)


def candidate_templates(
    difficulty: int,
    templates: Sequence[PromptTemplate] | None = None,
) -> list[PromptTemplate]:
    """Templates that may be picked at ``difficulty``, in catalog order."""
    if templates is None:
        from vocab_battle.data import PROMPT_TEMPLATES

        templates = PROMPT_TEMPLATES
    return [t for t in templates if t.is_valid_for(difficulty)]


def pick_prompt(
    difficulty: int,
    time_limit_sec: float,
    *,
    templates: Sequence[PromptTemplate] | None = None,
    rng: random.Random | None = None,
) -> Prompt:
    """Draw a prompt for one turn.

    Args:
        difficulty: Difficulty level to pick for.
        time_limit_sec: Answer window, normally the AI profile's time limit.
        templates: Template pool, defaults to the bundled catalog.
        rng: Random source; a fresh unseeded generator is used when omitted.

    Returns:
        A new Prompt with a unique id.

    Raises:
        PromptPoolEmptyError: If no template is valid for ``difficulty``.
    """
    pool = candidate_templates(difficulty, templates)
    if not pool:
        raise PromptPoolEmptyError(
            "No prompt template available for difficulty",
            difficulty=difficulty,
        )

    rng = rng or random.Random()
    template = rng.choice(pool)
    prompt = Prompt(
        id=UUID(int=rng.getrandbits(128), version=4),
        template_id=template.id,
        description=template.description,
        time_limit_sec=time_limit_sec,
        requires_parts=template.requires_parts,
        difficulty=difficulty,
    )

    logger.debug(
        "Prompt picked",
        template_id=template.id,
        difficulty=difficulty,
        time_limit_sec=time_limit_sec,
        candidates=len(pool),
    )
    return prompt


__all__ = [
    "candidate_templates",
    "pick_prompt",
]
