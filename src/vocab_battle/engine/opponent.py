"""AI opponent simulation.

The opponent is modelled with two independent draws. A knowledge draw,
weighted by ``accuracy``, decides whether it knows an answer from its
vocabulary-capped pool. A timing draw gives its answer latency. An answer
counts only if it exists and lands inside the prompt's time limit.
"""

from __future__ import annotations

import random

from vocab_battle.core.constants import MIN_AI_ANSWER_SEC
from vocab_battle.core.logging import get_logger
from vocab_battle.engine.dictionary import Dictionary, get_dictionary
from vocab_battle.models.battle import AIAnswer, AIProfile, Prompt


logger = get_logger(__name__)


def draw_latency(profile: AIProfile, rng: random.Random) -> float:
    """Answer latency: base time plus uniform jitter, floored at 0.2s."""
    jitter = (rng.random() * 2 - 1) * profile.jitter_sec
    return max(MIN_AI_ANSWER_SEC, profile.base_answer_sec + jitter)


def simulate_ai_answer(
    profile: AIProfile,
    prompt: Prompt,
    *,
    rng: random.Random,
    dictionary: Dictionary | None = None,
) -> AIAnswer:
    """Simulate the opponent's answer to a prompt.

    Args:
        profile: Opponent profile for the current difficulty.
        prompt: Prompt being answered.
        rng: Random source for both draws.
        dictionary: Catalog to answer from, defaults to the bundled one.

    Returns:
        AIAnswer with the chosen word (if any), latency and correctness.
    """
    dictionary = dictionary or get_dictionary()

    knows_answer = rng.random() < profile.accuracy
    word = None
    if knows_answer:
        pool = dictionary.eligible_words_for_prompt(prompt, profile.vocab_level_max)
        if pool:
            word = rng.choice(pool)

    latency = draw_latency(profile, rng)
    in_time = latency <= prompt.time_limit_sec
    answer = AIAnswer(
        word=word,
        latency_sec=latency,
        knows_answer=knows_answer,
        in_time=in_time,
        correct=word is not None and in_time,
        remaining_sec=max(0.0, prompt.time_limit_sec - latency),
    )

    logger.debug(
        "AI answer simulated",
        opponent=profile.name,
        knows_answer=knows_answer,
        word=word.text if word else None,
        latency_sec=round(latency, 3),
        correct=answer.correct,
    )
    return answer


__all__ = [
    "draw_latency",
    "simulate_ai_answer",
]
