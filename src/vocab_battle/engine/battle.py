"""Turn/phase state machine for a vocab battle.

A battle cycles through ``intro -> answer -> judge -> hp`` until one side's
HP reaches zero, then stops at ``end``. The engine owns a ``BattleState``
and changes it only inside its phase-entry steps:

- intro: clear the selection, pick a prompt, reset the countdown.
- answer: accept player input; a deadline timer judges "no submission".
- judge: judge both sides once, update combos, publish the TurnResult.
- hp: apply both damage totals, then end the battle or start the next turn.

Every phase entry cancels the pending timer before scheduling the next
one. Each timer callback also carries the phase token it was issued for
and does nothing if the engine has moved on. A turn is therefore judged
exactly once, even when a submit races the deadline.

Example:
    >>> from vocab_battle.engine import BattleEngine, ManualScheduler
    >>> scheduler = ManualScheduler()
    >>> engine = BattleEngine(scheduler=scheduler, seed=7)
    >>> engine.start_battle(difficulty=2)
    >>> scheduler.advance(engine.intro_delay_sec)
    >>> engine.phase
    <TurnPhase.ANSWER: 'answer'>
"""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from typing import Callable, TypeVar

from vocab_battle.core.config import BattleSettings, get_settings
from vocab_battle.core.exceptions import InvalidGameStateError
from vocab_battle.core.logging import bind_context, get_logger, unbind_context
from vocab_battle.data.profiles import AI_PROFILES, get_ai_profile
from vocab_battle.engine.dictionary import Dictionary, get_dictionary
from vocab_battle.engine.prompts import pick_prompt
from vocab_battle.engine.scheduler import Scheduler, TimerHandle
from vocab_battle.engine.turn import apply_damage, judge_turn, resolve_winner
from vocab_battle.models.battle import (
    AIProfile,
    BattleState,
    DamageRules,
    Prompt,
    TurnResult,
)
from vocab_battle.models.catalog import PromptTemplate
from vocab_battle.models.enums import TurnPhase, Winner


logger = get_logger(__name__)

PhaseListener = Callable[[TurnPhase], None]
TurnResultListener = Callable[[TurnResult], None]
BattleEndListener = Callable[[Winner], None]

_T = TypeVar("_T")

_CONTEXT_KEYS = ("battle_id", "difficulty")


class BattleEngine:
    """Timer-driven battle state machine.

    Attributes:
        intro_delay_sec: Duration of the intro phase.
        judge_delay_sec: Duration of the judge phase.
        hp_delay_sec: Duration of the hp phase.
    """

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        seed: int | None = None,
        difficulty: int | None = None,
        player_max_hp: int | None = None,
        profiles: Mapping[int, AIProfile] | None = None,
        dictionary: Dictionary | None = None,
        templates: Sequence[PromptTemplate] | None = None,
        settings: BattleSettings | None = None,
        damage_rules: DamageRules | None = None,
    ) -> None:
        """Initialize the engine in its pre-battle state.

        Args:
            scheduler: Clock and timer source for phase transitions.
            rng: Random source for prompts and the opponent. Takes precedence over ``seed``.
            seed: Seed for a private random source when ``rng`` is omitted.
            difficulty: Starting difficulty, defaults to the configured one.
            player_max_hp: Player maximum HP, defaults to the configured one.
            profiles: Opponent profile table keyed by difficulty.
            dictionary: Part and word catalog.
            templates: Prompt template pool.
            settings: Battle pacing settings, defaults to ``get_settings().battle``.
            damage_rules: Damage weights, defaults to ``get_settings().damage``.
        """
        app_settings = get_settings() if settings is None or damage_rules is None else None
        battle_settings = settings or app_settings.battle  # type: ignore[union-attr]

        self._scheduler = scheduler
        self._rng = rng or random.Random(seed)
        self._profiles = profiles if profiles is not None else AI_PROFILES
        self._dictionary = dictionary or get_dictionary()
        self._templates = templates
        self._damage_rules = damage_rules or app_settings.damage.to_rules()  # type: ignore[union-attr]

        self.intro_delay_sec = battle_settings.intro_delay_sec
        self.judge_delay_sec = battle_settings.judge_delay_sec
        self.hp_delay_sec = battle_settings.hp_delay_sec

        max_hp = battle_settings.player_max_hp if player_max_hp is None else player_max_hp
        start_difficulty = battle_settings.default_difficulty if difficulty is None else difficulty
        profile = get_ai_profile(start_difficulty, self._profiles)
        self._state = BattleState(
            difficulty=start_difficulty,
            player_hp=max_hp,
            player_max_hp=max_hp,
            ai_hp=profile.max_hp,
            ai_max_hp=profile.max_hp,
        )

        self._timer: TimerHandle | None = None
        self._epoch = 0
        self._answer_started_at: float | None = None
        self._time_left_sec = 0.0

        self._phase_listeners: list[PhaseListener] = []
        self._turn_result_listeners: list[TurnResultListener] = []
        self._battle_end_listeners: list[BattleEndListener] = []

        logger.info(
            "BattleEngine initialized",
            difficulty=start_difficulty,
            player_max_hp=max_hp,
        )

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def state(self) -> BattleState:
        """Snapshot of the battle state."""
        return self._state.model_copy(deep=True)

    @property
    def phase(self) -> TurnPhase | None:
        """Current phase, or None before a battle starts or after abandoning one."""
        return self._state.phase

    @property
    def accepts_input(self) -> bool:
        """Whether the answer window is open for selection and submit."""
        phase = self._state.phase
        return phase is not None and phase.accepts_input

    @property
    def difficulty(self) -> int:
        """Difficulty of the current or next battle."""
        return self._state.difficulty

    @property
    def profile(self) -> AIProfile:
        """Opponent profile for the current difficulty."""
        return get_ai_profile(self._state.difficulty, self._profiles)

    @property
    def prompt(self) -> Prompt | None:
        """Prompt of the current turn."""
        return self._state.prompt

    @property
    def selected_parts(self) -> tuple[str, ...]:
        """Player's part ids in selection order."""
        return tuple(self._state.selected_parts)

    @property
    def built_word(self) -> str:
        """Live preview of the composed selection."""
        return self._dictionary.build_word_from_parts(self._state.selected_parts)

    @property
    def time_left_sec(self) -> float:
        """Seconds left on the countdown, never negative.

        Runs only during ``answer``; frozen at the judged value afterwards.
        """
        if self._state.phase is TurnPhase.ANSWER and self._answer_started_at is not None:
            limit = self._state.prompt.time_limit_sec if self._state.prompt else 0.0
            elapsed = self._scheduler.now() - self._answer_started_at
            return max(0.0, limit - elapsed)
        return max(0.0, self._time_left_sec)

    @property
    def last_result(self) -> TurnResult | None:
        """Most recently judged turn."""
        return self._state.last_result

    @property
    def winner(self) -> Winner | None:
        """Outcome once the battle has ended."""
        return self._state.winner

    @property
    def is_active(self) -> bool:
        """True while a battle is running."""
        return self._state.is_active

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_phase_listener(self, listener: PhaseListener) -> None:
        """Call ``listener(phase)`` on every phase entry."""
        self._phase_listeners.append(listener)

    def add_turn_result_listener(self, listener: TurnResultListener) -> None:
        """Call ``listener(result)`` once per judged turn."""
        self._turn_result_listeners.append(listener)

    def add_battle_end_listener(self, listener: BattleEndListener) -> None:
        """Call ``listener(winner)`` when the battle ends."""
        self._battle_end_listeners.append(listener)

    def _emit(self, listeners: list[Callable[[_T], None]], payload: _T, event: str) -> None:
        for listener in listeners:
            try:
                listener(payload)
            except Exception:
                logger.exception("Battle listener failed", event_type=event)

    # =========================================================================
    # Battle lifecycle
    # =========================================================================

    def set_difficulty(self, difficulty: int) -> AIProfile:
        """Change difficulty between battles.

        The opponent's maximum and current HP are recomputed from the new
        profile.

        Args:
            difficulty: New difficulty level.

        Returns:
            The profile for the new difficulty.

        Raises:
            InvalidGameStateError: If a battle is running or the difficulty is unknown.
        """
        if self._state.is_active:
            raise InvalidGameStateError(
                "Cannot change difficulty during a battle",
                current_state=str(self._state.phase),
                expected_states=["idle", TurnPhase.END.value],
            )
        profile = get_ai_profile(difficulty, self._profiles)
        self._state.difficulty = difficulty
        self._state.ai_max_hp = profile.max_hp
        self._state.ai_hp = profile.max_hp
        logger.info("Difficulty changed", difficulty=difficulty, ai_max_hp=profile.max_hp)
        return profile

    def start_battle(self, difficulty: int | None = None) -> None:
        """Start a new battle, discarding any battle in progress.

        Args:
            difficulty: Difficulty to start at, defaults to the current one.

        Raises:
            InvalidGameStateError: If the difficulty is unknown.
        """
        self._cancel_timer()
        target = self._state.difficulty if difficulty is None else difficulty
        profile = get_ai_profile(target, self._profiles)

        self._state = BattleState(
            difficulty=target,
            player_hp=self._state.player_max_hp,
            player_max_hp=self._state.player_max_hp,
            ai_hp=profile.max_hp,
            ai_max_hp=profile.max_hp,
        )
        self._answer_started_at = None
        self._time_left_sec = 0.0

        bind_context(battle_id=str(self._state.battle_id), difficulty=target)
        logger.info(
            "Battle started",
            opponent=profile.name,
            player_hp=self._state.player_hp,
            ai_hp=self._state.ai_hp,
        )
        self._enter_intro()

    def abandon(self) -> None:
        """Stop the battle without a winner and cancel any pending timer."""
        if self._state.phase is None:
            return
        self._cancel_timer()
        self._epoch += 1
        logger.info("Battle abandoned", turn=self._state.turn_index, phase=self._state.phase)
        self._state.phase = None
        self._answer_started_at = None
        unbind_context(*_CONTEXT_KEYS)

    # =========================================================================
    # Player input (answer phase only)
    # =========================================================================

    def add_part(self, part_id: str) -> bool:
        """Append a part to the selection.

        Returns:
            False, with no effect, outside the answer phase.
        """
        if not self.accepts_input:
            return False
        self._state.selected_parts = [*self._state.selected_parts, part_id]
        return True

    def remove_part_at(self, index: int) -> bool:
        """Remove the part at ``index`` from the selection.

        Returns:
            False, with no effect, outside the answer phase or for a bad index.
        """
        if not self.accepts_input:
            return False
        if not 0 <= index < len(self._state.selected_parts):
            return False
        parts = list(self._state.selected_parts)
        del parts[index]
        self._state.selected_parts = parts
        return True

    def clear_selection(self) -> bool:
        """Empty the selection.

        Returns:
            False, with no effect, outside the answer phase.
        """
        if not self.accepts_input:
            return False
        self._state.selected_parts = []
        return True

    def submit(self) -> bool:
        """Submit the current selection and judge the turn.

        Returns:
            False, with no effect, outside the answer phase.
        """
        if not self.accepts_input:
            return False
        self._cancel_timer()
        self._judge(submitted=True)
        return True

    # =========================================================================
    # Timers
    # =========================================================================

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule(self, delay: float, action: Callable[[], None]) -> None:
        token = self._epoch

        def fire() -> None:
            if token != self._epoch:
                logger.debug("Stale timer ignored", token=token, epoch=self._epoch)
                return
            self._timer = None
            action()

        self._timer = self._scheduler.call_later(delay, fire)

    def _set_phase(self, phase: TurnPhase) -> None:
        self._cancel_timer()
        self._epoch += 1
        self._state.phase = phase
        logger.debug("Phase entered", phase=phase.value, turn=self._state.turn_index)

    # =========================================================================
    # Phase entries
    # =========================================================================

    def _enter_intro(self) -> None:
        profile = self.profile
        prompt = pick_prompt(
            self._state.difficulty,
            profile.time_limit_sec,
            templates=self._templates,
            rng=self._rng,
        )
        self._state.selected_parts = []
        self._state.prompt = prompt
        self._answer_started_at = None
        self._time_left_sec = prompt.time_limit_sec

        self._set_phase(TurnPhase.INTRO)
        self._schedule(self.intro_delay_sec, self._enter_answer)
        self._emit(self._phase_listeners, TurnPhase.INTRO, "phase_enter")

    def _enter_answer(self) -> None:
        assert self._state.prompt is not None
        self._answer_started_at = self._scheduler.now()

        self._set_phase(TurnPhase.ANSWER)
        self._schedule(self._state.prompt.time_limit_sec, self._on_answer_timeout)
        self._emit(self._phase_listeners, TurnPhase.ANSWER, "phase_enter")

    def _on_answer_timeout(self) -> None:
        if not self.accepts_input:
            return
        logger.info("Answer window expired", turn=self._state.turn_index)
        self._judge(submitted=False)

    def _judge(self, *, submitted: bool) -> None:
        assert self._state.prompt is not None
        time_left = self.time_left_sec if submitted else 0.0
        self._time_left_sec = time_left
        self._answer_started_at = None

        result = judge_turn(
            turn_index=self._state.turn_index,
            prompt=self._state.prompt,
            selected_parts=self._state.selected_parts,
            submitted=submitted,
            time_left_sec=time_left,
            player_combo=self._state.player_combo,
            ai_combo=self._state.ai_combo,
            profile=self.profile,
            rng=self._rng,
            dictionary=self._dictionary,
            rules=self._damage_rules,
        )
        self._state.player_combo = result.player_combo
        self._state.ai_combo = result.ai_combo
        self._state.last_result = result

        logger.info(
            "Turn judged",
            turn=result.turn_index,
            submitted=submitted,
            player_word=result.player_word_text,
            player_correct=result.player_correct,
            ai_word=result.ai_word_text,
            ai_correct=result.ai_correct,
            player_damage=result.player_damage_to_ai.total,
            ai_damage=result.ai_damage_to_player.total,
        )

        self._set_phase(TurnPhase.JUDGE)
        self._schedule(self.judge_delay_sec, self._enter_hp)
        self._emit(self._phase_listeners, TurnPhase.JUDGE, "phase_enter")
        self._emit(self._turn_result_listeners, result, "turn_result")

    def _enter_hp(self) -> None:
        result = self._state.last_result
        assert result is not None
        self._state.ai_hp = apply_damage(self._state.ai_hp, result.player_damage_to_ai.total)
        self._state.player_hp = apply_damage(
            self._state.player_hp, result.ai_damage_to_player.total
        )
        logger.debug(
            "Damage applied",
            player_hp=self._state.player_hp,
            ai_hp=self._state.ai_hp,
        )

        self._set_phase(TurnPhase.HP)
        self._schedule(self.hp_delay_sec, self._after_hp)
        self._emit(self._phase_listeners, TurnPhase.HP, "phase_enter")

    def _after_hp(self) -> None:
        winner = resolve_winner(self._state.player_hp, self._state.ai_hp)
        if winner is None:
            self._state.turn_index += 1
            self._enter_intro()
            return

        self._state.winner = winner
        self._set_phase(TurnPhase.END)
        logger.info(
            "Battle ended",
            winner=winner.value,
            turns=self._state.turn_index,
            player_hp=self._state.player_hp,
            ai_hp=self._state.ai_hp,
        )
        self._emit(self._phase_listeners, TurnPhase.END, "phase_enter")
        self._emit(self._battle_end_listeners, winner, "battle_end")


__all__ = [
    "BattleEngine",
    "PhaseListener",
    "TurnResultListener",
    "BattleEndListener",
]
