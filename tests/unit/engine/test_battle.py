"""Tests for the BattleEngine state machine."""

from __future__ import annotations

from typing import Any

import pytest
import structlog
from pydantic import ValidationError

from vocab_battle.core.exceptions import InvalidGameStateError
from vocab_battle.core.logging import bind_context, clear_context
from vocab_battle.engine.battle import BattleEngine
from vocab_battle.engine.scheduler import ManualScheduler
from vocab_battle.models import DamageRules, TurnPhase, TurnResult, Winner


def _open_answer(engine: BattleEngine, scheduler: ManualScheduler) -> None:
    assert engine.phase is TurnPhase.INTRO
    scheduler.advance(engine.intro_delay_sec)
    assert engine.phase is TurnPhase.ANSWER


def _answer_report(engine: BattleEngine, scheduler: ManualScheduler) -> None:
    _open_answer(engine, scheduler)
    engine.add_part("re")
    engine.add_part("port")
    assert engine.submit() is True


def _finish_turn(engine: BattleEngine, scheduler: ManualScheduler) -> None:
    scheduler.advance(engine.judge_delay_sec)
    scheduler.advance(engine.hp_delay_sec)


class TestInitialState:
    """Tests for the engine before a battle starts."""

    def test_idle(self, engine: BattleEngine) -> None:
        """Test the engine starts idle at full HP."""
        state = engine.state
        assert engine.phase is None
        assert engine.is_active is False
        assert state.player_hp == 50
        assert state.ai_hp == 40
        assert state.ai_max_hp == 40

    def test_input_rejected(self, engine: BattleEngine) -> None:
        """Test input is ignored outside the answer phase."""
        assert engine.add_part("re") is False
        assert engine.remove_part_at(0) is False
        assert engine.clear_selection() is False
        assert engine.submit() is False
        assert engine.selected_parts == ()
        assert engine.accepts_input is False

    def test_zero_difficulty_rejected(self, scheduler: ManualScheduler, battle_settings: Any) -> None:
        """Test an explicit difficulty of 0 is rejected, not replaced by the default."""
        with pytest.raises(InvalidGameStateError):
            BattleEngine(
                scheduler=scheduler,
                difficulty=0,
                settings=battle_settings,
                damage_rules=DamageRules(),
            )

    def test_zero_player_hp_rejected(self, scheduler: ManualScheduler, battle_settings: Any) -> None:
        """Test an explicit player HP of 0 is rejected, not replaced by the default."""
        with pytest.raises(ValidationError):
            BattleEngine(
                scheduler=scheduler,
                player_max_hp=0,
                settings=battle_settings,
                damage_rules=DamageRules(),
            )

    def test_explicit_player_hp(self, scheduler: ManualScheduler, battle_settings: Any) -> None:
        """Test a given player HP overrides the configured one."""
        engine = BattleEngine(
            scheduler=scheduler,
            player_max_hp=1,
            settings=battle_settings,
            damage_rules=DamageRules(),
        )
        assert engine.state.player_max_hp == engine.state.player_hp == 1


class TestStartBattle:
    """Tests for starting a battle."""

    def test_enters_intro(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test a new battle opens on turn 1 in intro."""
        engine.start_battle()

        state = engine.state
        assert engine.phase is TurnPhase.INTRO
        assert state.turn_index == 1
        assert state.player_combo == 0
        assert state.ai_combo == 0
        assert engine.prompt is not None
        assert engine.prompt.template_id == "re_port"
        assert engine.time_left_sec == 10.0
        assert scheduler.pending == 1

    def test_intro_input_rejected(self, engine: BattleEngine) -> None:
        """Test the intro phase ignores input."""
        engine.start_battle()

        assert engine.add_part("re") is False
        assert engine.submit() is False

    def test_intro_advances_to_answer(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test the intro delay opens the answer window."""
        engine.start_battle()
        scheduler.advance(0.5)
        assert engine.phase is TurnPhase.INTRO
        assert engine.accepts_input is False
        scheduler.advance(0.5)
        assert engine.phase is TurnPhase.ANSWER
        assert engine.accepts_input is True

    def test_restart_cancels_timers(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test restarting mid-battle resets state and leaves one timer."""
        engine.start_battle()
        _answer_report(engine, scheduler)
        first_id = engine.state.battle_id

        engine.start_battle()

        assert engine.state.battle_id != first_id
        assert engine.phase is TurnPhase.INTRO
        assert engine.last_result is None
        assert engine.state.player_combo == 0
        assert scheduler.pending == 1


class TestAnswerPhase:
    """Tests for selection editing and the countdown."""

    def test_selection_editing(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test adding, removing and clearing parts."""
        engine.start_battle()
        _open_answer(engine, scheduler)

        assert engine.add_part("un")
        assert engine.add_part("re")
        assert engine.add_part("port")
        assert engine.built_word == "unreport"

        assert engine.remove_part_at(0)
        assert engine.selected_parts == ("re", "port")
        assert engine.built_word == "report"
        assert engine.remove_part_at(5) is False

        assert engine.clear_selection()
        assert engine.built_word == ""

    def test_countdown(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test the countdown follows the scheduler clock."""
        engine.start_battle()
        _open_answer(engine, scheduler)

        scheduler.advance(6.0)

        assert engine.time_left_sec == pytest.approx(4.0)

    def test_timeout_judges_no_submission(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test an empty selection at the deadline judges as incorrect with no damage."""
        engine.start_battle()
        _open_answer(engine, scheduler)

        scheduler.advance(10.0)

        result = engine.last_result
        assert engine.phase is TurnPhase.JUDGE
        assert result is not None
        assert result.player_submitted is False
        assert result.player_correct is False
        assert result.player_damage_to_ai.total == 0
        assert engine.time_left_sec == 0.0

    def test_timeout_ignores_selection(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test an unsubmitted selection does not count at the deadline."""
        engine.start_battle()
        _open_answer(engine, scheduler)
        engine.add_part("re")
        engine.add_part("port")

        scheduler.advance(10.0)

        assert engine.last_result is not None
        assert engine.last_result.player_correct is False


class TestJudgeAndHP:
    """Tests for judging and damage application."""

    def test_submit_with_four_seconds_left(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test a correct first answer with 4s left deals base plus speed bonus."""
        engine.start_battle()
        _open_answer(engine, scheduler)
        scheduler.advance(6.0)
        engine.add_part("re")
        engine.add_part("port")

        engine.submit()

        result = engine.last_result
        assert engine.phase is TurnPhase.JUDGE
        assert result is not None
        assert result.player_correct is True
        assert result.player_combo == 1
        assert result.player_damage_to_ai.total == 14
        assert engine.time_left_sec == pytest.approx(4.0)
        # HP only changes on entering the hp phase
        assert engine.state.ai_hp == 40

        scheduler.advance(engine.judge_delay_sec)

        assert engine.phase is TurnPhase.HP
        assert engine.state.ai_hp == 26
        assert engine.state.player_hp == 50

    def test_next_turn(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test the hp phase returns to intro with a fresh turn."""
        engine.start_battle()
        _answer_report(engine, scheduler)
        first_prompt = engine.prompt

        _finish_turn(engine, scheduler)

        assert engine.phase is TurnPhase.INTRO
        assert engine.state.turn_index == 2
        assert engine.selected_parts == ()
        assert engine.prompt is not None
        assert first_prompt is not None
        assert engine.prompt.id != first_prompt.id
        assert engine.state.player_combo == 1

    def test_no_double_judging(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test the deadline timer never fires after a submit."""
        results: list[TurnResult] = []
        engine.add_turn_result_listener(results.append)
        engine.start_battle()
        _answer_report(engine, scheduler)

        assert engine.submit() is False
        assert scheduler.pending == 1

        # Past turn 1's cancelled deadline, short of turn 2's
        scheduler.advance(11.0)

        assert len(results) == 1
        assert engine.phase is TurnPhase.ANSWER
        assert engine.state.turn_index == 2

    def test_combo_sequence(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test correct, correct, wrong, correct gives streaks 1, 2, 0, 1."""
        results: list[TurnResult] = []
        engine.add_turn_result_listener(results.append)
        engine.start_battle(difficulty=5)

        for parts in (("re", "port"), ("re", "port"), ("ex", "port"), ("re", "port")):
            _open_answer(engine, scheduler)
            for part_id in parts:
                engine.add_part(part_id)
            engine.submit()
            _finish_turn(engine, scheduler)

        assert [r.player_combo for r in results] == [1, 2, 0, 1]


class TestDifficulty:
    """Tests for difficulty changes."""

    def test_switch_before_start(self, engine: BattleEngine) -> None:
        """Test selecting difficulty 5 then starting uses profile 5's HP."""
        profile = engine.set_difficulty(5)
        assert engine.state.ai_max_hp == profile.max_hp == 80

        engine.start_battle()

        assert engine.state.ai_hp == 80
        assert engine.difficulty == 5
        assert engine.prompt is not None
        assert engine.prompt.time_limit_sec == 7.0

    def test_switch_mid_battle_rejected(self, engine: BattleEngine) -> None:
        """Test difficulty cannot change while a battle runs."""
        engine.start_battle()

        with pytest.raises(InvalidGameStateError):
            engine.set_difficulty(4)

        assert engine.difficulty == 2

    def test_unknown_difficulty(self, engine: BattleEngine) -> None:
        """Test an unknown difficulty is rejected."""
        with pytest.raises(InvalidGameStateError):
            engine.start_battle(difficulty=7)
        assert engine.phase is None


class TestAbandon:
    """Tests for abandoning a battle."""

    def test_cancels_timers(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test abandoning leaves nothing scheduled and the engine idle."""
        phases: list[TurnPhase] = []
        engine.add_phase_listener(phases.append)
        engine.start_battle()
        _open_answer(engine, scheduler)

        engine.abandon()
        scheduler.advance(60.0)

        assert engine.phase is None
        assert scheduler.pending == 0
        assert phases == [TurnPhase.INTRO, TurnPhase.ANSWER]
        assert engine.last_result is None

    def test_allows_difficulty_change(self, engine: BattleEngine) -> None:
        """Test difficulty can change after abandoning."""
        engine.start_battle()
        engine.abandon()

        engine.set_difficulty(3)

        assert engine.state.ai_hp == 50


class TestLogContext:
    """Tests for the battle keys bound to the log context."""

    @pytest.fixture(autouse=True)
    def clean_context(self) -> Any:
        """Start and finish each test with an empty log context."""
        clear_context()
        yield
        clear_context()

    def test_battle_keys_bound(self, engine: BattleEngine) -> None:
        """Test a started battle binds its id and difficulty."""
        engine.start_battle()

        context = structlog.contextvars.get_contextvars()
        assert context["battle_id"] == str(engine.state.battle_id)
        assert context["difficulty"] == 2

    def test_caller_context_survives(self, engine: BattleEngine) -> None:
        """Test starting and abandoning leaves keys bound by the caller."""
        bind_context(request_id="r-1")

        engine.start_battle()
        engine.abandon()

        assert structlog.contextvars.get_contextvars() == {"request_id": "r-1"}


class TestBattleEnd:
    """Tests for the end condition."""

    def test_player_wins(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test two fast correct answers defeat the difficulty-2 opponent."""
        winners: list[Winner] = []
        engine.add_battle_end_listener(winners.append)
        engine.start_battle()

        _answer_report(engine, scheduler)
        _finish_turn(engine, scheduler)
        _answer_report(engine, scheduler)
        _finish_turn(engine, scheduler)

        # 20 (10 base + 10 speed), then 22 with the combo bonus
        assert engine.state.ai_hp == 0
        assert engine.phase is TurnPhase.END
        assert engine.winner is Winner.PLAYER
        assert winners == [Winner.PLAYER]
        assert scheduler.pending == 0
        assert engine.is_active is False

    def test_ai_wins(
        self,
        scheduler: ManualScheduler,
        battle_settings: Any,
        perfect_profiles: Any,
        re_port_template: Any,
    ) -> None:
        """Test an idle player loses to a perfect opponent."""
        engine = BattleEngine(
            scheduler=scheduler,
            seed=1,
            profiles=perfect_profiles,
            templates=[re_port_template],
            settings=battle_settings,
            damage_rules=DamageRules(),
        )
        engine.start_battle()

        scheduler.run_until_idle()

        # 19 + 21 + 23 over three turns
        assert engine.winner is Winner.AI
        assert engine.state.turn_index == 3
        assert engine.state.player_hp == 0
        assert engine.state.ai_hp == 40

    def test_simultaneous_knockout_is_draw(
        self,
        scheduler: ManualScheduler,
        battle_settings: Any,
        perfect_profiles: Any,
        re_port_template: Any,
    ) -> None:
        """Test both sides reaching zero in one turn ends in a draw."""
        engine = BattleEngine(
            scheduler=scheduler,
            seed=1,
            player_max_hp=40,
            profiles=perfect_profiles,
            templates=[re_port_template],
            settings=battle_settings,
            damage_rules=DamageRules(),
        )
        engine.start_battle()

        _answer_report(engine, scheduler)
        _finish_turn(engine, scheduler)
        _answer_report(engine, scheduler)
        _finish_turn(engine, scheduler)

        assert engine.state.player_hp == 0
        assert engine.state.ai_hp == 0
        assert engine.winner is Winner.DRAW


class TestListeners:
    """Tests for event listeners."""

    def test_phase_order(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test phases follow intro, answer, judge, hp, intro."""
        phases: list[TurnPhase] = []
        engine.add_phase_listener(phases.append)
        engine.start_battle()

        _answer_report(engine, scheduler)
        _finish_turn(engine, scheduler)

        assert phases == [
            TurnPhase.INTRO,
            TurnPhase.ANSWER,
            TurnPhase.JUDGE,
            TurnPhase.HP,
            TurnPhase.INTRO,
        ]

    def test_failing_listener_isolated(self, engine: BattleEngine, scheduler: ManualScheduler) -> None:
        """Test a raising listener neither breaks the machine nor other listeners."""

        def explode(_: Any) -> None:
            raise RuntimeError("listener bug")

        phases: list[TurnPhase] = []
        engine.add_phase_listener(explode)
        engine.add_phase_listener(phases.append)
        engine.add_turn_result_listener(explode)
        engine.start_battle()

        _answer_report(engine, scheduler)
        scheduler.advance(engine.judge_delay_sec)

        assert engine.phase is TurnPhase.HP
        assert phases[-1] is TurnPhase.HP

    def test_state_is_snapshot(self, engine: BattleEngine) -> None:
        """Test mutating a state snapshot leaves the engine untouched."""
        engine.start_battle()

        snapshot = engine.state
        snapshot.ai_hp = 1

        assert engine.state.ai_hp == 40


class TestReproducibility:
    """Tests for seeded determinism."""

    def test_same_seed_same_battle(self, battle_settings: Any) -> None:
        """Test equal seeds replay identical turns."""

        def play(seed: int) -> list[dict[str, Any]]:
            scheduler = ManualScheduler()
            engine = BattleEngine(
                scheduler=scheduler,
                seed=seed,
                settings=battle_settings,
                damage_rules=DamageRules(),
            )
            results: list[TurnResult] = []
            engine.add_turn_result_listener(results.append)
            engine.start_battle(difficulty=3)
            scheduler.run_until_idle()
            assert engine.winner is Winner.AI
            return [r.model_dump() for r in results]

        assert play(7) == play(7)
