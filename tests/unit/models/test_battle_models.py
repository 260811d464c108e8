"""Tests for per-turn and per-battle models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from vocab_battle.models import (
    BattleState,
    DamageBreakdown,
    Prompt,
    TurnPhase,
    TurnResult,
    Word,
)


class TestPrompt:
    """Tests for the Prompt model."""

    def test_fresh_ids(self) -> None:
        """Test each prompt instance gets its own id."""
        kwargs: dict[str, Any] = {
            "template_id": "root_port",
            "description": "Use 'port'.",
            "time_limit_sec": 10.0,
            "requires_parts": frozenset({"port"}),
            "difficulty": 2,
        }
        assert Prompt(**kwargs).id != Prompt(**kwargs).id

    def test_time_limit_positive(self) -> None:
        """Test the answer window must be positive."""
        with pytest.raises(ValidationError):
            Prompt(
                template_id="t",
                description="d",
                time_limit_sec=0,
                requires_parts=frozenset({"port"}),
                difficulty=2,
            )


class TestDamageBreakdown:
    """Tests for the DamageBreakdown model."""

    def test_zero(self) -> None:
        """Test the empty breakdown."""
        zero = DamageBreakdown.zero()
        assert zero.total == 0
        assert zero.base == zero.speed_bonus == zero.combo_bonus == 0

    def test_total_must_match_components(self) -> None:
        """Test total equals the component sum."""
        DamageBreakdown(base=10, speed_bonus=4, combo_bonus=0, total=14)
        with pytest.raises(ValidationError):
            DamageBreakdown(base=10, speed_bonus=4, combo_bonus=0, total=15)


class TestTurnResult:
    """Tests for TurnResult display helpers."""

    def test_display_labels_for_misses(self, re_port_prompt: Prompt) -> None:
        """Test placeholders when neither side answered."""
        result = TurnResult(
            turn_index=1,
            prompt=re_port_prompt,
            player_submitted=False,
            player_correct=False,
            ai_correct=False,
        )
        assert result.player_display_text == "(no answer)"
        assert result.ai_display_text == "(wrong)"
        assert result.involved_part_ids == frozenset({"re", "port"})

    def test_late_ai_word_shown(self, re_port_prompt: Prompt) -> None:
        """Test a known but late AI word is shown without counting as correct."""
        report = Word(id="w_report", text="report", parts=("re", "port"))
        result = TurnResult(
            turn_index=1,
            prompt=re_port_prompt,
            player_submitted=True,
            player_word_text="reporter",
            player_word=Word(id="w_reporter", text="reporter", parts=("re", "port", "er")),
            ai_word=report,
            player_correct=True,
            ai_correct=False,
        )
        assert result.ai_correct is False
        assert result.ai_word_text == "report"
        assert result.ai_display_text == "report"
        assert result.player_display_text == "reporter"
        assert result.involved_part_ids == frozenset({"re", "port", "er"})


class TestBattleState:
    """Tests for the mutable BattleState model."""

    def test_initial_values(self) -> None:
        """Test defaults of a fresh state."""
        state = BattleState(difficulty=2, player_hp=50, player_max_hp=50, ai_hp=40, ai_max_hp=40)
        assert state.turn_index == 1
        assert state.player_combo == 0
        assert state.ai_combo == 0
        assert state.phase is None
        assert state.selected_parts == []
        assert state.is_active is False

    def test_is_active(self) -> None:
        """Test the active flag follows the phase."""
        state = BattleState(difficulty=2, player_hp=50, player_max_hp=50, ai_hp=40, ai_max_hp=40)
        state.phase = TurnPhase.ANSWER
        assert state.is_active is True
        state.phase = TurnPhase.END
        assert state.is_active is False

    def test_assignment_validated(self) -> None:
        """Test HP cannot be set negative."""
        state = BattleState(difficulty=2, player_hp=50, player_max_hp=50, ai_hp=40, ai_max_hp=40)
        with pytest.raises(ValidationError):
            state.ai_hp = -1

    def test_hp_ratios(self) -> None:
        """Test HP ratios are clamped fractions."""
        state = BattleState(difficulty=2, player_hp=25, player_max_hp=50, ai_hp=0, ai_max_hp=40)
        assert state.player_hp_ratio == 0.5
        assert state.ai_hp_ratio == 0.0
