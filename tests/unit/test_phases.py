"""
Unit tests for the game state machine and outcome values.
"""

from dataclasses import FrozenInstanceError

import pytest

from wordwheel.engine.outcomes import Outcome, OutcomeKind, hit, miss, solved
from wordwheel.engine.phases import GameState, StateMachine


class TestStateMachine:
    """Test cases for StateMachine transitions."""

    def setup_method(self):
        self.machine = StateMachine()

    def test_starts_waiting(self):
        assert self.machine.state == GameState.WAITING_TO_START
        assert not self.machine.is_finished

    def test_full_turn_cycle(self):
        self.machine.move_to(GameState.ROUND_STARTED)
        self.machine.move_to(GameState.WAITING_FOR_USER_INPUT)
        self.machine.move_to(GameState.GUESSING_LETTER)
        self.machine.move_to(GameState.WAITING_FOR_USER_INPUT)
        self.machine.move_to(GameState.SOLVING)
        assert self.machine.move_to(GameState.GAME_OVER) == GameState.GAME_OVER
        assert self.machine.is_finished

    def test_illegal_transition_raises(self):
        with pytest.raises(ValueError, match="WAITING_TO_START to GAME_OVER"):
            self.machine.move_to(GameState.GAME_OVER)
        assert self.machine.state == GameState.WAITING_TO_START

    def test_staying_put_is_allowed(self):
        assert self.machine.can_move_to(GameState.WAITING_TO_START)
        self.machine.move_to(GameState.WAITING_TO_START)

    def test_round_over_only_leads_to_new_round(self):
        self.machine.move_to(GameState.ROUND_STARTED)
        self.machine.move_to(GameState.ROUND_OVER)

        assert not self.machine.can_move_to(GameState.WAITING_FOR_USER_INPUT)
        assert self.machine.can_move_to(GameState.ROUND_STARTED)

    def test_new_round_reachable_from_every_state(self):
        for state in GameState:
            self.machine.state = state
            assert self.machine.can_move_to(GameState.ROUND_STARTED), state

    def test_game_over_can_restart(self):
        self.machine.move_to(GameState.ROUND_STARTED)
        self.machine.move_to(GameState.GAME_OVER)

        assert not self.machine.can_move_to(GameState.GUESSING_LETTER)
        assert self.machine.can_move_to(GameState.ROUND_STARTED)


class TestOutcome:
    """Test cases for Outcome values."""

    def test_error_kinds(self):
        errors = {
            OutcomeKind.INVALID_GUESS,
            OutcomeKind.DUPLICATE_GUESS,
            OutcomeKind.NO_ACTIVE_PUZZLE,
            OutcomeKind.INCORRECT_SOLVE,
            OutcomeKind.INVALID_ACTION,
        }
        for kind in OutcomeKind:
            assert Outcome(kind).is_error == (kind in errors)

    def test_only_solved_ends_round(self):
        assert solved().ends_round
        assert not hit("A", 2).ends_round
        assert not miss("Z").ends_round

    def test_string_form(self):
        assert str(hit("E", 3)) == "hit(3)"
        assert str(miss("Q")) == "miss"
        assert str(solved("G", 1)) == "solved"
        assert str(Outcome(OutcomeKind.DUPLICATE_GUESS, letter="A")) == "duplicate_guess"

    def test_outcomes_are_immutable(self):
        outcome = hit("A", 1)
        with pytest.raises(FrozenInstanceError):
            outcome.hit_count = 5
