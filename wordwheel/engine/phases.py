"""Game state definitions and transitions."""

from enum import Enum, auto


class GameState(Enum):
    """States of a round."""
    WAITING_TO_START = auto()        # Nothing generated yet
    ROUND_STARTED = auto()           # Phrase generated, mask built
    WAITING_FOR_USER_INPUT = auto()  # Puzzle shown, waiting for spin/solve
    GUESSING_LETTER = auto()         # Player chose to spin
    SOLVING = auto()                 # Player chose to solve
    ROUND_OVER = auto()              # Round abandoned, a new one follows
    GAME_OVER = auto()               # Phrase revealed, game ends


# Legal moves out of each state (staying put is always allowed).
# A new round can start from anywhere.
TRANSITIONS: dict[GameState, frozenset[GameState]] = {
    GameState.WAITING_TO_START: frozenset({GameState.ROUND_STARTED}),
    GameState.ROUND_STARTED: frozenset({
        GameState.WAITING_FOR_USER_INPUT,
        GameState.ROUND_OVER,
        GameState.GAME_OVER,
    }),
    GameState.WAITING_FOR_USER_INPUT: frozenset({
        GameState.GUESSING_LETTER,
        GameState.SOLVING,
        GameState.ROUND_STARTED,
        GameState.ROUND_OVER,
        GameState.GAME_OVER,
    }),
    GameState.GUESSING_LETTER: frozenset({
        GameState.WAITING_FOR_USER_INPUT,
        GameState.ROUND_STARTED,
        GameState.ROUND_OVER,
        GameState.GAME_OVER,
    }),
    GameState.SOLVING: frozenset({
        GameState.WAITING_FOR_USER_INPUT,
        GameState.ROUND_STARTED,
        GameState.ROUND_OVER,
        GameState.GAME_OVER,
    }),
    GameState.ROUND_OVER: frozenset({GameState.ROUND_STARTED}),
    GameState.GAME_OVER: frozenset({GameState.ROUND_STARTED}),
}


class StateMachine:
    """Tracks the current state and rejects illegal transitions."""

    def __init__(self):
        self.state = GameState.WAITING_TO_START

    def can_move_to(self, target: GameState) -> bool:
        """Check whether the machine may move to the target state."""
        return target == self.state or target in TRANSITIONS[self.state]

    def move_to(self, target: GameState) -> GameState:
        """Move to a new state.

        Args:
            target: The state to enter.

        Returns:
            The new state.

        Raises:
            ValueError: If the transition is not allowed from the current state.
        """
        if not self.can_move_to(target):
            raise ValueError(
                f"Cannot move from {self.state.name} to {target.name}"
            )
        self.state = target
        return self.state

    @property
    def is_finished(self) -> bool:
        """Whether the game has ended."""
        return self.state == GameState.GAME_OVER
