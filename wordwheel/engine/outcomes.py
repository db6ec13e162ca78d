"""Result values returned by engine operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(Enum):
    """What happened when the player acted."""
    HIT = "hit"
    MISS = "miss"
    SOLVED = "solved"
    INVALID_GUESS = "invalid_guess"
    DUPLICATE_GUESS = "duplicate_guess"
    NO_ACTIVE_PUZZLE = "no_active_puzzle"
    INCORRECT_SOLVE = "incorrect_solve"
    INVALID_ACTION = "invalid_action"


ERROR_KINDS = frozenset({
    OutcomeKind.INVALID_GUESS,
    OutcomeKind.DUPLICATE_GUESS,
    OutcomeKind.NO_ACTIVE_PUZZLE,
    OutcomeKind.INCORRECT_SOLVE,
    OutcomeKind.INVALID_ACTION,
})


@dataclass(frozen=True)
class Outcome:
    """The result of a single player action."""

    kind: OutcomeKind
    letter: Optional[str] = None  # Normalized letter for spin outcomes
    hit_count: int = 0

    @property
    def is_error(self) -> bool:
        """Whether this outcome is a recoverable player error."""
        return self.kind in ERROR_KINDS

    @property
    def ends_round(self) -> bool:
        """Whether the phrase is now fully revealed."""
        return self.kind == OutcomeKind.SOLVED

    def __str__(self) -> str:
        if self.kind == OutcomeKind.HIT:
            return f"hit({self.hit_count})"
        return self.kind.value


def hit(letter: str, count: int) -> Outcome:
    """Build a HIT outcome."""
    return Outcome(OutcomeKind.HIT, letter=letter, hit_count=count)


def miss(letter: str) -> Outcome:
    """Build a MISS outcome."""
    return Outcome(OutcomeKind.MISS, letter=letter)


def solved(letter: Optional[str] = None, count: int = 0) -> Outcome:
    """Build a SOLVED outcome."""
    return Outcome(OutcomeKind.SOLVED, letter=letter, hit_count=count)
