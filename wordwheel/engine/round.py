"""Round engine - phrase masking, guess tracking and state transitions."""

from typing import Optional

from .outcomes import Outcome, OutcomeKind, hit, miss, solved
from .phases import GameState, StateMachine
from .phrases import PhraseGenerator

PLACEHOLDER = "-"

SPIN_ACTIONS = frozenset({"1", "spin"})
SOLVE_ACTIONS = frozenset({"2", "solve"})


def mask_phrase(phrase: str) -> str:
    """Hide every non-space character of a phrase behind the placeholder."""
    return "".join(" " if c == " " else PLACEHOLDER for c in phrase)


class RoundEngine:
    """Owns the state of a round.

    The engine never reads input or renders anything. Every operation returns
    an Outcome that the caller inspects to decide what to show.
    """

    def __init__(self, generator: Optional[PhraseGenerator] = None):
        """Initialize the engine.

        Args:
            generator: Phrase source. Defaults to an unseeded PhraseGenerator.
        """
        self.generator = generator or PhraseGenerator()
        self.machine = StateMachine()

        self.challenge_phrase = ""
        self.masked_phrase = ""
        self.guessed_letters: set[str] = set()
        self.round_number = 0

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self.machine.state

    @property
    def has_puzzle(self) -> bool:
        """Whether a round is in progress."""
        return bool(self.challenge_phrase)

    @property
    def is_revealed(self) -> bool:
        """Whether the masked phrase shows the whole challenge phrase."""
        return self.has_puzzle and self.masked_phrase == self.challenge_phrase

    def start_round(self) -> str:
        """Generate a new phrase and reset the mask and guesses.

        Returns:
            The masked phrase for the new round.
        """
        self.machine.move_to(GameState.ROUND_STARTED)
        self.challenge_phrase = self.generator.generate_challenge()
        self.masked_phrase = mask_phrase(self.challenge_phrase)
        self.guessed_letters = set()
        self.round_number += 1
        return self.masked_phrase

    def end_round(self) -> None:
        """Abandon the current phrase; the game loop starts a fresh one."""
        self.machine.move_to(GameState.ROUND_OVER)

    def begin_turn(self) -> GameState:
        """Enter the waiting-for-input state at the start of a turn."""
        return self.machine.move_to(GameState.WAITING_FOR_USER_INPUT)

    def choose_action(self, action: str) -> Optional[Outcome]:
        """Apply the player's top-level menu choice.

        Args:
            action: Raw menu input ("1"/"spin" or "2"/"solve").

        Returns:
            None when the choice was accepted, an INVALID_ACTION outcome, or
            NO_ACTIVE_PUZZLE when no round has started.
        """
        choice = action.strip().lower()
        if choice not in SPIN_ACTIONS | SOLVE_ACTIONS:
            if self.has_puzzle:
                self.machine.move_to(GameState.WAITING_FOR_USER_INPUT)
            return Outcome(OutcomeKind.INVALID_ACTION)

        if not self.has_puzzle:
            return Outcome(OutcomeKind.NO_ACTIVE_PUZZLE)

        if choice in SPIN_ACTIONS:
            self.machine.move_to(GameState.GUESSING_LETTER)
            return None
        self.machine.move_to(GameState.SOLVING)
        return None

    def guess_letter(self, text: str) -> Outcome:
        """Reveal every position holding the guessed letter.

        Only the first character of the input is considered.

        Args:
            text: Raw input from the player.

        Returns:
            SOLVED, MISS or HIT on a valid guess; INVALID_GUESS,
            DUPLICATE_GUESS or NO_ACTIVE_PUZZLE otherwise.
        """
        if not self.has_puzzle:
            return Outcome(OutcomeKind.NO_ACTIVE_PUZZLE)

        if not text or not text[0].isalpha():
            self._await_input()
            return Outcome(OutcomeKind.INVALID_GUESS)

        letter = text[0].upper()
        # Characters such as "ß" uppercase to more than one letter
        if len(letter) != 1:
            self._await_input()
            return Outcome(OutcomeKind.INVALID_GUESS)

        if letter in self.guessed_letters:
            self._await_input()
            return Outcome(OutcomeKind.DUPLICATE_GUESS, letter=letter)

        self.guessed_letters.add(letter)

        # Reveal all matches in one pass
        revealed = list(self.masked_phrase)
        count = 0
        for i, c in enumerate(self.challenge_phrase):
            if c == letter:
                revealed[i] = c
                count += 1
        self.masked_phrase = "".join(revealed)

        if self.masked_phrase == self.challenge_phrase:
            self.machine.move_to(GameState.GAME_OVER)
            return solved(letter, count)

        self._await_input()
        if count == 0:
            return miss(letter)
        return hit(letter, count)

    def solve_attempt(self, guess: str) -> Outcome:
        """Try to solve the whole phrase at once.

        Args:
            guess: The player's full-phrase guess; casing is ignored.

        Returns:
            SOLVED, INCORRECT_SOLVE or NO_ACTIVE_PUZZLE.
        """
        if not self.has_puzzle:
            return Outcome(OutcomeKind.NO_ACTIVE_PUZZLE)

        if guess.casefold() == self.challenge_phrase.casefold():
            self.masked_phrase = self.challenge_phrase
            self.machine.move_to(GameState.GAME_OVER)
            return solved()

        self._await_input()
        return Outcome(OutcomeKind.INCORRECT_SOLVE)

    def _await_input(self) -> None:
        """Return to waiting for the next action."""
        self.machine.move_to(GameState.WAITING_FOR_USER_INPUT)
