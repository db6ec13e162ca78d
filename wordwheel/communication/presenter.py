"""Rendering of the game screens and outcome messages."""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..engine.outcomes import Outcome, OutcomeKind
from .channels import OutputChannel


LOGO = [
    (r" _       _ _                 __       _____   ___", "dark_red"),
    (r"( )  _  ( ) )               (  )     (  _  )/ ___)", "red"),
    (r"| | ( ) | | |__    __    __  | |     | ( ) | (__", "red"),
    (r"| | | | | |  _  \/ __ \/ __ \| |     | | | |  __)", "yellow"),
    (r"| (_/ \_) | | | |  ___/  ___/| |     | (_) | |", "yellow"),
    (r" \__/\___/(_) (_)\____)\____)___)    (_____)_)", "green"),
    (r"      ___              _", "green"),
    (r"     (  _ \           ( )_", "green"),
    (r"     | (_(_)  _   _ __|  _)_   _  ___    __", "magenta"),
    (r"     |  _)  / _ \(  __) | ( ) ( )  _  \/ __ \ ", "magenta"),
    (r"     | |   ( (_) ) |  | |_| (_) | ( ) |  ___/", "blue"),
    (r"     (_)    \___/(_)   \__)\___/(_) (_)\____)", "blue"),
]

# Line indexes after which the welcome logo pauses
LOGO_PAUSES_AFTER = frozenset({0, 2, 4, 7, 9})

ACTION_PROMPT = "Press 1 to spin or 2 to solve: "
LETTER_PROMPT = "Please guess a letter: "
SOLUTION_PROMPT = "Please enter your solution: "
SPINNING_MESSAGE = "Spinning the wheel ."
INVALID_ACTION_MESSAGE = "Invalid entry, resetting ."
VICTORY_MESSAGE = (
    "Congratulations, you've solved the puzzle!! Press any key to exit the game . . ."
)

# Background colors cycled while the wheel spins
SPIN_STYLES = [
    "white on dark_magenta",
    "white on dark_green",
    "white on dark_blue",
    "white on dark_goldenrod",
    "white on dark_cyan",
]

OUTCOME_STYLES = {
    OutcomeKind.HIT: "green",
    OutcomeKind.MISS: "red",
    OutcomeKind.SOLVED: "bold green",
    OutcomeKind.INVALID_GUESS: "yellow",
    OutcomeKind.DUPLICATE_GUESS: "yellow",
    OutcomeKind.NO_ACTIVE_PUZZLE: "red",
    OutcomeKind.INCORRECT_SOLVE: "red",
    OutcomeKind.INVALID_ACTION: "dark_red on dark_goldenrod",
}


@dataclass
class Pacing:
    """Delays used for the animated screens, in seconds."""
    dot_delay: float = 0.25
    dot_count: int = 4
    welcome_delay: float = 1.5
    logo_delay: float = 0.125

    def __post_init__(self):
        if min(self.dot_delay, self.welcome_delay, self.logo_delay) < 0:
            raise ValueError("Pacing delays must not be negative")
        if self.dot_count < 0:
            raise ValueError("dot_count must not be negative")


def outcome_message(outcome: Outcome) -> str:
    """Get the player-facing message for an outcome.

    Args:
        outcome: The outcome to describe.

    Returns:
        The message text.
    """
    kind = outcome.kind
    if kind == OutcomeKind.HIT:
        return (
            f"Great job, '{outcome.letter}' is in the phrase {outcome.hit_count} time(s). "
            "Press any key to continue . . ."
        )
    if kind == OutcomeKind.MISS:
        return (
            f"Hard luck, '{outcome.letter}' is not in the phrase. "
            "Press any key to try again . . ."
        )
    if kind == OutcomeKind.SOLVED:
        return VICTORY_MESSAGE
    if kind == OutcomeKind.INVALID_GUESS:
        return (
            "Invalid entry, must be a valid alphabetical character. "
            "Press any key to continue . . ."
        )
    if kind == OutcomeKind.DUPLICATE_GUESS:
        return (
            f"The letter '{outcome.letter}' has already been guessed. "
            "Press any key to continue . . ."
        )
    if kind == OutcomeKind.NO_ACTIVE_PUZZLE:
        return "Sorry, but there is no puzzle to solve. Press any key to continue . . ."
    if kind == OutcomeKind.INCORRECT_SOLVE:
        return "Sorry, but that is incorrect. Press any key to continue . . ."
    return "Press any key to continue . . ."


class Presenter:
    """Draws the game on an output channel.

    All colors and pacing live here; the engine only hands over outcomes.
    """

    def __init__(
        self,
        output: OutputChannel,
        pacing: Optional[Pacing] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the presenter.

        Args:
            output: Where to draw.
            pacing: Animation delays. Defaults to the classic timings.
            sleep: Delay function, replaceable for tests.
        """
        self.output = output
        self.pacing = pacing or Pacing()
        self._sleep = sleep

    def pause(self, seconds: float) -> None:
        """Wait, unless the delay is zero."""
        if seconds > 0:
            self._sleep(seconds)

    def show_logo(self, staged: bool = False) -> None:
        """Draw the logo, optionally a few lines at a time."""
        for i, (line, style) in enumerate(LOGO):
            self.output.write_line(line, style=style)
            if staged and i in LOGO_PAUSES_AFTER:
                self.pause(self.pacing.logo_delay)

    def show_welcome(self) -> None:
        """Draw the welcome screen and the start prompt."""
        self.output.clear()
        self.output.blank_line()
        self.output.write_line("Welcome to . . .")
        self.output.blank_line()
        self.pause(self.pacing.welcome_delay)
        self.show_logo(staged=True)
        self.pause(self.pacing.welcome_delay)
        self.output.blank_line()
        self.output.blank_line()
        self.output.write("Press any key to start . . .")

    def show_puzzle(self, masked_phrase: str) -> None:
        """Clear the screen and draw the logo with the current puzzle."""
        self.output.clear()
        self.show_logo()
        self.output.blank_line()
        self.output.write_line("The puzzle is:")
        self.output.blank_line()
        self.output.write_line(masked_phrase, style="bold")
        self.output.blank_line()

    def show_revealed(self, masked_phrase: str) -> None:
        """Redraw the puzzle line after letters were revealed."""
        self.output.blank_line()
        self.output.write_line(masked_phrase, style="bold")

    def prompt_action(self) -> None:
        self.output.write(ACTION_PROMPT)

    def prompt_letter(self) -> None:
        self.output.write(LETTER_PROMPT)

    def prompt_solution(self) -> None:
        self.output.write(SOLUTION_PROMPT)

    def animate(self, message: str, styles: list[str]) -> None:
        """Write a message and append dots one at a time.

        Args:
            message: Text to show first.
            styles: Styles cycled for the message and each dot.
        """
        self.output.write(message, style=styles[0])
        for i in range(self.pacing.dot_count):
            self.pause(self.pacing.dot_delay)
            self.output.write(" .", style=styles[(i + 1) % len(styles)])
        self.pause(self.pacing.dot_delay)
        self.output.blank_line()

    def show_spinning(self) -> None:
        self.animate(SPINNING_MESSAGE, SPIN_STYLES)

    def show_outcome(self, outcome: Outcome) -> None:
        """Tell the player what their action did.

        Args:
            outcome: The outcome returned by the engine.
        """
        style = OUTCOME_STYLES[outcome.kind]
        if outcome.kind == OutcomeKind.INVALID_ACTION:
            self.animate(INVALID_ACTION_MESSAGE, [style])
        self.output.write(outcome_message(outcome), style=style)

    def show_victory(self) -> None:
        self.output.blank_line()
        self.output.write(VICTORY_MESSAGE, style=OUTCOME_STYLES[OutcomeKind.SOLVED])
