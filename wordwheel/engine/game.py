"""Main game loop for WordWheel."""

from dataclasses import dataclass
from typing import Any, Optional

from ..communication.channels import InputChannel
from ..communication.markdown_logger import MarkdownLogger
from ..communication.presenter import Pacing, Presenter
from .history import RoundHistory, TurnRecord
from .outcomes import Outcome, OutcomeKind
from .phases import GameState
from .round import RoundEngine


@dataclass
class GameConfig:
    """Configuration for a game."""
    seed: Optional[int] = None
    dot_delay: float = 0.25
    dot_count: int = 4
    welcome_delay: float = 1.5
    logo_delay: float = 0.125
    log_enabled: bool = False
    log_dir: str = "games"

    def __post_init__(self):
        # Validates the delays
        self.pacing()

    def pacing(self) -> Pacing:
        """Build the presenter pacing from this config."""
        return Pacing(
            dot_delay=self.dot_delay,
            dot_count=self.dot_count,
            welcome_delay=self.welcome_delay,
            logo_delay=self.logo_delay,
        )

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "GameConfig":
        """Build a config from parsed YAML.

        Args:
            data: Mapping with optional "game", "pacing" and "logging" sections.

        Returns:
            The game configuration.

        Raises:
            ValueError: If a section is not a mapping or a value is invalid.
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError("Config must be a mapping of sections")

        sections = {}
        for name in ("game", "pacing", "logging"):
            section = data.get(name) or {}
            if not isinstance(section, dict):
                raise ValueError(f"Config section '{name}' must be a mapping")
            sections[name] = section

        game = sections["game"]
        pacing = sections["pacing"]
        log_section = sections["logging"]
        seed = game.get("seed")
        log_enabled = log_section.get("enabled", cls.log_enabled)
        if not isinstance(log_enabled, bool):
            raise ValueError(f"logging.enabled must be true or false, got {log_enabled!r}")

        try:
            return cls(
                seed=int(seed) if seed is not None else None,
                dot_delay=float(pacing.get("dot_delay", cls.dot_delay)),
                dot_count=int(pacing.get("dot_count", cls.dot_count)),
                welcome_delay=float(pacing.get("welcome_delay", cls.welcome_delay)),
                logo_delay=float(pacing.get("logo_delay", cls.logo_delay)),
                log_enabled=log_enabled,
                log_dir=str(log_section.get("base_dir", cls.log_dir)),
            )
        except TypeError as e:
            raise ValueError(f"Invalid config value: {e}") from e


class Game:
    """The turn loop.

    Reads player input, hands it to the round engine and reports the outcome.
    The engine decides everything; this class only sequences prompts.
    """

    def __init__(
        self,
        engine: RoundEngine,
        input_channel: InputChannel,
        presenter: Presenter,
        logger: Optional[MarkdownLogger] = None,
    ):
        """Initialize the game.

        Args:
            engine: Round engine holding the puzzle state.
            input_channel: Where player input comes from.
            presenter: Draws screens and outcome messages.
            logger: Optional markdown transcript logger.
        """
        self.engine = engine
        self.input = input_channel
        self.presenter = presenter
        self.logger = logger
        self.history = RoundHistory()

    def start_round(self) -> None:
        """Start a fresh round."""
        masked = self.engine.start_round()
        if self.logger:
            self.logger.log_round_start(self.engine.round_number, masked)

    def run(self) -> Optional[Outcome]:
        """Run the game until the puzzle is solved.

        Returns:
            The outcome that solved the puzzle.
        """
        if self.logger:
            self.logger.start_game()

        self.presenter.show_welcome()
        self.input.read_line()
        self.start_round()

        final: Optional[Outcome] = None
        while True:
            state = self.engine.state

            if state == GameState.ROUND_OVER:
                self.start_round()
                continue

            if self.engine.machine.is_finished:
                self.presenter.show_victory()
                self.input.read_line()
                break

            final = self.play_turn()

        if self.logger:
            self.logger.log_game_end(
                self.engine.challenge_phrase,
                len(self.history.records),
                summary=self.history.summary(self.engine.round_number),
            )

        return final

    def play_turn(self) -> Outcome:
        """Play a single turn: show the puzzle, take an action, report it.

        Returns:
            The outcome of the turn.
        """
        self.engine.begin_turn()
        self.presenter.show_puzzle(self.engine.masked_phrase)
        self.presenter.prompt_action()
        action = self.input.read_line()

        outcome = self.engine.choose_action(action)
        if outcome is not None:
            self._record(action.strip(), None, outcome)
        elif self.engine.state == GameState.GUESSING_LETTER:
            outcome = self.spin()
        else:
            outcome = self.solve()

        if not outcome.ends_round:
            self.presenter.show_outcome(outcome)
            # Wait for acknowledgment
            self.input.read_line()

        return outcome

    def spin(self) -> Outcome:
        """Spin the wheel and guess a letter."""
        self.presenter.show_spinning()
        self.presenter.prompt_letter()
        entry = self.input.read_line()

        outcome = self.engine.guess_letter(entry)
        if outcome.kind in (OutcomeKind.HIT, OutcomeKind.MISS, OutcomeKind.SOLVED):
            self.presenter.show_revealed(self.engine.masked_phrase)

        self._record("spin", outcome.letter or entry, outcome)
        return outcome

    def solve(self) -> Outcome:
        """Ask for a full solution."""
        self.presenter.prompt_solution()
        entry = self.input.read_line()

        outcome = self.engine.solve_attempt(entry)
        if outcome.ends_round:
            self.presenter.show_revealed(self.engine.masked_phrase)

        self._record("solve", entry, outcome)
        return outcome

    def _record(self, action: str, entry: Optional[str], outcome: Outcome) -> None:
        record = self.history.add(TurnRecord(
            round_number=self.engine.round_number,
            action=action,
            entry=entry,
            outcome=str(outcome),
            hit_count=outcome.hit_count,
            masked_phrase=self.engine.masked_phrase,
        ))
        if self.logger:
            self.logger.log_turn(record)
