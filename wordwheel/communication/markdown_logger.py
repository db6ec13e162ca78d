"""Markdown logger for game transcripts."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from ..engine.history import TurnRecord


class MarkdownLogger:
    """Writes rounds and turns to a markdown file."""

    def __init__(self, base_dir: str = "games"):
        """Initialize the logger.

        Args:
            base_dir: Base directory for game logs.
        """
        self.base_dir = Path(base_dir)
        self.game_dir: Optional[Path] = None
        self.game_id: Optional[str] = None

    @property
    def game_file(self) -> Path:
        if self.game_dir is None:
            raise ValueError("Logging has not started - call start_game() first")
        return self.game_dir / "game_state.md"

    def start_game(self, game_id: Optional[str] = None) -> Path:
        """Start logging a new game.

        Args:
            game_id: Optional game identifier. If not provided, uses timestamp.

        Returns:
            Path to the game directory.
        """
        if game_id is None:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
            game_id = f"game_{timestamp}"

        self.game_id = game_id
        self.game_dir = self.base_dir / game_id
        self.game_dir.mkdir(parents=True, exist_ok=True)

        with open(self.game_file, "w") as f:
            f.write(f"# WordWheel Game - {self.game_id}\n\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
            f.write("---\n\n")

        return self.game_dir

    def log_round_start(self, round_number: int, masked_phrase: str) -> None:
        """Log the start of a round.

        Args:
            round_number: Which round (1, 2, 3...).
            masked_phrase: The puzzle as first shown to the player.
        """
        with open(self.game_file, "a") as f:
            f.write(f"## Round {round_number}\n\n")
            f.write(f"Puzzle: `{masked_phrase}`\n\n")
            f.write("| Action | Entry | Outcome | Puzzle |\n")
            f.write("|--------|-------|---------|--------|\n")

    def log_turn(self, record: TurnRecord) -> None:
        """Append one turn to the current round table."""
        entry = record.entry if record.entry is not None else ""
        with open(self.game_file, "a") as f:
            f.write(
                f"| {record.action} | {entry} | {record.outcome} | "
                f"`{record.masked_phrase}` |\n"
            )

    def log_game_end(
        self,
        challenge_phrase: str,
        turns: int,
        summary: Optional[str] = None,
    ) -> None:
        """Log the game ending.

        Args:
            challenge_phrase: The solved phrase.
            turns: Number of turns the player took.
            summary: Optional one-line-per-turn recap of the final round.
        """
        with open(self.game_file, "a") as f:
            f.write("\n---\n\n")
            f.write("# GAME OVER\n\n")
            f.write(f"**Solved:** {challenge_phrase}\n\n")
            f.write(f"Turns taken: {turns}\n")
            if summary:
                f.write("\n## Final Round\n\n")
                for line in summary.splitlines():
                    f.write(f"- {line}\n")
            f.write(f"\n\nEnded: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
