"""Turn history for reviewing what happened during a game."""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel


class TurnRecord(BaseModel):
    """A single player turn."""
    round_number: int
    action: str  # "spin", "solve" or the rejected menu input
    entry: Optional[str] = None  # Letter or phrase the player typed
    outcome: str  # Outcome string, e.g. "hit(2)", "miss"
    hit_count: int = 0
    masked_phrase: str


@dataclass
class RoundHistory:
    """Everything the player did this run, in order."""

    records: list[TurnRecord] = field(default_factory=list)

    def add(self, record: TurnRecord) -> TurnRecord:
        """Append a turn record."""
        self.records.append(record)
        return record

    def for_round(self, round_number: int) -> list[TurnRecord]:
        """Get the records of one round."""
        return [r for r in self.records if r.round_number == round_number]

    def summary(self, round_number: int) -> str:
        """Build a short text summary of a round.

        Args:
            round_number: The round to summarize.

        Returns:
            One line per turn, e.g. "spin 'E' -> hit(3)".
        """
        lines = []
        for record in self.for_round(round_number):
            if record.entry is not None:
                lines.append(f"{record.action} '{record.entry}' -> {record.outcome}")
            else:
                lines.append(f"{record.action} -> {record.outcome}")
        return "\n".join(lines)
