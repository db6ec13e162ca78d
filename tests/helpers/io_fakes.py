"""
Fake input/output channels and phrase generators for driving the game in tests.
"""

from typing import Optional

from wordwheel.communication.channels import InputChannel, OutputChannel
from wordwheel.communication.presenter import Pacing
from wordwheel.engine.phrases import PhraseGenerator


class ScriptedInput(InputChannel):
    """Input channel that replays a fixed list of lines."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.reads = 0

    def read_line(self) -> str:
        if not self.lines:
            raise EOFError("script exhausted")
        self.reads += 1
        return self.lines.pop(0)


class RecordingOutput(OutputChannel):
    """Output channel that remembers everything written to it."""

    def __init__(self):
        self.calls = []

    def write(self, text: str, style: Optional[str] = None) -> None:
        self.calls.append(("write", text, style))

    def write_line(self, text: str = "", style: Optional[str] = None) -> None:
        self.calls.append(("write_line", text, style))

    def clear(self) -> None:
        self.calls.append(("clear", "", None))

    @property
    def text(self) -> str:
        return "".join(
            text + ("\n" if kind == "write_line" else "")
            for kind, text, _ in self.calls
        )


class FixedPhraseGenerator(PhraseGenerator):
    """Generator that hands out predetermined phrases in order."""

    def __init__(self, *phrases):
        super().__init__()
        self.phrases = list(phrases)

    def generate_challenge(self) -> str:
        return self.phrases.pop(0) if len(self.phrases) > 1 else self.phrases[0]


ZERO_PACING = Pacing(dot_delay=0, dot_count=4, welcome_delay=0, logo_delay=0)
