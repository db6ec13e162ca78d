"""Input and output channels between the game and the player."""

from typing import Optional

from rich.console import Console


class InputChannel:
    """Base class for sources of player input."""

    def read_line(self) -> str:
        """Block until the player enters a line and return it."""
        raise NotImplementedError


class OutputChannel:
    """Base class for places the game writes to."""

    def write(self, text: str, style: Optional[str] = None) -> None:
        """Write text without a trailing newline."""
        raise NotImplementedError

    def write_line(self, text: str = "", style: Optional[str] = None) -> None:
        """Write text followed by a newline."""
        raise NotImplementedError

    def blank_line(self) -> None:
        """Write an empty line."""
        self.write_line()

    def clear(self) -> None:
        """Clear the screen."""
        raise NotImplementedError


class ConsoleInput(InputChannel):
    """Reads lines from the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def read_line(self) -> str:
        return self.console.input()


class ConsoleOutput(OutputChannel):
    """Writes to the terminal through a rich console.

    Markup is disabled so phrases and player input print literally.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def write(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(text, style=style, end="", markup=False, highlight=False)

    def write_line(self, text: str = "", style: Optional[str] = None) -> None:
        self.console.print(text, style=style, markup=False, highlight=False)

    def clear(self) -> None:
        self.console.clear()
