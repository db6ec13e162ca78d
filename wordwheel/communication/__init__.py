"""Player input/output, rendering and transcripts."""

from .channels import InputChannel, OutputChannel, ConsoleInput, ConsoleOutput
from .markdown_logger import MarkdownLogger
from .presenter import Pacing, Presenter

__all__ = [
    "InputChannel",
    "OutputChannel",
    "ConsoleInput",
    "ConsoleOutput",
    "MarkdownLogger",
    "Pacing",
    "Presenter",
]
