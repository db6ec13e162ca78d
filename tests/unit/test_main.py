"""
Unit tests for the CLI entry point and its exit paths.
"""

import io
import sys

import pytest
from rich.console import Console

from wordwheel import main as cli
from wordwheel.communication.channels import InputChannel
from wordwheel.communication.presenter import Presenter
from wordwheel.engine.game import Game
from wordwheel.engine.round import RoundEngine
from tests.helpers.io_fakes import (
    FixedPhraseGenerator,
    RecordingOutput,
    ScriptedInput,
    ZERO_PACING,
)


class InterruptedInput(InputChannel):
    """Input channel that fails on the first read."""

    def __init__(self, error):
        self.error = error

    def read_line(self) -> str:
        raise self.error


class TestMain:
    """Test cases for main()."""

    def setup_method(self):
        self.buffer = io.StringIO()

    @pytest.fixture(autouse=True)
    def quiet_console(self, monkeypatch):
        monkeypatch.setattr(cli, "console", Console(file=self.buffer, width=120))
        monkeypatch.delenv("WORDWHEEL_SEED", raising=False)

    def use_input(self, monkeypatch, input_channel):
        def fake_build_game(config, console=None):
            return Game(
                RoundEngine(FixedPhraseGenerator("A DOG")),
                input_channel,
                Presenter(RecordingOutput(), pacing=ZERO_PACING),
            )

        monkeypatch.setattr(cli, "build_game", fake_build_game)

    def test_malformed_config_exits_with_error(self, tmp_path, monkeypatch):
        path = tmp_path / "game.yaml"
        path.write_text("game:\n\tseed: 1\n")
        monkeypatch.setattr(sys, "argv", ["wordwheel", str(path)])

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 1
        assert "Config error" in self.buffer.getvalue()

    def test_invalid_config_value_exits_with_error(self, tmp_path, monkeypatch):
        path = tmp_path / "game.yaml"
        path.write_text("logging:\n  enabled: \"no\"\n")
        monkeypatch.setattr(sys, "argv", ["wordwheel", str(path)])

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 1
        assert "logging.enabled" in self.buffer.getvalue()

    @pytest.mark.parametrize("error", [EOFError(), KeyboardInterrupt()])
    def test_closed_input_exits_cleanly(self, error, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["wordwheel", str(tmp_path / "missing.yaml")])
        self.use_input(monkeypatch, InterruptedInput(error))

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 0
        assert "Thanks for playing!" in self.buffer.getvalue()

    def test_finished_game_returns_normally(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["wordwheel", str(tmp_path / "missing.yaml")])
        script = ScriptedInput(["", "2", "a dog", ""])
        self.use_input(monkeypatch, script)

        cli.main()

        assert script.lines == []
        assert "Thanks for playing!" not in self.buffer.getvalue()
