"""Main entry point for WordWheel."""

import os
import random
import sys
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from rich.console import Console

from .communication.channels import ConsoleInput, ConsoleOutput
from .communication.markdown_logger import MarkdownLogger
from .communication.presenter import Presenter
from .engine.game import Game, GameConfig
from .engine.phrases import PhraseGenerator
from .engine.round import RoundEngine


# Load environment variables
load_dotenv()

console = Console()

DEFAULT_CONFIG_PATH = "config/game.yaml"


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> GameConfig:
    """Load game configuration from a YAML file.

    A missing file falls back to the defaults. WORDWHEEL_SEED overrides the
    configured seed.

    Raises:
        ValueError: If the file or one of its values is invalid.
    """
    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
        config = GameConfig.from_dict(data)
    else:
        console.print(f"[dim]No config at {config_path}, using defaults[/dim]")
        config = GameConfig()

    seed = os.getenv("WORDWHEEL_SEED")
    if seed:
        try:
            config.seed = int(seed)
        except ValueError as e:
            raise ValueError(f"WORDWHEEL_SEED must be an integer, got {seed!r}") from e

    return config


def build_game(config: GameConfig, console: Optional[Console] = None) -> Game:
    """Wire the engine, console channels and presenter together."""
    console = console or Console()
    generator = PhraseGenerator(random.Random(config.seed))
    presenter = Presenter(ConsoleOutput(console), pacing=config.pacing())
    logger = MarkdownLogger(base_dir=config.log_dir) if config.log_enabled else None

    return Game(
        engine=RoundEngine(generator),
        input_channel=ConsoleInput(console),
        presenter=presenter,
        logger=logger,
    )


def main():
    """Main entry point."""
    config_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH

    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Config error: {e}[/red]")
        sys.exit(1)

    game = build_game(config, console)

    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        console.print("\n[yellow]Thanks for playing![/yellow]")
        sys.exit(0)

    console.print()
    if game.logger and game.logger.game_dir:
        console.print(f"[dim]Game log saved to: {game.logger.game_dir}[/dim]")


def run():
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run()
