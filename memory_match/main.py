"""Main entry point for the memory matching game."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from memory_match.config import GameConfig, GameLogConfig, load_config
from memory_match.frontend.console import ConsoleFrontend
from memory_match.game.engine import GameEngine
from memory_match.logging import GameLogger
from memory_match.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str) -> str:
    """Generate log filename with timestamp.

    Format: {timestamp}_memory.jsonl

    Args:
        log_dir: Directory for log files.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_memory.jsonl")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Memory matching card game")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--pairs",
        type=int,
        help="Number of card pairs (overrides config)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        help="Cards per board row (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for shuffling (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    try:
        config = load_config(args.config)

        # Apply command-line overrides; re-validate so bad values are rejected
        overrides = {}
        if args.pairs is not None:
            overrides["pair_count"] = args.pairs
        if args.columns is not None:
            overrides["columns"] = args.columns
        if args.seed is not None:
            overrides["seed"] = args.seed
        if overrides:
            config.game = GameConfig.model_validate(
                {**config.game.model_dump(), **overrides}
            )
        if args.verbose:
            config.logging.level = "DEBUG"
    except (ValidationError, yaml.YAMLError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level)

    # Determine game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    if game_log_enabled:
        game_log_config = GameLogConfig(
            enabled=True, output_path=generate_log_filename(game_log_dir)
        )
        logger.info(f"Game log: {game_log_config.output_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    display = GameDisplay(columns=config.game.columns)

    try:
        with GameLogger(game_log_config) as game_logger:
            game_logger.log_session_start(config.game.pair_count, config.game.columns)

            with GameEngine(config, game_logger=game_logger) as engine:
                frontend = ConsoleFrontend(engine, display)
                frontend.run()
                game_logger.log_session_end(engine.generation, frontend.games_won)

        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
