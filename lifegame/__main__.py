from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from lifegame.config import load_settings
from lifegame.display import Display, ScriptedDisplay, StdIODisplay
from lifegame.errors import ConfigError, DomainError
from lifegame.game_setup import build_default_game

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifegame", description="The game of Life, one command at a time")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random number generator")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: LIFEGAME_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--json", action="store_true", help="Print the final results as JSON")
    parser.add_argument("--script", type=Path, default=None, help="Read commands from a file instead of stdin")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"lifegame: {e}", file=sys.stderr)
        return 2

    # Logs go to stderr so they never interleave with the game on stdout.
    logging.basicConfig(level=args.log_level or settings.log_level, stream=sys.stderr)

    seed = args.seed if args.seed is not None else settings.seed
    rng = random.Random(seed)

    display: Display
    if args.script is not None:
        try:
            lines = args.script.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            print(f"lifegame: {e}", file=sys.stderr)
            return 2
        display = ScriptedDisplay(lines, echo=True)
    else:
        display = StdIODisplay()

    try:
        game = build_default_game(display=display, rng=rng)
    except DomainError as e:
        print(f"lifegame: {e}", file=sys.stderr)
        return 2

    logger.debug("starting game seed=%s", seed)
    results = game.start()
    if args.json:
        print(results.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
