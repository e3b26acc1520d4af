"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import random

from planestrike.game.app.autoplay import run_autoplay
from planestrike.game.app.diagnostics import run_diagnostics
from planestrike.game.core.rules import winner
from planestrike.game.infra.config import load_default_env_files, load_game_config
from planestrike.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plane Strike rules engine runner.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for fleets and AI shots.")
    parser.add_argument(
        "--autoplay", action="store_true", help="Play a headless heuristic-vs-heuristic match."
    )
    parser.add_argument("--no-log-file", action="store_true", help="Log to console only.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run startup diagnostics and, optionally, an autoplay match."""
    args = _build_parser().parse_args(argv)
    load_default_env_files()
    setup_logging(to_file=not args.no_log_file)
    config = load_game_config()
    seed = args.seed if args.seed is not None else config.seed
    logger.info("startup seed=%s", seed)

    try:
        failures = run_diagnostics()
        if failures:
            return 1
        if args.autoplay:
            state = run_autoplay(
                random.Random(seed),
                max_turns=config.autoplay_max_turns,
                fleet_max_attempts=config.fleet_max_attempts,
            )
            side = winner(state)
            print(f"Winner: {side.value if side else 'none'} ({state.status.value})")
        return 0
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
