from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .app import run_auto, run_gui, run_headless
from .exceptions import ConfigError
from .settings import GameConfig


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="roguelike",
        description="Turn-based dungeon exploration",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Print the opening frame as ASCII and exit")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible dungeons")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = GameConfig.from_sources(file_path=args.config)
    except ConfigError as exc:
        logging.getLogger(__name__).error("Invalid configuration: %s", exc)
        return 2
    # Honor CLI over file and env
    if args.seed is not None:
        config.seed = args.seed

    if args.headless:
        return run_headless(config)
    if args.gui:
        return run_gui(config)
    return run_auto(config)


if __name__ == "__main__":
    sys.exit(main())
