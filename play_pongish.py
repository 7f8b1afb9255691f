#!/usr/bin/env python3
"""
Main script to launch Pongish with PyGame graphical interface
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from pongish.utils.config import GameConfig


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pongish - somewhat Pong-like")
    parser.add_argument(
        "--config", type=str, default=None, help="JSON file with GameConfig overrides"
    )
    parser.add_argument("--mute", action="store_true", help="Play without sound")
    parser.add_argument(
        "--ups",
        type=int,
        default=None,
        help="Simulation updates per second (lower it on slow hardware)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Load the configuration file if any, then apply command line overrides"""
    config = GameConfig.load_from_file(args.config) if args.config else GameConfig()

    overrides: dict[str, object] = {}
    if args.mute:
        overrides["SOUND_ENABLED"] = False
    if args.ups is not None:
        overrides["UPDATES_PER_SECOND"] = args.ups
    if overrides:
        config = config.with_overrides(**overrides)
    return config


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except (FileNotFoundError, ValidationError) as e:
        print(f"Invalid configuration: {e}")
        return 1

    print("=== PONGISH ===")
    print()
    print("CONTROLS:")
    print("  Mouse: Move the bat")
    print("  SPACE: Play / play again")
    print("  ESC: Quit")
    print()

    # Imported late so that --help works without a display
    from pongish.gui.game_app import main as run_app

    try:
        run_app(config)
    except KeyboardInterrupt:
        print("\nUser interruption")
    return 0


if __name__ == "__main__":
    sys.exit(main())
