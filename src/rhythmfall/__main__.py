"""Entry point for `python -m rhythmfall` or the `rhythmfall` console script."""

import argparse
import logging
from pathlib import Path

from rhythmfall.app import App
from rhythmfall.settings import SettingsError, load_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="RhythmFall — press the falling keys in time")
    parser.add_argument("--config", type=Path, default=None, help="JSON settings file")
    parser.add_argument("--spawns", type=int, default=None, help="Number of symbols per game")
    parser.add_argument("--speed-factor", type=int, default=None, help="Higher is slower")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for spawns")
    parser.add_argument("--any-key", action="store_true", help="Judge every key, not only the alphabet")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug")
    args = parser.parse_args()

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.config).with_overrides(
            total_spawns=args.spawns,
            speed_factor=args.speed_factor,
            seed=args.seed,
            only_valid_keys=False if args.any_key else None,
        ).validate()
    except SettingsError as exc:
        parser.error(str(exc))

    App(settings).run()


if __name__ == "__main__":
    main()
