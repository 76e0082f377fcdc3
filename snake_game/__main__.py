#!/usr/bin/env python3
"""
Snake: pygame desktop game.

- Arrow keys / WASD to move, the board wraps around at the edges
- Eat food to grow; gold food is worth 30, red food 10
- A new level every 50 points, each one a little faster
- P/ESC pause, N new game, O settings, M toggle sound, Q quit

Requires: pygame (pip install pygame)
"""
from __future__ import annotations

import argparse
import logging

from . import config
from .app import run
from .settings import Settings
from .sound import SoundService


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake_game", description="Classic Snake")
    parser.add_argument("--width", type=int, default=config.WINDOW_W, help="window width in pixels")
    parser.add_argument("--height", type=int, default=config.WINDOW_H, help="window height in pixels")
    parser.add_argument("--difficulty", type=int, choices=(1, 2, 3), default=config.DIFFICULTY_MEDIUM,
                        help="1 easy, 2 medium, 3 hard")
    parser.add_argument("--no-sound", action="store_true", help="start with sound off")
    parser.add_argument("--no-grid", action="store_true", help="hide grid lines")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings = Settings(
        show_grid=not args.no_grid,
        sound_enabled=not args.no_sound,
        difficulty=args.difficulty,
    )
    run(args.width, args.height, settings=settings, sound=SoundService())


if __name__ == "__main__":
    main()
