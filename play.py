# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
import sys
from argparse import ArgumentParser
from typing import Sequence

from game2048.addons import GameConfig
from game2048.envs import GameSession
from game2048.utils import ConsoleDisplay, ConsoleInput, NullDisplay, ScriptedInput, TileGenerator
from game2048.utils.base import Display, InputSource


def parse_config(argv: Sequence[str] | None = None) -> GameConfig:
    """
    Read the command line options.

    Parameters
    ----------
    argv: Sequence[str], optional
        Arguments, default to ``sys.argv[1:]``

    Returns
    -------
    GameConfig
        Options of the session
    """
    parser = ArgumentParser(description="Play the 2048 game.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log", action="store_true", help="Record moves and random tiles selected")
    parser.add_argument("--testing", action="store_true", help="Take random tiles and moves from standard input")
    parser.add_argument("--no-display", dest="display", action="store_false", help="Do not show the board")
    parser.add_argument("--size", type=int, default=4, help="Number of rows and of columns")
    parser.add_argument("--winning", type=int, default=2048, help="Score ending the game")
    args = parser.parse_args(argv)

    try:
        return GameConfig(
            size=args.size,
            winning=args.winning,
            seed=args.seed,
            log=args.log,
            display=args.display,
            testing=args.testing,
        )
    except ValueError as error:
        parser.error(str(error))


def build_surfaces(config: GameConfig) -> tuple[Display, InputSource]:
    """
    Choose the display and the input source matching the options.

    Parameters
    ----------
    config: GameConfig
        Options of the session

    Returns
    -------
    tuple[Display, InputSource]
        The display and the input source
    """
    if config.testing:
        display = ConsoleDisplay(config.size) if config.display else NullDisplay()
        return display, ScriptedInput(sys.stdin)

    tiles = TileGenerator(config.size, seed=config.seed)
    if not config.display:
        return ConsoleDisplay(config.size), ConsoleInput(tiles)

    from game2048.utils.windows import WindowBoard

    window = WindowBoard(title="2048 Game", size=config.size, tiles=tiles)
    window.show()
    return window, window


def main(argv: Sequence[str] | None = None) -> int:
    """
    Play games until the player quits.
    """
    config = parse_config(argv)
    logging.basicConfig(level=logging.INFO if config.log else logging.WARNING, format="%(message)s")

    display, source = build_surfaces(config)
    session = GameSession(display, source, config)
    session.run()

    print(f"Best score: {session.max_score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
