# -*- coding: utf-8 -*-
"""
Play 2048 Game in a terminal.
"""
import argparse
import logging

from numpy.random import default_rng

from twentyfortyeight.core import GameStatus
from twentyfortyeight.envs import GameSession
from twentyfortyeight.utils import GameConfig, JsonHighScoreStore, MemoryHighScoreStore, direction_from_key

HELP = "Move with w/a/s/d, h/j/k/l or left/up/right/down. n: new game, c: keep playing after a win, q: quit."


def redraw(session: GameSession):
    """
    Redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game to draw
    """
    print(session.engine.render())
    print(f"score={session.score} best={session.high_score}")


def announce(session: GameSession):
    """
    Tell the player about a won or lost game.

    Parameters
    ----------
    session: GameSession
        The game session
    """
    if session.status is GameStatus.WON:
        print("You win! Press c to keep playing or n for a new game.")
    elif session.status is GameStatus.LOST:
        print("Game over! Press n for a new game.")


def key_handler(session: GameSession, key: str) -> bool:
    """
    Handle one key.

    Parameters
    ----------
    session: GameSession
        The game session

    key: str
        Key to handle

    Returns
    -------
    bool
        False once the player wants to quit.
    """
    key = key.strip().lower()

    if key == "q":
        return False

    if key == "n":
        session.new_game()
        redraw(session)
        return True

    if key == "c":
        session.keep_playing()
        announce(session)
        return True

    direction = direction_from_key(key)
    if direction is None:
        print(HELP)
        return True

    result = session.play(direction)
    if result.changed:
        redraw(session)

    announce(session)
    return True


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play 2048 in a terminal.")
    parser.add_argument("--size", type=int, default=4, help="side of the board")
    parser.add_argument("--win-value", type=int, default=2048, help="tile that wins the game")
    parser.add_argument("--seed", type=int, default=None, help="seed of the tile spawns")
    parser.add_argument("--store", default=None, help="JSON file keeping the high score")
    parser.add_argument("--verbose", action="store_true", help="log every move")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    game_config = GameConfig(size=args.size, win_value=args.win_value)
    store = JsonHighScoreStore(args.store, key=game_config.storage_key) if args.store else MemoryHighScoreStore()
    game = GameSession(config=game_config, store=store, generator=default_rng(args.seed))

    print(HELP)
    redraw(game)
    try:
        while key_handler(game, input("> ")):
            pass
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        game.store.submit(game.score)
