"""Terminal front end for playing checkers."""

from __future__ import annotations

import argparse
import curses
from typing import Any

from checkers.game import EndState, Frame, Game, Key

_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_ENTER: Key.ENTER,
    ord("\n"): Key.ENTER,
    ord("q"): Key.QUIT,
    ord("Q"): Key.QUIT,
}


def _translate_key(code: int) -> Key | None:
    if code == -1:
        return None
    return _KEYS.get(code, Key.OTHER)


def _put(window: Any, text: str) -> None:
    try:
        window.addstr(0, 0, text)
    except curses.error:
        pass
    window.refresh()


def run(screen: Any) -> EndState:
    """Play a game on a curses screen until it ends; return how it ended."""
    screen.keypad(True)
    board_win = screen.derwin(22, 39, 0, 0)
    info_win = screen.derwin(6, 9, 0, 40)
    status_win = screen.derwin(5, 20, 23, 0)

    def draw(frame: Frame) -> None:
        _put(board_win, frame.board)
        _put(info_win, frame.info)
        _put(status_win, frame.status)
        try:
            screen.move(*frame.cursor)
        except curses.error:
            pass
        screen.refresh()

    game = Game(keys=lambda: _translate_key(screen.getch()), on_display=draw)
    game.display()
    while game.play_turn():
        pass
    return game.end_state()


def main(argv: list[str] | None = None) -> int:
    """Start a game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="checkers",
        description="Play checkers against the computer. Arrow keys move, Enter selects, q quits.",
    )
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0