import curses
from unittest import mock

import pytest

from checkers.cli import main, run
from checkers.game import EndState


class FakeWindow:
    def __init__(self, keys=()):
        self._keys = list(keys)
        self.texts = []
        self.children = []
        self.keypad_on = False

    def keypad(self, flag):
        self.keypad_on = flag

    def derwin(self, rows, cols, y, x):
        child = FakeWindow()
        self.children.append(child)
        return child

    def addstr(self, y, x, text):
        self.texts.append(text)

    def refresh(self):
        pass

    def move(self, y, x):
        pass

    def getch(self):
        return self._keys.pop(0) if self._keys else -1


def test_run_quit_immediately():
    screen = FakeWindow([ord("q")])
    assert run(screen) is EndState.UNWINNABLE
    assert screen.keypad_on is True
    board_win = screen.children[0]
    assert board_win.texts[0].startswith("  +---+")


def test_run_human_move_then_quit():
    keys = (
        [curses.KEY_RIGHT, curses.KEY_RIGHT]
        + [curses.KEY_DOWN] * 5
        + [ord("\n"), curses.KEY_RIGHT, curses.KEY_UP, curses.KEY_ENTER]
        + [ord("x"), ord("Q")]
    )
    screen = FakeWindow(keys)
    with mock.patch("time.sleep"):
        result = run(screen)
    assert result is EndState.UNWINNABLE
    status_win = screen.children[2]
    assert any(text.startswith("ent: 2") for text in status_win.texts)
    board_win = screen.children[0]
    assert board_win.texts[-1] != board_win.texts[0]
    assert screen._keys == []


def test_main_help_exits():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2