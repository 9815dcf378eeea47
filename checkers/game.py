"""A game of checkers between two players, driven by key presses."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable
from dataclasses import dataclass

from checkers.ai import RandomAlgorithm
from checkers.board import Board
from checkers.piece import Team
from checkers.player import AIPlayer, Player, PlayerType
from checkers.pmove import Move

BOARD_WINDOW_ROWS = 22
BOARD_WINDOW_COLS = 39


class EndState(enum.Enum):
    """How a game ended."""

    P1_VIC = "p1_victory"
    P2_VIC = "p2_victory"
    QUIT = "quit"
    UNWINNABLE = "unwinnable"


class Key(enum.Enum):
    """Input keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    BACKSPACE = "backspace"
    QUIT = "quit"
    OTHER = "other"


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw the game at one moment."""

    board: str
    info: str
    status: str
    cursor: tuple[int, int]


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    return int(a / b)


KeySource = Callable[[], "Key | None"]


class Game:
    """Two players taking turns on one board; humans select squares with a cursor."""

    def __init__(
        self,
        board: Board | None = None,
        player1: Player | None = None,
        player2: Player | None = None,
        keys: KeySource | None = None,
        on_display: Callable[[Frame], None] | None = None,
        turn_delay: float = 1.0,
    ) -> None:
        self.board = board if board is not None else Board()
        self.player1 = player1 if player1 is not None else Player()
        self.player2 = (
            player2
            if player2 is not None
            else AIPlayer(Team.RED, RandomAlgorithm(self.board))
        )
        self._keys: KeySource = keys if keys is not None else (lambda: None)
        self._on_display = on_display
        self._turn_delay = turn_delay
        self.cursor_x = 4
        self.cursor_y = 1
        self._clear_selection()
        self._entries = 0

    def _clear_selection(self) -> None:
        self._start = (-1, -1)
        self._end = (-1, -1)

    def do_move(self, move: Move) -> None:
        """Apply a move, as a jump when it spans more than one square."""
        sx, sy = move.start
        nx, ny = move.end
        if abs(nx - sx) > 1 and abs(ny - sy) > 1:
            self.board.jump_piece(sx, sy, nx, ny)
        else:
            self.board.move_piece(sx, sy, nx, ny)

    def select_move(self, player: Player) -> None:
        """Let a player choose a move and apply it unless it is a no-move."""
        move = player.select_move()
        if move.start_x == -1:
            return
        self.do_move(move)

    def end_state(self) -> EndState:
        """Classify the position by which teams still have a legal move."""
        black = self.board.can_play(Team.BLACK)
        red = self.board.can_play(Team.RED)
        if not black and not red:
            return EndState.QUIT
        if black and not red:
            return EndState.P1_VIC
        if not black and red:
            return EndState.P2_VIC
        return EndState.UNWINNABLE

    def _status(self) -> str:
        sx, sy = self._start
        ex, ey = self._end
        return (
            f"ent: {self._entries}\n"
            f"sx: {_cdiv(sx, 4) - 1}\n"
            f"sy: {_cdiv(sy, 2) - 4}\n"
            f"ex: {_cdiv(ex, 4) - 1}\n"
            f"ey: {_cdiv(ey, 2) - 4}\n"
        )

    def display(self) -> Frame:
        """Build the current frame and hand it to the display callback."""
        frame = Frame(
            board=self.board.render(),
            info=f"cx: {self.cursor_x}\ncy: {BOARD_WINDOW_ROWS - self.cursor_y}\n",
            status=self._status(),
            cursor=(self.cursor_y, self.cursor_x),
        )
        if self._on_display is not None:
            self._on_display(frame)
        return frame

    def handle_key(self, key: Key) -> bool:
        """Apply one key to the cursor and selection; False means the player quit."""
        if key is Key.BACKSPACE:
            self._entries -= 1
            self._clear_selection()
        elif key is Key.ENTER:
            self._entries += 1
            square = (self.cursor_x, BOARD_WINDOW_ROWS - self.cursor_y + 1)
            if self._entries == 1:
                self._start = square
            elif self._entries == 2:
                self._end = square
        elif key is Key.UP:
            self.cursor_y = max(self.cursor_y - 2, 1)
        elif key is Key.DOWN:
            self.cursor_y = min(self.cursor_y + 2, BOARD_WINDOW_ROWS - 7)
        elif key is Key.LEFT:
            self.cursor_x = max(4, self.cursor_x - 4)
        elif key is Key.RIGHT:
            self.cursor_x = min(BOARD_WINDOW_COLS - 7, self.cursor_x + 4)
        elif key is Key.QUIT:
            return False
        return True

    def _get_input(self) -> bool:
        self._entries = 0
        self._clear_selection()
        while True:
            key = self._keys()
            if key is None or self._entries >= 2:
                break
            if not self.handle_key(key):
                return False
            self.display()
        sx, sy = self._start
        ex, ey = self._end
        move = Move(
            _cdiv(sx, 4) - 1,
            _cdiv(sy, 2) - 4,
            _cdiv(ex, 4) - 1,
            _cdiv(ey, 2) - 4,
        )
        self.do_move(move)
        self.display()
        return True

    def _take_turn(self, player: Player) -> bool:
        if player.kind is PlayerType.HUMAN:
            return self._get_input()
        if player.kind is PlayerType.COMPUTER:
            self.select_move(player)
        return True

    def play_turn(self) -> bool:
        """Play one move for each player; False when the game cannot go on."""
        if not self.board.can_play(Team.BLACK) or not self.board.can_play(Team.RED):
            return False
        if not self._take_turn(self.player1):
            return False
        self.display()
        time.sleep(self._turn_delay)
        if not self._take_turn(self.player2):
            return False
        self.display()
        return True