"""Move-choosing algorithms for computer players."""

from __future__ import annotations

import random

from checkers.board import Board
from checkers.piece import Team
from checkers.pmove import Move

NO_MOVE = Move(-1, -1, -1, -1)


class Algorithm:
    """Chooses moves on a board; the base choice is no move at all."""

    def __init__(self, board: Board) -> None:
        self.board = board

    def get_move(self, team: Team) -> Move:
        """Return the chosen move, or a move starting at (-1, -1) for none."""
        return NO_MOVE


class RandomAlgorithm(Algorithm):
    """Picks a move at random from the team's legal moves."""

    def __init__(self, board: Board, rng: random.Random | None = None) -> None:
        super().__init__(board)
        self._rng = rng if rng is not None else random.Random()

    def _random_range(self, low: int, high: int) -> int:
        if low == high:
            return low
        return low + self._rng.randrange(high)

    def get_move(self, team: Team) -> Move:
        moves = self.board.valid_moves(team)
        if not moves:
            return NO_MOVE
        return moves[self._random_range(0, len(moves) - 1)]