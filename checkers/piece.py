"""Checkers pieces and their single-step movements."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass


class Symbol(enum.Enum):
    """The rank of a piece."""

    REGULAR = "regular"
    KING = "king"
    DEAD = "dead"


class Team(enum.Enum):
    """The side a piece belongs to."""

    RED = "red"
    BLACK = "black"
    NONE = "none"


class OutOfBoardError(RuntimeError):
    """Raised when a movement would take a piece off the board."""


# Offsets (dx, dy) of each movement, per team.
_STEPS: dict[str, dict[Team, tuple[int, int]]] = {
    "r_move_left": {Team.RED: (1, -1), Team.BLACK: (-1, 1)},
    "r_move_right": {Team.RED: (-1, -1), Team.BLACK: (1, 1)},
    "k_move_left": {Team.RED: (1, 1), Team.BLACK: (-1, -1)},
    "k_move_right": {Team.RED: (-1, 1), Team.BLACK: (1, -1)},
    "r_jump_left": {Team.RED: (2, -2), Team.BLACK: (-2, 2)},
    "r_jump_right": {Team.RED: (-2, -2), Team.BLACK: (2, 2)},
    "k_jump_left": {Team.RED: (2, 2), Team.BLACK: (-2, -2)},
    "k_jump_right": {Team.RED: (-2, 2), Team.BLACK: (2, -2)},
}

# Movements whose upper bound check allows landing one past the edge.
_UPPER_SLACK: dict[tuple[str, Team], tuple[int, int]] = {
    ("k_move_right", Team.BLACK): (1, 0),
    ("k_jump_left", Team.RED): (0, 1),
}


def _within(value: int, delta: int, width: int, slack: int) -> bool:
    if delta > 0:
        return value < width + slack
    if delta < 0:
        return value >= 0
    return True


@dataclass
class Piece:
    """A piece on the board; movements change its position in place."""

    x: int = 0
    y: int = 0
    team: Team = Team.RED
    symbol: Symbol = Symbol.REGULAR

    def _shift(self, name: str, width: int) -> None:
        step = _STEPS[name].get(self.team)
        if step is None:
            return
        dx, dy = step
        slack_x, slack_y = _UPPER_SLACK.get((name, self.team), (0, 0))
        nx, ny = self.x + dx, self.y + dy
        if _within(nx, dx, width, slack_x) and _within(ny, dy, width, slack_y):
            self.x, self.y = nx, ny
        else:
            raise OutOfBoardError(
                f"{self}->{name}({width}): Move causes piece to be outside board."
            )

    def r_move_left(self, width: int) -> None:
        """Step diagonally forward-left."""
        self._shift("r_move_left", width)

    def r_move_right(self, width: int) -> None:
        """Step diagonally forward-right."""
        self._shift("r_move_right", width)

    def k_move_left(self, width: int) -> None:
        """Step diagonally backward (king direction), undoing a forward-right step."""
        self._shift("k_move_left", width)

    def k_move_right(self, width: int) -> None:
        """Step diagonally backward (king direction), undoing a forward-left step."""
        self._shift("k_move_right", width)

    def r_jump_left(self, width: int) -> None:
        """Jump two squares forward-left."""
        self._shift("r_jump_left", width)

    def r_jump_right(self, width: int) -> None:
        """Jump two squares forward-right."""
        self._shift("r_jump_right", width)

    def k_jump_left(self, width: int) -> None:
        """Jump two squares backward, undoing a forward-right jump."""
        self._shift("k_jump_left", width)

    def k_jump_right(self, width: int) -> None:
        """Jump two squares backward, undoing a forward-left jump."""
        self._shift("k_jump_right", width)

    def promote(self) -> None:
        """Turn a regular piece into a king."""
        if self.symbol is Symbol.REGULAR:
            self.symbol = Symbol.KING

    def copy(self) -> Piece:
        """Return an independent copy of this piece."""
        return dataclasses.replace(self)

    def __str__(self) -> str:
        if self.team is Team.NONE:
            return " "
        return f"< {self.team.value}, {self.x}, {self.y} >"