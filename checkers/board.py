"""The checkers board: piece placement, legal moves and rendering."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from checkers.piece import Piece, Symbol, Team
from checkers.pmove import Move
from checkers.tree import PositionTree

BOARD_SIZE = 8


class InvalidMoveError(RuntimeError):
    """Raised when a piece is asked to move by an offset it cannot take."""


_Step = Callable[[Piece, int], None]

# The piece movement that produces each (dx, dy) offset, per team.
_DELTA_STEPS: dict[Team, dict[tuple[int, int], _Step]] = {
    Team.RED: {
        (-1, -1): Piece.r_move_right,
        (-1, 1): Piece.k_move_right,
        (1, -1): Piece.r_move_left,
        (1, 1): Piece.k_move_left,
        (-2, -2): Piece.r_jump_right,
        (-2, 2): Piece.k_jump_right,
        (2, -2): Piece.r_jump_left,
        (2, 2): Piece.k_jump_left,
    },
    Team.BLACK: {
        (-1, -1): Piece.k_move_left,
        (-1, 1): Piece.r_move_left,
        (1, -1): Piece.k_move_right,
        (1, 1): Piece.r_move_right,
        (-2, -2): Piece.k_jump_left,
        (-2, 2): Piece.r_jump_left,
        (2, -2): Piece.k_jump_right,
        (2, 2): Piece.r_jump_right,
    },
}

_PROMOTION_ROW = {Team.RED: 0, Team.BLACK: BOARD_SIZE - 1}

_CELL_LETTERS = {
    (Team.RED, Symbol.REGULAR): "r",
    (Team.RED, Symbol.KING): "R",
    (Team.BLACK, Symbol.REGULAR): "b",
    (Team.BLACK, Symbol.KING): "B",
}


def _forward(team: Team) -> int:
    return (team is Team.BLACK) - (team is Team.RED)


def _inbounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def _starting_pieces() -> Iterator[Piece]:
    for i in range(BOARD_SIZE):
        for j in range(7 - i % 2, 4, -2):
            yield Piece(7 - i, j, Team.RED)
        for j in range(i % 2, 3, 2):
            yield Piece(i, j, Team.BLACK)


class Board:
    """An 8x8 checkers board holding red and black pieces."""

    def __init__(self, pieces: Iterable[Piece] | None = None) -> None:
        self._pieces = PositionTree(_starting_pieces() if pieces is None else pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def pieces(self) -> list[Piece]:
        """Copies of all pieces, ordered by x then y."""
        return self._pieces.inorder()

    def piece_at(self, x: int, y: int) -> Piece | None:
        """A copy of the piece on the given square, or None."""
        node = self._pieces.get_item(x, y)
        return None if node is None else node.value.copy()

    def can_play(self, team: Team) -> bool:
        """Whether the team has at least one legal move."""
        return bool(self.valid_moves(team))

    def _occupied(self, p: Piece, dx: int, dy: int) -> bool:
        x, y = p.x + dx, p.y + dy
        if not _inbounds(x, y):
            return True
        return self._pieces.get_item(x, y) is not None

    def _opposing(self, p: Piece, dx: int, dy: int) -> bool:
        node = self._pieces.get_item(p.x + dx, p.y + dy)
        return node is not None and node.value.team is not p.team

    def _can_jump(self, p: Piece, dx: int, dy: int) -> bool:
        return (
            self._occupied(p, dx, dy)
            and self._opposing(p, dx, dy)
            and not self._occupied(p, 2 * dx, 2 * dy)
        )

    def _targets(self, p: Piece) -> Iterator[tuple[int, int]]:
        forward = _forward(p.team)
        right = forward
        directions = [(-right, forward), (right, forward)]
        if p.symbol is Symbol.KING:
            directions += [(-right, -forward), (right, -forward)]
        for dx, dy in directions:
            if not self._occupied(p, dx, dy):
                yield p.x + dx, p.y + dy
        for dx, dy in directions:
            if self._can_jump(p, dx, dy):
                yield p.x + 2 * dx, p.y + 2 * dy

    def valid_moves(self, team: Team | None = None) -> list[Move]:
        """Legal moves of the team's pieces, or of every piece when team is None."""
        return [
            Move.from_points((p.x, p.y), target)
            for p in self._pieces.inorder()
            if team is None or p.team is team
            for target in self._targets(p)
        ]

    def move_piece(self, sx: int, sy: int, nx: int, ny: int) -> None:
        """Move the piece on (sx, sy) to (nx, ny); an empty start square is ignored."""
        node = self._pieces.get_item(sx, sy)
        if node is None:
            return
        self.move_piece_to(node.value.copy(), nx, ny)

    def move_piece_to(self, piece: Piece, x: int, y: int) -> None:
        """Move the piece standing at ``piece``'s square to (x, y), promoting it at the far row."""
        if piece.team is Team.NONE:
            self._pieces.remove(piece)
            return
        moved = piece.copy()
        dx, dy = x - moved.x, y - moved.y
        step = _DELTA_STEPS[moved.team].get((dx, dy))
        if step is None:
            raise InvalidMoveError(
                f"move_piece({piece}, {x} {y}) Invalid move: {piece.team.value}. "
                f"dx = {dx}; dy = {dy}"
            )
        step(moved, BOARD_SIZE)
        if moved.y == _PROMOTION_ROW[moved.team]:
            moved.promote()
        self._pieces.remove(piece)
        self._pieces.insert(moved)

    def jump_piece(self, sx: int, sy: int, nx: int, ny: int) -> None:
        """Jump from (sx, sy) to (nx, ny), capturing the opposing piece between."""
        mover = self._pieces.get_item(sx, sy)
        mid_x = sx + int((nx - sx) / 2)
        mid_y = sy + int((ny - sy) / 2)
        captured = self._pieces.get_item(mid_x, mid_y)
        if mover is None or captured is None:
            return
        if mover.value.team is captured.value.team:
            return
        piece = mover.value.copy()
        self._pieces.remove(captured.value)
        self.move_piece_to(piece, nx, ny)

    def render(self) -> str:
        """Draw the board as text, row 7 at the top."""
        parts = ["  +", "---+" * BOARD_SIZE]
        for row in range(BOARD_SIZE - 1, -1, -1):
            parts.append(f"\n{row} | ")
            for col in range(BOARD_SIZE):
                node = self._pieces.get_item(col, row)
                letter = " "
                if node is not None:
                    letter = _CELL_LETTERS.get((node.value.team, node.value.symbol), " ")
                parts.append(f"{letter} | ")
            parts.append("\n  .")
            parts.append("---." * BOARD_SIZE)
        parts.append("\n  ")
        parts.extend(f"  {col} " for col in range(BOARD_SIZE))
        parts.append("\n")
        return "".join(parts)