# checkers

A game of checkers played in the terminal with curses. You play black; the
computer plays red and picks a random legal move each turn.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

The `checkers` command needs the standard `curses` module, so it runs on
POSIX systems.

## Playing

```
checkers
```

The board is drawn with black pieces as `b` and red pieces as `r`; kings are
shown in upper case (`B`, `R`). Rows and columns are numbered 0 to 7, row 7 at
the top.

Controls:

- Arrow keys move the cursor across the board.
- Enter selects the square under the cursor: press it once on the piece to
  move and once on the destination square. The move is made at the next key
  press after that.
- Backspace clears both selected squares and takes back one Enter press.
- `q` or `Q` quits.

A move of two squares diagonally is treated as a jump: it removes the opposing
piece in between, and does nothing if that square is empty or holds one of
your own pieces. A piece that reaches the far row becomes a king; kings may
also move backwards. After your move the game waits one second before the
computer moves. The game stops as soon as either side has no legal move left.

## What it does not do

- The squares you select are not checked against the list of legal moves.
  A move that is not one or two squares diagonally raises
  `checkers.board.InvalidMoveError` and ends the program.
- There are no chained multi-jumps, no compulsory captures and no draw rules.
- The outcome is not printed when the game ends, and games cannot be saved.

## Using the library

The game logic does not need a terminal:

```python
from checkers.board import Board
from checkers.piece import Team

board = Board()
moves = board.valid_moves(Team.BLACK)
print(moves[0])
board.move_piece(*moves[0].start, *moves[0].end)
print(board.render())
```

- `checkers.board.Board` holds the pieces: `valid_moves`, `can_play`,
  `piece_at`, `move_piece`, `move_piece_to`, `jump_piece` and `render`.
- `checkers.piece.Piece` is a single piece with its `Team` and `Symbol`;
  a step off the board raises `OutOfBoardError`.
- `checkers.pmove.Move` is a move between two squares.
- `checkers.ai.RandomAlgorithm` chooses a random legal move for a side, and
  `checkers.player.AIPlayer` puts such an algorithm behind a player.
- `checkers.game.Game` runs turns between two players. It takes its input
  from a callable returning `Key` values and passes each `Frame` to an
  optional display callback, so it can be driven without curses;
  `end_state()` reports an `EndState`.
- `checkers.tree.PositionTree` is the balanced tree the board keeps its
  pieces in, ordered by position; `checkers.mtree.MTree` is a small tree of
  values with sort keys.