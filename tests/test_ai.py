import random

from checkers.ai import Algorithm, RandomAlgorithm
from checkers.board import Board
from checkers.piece import Piece, Team
from checkers.pmove import Move


def test_base_algorithm_returns_no_move():
    algo = Algorithm(Board())
    assert algo.get_move(Team.BLACK) == Move(-1, -1, -1, -1)


def test_random_returns_no_move_when_team_cannot_play():
    board = Board([Piece(2, 2, Team.BLACK)])
    algo = RandomAlgorithm(board, random.Random(1))
    assert algo.get_move(Team.RED) == Move(-1, -1, -1, -1)


def test_random_returns_only_move():
    board = Board([Piece(0, 2, Team.BLACK)])
    algo = RandomAlgorithm(board, random.Random(1))
    assert algo.get_move(Team.BLACK) == Move(0, 2, 1, 3)


def test_random_with_two_moves_picks_first():
    board = Board([Piece(3, 3, Team.BLACK)])
    algo = RandomAlgorithm(board, random.Random(7))
    first = board.valid_moves(Team.BLACK)[0]
    assert all(algo.get_move(Team.BLACK) == first for _ in range(20))


def test_random_move_is_valid_for_team():
    board = Board()
    algo = RandomAlgorithm(board, random.Random(3))
    for team in (Team.RED, Team.BLACK):
        valid = board.valid_moves(team)
        for _ in range(20):
            assert algo.get_move(team) in valid


def test_random_is_reproducible_with_seed():
    board = Board()
    a = RandomAlgorithm(board, random.Random(42))
    b = RandomAlgorithm(board, random.Random(42))
    assert [a.get_move(Team.RED) for _ in range(10)] == [
        b.get_move(Team.RED) for _ in range(10)
    ]