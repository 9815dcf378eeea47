"""Players, human or computer."""

from __future__ import annotations

import enum

from checkers.ai import Algorithm
from checkers.piece import Team
from checkers.pmove import Move


class PlayerType(enum.Enum):
    """Who chooses a player's moves."""

    HUMAN = "human"
    COMPUTER = "computer"


class Player:
    """A player on one team, with a running score."""

    def __init__(self, team: Team = Team.BLACK, kind: PlayerType = PlayerType.HUMAN) -> None:
        self.team = team
        self.kind = kind
        self.score = 0

    def incr_score(self) -> None:
        """Add one to the score."""
        self.score += 1

    def select_move(self) -> Move:
        """A human's moves come from input, so this yields a placeholder move."""
        return Move(0, 0, 0, 0)


class AIPlayer(Player):
    """A computer player whose moves come from an algorithm."""

    def __init__(self, team: Team, algorithm: Algorithm) -> None:
        super().__init__(team, PlayerType.COMPUTER)
        self.algorithm = algorithm

    def select_move(self) -> Move:
        return self.algorithm.get_move(self.team)