"""A move from one square to another."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """A move of a piece from a start square to an end square."""

    start_x: int
    start_y: int
    end_x: int
    end_y: int

    @classmethod
    def from_points(cls, start: tuple[int, int], end: tuple[int, int]) -> Move:
        """Build a move from two (x, y) points."""
        return cls(start[0], start[1], end[0], end[1])

    @property
    def start(self) -> tuple[int, int]:
        return (self.start_x, self.start_y)

    @property
    def end(self) -> tuple[int, int]:
        return (self.end_x, self.end_y)

    def __str__(self) -> str:
        return f"[{self.start_x}, {self.start_y} => {self.end_x}, {self.end_y}]"