"""A terminal checkers game with a random-move computer opponent."""

__version__ = "0.1.0"