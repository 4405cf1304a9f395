"""Snake game field: directions, movement and cell bookkeeping.

Empty cells hold 0 and the apple holds -1. Snake cells hold 1 at the tail
up to the snake's length at the head.
"""

from __future__ import annotations

import random
from enum import Enum

EMPTY = 0
APPLE = -1

Position = tuple[int, int]


class Direction(Enum):
    UP = "u"
    DOWN = "d"
    LEFT = "l"
    RIGHT = "r"


_KEYS = {
    "w": (Direction.UP, Direction.DOWN),
    "s": (Direction.DOWN, Direction.UP),
    "a": (Direction.LEFT, Direction.RIGHT),
    "d": (Direction.RIGHT, Direction.LEFT),
}

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def turn(current: Direction, key: str | None) -> Direction:
    """Return the new direction after ``key``; reversing is not allowed."""
    if key not in _KEYS:
        return current
    wanted, opposite = _KEYS[key]
    return current if current is opposite else wanted


def neighbour(position: Position, direction: Direction, size: int) -> Position:
    """Return the adjacent cell in ``direction``, wrapping around the edges."""
    di, dj = _DELTAS[direction]
    i, j = position
    return (i + di) % size, (j + dj) % size


def _is_snake(value: int) -> bool:
    return value not in (EMPTY, APPLE)


class Field:
    """A square grid of cells."""

    def __init__(self, size: int, cells: list[list[int]] | None = None) -> None:
        if cells is None:
            cells = [[EMPTY] * size for _ in range(size)]
        if len(cells) != size or any(len(row) != size for row in cells):
            raise ValueError(f"cells must form a {size}x{size} grid")
        self.size = size
        self.cells = cells

    def __getitem__(self, position: Position) -> int:
        i, j = position
        return self.cells[i][j]

    def __setitem__(self, position: Position, value: int) -> None:
        i, j = position
        self.cells[i][j] = value

    def _positions(self):
        return ((i, j) for i in range(self.size) for j in range(self.size))

    @classmethod
    def generate(cls, size: int, rng: random.Random | None = None) -> Field:
        """Create a field with one apple and a one-cell snake at random places."""
        if size < 2:
            raise ValueError("field size must be at least 2")
        rng = rng or random.Random()
        field = cls(size)
        apple = rng.randint(0, size * size - 1)
        snake = rng.randint(0, size * size - 1)
        while snake == apple:
            snake = rng.randint(0, size * size - 1)
        field[divmod(apple, size)] = APPLE
        field[divmod(snake, size)] = 1
        return field

    def head(self, length: int) -> Position:
        """Return the first cell, row by row, that holds ``length``."""
        for position in self._positions():
            if self[position] == length:
                return position
        raise LookupError(f"no cell holds {length}")

    def lengthen(self, length: int, cell: Position) -> int:
        """Grow the snake onto ``cell`` and return its new length."""
        length += 1
        self[cell] = length
        for position in self._positions():
            if _is_snake(self[position]):
                self[position] += 1
        return length

    def add_apple(self, rng: random.Random | None = None) -> Position:
        """Put an apple on a random empty cell and return that cell."""
        rng = rng or random.Random()
        empty = [position for position in self._positions() if self[position] == EMPTY]
        if not empty:
            raise ValueError("no empty cell for an apple")
        position = empty[rng.randint(0, len(empty) - 1)]
        self[position] = APPLE
        return position

    def step(self) -> None:
        """Age every snake cell by one; the tail cell becomes empty."""
        for position in self._positions():
            if _is_snake(self[position]):
                self[position] -= 1