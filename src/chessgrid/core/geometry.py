"""Coordinate type, direction vectors and distance helpers.

Board layout: ``x`` is the row (0 at the top of the human player's view,
7 at the bottom) and ``y`` is the column.  Pawns therefore advance along
the x axis.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

SIZE = 8

# Pawn forward steps along the x axis.
ROW_ASCENDING = 1
ROW_DESCENDING = -1


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable board coordinate, compared by value."""

    x: int
    y: int

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.x < SIZE and 0 <= self.y < SIZE

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)

    def distance(self, other: Coordinate) -> int:
        return chebyshev_distance(self, other)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(Enum):
    """Unit step vectors plus a (0, 0) sentinel."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    TOP_RIGHT = (1, 1)
    TOP_LEFT = (1, -1)
    BOTTOM_RIGHT = (-1, 1)
    BOTTOM_LEFT = (-1, -1)
    NONE = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_coordinates(cls, start: Coordinate, end: Coordinate) -> Direction | None:
        """Direction whose vector is exactly ``end - start``, if any."""
        delta = signed_delta(start, end)
        for direction in cls:
            if direction is not cls.NONE and direction.value == delta:
                return direction
        return None


STRAIGHT_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)
DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.TOP_RIGHT,
    Direction.TOP_LEFT,
    Direction.BOTTOM_RIGHT,
    Direction.BOTTOM_LEFT,
)
ALL_DIRECTIONS: tuple[Direction, ...] = STRAIGHT_DIRECTIONS + DIAGONAL_DIRECTIONS


def chebyshev_distance(a: Coordinate, b: Coordinate) -> int:
    """Number of king steps between two squares."""
    return max(abs(a.x - b.x), abs(a.y - b.y))


def absolute_delta(a: Coordinate, b: Coordinate) -> tuple[int, int]:
    return abs(a.x - b.x), abs(a.y - b.y)


def signed_delta(a: Coordinate, b: Coordinate) -> tuple[int, int]:
    return b.x - a.x, b.y - a.y


def _sign(value: int) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def unit_step(a: Coordinate, b: Coordinate) -> tuple[int, int]:
    """Per-axis step (-1, 0 or 1) that walks from *a* toward *b*."""
    dx, dy = signed_delta(a, b)
    return _sign(dx), _sign(dy)


def is_diagonal(dx: int, dy: int) -> bool:
    """Whether absolute deltas describe a diagonal line."""
    return dx == dy


def is_straight(dx: int, dy: int) -> bool:
    """Whether absolute deltas describe a rank or file line."""
    return dx == 0 or dy == 0
