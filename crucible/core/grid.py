"""Immutable grid of per-cell traversal costs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .errors import OutOfBoundsError, ParseError
from .state import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """Grid cell address; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Coordinate":
        """Return the neighbouring coordinate one move in ``direction``."""

        return Coordinate(self.x + direction.dx, self.y + direction.dy)


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


@dataclass(frozen=True)
class Grid:
    """Rectangular cost map, stored row-major.

    A grid is built once by :func:`parse` and shared read-only by any number
    of searches.
    """

    width: int
    height: int
    costs: Tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid must have at least one cell")
        if len(self.costs) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} costs, got {len(self.costs)}"
            )

    def in_bounds(self, coordinate: Coordinate) -> bool:
        return 0 <= coordinate.x < self.width and 0 <= coordinate.y < self.height

    def cost(self, coordinate: Coordinate) -> int:
        """Return the cost of entering ``coordinate``."""

        if not self.in_bounds(coordinate):
            raise OutOfBoundsError(
                f"({coordinate.x}, {coordinate.y}) is outside a "
                f"{self.width}x{self.height} grid"
            )
        return self.costs[coordinate.y * self.width + coordinate.x]

    @property
    def min_cost(self) -> int:
        return min(self.costs)

    @property
    def top_left(self) -> Coordinate:
        return Coordinate(0, 0)

    @property
    def bottom_right(self) -> Coordinate:
        return Coordinate(self.width - 1, self.height - 1)


def parse(text: str) -> Grid:
    """Build a :class:`Grid` from one line of digits per row.

    Leading and trailing blank lines are ignored. Raises :class:`ParseError`
    for an empty grid, a non-digit character or rows of unequal length.
    """

    lines = text.splitlines()
    offset = 0
    while lines and not lines[0].strip():
        lines.pop(0)
        offset += 1
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ParseError("grid is empty")

    width = len(lines[0])
    costs: list[int] = []
    for row, line in enumerate(lines):
        line_no = row + offset + 1
        if len(line) != width:
            raise ParseError(
                f"row has {len(line)} cells, expected {width}", line=line_no
            )
        for col, char in enumerate(line):
            if char not in "0123456789":
                raise ParseError(f"invalid cell {char!r}", line=line_no, column=col + 1)
            costs.append(int(char))

    grid = Grid(width=width, height=len(lines), costs=tuple(costs))
    logger.debug("Parsed %dx%d grid", grid.width, grid.height)
    return grid


__all__ = ["Coordinate", "Grid", "parse", "manhattan_distance"]
