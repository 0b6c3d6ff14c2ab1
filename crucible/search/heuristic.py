"""Admissible cost-to-goal estimate."""

from __future__ import annotations

from typing import Callable

from ..core.grid import Coordinate, Grid, manhattan_distance


Heuristic = Callable[[Coordinate], int]


def manhattan_heuristic(grid: Grid, goal: Coordinate) -> Heuristic:
    """Return ``h(c) = manhattan(c, goal) * grid.min_cost``.

    Every move enters a cell costing at least ``min_cost`` and shrinks the
    Manhattan distance by at most one, so the estimate is admissible and
    consistent.
    """

    floor = grid.min_cost

    def _h(coordinate: Coordinate) -> int:
        return manhattan_distance(coordinate, goal) * floor

    return _h


__all__ = ["Heuristic", "manhattan_heuristic"]
