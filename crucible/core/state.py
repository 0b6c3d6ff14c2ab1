"""Directions, move policies and the augmented search state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .grid import Coordinate


class Direction(Enum):
    """A cardinal move on the grid, valued by its ``(dx, dy)`` delta."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def perpendicular(self) -> Tuple["Direction", "Direction"]:
        """Return the two directions at right angles to this one."""

        if self in (Direction.UP, Direction.DOWN):
            return (Direction.LEFT, Direction.RIGHT)
        return (Direction.UP, Direction.DOWN)


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class MovePolicy:
    """Run-length bounds for one search.

    ``min_run`` consecutive moves in one direction are required before a
    turn (or a stop at the goal) is allowed, and at most ``max_run`` moves
    may be made before a turn is forced.
    """

    min_run: int = 1
    max_run: int = 3

    def __post_init__(self) -> None:
        if self.min_run < 0:
            raise ValueError(f"min_run must be >= 0, got {self.min_run}")
        if self.max_run < 1:
            raise ValueError(f"max_run must be >= 1, got {self.max_run}")
        if self.min_run > self.max_run:
            raise ValueError(
                f"min_run ({self.min_run}) must not exceed max_run ({self.max_run})"
            )

    def can_turn(self, run_length: int) -> bool:
        return run_length >= self.min_run

    def can_continue(self, run_length: int) -> bool:
        return run_length < self.max_run

    def can_stop(self, run_length: int) -> bool:
        """Return ``True`` if a path may end after a run of ``run_length``."""

        return run_length >= self.min_run


STANDARD = MovePolicy(1, 3)
ULTRA = MovePolicy(4, 10)


@dataclass(frozen=True)
class SearchState:
    """Position plus the movement history that constrains the next move.

    ``run_length`` is 0 only for the start state, which has no
    ``last_direction``.
    """

    coordinate: Coordinate
    last_direction: Optional[Direction] = None
    run_length: int = 0

    def __post_init__(self) -> None:
        if (self.run_length == 0) != (self.last_direction is None):
            raise ValueError("run_length is 0 exactly when last_direction is unset")

    @property
    def is_start(self) -> bool:
        return self.last_direction is None


__all__ = ["Direction", "MovePolicy", "SearchState", "STANDARD", "ULTRA"]
