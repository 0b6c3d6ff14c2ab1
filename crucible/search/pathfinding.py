"""Run-length constrained A* search over a :class:`~crucible.core.grid.Grid`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..core.errors import NoPathError, OutOfBoundsError
from ..core.grid import Coordinate, Grid
from ..core.state import MovePolicy, SearchState
from .closed_set import ClosedSet
from .frontier import Frontier, FrontierNode
from .heuristic import manhattan_heuristic
from .transitions import successors

logger = logging.getLogger(__name__)


class SearchStatus(Enum):
    INIT = "init"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchStats:
    """Counters collected during one search."""

    expanded: int = 0
    discarded: int = 0
    pushed: int = 0


@dataclass
class SearchResult:
    """Outcome of a successful search."""

    cost: int
    path: List[Coordinate]
    end_state: SearchState
    stats: SearchStats = field(default_factory=SearchStats)


def _reconstruct(
    came_from: Dict[SearchState, SearchState], current: SearchState
) -> List[Coordinate]:
    path = [current.coordinate]
    while current in came_from:
        current = came_from[current]
        path.append(current.coordinate)
    path.reverse()
    return path


class SearchDriver:
    """Single-use search from ``start`` to ``goal`` under ``policy``.

    The frontier and closed set belong to this instance and are discarded
    with it; only the grid is shared between searches.
    """

    def __init__(
        self,
        grid: Grid,
        policy: MovePolicy,
        start: Coordinate,
        goal: Coordinate,
    ) -> None:
        for name, coordinate in (("start", start), ("goal", goal)):
            if not grid.in_bounds(coordinate):
                raise OutOfBoundsError(
                    f"{name} ({coordinate.x}, {coordinate.y}) is outside a "
                    f"{grid.width}x{grid.height} grid"
                )
        self.grid = grid
        self.policy = policy
        self.start = start
        self.goal = goal
        self.status = SearchStatus.INIT
        self.stats = SearchStats()
        self._heuristic = manhattan_heuristic(grid, goal)
        self._frontier = Frontier()
        self._closed = ClosedSet()
        self._came_from: Dict[SearchState, SearchState] = {}

    def _is_goal(self, state: SearchState) -> bool:
        return state.coordinate == self.goal and self.policy.can_stop(state.run_length)

    def run(self) -> SearchResult:
        """Execute the search to completion.

        Raises :class:`NoPathError` when the frontier empties first.
        """

        if self.status is not SearchStatus.INIT:
            raise RuntimeError("SearchDriver instances are single-use")

        start_state = SearchState(self.start)
        self._frontier.insert_or_update(
            FrontierNode(start_state, 0, self._heuristic(self.start))
        )
        self.stats.pushed += 1
        self.status = SearchStatus.RUNNING
        logger.debug(
            "Search %s -> %s with policy %s", self.start, self.goal, self.policy
        )

        while self._frontier:
            node = self._frontier.pop_min()
            state = node.state
            if self._closed.contains(state):
                self.stats.discarded += 1
                continue
            self._closed.mark_visited(state)

            if self._is_goal(state):
                self.status = SearchStatus.FOUND
                logger.debug(
                    "Found goal at cost %d after %d expansions",
                    node.g_cost,
                    self.stats.expanded,
                )
                return SearchResult(
                    cost=node.g_cost,
                    path=_reconstruct(self._came_from, state),
                    end_state=state,
                    stats=self.stats,
                )

            self.stats.expanded += 1
            for successor, step_cost in successors(self.grid, state, self.policy):
                if self._closed.contains(successor):
                    continue
                g = node.g_cost + step_cost
                f = g + self._heuristic(successor.coordinate)
                if self._frontier.insert_or_update(FrontierNode(successor, g, f)):
                    self._came_from[successor] = state
                    self.stats.pushed += 1

        self.status = SearchStatus.EXHAUSTED
        logger.debug("Frontier exhausted after %d expansions", self.stats.expanded)
        raise NoPathError(
            f"no path from ({self.start.x}, {self.start.y}) to "
            f"({self.goal.x}, {self.goal.y}) under {self.policy}",
            policy=self.policy,
            stats=self.stats,
        )


def search(
    grid: Grid,
    policy: MovePolicy,
    start: Optional[Coordinate] = None,
    goal: Optional[Coordinate] = None,
) -> SearchResult:
    """Return the cheapest path from ``start`` to ``goal`` under ``policy``.

    ``start`` and ``goal`` default to the top-left and bottom-right cells.
    The cost of a path is the sum of the costs of every cell entered, so the
    start cell itself is free.
    """

    driver = SearchDriver(
        grid,
        policy,
        grid.top_left if start is None else start,
        grid.bottom_right if goal is None else goal,
    )
    return driver.run()


def minimum_cost(
    grid: Grid,
    policy: MovePolicy,
    start: Optional[Coordinate] = None,
    goal: Optional[Coordinate] = None,
) -> int:
    return search(grid, policy, start, goal).cost


__all__ = [
    "SearchStatus",
    "SearchStats",
    "SearchResult",
    "SearchDriver",
    "search",
    "minimum_cost",
]
