"""Run-length constrained shortest path search over weighted grids."""

from .core.errors import CrucibleError, NoPathError, OutOfBoundsError, ParseError
from .core.grid import Coordinate, Grid, manhattan_distance, parse
from .core.state import Direction, MovePolicy, SearchState
from .search.pathfinding import SearchResult, minimum_cost, search

__all__ = [
    "CrucibleError",
    "ParseError",
    "OutOfBoundsError",
    "NoPathError",
    "Coordinate",
    "Grid",
    "parse",
    "manhattan_distance",
    "Direction",
    "MovePolicy",
    "SearchState",
    "SearchResult",
    "search",
    "minimum_cost",
]
