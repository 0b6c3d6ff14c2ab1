"""Legal successor states under a run-length move policy."""

from __future__ import annotations

from typing import List, Tuple

from ..core.grid import Grid
from ..core.state import Direction, MovePolicy, SearchState


ALL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def _candidate_moves(state: SearchState, policy: MovePolicy) -> List[Tuple[Direction, int]]:
    """Return ``(direction, new_run_length)`` pairs allowed by ``policy``.

    Reversing into the opposite of the last direction is never allowed.
    """

    last = state.last_direction
    if last is None:
        return [(d, 1) for d in ALL_DIRECTIONS]

    moves: List[Tuple[Direction, int]] = []
    if policy.can_continue(state.run_length):
        moves.append((last, state.run_length + 1))
    if policy.can_turn(state.run_length):
        moves.extend((d, 1) for d in last.perpendicular())
    return moves


def successors(
    grid: Grid, state: SearchState, policy: MovePolicy
) -> List[Tuple[SearchState, int]]:
    """Return up to three ``(successor, step_cost)`` pairs for ``state``.

    Candidates leaving the grid are dropped; ``step_cost`` is the cost of the
    cell being entered.
    """

    out: List[Tuple[SearchState, int]] = []
    for direction, run_length in _candidate_moves(state, policy):
        nxt = state.coordinate.step(direction)
        if not grid.in_bounds(nxt):
            continue
        out.append((SearchState(nxt, direction, run_length), grid.cost(nxt)))
    return out


__all__ = ["ALL_DIRECTIONS", "successors"]
