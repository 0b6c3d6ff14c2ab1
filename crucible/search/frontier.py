"""Best-first open set with decrease-key semantics."""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Tuple

from ..core.state import SearchState


@dataclass(frozen=True)
class FrontierNode:
    """A discovered state with its path cost and estimated total cost."""

    state: SearchState
    g_cost: int
    f_cost: int


class Frontier:
    """Binary min-heap ordered by ``(f_cost, g_cost)``.

    Decrease-key pushes a fresh heap entry and records the new best cost in
    ``_best``; superseded entries are skipped when they reach the top.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int, FrontierNode]] = []
        self._best: Dict[SearchState, int] = {}
        self._seq = count()

    def insert_or_update(self, node: FrontierNode) -> bool:
        """Add ``node`` unless an equal-or-better entry for its state exists.

        Returns ``True`` if the node was inserted or replaced a worse one.
        """

        known = self._best.get(node.state)
        # Same state means same heuristic, so comparing g orders f as well.
        if known is not None and known <= node.g_cost:
            return False
        self._best[node.state] = node.g_cost
        heappush(self._heap, (node.f_cost, node.g_cost, next(self._seq), node))
        return True

    def pop_min(self) -> FrontierNode:
        """Remove and return the live node with the smallest ``f_cost``.

        Ties go to the smaller ``g_cost``, then to insertion order.
        """

        while self._heap:
            _, g_cost, _, node = heappop(self._heap)
            if self._best.get(node.state) == g_cost:
                del self._best[node.state]
                return node
        raise IndexError("pop from empty frontier")

    def best_cost(self, state: SearchState) -> int | None:
        return self._best.get(state)

    def __contains__(self, state: object) -> bool:
        return state in self._best

    def __len__(self) -> int:
        return len(self._best)

    def __bool__(self) -> bool:
        return bool(self._best)


__all__ = ["FrontierNode", "Frontier"]
