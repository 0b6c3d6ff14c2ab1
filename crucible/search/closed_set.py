"""States whose minimal cost has been finalized."""

from __future__ import annotations

from typing import Iterator, Set

from ..core.state import SearchState


class ClosedSet:
    """Hash set of finalized :class:`SearchState` values."""

    def __init__(self) -> None:
        self._states: Set[SearchState] = set()

    def contains(self, state: SearchState) -> bool:
        return state in self._states

    def mark_visited(self, state: SearchState) -> None:
        self._states.add(state)

    def __contains__(self, state: object) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[SearchState]:
        return iter(self._states)


__all__ = ["ClosedSet"]
