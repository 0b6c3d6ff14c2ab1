import pytest

from crucible.core.grid import Coordinate
from crucible.core.state import Direction, SearchState
from crucible.search.closed_set import ClosedSet
from crucible.search.frontier import Frontier, FrontierNode


def _state(x, run=1):
    return SearchState(Coordinate(x, 0), Direction.RIGHT, run)


def test_pop_min_orders_by_f_then_g():
    frontier = Frontier()
    frontier.insert_or_update(FrontierNode(_state(1), 5, 9))
    frontier.insert_or_update(FrontierNode(_state(2), 2, 7))
    frontier.insert_or_update(FrontierNode(_state(3), 6, 7))
    assert len(frontier) == 3
    popped = [frontier.pop_min().state for _ in range(3)]
    assert popped == [_state(2), _state(3), _state(1)]
    assert not frontier


def test_decrease_key_replaces_entry():
    frontier = Frontier()
    frontier.insert_or_update(FrontierNode(_state(1), 10, 12))
    frontier.insert_or_update(FrontierNode(_state(2), 8, 11))
    assert frontier.insert_or_update(FrontierNode(_state(1), 4, 6))
    assert len(frontier) == 2
    assert frontier.best_cost(_state(1)) == 4

    first = frontier.pop_min()
    assert (first.state, first.g_cost) == (_state(1), 4)
    second = frontier.pop_min()
    assert second.state == _state(2)
    # the superseded entry for _state(1) is never returned
    with pytest.raises(IndexError):
        frontier.pop_min()


def test_worse_or_equal_update_is_ignored():
    frontier = Frontier()
    frontier.insert_or_update(FrontierNode(_state(1), 4, 6))
    assert not frontier.insert_or_update(FrontierNode(_state(1), 4, 6))
    assert not frontier.insert_or_update(FrontierNode(_state(1), 9, 11))
    assert frontier.best_cost(_state(1)) == 4
    assert frontier.pop_min().g_cost == 4
    assert len(frontier) == 0


def test_pop_from_empty_frontier():
    with pytest.raises(IndexError):
        Frontier().pop_min()


def test_closed_set_membership():
    closed = ClosedSet()
    assert not closed.contains(_state(1))
    closed.mark_visited(_state(1))
    closed.mark_visited(_state(1))
    assert closed.contains(_state(1))
    assert _state(1) in closed
    assert _state(1, run=2) not in closed
    assert len(closed) == 1
