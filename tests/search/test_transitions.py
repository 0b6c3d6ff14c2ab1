from crucible.core.grid import Coordinate, parse
from crucible.core.state import Direction, MovePolicy, SearchState
from crucible.search.transitions import successors


GRID = parse("123\n456\n789")
CENTER = Coordinate(1, 1)


def _moves(results):
    return {(s.last_direction, s.run_length): cost for s, cost in results}


def test_start_state_tries_all_directions():
    out = successors(GRID, SearchState(CENTER), MovePolicy(1, 3))
    assert _moves(out) == {
        (Direction.UP, 1): 2,
        (Direction.DOWN, 1): 8,
        (Direction.LEFT, 1): 4,
        (Direction.RIGHT, 1): 6,
    }


def test_start_state_filters_out_of_bounds():
    out = successors(GRID, SearchState(Coordinate(0, 0)), MovePolicy(1, 3))
    assert {s.coordinate for s, _ in out} == {Coordinate(1, 0), Coordinate(0, 1)}


def test_below_min_run_only_continues():
    state = SearchState(CENTER, Direction.RIGHT, 1)
    out = successors(GRID, state, MovePolicy(3, 5))
    assert _moves(out) == {(Direction.RIGHT, 2): 6}


def test_below_min_run_at_edge_is_dead_end():
    state = SearchState(Coordinate(2, 1), Direction.RIGHT, 1)
    assert successors(GRID, state, MovePolicy(3, 5)) == []


def test_at_max_run_must_turn():
    state = SearchState(CENTER, Direction.DOWN, 3)
    out = successors(GRID, state, MovePolicy(1, 3))
    assert _moves(out) == {(Direction.LEFT, 1): 4, (Direction.RIGHT, 1): 6}


def test_mid_run_continue_or_turn():
    state = SearchState(CENTER, Direction.LEFT, 2)
    out = successors(GRID, state, MovePolicy(1, 3))
    assert _moves(out) == {
        (Direction.LEFT, 3): 4,
        (Direction.UP, 1): 2,
        (Direction.DOWN, 1): 8,
    }


def test_never_reverses(reference_grid):
    policy = MovePolicy(1, 3)
    for y in range(reference_grid.height):
        for x in range(reference_grid.width):
            for d in Direction:
                for run in range(1, policy.max_run + 1):
                    state = SearchState(Coordinate(x, y), d, run)
                    out = successors(reference_grid, state, policy)
                    assert len(out) <= 3
                    for nxt, cost in out:
                        assert nxt.last_direction != d.opposite()
                        assert reference_grid.in_bounds(nxt.coordinate)
                        assert cost == reference_grid.cost(nxt.coordinate)
                        assert 1 <= nxt.run_length <= policy.max_run
