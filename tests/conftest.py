import pytest

from crucible.core.grid import parse


REFERENCE_GRID = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

# Only a long straight run along the top then down the right edge is cheap.
LONG_RUN_GRID = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""


@pytest.fixture
def reference_grid():
    return parse(REFERENCE_GRID)


@pytest.fixture
def long_run_grid():
    return parse(LONG_RUN_GRID)


@pytest.fixture
def reference_text():
    return REFERENCE_GRID
