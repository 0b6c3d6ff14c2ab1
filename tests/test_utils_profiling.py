from pathlib import Path
import pstats

from crucible.core.grid import parse
from crucible.core.state import STANDARD
from crucible.search.pathfinding import minimum_cost
from crucible.utils.profiling import profile_call


def test_profile_call_creates_dump(tmp_path: Path) -> None:
    grid = parse("19\n11")
    out = tmp_path / "prof.prof"
    result, stats = profile_call(lambda: minimum_cost(grid, STANDARD), out)

    assert result == 2
    assert out.exists()
    assert isinstance(stats, pstats.Stats)
