"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import logging
import pstats
from pathlib import Path
from typing import Callable, Tuple, TypeVar
import time

T = TypeVar("T")

logger = logging.getLogger(__name__)


def profile_call(
    fn: Callable[[], T],
    out_path: str | Path = "search.prof",
) -> Tuple[T, pstats.Stats]:
    """Run ``fn`` under cProfile and dump stats to ``out_path``.

    Parameters
    ----------
    fn:
        Zero-argument callable to profile.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    tuple
        The value returned by ``fn`` and the profiling statistics.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    started = time.perf_counter()
    profiler.enable()
    try:
        result = fn()
    finally:
        profiler.disable()
        profiler.dump_stats(str(path))
    logger.info("Profiled run took %.3fs, stats written to %s", time.perf_counter() - started, path)
    return result, pstats.Stats(profiler)


__all__ = ["profile_call"]
