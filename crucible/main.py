"""Command line entry point: read a grid, run each policy, print the costs."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import CONFIG, LoggingConfig
from .core.errors import NoPathError, ParseError
from .core.grid import Grid, parse
from .core.state import MovePolicy
from .search.pathfinding import minimum_cost
from .utils.profiling import profile_call

logger = logging.getLogger(__name__)


def configure_logging(cfg: LoggingConfig) -> None:
    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
        force=True,
    )
    # Apply per-module levels if defined
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


configure_logging(CONFIG.logging)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_NO_PATH = 2


def run_policies(grid: Grid, policies: Sequence[MovePolicy]) -> List[Optional[int]]:
    """Search ``grid`` once per policy; ``None`` marks an exhausted search."""

    results: List[Optional[int]] = []
    for policy in policies:
        try:
            cost = minimum_cost(grid, policy)
        except NoPathError as exc:
            logger.warning("%s", exc)
            results.append(None)
            continue
        logger.info("Policy min_run=%d max_run=%d: cost %d", policy.min_run, policy.max_run, cost)
        results.append(cost)
    return results


def solve(text: str, policies: Sequence[MovePolicy]) -> List[Optional[int]]:
    """Parse ``text`` once and return one result per policy.

    Raises :class:`ParseError` for malformed input.
    """

    return run_policies(parse(text), policies)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    input_path = Path(args[0] if args else CONFIG.search.input_path)
    policies = CONFIG.search.policies

    try:
        text = input_path.read_text()
    except OSError as exc:
        print(f"error: cannot read {input_path}: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        if CONFIG.profiling.enabled:
            results, _ = profile_call(lambda: solve(text, policies), CONFIG.profiling.out_path)
        else:
            results = solve(text, policies)
    except ParseError as exc:
        print(f"error: {input_path}: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    for cost in results:
        print("no path" if cost is None else cost)
    return EXIT_NO_PATH if None in results else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
