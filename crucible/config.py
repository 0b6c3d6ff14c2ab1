"""Simple configuration loader for crucible."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .core.state import STANDARD, ULTRA, MovePolicy


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


def _default_policies() -> List[MovePolicy]:
    return [STANDARD, ULTRA]


@dataclass
class SearchConfig:
    """Input location and the policy variants to run against it."""

    input_path: str = "data/input.txt"
    policies: List[MovePolicy] = field(default_factory=_default_policies)


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class ProfilingConfig:
    enabled: bool = False
    out_path: str = "search.prof"


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    logging: LoggingConfig
    profiling: ProfilingConfig


def _parse_policies(raw: Any) -> List[MovePolicy]:
    if raw is None:
        return _default_policies()
    return [
        MovePolicy(min_run=int(item["min_run"]), max_run=int(item["max_run"]))
        for item in raw
    ]


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search", {}) or {}
    search = SearchConfig(
        input_path=str(search_data.get("input_path", "data/input.txt")),
        policies=_parse_policies(search_data.get("policies")),
    )

    logging_data = data.get("logging", {}) or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    profiling_data = data.get("profiling", {}) or {}
    profiling = ProfilingConfig(
        enabled=bool(profiling_data.get("enabled", False)),
        out_path=str(profiling_data.get("out_path", "search.prof")),
    )

    return Config(search=search, logging=log_cfg, profiling=profiling)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "ProfilingConfig",
    "load_config",
]
