from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_MAX_VERTICES = 10_000
DEFAULT_EXHAUSTIVE_MAX_SUBSETS = 5_000_000
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    max_vertices: int
    exhaustive_max_subsets: int
    exhaustive_time_limit: Optional[float]
    log_level: str


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _env_float(name: str) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


# Each reader parses only its own variable, so a malformed setting
# only affects the code that uses it.

def max_vertices() -> int:
    return _env_int("MLST_MAX_VERTICES", DEFAULT_MAX_VERTICES)


def exhaustive_max_subsets() -> int:
    return _env_int("MLST_EXHAUSTIVE_MAX_SUBSETS", DEFAULT_EXHAUSTIVE_MAX_SUBSETS)


def exhaustive_time_limit() -> Optional[float]:
    return _env_float("MLST_EXHAUSTIVE_TIME_LIMIT")


def log_level() -> str:
    raw = os.environ.get("MLST_LOG_LEVEL", "").strip()
    name = raw.upper() or DEFAULT_LOG_LEVEL
    if name not in LOG_LEVELS:
        raise ValueError(f"MLST_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return name


def load_settings() -> Settings:
    """
    Read every solver setting from the environment.

      MLST_MAX_VERTICES            hard vertex limit for Graph (default 10000)
      MLST_EXHAUSTIVE_MAX_SUBSETS  default subset budget for exhaustive search
      MLST_EXHAUSTIVE_TIME_LIMIT   default wall-clock limit in seconds (unset = none)
      MLST_LOG_LEVEL               level used by the command-line entry point

    Raises ValueError naming the first malformed variable.
    """
    return Settings(
        max_vertices=max_vertices(),
        exhaustive_max_subsets=exhaustive_max_subsets(),
        exhaustive_time_limit=exhaustive_time_limit(),
        log_level=log_level(),
    )
