"""Planner configuration loader."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Self

from ..constants import DEFAULT_ENROLL_DELAY
from ..exceptions import ConfigError
from .constants import (
    MAX_COMBINATIONS,
    MAX_RANKED_RESULTS,
    MAX_SECTIONS_PER_COURSE,
    MAX_VALID_SCHEDULES,
    MIN_SECTIONS_PER_COURSE,
)


@dataclass(frozen=True)
class PlannerConfig:
    """Limits that bound the cost of one generation request.

    Attributes:
        max_combinations: Enumeration cap
        max_sections_per_course: First per-course ceiling tried when truncating
        min_sections_per_course: Truncation floor
        max_valid_schedules: Conflict-free schedules collected before ranking
        max_results: Ranked options returned
        enroll_delay: Seconds between enroll actions
    """

    max_combinations: int = MAX_COMBINATIONS
    max_sections_per_course: int = MAX_SECTIONS_PER_COURSE
    min_sections_per_course: int = MIN_SECTIONS_PER_COURSE
    max_valid_schedules: int = MAX_VALID_SCHEDULES
    max_results: int = MAX_RANKED_RESULTS
    enroll_delay: float = DEFAULT_ENROLL_DELAY

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str | None = None) -> Self:
        """Create a config overriding any subset of the defaults.

        Raises:
            ConfigError: On unknown keys or non-numeric values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown keys: {', '.join(unknown)}", path)

        values: dict[str, Any] = {}
        for key, value in data.items():
            caster = float if key == "enroll_delay" else int
            if isinstance(value, bool):
                raise ConfigError(f"'{key}' must be a number", path)
            try:
                values[key] = caster(value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"'{key}' must be a number", path) from e
            if values[key] < 0:
                raise ConfigError(f"'{key}' must not be negative", path)

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def load_config(path: Path | str | None = None) -> PlannerConfig:
    """Load planner limits from a JSON file, or defaults when no path is given.

    Args:
        path: Optional path to a JSON object with PlannerConfig fields

    Returns:
        PlannerConfig instance

    Raises:
        ConfigError: If the file is missing, not JSON, or has invalid values
    """
    if path is None:
        return PlannerConfig()

    path = Path(path)
    if not path.exists():
        raise ConfigError("file not found", str(path))

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(str(e), str(path)) from e

    if not isinstance(data, dict):
        raise ConfigError("expected a JSON object", str(path))

    return PlannerConfig.from_dict(data, str(path))
