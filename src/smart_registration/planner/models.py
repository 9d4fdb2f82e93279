"""Data models for schedule generation requests and results."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Self

from ..constants import DEFAULT_DAYS, WEEKDAYS
from ..exceptions import InvalidFiltersError, InvalidTimeError
from ..models import Course, Section
from ..timecodes import encode_time
from .constants import (
    DEFAULT_END_TIME,
    DEFAULT_MAX_DAYS,
    DEFAULT_MAX_GAP,
    DEFAULT_START_TIME,
)


class GenerationStatus(str, Enum):
    """Outcome of a generation request."""

    SUCCESS = "success"
    EMPTY_SELECTION = "empty_selection"
    EXCLUSIONS_PENDING = "exclusions_pending"
    NO_CANDIDATES = "no_candidates"
    NO_CONFLICT_FREE = "no_conflict_free"
    FAILED = "failed"


class ExclusionState(str, Enum):
    """States of the exclusion workflow."""

    IDLE = "idle"
    FILTERED = "filtered"
    SATISFIED = "satisfied"
    PARTIALLY_EXCLUDED = "partially_excluded"
    PROCEEDING = "proceeding"


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """First present key among camelCase/snake_case spellings."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_list(value: Any) -> list[Any]:
    """A lone string is one item, not a sequence of characters."""
    if isinstance(value, str):
        return [value]
    return list(value)


@dataclass(frozen=True)
class Filters:
    """Day and time preferences for a generation request.

    Attributes:
        days: Weekdays a section may meet on (never empty)
        start_time: Earliest allowed start, HH:MM
        end_time: Latest allowed end, HH:MM
        max_days: Preferred maximum number of distinct days
        max_gap: Preferred maximum gap (not used by scoring)
    """

    days: frozenset[str] = frozenset(DEFAULT_DAYS)
    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_END_TIME
    max_days: int = DEFAULT_MAX_DAYS
    max_gap: int = DEFAULT_MAX_GAP
    start_limit: int = field(init=False, repr=False, compare=False)
    end_limit: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.days:
            raise InvalidFiltersError("at least one day must be selected")
        object.__setattr__(self, "days", frozenset(self.days))
        try:
            object.__setattr__(self, "start_limit", encode_time(self.start_time))
            object.__setattr__(self, "end_limit", encode_time(self.end_time))
        except InvalidTimeError as e:
            raise InvalidFiltersError(str(e)) from e

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create filters from a request dictionary (camelCase or snake_case)."""
        days = _pick(data, "days", default=DEFAULT_DAYS)
        return cls(
            days=frozenset(_as_list(days)),
            start_time=_pick(data, "startTime", "start_time", default=DEFAULT_START_TIME),
            end_time=_pick(data, "endTime", "end_time", default=DEFAULT_END_TIME),
            max_days=int(_pick(data, "maxDays", "max_days", default=DEFAULT_MAX_DAYS)),
            max_gap=int(_pick(data, "maxGap", "max_gap", default=DEFAULT_MAX_GAP)),
        )

    @property
    def ordered_days(self) -> list[str]:
        """Selected days in weekday order; unknown labels sort last."""
        known = [d for d in WEEKDAYS if d in self.days]
        return known + sorted(self.days - set(WEEKDAYS))

    def toggle_day(self, day: str) -> "Filters":
        """Return filters with ``day`` added or removed.

        Removing the only remaining day is ignored.
        """
        if day in self.days:
            if len(self.days) == 1:
                return self
            return replace(self, days=self.days - {day})
        return replace(self, days=self.days | {day})

    def to_dict(self) -> dict[str, Any]:
        """Convert to the request dictionary shape."""
        return {
            "days": self.ordered_days,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "maxDays": self.max_days,
            "maxGap": self.max_gap,
        }


@dataclass(frozen=True)
class ScheduleRequest:
    """A generation request: selected courses plus filters."""

    selected_courses: tuple[str, ...]
    filters: Filters = field(default_factory=Filters)

    def __post_init__(self) -> None:
        # Keep selection order, drop repeats
        object.__setattr__(
            self, "selected_courses", tuple(dict.fromkeys(self.selected_courses))
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a request from ``{selectedCourses, days, startTime, ...}``."""
        selected = _pick(data, "selectedCourses", "selected_courses", default=[])
        return cls(
            selected_courses=tuple(_as_list(selected)), filters=Filters.from_dict(data)
        )


@dataclass
class CandidateGroups:
    """Open, filter-passing sections grouped by course.

    Attributes:
        groups: Course code -> qualifying sections in scan order
        excluded: Selected courses with no qualifying section
    """

    groups: dict[str, list[Section]] = field(default_factory=dict)
    excluded: list[Course] = field(default_factory=list)

    @property
    def has_exclusions(self) -> bool:
        return bool(self.excluded)

    @property
    def group_list(self) -> list[list[Section]]:
        return list(self.groups.values())


@dataclass(frozen=True)
class RankedResult:
    """A conflict-free schedule with its ranking metrics."""

    sections: tuple[Section, ...]
    days: int
    gaps: int
    score: int

    @property
    def course_codes(self) -> list[str]:
        return [s.course_code for s in self.sections]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "schedule": [s.to_dict() for s in self.sections],
            "days": self.days,
            "gaps": self.gaps,
            "score": self.score,
        }


@dataclass
class GenerationStatistics:
    """Counters collected while generating schedules."""

    naive_combinations: int = 0
    enumerated_combinations: int = 0
    per_course_limit: int | None = None
    combinations_checked: int = 0
    valid_schedules: int = 0

    @property
    def truncated(self) -> bool:
        return self.per_course_limit is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "naive_combinations": self.naive_combinations,
            "enumerated_combinations": self.enumerated_combinations,
            "per_course_limit": self.per_course_limit,
            "combinations_checked": self.combinations_checked,
            "valid_schedules": self.valid_schedules,
        }


@dataclass
class GenerationResult:
    """Result of a generation request."""

    status: GenerationStatus
    message: str = ""
    ranked_results: list[RankedResult] = field(default_factory=list)
    excluded_courses: list[Course] = field(default_factory=list)
    dropped_courses: bool = False
    filters: Filters | None = None
    statistics: GenerationStatistics = field(default_factory=GenerationStatistics)
    generation_date: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def ok(self) -> bool:
        return self.status == GenerationStatus.SUCCESS

    @property
    def total_results(self) -> int:
        return len(self.ranked_results)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Keys are camelCase, matching the request dictionary shape.
        """
        return {
            "generationDate": self.generation_date,
            "status": self.status.value,
            "message": self.message,
            "filters": self.filters.to_dict() if self.filters else None,
            "rankedResults": [r.to_dict() for r in self.ranked_results],
            "excludedCourses": [c.to_dict() for c in self.excluded_courses],
            "droppedCourses": self.dropped_courses,
            "statistics": self.statistics.to_dict(),
        }
