"""Schedule search and ranking engine.

This package turns a scanned catalog and a user's course selection into
ranked, conflict-free weekly schedules. Sections are filtered by day and
time window, grouped per course, enumerated one section per course under
a combination cap, checked for clashes, and scored by how few days they
occupy.

Main classes:
- PlannerSession: Catalog, limits and workflow state for one user
- ExclusionCoordinator: Two-phase workflow for courses with no qualifying section
- ScheduleEngine: Enumerate, drop conflicts, score and rank
- CombinationSpace: Lazy, capped enumeration of section combinations

Usage:
    from smart_registration.catalog import load_catalog
    from smart_registration.planner import (
        Filters,
        GenerationStatus,
        PlannerSession,
        ScheduleRequest,
    )

    session = PlannerSession(load_catalog("scan.json"))
    result = session.generate(ScheduleRequest(("CS101", "MA201"), Filters()))
    if result.status == GenerationStatus.EXCLUSIONS_PENDING:
        result = session.confirm_exclusions()
"""

from .combinations import CombinationSpace, generate_combinations, naive_product, truncate_groups
from .config import PlannerConfig, load_config
from .conflicts import has_conflict, sections_overlap
from .constants import (
    MAX_COMBINATIONS,
    MAX_RANKED_RESULTS,
    MAX_SECTIONS_PER_COURSE,
    MAX_VALID_SCHEDULES,
    MIN_SECTIONS_PER_COURSE,
)
from .coordinator import ExclusionCoordinator
from .engine import ScheduleEngine
from .filters import fits
from .grouping import group_candidates
from .models import (
    CandidateGroups,
    ExclusionState,
    Filters,
    GenerationResult,
    GenerationStatistics,
    GenerationStatus,
    RankedResult,
    ScheduleRequest,
)
from .scoring import calculate_score, calculate_total_gap, count_days, rank_schedules
from .session import PlannerSession
from .timetable import build_timetable

__all__ = [
    # Session and workflow
    "PlannerSession",
    "ExclusionCoordinator",
    "ScheduleEngine",
    # Configuration
    "PlannerConfig",
    "load_config",
    # Models
    "CandidateGroups",
    "ExclusionState",
    "Filters",
    "GenerationResult",
    "GenerationStatistics",
    "GenerationStatus",
    "RankedResult",
    "ScheduleRequest",
    # Pipeline steps
    "fits",
    "group_candidates",
    "CombinationSpace",
    "generate_combinations",
    "naive_product",
    "truncate_groups",
    "has_conflict",
    "sections_overlap",
    "count_days",
    "calculate_total_gap",
    "calculate_score",
    "rank_schedules",
    "build_timetable",
    # Constants
    "MAX_COMBINATIONS",
    "MAX_RANKED_RESULTS",
    "MAX_SECTIONS_PER_COURSE",
    "MAX_VALID_SCHEDULES",
    "MIN_SECTIONS_PER_COURSE",
]
