"""Schedule generation pipeline: enumerate, drop conflicts, score, rank."""

import logging
from collections.abc import Sequence

from ..models import Course, Section
from .combinations import CombinationSpace
from .config import PlannerConfig
from .models import Filters, GenerationResult, GenerationStatistics, GenerationStatus
from .scoring import collect_valid_schedules, rank_schedules

logger = logging.getLogger(__name__)

MESSAGES = {
    GenerationStatus.EMPTY_SELECTION: "Please select at least one course",
    GenerationStatus.NO_CANDIDATES: "No courses available with these filters",
    GenerationStatus.NO_CONFLICT_FREE: "No conflict-free schedules. Try different courses.",
    GenerationStatus.FAILED: "Error generating schedules. Try fewer courses.",
}


def status_result(
    status: GenerationStatus,
    filters: Filters | None = None,
    message: str | None = None,
    **kwargs,
) -> GenerationResult:
    """Build a result carrying only a status and its user-facing message."""
    return GenerationResult(
        status=status,
        message=message if message is not None else MESSAGES.get(status, ""),
        filters=filters,
        **kwargs,
    )


class ScheduleEngine:
    """Generates ranked, conflict-free schedules from candidate groups.

    The engine holds no request state; every call receives the groups
    and filters it works on.
    """

    def __init__(self, config: PlannerConfig | None = None):
        self.config = config or PlannerConfig()

    def generate(
        self,
        groups: Sequence[Sequence[Section]],
        filters: Filters,
        excluded: list[Course] | None = None,
        dropped_courses: bool = False,
    ) -> GenerationResult:
        """Run the pipeline over per-course candidate groups.

        Unexpected errors are logged and reported as a FAILED result.

        Args:
            groups: One list of qualifying sections per course
            filters: Active preferences (used for scoring)
            excluded: Courses dropped before generation, echoed in the result
            dropped_courses: True when the user confirmed dropping ``excluded``

        Returns:
            GenerationResult with ranked options or a failure status
        """
        excluded = list(excluded or [])
        try:
            result = self._run(groups, filters)
        except Exception:
            logger.exception("Schedule generation failed")
            result = status_result(GenerationStatus.FAILED, filters)

        result.excluded_courses = excluded
        result.dropped_courses = dropped_courses
        return result

    def _run(self, groups: Sequence[Sequence[Section]], filters: Filters) -> GenerationResult:
        if not groups:
            logger.warning("No course groups left to generate from")
            return status_result(GenerationStatus.NO_CANDIDATES, filters)

        space = CombinationSpace(
            groups,
            limit=self.config.max_combinations,
            max_per_course=self.config.max_sections_per_course,
            min_per_course=self.config.min_sections_per_course,
        )
        statistics = GenerationStatistics(
            naive_combinations=space.naive_product,
            enumerated_combinations=len(space),
            per_course_limit=space.per_course_limit,
        )
        logger.info(
            f"Generating from {len(groups)} courses: {space.naive_product} combinations"
        )

        if len(space) == 0:
            return status_result(
                GenerationStatus.NO_CANDIDATES,
                filters,
                message="No combinations possible. Try different courses.",
                statistics=statistics,
            )

        valid, checked = collect_valid_schedules(space, self.config.max_valid_schedules)
        statistics.combinations_checked = checked
        statistics.valid_schedules = len(valid)
        logger.info(f"Checked {checked} combinations, {len(valid)} conflict-free")

        if not valid:
            return status_result(
                GenerationStatus.NO_CONFLICT_FREE, filters, statistics=statistics
            )

        ranked = rank_schedules(valid, filters, self.config.max_results)
        return GenerationResult(
            status=GenerationStatus.SUCCESS,
            message=f"Found {len(ranked)} optimal schedules",
            ranked_results=ranked,
            filters=filters,
            statistics=statistics,
        )
