"""Two-phase workflow for courses without a qualifying section."""

import logging
from collections.abc import Sequence

from ..exceptions import InvalidTransitionError
from ..models import Course, Section
from .engine import ScheduleEngine, status_result
from .grouping import group_candidates
from .models import (
    CandidateGroups,
    ExclusionState,
    Filters,
    GenerationResult,
    GenerationStatus,
    ScheduleRequest,
)

logger = logging.getLogger(__name__)


class ExclusionCoordinator:
    """Routes a request to generation or to an exclusion confirmation.

    States move ``IDLE -> FILTERED -> SATISFIED`` when every selected course
    has a qualifying section, or ``FILTERED -> PARTIALLY_EXCLUDED`` when some
    do not. From ``PARTIALLY_EXCLUDED`` the user either confirms
    (``PROCEEDING``, generation without the excluded courses) or cancels
    (back to ``IDLE``). Filters are never relaxed automatically.
    """

    def __init__(self, sections: Sequence[Section], engine: ScheduleEngine | None = None):
        self.sections = list(sections)
        self.engine = engine or ScheduleEngine()
        self.state = ExclusionState.IDLE
        self._pending: CandidateGroups | None = None
        self._filters: Filters | None = None

    @property
    def excluded_courses(self) -> list[Course]:
        """Courses awaiting confirmation (empty unless partially excluded)."""
        if self._pending is None:
            return []
        return list(self._pending.excluded)

    def submit(self, request: ScheduleRequest) -> GenerationResult:
        """Filter and group sections for a request, then generate or pause.

        Returns:
            A generation result, or an EXCLUSIONS_PENDING result listing the
            courses that have no qualifying section
        """
        self._pending = None
        self._filters = None

        if not request.selected_courses:
            self.state = ExclusionState.IDLE
            return status_result(GenerationStatus.EMPTY_SELECTION, request.filters)

        try:
            candidates = group_candidates(
                self.sections, request.selected_courses, request.filters
            )
        except Exception:
            logger.exception("Filtering sections failed")
            self.state = ExclusionState.IDLE
            return status_result(GenerationStatus.FAILED, request.filters)

        self.state = ExclusionState.FILTERED
        logger.info(
            f"{len(candidates.groups)} of {len(request.selected_courses)} "
            "selected courses have qualifying sections"
        )

        if candidates.has_exclusions:
            self.state = ExclusionState.PARTIALLY_EXCLUDED
            self._pending = candidates
            self._filters = request.filters
            names = ", ".join(c.name for c in candidates.excluded)
            logger.warning(f"Courses without qualifying sections: {names}")
            return status_result(
                GenerationStatus.EXCLUSIONS_PENDING,
                request.filters,
                message=f"{len(candidates.excluded)} course(s) don't fit your preferences",
                excluded_courses=list(candidates.excluded),
            )

        self.state = ExclusionState.SATISFIED
        return self.engine.generate(candidates.group_list, request.filters)

    def confirm(self) -> GenerationResult:
        """Generate from the qualifying courses only, dropping the excluded ones.

        Raises:
            InvalidTransitionError: If no exclusion is awaiting confirmation
        """
        if self.state != ExclusionState.PARTIALLY_EXCLUDED or self._pending is None:
            raise InvalidTransitionError("confirm exclusions", self.state.value)

        self.state = ExclusionState.PROCEEDING
        return self.engine.generate(
            self._pending.group_list,
            self._filters,
            excluded=list(self._pending.excluded),
            dropped_courses=True,
        )

    def cancel(self) -> None:
        """Discard the pending exclusion and return to IDLE.

        Raises:
            InvalidTransitionError: If no exclusion is awaiting confirmation
        """
        if self.state != ExclusionState.PARTIALLY_EXCLUDED:
            raise InvalidTransitionError("cancel exclusions", self.state.value)

        self.state = ExclusionState.IDLE
        self._pending = None
        self._filters = None
