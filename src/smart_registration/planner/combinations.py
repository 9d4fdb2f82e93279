"""Bounded enumeration of section combinations."""

import logging
import math
from collections.abc import Iterator, Sequence

from ..models import Section
from .constants import MAX_COMBINATIONS, MAX_SECTIONS_PER_COURSE, MIN_SECTIONS_PER_COURSE

logger = logging.getLogger(__name__)

Schedule = tuple[Section, ...]


def naive_product(groups: Sequence[Sequence[Section]]) -> int:
    """Number of combinations of one item per group (1 for no groups)."""
    return math.prod(len(group) for group in groups)


def truncate_groups(
    groups: Sequence[Sequence[Section]],
    limit: int = MAX_COMBINATIONS,
    max_per_course: int = MAX_SECTIONS_PER_COURSE,
    min_per_course: int = MIN_SECTIONS_PER_COURSE,
) -> tuple[list[list[Section]], int | None]:
    """Shrink every group to its first ``k`` sections until the product fits.

    ``k`` starts at ``max_per_course`` and decreases while it is above
    ``min_per_course``. If no ceiling brings the product under the limit,
    the last truncation tried is kept even though it still exceeds it.

    Args:
        groups: Per-course candidate lists
        limit: Enumeration cap
        max_per_course: First ceiling tried
        min_per_course: Floor; the ceiling never drops to or below it

    Returns:
        Tuple of (possibly truncated groups, ceiling used or None)
    """
    limited = [list(group) for group in groups]
    if naive_product(limited) <= limit:
        return limited, None

    ceiling = max_per_course
    used: int | None = None
    while ceiling > min_per_course:
        limited = [list(group[:ceiling]) for group in groups]
        used = ceiling
        if naive_product(limited) <= limit:
            break
        ceiling -= 1

    return limited, used


class CombinationSpace:
    """Lazy, restartable sequence of schedules, one section per group.

    Iterating yields schedules in depth-first order (last group varies
    fastest) and stops after ``limit`` schedules. Each ``iter()`` call
    starts over from the first schedule. With no groups the space holds a
    single empty schedule.
    """

    def __init__(
        self,
        groups: Sequence[Sequence[Section]],
        limit: int = MAX_COMBINATIONS,
        max_per_course: int = MAX_SECTIONS_PER_COURSE,
        min_per_course: int = MIN_SECTIONS_PER_COURSE,
    ):
        self.limit = limit
        self.naive_product = naive_product(groups)
        self.groups, self.per_course_limit = truncate_groups(
            groups, limit, max_per_course, min_per_course
        )
        self.product = naive_product(self.groups)

        if self.per_course_limit is not None:
            logger.warning(
                f"{self.naive_product} combinations exceed the cap of {limit}; "
                f"limited to {self.per_course_limit} sections per course "
                f"({self.product} combinations)"
            )

    def __len__(self) -> int:
        """Number of schedules iteration will yield."""
        return min(self.product, max(self.limit, 0))

    def __iter__(self) -> Iterator[Schedule]:
        groups = self.groups
        if self.limit <= 0 or any(not group for group in groups):
            return

        indices = [0] * len(groups)
        emitted = 0
        while emitted < self.limit:
            yield tuple(group[i] for group, i in zip(groups, indices))
            emitted += 1

            # Advance like an odometer: rightmost position first
            position = len(groups) - 1
            while position >= 0:
                indices[position] += 1
                if indices[position] < len(groups[position]):
                    break
                indices[position] = 0
                position -= 1
            if position < 0:
                return


def generate_combinations(
    groups: Sequence[Sequence[Section]], limit: int = MAX_COMBINATIONS
) -> list[Schedule]:
    """Materialize up to ``limit`` schedules from the groups."""
    return list(CombinationSpace(groups, limit))
