"""Scoring and ranking of conflict-free schedules."""

from collections.abc import Iterable, Sequence

from ..models import Section
from .conflicts import has_conflict
from .constants import (
    MAX_RANKED_RESULTS,
    MAX_VALID_SCHEDULES,
    SCORE_DAY_BASE,
    SCORE_DAY_WEIGHT,
    SCORE_MAX_DAYS_BONUS,
)
from .models import Filters, RankedResult


def count_days(schedule: Sequence[Section]) -> int:
    """Number of distinct weekdays touched by any section."""
    days: set[str] = set()
    for section in schedule:
        days.update(section.days)
    return len(days)


def calculate_total_gap(schedule: Sequence[Section]) -> int:
    """Idle time between classes; always 0, the metric is not computed yet."""
    return 0


def calculate_score(schedule: Sequence[Section], max_days: int, max_gap: int) -> int:
    """Day-compactness score of a schedule.

    score = (6 - days) * 100, plus 200 when the schedule stays within
    ``max_days`` distinct days. ``max_gap`` does not affect the score.

    Args:
        schedule: Conflict-free schedule
        max_days: Preferred maximum number of days
        max_gap: Preferred maximum gap

    Returns:
        Integer score, higher is better
    """
    days = count_days(schedule)
    score = (SCORE_DAY_BASE - days) * SCORE_DAY_WEIGHT
    if days <= max_days:
        score += SCORE_MAX_DAYS_BONUS
    return score


def collect_valid_schedules(
    schedules: Iterable[Sequence[Section]],
    limit: int = MAX_VALID_SCHEDULES,
) -> tuple[list[tuple[Section, ...]], int]:
    """Pull schedules until ``limit`` conflict-free ones are found.

    Args:
        schedules: Candidate schedules, consumed lazily
        limit: Number of conflict-free schedules to stop at

    Returns:
        Tuple of (conflict-free schedules, number of candidates checked)
    """
    valid: list[tuple[Section, ...]] = []
    checked = 0
    if limit <= 0:
        return valid, checked

    for schedule in schedules:
        checked += 1
        if not has_conflict(schedule):
            valid.append(tuple(schedule))
            if len(valid) >= limit:
                break
    return valid, checked


def rank_schedules(
    schedules: Iterable[Sequence[Section]],
    filters: Filters,
    limit: int = MAX_RANKED_RESULTS,
) -> list[RankedResult]:
    """Score schedules and keep the best ``limit`` of them.

    Sorting is stable, so schedules with equal scores keep their
    enumeration order.
    """
    ranked = [
        RankedResult(
            sections=tuple(schedule),
            days=count_days(schedule),
            gaps=calculate_total_gap(schedule),
            score=calculate_score(schedule, filters.max_days, filters.max_gap),
        )
        for schedule in schedules
    ]
    ranked.sort(key=lambda r: -r.score)
    return ranked[:limit]
