"""Time conflict detection between sections."""

from collections.abc import Sequence

from ..models import Section


def sections_overlap(first: Section, second: Section) -> bool:
    """Check if two sections meet on the same day at overlapping times.

    Ranges are half-open, so a class ending at 10:00 does not clash with
    one starting at 10:00.
    """
    for slot in first.slots:
        for other in second.slots:
            if slot.overlaps(other):
                return True
    return False


def has_conflict(schedule: Sequence[Section]) -> bool:
    """Check if any two sections of a schedule clash.

    Args:
        schedule: One section per course

    Returns:
        True on the first clashing pair found
    """
    for i, first in enumerate(schedule):
        for second in schedule[i + 1 :]:
            if sections_overlap(first, second):
                return True
    return False
