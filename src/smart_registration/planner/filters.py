"""Day and time-window filtering of sections."""

from ..models import Section, TimeSlot
from .models import Filters


def slot_fits(slot: TimeSlot, filters: Filters) -> bool:
    """Check a single meeting against the allowed days and time window."""
    if slot.day not in filters.days:
        return False
    return slot.start >= filters.start_limit and slot.end <= filters.end_limit


def fits(section: Section, filters: Filters) -> bool:
    """Check if every meeting of a section satisfies the filters.

    A section with a single out-of-window meeting is rejected as a whole,
    since it cannot be attended under the stated preferences.

    Args:
        section: Section to check
        filters: Active day/time preferences

    Returns:
        True if all slots fit
    """
    return all(slot_fits(slot, filters) for slot in section.slots)
