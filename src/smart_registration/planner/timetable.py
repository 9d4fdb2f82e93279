"""Weekly timetable grid for a schedule."""

from collections.abc import Iterable, Sequence

import pandas as pd

from ..constants import TIMETABLE_HOURS
from ..models import Section
from ..timecodes import format_time


def build_timetable(
    sections: Sequence[Section],
    days: Iterable[str],
    hours: Sequence[str] = TIMETABLE_HOURS,
) -> pd.DataFrame:
    """Build an hour-by-day grid of course names.

    A class is placed in the row of the hour it starts at; classes that
    start off the hour or on a day not shown are left out of the grid.

    Args:
        sections: Sections of a schedule
        days: Column days, in display order
        hours: Row labels in HH:MM form

    Returns:
        DataFrame indexed by hour with one column per day, empty cells as ""
    """
    days = list(days)
    grid = pd.DataFrame("", index=list(hours), columns=days)
    grid.index.name = "Time"

    for section in sections:
        label = section.course_name or section.course_code
        for slot in section.slots:
            hour = format_time(slot.start)
            if slot.day in grid.columns and hour in grid.index:
                grid.at[hour, slot.day] = label

    return grid
