"""Grouping of qualifying sections by course."""

from collections.abc import Iterable

from ..models import Course, Section
from .filters import fits
from .models import CandidateGroups, Filters


def group_candidates(
    sections: Iterable[Section],
    selected_courses: Iterable[str],
    filters: Filters,
) -> CandidateGroups:
    """Group open, filter-passing sections of the selected courses.

    Groups appear in the order their first qualifying section was scanned,
    and sections keep their scan order within a group. Selected courses
    with no qualifying section are reported in selection order.

    Args:
        sections: All scanned sections
        selected_courses: Course codes the user wants
        filters: Active preferences

    Returns:
        CandidateGroups with the per-course lists and the excluded courses
    """
    sections = list(sections)
    selected = list(dict.fromkeys(selected_courses))
    wanted = set(selected)

    groups: dict[str, list[Section]] = {}
    for section in sections:
        if section.course_code not in wanted:
            continue
        if not section.is_open or not fits(section, filters):
            continue
        groups.setdefault(section.course_code, []).append(section)

    excluded = [
        Course(code=code, name=_course_name(sections, code))
        for code in selected
        if not groups.get(code)
    ]

    return CandidateGroups(groups=groups, excluded=excluded)


def _course_name(sections: list[Section], code: str) -> str:
    for section in sections:
        if section.course_code == code:
            return section.course_name
    return code
