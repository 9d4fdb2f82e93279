"""Validation logic for scanned section records."""

from typing import Any

from .constants import (
    KEY_COURSE_CODE,
    KEY_COURSE_NAME,
    KEY_DAY,
    KEY_SCHEDULE,
    KEY_SECTION_ID,
    KEY_STATUS,
    KEY_TIME,
    WEEKDAYS,
)
from .models import SectionStatus


def validate_identifier(value: Any, field_name: str) -> tuple[bool, str | None]:
    """Validate a required identifier (course code or section id).

    Args:
        value: Raw value from the record
        field_name: Name of the field for error message

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None:
        return False, f"Missing {field_name}"

    if not isinstance(value, (str, int)):
        return False, f"Invalid {field_name}: {value!r}"

    if not str(value).strip():
        return False, f"Empty {field_name}"

    return True, None


def validate_schedule_entry(entry: Any) -> tuple[bool, str | None]:
    """Validate a single ``{day, time}`` schedule entry.

    Only the shape is checked here; the time range itself is parsed once,
    when the Section is built. Unknown weekday labels are accepted with a
    warning message, since the filter engine simply never admits them.

    Args:
        entry: Raw schedule entry

    Returns:
        Tuple of (is_valid, error_or_warning_message)
    """
    if not isinstance(entry, dict):
        return False, f"Schedule entry is not an object: {entry!r}"

    day = entry.get(KEY_DAY)
    if not day or not isinstance(day, str):
        return False, f"Schedule entry has no day: {entry!r}"

    time = entry.get(KEY_TIME)
    if not time or not isinstance(time, str):
        return False, f"Schedule entry has no time: {entry!r}"

    if day not in WEEKDAYS:
        return True, f"Unrecognized day label: '{day}'"

    return True, None


def validate_section_record(record: Any) -> tuple[bool, list[str]]:
    """Validate a scanned section record.

    Args:
        record: Raw record from the data source

    Returns:
        Tuple of (is_valid, messages). When invalid, messages hold the errors;
        when valid, messages hold any warnings.
    """
    if not isinstance(record, dict):
        return False, [f"Record is not an object: {record!r}"]

    messages: list[str] = []

    for key, label in ((KEY_COURSE_CODE, "course code"), (KEY_SECTION_ID, "section id")):
        is_valid, error = validate_identifier(record.get(key), label)
        if not is_valid:
            return False, [error]

    name = record.get(KEY_COURSE_NAME)
    if name is not None and not isinstance(name, str):
        messages.append(f"Course name is not text: {name!r}")

    schedule = record.get(KEY_SCHEDULE)
    if schedule is not None and not isinstance(schedule, list):
        return False, [f"Schedule is not a list: {schedule!r}"]

    for entry in schedule or []:
        is_valid, message = validate_schedule_entry(entry)
        if not is_valid:
            return False, [message]
        if message:
            messages.append(message)

    status = record.get(KEY_STATUS)
    if status is not None and SectionStatus.from_value(status) == SectionStatus.UNKNOWN:
        if status != SectionStatus.UNKNOWN.value:
            messages.append(f"Unrecognized status '{status}', treated as unknown")

    return True, messages
