"""Data models for scanned courses and sections."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self

from .constants import (
    KEY_COURSE_CODE,
    KEY_COURSE_NAME,
    KEY_DAY,
    KEY_SCHEDULE,
    KEY_SECTION_ID,
    KEY_STATUS,
    KEY_TIME,
    STATUS_CLOSED,
    STATUS_OPEN,
    STATUS_UNKNOWN,
)
from .timecodes import format_time, parse_time_range


class SectionStatus(str, Enum):
    """Enrollment status of a section."""

    OPEN = STATUS_OPEN
    CLOSED = STATUS_CLOSED
    UNKNOWN = STATUS_UNKNOWN

    @classmethod
    def from_value(cls, value: Any) -> "SectionStatus":
        """Map a scanned status string to a status, defaulting to UNKNOWN.

        Matching is exact: only the literal "open" marks a section open.
        """
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.UNKNOWN


@dataclass(frozen=True)
class TimeRange:
    """A half-open time range with pre-encoded start and end.

    Attributes:
        start: Encoded start time (e.g. 900 for 09:00)
        end: Encoded end time (e.g. 1030 for 10:30)
    """

    start: int
    end: int

    @classmethod
    def parse(cls, value: str) -> Self:
        """Build a range from an ``"HH:MM - HH:MM"`` string.

        Raises:
            InvalidTimeRangeError: If the string is malformed
        """
        start, end = parse_time_range(value)
        return cls(start=start, end=end)

    def overlaps(self, other: "TimeRange") -> bool:
        """Half-open overlap: touching ranges do not overlap."""
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"{format_time(self.start)} - {format_time(self.end)}"


@dataclass(frozen=True)
class TimeSlot:
    """A single weekly meeting of a section."""

    day: str
    time: TimeRange

    @property
    def start(self) -> int:
        return self.time.start

    @property
    def end(self) -> int:
        return self.time.end

    def overlaps(self, other: "TimeSlot") -> bool:
        """Check if two slots fall on the same day with overlapping times."""
        return self.day == other.day and self.time.overlaps(other.time)

    def to_dict(self) -> dict[str, str]:
        """Convert to the scanned ``{day, time}`` shape."""
        return {KEY_DAY: self.day, KEY_TIME: str(self.time)}


@dataclass(frozen=True)
class Course:
    """A course offered in the scanned catalog."""

    code: str
    name: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"code": self.code, "name": self.name}


@dataclass(frozen=True)
class Section:
    """One schedulable offering of a course.

    Attributes:
        section_id: Identifier used by the enrollment page
        course_code: Owning course code
        course_name: Display name of the owning course
        status: open/closed/unknown
        slots: Weekly meetings in scanned order
    """

    section_id: str
    course_code: str
    course_name: str
    status: SectionStatus = SectionStatus.UNKNOWN
    slots: tuple[TimeSlot, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Section from a scanned record.

        Missing name defaults to the course code and a non-text name is
        stored as text. Missing status defaults to ``unknown`` and missing
        schedule to no slots.

        Raises:
            KeyError: If courseCode or sectionId is missing
            InvalidTimeRangeError: If a slot time is malformed
        """
        course_code = str(data[KEY_COURSE_CODE])
        schedule = data.get(KEY_SCHEDULE) or []
        slots = tuple(
            TimeSlot(day=str(entry.get(KEY_DAY, "")), time=TimeRange.parse(entry.get(KEY_TIME)))
            for entry in schedule
        )
        return cls(
            section_id=str(data[KEY_SECTION_ID]),
            course_code=course_code,
            course_name=str(data.get(KEY_COURSE_NAME) or course_code),
            status=SectionStatus.from_value(data.get(KEY_STATUS)),
            slots=slots,
        )

    @property
    def is_open(self) -> bool:
        return self.status == SectionStatus.OPEN

    @property
    def days(self) -> set[str]:
        """Distinct weekdays this section meets on."""
        return {slot.day for slot in self.slots}

    def to_dict(self) -> dict[str, Any]:
        """Convert to the scanned record shape."""
        return {
            KEY_COURSE_CODE: self.course_code,
            KEY_COURSE_NAME: self.course_name,
            KEY_SECTION_ID: self.section_id,
            KEY_STATUS: self.status.value,
            KEY_SCHEDULE: [slot.to_dict() for slot in self.slots],
        }
