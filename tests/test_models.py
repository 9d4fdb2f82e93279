"""Tests for data models."""

import pytest

from smart_registration.exceptions import InvalidTimeRangeError
from smart_registration.models import Course, Section, SectionStatus, TimeRange, TimeSlot


class TestSectionStatus:
    """Tests for SectionStatus model."""

    def test_known_values(self):
        assert SectionStatus.from_value("open") == SectionStatus.OPEN
        assert SectionStatus.from_value("closed") == SectionStatus.CLOSED

    def test_match_is_exact(self):
        assert SectionStatus.from_value("Open") == SectionStatus.UNKNOWN
        assert SectionStatus.from_value(" open ") == SectionStatus.UNKNOWN

    def test_missing_defaults_to_unknown(self):
        assert SectionStatus.from_value(None) == SectionStatus.UNKNOWN

    def test_unrecognized_defaults_to_unknown(self):
        assert SectionStatus.from_value("waitlist") == SectionStatus.UNKNOWN


class TestTimeRange:
    """Tests for TimeRange model."""

    def test_parse(self):
        time_range = TimeRange.parse("09:00 - 10:30")
        assert time_range.start == 900
        assert time_range.end == 1030

    def test_parse_invalid(self):
        with pytest.raises(InvalidTimeRangeError):
            TimeRange.parse("morning")

    def test_overlap(self):
        assert TimeRange.parse("09:00 - 10:00").overlaps(TimeRange.parse("09:30 - 10:30"))

    def test_touching_ranges_do_not_overlap(self):
        first = TimeRange.parse("09:00 - 10:00")
        second = TimeRange.parse("10:00 - 11:00")
        assert not first.overlaps(second)
        assert not second.overlaps(first)

    def test_contained_range_overlaps(self):
        assert TimeRange.parse("09:00 - 12:00").overlaps(TimeRange.parse("10:00 - 11:00"))

    def test_str(self):
        assert str(TimeRange.parse("9:00-10:30")) == "09:00 - 10:30"


class TestTimeSlot:
    """Tests for TimeSlot model."""

    def test_same_day_overlap(self):
        first = TimeSlot("Wed", TimeRange.parse("09:00 - 10:00"))
        second = TimeSlot("Wed", TimeRange.parse("09:30 - 10:30"))
        assert first.overlaps(second)

    def test_different_day_no_overlap(self):
        first = TimeSlot("Wed", TimeRange.parse("09:00 - 10:00"))
        second = TimeSlot("Thu", TimeRange.parse("09:00 - 10:00"))
        assert not first.overlaps(second)

    def test_to_dict(self):
        slot = TimeSlot("Mon", TimeRange.parse("14:00 - 15:30"))
        assert slot.to_dict() == {"day": "Mon", "time": "14:00 - 15:30"}


class TestSection:
    """Tests for Section model."""

    def test_from_dict_full_record(self):
        section = Section.from_dict(
            {
                "courseCode": "CS101",
                "courseName": "Programming",
                "sectionId": "CS101 A",
                "status": "open",
                "schedule": [{"day": "Mon", "time": "09:00 - 10:30"}],
            }
        )
        assert section.course_code == "CS101"
        assert section.course_name == "Programming"
        assert section.section_id == "CS101 A"
        assert section.is_open
        assert section.slots[0].start == 900
        assert section.slots[0].end == 1030

    def test_from_dict_defaults(self):
        """Missing name, status, and schedule fall back to defaults."""
        section = Section.from_dict({"courseCode": "CS101", "sectionId": "CS101 A"})
        assert section.course_name == "CS101"
        assert section.status == SectionStatus.UNKNOWN
        assert section.slots == ()
        assert not section.is_open

    def test_from_dict_numeric_name_stored_as_text(self):
        section = Section.from_dict({"courseCode": "CS101", "courseName": 101, "sectionId": "A"})
        assert section.course_name == "101"

    def test_from_dict_missing_code(self):
        with pytest.raises(KeyError):
            Section.from_dict({"sectionId": "X"})

    def test_from_dict_malformed_time(self):
        with pytest.raises(InvalidTimeRangeError):
            Section.from_dict(
                {
                    "courseCode": "CS101",
                    "sectionId": "CS101 A",
                    "schedule": [{"day": "Mon", "time": "9am"}],
                }
            )

    def test_days(self, make_section):
        section = make_section(
            "CS101", "A", [("Mon", "09:00 - 10:00"), ("Wed", "09:00 - 10:00"), ("Mon", "13:00 - 14:00")]
        )
        assert section.days == {"Mon", "Wed"}

    def test_to_dict_round_trip_shape(self, make_section):
        section = make_section("CS101", "A", [("Tue", "11:00 - 12:30")], course_name="Programming")
        assert section.to_dict() == {
            "courseCode": "CS101",
            "courseName": "Programming",
            "sectionId": "A",
            "status": "open",
            "schedule": [{"day": "Tue", "time": "11:00 - 12:30"}],
        }

    def test_sections_are_immutable(self, make_section):
        section = make_section("CS101", "A")
        with pytest.raises(AttributeError):
            section.status = SectionStatus.CLOSED


class TestCourse:
    """Tests for Course model."""

    def test_to_dict(self):
        assert Course("CS101", "Programming").to_dict() == {"code": "CS101", "name": "Programming"}
