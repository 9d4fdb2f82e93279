"""Test fixtures for Smart Registration tests."""

import json

import pytest

from smart_registration.catalog import CatalogLoader
from smart_registration.models import Section


def build_section(
    course_code: str,
    section_id: str,
    schedule: list[tuple[str, str]] | None = None,
    status: str = "open",
    course_name: str | None = None,
) -> Section:
    """Build a Section from compact ``(day, "HH:MM - HH:MM")`` pairs."""
    return Section.from_dict(
        {
            "courseCode": course_code,
            "courseName": course_name or f"{course_code} Name",
            "sectionId": section_id,
            "status": status,
            "schedule": [{"day": d, "time": t} for d, t in (schedule or [])],
        }
    )


@pytest.fixture
def make_section():
    """Factory for sections built from compact slot pairs."""
    return build_section


@pytest.fixture
def sample_records():
    """Scanned records: three courses, one closed section, one evening course."""
    return [
        {
            "courseCode": "CS101",
            "courseName": "Programming Fundamentals",
            "sectionId": "CS101 A",
            "status": "open",
            "schedule": [
                {"day": "Mon", "time": "09:00 - 10:30"},
                {"day": "Wed", "time": "09:00 - 10:30"},
            ],
        },
        {
            "courseCode": "CS101",
            "courseName": "Programming Fundamentals",
            "sectionId": "CS101 B",
            "status": "closed",
            "schedule": [{"day": "Tue", "time": "11:00 - 12:30"}],
        },
        {
            "courseCode": "CS101",
            "courseName": "Programming Fundamentals",
            "sectionId": "CS101 C",
            "status": "open",
            "schedule": [{"day": "Tue", "time": "13:00 - 14:30"}],
        },
        {
            "courseCode": "MA201",
            "courseName": "Linear Algebra",
            "sectionId": "MA201 A",
            "status": "open",
            "schedule": [{"day": "Mon", "time": "10:00 - 11:30"}],
        },
        {
            "courseCode": "MA201",
            "courseName": "Linear Algebra",
            "sectionId": "MA201 B",
            "status": "open",
            "schedule": [{"day": "Wed", "time": "11:00 - 12:30"}],
        },
        {
            "courseCode": "EN110",
            "courseName": "Academic Writing",
            "sectionId": "EN110 A",
            "status": "open",
            "schedule": [{"day": "Thu", "time": "18:00 - 19:30"}],
        },
    ]


@pytest.fixture
def sample_catalog(sample_records):
    """Catalog built from the sample records."""
    return CatalogLoader().from_records(sample_records, source="test")


@pytest.fixture
def catalog_file(tmp_path, sample_records):
    """Sample records written as a scan JSON file."""
    file_path = tmp_path / "scan.json"
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(sample_records, f)
    return file_path
