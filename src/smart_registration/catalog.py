"""Loading of scanned course catalogs."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from .exceptions import CatalogLoadError, RegistrationError
from .models import Course, Section
from .validators import validate_section_record

logger = logging.getLogger(__name__)


@dataclass
class Catalog:
    """Sections obtained from one scan of the registration page.

    Attributes:
        source: Where the records came from (file path or label)
        scan_date: Date of loading (ISO format)
        sections: Accepted sections in scan order
        errors: Error messages (dropped records, unreadable source)
        warnings: Warning messages
        scan_failed: True when the source itself could not be read
    """

    source: str
    scan_date: str = field(default_factory=lambda: datetime.now().isoformat())
    sections: list[Section] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    scan_failed: bool = False

    @property
    def courses(self) -> list[Course]:
        """Distinct courses in scan order; the first name seen wins."""
        names: dict[str, str] = {}
        for section in self.sections:
            if section.course_code not in names:
                names[section.course_code] = section.course_name
        return [Course(code=code, name=name) for code, name in names.items()]

    @property
    def open_sections(self) -> list[Section]:
        return [s for s in self.sections if s.is_open]

    @property
    def total_courses(self) -> int:
        return len(self.courses)

    @property
    def total_sections(self) -> int:
        return len(self.sections)

    @property
    def total_open(self) -> int:
        return len(self.open_sections)

    def course_name(self, code: str) -> str:
        """Display name for a course code, defaulting to the code itself."""
        for section in self.sections:
            if section.course_code == code:
                return section.course_name
        return code

    def get_section(self, section_id: str) -> Section | None:
        for section in self.sections:
            if section.section_id == section_id:
                return section
        return None

    def sections_for(self, code: str) -> list[Section]:
        return [s for s in self.sections if s.course_code == code]

    def search(self, query: str) -> list[Course]:
        """Courses whose code or name contains the query (case-insensitive)."""
        needle = query.strip().lower()
        return [
            course
            for course in self.courses
            if needle in course.code.lower() or needle in course.name.lower()
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source": self.source,
            "scan_date": self.scan_date,
            "total_courses": self.total_courses,
            "total_sections": self.total_sections,
            "total_open": self.total_open,
            "courses": [c.to_dict() for c in self.courses],
            "sections": [s.to_dict() for s in self.sections],
            "errors": self.errors,
            "warnings": self.warnings,
        }


class CatalogLoader:
    """Builds a Catalog from scanned section records."""

    def from_records(self, records: list[Any], source: str = "<scan>") -> Catalog:
        """Build a catalog from in-memory records.

        Invalid records are dropped and reported in ``catalog.errors``;
        the scan as a whole never fails because of a single record.

        Args:
            records: Section records as returned by the data source
            source: Label for messages

        Returns:
            Catalog with accepted sections
        """
        catalog = Catalog(source=source)
        seen_ids: set[str] = set()

        if not isinstance(records, list):
            catalog.errors.append(f"Failed to load {source}: expected a list of sections")
            catalog.scan_failed = True
            return catalog

        for index, record in enumerate(records):
            is_valid, messages = validate_section_record(record)
            if not is_valid:
                catalog.errors.append(f"Record {index}: {messages[0]}")
                continue

            try:
                section = Section.from_dict(record)
            except (KeyError, RegistrationError) as e:
                catalog.errors.append(f"Record {index}: {e}")
                continue

            if section.section_id in seen_ids:
                catalog.warnings.append(
                    f"Record {index}: duplicate section id '{section.section_id}' ignored"
                )
                continue

            seen_ids.add(section.section_id)
            catalog.sections.append(section)
            catalog.warnings.extend(f"Record {index}: {m}" for m in messages)

        logger.info(
            f"Scanned {catalog.total_sections} sections "
            f"({catalog.total_open} open) across {catalog.total_courses} courses"
        )
        if catalog.errors:
            logger.warning(f"Dropped {len(catalog.errors)} malformed records from {source}")

        return catalog

    def load(self, file_path: str | Path) -> Catalog:
        """Load a scanned catalog from a JSON file.

        The file may hold either a list of section records or an object
        with a ``data`` list (the scan response shape). Unreadable files
        produce an empty catalog with an error instead of raising.

        Args:
            file_path: Path to the JSON file

        Returns:
            Catalog with accepted sections
        """
        file_path = Path(file_path)

        try:
            records = read_records(file_path)
        except CatalogLoadError as e:
            logger.error(str(e))
            catalog = Catalog(source=str(file_path))
            catalog.errors.append(str(e))
            catalog.scan_failed = True
            return catalog

        return self.from_records(records, source=str(file_path))


def read_records(file_path: Path) -> list[Any]:
    """Read raw section records from a scan JSON file.

    Raises:
        CatalogLoadError: If the file is missing, not JSON, or has no records list
    """
    if not file_path.exists():
        raise CatalogLoadError(str(file_path), "file not found")

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogLoadError(str(file_path), str(e)) from e

    if isinstance(data, dict):
        if data.get("success") is False:
            raise CatalogLoadError(str(file_path), "scan reported failure")
        data = data.get("data")

    if not isinstance(data, list):
        raise CatalogLoadError(str(file_path), "expected a list of section records")

    return data


def load_catalog(file_path: str | Path) -> Catalog:
    """Load a scanned catalog from a JSON file."""
    return CatalogLoader().load(file_path)


def get_stats(catalog: Catalog) -> dict[str, Any]:
    """Summary statistics for a catalog.

    Returns:
        Dictionary with course/section counts and per-course breakdown
    """
    by_course: dict[str, dict[str, int]] = {}
    for section in catalog.sections:
        counts = by_course.setdefault(section.course_code, {"sections": 0, "open": 0})
        counts["sections"] += 1
        if section.is_open:
            counts["open"] += 1

    return {
        "source": catalog.source,
        "scan_date": catalog.scan_date,
        "total_courses": catalog.total_courses,
        "total_sections": catalog.total_sections,
        "total_open": catalog.total_open,
        "by_course": by_course,
        "errors_count": len(catalog.errors),
        "warnings_count": len(catalog.warnings),
    }
