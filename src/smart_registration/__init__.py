"""Smart Registration - conflict-free class schedule planner.

This module loads the course sections scanned from a registration page,
lets a user pick courses and day/time preferences, and ranks the
conflict-free weekly schedules that take exactly one section per course.

Example usage:
    from smart_registration import PlannerSession, ScheduleRequest, load_catalog
    from smart_registration.planner import Filters

    catalog = load_catalog("scan.json")
    print(f"Courses: {catalog.total_courses}, open sections: {catalog.total_open}")

    session = PlannerSession(catalog)
    filters = Filters(days=frozenset({"Mon", "Wed"}), start_time="09:00", end_time="16:00")
    result = session.generate(ScheduleRequest(("CS101", "MA201"), filters))

    for option in result.ranked_results:
        print(option.score, [s.section_id for s in option.sections])

    # Export to JSON
    from smart_registration.exporters import JSONExporter
    JSONExporter().export(result, "options.json")
"""

from .catalog import Catalog, CatalogLoader, load_catalog
from .enrollment import Enroller, EnrollmentCart, EnrollmentReport, apply_schedule
from .exceptions import (
    CatalogLoadError,
    ConfigError,
    InvalidFiltersError,
    InvalidTimeError,
    InvalidTimeRangeError,
    InvalidTransitionError,
    RegistrationError,
)
from .exporters import CSVExporter, ExcelExporter, JSONExporter, get_exporter
from .models import Course, Section, SectionStatus, TimeRange, TimeSlot
from .planner import (
    Filters,
    GenerationResult,
    GenerationStatus,
    PlannerConfig,
    PlannerSession,
    RankedResult,
    ScheduleRequest,
)
from .timecodes import encode_time, parse_time_range

__version__ = "0.1.0"

__all__ = [
    # Catalog
    "Catalog",
    "CatalogLoader",
    "load_catalog",
    # Models
    "Course",
    "Section",
    "SectionStatus",
    "TimeRange",
    "TimeSlot",
    # Planner
    "Filters",
    "GenerationResult",
    "GenerationStatus",
    "PlannerConfig",
    "PlannerSession",
    "RankedResult",
    "ScheduleRequest",
    # Enrollment
    "Enroller",
    "EnrollmentCart",
    "EnrollmentReport",
    "apply_schedule",
    # Exporters
    "JSONExporter",
    "CSVExporter",
    "ExcelExporter",
    "get_exporter",
    # Time encoding
    "encode_time",
    "parse_time_range",
    # Exceptions
    "RegistrationError",
    "InvalidTimeError",
    "InvalidTimeRangeError",
    "InvalidFiltersError",
    "CatalogLoadError",
    "InvalidTransitionError",
    "ConfigError",
]
