"""Export functionality for generated schedules."""

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from .constants import DEFAULT_DAYS
from .planner.models import GenerationResult, RankedResult
from .planner.timetable import build_timetable


def _meetings(result: RankedResult) -> list[dict]:
    """One row per section of a ranked option."""
    rows = []
    for section in result.sections:
        rows.append(
            {
                "course_code": section.course_code,
                "course_name": section.course_name,
                "section_id": section.section_id,
                "schedule": "; ".join(f"{s.day} {s.time}" for s in section.slots),
            }
        )
    return rows


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(self, result: GenerationResult, output_path: str | Path) -> None:
        """Export generation result to file.

        Args:
            result: GenerationResult to export
            output_path: Path to output file or directory
        """
        pass


class JSONExporter(BaseExporter):
    """Export to JSON format."""

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        """Initialize exporter.

        Args:
            indent: JSON indentation level
            ensure_ascii: If False, allows non-ASCII characters
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, result: GenerationResult, output_path: str | Path) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(
                result.to_dict(),
                f,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
            )


class CSVExporter(BaseExporter):
    """Export to CSV format (multiple files)."""

    def export(self, result: GenerationResult, output_path: str | Path) -> None:
        """Export generation result to CSV files.

        Creates three files:
        - options.csv: One row per section of every ranked option
        - excluded.csv: Courses dropped for lack of qualifying sections
        - summary.csv: Status and counters

        Args:
            result: GenerationResult to export
            output_path: Path to output directory
        """
        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        self._export_options(result, output_dir / "options.csv")
        self._export_excluded(result, output_dir / "excluded.csv")
        self._export_summary(result, output_dir / "summary.csv")

    def _export_options(self, result: GenerationResult, output_path: Path) -> None:
        rows = []
        for rank, ranked in enumerate(result.ranked_results, start=1):
            for meeting in _meetings(ranked):
                rows.append(
                    {
                        "option": rank,
                        "score": ranked.score,
                        "days": ranked.days,
                        "gaps": ranked.gaps,
                        **meeting,
                    }
                )

        self._write_csv(output_path, rows)

    def _export_excluded(self, result: GenerationResult, output_path: Path) -> None:
        rows = [c.to_dict() for c in result.excluded_courses]
        self._write_csv(output_path, rows)

    def _export_summary(self, result: GenerationResult, output_path: Path) -> None:
        rows = [
            {"metric": "generation_date", "value": result.generation_date},
            {"metric": "status", "value": result.status.value},
            {"metric": "message", "value": result.message},
            {"metric": "options", "value": result.total_results},
            {"metric": "excluded_courses", "value": len(result.excluded_courses)},
        ]
        rows.extend(
            {"metric": key, "value": value}
            for key, value in result.statistics.to_dict().items()
        )

        self._write_csv(output_path, rows)

    def _write_csv(self, output_path: Path, rows: list[dict]) -> None:
        """Write rows to CSV file."""
        if not rows:
            return

        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=rows[0].keys())
            writer.writeheader()
            writer.writerows(rows)


class ExcelExporter(BaseExporter):
    """Export to Excel format (single workbook with multiple sheets)."""

    def export(self, result: GenerationResult, output_path: str | Path) -> None:
        """Export generation result to Excel file.

        Creates workbook with sheets:
        - Options: Every ranked option, one row per section
        - Excluded: Dropped courses
        - Summary: Status and counters
        - Option N: Weekly timetable grid for each ranked option

        Args:
            result: GenerationResult to export
            output_path: Path to output Excel file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            self._export_options_sheet(result, writer)
            self._export_excluded_sheet(result, writer)
            self._export_summary_sheet(result, writer)
            self._export_timetable_sheets(result, writer)

    def _export_options_sheet(self, result: GenerationResult, writer: pd.ExcelWriter) -> None:
        rows = []
        for rank, ranked in enumerate(result.ranked_results, start=1):
            for meeting in _meetings(ranked):
                rows.append(
                    {
                        "Option": rank,
                        "Score": ranked.score,
                        "Days": ranked.days,
                        "Course": meeting["course_code"],
                        "Name": meeting["course_name"],
                        "Section": meeting["section_id"],
                        "Schedule": meeting["schedule"],
                    }
                )

        columns = ["Option", "Score", "Days", "Course", "Name", "Section", "Schedule"]
        df = pd.DataFrame(rows, columns=columns)
        df.to_excel(writer, sheet_name="Options", index=False)

    def _export_excluded_sheet(self, result: GenerationResult, writer: pd.ExcelWriter) -> None:
        rows = [{"Code": c.code, "Name": c.name} for c in result.excluded_courses]
        df = pd.DataFrame(rows) if rows else pd.DataFrame(columns=["Code", "Name"])
        df.to_excel(writer, sheet_name="Excluded", index=False)

    def _export_summary_sheet(self, result: GenerationResult, writer: pd.ExcelWriter) -> None:
        stats = result.statistics
        rows = [
            {"Metric": "Generation Date", "Value": result.generation_date},
            {"Metric": "Status", "Value": result.status.value},
            {"Metric": "Message", "Value": result.message},
            {"Metric": "Options", "Value": result.total_results},
            {"Metric": "Excluded Courses", "Value": len(result.excluded_courses)},
            {"Metric": "Combinations", "Value": stats.naive_combinations},
            {"Metric": "Combinations Checked", "Value": stats.combinations_checked},
            {"Metric": "Conflict-free Found", "Value": stats.valid_schedules},
        ]

        df = pd.DataFrame(rows)
        df.to_excel(writer, sheet_name="Summary", index=False)

    def _export_timetable_sheets(self, result: GenerationResult, writer: pd.ExcelWriter) -> None:
        days = result.filters.ordered_days if result.filters else DEFAULT_DAYS
        for rank, ranked in enumerate(result.ranked_results, start=1):
            grid = build_timetable(ranked.sections, days)
            grid.to_excel(writer, sheet_name=f"Option {rank}")


def get_exporter(format_type: str) -> BaseExporter:
    """Get appropriate exporter for format type.

    Args:
        format_type: Export format ('json', 'csv', 'excel')

    Returns:
        Exporter instance

    Raises:
        ValueError: If format type is not supported
    """
    exporters = {
        "json": JSONExporter,
        "csv": CSVExporter,
        "excel": ExcelExporter,
    }

    if format_type not in exporters:
        raise ValueError(
            f"Unsupported format: {format_type}. Supported: {', '.join(exporters.keys())}"
        )

    return exporters[format_type]()
