"""Enrollment actions for a chosen schedule."""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .constants import DEFAULT_ENROLL_DELAY
from .models import Section

logger = logging.getLogger(__name__)


class Enroller(ABC):
    """Performs a single enroll action on the registration page."""

    @abstractmethod
    def enroll(self, section_id: str) -> bool:
        """Enroll in a section.

        Args:
            section_id: Identifier of the section to enroll in

        Returns:
            True if the enroll action was performed
        """
        pass


class EnrollmentCart(Enroller):
    """In-process enrollment cart holding at most one section per course.

    Only open sections can be added. Adding a section of a course that is
    already in the cart replaces the earlier section; adding a section that
    is already in the cart does nothing and reports failure.
    """

    def __init__(self, sections: Iterable[Section]):
        self._sections = {s.section_id: s for s in sections}
        self._items: dict[str, Section] = {}

    @property
    def items(self) -> list[Section]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, section_id: object) -> bool:
        return any(s.section_id == section_id for s in self._items.values())

    def enroll(self, section_id: str) -> bool:
        section = self._sections.get(section_id)
        if section is None or not section.is_open or section_id in self:
            return False

        self._items.pop(section.course_code, None)
        self._items[section.course_code] = section
        return True

    def remove(self, section_id: str) -> bool:
        """Remove a section from the cart."""
        for code, section in self._items.items():
            if section.section_id == section_id:
                del self._items[code]
                return True
        return False

    def clear(self) -> None:
        self._items.clear()


@dataclass
class EnrollmentAttempt:
    """Outcome of one enroll action."""

    section_id: str
    course_code: str
    success: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "section_id": self.section_id,
            "course_code": self.course_code,
            "success": self.success,
            "error": self.error,
        }


@dataclass
class EnrollmentReport:
    """Outcome of applying a schedule.

    There is no rollback: earlier successful actions stay applied when a
    later one fails.
    """

    attempts: list[EnrollmentAttempt] = field(default_factory=list)
    requested: int = 0

    @property
    def success(self) -> bool:
        """True when every requested section was enrolled."""
        return self.requested == len(self.attempts) and all(a.success for a in self.attempts)

    @property
    def enrolled(self) -> list[str]:
        return [a.section_id for a in self.attempts if a.success]

    @property
    def failed(self) -> list[str]:
        return [a.section_id for a in self.attempts if not a.success]

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "requested": self.requested,
            "attempts": [a.to_dict() for a in self.attempts],
        }


def apply_schedule(
    sections: Sequence[Section],
    enroller: Enroller,
    delay: float = DEFAULT_ENROLL_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> EnrollmentReport:
    """Enroll in each section of a schedule, one action at a time.

    Actions are issued in schedule order with ``delay`` seconds between
    them and are never retried. A section the enroller rejects is recorded
    and the run continues; an enroller that raises stops the run.

    Args:
        sections: Sections of the chosen schedule
        enroller: Actuator performing the enroll actions
        delay: Pause between consecutive actions
        sleep: Sleep function (injectable for tests)

    Returns:
        EnrollmentReport with one attempt per section tried
    """
    report = EnrollmentReport(requested=len(sections))

    for index, section in enumerate(sections):
        if index > 0 and delay > 0:
            sleep(delay)

        try:
            success = bool(enroller.enroll(section.section_id))
        except Exception as e:
            logger.error(f"Enroll failed for {section.section_id}: {e}")
            report.attempts.append(
                EnrollmentAttempt(section.section_id, section.course_code, False, str(e))
            )
            break

        logger.debug(f"Enroll {section.section_id}: {'ok' if success else 'rejected'}")
        report.attempts.append(
            EnrollmentAttempt(section.section_id, section.course_code, success)
        )

    return report
