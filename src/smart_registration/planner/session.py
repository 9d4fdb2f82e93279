"""Planner session: one catalog scan and the requests made against it."""

from ..catalog import Catalog
from ..enrollment import Enroller, EnrollmentCart, EnrollmentReport, apply_schedule
from ..models import Course
from .config import PlannerConfig
from .coordinator import ExclusionCoordinator
from .engine import ScheduleEngine
from .models import ExclusionState, GenerationResult, RankedResult, ScheduleRequest


class PlannerSession:
    """Holds everything a user's planning session needs.

    Catalog, limits, and exclusion workflow state live here instead of in
    module-level variables, so independent sessions never share state.
    Callers must not submit a new request while one is still running.
    """

    def __init__(self, catalog: Catalog, config: PlannerConfig | None = None):
        self.catalog = catalog
        self.config = config or PlannerConfig()
        self.engine = ScheduleEngine(self.config)
        self.coordinator = ExclusionCoordinator(catalog.sections, self.engine)
        self.last_result: GenerationResult | None = None

    @property
    def state(self) -> ExclusionState:
        return self.coordinator.state

    @property
    def courses(self) -> list[Course]:
        return self.catalog.courses

    def generate(self, request: ScheduleRequest) -> GenerationResult:
        """Submit a request; may stop at EXCLUSIONS_PENDING."""
        self.last_result = self.coordinator.submit(request)
        return self.last_result

    def confirm_exclusions(self) -> GenerationResult:
        """Continue without the courses that have no qualifying section."""
        self.last_result = self.coordinator.confirm()
        return self.last_result

    def cancel(self) -> None:
        self.coordinator.cancel()
        self.last_result = None

    def create_cart(self) -> EnrollmentCart:
        """An empty enrollment cart over this session's sections."""
        return EnrollmentCart(self.catalog.sections)

    def apply(self, result: RankedResult, enroller: Enroller) -> EnrollmentReport:
        """Enroll in every section of a ranked option, one at a time."""
        return apply_schedule(result.sections, enroller, delay=self.config.enroll_delay)
