"""Tests for the exclusion workflow."""

import pytest

from smart_registration.exceptions import InvalidTransitionError
from smart_registration.planner.coordinator import ExclusionCoordinator
from smart_registration.planner.models import (
    ExclusionState,
    Filters,
    GenerationStatus,
    ScheduleRequest,
)


@pytest.fixture
def coordinator(sample_catalog):
    return ExclusionCoordinator(sample_catalog.sections)


class TestSubmit:
    """Tests for ExclusionCoordinator.submit."""

    def test_starts_idle(self, coordinator):
        assert coordinator.state == ExclusionState.IDLE
        assert coordinator.excluded_courses == []

    def test_empty_selection(self, coordinator):
        result = coordinator.submit(ScheduleRequest(selected_courses=()))
        assert result.status == GenerationStatus.EMPTY_SELECTION
        assert coordinator.state == ExclusionState.IDLE

    def test_all_courses_fit(self, coordinator):
        result = coordinator.submit(ScheduleRequest(selected_courses=("CS101", "MA201")))
        assert result.ok
        assert coordinator.state == ExclusionState.SATISFIED
        assert result.excluded_courses == []
        assert not result.dropped_courses

    def test_exclusion_pauses(self, coordinator):
        result = coordinator.submit(
            ScheduleRequest(selected_courses=("CS101", "MA201", "EN110"))
        )
        assert result.status == GenerationStatus.EXCLUSIONS_PENDING
        assert result.message == "1 course(s) don't fit your preferences"
        assert [c.name for c in result.excluded_courses] == ["Academic Writing"]
        assert result.ranked_results == []
        assert coordinator.state == ExclusionState.PARTIALLY_EXCLUDED
        assert [c.code for c in coordinator.excluded_courses] == ["EN110"]

    def test_filters_never_relaxed(self, coordinator):
        coordinator.submit(ScheduleRequest(selected_courses=("CS101", "EN110")))
        result = coordinator.confirm()
        assert result.filters == Filters()
        assert [c.code for c in result.excluded_courses] == ["EN110"]

    def test_new_submit_clears_pending(self, coordinator):
        coordinator.submit(ScheduleRequest(selected_courses=("EN110",)))
        coordinator.submit(ScheduleRequest(selected_courses=("CS101",)))
        assert coordinator.state == ExclusionState.SATISFIED
        assert coordinator.excluded_courses == []

    def test_grouping_failure(self, coordinator, monkeypatch):
        from smart_registration.planner import coordinator as coordinator_module

        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(coordinator_module, "group_candidates", explode)
        result = coordinator.submit(ScheduleRequest(selected_courses=("CS101",)))
        assert result.status == GenerationStatus.FAILED
        assert coordinator.state == ExclusionState.IDLE


class TestConfirm:
    """Tests for ExclusionCoordinator.confirm."""

    def test_generates_without_excluded(self, coordinator):
        coordinator.submit(ScheduleRequest(selected_courses=("CS101", "MA201", "EN110")))
        result = coordinator.confirm()

        assert result.ok
        assert coordinator.state == ExclusionState.PROCEEDING
        assert result.dropped_courses
        assert [c.code for c in result.excluded_courses] == ["EN110"]
        for option in result.ranked_results:
            assert option.course_codes == ["CS101", "MA201"]

    def test_all_excluded_confirm(self, coordinator):
        coordinator.submit(ScheduleRequest(selected_courses=("EN110",)))
        result = coordinator.confirm()
        assert result.status == GenerationStatus.NO_CANDIDATES

    def test_confirm_without_pending(self, coordinator):
        with pytest.raises(InvalidTransitionError):
            coordinator.confirm()

    def test_confirm_twice(self, coordinator):
        coordinator.submit(ScheduleRequest(selected_courses=("CS101", "EN110")))
        coordinator.confirm()
        with pytest.raises(InvalidTransitionError, match="proceeding"):
            coordinator.confirm()


class TestCancel:
    """Tests for ExclusionCoordinator.cancel."""

    def test_returns_to_idle(self, coordinator):
        coordinator.submit(ScheduleRequest(selected_courses=("CS101", "EN110")))
        coordinator.cancel()
        assert coordinator.state == ExclusionState.IDLE
        assert coordinator.excluded_courses == []

    def test_cancel_without_pending(self, coordinator):
        with pytest.raises(InvalidTransitionError):
            coordinator.cancel()

    def test_confirm_after_cancel(self, coordinator):
        coordinator.submit(ScheduleRequest(selected_courses=("CS101", "EN110")))
        coordinator.cancel()
        with pytest.raises(InvalidTransitionError):
            coordinator.confirm()
