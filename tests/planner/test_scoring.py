"""Tests for scoring and ranking."""

from smart_registration.planner.models import Filters
from smart_registration.planner.scoring import (
    calculate_score,
    calculate_total_gap,
    collect_valid_schedules,
    count_days,
    rank_schedules,
)


class TestCountDays:
    """Tests for count_days function."""

    def test_distinct_days(self, make_section):
        schedule = (
            make_section("CS101", "A", [("Mon", "09:00 - 10:00"), ("Wed", "09:00 - 10:00")]),
            make_section("MA201", "A", [("Mon", "11:00 - 12:00")]),
        )
        assert count_days(schedule) == 2

    def test_empty(self):
        assert count_days(()) == 0


class TestCalculateScore:
    """Tests for calculate_score function."""

    def test_within_max_days(self, make_section):
        schedule = (
            make_section("CS101", "A", [("Mon", "09:00 - 10:00")]),
            make_section("MA201", "A", [("Wed", "09:00 - 10:00")]),
        )
        assert calculate_score(schedule, max_days=5, max_gap=2) == 600

    def test_over_max_days_loses_bonus(self, make_section):
        schedule = (
            make_section("CS101", "A", [("Mon", "09:00 - 10:00"), ("Tue", "09:00 - 10:00")]),
            make_section("MA201", "A", [("Wed", "09:00 - 10:00"), ("Thu", "09:00 - 10:00")]),
        )
        assert calculate_score(schedule, max_days=3, max_gap=2) == 200

    def test_exactly_max_days_keeps_bonus(self, make_section):
        schedule = (make_section("CS101", "A", [("Mon", "09:00 - 10:00")]),)
        assert calculate_score(schedule, max_days=1, max_gap=0) == 700

    def test_gap_preference_ignored(self, make_section):
        schedule = (make_section("CS101", "A", [("Mon", "08:00 - 09:00"), ("Mon", "16:00 - 17:00")]),)
        assert calculate_score(schedule, 5, 0) == calculate_score(schedule, 5, 10)

    def test_total_gap_is_zero(self, make_section):
        schedule = (make_section("CS101", "A", [("Mon", "08:00 - 09:00"), ("Mon", "16:00 - 17:00")]),)
        assert calculate_total_gap(schedule) == 0


class TestCollectValidSchedules:
    """Tests for collect_valid_schedules function."""

    def test_drops_conflicts(self, make_section):
        clash = (
            make_section("CS101", "A", [("Mon", "09:00 - 10:30")]),
            make_section("MA201", "A", [("Mon", "10:00 - 11:30")]),
        )
        fine = (
            make_section("CS101", "A", [("Mon", "09:00 - 10:30")]),
            make_section("MA201", "B", [("Wed", "11:00 - 12:30")]),
        )
        valid, checked = collect_valid_schedules([clash, fine])
        assert valid == [fine]
        assert checked == 2

    def test_stops_at_limit(self, make_section):
        schedule = (make_section("CS101", "A", [("Mon", "09:00 - 10:00")]),)
        consumed = []

        def stream():
            for _ in range(500):
                consumed.append(1)
                yield schedule

        valid, checked = collect_valid_schedules(stream(), limit=100)
        assert len(valid) == 100
        assert checked == 100
        assert len(consumed) == 100

    def test_zero_limit(self, make_section):
        schedule = (make_section("CS101", "A", []),)
        assert collect_valid_schedules([schedule], limit=0) == ([], 0)


class TestRankSchedules:
    """Tests for rank_schedules function."""

    def test_sorted_by_score(self, make_section):
        spread = (
            make_section("CS101", "A", [("Mon", "09:00 - 10:00")]),
            make_section("MA201", "A", [("Tue", "09:00 - 10:00")]),
        )
        compact = (
            make_section("CS101", "B", [("Mon", "09:00 - 10:00")]),
            make_section("MA201", "B", [("Mon", "11:00 - 12:00")]),
        )
        ranked = rank_schedules([spread, compact], Filters())
        assert [r.score for r in ranked] == [700, 600]
        assert ranked[0].sections == compact

    def test_ties_keep_enumeration_order(self, make_section):
        schedules = [
            (make_section("CS101", str(i), [("Mon", "09:00 - 10:00")]),) for i in range(5)
        ]
        ranked = rank_schedules(schedules, Filters())
        assert [r.sections[0].section_id for r in ranked] == ["0", "1", "2", "3", "4"]

    def test_limit(self, make_section):
        schedules = [(make_section("CS101", str(i), []),) for i in range(25)]
        ranked = rank_schedules(schedules, Filters())
        assert len(ranked) == 10

    def test_result_metrics(self, make_section):
        schedule = (
            make_section("CS101", "A", [("Mon", "09:00 - 10:00")]),
            make_section("MA201", "A", [("Wed", "09:00 - 10:00")]),
        )
        result = rank_schedules([schedule], Filters())[0]
        assert result.days == 2
        assert result.gaps == 0
        assert result.score == 600
        assert result.course_codes == ["CS101", "MA201"]

    def test_empty(self):
        assert rank_schedules([], Filters()) == []
