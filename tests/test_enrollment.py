"""Tests for enrollment actions."""

import pytest

from smart_registration.enrollment import (
    Enroller,
    EnrollmentCart,
    EnrollmentReport,
    apply_schedule,
)


class ScriptedEnroller(Enroller):
    """Enroller returning canned outcomes per section id."""

    def __init__(self, outcomes=None):
        self.outcomes = outcomes or {}
        self.calls = []

    def enroll(self, section_id):
        self.calls.append(section_id)
        outcome = self.outcomes.get(section_id, True)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def cart(sample_catalog):
    return EnrollmentCart(sample_catalog.sections)


class TestEnrollmentCart:
    """Tests for EnrollmentCart."""

    def test_enroll_open_section(self, cart):
        assert cart.enroll("CS101 A")
        assert "CS101 A" in cart
        assert len(cart) == 1

    def test_closed_section_rejected(self, cart):
        assert not cart.enroll("CS101 B")
        assert len(cart) == 0

    def test_unknown_section_rejected(self, cart):
        assert not cart.enroll("ZZ999 A")

    def test_same_section_twice_rejected(self, cart):
        cart.enroll("CS101 A")
        assert not cart.enroll("CS101 A")
        assert len(cart) == 1

    def test_one_section_per_course(self, cart):
        cart.enroll("CS101 A")
        assert cart.enroll("CS101 C")
        assert [s.section_id for s in cart.items] == ["CS101 C"]

    def test_remove(self, cart):
        cart.enroll("MA201 A")
        assert cart.remove("MA201 A")
        assert not cart.remove("MA201 A")
        assert len(cart) == 0

    def test_clear(self, cart):
        cart.enroll("CS101 A")
        cart.enroll("MA201 B")
        cart.clear()
        assert cart.items == []


class TestApplySchedule:
    """Tests for apply_schedule function."""

    def test_enrolls_in_order(self, sample_catalog):
        sections = [sample_catalog.get_section("CS101 C"), sample_catalog.get_section("MA201 A")]
        enroller = ScriptedEnroller()
        report = apply_schedule(sections, enroller, delay=0)

        assert enroller.calls == ["CS101 C", "MA201 A"]
        assert report.success
        assert report.enrolled == ["CS101 C", "MA201 A"]

    def test_delay_between_actions_only(self, sample_catalog):
        sections = [
            sample_catalog.get_section("CS101 A"),
            sample_catalog.get_section("MA201 B"),
            sample_catalog.get_section("EN110 A"),
        ]
        pauses = []
        apply_schedule(sections, ScriptedEnroller(), delay=0.5, sleep=pauses.append)
        assert pauses == [0.5, 0.5]

    def test_rejection_continues(self, sample_catalog):
        sections = [sample_catalog.get_section("CS101 A"), sample_catalog.get_section("MA201 B")]
        enroller = ScriptedEnroller({"CS101 A": False})
        report = apply_schedule(sections, enroller, delay=0)

        assert enroller.calls == ["CS101 A", "MA201 B"]
        assert not report.success
        assert report.failed == ["CS101 A"]
        assert report.enrolled == ["MA201 B"]

    def test_error_stops_run_without_rollback(self, sample_catalog):
        sections = [
            sample_catalog.get_section("CS101 A"),
            sample_catalog.get_section("MA201 B"),
            sample_catalog.get_section("EN110 A"),
        ]
        enroller = ScriptedEnroller({"MA201 B": RuntimeError("page changed")})
        report = apply_schedule(sections, enroller, delay=0)

        assert enroller.calls == ["CS101 A", "MA201 B"]
        assert report.enrolled == ["CS101 A"]
        assert report.attempts[-1].error == "page changed"
        assert not report.success

    def test_closed_section_fails_in_cart(self, sample_catalog, cart):
        sections = [sample_catalog.get_section("CS101 B")]
        report = apply_schedule(sections, cart, delay=0)
        assert report.failed == ["CS101 B"]

    def test_report_to_dict(self, sample_catalog):
        sections = [sample_catalog.get_section("CS101 A")]
        data = apply_schedule(sections, ScriptedEnroller(), delay=0).to_dict()
        assert data["success"]
        assert data["requested"] == 1
        assert data["attempts"][0]["section_id"] == "CS101 A"

    def test_empty_schedule(self):
        report = apply_schedule([], ScriptedEnroller(), delay=0)
        assert report == EnrollmentReport()
        assert report.success
