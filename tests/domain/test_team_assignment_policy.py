"""Tests for the team assignment set-replace policy."""

from budget_tracker.domain.policies import plan_assignment_change


def test_plan_replaces_instead_of_merging() -> None:
    change = plan_assignment_change("p1", {"m1"}, ["m2", "m3"])

    assert change.desired == frozenset({"m2", "m3"})
    assert change.to_remove == frozenset({"m1"})
    assert change.to_add == frozenset({"m2", "m3"})
    assert change.is_noop is False


def test_plan_keeps_overlapping_members() -> None:
    change = plan_assignment_change("p1", {"m1", "m2"}, {"m2", "m3"})

    assert change.to_remove == frozenset({"m1"})
    assert change.to_add == frozenset({"m3"})


def test_plan_with_empty_request_clears_team() -> None:
    change = plan_assignment_change("p1", {"m1", "m2"}, [])

    assert change.desired == frozenset()
    assert change.to_remove == frozenset({"m1", "m2"})


def test_plan_collapses_duplicates_and_blanks() -> None:
    change = plan_assignment_change("p1", {"m1"}, ["m1", " m1 ", "", "m1"])

    assert change.desired == frozenset({"m1"})
    assert change.is_noop is True
