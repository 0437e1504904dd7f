"""Tests for the in-memory seating state transitions."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.course import CourseCounts, CourseType
from models.assignment import AllocationResult, GroupError, SeatAssignment
from models.errors import InvalidHeadcountError, UnknownSeatError
from data.seating_state import (
    add_group, initial_state, manual_assign_seat, next_group_number, remove_group,
    rename_group, reset_all, reset_result, set_result, update_count, update_memo,
)
from engine.allocator import assign_seats


def with_result(state):
    return set_result(state, assign_seats(state.groups))


class TestGroups:
    def test_initial_state(self):
        state = initial_state()
        assert [g.group_id for g in state.groups] == ["mentor-1"]
        assert state.groups[0].label == "Mentor 1"
        assert state.result is None

    def test_add_group_uses_next_number(self):
        state = add_group(add_group(initial_state()))
        assert [g.group_id for g in state.groups] == ["mentor-1", "mentor-2", "mentor-3"]

    def test_add_group_reuses_smallest_free_number(self):
        state = add_group(add_group(initial_state()))
        state = remove_group(state, "mentor-2")
        state = add_group(state)
        assert [g.group_id for g in state.groups] == ["mentor-1", "mentor-3", "mentor-2"]
        assert next_group_number(state.groups) == 4

    def test_last_group_is_kept(self):
        state = initial_state()
        assert remove_group(state, "mentor-1") is state

    def test_update_count(self):
        state = update_count(initial_state(), "mentor-1", CourseType.FAB, 3)
        assert state.groups[0].counts == CourseCounts(fab=3)

    def test_update_count_rejects_negative(self):
        with pytest.raises(InvalidHeadcountError):
            update_count(initial_state(), "mentor-1", CourseType.GAME, -1)

    def test_rename(self):
        state = rename_group(initial_state(), "mentor-1", "Aki")
        assert state.groups[0].label == "Aki"

    def test_edits_discard_result(self):
        state = with_result(update_count(initial_state(), "mentor-1", CourseType.ROBOT, 2))
        assert state.result is not None
        assert update_count(state, "mentor-1", CourseType.ROBOT, 3).result is None
        assert rename_group(state, "mentor-1", "X").result is None
        assert add_group(state).result is None
        assert reset_result(state).result is None

    def test_original_state_unchanged(self):
        state = initial_state()
        update_count(state, "mentor-1", CourseType.ROBOT, 2)
        assert state.groups[0].counts == CourseCounts()


class TestManualAssign:
    def test_assign_without_prior_result(self):
        state = manual_assign_seat(initial_state(), "3", "mentor-1", CourseType.PRIME)
        assert state.result.assignments == [SeatAssignment("3", "mentor-1", CourseType.PRIME)]

    def test_replace_existing_seat(self):
        state = with_result(update_count(initial_state(), "mentor-1", CourseType.ROBOT, 3))
        state = add_group(state)
        state = set_result(state, AllocationResult(
            assignments=[SeatAssignment("7", "mentor-1", CourseType.ROBOT)],
        ))
        state = manual_assign_seat(state, "7", "mentor-2", CourseType.ROBOT)
        assert state.result.seat_map()["7"].group_id == "mentor-2"
        assert len(state.result.assignments) == 1

    def test_clear_seat(self):
        state = manual_assign_seat(initial_state(), "7", "mentor-1", CourseType.ROBOT)
        state = manual_assign_seat(state, "7", None, CourseType.ROBOT)
        assert state.result.assignments == []

    def test_floor_seat_updates_overflow(self):
        state = manual_assign_seat(initial_state(), "18", "mentor-1", CourseType.ROBOT)
        assert state.result.overflow.seat_ids == ["18"]
        state = manual_assign_seat(state, "18", None, CourseType.ROBOT)
        assert state.result.overflow is None

    def test_hand_seated_group_loses_its_error(self):
        state = add_group(update_count(initial_state(), "mentor-1", CourseType.ROBOT, 6))
        state = set_result(state, AllocationResult(
            errors=[
                GroupError("mentor-1", "Mentor 1", CourseCounts(robot=6), "no room"),
                GroupError("mentor-2", "Mentor 2", CourseCounts(game=2), "no room"),
            ],
        ))
        state = manual_assign_seat(state, "1", "mentor-2", CourseType.GAME)
        assert [e.group_id for e in state.result.errors] == ["mentor-1"]

    def test_floor_headcount_survives_edits(self):
        state = with_result(update_count(initial_state(), "mentor-1", CourseType.ROBOT, 10))
        assert state.result.overflow.total == 4
        state = manual_assign_seat(state, "7", None, CourseType.ROBOT)
        assert state.result.overflow.total == 4
        state = manual_assign_seat(state, "18", None, CourseType.ROBOT)
        assert state.result.overflow.total == 3
        assert state.result.overflow.seat_ids == ["17"]

    def test_wrong_family_rejected(self):
        with pytest.raises(ValueError):
            manual_assign_seat(initial_state(), "7", "mentor-1", CourseType.GAME)

    def test_unknown_seat(self):
        with pytest.raises(UnknownSeatError):
            manual_assign_seat(initial_state(), "42", "mentor-1", CourseType.GAME)


class TestMemoAndReset:
    def test_memo(self):
        assert update_memo(initial_state(), "bring spare laptops").memo == "bring spare laptops"

    def test_reset_all(self):
        state = update_memo(add_group(initial_state()), "x")
        assert reset_all() == initial_state()
        assert reset_all() != state
