"""Tests for the seat allocator."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.course import CourseCounts, CourseType
from models.group import Group
from models.seat import SeatFamily
from models.assignment import OverflowContribution
from engine.topology import DEFAULT_TOPOLOGY
from engine.aggregator import accounting_summary
from engine.allocator import assign_seats, group_sort_key, sort_groups
from config.defaults import UNPLACEABLE_REASON


def make_group(number=1, robot=0, game=0, fab=0, prime=0):
    return Group(f"mentor-{number}", f"Mentor {number}", CourseCounts(robot, game, fab, prime))


def seats_of(result, group_id):
    return [a.seat_id for a in result.for_group(group_id)]


def busy_evening():
    return [
        make_group(1, robot=3),
        make_group(2, game=4),
        make_group(3, robot=2, game=1),
        make_group(4, fab=2, prime=1),
        make_group(5, robot=4),
        make_group(6, game=3),
        make_group(7, robot=6),
        make_group(8, prime=2),
        make_group(9, robot=1, fab=1),
    ]


class TestGroupOrdering:
    def test_shared_block_groups_first(self):
        small = make_group(1, robot=1, game=2)
        block = make_group(2, game=3, prime=1)
        large = make_group(3, robot=5)
        assert [g.group_id for g in sort_groups([small, block, large])] == [
            "mentor-2", "mentor-3", "mentor-1",
        ]

    def test_robot_students_disqualify_block_priority(self):
        assert group_sort_key(make_group(robot=1, game=4)) == (1, -5)
        assert group_sort_key(make_group(game=4)) == (0, -4)

    def test_ties_keep_input_order(self):
        a = make_group(1, robot=2)
        b = make_group(2, game=2)
        c = make_group(3, fab=1, prime=1)
        assert [g.group_id for g in sort_groups([a, b, c])] == ["mentor-1", "mentor-2", "mentor-3"]
        assert [g.group_id for g in sort_groups([c, b, a])] == ["mentor-3", "mentor-2", "mentor-1"]


class TestPlacementOutcomes:
    def test_robot_group_on_high_priority_seats(self):
        result = assign_seats([make_group(robot=3)])
        assert [a.seat_id for a in result.assignments] == ["7", "8", "11"]
        assert all(a.course is CourseType.ROBOT for a in result.assignments)
        assert result.overflow is None
        assert result.errors == []

    def test_shared_group_takes_shared_block(self):
        result = assign_seats([make_group(game=2, fab=1, prime=1)])
        assert [a.seat_id for a in result.assignments] == ["1", "2", "3", "4"]
        assert result.errors == []

    def test_robot_demand_beyond_any_block_spills_to_floor(self):
        result = assign_seats([make_group(robot=10)])
        assert seats_of(result, "mentor-1") == ["7", "8", "9", "10", "11", "12", "17", "18"]
        assert result.errors == []
        assert result.overflow.owner_group_id == "mentor-1"
        assert result.overflow.total == 4
        assert result.overflow.contributors == [OverflowContribution("mentor-1", 4)]
        assert result.overflow.seat_ids == ["17", "18"]
        assert any("without a seat: 2" in step for step in result.explanations["mentor-1"])

    def test_floor_headcount_once_floor_seats_are_taken(self):
        result = assign_seats([make_group(1, robot=10), make_group(2, robot=5)])
        assert seats_of(result, "mentor-2") == ["22", "23", "24"]
        assert result.errors == []
        assert result.overflow.owner_group_id == "mentor-1"
        assert result.overflow.total == 6
        assert result.overflow.contributors == [
            OverflowContribution("mentor-1", 4), OverflowContribution("mentor-2", 2),
        ]
        assert result.overflow.seat_ids == ["17", "18"]

    def test_lone_robot_student_never_goes_to_floor_alone(self):
        first = make_group(1, robot=10)
        second = make_group(2, robot=3)
        third = make_group(3, robot=1)
        result = assign_seats([first, second, third])
        assert seats_of(result, "mentor-3") == []
        assert [e.group_id for e in result.errors] == ["mentor-3"]
        assert result.errors[0].unassigned_counts == CourseCounts(robot=1)
        assert result.errors[0].reason == UNPLACEABLE_REASON

    def test_last_stage_seats_group_on_floor_seats(self):
        groups = [
            make_group(1, game=4),
            make_group(2, robot=6, game=2),
            make_group(3, robot=3, game=3),
            make_group(4, fab=3),
            make_group(5, robot=2, game=1),
        ]
        result = assign_seats(groups)
        assert result.errors == []
        assert seats_of(result, "mentor-5") == ["16", "17", "18"]
        assert result.seat_map()["16"].course is CourseType.GAME
        assert result.overflow.owner_group_id == "mentor-5"
        assert result.overflow.total == 2
        assert result.overflow.seat_ids == ["17", "18"]
        assert result.overflow.contributors == [OverflowContribution("mentor-5", 2)]
        assert any("stage 'overflow'" in step for step in result.explanations["mentor-5"])
        rows = {row["group_id"]: row for row in accounting_summary(groups, result, DEFAULT_TOPOLOGY)}
        assert rows["mentor-5"]["seated"] == CourseCounts(game=1)
        assert rows["mentor-5"]["overflow"] == 2

    def test_excess_robot_students_go_to_floor(self):
        result = assign_seats([make_group(robot=7)])
        assert seats_of(result, "mentor-1") == ["7", "8", "9", "10", "11", "12", "17"]
        assert result.errors == []
        assert result.overflow is not None
        assert result.overflow.owner_group_id == "mentor-1"
        assert result.overflow.total == 1
        assert result.overflow.seat_ids == ["17"]
        assert result.overflow.contributors == [OverflowContribution("mentor-1", 1)]

    def test_priority_group_keeps_preferred_block(self):
        mixed = make_group(1, game=2, fab=1)
        block = make_group(2, game=4)
        result = assign_seats([mixed, block])
        assert seats_of(result, "mentor-2") == ["1", "2", "3", "4"]
        assert seats_of(result, "mentor-1") == ["13", "14", "15"]
        assert result.errors == []

    def test_empty_group(self):
        result = assign_seats([make_group()])
        assert result.assignments == []
        assert result.overflow is None
        assert result.errors == []
        assert "mentor-1" in result.explanations

    def test_shared_students_never_overflow(self):
        result = assign_seats([make_group(game=12)])
        assert result.assignments == []
        assert result.overflow is None
        assert result.errors[0].unassigned_counts == CourseCounts(game=12)

    def test_no_groups(self):
        result = assign_seats([])
        assert result.assignments == []
        assert result.overflow is None
        assert result.errors == []

    def test_later_group_never_evicts_earlier(self):
        first = make_group(1, robot=6)
        second = make_group(2, robot=6)
        result = assign_seats([first, second])
        assert seats_of(result, "mentor-1") == ["7", "8", "9", "10", "11", "12"]
        assert seats_of(result, "mentor-2") == ["22", "23", "24", "17", "18"]
        assert result.overflow.contributors == [OverflowContribution("mentor-2", 3)]
        assert result.errors == []

    def test_explanations_name_the_stage(self):
        result = assign_seats([make_group(robot=3), make_group(2, robot=5)])
        assert any("high-priority" in step for step in result.explanations["mentor-1"])
        assert "mentor-2" in result.explanations


class TestInvariants:
    @pytest.fixture
    def groups(self):
        return busy_evening()

    @pytest.fixture
    def result(self, groups):
        return assign_seats(groups)

    def test_no_seat_used_twice(self, result):
        ids = [a.seat_id for a in result.assignments]
        assert len(ids) == len(set(ids))

    def test_seat_family_matches_course(self, result):
        for a in result.assignments:
            family = DEFAULT_TOPOLOGY.course_family(a.seat_id)
            if a.course is CourseType.ROBOT:
                assert family is SeatFamily.FOCUSED
            else:
                assert family is SeatFamily.SHARED

    def test_overflow_seats_hold_robot_only(self, result):
        for a in result.assignments:
            if DEFAULT_TOPOLOGY.is_overflow(a.seat_id):
                assert a.course is CourseType.ROBOT

    def test_every_student_accounted_for(self, groups, result):
        for row in accounting_summary(groups, result, DEFAULT_TOPOLOGY):
            for course in CourseType:
                overflow = row["overflow"] if course is CourseType.ROBOT else 0
                placed = row["seated"].get(course) + overflow + row["unmet"].get(course)
                assert placed == row["requested"].get(course), (row["group_id"], course)

    def test_errored_groups_hold_no_seats(self, result):
        for e in result.errors:
            assert result.for_group(e.group_id) == []

    def test_same_input_same_result(self, groups, result):
        again = assign_seats(groups)
        assert again.to_dict() == result.to_dict()
        assert again.explanations == result.explanations


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
