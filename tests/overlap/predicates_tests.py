import pytest

from rangeoverlap.core.exceptions import MissingBoundError
from rangeoverlap.overlap.predicates import (
    closed_ranges_overlap,
    closed_ranges_overlap_inclusive,
    has_overlap,
    open_ranges_overlap,
    open_ranges_overlap_inclusive,
)
from rangeoverlap.overlap.types import RangeOverlap


@pytest.fixture
def points():
    return {
        "r1_start": 1,
        "r1_end": 20,
        "before": -20,
        "before2": -10,
        "between": 10,
        "after": 30,
        "after2": 40,
    }


class TestHasOverlap:
    @pytest.mark.parametrize("category", list(RangeOverlap))
    def test_has_overlap(self, category):
        assert has_overlap(category) is (category is not RangeOverlap.NONE)


class TestOpenRangesOverlap:
    def test_both_ranges_open_ended_is_symmetric(self, points):
        start = points["r1_start"]
        for other in (points["before"], points["between"], points["after"]):
            assert open_ranges_overlap(start, None, other, None) is True
            assert open_ranges_overlap(other, None, start, None) is True

    def test_one_range_open_ended(self, points):
        """Only an open range starting after the closed range ends is disjoint"""
        start, end = points["r1_start"], points["r1_end"]

        assert open_ranges_overlap(start, end, points["before"], None) is True
        assert open_ranges_overlap(start, end, points["between"], None) is True
        assert open_ranges_overlap(start, end, points["after"], None) is False

        assert open_ranges_overlap(points["before"], None, start, end) is True
        assert open_ranges_overlap(points["between"], None, start, end) is True
        assert open_ranges_overlap(points["after"], None, start, end) is False

    def test_both_ranges_closed(self, points):
        """Disjoint only when one range starts after the other ends"""
        start, end = points["r1_start"], points["r1_end"]

        assert open_ranges_overlap(start, end, points["before"], points["before2"]) is False
        assert open_ranges_overlap(start, end, points["before"], points["between"]) is True
        assert open_ranges_overlap(start, end, points["between"], points["after"]) is True
        assert open_ranges_overlap(start, end, points["after"], points["after2"]) is False

        assert open_ranges_overlap(points["before"], points["before2"], start, end) is False
        assert open_ranges_overlap(points["before"], points["between"], start, end) is True
        assert open_ranges_overlap(points["between"], points["after"], start, end) is True
        assert open_ranges_overlap(points["after"], points["after2"], start, end) is False

    def test_touching_open_ranges(self):
        assert open_ranges_overlap(None, 5, 5, None) is False
        assert open_ranges_overlap_inclusive(None, 5, 5, None) is True

    def test_fully_unbounded(self):
        assert open_ranges_overlap() is True
        assert open_ranges_overlap_inclusive() is True


class TestClosedRangesOverlap:
    def test_exclusive(self):
        assert closed_ranges_overlap(1, 20, 10, 99) is True
        assert closed_ranges_overlap(1, 5, 5, 10) is False
        assert closed_ranges_overlap(1, 4, 5, 10) is False

    def test_inclusive(self):
        assert closed_ranges_overlap_inclusive(1, 20, 10, 99) is True
        assert closed_ranges_overlap_inclusive(1, 5, 5, 10) is True
        assert closed_ranges_overlap_inclusive(1, 4, 5, 10) is False

    def test_requires_all_bounds(self):
        with pytest.raises(MissingBoundError):
            closed_ranges_overlap(1, None, 5, 10)
        with pytest.raises(MissingBoundError):
            closed_ranges_overlap_inclusive(1, 5, 5, None)
