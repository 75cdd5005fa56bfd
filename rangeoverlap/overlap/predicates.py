from typing import Any

from rangeoverlap.overlap.closed import DEFAULT_VALIDATE, classify_closed
from rangeoverlap.overlap.types import RangeOverlap
from rangeoverlap.overlap.unbounded import classify_any


def has_overlap(category: RangeOverlap) -> bool:
    """True for every category except NONE"""
    return category.has_overlap


def closed_ranges_overlap(
        a_start: Any, a_end: Any, b_start: Any, b_end: Any, validate: bool = DEFAULT_VALIDATE
) -> bool:
    return has_overlap(classify_closed(a_start, a_end, b_start, b_end, inclusive=False, validate=validate))


def closed_ranges_overlap_inclusive(
        a_start: Any, a_end: Any, b_start: Any, b_end: Any, validate: bool = DEFAULT_VALIDATE
) -> bool:
    return has_overlap(classify_closed(a_start, a_end, b_start, b_end, inclusive=True, validate=validate))


def open_ranges_overlap(
        a_start: Any = None, a_end: Any = None, b_start: Any = None, b_end: Any = None,
        validate: bool = DEFAULT_VALIDATE,
) -> bool:
    return has_overlap(classify_any(a_start, a_end, b_start, b_end, inclusive=False, validate=validate))


def open_ranges_overlap_inclusive(
        a_start: Any = None, a_end: Any = None, b_start: Any = None, b_end: Any = None,
        validate: bool = DEFAULT_VALIDATE,
) -> bool:
    return has_overlap(classify_any(a_start, a_end, b_start, b_end, inclusive=True, validate=validate))
