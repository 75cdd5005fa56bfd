"""
Classification of ranges whose bounds may be absent.

Every presence pattern of the four bounds (a "shape") has its own rule. An
absent start means the range reaches down as far as any other range with an
absent start, and likewise for absent ends; no sentinel values are used, so
any ordered type works.
"""
import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping

from rangeoverlap.core.boundaries import BoundsShape, normalize_bound
from rangeoverlap.core.types import Bound, Comparable
from rangeoverlap.core.validation import RangeValidator
from rangeoverlap.overlap.closed import (
    DEFAULT_INCLUSIVE,
    DEFAULT_VALIDATE,
    ClassificationRule,
    closed_rule,
    guarded_classify,
)
from rangeoverlap.overlap.types import RangeOverlap

logger = logging.getLogger(__name__)


def _before(left: Comparable, right: Comparable, inclusive: bool) -> bool:
    """True if an end at ``left`` does not reach a start at ``right``"""
    return left < right if inclusive else left <= right


# A unbounded on both sides

def _all_unbounded(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    return RangeOverlap.A_EQUALS_B


def _a_unbounded(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    return RangeOverlap.A_CONTAINS_B


# A has only an end

def _a_end_only_b_unbounded(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    return RangeOverlap.A_INSIDE_B


def _ends_only(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    if a_end == b_end:
        return RangeOverlap.A_EQUALS_B
    if a_end < b_end:
        return RangeOverlap.A_INSIDE_B
    return RangeOverlap.A_CONTAINS_B


def _a_end_b_start(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    if _before(a_end, b_start, inclusive):
        return RangeOverlap.NONE
    return RangeOverlap.A_ENDS_IN_B


def _a_end_b_closed(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    if _before(a_end, b_start, inclusive):
        return RangeOverlap.NONE
    if a_end < b_end:
        return RangeOverlap.A_ENDS_IN_B
    return RangeOverlap.A_CONTAINS_B


# A has only a start

def _a_start_only_b_unbounded(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    return RangeOverlap.A_INSIDE_B


def _a_start_b_end(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    if _before(b_end, a_start, inclusive):
        return RangeOverlap.NONE
    return RangeOverlap.A_STARTS_IN_B


def _starts_only(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    if a_start == b_start:
        return RangeOverlap.A_EQUALS_B
    if a_start < b_start:
        return RangeOverlap.A_CONTAINS_B
    return RangeOverlap.A_INSIDE_B


def _a_start_b_closed(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    if a_start <= b_start:
        return RangeOverlap.A_CONTAINS_B
    if not _before(b_end, a_start, inclusive):
        return RangeOverlap.A_STARTS_IN_B
    return RangeOverlap.NONE


# A closed

def _a_closed_b_unbounded(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    return RangeOverlap.A_INSIDE_B


def _a_closed_b_end(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    if _before(b_end, a_start, inclusive):
        return RangeOverlap.NONE
    if a_end <= b_end:
        return RangeOverlap.A_INSIDE_B
    return RangeOverlap.A_STARTS_IN_B


def _a_closed_b_start(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound, inclusive: bool) -> RangeOverlap:
    if _before(a_end, b_start, inclusive):
        return RangeOverlap.NONE
    if a_start >= b_start:
        return RangeOverlap.A_INSIDE_B
    return RangeOverlap.A_ENDS_IN_B


# Keyed by BoundsShape.mask: a_start, a_end, b_start, b_end from high bit to low
_RULES: Dict[int, ClassificationRule] = {
    0b0000: _all_unbounded,
    0b0001: _a_unbounded,
    0b0010: _a_unbounded,
    0b0011: _a_unbounded,
    0b0100: _a_end_only_b_unbounded,
    0b0101: _ends_only,
    0b0110: _a_end_b_start,
    0b0111: _a_end_b_closed,
    0b1000: _a_start_only_b_unbounded,
    0b1001: _a_start_b_end,
    0b1010: _starts_only,
    0b1011: _a_start_b_closed,
    0b1100: _a_closed_b_unbounded,
    0b1101: _a_closed_b_end,
    0b1110: _a_closed_b_start,
    0b1111: closed_rule,
}

RULES: Mapping[int, ClassificationRule] = MappingProxyType(_RULES)


def rule_for(shape: BoundsShape) -> ClassificationRule:
    return RULES[shape.mask]


def classify_any(
        a_start: Any = None,
        a_end: Any = None,
        b_start: Any = None,
        b_end: Any = None,
        inclusive: bool = DEFAULT_INCLUSIVE,
        validate: bool = DEFAULT_VALIDATE,
) -> RangeOverlap:
    """
    Classifies how range A relates to range B when any bound may be absent.

    An absent bound is ``None`` or a pandas missing value (``NaN``, ``NaT``).
    With all four bounds present the result is the same as ``classify_closed``.

    Raises:
    InvertedRangeError: if validate is set and a range starts after it ends
    IncomparableBoundsError: if the bounds cannot be ordered
    """
    a_start, a_end, b_start, b_end = (
        normalize_bound(value) for value in (a_start, a_end, b_start, b_end)
    )
    RangeValidator.validate_option(inclusive, "inclusive")
    RangeValidator.validate_option(validate, "validate")
    if validate:
        RangeValidator.validate_pair(a_start, a_end, b_start, b_end)

    shape = BoundsShape.of(a_start, a_end, b_start, b_end)
    result = guarded_classify(rule_for(shape), a_start, a_end, b_start, b_end, inclusive)
    logger.debug("Classified shape [%s] (inclusive=%s) as %s", shape.label, inclusive, result.name)
    return result
