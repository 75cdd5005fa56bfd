import logging
from typing import Any, Callable

from rangeoverlap.core.boundaries import BoundsShape, normalize_bound
from rangeoverlap.core.exceptions import ErrorMessages, IncomparableBoundsError, MissingBoundError
from rangeoverlap.core.validation import RangeValidator
from rangeoverlap.overlap.types import RangeOverlap

logger = logging.getLogger(__name__)

DEFAULT_INCLUSIVE = False
DEFAULT_VALIDATE = True

ClassificationRule = Callable[[Any, Any, Any, Any, bool], RangeOverlap]


def closed_rule(a_start: Any, a_end: Any, b_start: Any, b_end: Any, inclusive: bool) -> RangeOverlap:
    """
    Classifies two ranges whose four bounds are all present.

    Branch order matters: equality and containment are decided before the
    partial overlaps, and touching ends only count as overlap in inclusive
    mode, and only for the partial overlap branches.
    """
    if a_start == b_start and a_end == b_end:
        return RangeOverlap.A_EQUALS_B
    if a_start <= b_start and a_end >= b_end:
        return RangeOverlap.A_CONTAINS_B

    a_end_reaches_b = a_end >= b_start if inclusive else a_end > b_start
    if a_start < b_start and a_end_reaches_b and a_end <= b_end:
        return RangeOverlap.A_ENDS_IN_B

    a_start_within_b = a_start <= b_end if inclusive else a_start < b_end
    if a_start > b_start and a_start_within_b and a_end > b_end:
        return RangeOverlap.A_STARTS_IN_B

    if a_start >= b_end or b_start >= a_end:
        return RangeOverlap.NONE
    return RangeOverlap.A_INSIDE_B


def guarded_classify(
        rule: ClassificationRule,
        a_start: Any,
        a_end: Any,
        b_start: Any,
        b_end: Any,
        inclusive: bool,
) -> RangeOverlap:
    """Applies a rule, reporting unorderable bounds as IncomparableBoundsError"""
    try:
        return rule(a_start, a_end, b_start, b_end, inclusive)
    except TypeError as err:
        raise IncomparableBoundsError(
            ErrorMessages.INCOMPARABLE_RANGES.format(a_start, a_end, b_start, b_end, err)
        ) from err


def classify_closed(
        a_start: Any,
        a_end: Any,
        b_start: Any,
        b_end: Any,
        inclusive: bool = DEFAULT_INCLUSIVE,
        validate: bool = DEFAULT_VALIDATE,
) -> RangeOverlap:
    """
    Classifies how the closed range A relates to the closed range B.

    Parameters:
    a_start, a_end: bounds of range A
    b_start, b_end: bounds of range B
    inclusive: whether the end bound is part of its range
    validate: reject ranges that start after they end

    Raises:
    MissingBoundError: if any bound is absent (None, NaN or NaT)
    InvertedRangeError: if validate is set and a range starts after it ends
    IncomparableBoundsError: if the bounds cannot be ordered
    """
    bounds = {
        "a_start": normalize_bound(a_start),
        "a_end": normalize_bound(a_end),
        "b_start": normalize_bound(b_start),
        "b_end": normalize_bound(b_end),
    }
    RangeValidator.validate_option(inclusive, "inclusive")
    RangeValidator.validate_option(validate, "validate")
    if not BoundsShape.of(*bounds.values()).is_closed:
        missing = [name for name, value in bounds.items() if value is None]
        raise MissingBoundError(ErrorMessages.MISSING_BOUND.format("None", ", ".join(missing)))

    if validate:
        RangeValidator.validate_pair(*bounds.values())

    result = guarded_classify(closed_rule, *bounds.values(), inclusive)
    logger.debug("Classified closed ranges (inclusive=%s) as %s", inclusive, result.name)
    return result
