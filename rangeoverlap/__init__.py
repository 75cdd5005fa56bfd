from rangeoverlap.config import ClassifierConfig
from rangeoverlap.core.exceptions import (
    IncomparableBoundsError,
    InvalidColumnError,
    InvalidDataTypeError,
    InvertedRangeError,
    MissingBoundError,
    RangeValidationError,
)
from rangeoverlap.core.range import Range
from rangeoverlap.overlap.closed import classify_closed
from rangeoverlap.overlap.frame import classify_frame, overlap_mask
from rangeoverlap.overlap.predicates import (
    closed_ranges_overlap,
    closed_ranges_overlap_inclusive,
    has_overlap,
    open_ranges_overlap,
    open_ranges_overlap_inclusive,
)
from rangeoverlap.overlap.types import RangeOverlap
from rangeoverlap.overlap.unbounded import classify_any

__all__ = [
    "ClassifierConfig",
    "IncomparableBoundsError",
    "InvalidColumnError",
    "InvalidDataTypeError",
    "InvertedRangeError",
    "MissingBoundError",
    "Range",
    "RangeOverlap",
    "RangeValidationError",
    "classify_any",
    "classify_closed",
    "classify_frame",
    "closed_ranges_overlap",
    "closed_ranges_overlap_inclusive",
    "has_overlap",
    "open_ranges_overlap",
    "open_ranges_overlap_inclusive",
    "overlap_mask",
]
