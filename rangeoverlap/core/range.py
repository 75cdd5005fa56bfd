from dataclasses import dataclass
from typing import Any

from rangeoverlap.core.boundaries import normalize_bound
from rangeoverlap.core.exceptions import ErrorMessages, IncomparableBoundsError
from rangeoverlap.core.types import Bound
from rangeoverlap.core.validation import RangeValidator
from rangeoverlap.overlap.closed import DEFAULT_INCLUSIVE
from rangeoverlap.overlap.types import RangeOverlap
from rangeoverlap.overlap.unbounded import classify_any


@dataclass(frozen=True)
class Range:
    """
    A one-dimensional range with optional bounds.

    A ``None`` start or end means the range is unbounded on that side. Bounds
    are normalized on construction (NaN/NaT become ``None``, numpy scalars are
    unwrapped) and a range that starts after it ends is rejected.

    Examples:
    --------
    >>> Range(1, 20).classify(Range(10, 99))
    <RangeOverlap.A_ENDS_IN_B: 3>
    >>> Range(end=5).overlaps(Range(5, 10), inclusive=True)
    True
    """

    start: Bound = None
    end: Bound = None

    def __post_init__(self):
        object.__setattr__(self, "start", normalize_bound(self.start))
        object.__setattr__(self, "end", normalize_bound(self.end))
        RangeValidator.validate_range(self.start, self.end)

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def classify(self, other: "Range", inclusive: bool = DEFAULT_INCLUSIVE) -> RangeOverlap:
        # both ranges were validated on construction
        return classify_any(
            self.start, self.end, other.start, other.end, inclusive=inclusive, validate=False
        )

    def overlaps(self, other: "Range", inclusive: bool = DEFAULT_INCLUSIVE) -> bool:
        return self.classify(other, inclusive).has_overlap

    def contains_value(self, value: Any, inclusive: bool = DEFAULT_INCLUSIVE) -> bool:
        """
        Checks whether a single value lies in this range.

        The start bound always belongs to the range; the end bound only does
        when ``inclusive`` is set.
        """
        value = normalize_bound(value)
        if value is None:
            raise ValueError("Cannot test containment of a missing value")

        try:
            after_start = self.start is None or self.start <= value
            if self.end is None:
                before_end = True
            else:
                before_end = value <= self.end if inclusive else value < self.end
        except TypeError as err:
            raise IncomparableBoundsError(
                ErrorMessages.INCOMPARABLE_BOUNDS.format(self, value, err)
            ) from err
        return bool(after_start and before_end)
