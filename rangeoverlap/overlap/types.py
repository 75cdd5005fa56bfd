from enum import Enum, auto


class RangeOverlap(Enum):
    """
    Classification of how range A relates to range B.

    The six members are mutually exclusive and together cover every pair of
    well-formed ranges, bounded or not.
    """

    A_CONTAINS_B = auto()  # every point of B is in A
    A_INSIDE_B = auto()  # every point of A is in B, ranges not equal
    A_ENDS_IN_B = auto()  # A starts before B and ends within it
    A_STARTS_IN_B = auto()  # A starts within B and ends after it
    A_EQUALS_B = auto()  # identical bounds, unbounded sides matching
    NONE = auto()  # no shared point

    @property
    def has_overlap(self) -> bool:
        return self is not RangeOverlap.NONE

    def swapped(self) -> "RangeOverlap":
        """Returns the category obtained by exchanging A and B"""
        return _SWAPPED[self]


_SWAPPED = {
    RangeOverlap.A_CONTAINS_B: RangeOverlap.A_INSIDE_B,
    RangeOverlap.A_INSIDE_B: RangeOverlap.A_CONTAINS_B,
    RangeOverlap.A_ENDS_IN_B: RangeOverlap.A_STARTS_IN_B,
    RangeOverlap.A_STARTS_IN_B: RangeOverlap.A_ENDS_IN_B,
    RangeOverlap.A_EQUALS_B: RangeOverlap.A_EQUALS_B,
    RangeOverlap.NONE: RangeOverlap.NONE,
}
