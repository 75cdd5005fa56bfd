from dataclasses import dataclass
from typing import Any, Tuple

from numpy import datetime64, generic, timedelta64
from pandas import Timedelta, Timestamp, isna
from pandas.api.types import is_scalar

from rangeoverlap.core.types import Bound


def is_unbounded(value: Any) -> bool:
    """
    Returns True if the value denotes an unbounded side of a range.

    ``None`` is the canonical marker. Missing-value scalars understood by
    pandas (``NaN``, ``NaT``, ``NA``) are treated the same way so that bounds
    read straight out of a DataFrame need no preprocessing.
    """
    if value is None:
        return True
    if not is_scalar(value):
        return False
    return bool(isna(value))


def normalize_bound(value: Any) -> Bound:
    """
    Normalizes a user-provided boundary value.

    Unbounded markers become ``None`` and numpy scalars are unwrapped to their
    Python (or pandas, for datetimes) equivalents. Everything else is returned
    untouched; the value's own ordering is what the classifiers compare.
    """
    if is_unbounded(value):
        return None
    # Handle datetime64 first because .item() would return raw nanoseconds
    if isinstance(value, datetime64):
        return Timestamp(value)
    if isinstance(value, timedelta64):
        return Timedelta(value)
    if isinstance(value, generic):
        return value.item()
    return value


@dataclass(frozen=True)
class BoundsShape:
    """
    Presence pattern of the four endpoints of a pair of ranges.

    The shape, not the values, decides which classification rule applies.
    """

    a_start: bool
    a_end: bool
    b_start: bool
    b_end: bool

    @classmethod
    def of(cls, a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound) -> "BoundsShape":
        return cls(
            a_start=a_start is not None,
            a_end=a_end is not None,
            b_start=b_start is not None,
            b_end=b_end is not None,
        )

    @property
    def flags(self) -> Tuple[bool, bool, bool, bool]:
        return self.a_start, self.a_end, self.b_start, self.b_end

    @property
    def mask(self) -> int:
        """4-bit presence mask, a_start is the high bit"""
        result = 0
        for present in self.flags:
            result = (result << 1) | int(present)
        return result

    @property
    def label(self) -> str:
        """Readable form such as ``"- x x x"``"""
        return " ".join("x" if present else "-" for present in self.flags)

    @property
    def is_closed(self) -> bool:
        return all(self.flags)
