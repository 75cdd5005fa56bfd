import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pandas import DataFrame

from rangeoverlap.core.exceptions import (
    ErrorMessages,
    IncomparableBoundsError,
    InvalidColumnError,
    InvalidDataTypeError,
    InvertedRangeError,
)
from rangeoverlap.core.types import Bound

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None


class RangeValidator:
    """Validates range bounds and classifier inputs"""

    @staticmethod
    def validate_range(start: Bound, end: Bound, name: str = "Range") -> ValidationResult:
        """
        Checks that a range does not start after it ends.

        Only ranges with both ends present can be inverted; an unbounded side
        is always valid.
        """
        if start is None or end is None:
            return ValidationResult(is_valid=True)

        try:
            inverted = bool(start > end)
        except TypeError as err:
            logger.debug("%s has incomparable bounds %r and %r", name, start, end)
            raise IncomparableBoundsError(
                ErrorMessages.INCOMPARABLE_BOUNDS.format(start, end, err)
            ) from err

        if inverted:
            logger.debug("%s is inverted: start=%r, end=%r", name, start, end)
            raise InvertedRangeError(ErrorMessages.INVERTED_RANGE.format(name, start, end))

        return ValidationResult(is_valid=True)

    @staticmethod
    def validate_pair(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound) -> ValidationResult:
        RangeValidator.validate_range(a_start, a_end, "Range A")
        RangeValidator.validate_range(b_start, b_end, "Range B")
        return ValidationResult(is_valid=True)

    @staticmethod
    def validate_option(value: Any, name: str) -> ValidationResult:
        if not isinstance(value, bool):
            raise ValueError(ErrorMessages.INVALID_OPTION.format(name, type(value).__name__))
        return ValidationResult(is_valid=True)

    @staticmethod
    def validate_frame(data: Any) -> ValidationResult:
        if not isinstance(data, DataFrame):
            raise InvalidDataTypeError(ErrorMessages.EXPECTED_DATAFRAME.format(type(data).__name__))
        return ValidationResult(is_valid=True)

    @staticmethod
    def validate_columns(data: DataFrame, columns: Mapping[str, Any]) -> ValidationResult:
        """
        Checks boundary column names against a DataFrame.

        ``columns`` maps the role of each column (e.g. ``"a_start"``) to the
        column name supplied by the caller.
        """
        for role, column in columns.items():
            if not isinstance(column, str):
                raise InvalidColumnError(ErrorMessages.COLUMN_NOT_STR.format(role, type(column).__name__))
            if column not in data.columns:
                raise InvalidColumnError(ErrorMessages.COLUMN_MISSING.format(column, role))
        return ValidationResult(is_valid=True)
