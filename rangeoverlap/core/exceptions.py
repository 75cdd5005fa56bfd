class RangeValidationError(Exception):
    """Base exception for range validation errors"""
    pass


class InvertedRangeError(RangeValidationError):
    """Raised when a range starts after it ends"""
    pass


class MissingBoundError(RangeValidationError):
    """Raised when a closed range is given an unbounded side"""
    pass


class IncomparableBoundsError(RangeValidationError, TypeError):
    """Raised when range bounds cannot be ordered against each other"""
    pass


class InvalidDataTypeError(RangeValidationError):
    """Raised when data is not of expected type"""
    pass


class InvalidColumnError(RangeValidationError):
    """Raised when boundary columns are invalid"""
    pass


class ErrorMessages:
    """Centralized error message definitions for consistent error handling"""
    INVERTED_RANGE = "{} starts after it ends: start={!r}, end={!r}"
    MISSING_BOUND = "Closed range classification requires all four bounds, got {} for {}"
    INCOMPARABLE_BOUNDS = "Cannot compare range bounds {!r} and {!r}: {}"
    INCOMPARABLE_RANGES = "Cannot compare ranges A=({!r}, {!r}) and B=({!r}, {!r}): {}"
    EXPECTED_DATAFRAME = "Expected data to be a Pandas DataFrame, got {}"
    COLUMN_NOT_STR = "Column name for {} must be of type str, got {}"
    COLUMN_MISSING = "Column {!r} for {} not found in DataFrame"
    INVALID_OPTION = "{} must be of type bool, got {}"
