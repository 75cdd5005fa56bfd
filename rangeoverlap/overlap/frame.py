import logging

from pandas import DataFrame, Series

from rangeoverlap.core.exceptions import RangeValidationError
from rangeoverlap.core.validation import RangeValidator
from rangeoverlap.overlap.closed import DEFAULT_INCLUSIVE, DEFAULT_VALIDATE
from rangeoverlap.overlap.unbounded import classify_any

logger = logging.getLogger(__name__)

RESULT_NAME = "overlap"


def classify_frame(
        df: DataFrame,
        a_start_col: str,
        a_end_col: str,
        b_start_col: str,
        b_end_col: str,
        inclusive: bool = DEFAULT_INCLUSIVE,
        validate: bool = DEFAULT_VALIDATE,
) -> Series:
    """
    Classifies each row of a DataFrame holding the bounds of two ranges.

    Missing values (None, NaN, NaT) in a bound column mark that side of the
    range as unbounded.

    Args:
        df: DataFrame with one pair of ranges per row
        a_start_col, a_end_col: columns holding the bounds of range A
        b_start_col, b_end_col: columns holding the bounds of range B
        inclusive: whether the end bound is part of its range
        validate: reject rows where a range starts after it ends

    Returns:
        Series of RangeOverlap aligned with ``df.index`` and named ``overlap``
    """
    RangeValidator.validate_frame(df)
    RangeValidator.validate_columns(
        df,
        {
            "a_start": a_start_col,
            "a_end": a_end_col,
            "b_start": b_start_col,
            "b_end": b_end_col,
        },
    )
    logger.debug("Classifying %d range pairs (inclusive=%s)", len(df), inclusive)

    results = []
    rows = zip(df.index, df[a_start_col], df[a_end_col], df[b_start_col], df[b_end_col])
    for index, a_start, a_end, b_start, b_end in rows:
        try:
            results.append(
                classify_any(a_start, a_end, b_start, b_end, inclusive=inclusive, validate=validate)
            )
        except RangeValidationError:
            logger.debug("Failed to classify row %r", index)
            raise

    return Series(results, index=df.index, dtype=object, name=RESULT_NAME)


def overlap_mask(
        df: DataFrame,
        a_start_col: str,
        a_end_col: str,
        b_start_col: str,
        b_end_col: str,
        inclusive: bool = DEFAULT_INCLUSIVE,
        validate: bool = DEFAULT_VALIDATE,
) -> Series:
    """Boolean Series marking the rows whose ranges share at least one point"""
    categories = classify_frame(df, a_start_col, a_end_col, b_start_col, b_end_col, inclusive, validate)
    return categories.map(lambda category: category.has_overlap).astype(bool)
