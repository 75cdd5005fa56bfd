from typing import Any

from rangeoverlap.core.validation import RangeValidator
from rangeoverlap.overlap.closed import DEFAULT_INCLUSIVE, DEFAULT_VALIDATE
from rangeoverlap.overlap.types import RangeOverlap
from rangeoverlap.overlap.unbounded import classify_any


class ClassifierConfig:
    """Configuration for range classification behavior"""

    def __init__(self, inclusive: bool = DEFAULT_INCLUSIVE, validate: bool = DEFAULT_VALIDATE):
        RangeValidator.validate_option(inclusive, "inclusive")
        RangeValidator.validate_option(validate, "validate")
        self.inclusive = inclusive
        self.validate = validate

    def __repr__(self) -> str:
        return f"ClassifierConfig(inclusive={self.inclusive}, validate={self.validate})"

    def classify(
            self, a_start: Any = None, a_end: Any = None, b_start: Any = None, b_end: Any = None
    ) -> RangeOverlap:
        """Classify two ranges using this configuration"""
        return classify_any(
            a_start, a_end, b_start, b_end, inclusive=self.inclusive, validate=self.validate
        )

    def overlaps(
            self, a_start: Any = None, a_end: Any = None, b_start: Any = None, b_end: Any = None
    ) -> bool:
        return self.classify(a_start, a_end, b_start, b_end).has_overlap
