import rangeoverlap
from rangeoverlap import RangeOverlap, classify_any, classify_closed


class TestPackageExports:
    def test_all_exports_resolve(self):
        for name in rangeoverlap.__all__:
            assert hasattr(rangeoverlap, name)

    def test_scenarios(self):
        assert classify_closed(1, 20, 10, 99) is RangeOverlap.A_ENDS_IN_B
        assert classify_closed(1, 100, 50, 60) is RangeOverlap.A_CONTAINS_B
        assert classify_any(None, 75, 25, 99) is RangeOverlap.A_ENDS_IN_B
        assert classify_any(1, 25, 50, 75) is RangeOverlap.NONE
        assert classify_closed(1, 5, 5, 10) is RangeOverlap.NONE
        assert classify_closed(1, 5, 5, 10, inclusive=True) is RangeOverlap.A_ENDS_IN_B
        assert classify_any(None, None, None, None) is RangeOverlap.A_EQUALS_B
        assert classify_any(None, None, None, None, inclusive=True) is RangeOverlap.A_EQUALS_B
