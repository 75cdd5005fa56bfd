from typing import Any, Optional, Protocol


class Comparable(Protocol):
    """Any value that can be ordered against the other bounds of a comparison"""

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...

    def __ge__(self, other: Any) -> bool: ...


# None marks an unbounded side
Bound = Optional[Comparable]
