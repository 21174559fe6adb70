"""Boolean helpers."""

from collections.abc import Iterable


def cardinality(bools: Iterable[bool]) -> int:
    """Count the ``True`` values, e.g. ``cardinality([True, False, True]) == 2``."""
    return sum(1 for flag in bools if flag)
