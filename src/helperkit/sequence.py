"""Sequence helpers with a non-emptiness guarantee.

`NonEmptySequence` is a refinement of ``Sequence``: it has no runtime
representation of its own, any sequence with at least one element *is* one::

    >>> isinstance([1], NonEmptySequence)
    True
    >>> isinstance([], NonEmptySequence)
    False

The class is abstract and cannot be instantiated. Values of that type come
from `is_non_empty` (a type guard), `as_non_empty` (an assertion) or from
functions whose result is non-empty by construction, such as `concat` with a
non-empty operand.

Index arguments follow Python's convention: negative indices count from the
end, so ``-1`` addresses the last item. The sibling functions deliberately
differ in how they treat an out-of-range index:

* `extract_at` returns ``None`` (expected absence).
* `remove_at` returns the input sequence itself (no-op).
* `as_non_empty`, `first`, `last`, `extract_first` and `extract_last` raise
  `InvariantViolation` on empty input (contract violation).

All functions are pure. Inputs are never mutated, and sequence results are
new lists unless documented otherwise.
"""

from __future__ import annotations

import operator
from abc import ABCMeta
from collections.abc import Sequence
from typing import TypeGuard, TypeVar, cast, overload

from helperkit.assertions import check
from helperkit.errors import InvariantViolation

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

# pylint: disable=too-few-public-methods


class _NonEmptyMeta(ABCMeta):
    def __instancecheck__(cls, instance: object) -> bool:
        return isinstance(instance, Sequence) and len(instance) > 0


class NonEmptySequence(Sequence[T], metaclass=_NonEmptyMeta):
    """A sequence holding at least one element."""


def is_non_empty(seq: Sequence[T]) -> TypeGuard[NonEmptySequence[T]]:
    """Return True if ``seq`` has at least one element.

    Narrows ``seq`` to `NonEmptySequence` in the true branch.
    """
    return len(seq) > 0


def as_non_empty(seq: Sequence[T]) -> NonEmptySequence[T]:
    """Return ``seq`` itself, typed as non-empty.

    For call sites where non-emptiness follows from context but cannot be
    proven to the type checker.

    Raises:
        InvariantViolation: If ``seq`` is empty.
    """
    check(is_non_empty(seq), "got empty sequence where non-empty is expected")
    return cast("NonEmptySequence[T]", seq)


def first(seq: NonEmptySequence[T]) -> T:
    """Return the first element of a non-empty sequence.

    Raises:
        InvariantViolation: If ``seq`` is empty despite its type.
    """
    check(is_non_empty(seq), "first() called on an empty sequence")
    return seq[0]


def last(seq: NonEmptySequence[T]) -> T:
    """Return the last element of a non-empty sequence.

    Raises:
        InvariantViolation: If ``seq`` is empty despite its type.
    """
    check(is_non_empty(seq), "last() called on an empty sequence")
    return seq[-1]


def extract_first(seq: NonEmptySequence[T]) -> tuple[T, list[T]]:
    """Split ``seq`` into its first element and the remaining elements."""
    check(is_non_empty(seq), "extract_first() called on an empty sequence")
    return seq[0], list(seq[1:])


def extract_last(seq: NonEmptySequence[T]) -> tuple[list[T], T]:
    """Split ``seq`` into all but its last element and the last element."""
    check(is_non_empty(seq), "extract_last() called on an empty sequence")
    return list(seq[:-1]), seq[-1]


def _normalize_index(index: int, length: int) -> int:
    # Shared by extract_at and remove_at so both agree on the boundaries.
    message = f"index must be an integer, got {index!r}"
    check(not isinstance(index, bool), message)
    try:
        index = operator.index(index)
    except TypeError as e:
        raise InvariantViolation(message) from e
    return length + index if index < 0 else index


def extract_at(index: int, seq: Sequence[T]) -> tuple[T, list[T]] | None:
    """Split ``seq`` into the item at ``index`` and the remaining items.

    Args:
        index: Position of the item. Negative values count from the end.
        seq: The sequence to decompose.

    Returns:
        ``(item, rest)`` where ``rest`` keeps the relative order of the other
        items, or ``None`` when ``index`` is outside ``-len(seq) <= index < len(seq)``.

    Raises:
        InvariantViolation: If ``index`` is not an integer.
    """
    position = _normalize_index(index, len(seq))
    if not 0 <= position < len(seq):
        return None
    return seq[position], [*seq[:position], *seq[position + 1 :]]


def remove_at(index: int, seq: Sequence[T]) -> Sequence[T]:
    """Return ``seq`` without the item at ``index``.

    Uses the same index convention as `extract_at`. An out-of-range
    ``index`` is a no-op: the very same ``seq`` object is returned.

    Raises:
        InvariantViolation: If ``index`` is not an integer.
    """
    position = _normalize_index(index, len(seq))
    if not 0 <= position < len(seq):
        return seq
    return [*seq[:position], *seq[position + 1 :]]


@overload
def concat(a: NonEmptySequence[T], b: Sequence[T]) -> NonEmptySequence[T]: ...
@overload
def concat(a: Sequence[T], b: NonEmptySequence[T]) -> NonEmptySequence[T]: ...
@overload
def concat(a: Sequence[T], b: Sequence[T]) -> list[T]: ...
def concat(a: Sequence[T], b: Sequence[T]) -> list[T] | NonEmptySequence[T]:
    """Concatenate two sequences into a new list.

    The result is typed non-empty whenever either operand is.
    """
    combined = [*a, *b]
    if is_non_empty(a) or is_non_empty(b):
        return as_non_empty(combined)
    return combined


def zip_shortest(a: Sequence[A], b: Sequence[B]) -> list[tuple[A, B]]:
    """Pair up items index-wise, truncating to the shorter sequence.

    Never pads, so the element types stay free of ``None``::

        >>> zip_shortest([1, 2, 3], ["a", "b"])
        [(1, 'a'), (2, 'b')]
    """
    return list(zip(a, b))


def adjacent_pairs(seq: Sequence[T]) -> list[tuple[T, T]]:
    """Pair every item with its right neighbour.

        >>> adjacent_pairs([1, 2, 3])
        [(1, 2), (2, 3)]

    Sequences with fewer than two items yield ``[]``.
    """
    return zip_shortest(seq[:-1], seq[1:])
