"""Helpers that make assumptions explicit.

``check`` is the workhorse. Use it wherever the surrounding context guarantees
something the type checker cannot see. For example::

    match = PATTERN.fullmatch(line)
    check(match is not None, "line was validated by the caller")
    match.group(1)  # no Optional error

A broken assumption then fails loudly at the point where it was made instead
of surfacing later as an ``AttributeError`` on ``None``. Unlike the ``assert``
statement, ``check`` is not stripped when Python runs with ``-O``, so it is
fine to use it in production code, not just in tests.
"""

import logging
from collections.abc import Container
from typing import Never, TypeGuard, TypeVar

from helperkit.errors import InvariantViolation, UnreachableError

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")


def check(condition: bool, failure_message: str | None = None) -> None:
    """Raise `InvariantViolation` if ``condition`` is false.

    Args:
        condition: The assumption that must hold.
        failure_message: Diagnostic message for the raised error.

    Raises:
        InvariantViolation: If ``condition`` is false.
    """
    __tracebackhide__ = True  # pylint: disable=unused-variable
    if not condition:
        message = failure_message or "assertion failure"
        logger.debug("Invariant violated: %s", message)
        raise InvariantViolation(message)


def assert_never(witness: Never) -> Never:
    """Mark the final branch of an exhaustive case analysis.

    Given ``Size = Literal["S", "M", "L"]``::

        if size == "S":
            ...
        elif size == "M":
            ...
        elif size == "L":
            ...
        else:
            assert_never(size)

    The ``else`` branch is unreachable, so the checker infers ``Never`` for
    ``size`` there. Adding ``"XL"`` to ``Size`` makes the call a type error,
    which is a reminder to complete the analysis. At runtime the call only
    happens if type errors were ignored or a value was forced to ``Never``.

    Raises:
        UnreachableError: Always.
    """
    logger.debug("assert_never reached with %r", witness)
    raise UnreachableError(witness)


def as_type(value: T) -> T:
    """Identity function for up-casts the type checker can verify.

    ``typing.cast`` converts in both directions and happily turns a
    ``str | int`` into a ``str``. Passing ``value`` through a parameter
    annotated with the target type lets the checker reject down-casts::

        def render(value: str | int) -> None:
            text: str = as_type(value)  # type error

    For genuine down-casts, narrow with `check` (``check(isinstance(value,
    str), "...")``) instead.
    """
    return value


def is_one_of(value: V, allowed: Container[T]) -> TypeGuard[T]:
    """Membership test that narrows ``value`` to the element type of ``allowed``.

    Useful against enum-like fixed tuples::

        SIZES: tuple[Size, ...] = ("S", "M", "L", "XL")

        if is_one_of(raw, SIZES):
            ...  # raw is now a Size
    """
    return value in allowed
