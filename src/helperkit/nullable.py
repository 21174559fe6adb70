"""Helpers for optional values."""

from collections.abc import Callable
from typing import TypeGuard, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def map_optional(value: T | None, func: Callable[[T], R]) -> R | None:
    """Apply ``func`` to ``value`` unless it is ``None``.

    Handy for optional settings that need parsing, with a default applied
    afterwards::

        timeout = map_optional(os.environ.get("SOME_TIMEOUT"), int) or DEFAULT_TIMEOUT

    Falsy values such as ``0`` or ``""`` are still passed to ``func``; only
    ``None`` short-circuits.
    """
    if value is None:
        return None
    return func(value)


def is_defined(value: T | None) -> TypeGuard[T]:
    """Return True if ``value`` is not ``None``.

    Works as a predicate for ``filter`` and ``all``, which an inline
    ``is not None`` check cannot do.
    """
    return value is not None
