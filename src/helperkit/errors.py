"""Error definitions for helperkit."""

from typing import Any

# ============================================================================
#                           General errors
# ============================================================================


class HelperkitError(Exception):
    """Base class for recoverable helperkit errors."""


# ============================================================================
#                           Contract violations
# ============================================================================


class InvariantViolation(AssertionError):
    """Raised when a precondition the caller was responsible for is broken.

    Contract violations are meant to surface during development and testing.
    Production logic should not catch them.
    """

    def __init__(self, message: str = "assertion failure") -> None:
        super().__init__(message)
        self.message = message


class UnreachableError(InvariantViolation):
    """Raised when a branch that the type checker proved unreachable runs."""

    def __init__(self, witness: Any) -> None:
        super().__init__(f"Unreachable code reached with unexpected value {witness!r}.")
        self.witness = witness


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidLogLevelError(HelperkitError, ValueError):
    """Raised when a configured log level name is not a standard level."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid log level: {value!r}")
        self.value = value
