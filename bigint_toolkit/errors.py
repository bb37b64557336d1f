"""
Error kinds raised by bigint_toolkit.

- DomainError: a mathematical precondition was violated
  (non-positive modulus, non-invertible element, start > end, ...)
- InvalidDigit: a character is not part of the declared radix alphabet
- ResourceExhausted: the rejection-sampling loop hit its attempt cap

DomainError and InvalidDigit are also ValueErrors, so callers that already
catch ValueError keep working.
"""

from typing import Optional


class BigintToolkitError(Exception):
    """Base class for all toolkit errors."""
    pass


class DomainError(BigintToolkitError, ValueError):
    """Raised when an input is outside the domain of an operation."""
    pass


class InvalidDigit(BigintToolkitError, ValueError):
    """Raised when a string contains a character invalid for its radix."""

    def __init__(self, radix: int, character: Optional[str] = None, message: Optional[str] = None):
        self.radix = radix
        self.character = character
        if message is None:
            if character is None:
                message = f"Invalid input for base {radix}"
            else:
                message = f"Invalid character {character!r} for base {radix}"
        super().__init__(message)


class ResourceExhausted(BigintToolkitError, RuntimeError):
    """Raised when a bounded retry loop gives up."""
    pass
