"""Exception types raised at the fourbar call boundary."""

from __future__ import annotations


class FourBarError(Exception):
    """Base class for all fourbar errors."""


class ValidationError(FourBarError, ValueError):
    """A required request field is missing or not a number."""


class DomainError(FourBarError, ValueError):
    """The inputs describe a linkage the closure equations cannot handle.

    Raised for zero-length links that appear in a denominator, non-finite
    lengths or angles, and closures that hold for every angle.
    """
