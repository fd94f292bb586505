"""Core module: types, errors, angles, config, logging, evaluator."""

from .errors import DomainError, FourBarError, ValidationError
from .types import (
    AngleSolutionPair,
    ComputeResult,
    FourBarSolution,
    GrashofClass,
    LinkageGeometry,
    LinkageInversion,
)

__all__ = [
    "AngleSolutionPair",
    "ComputeResult",
    "DomainError",
    "FourBarError",
    "FourBarSolution",
    "GrashofClass",
    "LinkageGeometry",
    "LinkageInversion",
    "ValidationError",
]
