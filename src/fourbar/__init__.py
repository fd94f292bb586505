"""fourbar: closed-form position analysis of planar four-bar linkages."""

from __future__ import annotations

__version__ = "0.1.0"

from .core.errors import DomainError, FourBarError, ValidationError
from .core.evaluator import compute_linkage
from .core.types import AngleSolutionPair, GrashofClass, LinkageGeometry
from .kinematics.grashof import classify
from .kinematics.solver import solve

__all__ = [
    "AngleSolutionPair",
    "DomainError",
    "FourBarError",
    "GrashofClass",
    "LinkageGeometry",
    "ValidationError",
    "classify",
    "compute_linkage",
    "solve",
]
