"""Core value types for linkage geometry and solutions.

This module defines the canonical types that form the interface
between the kinematic solver, the evaluator and the request surfaces.
All of them are created fresh per computation and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from .errors import DomainError


class GrashofClass(str, Enum):
    """Mobility class of a four-bar chain from its link lengths."""

    GRASHOF = "Grashof"
    SPECIAL_GRASHOF = "SpecialGrashof"
    NON_GRASHOF = "NonGrashof"


class LinkageInversion(str, Enum):
    """Kinematic inversion, named by the motion of input and output links."""

    CRANK_ROCKER = "crank-rocker"
    DOUBLE_CRANK = "double-crank"
    DOUBLE_ROCKER = "double-rocker"
    ROCKER_CRANK = "rocker-crank"
    CHANGE_POINT = "change-point"
    TRIPLE_ROCKER = "triple-rocker"


@dataclass(frozen=True)
class LinkageGeometry:
    """Link lengths of a four-bar chain.

    Attributes:
        a: Input (driving) link, pivoted at O2 on the origin.
        b: Coupler, joining the input and output links.
        c: Output link, pivoted at O4.
        d: Ground link, from O2 to O4 along +x.
    """

    a: float
    b: float
    c: float
    d: float

    def __post_init__(self) -> None:
        for name, value in zip("abcd", self.lengths):
            if not np.isfinite(value):
                raise DomainError(f"link length '{name}' must be finite, got {value}")

    @property
    def lengths(self) -> tuple[float, float, float, float]:
        """Lengths in (a, b, c, d) order."""
        return (self.a, self.b, self.c, self.d)


@dataclass(frozen=True)
class AngleSolutionPair:
    """The two roots of a tangent-half-angle closure quadratic.

    Attributes:
        open: Minus-branch solution in degrees [0, 360), or None.
        crossed: Plus-branch solution in degrees [0, 360), or None.

    None means the linkage cannot close at the given input angle.
    """

    open: float | None
    crossed: float | None

    @classmethod
    def no_solution(cls) -> AngleSolutionPair:
        return cls(open=None, crossed=None)

    @property
    def exists(self) -> bool:
        """True when both branches carry a real solution."""
        return self.open is not None and self.crossed is not None


@dataclass(frozen=True)
class FourBarSolution:
    """Position solution for one input angle.

    Attributes:
        theta3: Coupler angle pair.
        theta4: Output link angle pair.
        discriminant4: B^2 - 4AC of the theta4 quadratic.
        discriminant3: E^2 - 4DF of the theta3 quadratic.
        coefficients: K1..K5 and A..F, keyed by name.
    """

    theta3: AngleSolutionPair
    theta4: AngleSolutionPair
    discriminant4: float
    discriminant3: float
    coefficients: dict[str, float] = field(default_factory=dict)


@dataclass
class ComputeResult:
    """Result of one request-level computation.

    Attributes:
        geometry: Link lengths the solution was computed for.
        theta2_deg: Driving angle as given by the caller.
        grashof: Mobility class.
        inversion: Kinematic inversion name.
        solution: Angle pairs and closure intermediates.
        diag: Diagnostics dict with timings and versions.
    """

    geometry: LinkageGeometry
    theta2_deg: float
    grashof: GrashofClass
    inversion: LinkageInversion
    solution: FourBarSolution
    diag: dict[str, Any] = field(default_factory=dict)

    def to_response(self, include_diagnostics: bool = False) -> dict[str, Any]:
        """Wire representation used by the HTTP service and the CLI."""
        out: dict[str, Any] = {
            "grashof": self.grashof.value,
            "theta31": self.solution.theta3.open,
            "theta32": self.solution.theta3.crossed,
            "theta41": self.solution.theta4.open,
            "theta42": self.solution.theta4.crossed,
        }
        if include_diagnostics:
            out["inversion"] = self.inversion.value
            out["discriminant"] = self.solution.discriminant4
            out["discriminant1"] = self.solution.discriminant3
            out["coefficients"] = dict(self.solution.coefficients)
        return out
