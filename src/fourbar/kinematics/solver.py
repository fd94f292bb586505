"""Closed-form position solution of a planar four-bar linkage.

Link convention (see LinkageGeometry): a = input, b = coupler, c = output,
d = ground, with O2 at the origin and O4 at (d, 0). All angles are measured
from +x, counter-clockwise.

Writing the vector loop a + b = d + c in the tangent of the half angle
t = tan(theta/2) of the unknown link gives one quadratic per unknown:

    theta4:  A t^2 + B t + C = 0
        K1 = d/a,  K2 = d/c,  K3 = (a^2 - b^2 + c^2 + d^2) / (2ac)
        A = cos(theta2) - K1 - K2 cos(theta2) + K3
        B = -2 sin(theta2)
        C = K1 - (K2 + 1) cos(theta2) + K3

    theta3:  D t^2 + E t + F = 0
        K4 = d/b,  K5 = (c^2 - d^2 - a^2 - b^2) / (2ab)
        D = cos(theta2) - K1 + K4 cos(theta2) + K5
        E = -2 sin(theta2)
        F = K1 + (K4 - 1) cos(theta2) + K5

The minus branch of the discriminant is the open circuit, the plus branch
the crossed circuit; open theta3 closes the loop with open theta4.
"""

from __future__ import annotations

import numpy as np

from ..core.angles import deg_to_rad, normalize_deg, rad_to_deg
from ..core.constants import HALF_TURN_DEG, LINEAR_TOL
from ..core.errors import DomainError
from ..core.logging import get_logger
from ..core.types import AngleSolutionPair, FourBarSolution, LinkageGeometry

logger = get_logger(__name__)


def closure_coefficients(
    geometry: LinkageGeometry,
    theta2_rad: float,
) -> dict[str, float]:
    """Compute K1..K5 and the quadratic coefficients A..F.

    Args:
        geometry: Link lengths.
        theta2_rad: Input link angle (radians).

    Returns:
        Dict keyed by coefficient name.

    Raises:
        DomainError: If a, b or c is zero (they appear as denominators).
    """
    a, b, c, d = geometry.lengths
    if a == 0 or b == 0 or c == 0:
        raise DomainError("degenerate linkage: link length zero")

    cos2 = float(np.cos(theta2_rad))
    sin2 = float(np.sin(theta2_rad))

    K1 = d / a
    K2 = d / c
    K3 = (a**2 - b**2 + c**2 + d**2) / (2 * a * c)
    K4 = d / b
    K5 = (c**2 - d**2 - a**2 - b**2) / (2 * a * b)

    return {
        "K1": K1,
        "K2": K2,
        "K3": K3,
        "K4": K4,
        "K5": K5,
        "A": cos2 - K1 - K2 * cos2 + K3,
        "B": -2.0 * sin2,
        "C": K1 - (K2 + 1) * cos2 + K3,
        "D": cos2 - K1 + K4 * cos2 + K5,
        "E": -2.0 * sin2,
        "F": K1 + (K4 - 1) * cos2 + K5,
    }


def solve_half_angle(
    A: float,
    B: float,
    C: float,
    linear_tol: float = LINEAR_TOL,
) -> tuple[float, AngleSolutionPair]:
    """Solve A t^2 + B t + C = 0 for theta, where t = tan(theta/2).

    Args:
        A, B, C: Quadratic coefficients.
        linear_tol: |A| at or below this is treated as zero.

    Returns:
        (discriminant, pair). The pair holds None on both branches when the
        discriminant is negative.

    Raises:
        DomainError: If A, B and C all vanish (every angle closes the loop).
    """
    disc = B * B - 4.0 * A * C
    if disc < 0:
        return disc, AngleSolutionPair.no_solution()

    if abs(A) <= linear_tol:
        # B t + C = 0; the second root sits at t -> infinity, i.e. theta = 180 deg
        if abs(B) <= linear_tol:
            if abs(C) <= linear_tol:
                raise DomainError("degenerate linkage: closure is indeterminate")
            return disc, AngleSolutionPair(open=HALF_TURN_DEG, crossed=HALF_TURN_DEG)

        finite = normalize_deg(rad_to_deg(2.0 * np.arctan2(-C, B)))
        # The branch whose (-B -/+ root) / 2A stays finite as A -> 0 keeps the finite root
        if B > 0:
            return disc, AngleSolutionPair(open=HALF_TURN_DEG, crossed=finite)
        return disc, AngleSolutionPair(open=finite, crossed=HALF_TURN_DEG)

    root = float(np.sqrt(disc))
    # -B -/+ root cancels on the branch where root ~ |B|; there the root is
    # taken as t = 2C / (-B +/- root) instead of (-B -/+ root) / 2A
    if B > 0:
        theta_open = 2.0 * np.arctan2(-B - root, 2.0 * A)
        theta_crossed = 2.0 * np.arctan2(2.0 * C, -B - root)
    else:
        theta_open = 2.0 * np.arctan2(2.0 * C, -B + root)
        theta_crossed = 2.0 * np.arctan2(-B + root, 2.0 * A)
    return disc, AngleSolutionPair(
        open=normalize_deg(rad_to_deg(theta_open)),
        crossed=normalize_deg(rad_to_deg(theta_crossed)),
    )


def solve(
    a: float,
    b: float,
    c: float,
    d: float,
    theta2_deg: float,
    *,
    linear_tol: float = LINEAR_TOL,
) -> FourBarSolution:
    """Solve coupler and output angles for a driving angle.

    Args:
        a, b, c, d: Link lengths (input, coupler, output, ground).
        theta2_deg: Input link angle (degrees), any finite value.
        linear_tol: Threshold for the linear-degenerate quadratic.

    Returns:
        FourBarSolution with theta3/theta4 pairs in [0, 360) or None markers.

    Raises:
        DomainError: Zero or non-finite link lengths, non-finite angle,
            or an indeterminate closure.
    """
    geometry = LinkageGeometry(a, b, c, d)
    if not np.isfinite(theta2_deg):
        raise DomainError(f"theta2 must be finite, got {theta2_deg}")

    k = closure_coefficients(geometry, deg_to_rad(theta2_deg))

    disc4, theta4 = solve_half_angle(k["A"], k["B"], k["C"], linear_tol=linear_tol)
    disc3, theta3 = solve_half_angle(k["D"], k["E"], k["F"], linear_tol=linear_tol)

    if logger.is_enabled_for("DEBUG"):
        logger.debug(
            "closure solved",
            theta2_deg=float(theta2_deg),
            discriminant4=disc4,
            discriminant3=disc3,
            theta4=[theta4.open, theta4.crossed],
            theta3=[theta3.open, theta3.crossed],
            **k,
        )

    return FourBarSolution(
        theta3=theta3,
        theta4=theta4,
        discriminant4=float(disc4),
        discriminant3=float(disc3),
        coefficients=k,
    )
