"""Grashof mobility classification of a four-bar chain.

With S the shortest link, L the longest and P, Q the other two:
    S + L <  P + Q  -> Grashof: at least one link can fully rotate
    S + L == P + Q  -> special Grashof (change-point): the chain can fold flat
    S + L >  P + Q  -> non-Grashof: no link makes a full turn

The class depends only on the multiset of lengths, never on the angle.
"""

from __future__ import annotations

import numpy as np

from ..core.constants import GRASHOF_TOL
from ..core.errors import DomainError
from ..core.types import GrashofClass, LinkageInversion

# Inversion of a Grashof chain by which link is shortest, indexed in (a, b, c, d) order
_GRASHOF_INVERSIONS = (
    LinkageInversion.CRANK_ROCKER,  # input shortest
    LinkageInversion.DOUBLE_ROCKER,  # coupler shortest
    LinkageInversion.ROCKER_CRANK,  # output shortest
    LinkageInversion.DOUBLE_CRANK,  # ground shortest
)


def _lengths(a: float, b: float, c: float, d: float) -> np.ndarray:
    lengths = np.array([a, b, c, d], dtype=np.float64)
    if not np.all(np.isfinite(lengths)):
        raise DomainError(f"link lengths must be finite, got {lengths.tolist()}")
    return lengths


def grashof_margin(a: float, b: float, c: float, d: float) -> float:
    """Return (P + Q) - (S + L); positive for Grashof, negative for non-Grashof.

    The sum of the middle pair is taken from the sorted lengths so the margin
    is bit-identical under any permutation of the arguments.
    """
    shortest, p, q, longest = np.sort(_lengths(a, b, c, d))
    return float((p + q) - (shortest + longest))


def classify(a: float, b: float, c: float, d: float, tol: float = GRASHOF_TOL) -> GrashofClass:
    """Classify a four-bar chain by the Grashof condition.

    Args:
        a, b, c, d: Link lengths (input, coupler, output, ground).
        tol: Band around S + L == P + Q treated as special Grashof.

    Returns:
        GrashofClass.

    Raises:
        DomainError: If any length is NaN or infinite.
    """
    margin = grashof_margin(a, b, c, d)
    if abs(margin) < tol:
        return GrashofClass.SPECIAL_GRASHOF
    if margin > 0:
        return GrashofClass.GRASHOF
    return GrashofClass.NON_GRASHOF


def inversion(a: float, b: float, c: float, d: float, tol: float = GRASHOF_TOL) -> LinkageInversion:
    """Name the kinematic inversion of the chain with d grounded and a driving."""
    grashof = classify(a, b, c, d, tol=tol)
    if grashof is GrashofClass.SPECIAL_GRASHOF:
        return LinkageInversion.CHANGE_POINT
    if grashof is GrashofClass.NON_GRASHOF:
        return LinkageInversion.TRIPLE_ROCKER

    # S is unique whenever S + L < P + Q
    shortest = int(np.argmin(_lengths(a, b, c, d)))
    return _GRASHOF_INVERSIONS[shortest]
