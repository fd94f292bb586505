"""Angle conversion and normalization helpers."""

from __future__ import annotations

import numpy as np

from .constants import FULL_TURN_DEG
from .errors import DomainError


def deg_to_rad(deg: float) -> float:
    """Degrees to radians."""
    return float(np.radians(deg))


def rad_to_deg(rad: float) -> float:
    """Radians to degrees."""
    return float(np.degrees(rad))


def normalize_deg(angle_deg: float) -> float:
    """Wrap an angle in degrees into [0, 360).

    Same result as ((x mod 360) + 360) mod 360; np.mod is a floored modulo,
    so one pass is already non-negative and leaves values in [0, 360)
    untouched. A tiny negative input can round up to exactly 360.0, which is
    folded back to 0.0 so the upper bound stays open.

    Raises:
        DomainError: If the angle is NaN or infinite.
    """
    if not np.isfinite(angle_deg):
        raise DomainError(f"angle must be finite, got {angle_deg}")

    wrapped = float(np.mod(angle_deg, FULL_TURN_DEG))
    if wrapped >= FULL_TURN_DEG or wrapped == 0.0:
        # also turns -0.0 into 0.0
        wrapped = 0.0
    return wrapped
