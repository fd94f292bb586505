"""Core constants for fourbar.

This module defines system-wide numeric knobs:
- Tolerances used by the classifier and solver
- Wire field names of the compute request
- Solver version tag reported in diagnostics
"""

from __future__ import annotations

# Tolerances
# |S + L - (P + Q)| below this is treated as a change-point linkage
GRASHOF_TOL = 1e-9
# |A| (or |D|) below this turns the half-angle quadratic into a linear equation
LINEAR_TOL = 1e-12

# Angles
FULL_TURN_DEG = 360.0
HALF_TURN_DEG = 180.0

# Request fields, in the order they are reported when one is missing
REQUIRED_FIELDS = ("a", "b", "c", "d", "theta2")

# Bump when the closure formulas or branch conventions change
SOLVER_VERSION = "v1.0_norton_atan2"
