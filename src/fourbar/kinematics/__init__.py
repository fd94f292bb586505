"""Kinematics module for fourbar: Grashof classification and position solution."""

from .grashof import classify, grashof_margin, inversion
from .solver import closure_coefficients, solve, solve_half_angle

__all__ = [
    "classify",
    "closure_coefficients",
    "grashof_margin",
    "inversion",
    "solve",
    "solve_half_angle",
]
