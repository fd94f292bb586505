"""Linkage evaluation: the single call boundary for all request surfaces.

Interface:
    compute_linkage(a, b, c, d, theta2, config) -> ComputeResult

Flow:
    1. LinkageGeometry(a, b, c, d) -> rejects non-finite lengths
    2. classify / inversion -> GrashofClass, LinkageInversion
    3. solve -> FourBarSolution (theta3, theta4 pairs)
    4. Return ComputeResult with diagnostics

parse_request turns an untrusted JSON body into the five numbers first.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from numbers import Real
from typing import Any

from ..kinematics.grashof import classify, inversion
from ..kinematics.solver import solve
from .config import FourBarConfig, default_config
from .constants import REQUIRED_FIELDS, SOLVER_VERSION
from .errors import ValidationError
from .logging import get_logger
from .types import ComputeResult, LinkageGeometry

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing one of the required fields: " + ", ".join(REQUIRED_FIELDS)


def parse_request(payload: Any) -> tuple[float, float, float, float, float]:
    """Extract (a, b, c, d, theta2) from a decoded JSON body.

    Raises:
        ValidationError: Body is not an object, a field is missing or null,
            or a field is not a number (booleans are rejected).
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")

    if any(payload.get(name) is None for name in REQUIRED_FIELDS):
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    values = []
    for name in REQUIRED_FIELDS:
        value = payload[name]
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValidationError(f"Field '{name}' must be a number, got {value!r}")
        try:
            values.append(float(value))
        except OverflowError:
            raise ValidationError(f"Field '{name}' is too large to represent as a number") from None

    a, b, c, d, theta2 = values
    return a, b, c, d, theta2


def compute_linkage(
    a: float,
    b: float,
    c: float,
    d: float,
    theta2: float,
    config: FourBarConfig | None = None,
) -> ComputeResult:
    """Classify the chain and solve its position at theta2.

    Args:
        a, b, c, d: Link lengths (input, coupler, output, ground).
        theta2: Input link angle (degrees).
        config: Tolerances; defaults when None.

    Returns:
        ComputeResult with:
            grashof: Mobility class
            inversion: Kinematic inversion name
            solution: theta3/theta4 pairs and closure intermediates
            diag: timings and versions

    Raises:
        DomainError: Degenerate or non-finite inputs.
    """
    config = config or default_config()
    t0 = time.perf_counter()

    geometry = LinkageGeometry(a, b, c, d)
    tol = config.solver.grashof_tol
    grashof = classify(*geometry.lengths, tol=tol)
    linkage_inversion = inversion(*geometry.lengths, tol=tol)

    t_solve_start = time.perf_counter()
    solution = solve(*geometry.lengths, theta2, linear_tol=config.solver.linear_tol)
    t_solve = time.perf_counter() - t_solve_start

    t_total = time.perf_counter() - t0
    diag = {
        "timings": {
            "total_ms": t_total * 1000,
            "solve_ms": t_solve * 1000,
        },
        "versions": {"solver": SOLVER_VERSION},
        "closes": {
            "theta3": solution.theta3.exists,
            "theta4": solution.theta4.exists,
        },
    }

    logger.info(
        "linkage computed",
        lengths=list(geometry.lengths),
        theta2=float(theta2),
        grashof=grashof.value,
        closes=solution.theta4.exists,
        total_ms=diag["timings"]["total_ms"],
    )

    return ComputeResult(
        geometry=geometry,
        theta2_deg=float(theta2),
        grashof=grashof,
        inversion=linkage_inversion,
        solution=solution,
        diag=diag,
    )
