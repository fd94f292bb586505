"""Pytest configuration for fourbar.

Loggers are process global; every test starts and ends at INFO with no
trace hooks left behind.
"""

from __future__ import annotations

import numpy as np
import pytest

from fourbar.core import logging as fb_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    fb_logging.set_log_level("INFO")
    yield
    fb_logging.set_log_level("INFO")
    for logger in fb_logging._loggers.values():
        logger._hooks.clear()


def angle_diff(x: float, y: float) -> float:
    """Smallest absolute difference between two angles in degrees."""
    d = abs(x - y) % 360.0
    return min(d, 360.0 - d)


def loop_gap(a: float, b: float, c: float, d: float, theta2: float, theta3: float, theta4: float) -> float:
    """Distance between the coupler end reached via the input and via the output link."""
    t2, t3, t4 = np.radians([theta2, theta3, theta4])
    via_input = np.array([a * np.cos(t2) + b * np.cos(t3), a * np.sin(t2) + b * np.sin(t3)])
    via_output = np.array([d + c * np.cos(t4), c * np.sin(t4)])
    return float(np.linalg.norm(via_input - via_output))
