"""Test Grashof classification and inversion naming."""

import itertools

import numpy as np
import pytest

from fourbar.core.errors import DomainError
from fourbar.core.types import GrashofClass, LinkageInversion
from fourbar.kinematics.grashof import classify, grashof_margin, inversion


@pytest.mark.parametrize(
    "lengths, expected",
    [
        ((1, 2, 2, 3), GrashofClass.SPECIAL_GRASHOF),
        ((2, 5, 4, 7), GrashofClass.SPECIAL_GRASHOF),
        ((2, 5, 4, 8), GrashofClass.NON_GRASHOF),
        ((2, 7, 4, 8), GrashofClass.GRASHOF),
        ((1, 1, 1, 1), GrashofClass.SPECIAL_GRASHOF),
        ((3, 1, 1, 3.5), GrashofClass.NON_GRASHOF),
    ],
)
def test_classify_hand_computed(lengths, expected):
    assert classify(*lengths) is expected


def test_classify_permutation_invariant():
    """The class depends only on the multiset of lengths."""
    rng = np.random.default_rng(42)

    for _ in range(50):
        lengths = rng.uniform(0.5, 10.0, size=4)
        classes = {classify(*perm) for perm in itertools.permutations(lengths)}
        assert len(classes) == 1, f"Permutations of {lengths} classified as {classes}"

    for lengths in [(1, 2, 2, 3), (2, 5, 4, 8), (2, 7, 4, 8)]:
        classes = {classify(*perm) for perm in itertools.permutations(lengths)}
        assert len(classes) == 1


def test_classify_tolerance_absorbs_float_error():
    # 0.1 + 0.2 != 0.3 in binary floating point
    assert classify(0.1, 0.2, 0.2, 0.1 + 0.2) is GrashofClass.SPECIAL_GRASHOF
    assert classify(1.0, 2.0, 2.0, 3.0 + 1e-12) is GrashofClass.SPECIAL_GRASHOF
    assert classify(1.0, 2.0, 2.0, 3.0 + 1e-6) is GrashofClass.NON_GRASHOF
    assert classify(1.0, 2.0, 2.0, 3.0 - 1e-6) is GrashofClass.GRASHOF


def test_classify_accepts_non_positive_lengths():
    """Classification is pure arithmetic on any finite values."""
    assert classify(0.0, 1.0, 1.0, 1.0) is GrashofClass.GRASHOF
    assert classify(-1.0, 2.0, 3.0, 4.0) is GrashofClass.GRASHOF


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
def test_classify_rejects_non_finite(bad):
    with pytest.raises(DomainError):
        classify(1.0, 2.0, bad, 3.0)


def test_grashof_margin_sign():
    assert grashof_margin(2, 7, 4, 8) == pytest.approx(1.0)
    assert grashof_margin(2, 5, 4, 8) == pytest.approx(-1.0)
    assert grashof_margin(1, 2, 2, 3) == 0.0


@pytest.mark.parametrize(
    "lengths, expected",
    [
        # (a=input, b=coupler, c=output, d=ground)
        ((1.0, 3.0, 2.5, 3.5), LinkageInversion.CRANK_ROCKER),
        ((3.0, 1.0, 2.5, 3.5), LinkageInversion.DOUBLE_ROCKER),
        ((3.0, 2.5, 1.0, 3.5), LinkageInversion.ROCKER_CRANK),
        ((3.0, 2.5, 3.5, 1.0), LinkageInversion.DOUBLE_CRANK),
        ((1.0, 1.0, 1.0, 1.0), LinkageInversion.CHANGE_POINT),
        ((3.0, 1.0, 1.0, 3.5), LinkageInversion.TRIPLE_ROCKER),
    ],
)
def test_inversion(lengths, expected):
    assert inversion(*lengths) is expected
