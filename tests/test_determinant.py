# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

from matkernel.determinant import det
from matkernel.exceptions import DimensionMismatch
from matkernel.matrix import (
    DynamicMatrix,
    Matrix22,
    Matrix33,
    Matrix44,
    fixed_matrix,
)
from matkernel.utils import random_square

TOL = 1e-4
logger = logging.getLogger(__name__)

DAT_2X2 = [0.8, -0.3, -0.7, 0.1]

DAT_3X3 = [
    -3.3304e-01, -2.0585e-01, 6.2026e-05,
    1.4631e00, 6.0985e-01, 2.3746e00,
    -3.6451e-01, 4.8169e-01, -8.4419e-01,
]  # fmt: skip

DAT_4X4 = [
    0.773931, -0.336130, 1.131764, 0.385890,
    1.374906, -0.540629, -0.952902, 0.659769,
    -0.387254, -1.557355, 0.139683, -2.056635,
    -0.750078, -0.653811, 0.872027, 0.217554,
]  # fmt: skip

DAT_10X10 = [
    1.2305462976, -0.2944257811, 0.8176140437, -0.0487601371,
    0.4418235581, -0.0088466980, -1.4100223408, -0.6219629815,
    1.1089237266, -0.6450262619, -2.0862614547, 0.2699762709,
    -0.0705918517, 1.1763963161, -0.3461819597, -1.3013222580,
    -0.3310621595, -0.2595069675, -0.5188213591, 1.2261476224,
    -1.1334297957, 2.1452881319, 1.7856021357, 0.5406722888,
    0.5497545623, 0.4282217402, -1.6175210256, -0.3522824764,
    0.2773929603, 0.8507134453, 0.4046854117, -2.1638696195,
    1.0044939778, 0.9755939720, 0.9640788301, 0.5641138097,
    0.7382236207, -0.4422212587, 0.8507041571, 1.3764399072,
    0.3446492224, 1.1681336612, -1.3440052449, 1.0120691406,
    -0.0430604384, 0.4823901171, 0.0881769800, 0.3984805283,
    -1.9988153178, 0.9509748328, 0.3202853059, 1.9688559025,
    0.4020581289, -1.5558616735, -0.8753527614, 0.1207830427,
    0.0457715031, -0.1557123759, -0.3161307172, -0.0759276933,
    -0.0417386037, 1.2079564736, -2.5839030155, -0.7648863647,
    1.1541464803, 0.2127569446, -1.4882083860, -0.7630836781,
    0.8550884427, -0.8440402465, -0.4903597050, -0.1457982930,
    0.5893448560, -0.2353784687, 0.3474655757, 2.5874616045,
    0.6608448038, -1.0105315509, -1.5276853710, -0.1400026815,
    -1.7630264416, 2.4048579514, -0.3111046623, 0.7463774799,
    -0.2800404492, -1.4175124130, -0.5708536580, -1.2085107661,
    0.8169107561, -1.1659481510, -0.1406355512, 2.3507381980,
    2.6346742737, -1.1028788167, -0.0533115044, 0.3752684649,
    -1.3799576309, -0.7274190037, 1.1188847602, -0.6624231096,
]  # fmt: skip

REFERENCE_CASES = [
    (2, DAT_2X2, -0.13),
    (3, DAT_3X3, 0.476380435871666),
    (4, DAT_4X4, -6.29527837425056),
    (10, DAT_10X10, 330.498518199239),
]


@pytest.mark.parametrize("n,data,expected", REFERENCE_CASES)
def test_det_reference_dynamic(n, data, expected):
    A = DynamicMatrix(n, n, data)
    d = det(A)
    logger.debug(f"det {n}x{n} dyn: {d} (expected {expected})")
    assert abs(d - expected) < TOL


@pytest.mark.parametrize("n,data,expected", REFERENCE_CASES)
def test_det_reference_fixed(n, data, expected):
    A = fixed_matrix(n, n)(data)
    assert abs(det(A) - expected) < TOL


def test_det_named_fixed_types():
    assert abs(Matrix22(DAT_2X2).det() - (-0.13)) < TOL
    assert abs(Matrix33(DAT_3X3).det() - 0.476380435871666) < TOL
    assert abs(Matrix44(DAT_4X4).det() - (-6.29527837425056)) < TOL


@pytest.mark.parametrize("n", range(2, 11))
def test_det_matches_numpy_both_representations(n):
    A = random_square(n, seed=n)
    expected = np.linalg.det(A)

    d_dyn = det(DynamicMatrix(n, n, A))
    d_fix = det(fixed_matrix(n, n)(A))

    assert abs(d_dyn - expected) < TOL
    # same storage layout, same bits
    assert d_dyn == d_fix


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_det_sign_flips_under_row_swap(n):
    A = random_square(n, seed=100 + n)
    swapped = A.copy()
    swapped[[0, n - 1]] = swapped[[n - 1, 0]]

    d = det(DynamicMatrix(n, n, A))
    d_swapped = det(DynamicMatrix(n, n, swapped))
    assert math.isclose(d_swapped, -d, rel_tol=1e-10, abs_tol=1e-12)


def test_det_duplicated_row_is_zero():
    A = random_square(5, seed=7)
    A[3] = A[1]
    assert abs(det(DynamicMatrix(5, 5, A))) < 1e-10


def test_det_zero_column_is_exactly_zero():
    A = DynamicMatrix(3, 3, [0.0, 1.0, 2.0, 0.0, 3.0, 4.0, 0.0, 5.0, 7.0])
    assert det(A) == 0.0


def test_det_1x1_returns_element():
    assert det(DynamicMatrix(1, 1, [-3.5])) == -3.5
    assert det(fixed_matrix(1, 1)([2.25])) == 2.25


def test_det_empty_matrix_is_one():
    assert det(DynamicMatrix(0, 0)) == 1.0


def test_det_identity_and_triangular():
    U = np.triu(random_square(6, seed=3)) + 3 * np.eye(6)
    expected = float(np.prod(np.diag(U)))
    assert math.isclose(det(DynamicMatrix(6, 6, U)), expected, rel_tol=1e-12)
    assert det(DynamicMatrix(4, 4, np.eye(4))) == 1.0


def test_det_non_square_raises():
    with pytest.raises(DimensionMismatch):
        det(DynamicMatrix(2, 3))
    # also a ValueError for callers catching the builtin
    with pytest.raises(ValueError):
        det(fixed_matrix(3, 1)())


def test_det_does_not_mutate_input():
    A = DynamicMatrix(3, 3, DAT_3X3)
    before = A.to_array()
    det(A)
    np.testing.assert_array_equal(A.to_array(), before)


def test_det_rejects_plain_arrays():
    with pytest.raises(TypeError):
        det(np.eye(3))


def test_det_accepts_duck_typed_matrix():
    class RowList:
        def __init__(self, rows):
            self._rows = rows

        def rows(self):
            return len(self._rows)

        def cols(self):
            return len(self._rows[0])

        def get(self, i, j):
            return self._rows[i][j]

    assert abs(det(RowList([[0.8, -0.3], [-0.7, 0.1]])) - (-0.13)) < TOL
