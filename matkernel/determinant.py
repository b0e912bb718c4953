# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .elimination import lu_decompose
from .exceptions import DimensionMismatch
from .matrix import as_array
from .utils import permutation_sign

logger = logging.getLogger(__name__)


def det(A) -> float:
    """
    Calculate the determinant of n-by-n matrix A using elimination

    det(A) = sign(P) * prod(diag(U)) where P A = L U. A singular matrix
    gives 0.0, not an error.
    """
    a = as_array(A)
    m, n = a.shape
    if m != n:
        raise DimensionMismatch(
            f"The determinant is undefined for non-square matrices ({m}x{n})."
        )
    if n == 0:
        return 1.0
    if n == 1:
        return float(a[0, 0])

    _L, U, perm = lu_decompose(a)
    sign = permutation_sign(perm)
    diag_prod = float(np.prod(np.diag(U)))
    logger.debug("det: n=%d sign=%+.0f diag_prod=%g", n, sign, diag_prod)
    return sign * diag_prod
