# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math
from typing import Optional

import numpy as np

from .exceptions import DimensionMismatch, NotPositiveDefinite
from .matrix import FixedMatrix, MatrixValue, as_array, result_like

logger = logging.getLogger(__name__)


def cholesky_upper(A: np.ndarray) -> np.ndarray:
    """
    Upper-triangular Cholesky factor of a symmetric positive definite A.

    Row k of C is built from the rows above it:

        C[k, k] = sqrt(A[k, k] - sum_{m<k} C[m, k]^2)
        C[k, j] = (A[k, j] - sum_{m<k} C[m, k] C[m, j]) / C[k, k],  j > k

    Only the upper triangle of A is read; symmetry is the caller's
    responsibility. Entries below the diagonal are exactly 0.

    Raises
    ------
    NotPositiveDefinite : if a diagonal term to be square-rooted is <= 0
                          (or NaN).
    """
    n = A.shape[0]
    C = np.zeros((n, n), dtype=float)

    for k in range(n):
        col = C[:k, k]
        d = A[k, k] - col @ col
        if not d > 0.0:
            logger.debug("cholesky_upper: diagonal term %g at row %d", d, k)
            raise NotPositiveDefinite(
                f"matrix is not positive definite (diagonal term {float(d)!r} at row {k})",
                index=k,
            )
        ckk = math.sqrt(d)
        C[k, k] = ckk
        if k + 1 < n:
            C[k, k + 1 :] = (A[k, k + 1 :] - col @ C[:k, k + 1 :]) / ckk

    return C


def chol(A, out: Optional[MatrixValue] = None) -> MatrixValue:
    """
    Cholesky factorization A = Cᵀ C with C upper-triangular.

    Parameters
    ----------
    A   : square matrix value, symmetric positive definite. Not modified.
    out : optional matrix value to receive the factor. A dynamic ``out`` is
          resized to n by n; a fixed one must already be n by n. It must
          not be A itself.

    Returns
    -------
    C : the factor; ``out`` itself when it was given, otherwise a new value
        in A's representation.
    """
    a = as_array(A)
    m, n = a.shape
    if m != n:
        raise DimensionMismatch(f"Cholesky needs a square matrix, got {m}x{n}")
    if out is not None:
        if out is A:
            raise ValueError("out must not be the input matrix")
        if isinstance(out, FixedMatrix) and out.shape != (n, n):
            raise DimensionMismatch(
                f"fixed out is {out.rows()}x{out.cols()}, factor is {n}x{n}"
            )

    C = cholesky_upper(a)

    if out is None:
        return result_like(A, C)

    out.resize(n, n)
    for i in range(n):
        for j in range(n):
            out.set(i, j, C[i, j])
    return out
