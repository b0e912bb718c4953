# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Tuple

import numpy as np

from .exceptions import DimensionMismatch

logger = logging.getLogger(__name__)


def lu_decompose(A: np.ndarray) -> Tuple[np.ndarray, np.ndarray, List[int]]:
    """
    Gaussian elimination with partial pivoting on a square n by n matrix A.

    Parameters
    ----------
    A : np.ndarray               (n, n)
        Square coefficient matrix (MUST be ndarray). Not modified.

    Returns
    -------
    L    : np.ndarray            (n, n)
        Unit lower-triangular multipliers.
    U    : np.ndarray            (n, n)
        Upper-triangular factor, P A = L U.
    perm : list[int]
        Final row order: row i of U comes from original row perm[i].

    A column that is exactly zero at and below the diagonal is left in
    place; U then carries a zero on its diagonal.
    """
    if not isinstance(A, np.ndarray):
        raise TypeError("A must be a NumPy ndarray")
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise DimensionMismatch(f"LU needs a square matrix, got shape {A.shape}")

    U = A.astype(float, copy=True)
    n = U.shape[0]
    L = np.eye(n)
    perm = list(range(n))  # Identity Permutation

    for col in range(n):
        # Pick the largest magnitude entry at or below the diagonal
        # so we never divide by a small pivot when a larger one exists.
        col_slice = np.abs(U[col:, col])
        max_idx = int(col_slice.argmax())
        max_val = col_slice[max_idx]

        if max_val == 0.0:  # structurally singular column
            logger.debug("lu_decompose: zero pivot column %d", col)
            continue

        pivot_row = col + max_idx
        if pivot_row != col:
            U[[col, pivot_row]] = U[[pivot_row, col]]
            # multipliers already computed move with their rows
            L[[col, pivot_row], :col] = L[[pivot_row, col], :col]
            perm[col], perm[pivot_row] = perm[pivot_row], perm[col]

        # Eliminate entries below the pivot
        factors = U[col + 1 :, col] / U[col, col]
        L[col + 1 :, col] = factors
        U[col + 1 :, col:] -= factors[:, None] * U[col, col:]

    return L, U, perm
