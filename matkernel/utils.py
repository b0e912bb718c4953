# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

EPS: float = 1e-12
DEFAULT_TOL: float = 1e-4


def permutation_sign(perm: list[int]) -> float:
    """Return +1 or –1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n − #cycles
    return -1.0 if swaps & 1 else 1.0


def random_square(n, low=-2.0, high=2.0, seed=None) -> np.ndarray:
    """
    Dense n-by-n matrix with uniform entries, for fixtures and benchmarks.
    """
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=(n, n))


def random_spd(n, seed=None) -> np.ndarray:
    """
    Build a symmetric positive definite matrix B Bᵀ + n I

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    B = rng.standard_normal((n, n))
    A = B @ B.T + n * np.eye(n)
    # enforce exact symmetry, B @ B.T can differ in the last bit
    A = 0.5 * (A + A.T)
    return np.asarray(A, dtype=float)
