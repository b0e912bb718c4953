#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time the three kernels against their NumPy counterparts.

    python -m matkernel.benchmark --sizes 10 50 200 --repeats 5
"""

import argparse
import platform
import time
from typing import Iterable

import numpy as np
import pandas as pd

from .cholesky import chol
from .congruence import multiply_HCHt
from .determinant import det
from .matrix import DynamicMatrix
from .utils import random_spd, random_square

REPEATS = 5  # best of 5 runs


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run_benchmark(
    sizes: Iterable[int] = (10, 50, 200),
    repeats: int = REPEATS,
    seed: int = 0,
) -> pd.DataFrame:
    """
    Returns
    -------
    DataFrame with columns kernel, size, sec, sec/NumPy, abs_err
    """
    records = []
    for n in sizes:
        A = random_square(n, seed=seed)
        S = random_spd(n, seed=seed + 1)
        H = random_square(n, seed=seed + 2)[: max(1, n // 2)]
        Am = DynamicMatrix(n, n, A)
        Sm = DynamicMatrix(n, n, S)
        Hm = DynamicMatrix(H.shape[0], n, H)

        # ---------- determinant ------------------------------------------
        t_np = min(wall(np.linalg.det, A) for _ in range(repeats))
        t_det = min(wall(det, Am) for _ in range(repeats))
        err = abs(det(Am) - np.linalg.det(A))
        records.append(("det", f"{n}x{n}", t_det, t_det / t_np, err))

        # ---------- Cholesky, NumPy returns the lower factor --------------
        t_np = min(wall(np.linalg.cholesky, S) for _ in range(repeats))
        t_chol = min(wall(chol, Sm) for _ in range(repeats))
        ref = DynamicMatrix(n, n, np.linalg.cholesky(S).T)
        err = chol(Sm).difference(ref).sum_abs()
        records.append(("chol", f"{n}x{n}", t_chol, t_chol / t_np, err))

        # ---------- congruence transform -----------------------------------
        t_np = min(wall(lambda: H @ S @ H.T) for _ in range(repeats))
        t_hcht = min(wall(multiply_HCHt, Hm, Sm) for _ in range(repeats))
        m = H.shape[0]
        ref = DynamicMatrix(m, m, H @ S @ H.T)
        err = multiply_HCHt(Hm, Sm).difference(ref).sum_abs()
        records.append(("HCHt", f"{m}x{n}", t_hcht, t_hcht / t_np, err))

    return pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "abs_err"],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 50, 200])
    parser.add_argument("--repeats", type=int, default=REPEATS)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--csv", help="also write the table to this file")
    args = parser.parse_args(argv)

    df = run_benchmark(args.sizes, args.repeats, args.seed)
    print(f"# {platform.python_implementation()} {platform.python_version()}")
    print(df.to_string(index=False))
    if args.csv:
        df.to_csv(args.csv, index=False)
    return df


if __name__ == "__main__":
    main()
