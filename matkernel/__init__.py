# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matkernel
=========

A small dense-matrix kernel for estimation and filtering code
(covariance propagation in Kalman-style filters and the like).

Public API
~~~~~~~~~~
- Matrix values
    - `FixedMatrix`, `fixed_matrix`, `Matrix22`, `Matrix33`, `Matrix44`,
      `Matrix66`
    - `DynamicMatrix`, `zeros`, `identity`
- Kernels
    - `det`
    - `chol`
    - `multiply_HCHt`, `multiply_HCHt_scalar`, `multiply_HtCH`
- Errors
    - `DimensionMismatch`, `NotPositiveDefinite`, `OutOfRange`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import matkernel as mk
>>> H = mk.DynamicMatrix(1, 2, [0.2, -0.3])
>>> C = mk.Matrix22([0.8, -0.1, -0.1, 0.8])
>>> round(mk.multiply_HCHt_scalar(H, C), 3)
0.116
"""

from importlib.metadata import version as _pkg_version

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .cholesky import chol
from .congruence import multiply_HCHt, multiply_HCHt_scalar, multiply_HtCH
from .determinant import det
from .exceptions import (
    DimensionMismatch,
    MatrixError,
    NotPositiveDefinite,
    OutOfRange,
)
from .matrix import (
    DynamicMatrix,
    FixedMatrix,
    Matrix22,
    Matrix33,
    Matrix44,
    Matrix66,
    MatrixValue,
    fixed_matrix,
    identity,
    zeros,
)

__all__ = [
    "MatrixValue",
    "FixedMatrix",
    "DynamicMatrix",
    "fixed_matrix",
    "Matrix22",
    "Matrix33",
    "Matrix44",
    "Matrix66",
    "zeros",
    "identity",
    "det",
    "chol",
    "multiply_HCHt",
    "multiply_HCHt_scalar",
    "multiply_HtCH",
    "MatrixError",
    "DimensionMismatch",
    "NotPositiveDefinite",
    "OutOfRange",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matkernel”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
