# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Error taxonomy shared by the matrix value and the engines.
"""

from typing import Optional


class MatrixError(Exception):
    """Base exception for matkernel."""


class DimensionMismatch(MatrixError, ValueError):
    """Operand shapes violate an operation's preconditions."""


class OutOfRange(MatrixError, IndexError):
    """Element access outside the declared dimensions."""


class NotPositiveDefinite(MatrixError, ArithmeticError):
    """Cholesky met a non-positive diagonal term."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index
