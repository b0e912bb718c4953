# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Congruence transforms H C Hᵀ, used to push a covariance C through a
linear map H. If C is symmetric, so is the result.
"""

import logging
from typing import Tuple

import numpy as np

from .exceptions import DimensionMismatch
from .matrix import MatrixValue, as_array, result_like

logger = logging.getLogger(__name__)


def _check_operands(h: np.ndarray, c: np.ndarray, inner: int) -> None:
    if c.shape[0] != c.shape[1]:
        raise DimensionMismatch(f"C must be square, got {c.shape[0]}x{c.shape[1]}")
    if inner != c.shape[0]:
        raise DimensionMismatch(
            f"H ({h.shape[0]}x{h.shape[1]}) does not conform with "
            f"C ({c.shape[0]}x{c.shape[1]})"
        )


def _hcht(h: np.ndarray, c: np.ndarray) -> np.ndarray:
    # temp = H C, result = temp Hᵀ
    temp = h @ c
    return temp @ h.T


def _operands(H, C) -> Tuple[np.ndarray, np.ndarray]:
    return as_array(H), as_array(C)


def multiply_HCHt(H, C) -> MatrixValue:
    """
    Return H C Hᵀ for H (m, n) and square C (n, n) as an (m, m) matrix
    value in H's representation.
    """
    h, c = _operands(H, C)
    _check_operands(h, c, h.shape[1])
    logger.debug("multiply_HCHt: H %s, C %s", h.shape, c.shape)
    return result_like(H, _hcht(h, c))


def multiply_HCHt_scalar(H, C) -> float:
    """
    Return the single entry of H C Hᵀ for a row H (1, n) and C (n, n).

    Same arithmetic as ``multiply_HCHt`` so the two agree exactly.
    """
    h, c = _operands(H, C)
    if h.shape[0] != 1:
        raise DimensionMismatch(
            f"scalar H C Hᵀ needs a single-row H, got {h.shape[0]}x{h.shape[1]}"
        )
    _check_operands(h, c, h.shape[1])
    return float(_hcht(h, c)[0, 0])


def multiply_HtCH(H, C) -> MatrixValue:
    """
    Return Hᵀ C H for H (m, n) and square C (m, m) as an (n, n) matrix
    value in H's representation.
    """
    h, c = _operands(H, C)
    _check_operands(h, c, h.shape[0])
    logger.debug("multiply_HtCH: H %s, C %s", h.shape, c.shape)
    # Hᵀ C H is H' C H'ᵀ with H' = Hᵀ
    return result_like(H, _hcht(h.T, c))
