# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix values
=============

Dense rectangular containers of float64 used by every engine in the
package. Two representations share one storage layout (a private,
C-contiguous ``(rows, cols)`` ndarray) and one method set:

- ``FixedMatrix`` subclasses carry their shape in the type, obtained from
  ``fixed_matrix(rows, cols)``; they cannot change shape.
- ``DynamicMatrix`` carries its shape per instance and may be resized.

Data is always copied in on construction and copied out by ``to_array``,
so two matrix values never alias the same buffer.

Closeness is ``a.difference(b).sum_abs() < tol``; there is deliberately no
``==`` on matrix values.
"""

import operator
from typing import Dict, Tuple, Type

import numpy as np

from .exceptions import DimensionMismatch, OutOfRange
from .utils import DEFAULT_TOL


def _coerce_data(data, rows: int, cols: int) -> np.ndarray:
    """Copy ``data`` into a fresh (rows, cols) float64 buffer."""
    if data is None:
        return np.zeros((rows, cols), dtype=float)
    if isinstance(data, MatrixValue):
        arr = data.to_array()
    else:
        arr = np.array(data, dtype=float)  # always a copy

    # Flat row-major data, e.g. [a00, a01, a10, a11]
    if arr.ndim == 1 and arr.size == rows * cols:
        arr = arr.reshape(rows, cols)
    if arr.shape != (rows, cols):
        raise DimensionMismatch(
            f"data of shape {arr.shape} does not fit a {rows}x{cols} matrix"
        )
    return np.ascontiguousarray(arr)


def _split_key(key) -> Tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"matrix indices are (row, col) pairs, got {key!r}")
    return key[0], key[1]


class MatrixValue:
    """
    Common contract of fixed- and dynamic-size matrices.

    Subclasses only decide how a result is wrapped (``new_like``) and
    whether the shape may change (``resize``).
    """

    _data: np.ndarray

    # ---- dimensions -------------------------------------------------------
    def rows(self) -> int:
        return self._data.shape[0]

    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    # ---- element access ---------------------------------------------------
    def _check_index(self, i: int, j: int) -> Tuple[int, int]:
        i, j = operator.index(i), operator.index(j)
        r, c = self.shape
        # negative indices are not wrapped around
        if not (0 <= i < r and 0 <= j < c):
            raise OutOfRange(f"index ({i}, {j}) out of range for {r}x{c} matrix")
        return i, j

    def get(self, i: int, j: int) -> float:
        i, j = self._check_index(i, j)
        return float(self._data[i, j])

    def set(self, i: int, j: int, v: float) -> None:
        i, j = self._check_index(i, j)
        self._data[i, j] = v

    def __getitem__(self, key: Tuple[int, int]) -> float:
        i, j = _split_key(key)
        return self.get(i, j)

    def __setitem__(self, key: Tuple[int, int], v: float) -> None:
        i, j = _split_key(key)
        self.set(i, j, v)

    # ---- construction of results -------------------------------------------
    def new_like(self, array: np.ndarray) -> "MatrixValue":
        """Wrap ``array`` (copied) in this matrix's representation."""
        raise NotImplementedError

    def resize(self, rows: int, cols: int) -> None:
        raise NotImplementedError

    def copy(self) -> "MatrixValue":
        return self.new_like(self._data)

    def __copy__(self) -> "MatrixValue":
        return self.copy()

    def __deepcopy__(self, memo) -> "MatrixValue":
        return self.copy()

    def to_array(self) -> np.ndarray:
        """Return a copy of the contents as a (rows, cols) ndarray."""
        return self._data.copy()

    # ---- elementwise helpers ----------------------------------------------
    def transpose(self) -> "MatrixValue":
        return self.new_like(self._data.T)

    def difference(self, other) -> "MatrixValue":
        """Elementwise ``self - other``; shapes must agree."""
        other_arr = as_array(other)
        if other_arr.shape != self.shape:
            raise DimensionMismatch(
                f"cannot subtract {other_arr.shape[0]}x{other_arr.shape[1]} "
                f"from {self.rows()}x{self.cols()}"
            )
        return self.new_like(self._data - other_arr)

    def sum_abs(self) -> float:
        """Sum of absolute values of all entries."""
        return float(np.abs(self._data).sum())

    def is_close(self, other, tol: float = DEFAULT_TOL) -> bool:
        return self.difference(other).sum_abs() < tol

    # ---- engine shortcuts --------------------------------------------------
    def det(self) -> float:
        from .determinant import det

        return det(self)

    def chol(self, out=None) -> "MatrixValue":
        from .cholesky import chol

        return chol(self, out=out)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"


class FixedMatrix(MatrixValue):
    """
    Matrix whose shape is part of its class.

    Do not instantiate directly; use ``fixed_matrix(rows, cols)`` or one of
    the aliases (``Matrix22``, ``Matrix33``, ...).
    """

    ROWS: int = -1
    COLS: int = -1

    def __init__(self, data=None):
        if self.ROWS < 0 or self.COLS < 0:
            raise TypeError("use fixed_matrix(rows, cols) to get a fixed-size class")
        self._data = _coerce_data(data, self.ROWS, self.COLS)

    def new_like(self, array: np.ndarray) -> "FixedMatrix":
        array = np.asarray(array, dtype=float)
        return fixed_matrix(*array.shape)(array)

    def resize(self, rows: int, cols: int) -> None:
        if (rows, cols) != (self.ROWS, self.COLS):
            raise DimensionMismatch(
                f"cannot resize fixed {self.ROWS}x{self.COLS} matrix to {rows}x{cols}"
            )


_FIXED_TYPES: Dict[Tuple[int, int], Type[FixedMatrix]] = {}


def fixed_matrix(rows: int, cols: int) -> Type[FixedMatrix]:
    """Return the fixed-size matrix class for shape (rows, cols)."""
    rows, cols = int(rows), int(cols)
    if rows < 0 or cols < 0:
        raise DimensionMismatch(f"invalid fixed matrix shape {rows}x{cols}")
    cls = _FIXED_TYPES.get((rows, cols))
    if cls is None:
        name = f"FixedMatrix{rows}x{cols}"
        cls = type(
            name,
            (FixedMatrix,),
            {"ROWS": rows, "COLS": cols, "__module__": __name__, "__qualname__": name},
        )
        # first writer wins if two threads race on a new shape
        cls = _FIXED_TYPES.setdefault((rows, cols), cls)
    return cls


class DynamicMatrix(MatrixValue):
    """Matrix whose shape is chosen at construction and may be resized."""

    def __init__(self, rows: int = 0, cols: int = 0, data=None):
        if rows < 0 or cols < 0:
            raise DimensionMismatch(f"invalid matrix shape {rows}x{cols}")
        self._data = _coerce_data(data, rows, cols)

    @classmethod
    def from_matrix(cls, other) -> "DynamicMatrix":
        arr = as_array(other)
        return cls(arr.shape[0], arr.shape[1], arr)

    def new_like(self, array: np.ndarray) -> "DynamicMatrix":
        array = np.asarray(array, dtype=float)
        return DynamicMatrix(array.shape[0], array.shape[1], array)

    def resize(self, rows: int, cols: int) -> None:
        """Reshape in place, keeping the overlapping top-left block."""
        if rows < 0 or cols < 0:
            raise DimensionMismatch(f"invalid matrix shape {rows}x{cols}")
        if (rows, cols) == self.shape:
            return
        new = np.zeros((rows, cols), dtype=float)
        r = min(rows, self.rows())
        c = min(cols, self.cols())
        new[:r, :c] = self._data[:r, :c]
        self._data = new


Matrix22 = fixed_matrix(2, 2)
Matrix33 = fixed_matrix(3, 3)
Matrix44 = fixed_matrix(4, 4)
Matrix66 = fixed_matrix(6, 6)


def zeros(rows: int, cols: int, fixed: bool = False) -> MatrixValue:
    if fixed:
        return fixed_matrix(rows, cols)()
    return DynamicMatrix(rows, cols)


def identity(n: int, fixed: bool = False) -> MatrixValue:
    if fixed:
        return fixed_matrix(n, n)(np.eye(n))
    return DynamicMatrix(n, n, np.eye(n))


def as_array(m) -> np.ndarray:
    """
    Read any matrix value into a fresh (rows, cols) ndarray.

    Accepts ``MatrixValue`` instances and any object exposing ``rows()``,
    ``cols()`` and ``get(i, j)``.
    """
    if isinstance(m, MatrixValue):
        return m.to_array()
    if all(callable(getattr(m, name, None)) for name in ("rows", "cols", "get")):
        r, c = int(m.rows()), int(m.cols())
        out = np.empty((r, c), dtype=float)
        for i in range(r):
            for j in range(c):
                out[i, j] = m.get(i, j)
        return out
    raise TypeError(f"expected a matrix value, got {type(m).__name__}")


def result_like(template, array: np.ndarray) -> MatrixValue:
    """Wrap an engine result in the representation of ``template``."""
    new_like = getattr(template, "new_like", None)
    if callable(new_like):
        return new_like(array)
    return DynamicMatrix(array.shape[0], array.shape[1], array)
