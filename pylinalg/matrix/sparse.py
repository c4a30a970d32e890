"""
Compressed sparse column container backed by SciPy.

Only stored entries are reported by active_items(), so operations that
iterate active entries (kron, axpy) do work proportional to nnz.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import numpy as np
import scipy.sparse as sp
from numpy.typing import DTypeLike, NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.matrix.dense import DenseMatrix


class SparseMatrix:
    """
    Sparse 2D container in CSC layout.

    Construction:
        SparseMatrix.from_scipy(scipy_sparse)
        SparseMatrix.from_array(dense_array_like)
        SparseMatrix.from_entries(rows, cols, [((i, j), v), ...])
    """

    __slots__ = ('_csc',)

    def __init__(self, csc: sp.csc_array):
        csc = sp.csc_array(csc)
        csc.sum_duplicates()
        csc.sort_indices()
        self._csc = csc

    @classmethod
    def from_scipy(cls, matrix: Any) -> SparseMatrix:
        if not sp.issparse(matrix):
            raise ValidationError(
                f"expected a scipy sparse matrix, got {type(matrix).__name__}"
            )
        return cls(sp.csc_array(matrix, copy=True))

    @classmethod
    def from_array(cls, array: Any, dtype: DTypeLike | None = None) -> SparseMatrix:
        data = np.asarray(array, dtype=dtype)
        if data.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {data.ndim}D with shape {data.shape}"
            )
        return cls(sp.csc_array(data))

    @classmethod
    def from_entries(
        cls,
        rows: int,
        cols: int,
        entries: Iterable[tuple[tuple[int, int], Any]],
        dtype: DTypeLike = np.float64,
    ) -> SparseMatrix:
        """Build from ((i, j), value) pairs. Repeated positions are summed."""
        entries = list(entries)
        row_idx = np.array([ij[0] for ij, _ in entries], dtype=np.intp)
        col_idx = np.array([ij[1] for ij, _ in entries], dtype=np.intp)
        values = np.array([v for _, v in entries], dtype=dtype)
        coo = sp.coo_array((values, (row_idx, col_idx)), shape=(rows, cols))
        return cls(coo.tocsc())

    @property
    def rows(self) -> int:
        return self._csc.shape[0]

    @property
    def cols(self) -> int:
        return self._csc.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._csc.shape

    @property
    def dtype(self) -> np.dtype:
        return self._csc.dtype

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return self._csc.nnz

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = key
        if i < 0:
            i += self.rows
        if j < 0:
            j += self.cols
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index ({key[0]}, {key[1]}) out of bounds for shape {self.shape}")
        csc = self._csc
        start, stop = csc.indptr[j], csc.indptr[j + 1]
        pos = start + np.searchsorted(csc.indices[start:stop], i)
        if pos < stop and csc.indices[pos] == i:
            return csc.data[pos]
        return csc.dtype.type(0)

    def active_items(self) -> Iterator[tuple[tuple[int, int], Any]]:
        """Yield ((i, j), value) for stored entries, column by column."""
        csc = self._csc
        for j in range(csc.shape[1]):
            for k in range(csc.indptr[j], csc.indptr[j + 1]):
                yield (int(csc.indices[k]), j), csc.data[k]

    def scale(self, alpha: Any) -> DenseMatrix:
        """Dense matrix alpha * self."""
        return self.to_dense().scale(alpha)

    def to_dense(self) -> DenseMatrix:
        return DenseMatrix(self._csc.toarray(order='F'))

    def to_scipy(self) -> sp.csc_array:
        return self._csc.copy()

    def to_numpy(self) -> NDArray[Any]:
        return self._csc.toarray()

    def copy(self) -> SparseMatrix:
        return SparseMatrix(self._csc.copy())

    @property
    def T(self) -> SparseMatrix:
        return SparseMatrix(self._csc.T.tocsc())

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        arr = self._csc.toarray()
        return arr if dtype is None else arr.astype(dtype)

    def __repr__(self) -> str:
        return f"SparseMatrix(shape={self.shape}, nnz={self.nnz}, dtype={self.dtype})"
