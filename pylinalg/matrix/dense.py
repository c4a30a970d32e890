"""
Dense containers backed by NumPy arrays.

DenseMatrix stores its elements column-major (Fortran order), the layout the
LAPACK backend expects, so a factorization can work on ``data`` directly.
Any numpy dtype is accepted, including object dtype, which lets the generic
operations run over Fraction, Decimal, or other Python numbers.

Factories always allocate; nothing here aliases caller-owned memory unless
the constructor is called directly with an array the caller gives up.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.validation import check_ndim


def _unwrap(value: Any) -> Any:
    if isinstance(value, (DenseMatrix, DenseVector)):
        return value.data
    return value


def _wrap(result: Any) -> Any:
    if isinstance(result, np.ndarray):
        if result.ndim == 2:
            return DenseMatrix(result.copy(order='F'))
        if result.ndim == 1:
            return DenseVector(result.copy())
    return result


class DenseMatrix:
    """
    Dense 2D container.

    Element access is ``m[i, j]``. Slicing returns a fresh container, and
    slice assignment ``m[r0:r1, c0:c1] = block`` writes into this matrix.

    Construction:
        DenseMatrix.zeros(rows, cols)
        DenseMatrix.eye(n)
        DenseMatrix.tabulate(rows, cols, lambda i, j: ...)
        DenseMatrix.from_array([[1, 2], [3, 4]])
    """

    __slots__ = ('_data',)

    # Binary operators with numpy scalars dispatch to our methods
    __array_ufunc__ = None

    def __init__(self, data: NDArray[Any]):
        """
        Wrap a 2D array. The array is used as-is when it is already
        Fortran-ordered; otherwise a column-major copy is taken.
        """
        data = np.asarray(data)
        check_ndim(data, 2, "data")
        self._data = np.asfortranarray(data)

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: DTypeLike = np.float64) -> DenseMatrix:
        """Matrix filled with the dtype's default value."""
        return cls(np.zeros((rows, cols), dtype=dtype, order='F'))

    @classmethod
    def eye(cls, n: int, dtype: DTypeLike = np.float64) -> DenseMatrix:
        return cls(np.asfortranarray(np.eye(n, dtype=dtype)))

    @classmethod
    def tabulate(
        cls,
        rows: int,
        cols: int,
        fn: Callable[[int, int], Any],
        dtype: DTypeLike | None = None,
    ) -> DenseMatrix:
        """
        Build a matrix whose (i, j) entry is fn(i, j).

        If dtype is None it is inferred from the produced values.
        """
        if dtype is None:
            values = [[fn(i, j) for j in range(cols)] for i in range(rows)]
            data = np.array(values).reshape(rows, cols)
            return cls(data)

        data = np.empty((rows, cols), dtype=dtype, order='F')
        for j in range(cols):
            for i in range(rows):
                data[i, j] = fn(i, j)
        return cls(data)

    @classmethod
    def from_array(cls, array: Any, dtype: DTypeLike | None = None) -> DenseMatrix:
        """Copy any 2D array-like into a new matrix."""
        return cls(np.array(_unwrap(array), dtype=dtype, order='F', copy=True))

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> NDArray[Any]:
        """The underlying column-major array (not a copy)."""
        return self._data

    @property
    def T(self) -> DenseMatrix:
        return self.transpose()

    def transpose(self) -> DenseMatrix:
        return DenseMatrix(self._data.T.copy(order='F'))

    def copy(self) -> DenseMatrix:
        return DenseMatrix(self._data.copy(order='F'))

    def to_numpy(self) -> NDArray[Any]:
        """Independent ndarray copy of the contents."""
        return self._data.copy()

    def active_items(self) -> Iterator[tuple[tuple[int, int], Any]]:
        """Yield ((i, j), value) for every cell, column by column."""
        data = self._data
        for j in range(data.shape[1]):
            for i in range(data.shape[0]):
                yield (i, j), data[i, j]

    def scale(self, alpha: Any) -> DenseMatrix:
        """Fresh matrix alpha * self."""
        return DenseMatrix(np.multiply(alpha, self._data, order='F'))

    def __getitem__(self, key: Any) -> Any:
        return _wrap(self._data[key])

    def __setitem__(self, key: Any, value: Any) -> None:
        target = self._data[key]
        value = _unwrap(value)
        if isinstance(target, np.ndarray) and isinstance(value, np.ndarray):
            if target.shape != value.shape:
                raise DimensionError(
                    f"cannot assign block of shape {value.shape} "
                    f"into region of shape {target.shape}"
                )
        self._data[key] = value

    def __len__(self) -> int:
        return self.rows

    def __mul__(self, alpha: Any) -> DenseMatrix:
        if isinstance(alpha, (DenseMatrix, DenseVector, np.ndarray)):
            return NotImplemented
        return self.scale(alpha)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Any:
        return _wrap(self._data @ _unwrap(other))

    def __add__(self, other: Any) -> DenseMatrix:
        return _wrap(self._data + _unwrap(other))

    def __sub__(self, other: Any) -> DenseMatrix:
        return _wrap(self._data - _unwrap(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._data == other._data))

    __hash__ = None  # mutable container

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        if dtype is None:
            return self._data.copy() if copy else self._data
        return self._data.astype(dtype)

    def __repr__(self) -> str:
        return f"DenseMatrix(shape={self.shape}, dtype={self.dtype})"


class DenseVector:
    """
    Dense 1D container.

    Construction:
        DenseVector.of(1.0, 0.0, 0.0)
        DenseVector.tabulate(n, lambda i: ...)
        DenseVector.zeros(n)
    """

    __slots__ = ('_data',)

    # Binary operators with numpy scalars dispatch to our methods
    __array_ufunc__ = None

    def __init__(self, data: NDArray[Any]):
        data = np.asarray(data)
        check_ndim(data, 1, "data")
        self._data = data

    @classmethod
    def of(cls, *elements: Any, dtype: DTypeLike | None = None) -> DenseVector:
        """Vector holding exactly the given elements, in order."""
        if dtype is None and any(not np.isscalar(e) for e in elements):
            dtype = object
        return cls(np.array(elements, dtype=dtype).reshape(len(elements)))

    @classmethod
    def zeros(cls, n: int, dtype: DTypeLike = np.float64) -> DenseVector:
        return cls(np.zeros(n, dtype=dtype))

    @classmethod
    def tabulate(
        cls,
        n: int,
        fn: Callable[[int], Any],
        dtype: DTypeLike | None = None,
    ) -> DenseVector:
        """Build a vector whose i-th entry is fn(i)."""
        if dtype is None:
            return cls(np.array([fn(i) for i in range(n)]).reshape(n))
        data = np.empty(n, dtype=dtype)
        for i in range(n):
            data[i] = fn(i)
        return cls(data)

    @classmethod
    def from_array(cls, array: Any, dtype: DTypeLike | None = None) -> DenseVector:
        return cls(np.array(_unwrap(array), dtype=dtype, copy=True))

    @property
    def length(self) -> int:
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> NDArray[Any]:
        return self._data

    def copy(self) -> DenseVector:
        return DenseVector(self._data.copy())

    def to_numpy(self) -> NDArray[Any]:
        return self._data.copy()

    def argsort(self) -> NDArray[np.intp]:
        """Stable ascending argsort: ties keep their original index order."""
        return np.argsort(self._data, kind='stable')

    def active_items(self) -> Iterator[tuple[int, Any]]:
        for i in range(self._data.shape[0]):
            yield i, self._data[i]

    def scale(self, alpha: Any) -> DenseVector:
        return DenseVector(np.multiply(alpha, self._data))

    def __getitem__(self, key: Any) -> Any:
        return _wrap(self._data[key])

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[key] = _unwrap(value)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __mul__(self, alpha: Any) -> DenseVector:
        if isinstance(alpha, (DenseMatrix, DenseVector, np.ndarray)):
            return NotImplemented
        return self.scale(alpha)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseVector):
            return NotImplemented
        return self.length == other.length and bool(np.all(self._data == other._data))

    __hash__ = None

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        if dtype is None:
            return self._data.copy() if copy else self._data
        return self._data.astype(dtype)

    def __repr__(self) -> str:
        return f"DenseVector(length={self.length}, dtype={self.dtype})"
