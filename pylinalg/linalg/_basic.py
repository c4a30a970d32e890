"""Small constructors and in-place helpers."""

from __future__ import annotations

import copy as _copy
from typing import Any, TypeVar

import numpy as np

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_same_shape
from pylinalg.matrix import DenseMatrix, DenseVector, SparseMatrix

T = TypeVar('T')


def _check_castable(a: Any, x_dtype: np.dtype, y_dtype: np.dtype) -> None:
    result = np.result_type(np.asarray(a).dtype, x_dtype)
    if not np.can_cast(result, y_dtype, 'same_kind'):
        raise ValidationError(
            f"y: cannot store a * x of dtype {result} in y of dtype {y_dtype}"
        )


def axpy(a: Any, x: Any, y: DenseMatrix | DenseVector | np.ndarray) -> None:
    """
    y += a * x, in place.

    Only active entries of x are visited, so a sparse x costs nnz(x)
    updates. y is the only argument written to.

    Raises:
        DimensionMismatchError: If x and y have different shapes
        ValidationError: If y is not a writable dense container,
            or a * x cannot be stored in y's dtype
    """
    if isinstance(y, (DenseMatrix, DenseVector)):
        target = y.data
    elif isinstance(y, np.ndarray):
        target = y
    else:
        raise ValidationError(
            f"y: expected DenseMatrix, DenseVector or ndarray, got {type(y).__name__}"
        )

    if isinstance(x, SparseMatrix):
        check_same_shape(target.shape, x.shape, ("y", "x"))
        _check_castable(a, x.dtype, target.dtype)
        for (i, j), v in x.active_items():
            target[i, j] += a * v
        return

    if isinstance(x, (DenseMatrix, DenseVector)):
        x = x.data
    x = np.asarray(x)
    check_same_shape(target.shape, x.shape, ("y", "x"))
    _check_castable(a, x.dtype, target.dtype)
    target += a * x


def linspace(a: float, b: float, length: int = 100) -> DenseVector:
    """
    length evenly spaced values from a to b, both ends included.

    Raises:
        ValidationError: If length < 2
    """
    if length < 2:
        raise ValidationError(f"length: requires at least 2 points, got {length}")
    increment = (b - a) / (length - 1)
    return DenseVector.tabulate(length, lambda i: a + increment * i, dtype=np.float64)


def copy(t: T) -> T:
    """Independent copy of a container (or anything deep-copyable)."""
    if isinstance(t, (DenseMatrix, DenseVector, SparseMatrix, np.ndarray)):
        return t.copy()
    return _copy.deepcopy(t)
