"""
Coercion of array-likes into pylinalg containers.

Public operations accept containers, NumPy arrays, nested lists and SciPy
sparse matrices. These helpers normalise the input once at the boundary.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import scipy.sparse as sp

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import Matrix
from pylinalg.core.validation import check_ndim, is_numeric_dtype
from pylinalg.matrix.dense import DenseMatrix, DenseVector
from pylinalg.matrix.sparse import SparseMatrix


def _to_array(x: Any, name: str, numeric: bool = True) -> np.ndarray:
    try:
        result = np.asarray(x)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if numeric and not (is_numeric_dtype(result.dtype) or result.dtype == object):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )
    return result


def as_matrix(x: Any, name: str = "matrix") -> Matrix:
    """
    Return x as a Matrix.

    Containers and other objects satisfying the Matrix protocol pass
    through unchanged; SciPy sparse input becomes a SparseMatrix; anything
    else is copied into a DenseMatrix.

    Raises:
        ValidationError: If x cannot be converted to a numeric array
        DimensionError: If x is not 2-dimensional
    """
    if isinstance(x, (DenseMatrix, SparseMatrix)):
        return x
    if sp.issparse(x):
        return SparseMatrix.from_scipy(x)
    if isinstance(x, Matrix):
        return x

    array = _to_array(x, name)
    check_ndim(array, 2, name)
    return DenseMatrix.from_array(array)


def as_dense_matrix(x: Any, name: str = "matrix") -> DenseMatrix:
    """Return x as a DenseMatrix, densifying sparse input."""
    if isinstance(x, DenseMatrix):
        return x
    if isinstance(x, SparseMatrix):
        return x.to_dense()
    if sp.issparse(x):
        return DenseMatrix(x.toarray(order='F'))

    array = _to_array(x, name)
    check_ndim(array, 2, name)
    return DenseMatrix.from_array(array)


def as_vector(x: Any, name: str = "vector", numeric: bool = True) -> DenseVector:
    """
    Return x as a DenseVector.

    With numeric=False any dtype is accepted (strings, dates), for
    operations that only compare elements.

    Raises:
        ValidationError: If x cannot be converted to a numeric array
        DimensionError: If x is not 1-dimensional
    """
    if isinstance(x, DenseVector):
        return x

    array = _to_array(x, name, numeric=numeric)
    check_ndim(array, 1, name)
    return DenseVector.from_array(array)
