"""Kronecker product."""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import DTypeLike

from pylinalg.matrix import DenseMatrix, as_dense_matrix, as_matrix


def _scale(alpha: Any, b: Any) -> DenseMatrix:
    return b.scale(alpha)


def kron(
    a: Any,
    b: Any,
    *,
    multiply: Callable[[Any, Any], DenseMatrix] | None = None,
    dtype: DTypeLike | None = None,
) -> DenseMatrix:
    """
    Kronecker product a ⊗ b.

    The result has shape (a.rows * b.rows, a.cols * b.cols). For each
    active entry (r, c, av) of a, the block at rows
    [r * b.rows, (r + 1) * b.rows) and columns [c * b.cols, (c + 1) * b.cols)
    is set to av * b. Blocks are disjoint, so only active entries of a are
    visited and the rest of the result keeps its zero fill.

    Parameters
    ----------
    a : matrix-like
        Left operand. Dense or sparse; a sparse a only costs nnz(a) blocks.
    b : matrix-like
        Right operand. Must support scalar multiplication into a
        DenseMatrix (b.scale(alpha)), or provide ``multiply``.
    multiply : callable, optional
        multiply(av, b) -> DenseMatrix. Defaults to b.scale(av).
    dtype : dtype, optional
        Element type of the result. Defaults to the promotion of a's and
        b's dtypes.

    Returns
    -------
    DenseMatrix
    """
    a = as_matrix(a, "a")
    if not hasattr(b, 'scale') and multiply is None:
        b = as_dense_matrix(b, "b")
    else:
        b = as_matrix(b, "b")

    if multiply is None:
        multiply = _scale
    if dtype is None:
        dtype = np.result_type(a.dtype, b.dtype)

    br, bc = b.rows, b.cols
    result = DenseMatrix.zeros(a.rows * br, a.cols * bc, dtype=dtype)
    for (r, c), av in a.active_items():
        result[r * br:(r + 1) * br, c * bc:(c + 1) * bc] = multiply(av, b)
    return result
