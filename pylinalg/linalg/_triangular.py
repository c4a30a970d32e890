"""
Triangular extraction.

Copies one triangle of a square matrix into a fresh DenseMatrix and fills
the other with the semiring zero. No symmetry check is performed; the
opposite triangle of the input is simply not read.
"""

from __future__ import annotations

from typing import Any

from pylinalg.core.algebra import Semiring, semiring_for
from pylinalg.core.validation import require_square
from pylinalg.matrix import DenseMatrix, as_matrix


def lower_triangular(X: Any, *, semiring: Semiring | None = None) -> DenseMatrix:
    """
    Lower triangular portion of a square matrix.

    Parameters
    ----------
    X : matrix-like
        Square N x N input. Entries with j <= i are copied.
    semiring : Semiring, optional
        Supplies the zero written above the diagonal. Defaults to the
        semiring for X's dtype.

    Returns
    -------
    DenseMatrix of shape (N, N) and X's dtype.

    Raises
    ------
    NotSquareError
        If X is not square.
    """
    return _extract(X, semiring, lower=True)


def upper_triangular(X: Any, *, semiring: Semiring | None = None) -> DenseMatrix:
    """
    Upper triangular portion of a square matrix.

    Entries with j >= i are copied; the rest are the semiring zero.
    See lower_triangular for parameters.
    """
    return _extract(X, semiring, lower=False)


def _extract(X: Any, semiring: Semiring | None, lower: bool) -> DenseMatrix:
    mat = as_matrix(X, "X")
    require_square(mat, "X")

    if semiring is None:
        semiring = semiring_for(mat.dtype)
    zero = semiring.zero
    n = mat.rows

    if lower:
        return DenseMatrix.tabulate(
            n, n, lambda i, j: mat[i, j] if j <= i else zero, dtype=mat.dtype
        )
    return DenseMatrix.tabulate(
        n, n, lambda i, j: mat[i, j] if j >= i else zero, dtype=mat.dtype
    )
