"""
Backend-dependent operations: Cholesky decomposition and numerical rank.

Both validate their input eagerly, hand the numeric kernel to a
LinalgBackend, and interpret what comes back. The backend is chosen with
``backend=`` ('auto', 'cpu', 'gpu', or a LinalgBackend instance).
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from pylinalg.core.exceptions import BackendContractError, NotConvergedError
from pylinalg.core.protocols import LinalgBackend
from pylinalg.core.validation import require_non_empty, require_real, require_symmetric
from pylinalg.linalg._triangular import lower_triangular
from pylinalg.linalg.backends import BackendChoice, get_backend
from pylinalg.matrix import DenseMatrix, as_dense_matrix, as_matrix


def cholesky(
    X: Any,
    *,
    backend: BackendChoice | LinalgBackend = 'auto',
) -> DenseMatrix:
    """
    Cholesky factor L of a real symmetric positive definite matrix.

    Returns L, lower triangular, with X = L @ L.T. Entries above the
    diagonal are zero.

    The symmetry check is exact and O(n^2); it runs before the
    factorization because LAPACK only reads one triangle and would not
    notice an asymmetric input.

    Parameters
    ----------
    X : matrix-like
        Square, symmetric, non-empty matrix.
    backend : str or LinalgBackend
        'auto', 'cpu', 'gpu', or a backend instance.

    Returns
    -------
    DenseMatrix of float64, shape (N, N).

    Raises
    ------
    EmptyMatrixError
        If X has no rows or no columns.
    NotSquareError
        If X is not square.
    NotSymmetricError
        If X[i, j] != X[j, i] for some pair.
    ValidationError
        If X holds complex values.
    NotConvergedError
        If X is not positive definite.
    BackendContractError
        If the backend rejects an argument. This indicates a bug, not bad
        input.
    """
    mat = as_matrix(X, "X")
    require_non_empty(mat, "X")
    require_real(mat, "X")
    require_symmetric(mat, "X")

    be = get_backend(backend)

    # potrf only reads and writes the lower triangle; the upper stays zero
    A = lower_triangular(mat)
    if A.dtype != np.float64:
        A = DenseMatrix(A.data.astype(np.float64, order='F'))

    n = mat.rows
    factor, info = be.potrf('L', n, A.data, max(1, n))

    if info < 0:
        raise BackendContractError(
            f"{be.name}: potrf rejected argument {-info}",
            routine='potrf',
            argument=-info,
        )

    if info > 0:
        raise NotConvergedError(
            f"X: not positive definite, leading minor of order {info} "
            f"is not positive definite",
            reason='not_positive_definite',
            leading_minor=info,
        )

    return DenseMatrix(factor)


def rank(
    m: Any,
    tol: float | None = None,
    *,
    backend: BackendChoice | LinalgBackend = 'auto',
) -> int:
    """
    Numerical rank of a matrix from its singular values.

    Counts singular values strictly greater than tol.

    Parameters
    ----------
    m : matrix-like
        Matrix of any shape.
    tol : float, optional
        Threshold for singular values. Defaults to
        max(rows, cols) * eps * max(s), where eps is twice the backend's
        machine epsilon (LAPACK dlamch('e')), i.e. numpy's finfo.eps for
        float64.
    backend : str or LinalgBackend
        'auto', 'cpu', 'gpu', or a backend instance.

    Returns
    -------
    int
        Number of singular values above the tolerance. A matrix with an
        empty dimension has rank 0.

    Raises
    ------
    ValidationError
        If m holds complex values.
    """
    mat = as_dense_matrix(m, "m")
    require_real(mat, "m")
    if mat.rows == 0 or mat.cols == 0:
        return 0

    if tol is not None and tol < 0:
        warnings.warn(
            f"rank: negative tol={tol} counts every singular value",
            RuntimeWarning,
            stacklevel=2,
        )

    be = get_backend(backend)
    _, s, _ = be.svd(np.asarray(mat.data, dtype=np.float64))

    if tol is None:
        eps = 2.0 * be.machine_epsilon()
        tol = max(mat.cols, mat.rows) * eps * float(np.max(s))

    return int(np.count_nonzero(s > tol))
