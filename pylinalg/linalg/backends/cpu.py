"""
CPU reference backend: LAPACK through SciPy.

potrf is called through get_lapack_funcs so the routine matching the
buffer's dtype is used (dpotrf for float64).
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import svd as scipy_svd
from scipy.linalg.lapack import dlamch, get_lapack_funcs


def check_potrf_args(uplo: str, n: int, a: NDArray[Any], lda: int) -> int:
    """
    Argument checks LAPACK's xPOTRF performs, in its order.

    Returns:
        0 if all arguments are legal, otherwise -k for the k-th argument
        (1: uplo, 2: n, 3: a, 4: lda).
    """
    if uplo not in ('L', 'U'):
        return -1
    if n < 0:
        return -2
    if a.shape != (n, n):
        return -3
    if lda < max(1, n):
        return -4
    return 0


class CPULinalgBackend:
    """CPU reference backend for factorizations."""

    @property
    def name(self) -> str:
        return 'cpu_lapack'

    def potrf(
        self,
        uplo: str,
        n: int,
        a: NDArray[Any],
        lda: int,
    ) -> tuple[NDArray[Any], int]:
        """
        Cholesky factorization via LAPACK xPOTRF.

        Only the triangle selected by uplo is read and written; the other
        triangle of the returned factor is left as it was in a.
        """
        info = check_potrf_args(uplo, n, a, lda)
        if info < 0:
            return a, info

        (potrf,) = get_lapack_funcs(('potrf',), (a,))
        factor, info = potrf(a, lower=(uplo == 'L'), clean=False, overwrite_a=False)
        return np.asfortranarray(factor), int(info)

    def svd(
        self,
        m: NDArray[Any],
    ) -> tuple[NDArray[Any], NDArray[Any], NDArray[Any]]:
        """Thin SVD via LAPACK xGESDD."""
        u, s, vt = scipy_svd(m, full_matrices=False, lapack_driver='gesdd')
        return u, s, vt

    def machine_epsilon(self) -> float:
        """LAPACK dlamch('e'): relative machine precision for float64."""
        return float(dlamch('e'))
