"""
Core protocols for pylinalg.

These define structural interfaces that containers and backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
any matrix-like object exposing the right members can be passed in, and so
tests can substitute a fake factorization backend without subclassing.

Design Principles:
    - Minimal contracts: prescribe only what the operations read
    - Read-only: nothing here requires a container to be mutable
    - Representation-agnostic: active_items() hides dense vs sparse storage
"""

from typing import Any, Iterator, Protocol, TypeVar, runtime_checkable

import numpy as np
from numpy.typing import NDArray

V = TypeVar('V')  # Element type


@runtime_checkable
class Matrix(Protocol[V]):
    """
    Minimal protocol for a 2D container.

    Dense and sparse containers both implement this protocol. The operations
    in pylinalg.linalg read through it and never write to their inputs.
    """

    @property
    def rows(self) -> int:
        """Number of rows (>= 0)."""
        ...

    @property
    def cols(self) -> int:
        """Number of columns (>= 0)."""
        ...

    @property
    def dtype(self) -> np.dtype:
        """Element dtype, used to allocate typed results."""
        ...

    def __getitem__(self, key: tuple[int, int]) -> V:
        """Element at (i, j)."""
        ...

    def active_items(self) -> Iterator[tuple[tuple[int, int], V]]:
        """
        Yield ((row, col), value) for every entry considered non-default.

        A dense container yields every cell. A sparse container yields only
        its stored entries. Callers must produce the same result either way,
        which holds as long as skipped entries are the additive zero.
        """
        ...


@runtime_checkable
class Vector(Protocol[V]):
    """Minimal protocol for a 1D container."""

    @property
    def length(self) -> int:
        """Number of elements."""
        ...

    @property
    def dtype(self) -> np.dtype:
        ...

    def __getitem__(self, i: int) -> V:
        ...


@runtime_checkable
class LinalgBackend(Protocol):
    """
    Protocol for the dense factorization backend.

    The backend performs the numerical kernels; pylinalg validates inputs
    and interprets results. Backends are stateless apart from device
    configuration fixed at construction time.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{library}'
        Examples: 'cpu_lapack', 'gpu_torch_fp64'
        """
        ...

    def potrf(
        self,
        uplo: str,
        n: int,
        a: NDArray[Any],
        lda: int,
    ) -> tuple[NDArray[Any], int]:
        """
        Cholesky factorization of the n x n matrix held in a.

        Args:
            uplo: 'L' to read and write the lower triangle, 'U' for upper
            n: Order of the matrix
            a: Column-major n x n buffer
            lda: Leading dimension of a, at least max(1, n)

        Returns:
            (factor, info). info < 0: argument -info was illegal.
            info == 0: success. info > 0: the leading minor of that order
            is not positive definite.
        """
        ...

    def svd(
        self,
        m: NDArray[Any],
    ) -> tuple[NDArray[Any], NDArray[Any], NDArray[Any]]:
        """
        Singular value decomposition m = u @ diag(s) @ vt.

        Returns:
            (u, s, vt) with s non-negative and in descending order.
        """
        ...

    def machine_epsilon(self) -> float:
        """Relative machine precision of the working dtype (LAPACK dlamch('e'))."""
        ...
