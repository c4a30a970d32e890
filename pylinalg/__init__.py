"""
pylinalg: a small dense/sparse linear algebra kernel for Python.

Generic over element type through explicit algebraic capabilities
(Semiring, Ring, Ordering), with Cholesky and SVD delegated to LAPACK
(SciPy) or, optionally, PyTorch on a GPU.

Submodules:
    core: protocols, algebra capabilities, exceptions, validation
    matrix: DenseMatrix, DenseVector, SparseMatrix
    linalg: cholesky, rank, triangular extraction, kron, cross, ranks
"""

__version__ = "0.1.0"

from pylinalg import core
from pylinalg import matrix
from pylinalg import linalg
from pylinalg.matrix import DenseMatrix, DenseVector, SparseMatrix
from pylinalg.linalg import (
    axpy,
    cholesky,
    copy,
    cross,
    kron,
    linspace,
    lower_triangular,
    rank,
    ranks,
    upper_triangular,
)

__all__ = [
    "__version__",
    "core",
    "matrix",
    "linalg",
    "DenseMatrix",
    "DenseVector",
    "SparseMatrix",
    "axpy",
    "cholesky",
    "copy",
    "cross",
    "kron",
    "linspace",
    "lower_triangular",
    "rank",
    "ranks",
    "upper_triangular",
]
