"""
Linear algebra operations on pylinalg containers.

Public API:
    cholesky(X)            - Cholesky factor of a symmetric positive definite matrix
    rank(m, tol)           - Numerical rank from singular values
    lower_triangular(X)    - Lower triangle of a square matrix
    upper_triangular(X)    - Upper triangle of a square matrix
    kron(a, b)             - Kronecker product
    cross(a, b)            - Cross product of 3-vectors over a ring
    ranks(x)               - Tie-averaged ranks
    axpy(a, x, y)          - y += a * x in place
    linspace(a, b, length) - Evenly spaced vector
    copy(t)                - Copy of a container
"""

from pylinalg.linalg._basic import axpy, copy, linspace
from pylinalg.linalg._cross import cross
from pylinalg.linalg._kron import kron
from pylinalg.linalg._ranks import ranks
from pylinalg.linalg._triangular import lower_triangular, upper_triangular
from pylinalg.linalg.solvers import cholesky, rank

__all__ = [
    "cholesky",
    "rank",
    "lower_triangular",
    "upper_triangular",
    "kron",
    "cross",
    "ranks",
    "axpy",
    "linspace",
    "copy",
]
