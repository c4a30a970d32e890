"""
Matrix and vector containers.

    DenseMatrix   - column-major dense matrix over any numpy dtype
    DenseVector   - dense vector
    SparseMatrix  - CSC sparse matrix (SciPy), iterates stored entries only
    as_matrix, as_dense_matrix, as_vector - boundary coercion helpers
"""

from pylinalg.matrix.dense import DenseMatrix, DenseVector
from pylinalg.matrix.sparse import SparseMatrix
from pylinalg.matrix._convert import as_matrix, as_dense_matrix, as_vector

__all__ = [
    "DenseMatrix",
    "DenseVector",
    "SparseMatrix",
    "as_matrix",
    "as_dense_matrix",
    "as_vector",
]
