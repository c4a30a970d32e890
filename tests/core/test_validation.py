"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - require_non_empty / require_square / require_symmetric / require_real
    - check_ndim / check_length / check_same_shape
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    EmptyMatrixError,
    NotSquareError,
    NotSymmetricError,
    ValidationError,
)
from pylinalg.core.validation import (
    check_length,
    check_ndim,
    check_same_shape,
    is_numeric_dtype,
    require_non_empty,
    require_real,
    require_square,
    require_symmetric,
)
from pylinalg.matrix import DenseMatrix, SparseMatrix


class CountingMatrix:
    """Matrix-protocol wrapper that counts element reads."""

    def __init__(self, array):
        self._data = np.asarray(array)
        self.reads = 0

    @property
    def rows(self):
        return self._data.shape[0]

    @property
    def cols(self):
        return self._data.shape[1]

    @property
    def dtype(self):
        return self._data.dtype

    def __getitem__(self, key):
        self.reads += 1
        return self._data[key]

    def active_items(self):
        for (i, j), v in np.ndenumerate(self._data):
            yield (i, j), v


# ═══════════════════════════════════════════════════════════════════════
# require_non_empty
# ═══════════════════════════════════════════════════════════════════════


class TestRequireNonEmpty:

    def test_accepts_1x1(self):
        require_non_empty(DenseMatrix.zeros(1, 1))

    @pytest.mark.parametrize("shape", [(0, 0), (0, 3), (3, 0)])
    def test_rejects_empty(self, shape):
        with pytest.raises(EmptyMatrixError, match="empty") as exc_info:
            require_non_empty(DenseMatrix.zeros(*shape), "X")
        assert exc_info.value.shape == shape

    def test_name_in_message(self):
        with pytest.raises(EmptyMatrixError, match="weights"):
            require_non_empty(DenseMatrix.zeros(0, 2), "weights")


# ═══════════════════════════════════════════════════════════════════════
# require_square
# ═══════════════════════════════════════════════════════════════════════


class TestRequireSquare:

    def test_accepts_square(self):
        require_square(DenseMatrix.zeros(3, 3))

    def test_accepts_empty_square(self):
        require_square(DenseMatrix.zeros(0, 0))

    def test_rejects_rectangular(self):
        with pytest.raises(NotSquareError, match="2x3") as exc_info:
            require_square(DenseMatrix.zeros(2, 3))
        assert exc_info.value.shape == (2, 3)


# ═══════════════════════════════════════════════════════════════════════
# require_symmetric
# ═══════════════════════════════════════════════════════════════════════


class TestRequireSymmetric:

    def test_accepts_symmetric(self, spd_matrix):
        require_symmetric(DenseMatrix.from_array(spd_matrix))

    def test_accepts_sparse_symmetric(self):
        require_symmetric(SparseMatrix.from_array([[2.0, 1.0], [1.0, 0.0]]))

    def test_rectangular_raises_not_square_first(self):
        with pytest.raises(NotSquareError):
            require_symmetric(DenseMatrix.zeros(2, 3))

    def test_rejects_asymmetric(self):
        X = DenseMatrix.from_array([[1.0, 2.0], [3.0, 1.0]])
        with pytest.raises(NotSymmetricError) as exc_info:
            require_symmetric(X, "X")
        assert exc_info.value.index == (1, 0)

    def test_reports_first_mismatch_in_scan_order(self):
        """Scan is row-major over the strict lower triangle."""
        X = np.eye(4)
        X[2, 1] = 5.0
        X[3, 0] = 7.0
        with pytest.raises(NotSymmetricError) as exc_info:
            require_symmetric(DenseMatrix.from_array(X))
        assert exc_info.value.index == (2, 1)

    def test_exact_comparison(self):
        """No tolerance: a difference of one ulp is asymmetric."""
        X = np.array([[1.0, 0.1], [np.nextafter(0.1, 1.0), 1.0]])
        with pytest.raises(NotSymmetricError):
            require_symmetric(DenseMatrix.from_array(X))

    def test_short_circuits(self):
        X = np.zeros((10, 10))
        X[1, 0] = 1.0
        counting = CountingMatrix(X)
        with pytest.raises(NotSymmetricError):
            require_symmetric(counting)
        # Only the (1, 0) / (0, 1) pair is compared, plus the reads for the message
        assert counting.reads <= 4

    def test_does_not_modify_input(self):
        X = np.array([[1.0, 2.0], [2.0, 1.0]])
        mat = DenseMatrix.from_array(X)
        require_symmetric(mat)
        np.testing.assert_array_equal(mat.data, X)


# ═══════════════════════════════════════════════════════════════════════
# require_real
# ═══════════════════════════════════════════════════════════════════════


class TestRequireReal:

    @pytest.mark.parametrize("dtype", [np.float64, np.int32, np.bool_])
    def test_accepts_real_dtypes(self, dtype):
        require_real(DenseMatrix.eye(2, dtype=dtype))

    def test_accepts_fractions(self):
        require_real(DenseMatrix.from_array([[Fraction(1, 2), 1]], dtype=object))

    @pytest.mark.parametrize("dtype", [np.complex64, np.complex128])
    def test_rejects_complex_dtype(self, dtype):
        with pytest.raises(ValidationError, match="X: complex dtype"):
            require_real(DenseMatrix.eye(2, dtype=dtype), "X")

    def test_rejects_complex_object_element(self):
        X = DenseMatrix.from_array([[1.0, 2j]], dtype=object)
        with pytest.raises(ValidationError, match="element \\(0, 1\\)"):
            require_real(X, "X")

    def test_rejects_complex_sparse(self):
        with pytest.raises(ValidationError):
            require_real(SparseMatrix.from_array(np.eye(2) * 1j))


# ═══════════════════════════════════════════════════════════════════════
# Array-level checks
# ═══════════════════════════════════════════════════════════════════════


class TestArrayChecks:

    def test_check_ndim_passes(self):
        check_ndim(np.zeros((2, 2)), 2, "X")

    def test_check_ndim_fails(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_ndim(np.zeros(3), 2, "X")

    def test_check_length_passes(self):
        check_length(3, 3, "a")

    def test_check_length_fails(self):
        with pytest.raises(DimensionMismatchError, match="expected length 3, got 4") as exc_info:
            check_length(4, 3, "a")
        assert exc_info.value.actual == 4
        assert exc_info.value.expected == 3

    def test_check_same_shape_fails(self):
        with pytest.raises(DimensionMismatchError, match="y=\\(2, 2\\), x=\\(3, 2\\)"):
            check_same_shape((2, 2), (3, 2), ("y", "x"))

    @pytest.mark.parametrize("dtype, expected", [
        (np.float64, True),
        (np.int32, True),
        (np.complex128, True),
        (np.bool_, True),
        (np.dtype('U3'), False),
        (object, False),
    ])
    def test_is_numeric_dtype(self, dtype, expected):
        assert is_numeric_dtype(np.dtype(dtype)) is expected
