"""
Tests for DenseMatrix and DenseVector.

Validates:
    - Factories (zeros, eye, tabulate, from_array, of)
    - Column-major storage
    - Element access, slicing, block assignment
    - active_items enumerates every cell
    - Stable argsort
    - Value semantics (copies, equality)
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.protocols import Matrix, Vector
from pylinalg.matrix import DenseMatrix, DenseVector


# ═══════════════════════════════════════════════════════════════════════
# DenseMatrix
# ═══════════════════════════════════════════════════════════════════════


class TestDenseMatrixConstruction:

    def test_zeros(self):
        m = DenseMatrix.zeros(2, 3)
        assert m.shape == (2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert m.dtype == np.float64
        np.testing.assert_array_equal(m, np.zeros((2, 3)))

    def test_zeros_object_dtype_holds_int_zero(self):
        m = DenseMatrix.zeros(2, 2, dtype=object)
        assert m[0, 0] == 0

    def test_eye(self):
        np.testing.assert_array_equal(DenseMatrix.eye(3), np.eye(3))

    def test_tabulate(self):
        m = DenseMatrix.tabulate(2, 3, lambda i, j: 10 * i + j)
        np.testing.assert_array_equal(m, [[0, 1, 2], [10, 11, 12]])

    def test_tabulate_with_dtype(self):
        m = DenseMatrix.tabulate(2, 2, lambda i, j: i + j, dtype=np.float32)
        assert m.dtype == np.float32

    def test_tabulate_fractions(self):
        m = DenseMatrix.tabulate(2, 2, lambda i, j: Fraction(i + 1, j + 2))
        assert m.dtype == object
        assert m[1, 0] == Fraction(1)

    def test_tabulate_empty(self):
        assert DenseMatrix.tabulate(0, 0, lambda i, j: 1.0).shape == (0, 0)

    def test_storage_is_column_major(self):
        m = DenseMatrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        assert m.data.flags['F_CONTIGUOUS']

    def test_from_array_copies(self):
        X = np.ones((2, 2))
        m = DenseMatrix.from_array(X)
        X[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            DenseMatrix(np.zeros(3))

    def test_satisfies_matrix_protocol(self):
        assert isinstance(DenseMatrix.zeros(1, 1), Matrix)


class TestDenseMatrixAccess:

    def test_element(self):
        m = DenseMatrix.from_array([[1, 2], [3, 4]])
        assert m[1, 0] == 3

    def test_slice_returns_fresh_matrix(self):
        m = DenseMatrix.from_array(np.arange(9.0).reshape(3, 3))
        block = m[0:2, 1:3]
        assert isinstance(block, DenseMatrix)
        np.testing.assert_array_equal(block, [[1, 2], [4, 5]])
        block[0, 0] = -1.0
        assert m[0, 1] == 1.0

    def test_row_slice_returns_vector(self):
        m = DenseMatrix.from_array(np.arange(4.0).reshape(2, 2))
        assert isinstance(m[1, :], DenseVector)

    def test_block_assignment(self):
        m = DenseMatrix.zeros(4, 4)
        m[2:4, 0:2] = DenseMatrix.eye(2)
        expected = np.zeros((4, 4))
        expected[2:4, 0:2] = np.eye(2)
        np.testing.assert_array_equal(m, expected)

    def test_block_assignment_shape_mismatch(self):
        m = DenseMatrix.zeros(4, 4)
        with pytest.raises(DimensionError, match="cannot assign block"):
            m[0:2, 0:2] = DenseMatrix.eye(3)

    def test_active_items_visits_every_cell(self):
        m = DenseMatrix.from_array([[1.0, 0.0], [0.0, 2.0]])
        items = list(m.active_items())
        assert len(items) == 4
        assert items[0] == ((0, 0), 1.0)
        assert ((1, 1), 2.0) in items

    def test_active_items_column_order(self):
        m = DenseMatrix.zeros(2, 2)
        positions = [ij for ij, _ in m.active_items()]
        assert positions == [(0, 0), (1, 0), (0, 1), (1, 1)]


class TestDenseMatrixArithmetic:

    def test_scale(self):
        m = DenseMatrix.from_array([[1, 2], [3, 4]])
        np.testing.assert_array_equal(m.scale(2), [[2, 4], [6, 8]])

    def test_scalar_multiply_both_sides(self):
        m = DenseMatrix.eye(2)
        assert isinstance(3.0 * m, DenseMatrix)
        assert isinstance(m * 3.0, DenseMatrix)
        assert isinstance(np.float64(3.0) * m, DenseMatrix)
        np.testing.assert_array_equal(3.0 * m, 3.0 * np.eye(2))

    def test_matmul_and_transpose(self):
        A = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = DenseMatrix.from_array(A)
        np.testing.assert_array_equal(m @ m.T, A @ A.T)

    def test_add_sub(self):
        m = DenseMatrix.eye(2)
        np.testing.assert_array_equal(m + m, 2 * np.eye(2))
        np.testing.assert_array_equal(m - m, np.zeros((2, 2)))

    def test_equality(self):
        assert DenseMatrix.eye(2) == DenseMatrix.eye(2)
        assert DenseMatrix.eye(2) != DenseMatrix.zeros(2, 2)
        assert DenseMatrix.zeros(2, 3) != DenseMatrix.zeros(3, 2)

    def test_copy_is_independent(self):
        m = DenseMatrix.eye(2)
        c = m.copy()
        c[0, 0] = 5.0
        assert m[0, 0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# DenseVector
# ═══════════════════════════════════════════════════════════════════════


class TestDenseVector:

    def test_of(self):
        v = DenseVector.of(1.0, 0.0, 0.0)
        assert v.length == 3
        assert len(v) == 3
        np.testing.assert_array_equal(v, [1.0, 0.0, 0.0])

    def test_of_fractions_is_object(self):
        v = DenseVector.of(Fraction(1, 2), Fraction(1, 3))
        assert v.dtype == object
        assert v[0] == Fraction(1, 2)

    def test_of_with_dtype(self):
        assert DenseVector.of(1, 2, dtype=np.float32).dtype == np.float32

    def test_tabulate(self):
        v = DenseVector.tabulate(4, lambda i: i * i)
        np.testing.assert_array_equal(v, [0, 1, 4, 9])

    def test_zeros(self):
        np.testing.assert_array_equal(DenseVector.zeros(3), np.zeros(3))

    def test_argsort_is_stable(self):
        v = DenseVector.of(3, 1, 3, 1, 2)
        np.testing.assert_array_equal(v.argsort(), [1, 3, 4, 0, 2])

    def test_iteration(self):
        assert list(DenseVector.of(1, 2, 3)) == [1, 2, 3]

    def test_active_items(self):
        assert list(DenseVector.of(5, 6).active_items()) == [(0, 5), (1, 6)]

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            DenseVector(np.zeros((2, 2)))

    def test_satisfies_vector_protocol(self):
        assert isinstance(DenseVector.zeros(1), Vector)

    def test_equality(self):
        assert DenseVector.of(1, 2) == DenseVector.of(1, 2)
        assert DenseVector.of(1, 2) != DenseVector.of(1, 2, 3)

    def test_scale(self):
        np.testing.assert_array_equal(2 * DenseVector.of(1, 2), [2, 4])
