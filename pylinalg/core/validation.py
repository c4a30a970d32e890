"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. They only read their inputs.

Design principles:
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Validation runs before any expensive backend call
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    EmptyMatrixError,
    NotSquareError,
    NotSymmetricError,
    ValidationError,
)
from pylinalg.core.protocols import Matrix


def require_non_empty(mat: Matrix, name: str = "matrix") -> None:
    """
    Verify matrix has at least one row and one column.

    Args:
        mat: Matrix to check
        name: Parameter name for error messages

    Raises:
        EmptyMatrixError: If rows == 0 or cols == 0
    """
    if mat.rows == 0 or mat.cols == 0:
        raise EmptyMatrixError(
            f"{name}: matrix is empty ({mat.rows}x{mat.cols})",
            shape=(mat.rows, mat.cols),
        )


def require_square(mat: Matrix, name: str = "matrix") -> None:
    """
    Verify matrix is square.

    Args:
        mat: Matrix to check
        name: Parameter name for error messages

    Raises:
        NotSquareError: If rows != cols
    """
    if mat.rows != mat.cols:
        raise NotSquareError(
            f"{name}: expected a square matrix, got {mat.rows}x{mat.cols}",
            shape=(mat.rows, mat.cols),
        )


def require_symmetric(mat: Matrix, name: str = "matrix") -> None:
    """
    Verify matrix is square and exactly symmetric.

    Scans the strict lower triangle and stops at the first pair with
    mat[i, j] != mat[j, i]. Comparison is exact; no tolerance is applied.

    Args:
        mat: Matrix to check
        name: Parameter name for error messages

    Raises:
        NotSquareError: If rows != cols
        NotSymmetricError: On the first mismatched off-diagonal pair
    """
    require_square(mat, name)

    for i in range(mat.rows):
        for j in range(i):
            if mat[i, j] != mat[j, i]:
                raise NotSymmetricError(
                    f"{name}: not symmetric, element ({i}, {j}) = {mat[i, j]!r} "
                    f"but element ({j}, {i}) = {mat[j, i]!r}",
                    index=(i, j),
                )


def require_real(mat: Matrix, name: str = "matrix") -> None:
    """
    Verify matrix elements are real numbers.

    Complex dtypes are rejected outright. Object arrays are scanned for
    complex elements, since Fraction and Decimal entries are allowed.

    Raises:
        ValidationError: If the dtype or any element is complex
    """
    if np.issubdtype(mat.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {mat.dtype} is not supported, expected real data"
        )
    if mat.dtype == object:
        for (i, j), v in mat.active_items():
            if isinstance(v, numbers.Complex) and not isinstance(v, numbers.Real):
                raise ValidationError(
                    f"{name}: element ({i}, {j}) = {v!r} is complex, expected real data"
                )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_length(length: int, expected: int, name: str) -> None:
    """
    Verify a vector has exactly the expected length.

    Raises:
        DimensionMismatchError: If length != expected
    """
    if length != expected:
        raise DimensionMismatchError(
            f"{name}: expected length {expected}, got {length}",
            actual=length,
            expected=expected,
        )


def check_same_shape(
    a_shape: tuple[int, ...],
    b_shape: tuple[int, ...],
    names: tuple[str, str],
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if tuple(a_shape) != tuple(b_shape):
        raise DimensionMismatchError(
            f"Inconsistent shapes: {names[0]}={tuple(a_shape)}, {names[1]}={tuple(b_shape)}",
            actual=tuple(b_shape),
            expected=tuple(a_shape),
        )


def is_numeric_dtype(dtype: np.dtype) -> bool:
    """True for bool, integer, floating and complex dtypes."""
    return dtype == np.bool_ or np.issubdtype(dtype, np.number)
