"""
Core infrastructure for pylinalg.

This module provides the shared abstractions used by the containers
(pylinalg.matrix) and the operations (pylinalg.linalg).

Key components:
    protocols: Matrix, Vector, LinalgBackend protocols
    algebra: Semiring, Ring, Ordering capabilities
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection, tolerance tiers
"""

from pylinalg.core.protocols import Matrix, Vector, LinalgBackend
from pylinalg.core.algebra import Semiring, Ring, Ordering
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    EmptyMatrixError,
    NotSquareError,
    NotSymmetricError,
    DimensionMismatchError,
    NumericalError,
    NotConvergedError,
    BackendContractError,
)

__all__ = [
    # Protocols
    "Matrix",
    "Vector",
    "LinalgBackend",
    # Algebra
    "Semiring",
    "Ring",
    "Ordering",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "EmptyMatrixError",
    "NotSquareError",
    "NotSymmetricError",
    "DimensionMismatchError",
    "NumericalError",
    "NotConvergedError",
    "BackendContractError",
]
