"""
Exception hierarchy for pylinalg.

All recoverable exceptions inherit from PyLinalgError to allow catching any
library-specific error. Shape and structure violations are ValidationErrors;
failures reported by a factorization backend are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
    - A backend contract violation is a programming error, not a
      PyLinalgError (see BackendContractError)
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a container has the wrong number of dimensions or
    when multiple operands have inconsistent shapes.
    """
    pass


class EmptyMatrixError(DimensionError):
    """
    A required matrix has zero rows or zero columns.

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NotSquareError(DimensionError):
    """
    A matrix required to be square is not.

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class DimensionMismatchError(DimensionError):
    """
    An operand does not have the length or shape an operation requires.

    Attributes:
        actual: Length or shape that was given
        expected: Length or shape that was required
    """

    def __init__(
        self,
        message: str,
        actual: int | tuple[int, ...] | None = None,
        expected: int | tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.actual = actual
        self.expected = expected


class NotSymmetricError(ValidationError):
    """
    A matrix required to be symmetric has a mismatched off-diagonal pair.

    Attributes:
        index: The first (i, j) with j < i found where m[i, j] != m[j, i]
    """

    def __init__(self, message: str, index: tuple[int, int] | None = None):
        super().__init__(message)
        self.index = index


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NotConvergedError(NumericalError):
    """
    A decomposition did not produce a valid result.

    Raised when the factorization backend reports that the input does not
    admit the requested decomposition, e.g. a Cholesky factorization of a
    matrix that is not positive definite.

    Attributes:
        reason: Why the decomposition failed (e.g. 'not_positive_definite')
        leading_minor: 1-based order of the leading minor that failed,
            if reported by the backend
    """

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        leading_minor: int | None = None
    ):
        super().__init__(message)
        self.reason = reason
        self.leading_minor = leading_minor


class BackendContractError(AssertionError):
    """
    A factorization backend rejected one of its arguments.

    Every argument passed to a backend is validated locally first, so a
    backend reporting an illegal argument means the calling code is wrong.
    This is intentionally not a PyLinalgError: it is not meant to be caught
    and handled like a user-facing failure.

    Attributes:
        routine: Backend routine that reported the error (e.g. 'potrf')
        argument: 1-based position of the rejected argument
    """

    def __init__(self, message: str, routine: str, argument: int):
        super().__init__(message)
        self.routine = routine
        self.argument = argument
