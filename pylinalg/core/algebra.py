"""
Algebraic capabilities for element types.

Operations that are generic over element type take the capability they
need as an explicit argument instead of inspecting element values:

    - Semiring: additive identity, addition, multiplication
    - Ring: Semiring plus subtraction
    - Ordering: total order via a three-way compare

This module is the SINGLE SOURCE OF TRUTH for the built-in capability
instances. Import them from here.

Usage:
    from pylinalg.core.algebra import INTEGER, ring_for

    v = cross(a, b, ring=INTEGER)
    ring = ring_for(a.dtype)
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from pylinalg.core.exceptions import ValidationError


@dataclass(frozen=True)
class Semiring:
    """
    Additive identity plus addition and multiplication.

    Attributes:
        name: Human-readable identifier
        zero: Additive identity
        one: Multiplicative identity
        add: Binary addition
        multiply: Binary multiplication
    """
    name: str
    zero: Any
    one: Any
    add: Callable[[Any, Any], Any]
    multiply: Callable[[Any, Any], Any]


@dataclass(frozen=True)
class Ring(Semiring):
    """Semiring extended with subtraction."""
    subtract: Callable[[Any, Any], Any] = operator.sub


@dataclass(frozen=True)
class Ordering:
    """
    Total order over an element type.

    Attributes:
        name: Human-readable identifier
        compare: Returns a negative number, zero or a positive number when
            the first argument is less than, equal to, or greater than the
            second
    """
    name: str
    compare: Callable[[Any, Any], int]

    def equal(self, a: Any, b: Any) -> bool:
        return self.compare(a, b) == 0


def _natural_compare(a: Any, b: Any) -> int:
    return int(a > b) - int(a < b)


REAL = Ring(
    name='real', zero=0.0, one=1.0,
    add=operator.add, multiply=operator.mul, subtract=operator.sub,
)

INTEGER = Ring(
    name='integer', zero=0, one=1,
    add=operator.add, multiply=operator.mul, subtract=operator.sub,
)

COMPLEX = Ring(
    name='complex', zero=0j, one=1 + 0j,
    add=operator.add, multiply=operator.mul, subtract=operator.sub,
)

# Zero is the int 0 so the additive identity mixes with Fraction, Decimal
# and other numeric types stored in object arrays.
GENERIC = Ring(
    name='generic', zero=0, one=1,
    add=operator.add, multiply=operator.mul, subtract=operator.sub,
)

# Boolean semiring: OR for addition, AND for multiplication. No subtraction.
BOOLEAN = Semiring(
    name='boolean', zero=False, one=True,
    add=operator.or_, multiply=operator.and_,
)

NATURAL_ORDER = Ordering(name='natural', compare=_natural_compare)


def semiring_for(dtype: np.dtype | type) -> Semiring:
    """
    Default semiring for a numpy dtype.

    Args:
        dtype: NumPy dtype or scalar type

    Returns:
        BOOLEAN, INTEGER, REAL, COMPLEX, or GENERIC for object dtype

    Raises:
        ValidationError: If the dtype has no arithmetic (strings, datetimes)
    """
    dt = np.dtype(dtype)
    if dt == np.bool_:
        return BOOLEAN
    if np.issubdtype(dt, np.integer):
        return INTEGER
    if np.issubdtype(dt, np.floating):
        return REAL
    if np.issubdtype(dt, np.complexfloating):
        return COMPLEX
    if dt == object:
        return GENERIC
    raise ValidationError(f"dtype {dt}: no semiring available")


def ring_for(dtype: np.dtype | type) -> Ring:
    """
    Default ring for a numpy dtype.

    Raises:
        ValidationError: If the dtype only supports a semiring (bool) or no
            arithmetic at all
    """
    semiring = semiring_for(dtype)
    if not isinstance(semiring, Ring):
        raise ValidationError(
            f"dtype {np.dtype(dtype)}: '{semiring.name}' is a semiring, "
            f"a ring (with subtraction) is required"
        )
    return semiring
