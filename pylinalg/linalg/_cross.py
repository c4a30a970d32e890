"""Cross product of 3-vectors over any ring."""

from __future__ import annotations

from typing import Any

import numpy as np

from pylinalg.core.algebra import Ring, ring_for
from pylinalg.core.validation import check_length
from pylinalg.matrix import DenseVector, as_vector


def cross(a: Any, b: Any, *, ring: Ring | None = None) -> DenseVector:
    """
    Vector cross product a × b of two 3-vectors.

    Uses only the ring's multiply and subtract (no division), so integer,
    rational and other exact element types give exact results.

    Parameters
    ----------
    a, b : vector-like
        Length-3 vectors.
    ring : Ring, optional
        Arithmetic to use. Defaults to the ring for the promoted dtype.

    Returns
    -------
    DenseVector of length 3.

    Raises
    ------
    DimensionMismatchError
        If either vector does not have length 3.
    """
    a = as_vector(a, "a")
    b = as_vector(b, "b")
    check_length(a.length, 3, "a")
    check_length(b.length, 3, "b")

    dtype = np.result_type(a.dtype, b.dtype)
    if ring is None:
        ring = ring_for(dtype)
    mul, sub = ring.multiply, ring.subtract

    return DenseVector.of(
        sub(mul(a[1], b[2]), mul(a[2], b[1])),
        sub(mul(a[2], b[0]), mul(a[0], b[2])),
        sub(mul(a[0], b[1]), mul(a[1], b[0])),
        dtype=dtype,
    )
