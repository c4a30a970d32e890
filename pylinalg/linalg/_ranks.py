"""Tie-aware ranking."""

from __future__ import annotations

import functools
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.algebra import Ordering
from pylinalg.matrix import as_vector


def ranks(x: Any, *, ordering: Ordering | None = None) -> NDArray[np.float64]:
    """
    1-based rank of each element of x, averaging over ties.

    Elements with equal values share the mean of the positions they
    occupy in ascending order, so [10, 20, 20, 30] ranks as
    [1.0, 2.5, 2.5, 4.0]. This matches scipy.stats.rankdata(method='average').

    Parameters
    ----------
    x : vector-like
        Values of any totally ordered type.
    ordering : Ordering, optional
        Comparison to use. Defaults to the natural order of the elements
        (a stable numpy argsort, with ties detected by ==).

    Returns
    -------
    ndarray of float64 with the same length as x.
    """
    x = as_vector(x, "x", numeric=False)
    values = x.data

    if ordering is None:
        order = x.argsort()

        def tied(p: Any, q: Any) -> bool:
            return p == q
    else:
        # Python values, not numpy scalars, go to compare. list.sort is
        # stable, so ties keep their original index order
        values = values.tolist()
        key = functools.cmp_to_key(lambda i, j: ordering.compare(values[i], values[j]))
        order = sorted(range(len(values)), key=key)
        tied = ordering.equal

    n = len(order)
    rv = np.empty(n, dtype=np.float64)
    i = 0
    while i < n:
        # count values tied with the one at sorted position i
        k = 1
        while i + k < n and tied(values[order[i + k]], values[order[i]]):
            k += 1

        rank = 1 + i + (k - 1) / 2.0
        for j in range(k):
            rv[order[i + j]] = rank

        i += k

    return rv
