"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pylinalg.linalg.backends import CPULinalgBackend


class RecordingBackend:
    """
    Fake LinalgBackend that records calls and returns canned results.

    With no canned info it delegates to the CPU backend, so it can stand in
    for a real backend while counting calls.
    """

    def __init__(self, potrf_info=None, singular_values=None, eps=None):
        self._cpu = CPULinalgBackend()
        self._potrf_info = potrf_info
        self._singular_values = singular_values
        self._eps = eps
        self.potrf_calls = []
        self.svd_calls = 0

    @property
    def name(self):
        return 'fake_recording'

    def potrf(self, uplo, n, a, lda):
        self.potrf_calls.append((uplo, n, a.copy(order="K"), lda))
        if self._potrf_info is not None:
            return a, self._potrf_info
        return self._cpu.potrf(uplo, n, a, lda)

    def svd(self, m):
        self.svd_calls += 1
        if self._singular_values is not None:
            s = np.asarray(self._singular_values, dtype=np.float64)
            return None, s, None
        return self._cpu.svd(m)

    def machine_epsilon(self):
        if self._eps is not None:
            return self._eps
        return self._cpu.machine_epsilon()


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_matrix(rng):
    """Well-conditioned 5x5 symmetric positive definite matrix."""
    A = rng.standard_normal((5, 5))
    X = A @ A.T + 5.0 * np.eye(5)
    return (X + X.T) / 2.0


@pytest.fixture
def recording_backend():
    """Fake backend that delegates to CPU and records calls."""
    return RecordingBackend()


@pytest.fixture
def make_backend():
    """Factory for fake backends with canned results."""
    return RecordingBackend
