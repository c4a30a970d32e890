"""
Factorization backends.

    CPULinalgBackend  - LAPACK via SciPy (reference)
    GPULinalgBackend  - PyTorch on CUDA or MPS

get_backend() resolves the ``backend=`` argument accepted by cholesky()
and rank(). Any object satisfying LinalgBackend may be passed instead of
a string, which is how tests substitute a fake.
"""

from __future__ import annotations

from typing import Literal

from pylinalg.core.compute.device import select_device
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import LinalgBackend
from pylinalg.linalg.backends.cpu import CPULinalgBackend

BackendChoice = Literal['auto', 'cpu', 'gpu']


def get_backend(backend: BackendChoice | LinalgBackend) -> LinalgBackend:
    """
    Select backend based on preference.

    Args:
        backend: 'auto', 'cpu', 'gpu', or a backend instance

    Raises:
        ValidationError: For an unknown backend string
        RuntimeError: If 'gpu' is requested and no GPU is available
    """
    if not isinstance(backend, str):
        if isinstance(backend, LinalgBackend):
            return backend
        raise ValidationError(
            f"backend: expected 'auto', 'cpu', 'gpu' or a LinalgBackend, "
            f"got {type(backend).__name__}"
        )

    if backend == 'cpu':
        return CPULinalgBackend()

    if backend == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            try:
                from pylinalg.linalg.backends.gpu import GPULinalgBackend
                return GPULinalgBackend(device=device)
            except ImportError:
                return CPULinalgBackend()
        return CPULinalgBackend()

    if backend == 'gpu':
        device = select_device('gpu')
        from pylinalg.linalg.backends.gpu import GPULinalgBackend
        return GPULinalgBackend(device=device)

    raise ValidationError(f"Unknown backend: {backend!r}")


__all__ = [
    "BackendChoice",
    "CPULinalgBackend",
    "get_backend",
]
