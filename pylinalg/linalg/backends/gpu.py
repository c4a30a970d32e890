"""
GPU backend for factorizations using PyTorch.

CUDA runs in float64 and matches the CPU reference. MPS has no float64
kernels, so it runs in float32 and the relaxed tolerance tier applies.
Results are returned as NumPy arrays on the CPU.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.device import DeviceInfo, detect_gpu
from pylinalg.linalg.backends.cpu import check_potrf_args


class GPULinalgBackend:
    """
    GPU backend for factorizations using PyTorch.

    Implements the same potrf / svd / machine_epsilon contract as the CPU
    backend. torch.linalg.cholesky_ex reports failures through an info
    tensor with the same meaning as LAPACK's INFO.
    """

    def __init__(self, device: DeviceInfo | None = None):
        """
        Initialize GPU backend.

        Parameters
        ----------
        device : DeviceInfo, optional
            Device info from select_device(). If None, auto-selects.
        """
        import torch

        if device is None:
            device = detect_gpu()
            if device is None:
                raise RuntimeError("No GPU available. Use backend='cpu' instead.")

        if not device.is_gpu:
            raise ValueError(f"GPULinalgBackend requires GPU device, got {device.device_type}")

        if device.supports_fp64:
            self.device = torch.device(f'{device.device_type}:{device.device_index or 0}')
            self.dtype = torch.float64
        else:
            warnings.warn(
                "MPS does not support float64; GPU factorizations run in float32",
                RuntimeWarning,
                stacklevel=2,
            )
            self.device = torch.device(device.device_type)
            self.dtype = torch.float32
        self.device_name = device.name

    @property
    def name(self) -> str:
        import torch
        precision = 'fp64' if self.dtype == torch.float64 else 'fp32'
        return f'gpu_torch_{precision}'

    def _to_tensor(self, array: NDArray[Any]) -> Any:
        import torch
        return torch.from_numpy(np.ascontiguousarray(array, dtype=np.float64)).to(
            device=self.device, dtype=self.dtype
        )

    def potrf(
        self,
        uplo: str,
        n: int,
        a: NDArray[Any],
        lda: int,
    ) -> tuple[NDArray[Any], int]:
        import torch

        info = check_potrf_args(uplo, n, a, lda)
        if info < 0:
            return a, info

        factor, info_t = torch.linalg.cholesky_ex(self._to_tensor(a), upper=(uplo == 'U'))
        result = np.asfortranarray(factor.cpu().numpy().astype(np.float64))
        return result, int(info_t.item())

    def svd(
        self,
        m: NDArray[Any],
    ) -> tuple[NDArray[Any], NDArray[Any], NDArray[Any]]:
        import torch

        u, s, vh = torch.linalg.svd(self._to_tensor(m), full_matrices=False)
        return (
            u.cpu().numpy().astype(np.float64),
            s.cpu().numpy().astype(np.float64),
            vh.cpu().numpy().astype(np.float64),
        )

    def machine_epsilon(self) -> float:
        """Unit roundoff of the working dtype, matching LAPACK dlamch('e')."""
        import torch
        return float(torch.finfo(self.dtype).eps) / 2.0
