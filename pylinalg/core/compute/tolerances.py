"""
Tolerance tiers for comparing factorization output.

The CPU LAPACK backend is the reference. A GPU backend running in float64
is held to the same tier; float32 (MPS) is relaxed.

Used by the test suite to check reconstructions such as L @ L.T == X.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, LAPACK reference',
)

GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)

GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision',
)


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if 'gpu' in backend_name:
        if 'fp64' in backend_name:
            return GPU_FP64
        return GPU_FP32
    return CPU_FP64
