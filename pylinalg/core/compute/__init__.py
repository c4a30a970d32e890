"""
Shared compute infrastructure for pylinalg.

Submodules:
    device: Hardware detection and device selection
    tolerances: Comparison tolerances per backend precision
"""

from pylinalg.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
