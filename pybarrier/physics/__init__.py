"""Physics: nuclide transport models of barrier components."""

from pybarrier.physics.base import NuclideModel
from pybarrier.physics.degradation import DegradingBarrier

__all__ = [
    "NuclideModel",
    "DegradingBarrier",
]
