from .profile import IntegralProfile, PhaseShiftProfile
from .results import IntegralSnapshot
from .series import SampleSeries, WindowPartition

__all__ = [
    "IntegralProfile",
    "PhaseShiftProfile",
    "IntegralSnapshot",
    "SampleSeries",
    "WindowPartition",
]
