"""Per-frame chain solvers for the spine, limbs and tentacles."""

from .controllers import WaveController
from .limb import update_limb, update_limbs
from .spine import build_spine, update_spine
from .tentacle import reach_toward, update_tentacle, update_tentacles

__all__ = [
    "WaveController",
    "build_spine",
    "reach_toward",
    "update_limb",
    "update_limbs",
    "update_spine",
    "update_tentacle",
    "update_tentacles",
]
