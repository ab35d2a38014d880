"""seamcarve: content-aware image narrowing by seam carving."""

from seamcarve.energy import (
    EnergyFunction,
    GradientEnergyFunction,
    brightness,
    compute_energy,
)
from seamcarve.exceptions import InvalidInput, InvalidParameter, SeamCarvingError
from seamcarve.resizer import CarvingResult, ContentAwareResizer, load_image
from seamcarve.seam_carving import (
    SeamCarver,
    find_energy_map,
    find_seam,
    find_seam_at,
    remove_seam,
)

__version__ = "0.1.0"
__all__ = [
    "CarvingResult",
    "ContentAwareResizer",
    "EnergyFunction",
    "GradientEnergyFunction",
    "InvalidInput",
    "InvalidParameter",
    "SeamCarver",
    "SeamCarvingError",
    "brightness",
    "compute_energy",
    "find_energy_map",
    "find_seam",
    "find_seam_at",
    "load_image",
    "remove_seam",
]
