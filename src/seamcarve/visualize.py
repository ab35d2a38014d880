"""Helpers for turning energy fields, cost tables and seams into viewable images.

The carving engine only returns plain float grids. Everything here maps
those grids to displayable RGB arrays.
"""

from typing import Sequence

import numpy as np

from seamcarve.energy import validate_image
from seamcarve.seam_carving import validate_seam


def normalize_greyness(array: np.ndarray) -> np.ndarray:
    """Scale a non-negative field so its maximum becomes 1."""
    array = np.asarray(array, dtype=np.float64)
    peak = array.max() if array.size else 0.0
    if peak > 0:
        return array / peak
    return np.zeros_like(array)


def grey_to_rgb(array: np.ndarray) -> np.ndarray:
    """Repeat a (H, W) field into three identical channels."""
    array = np.asarray(array)
    return np.repeat(array[:, :, np.newaxis], 3, axis=2)


def colorize(array: np.ndarray, cmap: str = "hot") -> np.ndarray:
    """Map a field through a matplotlib colormap after normalizing it.

    Returns RGB floats (H, W, 3) in [0, 1].
    """
    from matplotlib import colormaps

    colormap = colormaps.get_cmap(cmap)
    return colormap(normalize_greyness(array))[:, :, :3]


def draw_seam(
    image: np.ndarray,
    seam: np.ndarray,
    color: Sequence[float] = (1.0, 0.0, 0.0),
) -> np.ndarray:
    """Return a copy of ``image`` with the seam pixels painted in ``color``."""
    image = validate_image(image)
    seam = validate_seam(image, seam)

    if image.ndim == 2:
        result = grey_to_rgb(image).astype(np.float64)
    else:
        result = image.astype(np.float64, copy=True)

    result[np.arange(len(seam)), seam] = color
    return result


def to_uint8(image: np.ndarray) -> np.ndarray:
    """Convert [0, 1] floats to 8-bit pixels for saving."""
    return (np.clip(image, 0.0, 1.0) * 255).round().astype(np.uint8)
