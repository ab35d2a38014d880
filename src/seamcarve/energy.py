"""Energy functions for seam carving.

The energy of a pixel measures how visually important it is. Seams with
the lowest total energy are removed first, so edges and detail survive
while flat regions are carved away.

The only energy shipped here is the gradient magnitude of brightness
(Avidan & Shamir 2007).
"""

from abc import ABC, abstractmethod

import numpy as np
from scipy.ndimage import correlate

from seamcarve.exceptions import InvalidInput

# Normalized Sobel operators: responses of a unit step stay within [-1, 1].
SOBEL_X = np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]], dtype=np.float64) / 8.0
SOBEL_Y = np.array([[-1, -2, -1], [0, 0, 0], [1, 2, 1]], dtype=np.float64) / 8.0


def validate_image(image: np.ndarray) -> np.ndarray:
    """Return ``image`` as an array, raising InvalidInput if it is not a usable grid."""
    image = np.asarray(image)
    if image.ndim not in (2, 3):
        raise InvalidInput(
            f"Expected a (height, width) or (height, width, channels) grid, got shape {image.shape}"
        )
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InvalidInput(f"Image must be at least 1x1, got {image.shape[0]}x{image.shape[1]}")
    if image.ndim == 3 and image.shape[2] == 0:
        raise InvalidInput("Image has no color channels")
    return image


def brightness(image: np.ndarray) -> np.ndarray:
    """Average the color channels of every pixel.

    A 2-D array is already a brightness field and is returned as float64.
    """
    image = validate_image(image)
    if image.ndim == 2:
        return image.astype(np.float64)
    return image.mean(axis=2, dtype=np.float64)


def compute_energy(image: np.ndarray) -> np.ndarray:
    """Compute the gradient magnitude energy of an image.

    Brightness is filtered with the horizontal and vertical Sobel kernels,
    replicating border pixels, and the energy is
    ``sqrt(gx**2 + gy**2)``.

    Args:
        image: RGB image (H, W, 3) with values in [0, 1], or brightness (H, W)

    Returns:
        Energy map (H, W), non-negative. Values are not rescaled.
    """
    gray = brightness(image)

    grad_x = correlate(gray, SOBEL_X, mode="nearest")
    grad_y = correlate(gray, SOBEL_Y, mode="nearest")

    return np.sqrt(grad_x**2 + grad_y**2)


class EnergyFunction(ABC):
    """Abstract base class for energy functions."""

    @abstractmethod
    def compute(self, image: np.ndarray) -> np.ndarray:
        """Compute energy map for the given image.

        Args:
            image: Input image as numpy array (H, W, C) or (H, W) in range [0, 1]

        Returns:
            Energy map as numpy array (H, W) with higher values indicating
            more important regions
        """
        pass


class GradientEnergyFunction(EnergyFunction):
    """Gradient magnitude energy (from the original seam carving paper).

    Higher gradients = more important (edges, details).
    """

    def compute(self, image: np.ndarray) -> np.ndarray:
        return compute_energy(image)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
