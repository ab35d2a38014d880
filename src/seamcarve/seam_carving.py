"""Seam carving implementation for content-aware image resizing.

Based on "Seam Carving for Content-Aware Image Resizing" by Avidan & Shamir (2007).
Only vertical seams are removed, so height never changes and width shrinks
by one column per seam.
"""

from typing import Optional

import numpy as np
from tqdm import tqdm

from seamcarve.energy import EnergyFunction, GradientEnergyFunction, validate_image
from seamcarve.exceptions import InvalidInput, InvalidParameter

# Neighbour order below a pixel. np.argmin keeps the first minimum, so a tie
# goes straight down, then to the left diagonal, then to the right one.
_NEIGHBOUR_DELTAS = np.array([0, -1, 1])


def _validate_energy(energy: np.ndarray) -> np.ndarray:
    energy = np.asarray(energy, dtype=np.float64)
    if energy.ndim != 2:
        raise InvalidInput(f"Energy map must be 2-D, got shape {energy.shape}")
    if energy.shape[0] == 0 or energy.shape[1] == 0:
        raise InvalidInput(f"Energy map must be at least 1x1, got {energy.shape}")
    return energy


def _check_count(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= upper:
        raise InvalidParameter(f"{name} {value} outside [0, {upper}]")


def find_energy_map(energy: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Accumulate the minimal seam cost from every pixel down to the bottom row.

    Args:
        energy: Energy map (H, W)

    Returns:
        ``(cost, offsets)`` where ``cost[r, c]`` is the lowest total energy
        of any seam running from ``(r, c)`` to the bottom edge, and
        ``offsets[r, c]`` in {-1, 0, 1} is the column step taken into row
        ``r + 1`` along that seam. The bottom row of ``offsets`` is 0.
    """
    energy = _validate_energy(energy)
    h, w = energy.shape

    cost = np.empty((h, w), dtype=np.float64)
    offsets = np.zeros((h, w), dtype=np.int64)
    cost[-1] = energy[-1]

    # Each row depends only on the one below it, so a whole row is done at once
    for r in range(h - 2, -1, -1):
        below = cost[r + 1]
        left = np.full(w, np.inf)
        left[1:] = below[:-1]
        right = np.full(w, np.inf)
        right[:-1] = below[1:]

        candidates = np.stack([below, left, right])
        choice = np.argmin(candidates, axis=0)

        cost[r] = energy[r] + candidates[choice, np.arange(w)]
        offsets[r] = _NEIGHBOUR_DELTAS[choice]

    return cost, offsets


def find_seam_at(offsets: np.ndarray, start: int) -> np.ndarray:
    """Follow ``offsets`` downward from column ``start`` of the top row."""
    offsets = np.asarray(offsets)
    if offsets.ndim != 2 or 0 in offsets.shape:
        raise InvalidInput(f"Offsets must be a non-empty 2-D grid, got shape {offsets.shape}")
    h, w = offsets.shape
    if not 0 <= start < w:
        raise InvalidInput(f"Start column {start} outside [0, {w - 1}]")

    seam = np.empty(h, dtype=np.int64)
    seam[0] = start
    for i in range(1, h):
        seam[i] = seam[i - 1] + offsets[i - 1, seam[i - 1]]
    return seam


def find_seam(energy: np.ndarray) -> np.ndarray:
    """Find the vertical seam of least total energy.

    Returns array of column indices for each row. When several top-row
    columns share the minimal cost the leftmost one is used.
    """
    cost, offsets = find_energy_map(energy)
    start = int(np.argmin(cost[0]))
    return find_seam_at(offsets, start)


def validate_seam(image: np.ndarray, seam: np.ndarray) -> np.ndarray:
    """Check that ``seam`` has one in-bounds column index per image row."""
    h, w = image.shape[:2]
    seam = np.asarray(seam)
    if seam.ndim != 1 or len(seam) != h:
        raise InvalidInput(f"Seam length {seam.size} does not match image height {h}")
    if not np.issubdtype(seam.dtype, np.integer):
        raise InvalidInput(f"Seam indices must be integers, got {seam.dtype}")
    if seam.min() < 0 or seam.max() >= w:
        raise InvalidInput(f"Seam indices must lie in [0, {w - 1}]")
    return seam


def remove_seam(image: np.ndarray, seam: np.ndarray) -> np.ndarray:
    """Remove vertical seam from image.

    Pixels left of the seam keep their column, pixels right of it shift one
    column left. A new array is returned; ``image`` is not modified.
    """
    image = validate_image(image)
    seam = validate_seam(image, seam)
    h, w = image.shape[:2]

    keep = np.ones((h, w), dtype=bool)
    keep[np.arange(h), seam] = False

    return image[keep].reshape((h, w - 1) + image.shape[2:])


class SeamCarver:
    """Content-aware image narrowing using seam carving.

    Each iteration computes the energy of the current image, finds the
    lowest-energy vertical seam and removes it.
    """

    def __init__(self, energy_function: Optional[EnergyFunction] = None):
        """Initialize seam carver.

        Args:
            energy_function: Energy function for pixel importance (default: gradient)
        """
        self.energy_function = energy_function or GradientEnergyFunction()

    def _to_numpy(self, image: np.ndarray) -> np.ndarray:
        """Validate image and make sure it holds floats."""
        img = validate_image(image)
        if not np.issubdtype(img.dtype, np.floating):
            img = img.astype(np.float64)
        return img

    def compute_energy(self, image: np.ndarray) -> np.ndarray:
        """Energy map of ``image`` under the configured energy function."""
        return self.energy_function.compute(self._to_numpy(image))

    def find_energy_map(self, image: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Cumulative cost table and backtrack offsets for ``image``."""
        return find_energy_map(self.compute_energy(image))

    def find_seam(self, image: np.ndarray) -> np.ndarray:
        """Lowest-energy vertical seam of ``image``."""
        return find_seam(self.compute_energy(image))

    def remove_seam(self, image: np.ndarray, seam: np.ndarray) -> np.ndarray:
        return remove_seam(image, seam)

    def _carve_once(self, image: np.ndarray) -> np.ndarray:
        energy = self.energy_function.compute(image)
        seam = find_seam(energy)
        return remove_seam(image, seam)

    def carve_to_width(
        self,
        image: np.ndarray,
        target_width: int,
        show_progress: bool = False,
    ) -> np.ndarray:
        """Remove vertical seams until the image is ``target_width`` columns wide.

        Args:
            image: Input image (H, W, C) or (H, W)
            target_width: Width of the result, between 0 and the current width
            show_progress: Show progress bar

        Returns:
            Carved image (H, target_width, ...). With ``target_width`` equal
            to the current width this is an unchanged copy.

        Raises:
            InvalidInput: if the image has a zero dimension
            InvalidParameter: if ``target_width`` is out of range
        """
        img = self._to_numpy(image)
        w = img.shape[1]
        _check_count("Target width", target_width, w)

        result = img.copy()
        n = w - target_width
        iterator = tqdm(range(n), desc="Removing vertical seams") if show_progress else range(n)

        for _ in iterator:
            result = self._carve_once(result)

        return result

    def carve_sequence(
        self,
        image: np.ndarray,
        count: int,
        show_progress: bool = False,
    ) -> list[np.ndarray]:
        """Remove ``count`` seams, keeping every intermediate image.

        Element ``k`` of the result is the image after ``k + 1`` removals,
        so the widths are ``W - 1, W - 2, ..., W - count``. Every image is
        held in memory at once, about ``count * W * H`` pixels in total,
        which bounds how many steps can be kept for large inputs.

        Raises:
            InvalidInput: if the image has a zero dimension
            InvalidParameter: if ``count`` is negative or exceeds the width
        """
        img = self._to_numpy(image)
        w = img.shape[1]
        _check_count("Seam count", count, w)

        frames: list[np.ndarray] = [None] * count
        current = img
        iterator = tqdm(range(count), desc="Carving sequence") if show_progress else range(count)

        for i in iterator:
            current = self._carve_once(current)
            frames[i] = current

        return frames
