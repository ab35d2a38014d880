"""High-level content-aware resizing interface.

Loads images from disk or memory, optionally shrinks them uniformly before
carving, and wraps the seam carver results for saving.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from seamcarve.energy import EnergyFunction
from seamcarve.exceptions import InvalidParameter
from seamcarve.seam_carving import SeamCarver, find_energy_map
from seamcarve.visualize import to_uint8

ImageSource = Union[str, Path, np.ndarray, Image.Image]


def load_image(image: ImageSource) -> np.ndarray:
    """Load image from various sources as RGB floats in [0, 1]."""
    if isinstance(image, (str, Path)):
        path = Path(image)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        image = Image.open(path)

    if isinstance(image, Image.Image):
        return np.asarray(image.convert("RGB"), dtype=np.float64) / 255.0
    elif isinstance(image, np.ndarray):
        if np.issubdtype(image.dtype, np.integer):
            return image.astype(np.float64) / np.iinfo(image.dtype).max
        return image.astype(np.float64)
    else:
        raise ValueError(f"Unsupported image type: {type(image)}")


def prescale(image: np.ndarray, ratio: float) -> np.ndarray:
    """Uniformly rescale an image by ``ratio`` before carving."""
    if ratio <= 0:
        raise InvalidParameter(f"Prescale ratio must be positive, got {ratio}")

    h, w = image.shape[:2]
    new_size = (max(1, round(w * ratio)), max(1, round(h * ratio)))
    if new_size == (w, h):
        return image.copy()

    pil_img = Image.fromarray(to_uint8(image))
    resized = pil_img.resize(new_size, Image.Resampling.LANCZOS)
    return np.asarray(resized, dtype=np.float64) / 255.0


def to_pil(image: np.ndarray) -> Image.Image:
    """Convert a [0, 1] float image to PIL, refusing images with no pixels."""
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InvalidParameter(
            f"Cannot save an empty image of size {image.shape[0]}x{image.shape[1]}"
        )
    return Image.fromarray(to_uint8(image))


class CarvingResult:
    """Result of a carving operation."""

    def __init__(
        self,
        image: np.ndarray,
        original_size: tuple[int, int],
        carved_size: tuple[int, int],
        metadata: Optional[dict] = None,
    ):
        self.image = image
        self.original_size = original_size
        self.carved_size = carved_size
        self.metadata = metadata or {}

    @property
    def seam_count(self) -> int:
        """Number of vertical seams removed."""
        return self.original_size[1] - self.carved_size[1]

    @property
    def width_ratio(self) -> float:
        """Carved width divided by original width."""
        return self.carved_size[1] / self.original_size[1]

    def to_pil(self) -> Image.Image:
        """Convert to PIL Image."""
        return to_pil(self.image)

    def save(self, path: Union[str, Path]) -> None:
        """Save carved image."""
        self.to_pil().save(path)


class ContentAwareResizer:
    """Load, optionally prescale, and narrow images with seam carving."""

    def __init__(self, energy_function: Optional[EnergyFunction] = None):
        """Initialize resizer.

        Args:
            energy_function: Energy function for pixel importance (default: gradient)
        """
        self.seam_carver = SeamCarver(energy_function=energy_function)

    def _prepare(self, image: ImageSource, prescale_ratio: Optional[float]) -> np.ndarray:
        img = load_image(image)
        if prescale_ratio is not None:
            img = prescale(img, prescale_ratio)
        return img

    def resize(
        self,
        image: ImageSource,
        target_width: Optional[int] = None,
        scale: Optional[float] = None,
        prescale_ratio: Optional[float] = None,
        show_progress: bool = True,
    ) -> CarvingResult:
        """Narrow an image by removing vertical seams.

        Args:
            image: Input image (path, array, or PIL Image)
            target_width: Target width in pixels
            scale: Target width as a fraction of the (prescaled) width
            prescale_ratio: Uniform rescale applied before carving
            show_progress: Show progress bar

        Returns:
            CarvingResult with carved image and metadata
        """
        if (target_width is None) == (scale is None):
            raise ValueError("Specify exactly one of target_width or scale")

        img = self._prepare(image, prescale_ratio)
        h, w = img.shape[:2]

        if scale is not None:
            if not 0 <= scale <= 1:
                raise InvalidParameter(f"Scale must lie in [0, 1], got {scale}")
            target_width = int(w * scale)

        result = self.seam_carver.carve_to_width(img, target_width, show_progress=show_progress)

        return CarvingResult(
            image=result,
            original_size=(h, w),
            carved_size=(result.shape[0], result.shape[1]),
            metadata={
                "energy_function": type(self.seam_carver.energy_function).__name__,
                "prescale_ratio": prescale_ratio,
            },
        )

    def carve_all(
        self,
        image: ImageSource,
        max_reduction: float = 0.3,
        prescale_ratio: Optional[float] = None,
        show_progress: bool = True,
    ) -> list[np.ndarray]:
        """Every intermediate image while removing up to ``max_reduction`` of the width.

        Useful for browsing the carving step by step, e.g. with a slider.
        """
        if not 0 <= max_reduction <= 1:
            raise InvalidParameter(f"max_reduction must lie in [0, 1], got {max_reduction}")

        img = self._prepare(image, prescale_ratio)
        count = int(img.shape[1] * max_reduction)
        return self.seam_carver.carve_sequence(img, count, show_progress=show_progress)

    def analyze_content(self, image: ImageSource) -> dict:
        """Analyze image content and return importance metrics."""
        img = load_image(image)
        energy = self.seam_carver.compute_energy(img)
        cost, _ = find_energy_map(energy)

        return {
            "size": img.shape[:2],
            "mean_energy": float(energy.mean()),
            "max_energy": float(energy.max()),
            "energy_std": float(energy.std()),
            "min_seam_cost": float(cost[0].min()),
        }
