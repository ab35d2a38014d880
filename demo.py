#!/usr/bin/env python3
"""
Quick demo of the seamcarve library.
Run this to see the library in action (creates a sample image if none is given).
"""

import sys
from pathlib import Path

import numpy as np
from PIL import Image

from seamcarve import ContentAwareResizer, SeamCarver, find_energy_map, find_seam, load_image
from seamcarve.visualize import draw_seam, grey_to_rgb, normalize_greyness, to_uint8


def create_sample_image(path: str = "sample.png") -> str:
    """Create a sample image with distinct regions for testing."""
    print("Creating sample image...")

    # Create 200x300 image
    img = np.zeros((200, 300, 3), dtype=np.uint8)

    # Sky background (blue)
    img[:100, :] = [135, 206, 235]

    # Grass (green)
    img[100:, :] = [34, 139, 34]

    # Sun (yellow circle)
    center_x, center_y = 240, 40
    radius = 20
    y, x = np.ogrid[:200, :300]
    mask = (x - center_x)**2 + (y - center_y)**2 <= radius**2
    img[mask] = [255, 215, 0]

    # Tree (brown trunk + green leaves)
    img[125:175, 50:60] = [101, 67, 33]
    img[75:130, 30:80] = [0, 128, 0]

    # House (white walls, red roof)
    img[110:160, 150:200] = [255, 255, 255]
    for i in range(30):
        half = 30 - i
        img[80 + i, 175 - half:175 + half] = [178, 34, 34]

    Image.fromarray(img).save(path)
    print(f"Sample image saved to: {path}")
    return path


def save(array: np.ndarray, path: str) -> None:
    Image.fromarray(to_uint8(array)).save(path)
    print(f"  Saved: {path}")


def demo_maps(image: np.ndarray) -> None:
    """Show the energy, the cumulative cost and the first seam."""
    print("\n" + "="*60)
    print("DEMO: Energy, cost and seam")
    print("="*60)

    carver = SeamCarver()
    energy = carver.compute_energy(image)
    cost, _ = find_energy_map(energy)
    seam = find_seam(energy)

    print(f"  Image size: {image.shape[:2]}")
    print(f"  Energy range: {energy.min():.3f} .. {energy.max():.3f}")
    print(f"  Best seam starts at column {seam[0]} with cost {cost[0, seam[0]]:.3f}")

    save(grey_to_rgb(normalize_greyness(energy)), "demo_energy.png")
    save(grey_to_rgb(normalize_greyness(cost)), "demo_cost.png")
    save(draw_seam(image, seam), "demo_seam.png")


def demo_carving(image: np.ndarray) -> None:
    """Carve 30% of the width and keep every step."""
    print("\n" + "="*60)
    print("DEMO: Carving")
    print("="*60)

    resizer = ContentAwareResizer()
    frames = resizer.carve_all(image, max_reduction=0.3)

    print(f"  Computed {len(frames)} intermediate images")
    for i in (0, len(frames) // 2, len(frames) - 1):
        print(f"  Step {i + 1}: {frames[i].shape[1]} columns")

    save(frames[-1], "demo_carved.png")


def main():
    if len(sys.argv) > 1:
        image_path = sys.argv[1]
        if not Path(image_path).exists():
            print(f"Error: Input file not found: {image_path}", file=sys.stderr)
            sys.exit(1)
    else:
        image_path = create_sample_image()

    image = load_image(image_path)

    demo_maps(image)
    demo_carving(image)


if __name__ == "__main__":
    main()
