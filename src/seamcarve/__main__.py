#!/usr/bin/env python3
"""CLI for content-aware image narrowing."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from PIL import Image

from seamcarve import ContentAwareResizer, SeamCarvingError, load_image
from seamcarve.resizer import prescale, to_pil
from seamcarve.seam_carving import find_energy_map, find_seam
from seamcarve.visualize import colorize, draw_seam, grey_to_rgb, normalize_greyness


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Content-aware image narrowing by seam carving"
    )
    parser.add_argument("input", type=str, help="Input image path")
    parser.add_argument("-o", "--output", type=str, help="Output image path")
    parser.add_argument(
        "-w", "--width", type=int, help="Target width in pixels"
    )
    parser.add_argument(
        "-s", "--scale", type=float, help="Target width as a fraction (e.g., 0.7)"
    )
    parser.add_argument(
        "--prescale", type=float, metavar="RATIO",
        help="Uniformly rescale the input by RATIO before carving"
    )
    parser.add_argument(
        "--energy-map", action="store_true",
        help="Save the energy map instead of carving"
    )
    parser.add_argument(
        "--cost-map", action="store_true",
        help="Save the cumulative seam cost map instead of carving"
    )
    parser.add_argument(
        "--show-seam", action="store_true",
        help="Save the input with its lowest-energy seam marked in red"
    )
    parser.add_argument(
        "--colormap", type=str, default=None,
        help="Matplotlib colormap for --energy-map/--cost-map (default: greyscale)"
    )
    parser.add_argument(
        "--frames", type=str, metavar="DIR",
        help="Save every intermediate image into DIR"
    )
    parser.add_argument(
        "--max-reduction", type=float, default=0.3,
        help="Fraction of the width to remove with --frames"
    )
    parser.add_argument(
        "--analyze", action="store_true",
        help="Analyze content and print statistics"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Hide the progress bar"
    )
    return parser


def _render_field(field, colormap: Optional[str]) -> Image.Image:
    if colormap:
        rgb = colorize(field, cmap=colormap)
    else:
        rgb = grey_to_rgb(normalize_greyness(field))
    return to_pil(rgb)


def _map_output(args, input_path: Path, kind: str, n_maps: int) -> str:
    """Output path for one map; a shared -o gets a per-map suffix."""
    if args.output is None:
        return f"{input_path.stem}_{kind}.png"
    if n_maps == 1:
        return args.output
    out = Path(args.output)
    return str(out.with_name(f"{out.stem}_{kind}{out.suffix or '.png'}"))


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Validate input
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    resizer = ContentAwareResizer()
    show_progress = not args.quiet

    try:
        # Handle visualization modes
        if args.energy_map or args.cost_map or args.show_seam:
            img = load_image(input_path)
            if args.prescale is not None:
                img = prescale(img, args.prescale)
            energy = resizer.seam_carver.compute_energy(img)
            n_maps = sum([args.energy_map, args.cost_map, args.show_seam])

            if args.energy_map:
                output = _map_output(args, input_path, "energy", n_maps)
                _render_field(energy, args.colormap).save(output)
                print(f"Energy map saved to: {output}")

            if args.cost_map:
                cost, _ = find_energy_map(energy)
                output = _map_output(args, input_path, "cost", n_maps)
                _render_field(cost, args.colormap).save(output)
                print(f"Cost map saved to: {output}")

            if args.show_seam:
                marked = draw_seam(img, find_seam(energy))
                output = _map_output(args, input_path, "seam", n_maps)
                to_pil(marked).save(output)
                print(f"Seam visualization saved to: {output}")

            return 0

        # Handle analysis mode
        if args.analyze:
            stats = resizer.analyze_content(input_path)
            print(f"Content Analysis for: {args.input}")
            print(f"  Image size: {stats['size']}")
            print(f"  Mean energy: {stats['mean_energy']:.3f}")
            print(f"  Max energy: {stats['max_energy']:.3f}")
            print(f"  Energy std: {stats['energy_std']:.3f}")
            print(f"  Cheapest seam cost: {stats['min_seam_cost']:.3f}")
            return 0

        # Sequence mode
        if args.frames:
            frames = resizer.carve_all(
                input_path,
                max_reduction=args.max_reduction,
                prescale_ratio=args.prescale,
                show_progress=show_progress,
            )
            out_dir = Path(args.frames)
            out_dir.mkdir(parents=True, exist_ok=True)
            for i, frame in enumerate(frames, start=1):
                to_pil(frame).save(out_dir / f"{input_path.stem}_{i:04d}.png")
            print(f"Saved {len(frames)} frames to: {out_dir}")
            return 0

        # Carving mode
        if args.width is None and args.scale is None:
            print("Error: Please specify --width or --scale, or use --energy-map/--analyze/--frames",
                  file=sys.stderr)
            return 1
        if args.width is not None and args.scale is not None:
            print("Error: --width and --scale are mutually exclusive", file=sys.stderr)
            return 1

        result = resizer.resize(
            input_path,
            target_width=args.width,
            scale=args.scale,
            prescale_ratio=args.prescale,
            show_progress=show_progress,
        )

        # Save result
        output_path = args.output or f"{input_path.stem}_carved.png"
        result.save(output_path)
    except SeamCarvingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Carved: {args.input}")
    print(f"  Original: {result.original_size}")
    print(f"  Carved: {result.carved_size}")
    print(f"  Seams removed: {result.seam_count}")
    print(f"  Width ratio: {result.width_ratio:.2%}")
    print(f"  Saved to: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
