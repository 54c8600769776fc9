"""Command-line entry point for rasterkit.

Loads an image, optionally downsamples it to a target size (or by a scale
factor), optionally applies a Gaussian blur, and saves the result.

All processing occurs on NumPy-backed images; Pillow is used only for
loading and saving.

Usage example:
    python -m rasterkit.main -i input.png -o output.png --scale 0.5 --blur 1.5
"""
from __future__ import annotations

import argparse
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .algorithms import blur_image, resample_image
from .errors import ContractViolation
from .image import Image
from .utils.loader import load_image, save_image

ORDERS = ["resample-first", "blur-first"]


@dataclass
class PipelineConfig:
    width: Optional[int] = None
    height: Optional[int] = None
    scale: Optional[float] = None
    blur: float = 0.0
    order: str = "resample-first"

    def target_size(self, image: Image) -> Optional[tuple[int, int]]:
        """Resolve the output size for ``image``, or None to skip resampling."""
        if self.scale is not None:
            return (
                max(1, int(round(image.width * self.scale))),
                max(1, int(round(image.height * self.scale))),
            )
        if self.width is None and self.height is None:
            return None
        return (
            self.width if self.width is not None else image.width,
            self.height if self.height is not None else image.height,
        )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="rasterkit",
        description="Downsample and Gaussian-blur images.",
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")

    parser.add_argument("--width", type=int, default=None, help="Target width (>=1)")
    parser.add_argument("--height", type=int, default=None, help="Target height (>=1)")
    parser.add_argument(
        "--scale",
        type=float,
        default=None,
        help="Downsample factor in (0, 1]; exclusive with --width/--height.",
    )
    parser.add_argument(
        "--blur",
        type=float,
        default=0.0,
        help="Gaussian blur sigma in pixels (0 disables blur).",
    )
    parser.add_argument(
        "--order",
        type=str,
        default="resample-first",
        choices=ORDERS,
        help="Whether to resample before or after blurring.",
    )
    parser.add_argument("--gray", action="store_true", help="Process the image as grayscale")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs."""
    if ns.scale is not None:
        if ns.width is not None or ns.height is not None:
            raise ValueError("--scale cannot be combined with --width/--height")
        if not 0.0 < ns.scale <= 1.0:
            raise ValueError("--scale must be in (0, 1]")
    if ns.width is not None and ns.width < 1:
        raise ValueError("--width must be an integer >= 1")
    if ns.height is not None and ns.height < 1:
        raise ValueError("--height must be an integer >= 1")
    if not math.isfinite(ns.blur):
        raise ValueError("--blur must be a finite number")
    if ns.blur < 0:
        raise ValueError("--blur must be >= 0")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def run_pipeline(image: Image, config: PipelineConfig) -> Image:
    """Apply resampling and blur to ``image`` in the configured order."""
    size = config.target_size(image)

    def do_resample(img: Image) -> Image:
        if size is None:
            return img
        return resample_image(img, size[0], size[1])

    if config.order == "blur-first":
        return do_resample(blur_image(image, config.blur))
    return blur_image(do_resample(image), config.blur)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    config = PipelineConfig(
        width=args.width,
        height=args.height,
        scale=args.scale,
        blur=args.blur,
        order=args.order,
    )

    img = load_image(args.input, mode="L" if args.gray else "RGB")
    try:
        out = run_pipeline(img, config)
    except ContractViolation as e:
        print(f"Processing error: {e}")
        return 1

    save_image(out, args.output)
    print(f"Wrote {out.width}x{out.height} image to {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
