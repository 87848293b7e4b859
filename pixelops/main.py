# pixelops/main.py

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from evaluation.metrics import compute_psnr, compute_ssim
from pixelops.adjust import set_hue, set_lightness, set_saturation
from pixelops.config import DEFAULT_WORKERS
from pixelops.errors import PixelopsError
from pixelops.fusion import composite_filter
from pixelops.geometry import rotate_times
from pixelops.grid import PixelGrid
from pixelops.imageio import load_image, load_overlay, save_image
from pixelops.log import log, warn
from pixelops.tone import bw_stylize, grayscale, invert, sepia

OPERATIONS = (
    "grayscale",
    "invert",
    "sepia",
    "bw",
    "rotate",
    "hue",
    "saturation",
    "lightness",
    "filter",
)
VALUE_OPERATIONS = {"hue", "saturation", "lightness"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelops",
        description="Apply a pixel transformation to an image file.",
    )
    parser.add_argument("input", help="Path to the source image")
    parser.add_argument("output", help="Path to write the result (format from extension)")
    parser.add_argument("--op", required=True, choices=OPERATIONS, help="Transformation to apply")
    parser.add_argument(
        "--value",
        type=float,
        default=None,
        help="Component value for hue (0-360), saturation (0-1) or lightness (0-1)",
    )
    parser.add_argument("--turns", type=int, default=1, help="Quarter turns for --op rotate (default: 1)")
    parser.add_argument("--halo", default=None, help="Halo texture for --op filter")
    parser.add_argument("--grain", default=None, help="Grain texture for --op filter")
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Row bands processed in parallel (default: {DEFAULT_WORKERS})",
    )
    parser.add_argument(
        "--reference",
        default=None,
        help="Optional reference image; PSNR/SSIM against the result are reported",
    )
    return parser


def apply_operation(image: PixelGrid, args: argparse.Namespace) -> PixelGrid:
    op = args.op
    workers = args.workers

    if op == "grayscale":
        return grayscale(image, workers=workers)
    if op == "invert":
        return invert(image, workers=workers)
    if op == "sepia":
        return sepia(image, workers=workers)
    if op == "bw":
        return bw_stylize(image, workers=workers)
    if op == "rotate":
        return rotate_times(image, args.turns)
    if op == "hue":
        return set_hue(image, args.value, workers=workers)
    if op == "saturation":
        return set_saturation(image, args.value, workers=workers)
    if op == "lightness":
        return set_lightness(image, args.value, workers=workers)
    if op == "filter":
        halo = load_overlay(args.halo, image.width, image.height)
        grain = load_overlay(args.grain, image.width, image.height)
        return composite_filter(image, halo, grain, workers=workers)
    raise ValueError(f"Unknown operation: {op}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.op in VALUE_OPERATIONS and args.value is None:
        parser.error(f"--value is required for --op {args.op}")
    if args.op == "filter" and (args.halo is None or args.grain is None):
        parser.error("--halo and --grain are required for --op filter")
    if args.workers < 1:
        parser.error("--workers must be >= 1")

    # -----------------------------
    # Load input image
    # -----------------------------
    log(f"Loading {args.input}...")
    try:
        image = load_image(args.input)
    except FileNotFoundError as exc:
        parser.error(str(exc))
    log(f"Loaded {image.width}x{image.height} image.")

    # -----------------------------
    # Transform
    # -----------------------------
    log(f"Applying {args.op}...")
    try:
        result = apply_operation(image, args)
    except (PixelopsError, FileNotFoundError) as exc:
        parser.error(str(exc))

    # -----------------------------
    # Save result
    # -----------------------------
    try:
        save_image(result, args.output)
    except ValueError as exc:
        parser.error(str(exc))
    log(f"Output saved to: {args.output}")

    # -----------------------------
    # Evaluation (optional)
    # -----------------------------
    if args.reference is not None:
        if os.path.exists(args.reference):
            try:
                reference = load_image(args.reference)
                psnr = compute_psnr(reference, result)
                ssim = compute_ssim(reference, result)
            except (FileNotFoundError, ValueError) as exc:
                warn(f"Skipping metrics: {exc}")
            else:
                log(f"PSNR: {psnr:.2f} dB")
                log(f"SSIM: {ssim:.4f}")
        else:
            warn(f"Reference image not found: {args.reference}. Skipping metrics.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
