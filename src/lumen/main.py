# main.py
"""Render one of the built-in scenes to a plain PPM file.

Usage:
    lumen [options]
    python -m lumen.main [options]

Example:
    lumen --scene demo --width 200 --samples 16 --output render.ppm
"""
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from lumen.camera.camera import AntiAliasing, Camera
from lumen.renderer.ppm import write_ppm
from lumen.scenes import SCENES

logger = logging.getLogger(__name__)


def parse_aspect(value: str) -> float:
    """Accept "16:9" or a plain number."""
    try:
        if ":" in value:
            w, h = value.split(":", 1)
            return float(w) / float(h)
        return float(value)
    except (ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"invalid aspect ratio: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lumen",
        description="Render a scene with the lumen ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="demo",
                        help="Scene to render (default: demo)")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--aspect", type=parse_aspect, help="Aspect ratio, e.g. 16:9 or 1.5")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum number of ray bounces")
    parser.add_argument("--vfov", type=float, help="Vertical field of view in degrees")
    parser.add_argument("--defocus-angle", type=float, help="Lens cone angle in degrees, 0 disables blur")
    parser.add_argument("--focus-distance", type=float, help="Distance to the plane in perfect focus")
    parser.add_argument("--anti-aliasing", choices=[m.value for m in AntiAliasing],
                        help="Pixel sampling strategy")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible render")
    parser.add_argument("--output", default="render.ppm", help="Output file path (default: render.ppm)")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    world, config = SCENES[args.scene]()

    overrides = {
        "image_width": args.width,
        "aspect_ratio": args.aspect,
        "samples_per_pixel": args.samples,
        "max_depth": args.max_depth,
        "vertical_fov_degrees": args.vfov,
        "defocus_angle": args.defocus_angle,
        "focus_distance": args.focus_distance,
        "seed": args.seed,
    }
    if args.anti_aliasing is not None:
        overrides["anti_aliasing"] = AntiAliasing(args.anti_aliasing)
    config = dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})

    try:
        camera = Camera(config)
    except ValueError as e:
        logger.error("Invalid camera configuration: %s", e)
        return 1

    logger.info("Rendering scene %r with %d objects", args.scene, len(world))
    pixels = camera.render(world, progress=not args.quiet)

    try:
        write_ppm(args.output, pixels)
    except OSError as e:
        logger.error("Failed to write %s: %s", args.output, e)
        return 1

    logger.info("Rendering finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
