"""Command-line entrypoint that renders demo canvases to PPM text."""

from __future__ import annotations

import argparse
import logging
import sys

from .canvas import Canvas
from .color import Color
from .config import LogLevel, Settings, get_settings
from .errors import RayCanvasError
from .logging import configure_logging
from .ppm import canvas_to_ppm, write_ppm
from .scenes import color_map, projectile

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    settings = settings or get_settings()
    parser = _build_parser(settings)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    line_width = settings.ppm_line_width if args.line_width is None else args.line_width
    if line_width <= 0:
        parser.error("--line-width must be positive")

    try:
        canvas = _render(args)
    except (RayCanvasError, ValueError) as exc:
        parser.error(str(exc))

    if args.output in (None, "-"):
        sys.stdout.write(canvas_to_ppm(canvas, line_width=line_width))
        return 0

    try:
        path = write_ppm(canvas, args.output, line_width=line_width)
    except OSError as exc:
        logger.error("cli.write_failed", extra={"path": args.output, "error": str(exc)})
        print(f"Could not write {args.output}: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {canvas.width}x{canvas.height} canvas to {path}")
    return 0


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raycanvas",
        description="Render demo canvases as plain-text PPM images.",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Destination .ppm file; '-' or omitted writes to stdout",
    )
    parser.add_argument(
        "--line-width",
        type=int,
        default=None,
        help=f"Maximum body line length (default: {settings.ppm_line_width})",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=settings.log_level.value,
        help="Logging level (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    blank_parser = subparsers.add_parser("blank", help="Single-color canvas")
    _add_size_arguments(blank_parser, settings)
    blank_parser.add_argument(
        "--color",
        nargs=3,
        type=float,
        metavar=("R", "G", "B"),
        default=(0.0, 0.0, 0.0),
        help="Fill color channels, nominally 0.0-1.0 (default: black)",
    )

    colormap_parser = subparsers.add_parser("colormap", help="RGB gradient test pattern")
    _add_size_arguments(colormap_parser, settings)

    projectile_parser = subparsers.add_parser("projectile", help="Projectile trajectory plot")
    _add_size_arguments(projectile_parser, settings)
    projectile_parser.add_argument(
        "--velocity",
        type=float,
        default=settings.projectile_velocity,
        help="Launch speed multiplier (default: %(default)s)",
    )

    return parser


def _add_size_arguments(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument("--width", type=int, default=settings.canvas_w, help="Canvas width (default: %(default)s)")
    parser.add_argument("--height", type=int, default=settings.canvas_h, help="Canvas height (default: %(default)s)")


def _render(args: argparse.Namespace) -> Canvas:
    if args.command == "blank":
        canvas = Canvas(args.width, args.height)
        canvas.fill(Color.from_tuple(args.color))
        return canvas
    if args.command == "colormap":
        return color_map(args.width, args.height).canvas
    if args.command == "projectile":
        return projectile(args.width, args.height, velocity_scale=args.velocity).canvas
    raise ValueError(f"Unknown command {args.command!r}")


if __name__ == "__main__":
    sys.exit(main())
