from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from math2d import utils2d
from math2d.errors import InvalidArgument
from math2d.linalg import Vector2D

logger = logging.getLogger(__name__)

# Darkest to brightest.
SHADES = " .:-=+*#%@"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def render_noise(width: int, height: int, scale: float, x: float = 0.0, y: float = 0.0) -> list[str]:
    """Shade a noise field as text, one string per row."""
    field = utils2d.noise_grid(width, height, scale=scale, offset=(x, y))
    # Noise is centred on 0; shift to 0..1 before picking a shade.
    levels = np.clip(field + 0.5, 0.0, 1.0)
    idx = np.minimum((levels * len(SHADES)).astype(np.int64), len(SHADES) - 1)
    return ["".join(SHADES[i] for i in row) for row in idx]


def gradient(start: str, end: str, steps: int, hue: bool = False) -> list[tuple[float, ...]]:
    if steps < 2:
        raise InvalidArgument(f"need at least 2 steps, got {steps}")
    a = utils2d.hex_to_rgb(start)
    b = utils2d.hex_to_rgb(end)
    blend = utils2d.lerp_hue if hue else utils2d.lerp_rgb
    return [blend(a, b, i / (steps - 1)) for i in range(steps)]


def _cmd_noise(ns: argparse.Namespace) -> int:
    for line in render_noise(ns.width, ns.height, ns.scale, ns.x, ns.y):
        print(line)
    return 0


def _cmd_gradient(ns: argparse.Namespace) -> int:
    for color in gradient(ns.start, ns.end, ns.steps, hue=ns.hue):
        channels = " ".join(f"{c:.3f}" for c in color)
        print(f"{utils2d.rgb_to_hex(color)}  {channels}")
    return 0


def _cmd_arrow(ns: argparse.Namespace) -> int:
    v = Vector2D(ns.x, ns.y)
    print(f"Magnitude: {v.magnitude():.2f}")
    print(f"Heading: {utils2d.to_deg(v.heading()):.2f}°")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="math2d",
        description="Poke at the math2d vector, noise and color helpers from a terminal.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("noise", help="Print an ASCII shade map of the noise field.")
    p.add_argument("--width", type=int, default=72)
    p.add_argument("--height", type=int, default=24)
    p.add_argument("--scale", type=float, default=0.1)
    p.add_argument("--x", type=float, default=0.0, help="Horizontal offset in pixels.")
    p.add_argument("--y", type=float, default=0.0, help="Vertical offset in pixels.")
    p.set_defaults(func=_cmd_noise)

    p = sub.add_parser("gradient", help="Interpolate between two hex colors.")
    p.add_argument("start", help="Start color, e.g. '#ff0000'.")
    p.add_argument("end", help="End color, e.g. '#0000ff'.")
    p.add_argument("--steps", type=int, default=5)
    p.add_argument("--hue", action="store_true", help="Blend around the hue circle instead of per channel.")
    p.set_defaults(func=_cmd_gradient)

    p = sub.add_parser("arrow", help="Show magnitude and heading of a vector.")
    p.add_argument("x", type=float)
    p.add_argument("y", type=float)
    p.set_defaults(func=_cmd_arrow)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    configure_logging(logging.DEBUG if ns.verbose else logging.WARNING)

    if ns.command is None:
        parser.print_help(sys.stderr)
        return 2

    logger.debug("running %s", ns.command)
    try:
        return ns.func(ns)
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
