import logging
import math

import numpy as np

from . import constants as c
from .scalar import lerp

logger = logging.getLogger(__name__)


def _gradient_angle(ix, iy, sin=math.sin, cos=math.cos):
    # Not a PRNG: a fixed trig hash of the lattice corner, so the field is a
    # pure function of (x, y). `sin`/`cos` are swapped for numpy's in noise_grid.
    return (
        c.NOISE_MULTIPLIER
        * sin(ix * c.NOISE_SIN_X + iy * c.NOISE_SIN_Y + c.NOISE_SIN_OFFSET)
        * cos(ix * c.NOISE_COS_X * iy * c.NOISE_COS_Y + c.NOISE_COS_OFFSET)
    )


def _dot_grid_gradient(ix, iy, x, y):
    angle = _gradient_angle(ix, iy)
    return (x - ix) * math.cos(angle) + (y - iy) * math.sin(angle)


def noise(x, y=0.0):
    """2D Perlin noise at (x, y).

    Historically documented as 0..1, but the field is centred on 0: samples
    stay inside [-1, 1] and every integer lattice point returns exactly 0.
    Deterministic, so the same (x, y) always gives the same value.
    """
    x0 = float(math.floor(x))
    y0 = float(math.floor(y))
    x1 = x0 + 1.0
    y1 = y0 + 1.0

    sx = x - x0
    sy = y - y0

    n0 = _dot_grid_gradient(x0, y0, x, y)
    n1 = _dot_grid_gradient(x1, y0, x, y)
    ix0 = lerp(n0, n1, sx)

    n0 = _dot_grid_gradient(x0, y1, x, y)
    n1 = _dot_grid_gradient(x1, y1, x, y)
    ix1 = lerp(n0, n1, sx)

    return lerp(ix0, ix1, sy)


def noise_grid(width, height, scale=1.0, offset=(0.0, 0.0)):
    """Sample noise() over a height x width pixel lattice.

    Pixel (row, col) samples noise((col + ox) * scale, (row + oy) * scale).
    Returns a float64 array of shape (height, width).
    """
    ox, oy = offset
    logger.debug("sampling %dx%d noise grid (scale=%s, offset=%s)", width, height, scale, offset)

    xs = (np.arange(width, dtype=np.float64) + ox) * scale
    ys = (np.arange(height, dtype=np.float64) + oy) * scale
    yy, xx = np.meshgrid(ys, xs, indexing="ij")

    x0 = np.floor(xx)
    y0 = np.floor(yy)
    sx = xx - x0
    sy = yy - y0

    def dot_grid_gradient(ix, iy):
        angle = _gradient_angle(ix, iy, sin=np.sin, cos=np.cos)
        return (xx - ix) * np.cos(angle) + (yy - iy) * np.sin(angle)

    ix0 = lerp(dot_grid_gradient(x0, y0), dot_grid_gradient(x0 + 1.0, y0), sx)
    ix1 = lerp(dot_grid_gradient(x0, y0 + 1.0), dot_grid_gradient(x0 + 1.0, y0 + 1.0), sx)
    return lerp(ix0, ix1, sy)
