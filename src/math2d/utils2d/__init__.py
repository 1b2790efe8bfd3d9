"""Scalar, noise and color utilities for 2D graphics code."""

from .color import grayscale, greyscale, hex_to_rgb, hsv_to_rgb, lerp_hue, lerp_rgb, rgb_to_hex, rgb_to_hsv
from .constants import DEG2RAD, HALF_PI, QUARTER_PI, RAD2DEG, TAU, TWO_PI
from .noise import noise, noise_grid
from .scalar import (
    clamp,
    constrain,
    distance,
    ieee_div,
    inverse_lerp,
    lerp,
    map,
    normalize,
    remap,
    to_deg,
    to_rad,
)

__all__ = [
    "HALF_PI",
    "QUARTER_PI",
    "TWO_PI",
    "TAU",
    "DEG2RAD",
    "RAD2DEG",
    "to_deg",
    "to_rad",
    "distance",
    "lerp",
    "inverse_lerp",
    "remap",
    "map",
    "normalize",
    "constrain",
    "clamp",
    "ieee_div",
    "noise",
    "noise_grid",
    "grayscale",
    "greyscale",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "lerp_rgb",
    "lerp_hue",
    "hex_to_rgb",
    "rgb_to_hex",
]
