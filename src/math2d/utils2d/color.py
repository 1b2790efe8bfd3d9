"""RGB/HSV color helpers.

Colors are 4-tuples (r, g, b, a) or (h, s, v, a) with every component in
0..1. Nothing in the type says which of the two a tuple holds; each function
documents what it expects.
"""

import math
import random

from math2d.errors import InvalidArgument

from .scalar import lerp, normalize


def _channels(color):
    if isinstance(color, (str, bytes)):
        raise InvalidArgument(f"color must be a sequence of 4 numbers, got {color!r}")
    try:
        return color[0], color[1], color[2], color[3]
    except (TypeError, IndexError, KeyError) as err:
        raise InvalidArgument(f"color must be a sequence of 4 numbers, got {color!r}") from err


def grayscale(val=None, rng=None):
    """Gray RGB color for an 8-bit level `val`, or a random gray if omitted."""
    if val is not None:
        # abs() is redundant for 0..255 input; negative levels fold back up.
        c = abs(normalize(val, 0, 255))
    else:
        c = (rng or random).random()
    return (c, c, c, 1.0)


greyscale = grayscale


def rgb_to_hsv(color):
    r, g, b, a = _channels(color)
    high = max(r, g, b)
    low = min(r, g, b)
    v = high
    d = high - low
    s = 0.0 if high == 0 else d / high
    if high == low:
        h = 0.0
    else:
        if high == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif high == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        h /= 6.0
    return (h, s, v, a)


def hsv_to_rgb(color):
    h, s, v, a = _channels(color)
    i = math.floor(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q
    return (r, g, b, a)


def lerp_rgb(a, b, amt):
    """Per-channel smoothstep blend of two RGB colors."""
    a = _channels(a)
    b = _channels(b)
    return tuple(lerp(ca, cb, amt) for ca, cb in zip(a, b))


def lerp_hue(a, b, amt):
    """Blend two RGB colors through HSV space, going the short way round the hue circle.

    Better suited than lerp_rgb to intensity ramps (temperature, density...),
    since the midpoint keeps its saturation instead of going muddy.
    """
    ha, sa, va, aa = rgb_to_hsv(a)
    hb, sb, vb, ab = rgb_to_hsv(b)
    d = abs(hb - ha)
    if ha > hb:
        ha, sa, va, aa, hb, sb, vb, ab = hb, sb, vb, ab, ha, sa, va, aa
        amt = 1 - amt
    if d > 0.5:
        ha += 1.0
        h = (ha + amt * (hb - ha)) % 1.0
    else:
        h = ha + amt * d
    return hsv_to_rgb((h, lerp(sa, sb, amt), lerp(va, vb, amt), lerp(aa, ab, amt)))


def hex_to_rgb(code):
    """Parse "#rrggbb" or "#rrggbbaa" into a normalized RGBA tuple."""
    if not isinstance(code, str):
        raise InvalidArgument(f"hex color must be a string, got {code!r}")
    digits = code[1:] if code.startswith("#") else code
    if len(digits) not in (6, 8):
        raise InvalidArgument(f"hex color must have 6 or 8 digits: {code!r}")
    try:
        values = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError as err:
        raise InvalidArgument(f"invalid hex color: {code!r}") from err
    if len(values) == 3:
        values.append(255)
    return tuple(v / 255.0 for v in values)


def rgb_to_hex(color):
    channels = _channels(color)
    if any(math.isnan(ch) for ch in channels):
        raise InvalidArgument(f"cannot format a nan channel as hex: {color!r}")
    return "#" + "".join(f"{round(min(max(ch, 0.0), 1.0) * 255):02x}" for ch in channels)
