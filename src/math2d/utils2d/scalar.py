import math

from math2d.errors import InvalidArgument

from .constants import DEG2RAD, RAD2DEG


def ieee_div(a, b):
    """Divide like IEEE 754 floats do: x/0 is +-inf and 0/0 is nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def to_deg(angle):
    return angle * RAD2DEG


def to_rad(angle):
    return angle * DEG2RAD


def distance(x1, y1, x2, y2):
    return math.hypot(x2 - x1, y2 - y1)


def lerp(a, b, amt):
    """Smoothstep-weighted interpolation between `a` and `b`.

    This is NOT linear: the blend weight is the cubic ease (3 - 2t) * t^2,
    so the curve is flat at both ends. Vector2D.lerp on the other hand is
    plain linear interpolation. Works on numpy arrays as well as floats.
    """
    return (b - a) * (3.0 - amt * 2.0) * amt * amt + a


def inverse_lerp(a, b, value):
    """Parameter t such that a linear blend of `a` and `b` by t gives `value`.

    Not guarded: a == b yields inf or nan.
    """
    return ieee_div(value - a, b - a)


def remap(value, a1, a2, b1, b2):
    """Re-map `value` from the range a1..a2 into b1..b2 (linearly)."""
    if a1 == a2:
        raise InvalidArgument(f"cannot remap from an empty range ({a1} .. {a2})")
    return b1 + (b2 - b1) * (value - a1) / (a2 - a1)


map = remap


def normalize(value, a, b):
    return remap(value, a, b, 0.0, 1.0)


def constrain(x, a, b):
    low, high = min(a, b), max(a, b)
    return min(max(x, low), high)


clamp = constrain
