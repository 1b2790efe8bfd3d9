"""2D vector algebra plus scalar, noise and color helpers for graphics code."""

from . import utils2d
from .errors import InvalidArgument
from .linalg import Vector2D

__version__ = "0.4.0"

__all__ = ["Vector2D", "InvalidArgument", "utils2d", "__version__"]
