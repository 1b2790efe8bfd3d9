import math
import numbers
import random

from math2d.errors import InvalidArgument
from math2d.utils2d.constants import HALF_PI, TWO_PI
from math2d.utils2d.scalar import ieee_div


class Vector2D:
    """Point or direction in the plane, with value semantics.

    Every operation returns a new vector; nothing mutates in place. The y
    axis is assumed to point down (screen coordinates), so `up` is (0, -1)
    and positive rotation angles turn clockwise on screen.
    """

    def __init__(self, x=0.0, y=0.0):
        self.x, self.y = float(x), float(y)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def one(cls):
        return cls(1.0, 1.0)

    @classmethod
    def up(cls):
        return cls(0.0, -1.0)

    @classmethod
    def down(cls):
        return cls(0.0, 1.0)

    @classmethod
    def left(cls):
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls):
        return cls(1.0, 0.0)

    @classmethod
    def from_angle(cls, theta, length=1.0):
        return cls(length * math.cos(theta), length * math.sin(theta))

    @classmethod
    def from_array(cls, arr):
        """Build a vector from the first two items of `arr` (extra items are ignored)."""
        if isinstance(arr, (str, bytes)):
            raise InvalidArgument(f"expected a sequence of numbers, got {arr!r}")
        try:
            size = len(arr)
        except TypeError as err:
            raise InvalidArgument(f"expected a sequence of numbers, got {arr!r}") from err
        if size < 2:
            raise InvalidArgument(f"expected at least 2 elements, got {size}")
        try:
            x, y = arr[0], arr[1]
        except (TypeError, IndexError, KeyError) as err:
            raise InvalidArgument(f"expected an indexable sequence, got {arr!r}") from err
        if not (isinstance(x, numbers.Real) and isinstance(y, numbers.Real)):
            raise InvalidArgument(f"expected numeric elements, got {x!r} and {y!r}")
        return cls(x, y)

    @classmethod
    def random(cls, rng=None):
        """Unit vector pointing in a uniformly random direction.

        `rng` is anything with a ``uniform(a, b)`` method, e.g. a seeded
        ``random.Random``; the process-wide generator is used when omitted.
        """
        theta = (rng or random).uniform(0.0, TWO_PI)
        return cls(math.cos(theta), math.sin(theta))

    def _pair(self, other):
        if isinstance(other, Vector2D):
            return other.x, other.y
        if isinstance(other, numbers.Real):
            return other, other
        if isinstance(other, (list, tuple)):
            v = Vector2D.from_array(other)
            return v.x, v.y
        return None

    def __add__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(self.x + pair[0], self.y + pair[1])

    __radd__ = __add__

    def __sub__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(self.x - pair[0], self.y - pair[1])

    def __rsub__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(pair[0] - self.x, pair[1] - self.y)

    def __mul__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(self.x * pair[0], self.y * pair[1])

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        # Zero divisors give inf/nan components rather than raising.
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(ieee_div(self.x, pair[0]), ieee_div(self.y, pair[1]))

    def __neg__(self):
        return Vector2D(-self.x, -self.y)

    negate = __neg__
    reverse = __neg__

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self):
        return 2

    def __getitem__(self, idx):
        return self.to_tuple()[idx]

    def __repr__(self):
        return f"Vector2D({self.x!r}, {self.y!r})"

    def __str__(self):
        return str(self.to_array())

    def add(self, other):
        return self + other

    def sub(self, other):
        return self - other

    def mul(self, other):
        return self * other

    def div(self, other):
        return self / other

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        """2D wedge product: the signed area of the parallelogram spanned by self and other."""
        return self.x * other.y - other.x * self.y

    wedge = cross

    def squared_magnitude(self):
        return self.x * self.x + self.y * self.y

    magnitude2 = squared_magnitude

    def magnitude(self):
        return math.sqrt(self.squared_magnitude())

    length = magnitude

    def squared_distance(self, other):
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    distance2 = squared_distance

    def distance(self, other):
        return math.sqrt(self.squared_distance(other))

    def ratio(self):
        """x / y; a zero y gives inf or nan."""
        return ieee_div(self.x, self.y)

    def limit(self, max_magnitude):
        msq = self.squared_magnitude()
        if msq <= max_magnitude * max_magnitude:
            return self
        return self * (max_magnitude / math.sqrt(msq))

    def constrain(self, min_magnitude, max_magnitude):
        """Keep the direction, but force the magnitude into [min, max].

        Bounds given in the wrong order are swapped. The zero vector has no
        direction and stays zero.
        """
        if min_magnitude > max_magnitude:
            min_magnitude, max_magnitude = max_magnitude, min_magnitude
        msq = self.squared_magnitude()
        if msq > max_magnitude * max_magnitude:
            return self.set_magnitude(max_magnitude)
        if msq < min_magnitude * min_magnitude:
            return self.set_magnitude(min_magnitude)
        return self

    clamp = constrain

    def set_magnitude(self, new_magnitude):
        mag = self.magnitude()
        if mag == 0:
            # Zero vector: scale by m / inf == 0 instead of producing nan.
            mag = math.inf
        return self * (new_magnitude / mag)

    def normalize(self):
        return self.set_magnitude(1.0)

    unit = normalize

    def is_normalized(self):
        return math.isclose(self.squared_magnitude(), 1.0)

    def heading(self):
        """Angle to the +x axis in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def y_heading(self):
        return HALF_PI - self.heading()

    def angle_between(self, other):
        """Unsigned angle to `other` in radians.

        nan when either vector has zero length.
        """
        cos_theta = ieee_div(self.dot(other), self.magnitude() * other.magnitude())
        if not math.isnan(cos_theta):
            # Rounding can push parallel vectors just past +-1.
            cos_theta = min(max(cos_theta, -1.0), 1.0)
        return math.acos(cos_theta)

    def is_opposite(self, other):
        return self.dot(other) < 0

    def rotate(self, angle):
        """Rotate by `angle` radians.

        Uses the standard rotation matrix, which turns +x toward +y. With the
        y axis pointing down that reads as clockwise on screen:
        Vector2D(1, 0).rotate(HALF_PI) is (0, 1), i.e. `down`.
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2D(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def rotate_around(self, pivot, angle):
        """Rotate about `pivot` by `angle` radians, same direction as rotate()."""
        return (self - pivot).rotate(angle) + pivot

    def lerp(self, other, amt):
        """Linear interpolation (amt is not clamped, so it extrapolates outside 0..1)."""
        return Vector2D(
            self.x + (other.x - self.x) * amt,
            self.y + (other.y - self.y) * amt,
        )

    def inverse_lerp(self, other, value):
        """Per-component parameter t of lerp() that lands on `value`."""
        return (value - self) / (other - self)

    def reflect(self, normal):
        normal = normal.normalize()
        return self - normal * (2.0 * normal.dot(self))

    def refract(self, normal, eta):
        """Refract through a surface with unit `normal` and index ratio `eta`.

        Returns the zero vector on total internal reflection.
        """
        d = normal.dot(self)
        k = 1.0 - eta * eta * (1.0 - d * d)
        if k < 0:
            return Vector2D.zero()
        return self * eta - normal * (eta * d + math.sqrt(k))

    def perp(self):
        """Perpendicular vector, a quarter turn counter to rotate(HALF_PI)."""
        return Vector2D(self.y, -self.x)

    vector_cross_product = perp

    def to_array(self):
        return [self.x, self.y]

    def to_tuple(self):
        return (self.x, self.y)
