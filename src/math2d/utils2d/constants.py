import math

HALF_PI = math.pi / 2
QUARTER_PI = math.pi / 4
TWO_PI = TAU = math.pi * 2

# Multiply by these instead of calling to_rad / to_deg.
DEG2RAD = math.pi / 180
RAD2DEG = 180 / math.pi

# Lattice gradient hash used by noise(). Changing any of these changes every
# noise field callers have already baked into textures.
NOISE_SIN_X = 21942.0
NOISE_SIN_Y = 171324.0
NOISE_SIN_OFFSET = 8912.0
NOISE_COS_X = 23157.0
NOISE_COS_Y = 217832.0
NOISE_COS_OFFSET = 9758.0
NOISE_MULTIPLIER = 2920.0
