"""Animal movement and perception constants."""

import math

# Speed limits (world units per step)
SPEED_MIN = 0.001
SPEED_MAX = 0.005
INITIAL_SPEED = 0.002

# Maximum change the brain may apply in a single step
SPEED_ACCEL = 0.2
ROTATION_ACCEL = math.pi / 2

# Field of view
EYE_FOV_RANGE = 0.25  # How far an animal can see
EYE_FOV_ANGLE = math.pi + math.pi / 4  # Angular width of the visible cone
EYE_CELLS = 9  # Photoreceptors; also the brain's input width
