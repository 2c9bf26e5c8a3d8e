from typing import Final


# Shared tolerance for zero, parallel, perpendicular and singularity tests,
# and for "lies on the object" decisions based on distance.
EPSILON: Final[float] = 1e-10

# Above this |q1.q2|, slerp falls back to normalized linear interpolation.
# This is a common heuristic value, tune as needed.
SLERP_LINEAR_THRESHOLD: Final[float] = 0.9995
