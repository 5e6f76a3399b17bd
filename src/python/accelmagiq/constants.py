"""
===============================================================================
ACCELMAGIQ - Angle Constants and Numerical Tolerances
===============================================================================
Central repository for the constants shared by the quaternion and Euler
angle modules. All angles are in radians unless the name says otherwise.
===============================================================================
"""

import numpy as np


# =============================================================================
# MATHEMATICAL CONSTANTS
# =============================================================================
PI = np.pi
TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi
DEG2RAD = PI / 180.0
RAD2DEG = 180.0 / PI

# =============================================================================
# REPRESENTATION SIZES
# =============================================================================
QUATERNION_SIZE = 4                    # [w, x, y, z]
EULER_ANGLES_SIZE = 3                  # [roll, pitch, yaw]

# =============================================================================
# TOLERANCES
# =============================================================================
UNIT_NORM_TOLERANCE = 1e-8             # |q| - 1 allowed by is_unit()
COMPARISON_TOLERANCE = 1e-9            # default atol for is_close()
