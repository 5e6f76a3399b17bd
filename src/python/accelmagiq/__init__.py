"""
===============================================================================
ACCELMAGIQ - Attitude Mathematics Package
===============================================================================
Quaternion and Euler angle value types with the array-oriented adapter
functions used by an attitude-estimation pipeline.

Submodules:
    constants    -- Angle constants and numerical tolerances
    quaternion   -- Quaternion value type and algebra
    euler_angles -- Roll/pitch/yaw value type and azimuth
    conversions  -- AngleRPY selector, array adapters, degree/radian helpers
===============================================================================
"""

from accelmagiq.quaternion import Quaternion
from accelmagiq.euler_angles import EulerAngles
from accelmagiq.conversions import (
    AngleRPY, angle, conjugate, dec_deg, diff, int_deg, multiply, normalize,
    quat, quat_as_array, quat_from, quat_from_rpy, quat_rotation_angle, rad,
    rpy, rpy_as_array, rpy_from, rpy_from_quat,
)

__all__ = [
    'Quaternion', 'EulerAngles', 'AngleRPY',
    'angle', 'conjugate', 'dec_deg', 'diff', 'int_deg', 'multiply',
    'normalize', 'quat', 'quat_as_array', 'quat_from', 'quat_from_rpy',
    'quat_rotation_angle', 'rad', 'rpy', 'rpy_as_array', 'rpy_from',
    'rpy_from_quat',
]

__version__ = '0.1.0'
