"""
===============================================================================
ACCELMAGIQ - Array Adapters and Unit Conversions
===============================================================================
Functional front end over Quaternion and EulerAngles for callers that only
exchange plain sequences and numbers (an estimation routine upstream, a
display or telemetry routine downstream).

Every function here is stateless and total: malformed arrays fall back to
the identity value and an unknown angle selector yields 0.
===============================================================================
"""

import logging
import math
from enum import IntEnum
from typing import Sequence

import numpy as np

from accelmagiq.constants import DEG2RAD, RAD2DEG
from accelmagiq.euler_angles import EulerAngles
from accelmagiq.quaternion import Quaternion

logger = logging.getLogger(__name__)


class AngleRPY(IntEnum):
    """Selector for a single angle of an EulerAngles value."""
    ROLL = 0        # rotation around the X-axis
    PITCH = 1       # rotation around the Y-axis
    YAW = 2         # rotation around the Z-axis
    AZIMUTH = 3     # derived from yaw


# =============================================================================
# QUATERNION
# =============================================================================

def quat(w: float, x: float, y: float, z: float) -> Quaternion:
    """Create a quaternion from its scalar and vector parts."""
    return Quaternion(w, x, y, z)


def quat_from(q: Sequence[float]) -> Quaternion:
    """Create a quaternion from [w, x, y, z]; identity on a length mismatch."""
    return Quaternion.from_array(q)


def quat_from_rpy(rpy: EulerAngles) -> Quaternion:
    """Create a quaternion from Euler angles."""
    return Quaternion.from_euler_angles(rpy)


def quat_as_array(q: Quaternion) -> np.ndarray:
    """[w, x, y, z] array of a quaternion."""
    return q.to_array()


def normalize(q: Quaternion) -> Quaternion:
    return q.normalize()


def conjugate(q: Quaternion) -> Quaternion:
    return q.conjugate()


def multiply(a: Quaternion, b: Quaternion) -> Quaternion:
    """Hamilton product a * b."""
    return a.multiply(b)


def diff(a: Quaternion, b: Quaternion) -> Quaternion:
    """
    Relative rotation from orientation a to orientation b.

        diff(a, b) = conjugate(a) * b

    The argument order matters: diff(a, b) != diff(b, a) in general.
    """
    return a.conjugate().multiply(b)


def quat_rotation_angle(q: Quaternion) -> float:
    """Rotation angle of q in radians."""
    return q.get_rotation_angle()


# =============================================================================
# EULER ANGLES
# =============================================================================

def rpy(roll: float, pitch: float, yaw: float) -> EulerAngles:
    """Create Euler angles from roll, pitch and yaw in radians."""
    return EulerAngles(roll, pitch, yaw)


def rpy_from(angles: Sequence[float]) -> EulerAngles:
    """Create Euler angles from [roll, pitch, yaw]; identity on a length mismatch."""
    return EulerAngles.from_array(angles)


def rpy_from_quat(q: Quaternion) -> EulerAngles:
    """Euler angles of a quaternion. Normalize q first if it may have drifted."""
    return EulerAngles.from_quaternion(q)


def rpy_as_array(angles: EulerAngles) -> np.ndarray:
    """[roll, pitch, yaw] array in radians."""
    return angles.to_array()


def angle(angles: EulerAngles, selector: AngleRPY) -> float:
    """
    Retrieve one angle from Euler angles.

    Parameters
    ----------
    angles : EulerAngles
        Source attitude.
    selector : AngleRPY
        Which angle to return. Plain integers 0-3 are accepted as well.

    Returns
    -------
    float
        The selected angle in radians, or 0.0 for an unrecognized selector.
    """
    if selector == AngleRPY.ROLL:
        return angles.roll
    elif selector == AngleRPY.PITCH:
        return angles.pitch
    elif selector == AngleRPY.YAW:
        return angles.yaw
    elif selector == AngleRPY.AZIMUTH:
        return angles.get_azimuth()

    logger.debug(f"Unknown angle selector {selector!r}; returning 0")
    return 0.0


# =============================================================================
# UNIT CONVERSIONS
# =============================================================================

def dec_deg(radian: float) -> float:
    """Radians to decimal degrees."""
    return radian * RAD2DEG


def _round_half_up(value: float) -> int:
    """Nearest integer, halves toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def int_deg(radian: float) -> int:
    """
    Radians to whole degrees.

    Halves round toward positive infinity rather than to the nearest even
    integer as the built-in round() does. NaN and infinite input return 0.
    """
    degree = dec_deg(radian)
    if not math.isfinite(degree):
        logger.debug(f"Cannot round non-finite angle {radian!r}; returning 0")
        return 0
    return _round_half_up(degree)


def rad(degree: float) -> float:
    """Degrees to radians."""
    return degree * DEG2RAD
