"""
===============================================================================
ACCELMAGIQ - Euler Angles
===============================================================================

Roll/pitch/yaw attitude representation and its conversion from a
quaternion, plus the compass-style azimuth derived from yaw.

Angles follow the aerospace 3-2-1 (ZYX) sequence used by
Quaternion.from_euler_angles():

    roll  (phi)   -- rotation about the X-axis, in [-pi, pi]
    pitch (theta) -- rotation about the Y-axis, in [-pi/2, pi/2]
    yaw   (psi)   -- rotation about the Z-axis, in (-pi, pi]

The ranges apply to angles extracted from a quaternion. Angles built
directly from components are stored as given.
===============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from accelmagiq.constants import EULER_ANGLES_SIZE, RAD2DEG, TWO_PI
from accelmagiq.quaternion import Quaternion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EulerAngles:
    """Immutable roll/pitch/yaw triple in radians.

    Attributes
    ----------
    roll : float
        Rotation around the X-axis, how much the body tilts to its sides.
    pitch : float
        Rotation around the Y-axis, how much the nose is up or down.
    yaw : float
        Rotation around the Z-axis.
    """
    roll: float
    pitch: float
    yaw: float

    @staticmethod
    def identity() -> EulerAngles:
        """The zero rotation (0, 0, 0)."""
        return EulerAngles(0.0, 0.0, 0.0)

    @staticmethod
    def from_array(rpy: Sequence[float]) -> EulerAngles:
        """Create Euler angles from a [roll, pitch, yaw] sequence in radians.

        Any length other than three yields the identity angles.
        """
        if len(rpy) != EULER_ANGLES_SIZE:
            logger.debug(f"Expected {EULER_ANGLES_SIZE} Euler angles, "
                         f"got {len(rpy)}; using identity")
            return EulerAngles.identity()
        return EulerAngles(float(rpy[0]), float(rpy[1]), float(rpy[2]))

    @staticmethod
    def from_quaternion(q: Quaternion) -> EulerAngles:
        """
        Extract 3-2-1 (ZYX) Euler angles from a quaternion.

            roll  = atan2(2*(w*x + y*z), 1 - 2*(x^2 + y^2))
            pitch = arcsin(2*(w*y - z*x))
            yaw   = atan2(2*(w*z + x*y), 1 - 2*(y^2 + z^2))

        The quaternion is used as given. Callers normalize it first when the
        source may have drifted from unit norm.

        Parameters
        ----------
        q : Quaternion
            Attitude quaternion, ideally of unit norm.

        Returns
        -------
        EulerAngles
            The extracted roll, pitch and yaw.

        Warnings
        --------
        Near gimbal lock (pitch -> +/-pi/2) roll and yaw become coupled and
        only their sum/difference is meaningful.
        """
        w, x, y, z = q.w, q.x, q.y, q.z

        ysqr = y * y
        sinr_cosp = 2.0 * (w * x + y * z)
        cosr_cosp = 1.0 - 2.0 * (x * x + ysqr)
        roll = np.arctan2(sinr_cosp, cosr_cosp)

        # Clamp to [-1, 1] to prevent NaN from arcsin for non-unit input
        sinp = 2.0 * (w * y - z * x)
        sinp = np.clip(sinp, -1.0, 1.0)
        pitch = np.arcsin(sinp)

        siny_cosp = 2.0 * (w * z + x * y)
        cosy_cosp = 1.0 - 2.0 * (ysqr + z * z)
        yaw = np.arctan2(siny_cosp, cosy_cosp)

        return EulerAngles(float(roll), float(pitch), float(yaw))

    def get_azimuth(self) -> float:
        """
        Compass-style azimuth derived from yaw.

        Positive yaw maps to 2*pi - yaw, non-positive yaw to -yaw, so a yaw
        in (-pi, pi] becomes an azimuth in [0, 2*pi).
        """
        if self.yaw > 0.0:
            return TWO_PI - self.yaw
        return -self.yaw if self.yaw < 0.0 else 0.0

    def to_array(self) -> np.ndarray:
        """[roll, pitch, yaw] as a float64 array. Azimuth is not included."""
        return np.array([self.roll, self.pitch, self.yaw], dtype=np.float64)

    def to_degrees(self) -> Tuple[float, float, float]:
        """(roll, pitch, yaw) in decimal degrees, for display."""
        return (self.roll * RAD2DEG, self.pitch * RAD2DEG, self.yaw * RAD2DEG)

    def __str__(self) -> str:
        roll, pitch, yaw = self.to_degrees()
        return (f"Roll={roll:+7.2f} deg, "
                f"Pitch={pitch:+7.2f} deg, "
                f"Yaw={yaw:+7.2f} deg")
