"""
===============================================================================
ACCELMAGIQ - Quaternion Mathematics
===============================================================================

Quaternion value type for attitude representation. The quaternion is the
leaf of the library: Euler angle conversion and the array adapters are
built on top of it.

Convention
----------
We use the scalar-first convention:

    q = [q_w, q_x, q_y, q_z] = q_w + q_x*i + q_y*j + q_z*k

where q_w is the scalar (real) part and [q_x, q_y, q_z] is the vector
(imaginary) part.

Unlike a strict unit-quaternion class, no normalization is enforced on
construction. Raw estimator output (which may drift from unit norm) is a
valid value; normalization is an explicit operation that returns a new
instance.

Soft failure
------------
None of the operations raise on malformed numeric input. A component array
of the wrong length and a zero-norm quaternion both fall back to the
identity quaternion, so a continuous sensor-polling loop sees a one-frame
"no rotation" instead of an exception.

Euler Angle Convention
----------------------
The aerospace 3-2-1 (ZYX) sequence:
    1. Yaw   about the Z-axis
    2. Pitch about the new Y-axis
    3. Roll  about the new X-axis

References
----------
    [1] Markley & Crassidis, "Fundamentals of Spacecraft Attitude
        Determination and Control", Springer, 2014.
    [2] Diebel, "Representing Attitude: Euler Angles, Unit Quaternions, and
        Rotation Vectors", Stanford, 2006.

===============================================================================
"""

import logging
from typing import Sequence, TYPE_CHECKING

import numpy as np

from accelmagiq.constants import (
    COMPARISON_TOLERANCE, QUATERNION_SIZE, UNIT_NORM_TOLERANCE
)

if TYPE_CHECKING:
    from accelmagiq.euler_angles import EulerAngles

logger = logging.getLogger(__name__)


class Quaternion:
    """
    Immutable quaternion for 3D rotation representation.

    A unit quaternion q = [w, x, y, z] parameterizes a rotation by angle theta
    about unit axis n as:

        q = [cos(theta/2), sin(theta/2) * n_x, sin(theta/2) * n_y, sin(theta/2) * n_z]

    Non-unit quaternions are also representable; see normalize().

    Attributes
    ----------
    w : float
        Scalar (real) component of the quaternion.
    x : float
        First imaginary component (i-axis).
    y : float
        Second imaginary component (j-axis).
    z : float
        Third imaginary component (k-axis).

    Examples
    --------
    >>> q = Quaternion.from_array([1.0, 2.0, 3.0, 4.0])
    >>> q.normalize().to_array()
    array([0.18257419, 0.36514837, 0.54772256, 0.73029674])
    """

    __slots__ = ('_q',)

    def __init__(self, w: float, x: float, y: float, z: float) -> None:
        """
        Initialize a quaternion with scalar-first convention.

        Parameters
        ----------
        w : float
            Scalar part (cos(theta/2) for a unit rotation by angle theta).
        x : float
            i-component of the vector part.
        y : float
            j-component of the vector part.
        z : float
            k-component of the vector part.
        """
        q = np.array([w, x, y, z], dtype=np.float64)
        q.flags.writeable = False
        self._q = q

    # =========================================================================
    # PROPERTIES - Read access to quaternion components
    # =========================================================================

    @property
    def w(self) -> float:
        """Scalar (real) part of the quaternion."""
        return float(self._q[0])

    @property
    def x(self) -> float:
        """First imaginary component (i-axis)."""
        return float(self._q[1])

    @property
    def y(self) -> float:
        """Second imaginary component (j-axis)."""
        return float(self._q[2])

    @property
    def z(self) -> float:
        """Third imaginary component (k-axis)."""
        return float(self._q[3])

    @property
    def components(self) -> np.ndarray:
        """
        Full quaternion as a 4-element numpy array [w, x, y, z].

        Returns
        -------
        np.ndarray
            Writable copy of the internal quaternion array.
        """
        return self._q.copy()

    @property
    def norm(self) -> float:
        """
        L2 norm (magnitude) of the quaternion.

        Returns
        -------
        float
            Euclidean norm sqrt(w^2 + x^2 + y^2 + z^2).
        """
        return float(np.sqrt(np.dot(self._q, self._q)))

    # =========================================================================
    # STATIC FACTORY METHODS
    # =========================================================================

    @staticmethod
    def identity() -> 'Quaternion':
        """
        Create the identity quaternion [1, 0, 0, 0].

        The identity represents zero rotation and is the fallback value for
        every conversion that receives malformed input.

        Returns
        -------
        Quaternion
            The identity quaternion.
        """
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_array(q: Sequence[float]) -> 'Quaternion':
        """
        Create a quaternion from a [w, x, y, z] sequence.

        This is a defensive fallback for an upstream estimation stage that
        may hand over a malformed array, not a validation layer: any length
        other than four yields the identity quaternion.

        Parameters
        ----------
        q : sequence of float
            The quaternion components in [w, x, y, z] order.

        Returns
        -------
        Quaternion
            The quaternion, or the identity if len(q) != 4.
        """
        if len(q) != QUATERNION_SIZE:
            logger.debug(f"Expected {QUATERNION_SIZE} quaternion components, "
                         f"got {len(q)}; using identity")
            return Quaternion.identity()
        return Quaternion(q[0], q[1], q[2], q[3])

    @staticmethod
    def from_euler_angles(rpy: 'EulerAngles') -> 'Quaternion':
        """
        Create a quaternion from 3-2-1 (ZYX) Euler angles.

        The closed form comes from multiplying the three single-axis
        quaternions:

            q = q_z(yaw) * q_y(pitch) * q_x(roll)

        Parameters
        ----------
        rpy : EulerAngles
            Roll, pitch and yaw in radians.

        Returns
        -------
        Quaternion
            Unit quaternion equivalent to the Euler angle sequence.
        """
        cy = np.cos(rpy.yaw * 0.5)
        sy = np.sin(rpy.yaw * 0.5)
        cp = np.cos(rpy.pitch * 0.5)
        sp = np.sin(rpy.pitch * 0.5)
        cr = np.cos(rpy.roll * 0.5)
        sr = np.sin(rpy.roll * 0.5)

        w = cr * cp * cy + sr * sp * sy
        x = sr * cp * cy - cr * sp * sy
        y = cr * sp * cy + sr * cp * sy
        z = cr * cp * sy - sr * sp * cy

        return Quaternion(w, x, y, z)

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def normalize(self) -> 'Quaternion':
        """
        Return a new unit-magnitude quaternion.

        Returns
        -------
        Quaternion
            self / |self|, or the identity quaternion when |self| is zero.
        """
        n = self.norm
        if n > 0.0:
            q = self._q / n
            return Quaternion(q[0], q[1], q[2], q[3])

        logger.debug("Cannot normalize zero quaternion; using identity")
        return Quaternion.identity()

    def conjugate(self) -> 'Quaternion':
        """
        Return the quaternion conjugate [w, -x, -y, -z].

        For unit quaternions the conjugate is the inverse rotation.
        """
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Multiply this quaternion by another (Hamilton product).

        Quaternion multiplication is NOT commutative: q1 * q2 != q2 * q1
        in general. The product self * other rotates a vector first by
        'other' and then by 'self'.

        Parameters
        ----------
        other : Quaternion
            The right-hand quaternion in the product.

        Returns
        -------
        Quaternion
            The Hamilton product self * other.
        """
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z

        w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
        x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
        y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
        z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2

        return Quaternion(w, x, y, z)

    # =========================================================================
    # CONVERSION METHODS
    # =========================================================================

    def to_array(self) -> np.ndarray:
        """
        Convert to a [w, x, y, z] array.

        Returns
        -------
        np.ndarray
            4-element float64 array, the inverse of from_array().
        """
        return self._q.copy()

    def get_rotation_angle(self) -> float:
        """
        Total rotation angle in radians.

        A normalized copy is used, so the stored components are untouched:

            angle = 2 * arccos(w / |q|)

        Returns
        -------
        float
            Rotation angle in radians. No sign canonicalization is applied,
            so a quaternion with negative w reports the long way round
            (angle > pi).
        """
        q = self.normalize()
        # Clamp to [-1, 1] to protect against floating-point overshoot in arccos
        return float(2.0 * np.arccos(np.clip(q.w, -1.0, 1.0)))

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        """Hamilton product operator: self * other."""
        if isinstance(other, Quaternion):
            return self.multiply(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        """
        Exact component equality.

        q and -q represent the same rotation but are different values and
        compare unequal. Use is_close() for tolerance comparisons.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    def __hash__(self) -> int:
        return hash(tuple(self._q.tolist()))

    def __repr__(self) -> str:
        return (f"Quaternion(w={self.w:+.8f}, x={self.x:+.8f}, "
                f"y={self.y:+.8f}, z={self.z:+.8f})")

    def __str__(self) -> str:
        """Human-readable form with the equivalent rotation angle."""
        angle_deg = np.degrees(self.get_rotation_angle())
        return (f"[{self.w:+.6f}, {self.x:+.6f}, {self.y:+.6f}, "
                f"{self.z:+.6f}] (rot={angle_deg:.2f} deg)")

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def is_unit(self, tolerance: float = UNIT_NORM_TOLERANCE) -> bool:
        """
        Check if this quaternion has unit norm.

        Parameters
        ----------
        tolerance : float
            Acceptable deviation from 1.0.

        Returns
        -------
        bool
            True if |q| is within tolerance of 1.0.
        """
        return abs(self.norm - 1.0) < tolerance

    def is_close(self, other: 'Quaternion',
                 atol: float = COMPARISON_TOLERANCE) -> bool:
        """Component-wise comparison within an absolute tolerance."""
        return bool(np.allclose(self._q, other._q, rtol=0.0, atol=atol))
