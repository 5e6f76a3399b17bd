"""
===============================================================================
ACCELMAGIQ - Euler Angles Test Suite
===============================================================================
Tests for EulerAngles: array fallback, quaternion extraction and its pitch
clamp, round trips through Quaternion.from_euler_angles(), and azimuth.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import dataclasses
import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from accelmagiq.euler_angles import EulerAngles
from accelmagiq.quaternion import Quaternion


@pytest.fixture
def q_1234_normalized():
    """Return [1, 2, 3, 4] / sqrt(30)."""
    return Quaternion(1.0, 2.0, 3.0, 4.0).normalize()


# =============================================================================
# Test: Construction
# =============================================================================

class TestConstruction:
    """Tests for constructors and array conversion."""

    def test_identity(self):
        assert EulerAngles.identity() == EulerAngles(0.0, 0.0, 0.0)

    def test_from_array(self):
        rpy = EulerAngles.from_array([0.1, -0.2, 3.0])
        assert rpy == EulerAngles(0.1, -0.2, 3.0)

    @pytest.mark.parametrize("seq", [[], [0.1, 0.2], [0.1, 0.2, 0.3, 0.4]])
    def test_from_array_wrong_length_is_identity(self, seq):
        assert EulerAngles.from_array(seq) == EulerAngles.identity()

    def test_from_array_fallback_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='accelmagiq.euler_angles')
        EulerAngles.from_array([0.1])
        assert "got 1; using identity" in caplog.text

    def test_to_array_excludes_azimuth(self):
        rpy = EulerAngles(0.1, 0.2, 0.3)
        assert_allclose(rpy.to_array(), [0.1, 0.2, 0.3], atol=0.0)
        assert rpy.to_array().shape == (3,)

    def test_values_outside_canonical_range_are_kept(self):
        rpy = EulerAngles(0.0, 0.0, 7.0)
        assert rpy.yaw == 7.0

    def test_frozen(self):
        rpy = EulerAngles(0.1, 0.2, 0.3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rpy.roll = 1.0

    def test_to_degrees(self):
        assert_allclose(EulerAngles(np.pi, np.pi / 2, -np.pi / 4).to_degrees(),
                        (180.0, 90.0, -45.0), atol=1e-12)


# =============================================================================
# Test: From quaternion
# =============================================================================

class TestFromQuaternion:
    """Tests for the quaternion -> ZYX Euler extraction."""

    def test_identity_quaternion(self):
        rpy = EulerAngles.from_quaternion(Quaternion.identity())
        assert_allclose(rpy.to_array(), [0.0, 0.0, 0.0], atol=1e-15)

    def test_known_values(self, q_1234_normalized):
        """Hand-derived angles for [1, 2, 3, 4] / sqrt(30)."""
        rpy = EulerAngles.from_quaternion(q_1234_normalized)
        assert_allclose(rpy.roll, np.arctan2(28.0, 4.0), atol=1e-14)
        assert_allclose(rpy.pitch, np.arcsin(-1.0 / 3.0), atol=1e-14)
        assert_allclose(rpy.yaw, 3.0 * np.pi / 4.0, atol=1e-14)

    def test_unnormalized_input_is_clamped_not_nan(self):
        """2*(w*y - z*x) = -10 for [1, 2, 3, 4]; pitch clamps to -pi/2."""
        rpy = EulerAngles.from_quaternion(Quaternion(1.0, 2.0, 3.0, 4.0))
        assert not np.any(np.isnan(rpy.to_array()))
        assert_allclose(rpy.pitch, -np.pi / 2, atol=1e-15)

    def test_input_not_normalized(self):
        """Scaling the quaternion changes the extracted angles."""
        q = Quaternion.from_euler_angles(EulerAngles(0.1, 0.2, 0.3))
        scaled = Quaternion(*(q.to_array() * 1.5))
        assert not np.allclose(EulerAngles.from_quaternion(scaled).to_array(),
                               [0.1, 0.2, 0.3], atol=1e-6)

    def test_yaw_half_turn(self):
        """A half turn about Z gives yaw = pi, inside (-pi, pi]."""
        rpy = EulerAngles.from_quaternion(Quaternion(0.0, 0.0, 0.0, 1.0))
        assert_allclose(rpy.yaw, np.pi, atol=1e-15)

    def test_double_cover(self):
        """q and -q give the same angles."""
        q = Quaternion.from_euler_angles(EulerAngles(0.4, -0.2, 1.1))
        neg = Quaternion(-q.w, -q.x, -q.y, -q.z)
        assert_allclose(EulerAngles.from_quaternion(neg).to_array(),
                        EulerAngles.from_quaternion(q).to_array(), atol=1e-14)


# =============================================================================
# Test: Euler angle round-trip
# =============================================================================

class TestEulerRoundTrip:
    """Tests for Euler angle <-> quaternion conversion."""

    def test_round_trip(self):
        rpy = EulerAngles(0.1, 0.2, 0.3)
        recovered = EulerAngles.from_quaternion(Quaternion.from_euler_angles(rpy))
        assert_allclose(recovered.to_array(), [0.1, 0.2, 0.3], atol=1e-12)

    @pytest.mark.parametrize("roll,pitch,yaw", [
        (0.0, 0.0, 0.0),
        (0.5, -0.3, 1.2),
        (-0.8, 0.1, -0.6),
        (np.pi / 4, np.pi / 6, np.pi / 3),
        (3.0, 1.2, -3.0),
    ])
    def test_round_trip_parametrized(self, roll, pitch, yaw):
        """Away from gimbal lock the angles come back unchanged."""
        rpy = EulerAngles(roll, pitch, yaw)
        recovered = EulerAngles.from_quaternion(Quaternion.from_euler_angles(rpy))
        assert_allclose(recovered.to_array(), rpy.to_array(), atol=1e-12)

    def test_quaternion_round_trip(self, q_1234_normalized):
        """quaternion -> Euler -> quaternion gives back the rotation."""
        rpy = EulerAngles.from_quaternion(q_1234_normalized)
        q = Quaternion.from_euler_angles(rpy)
        dot = abs(np.dot(q.to_array(), q_1234_normalized.to_array()))
        assert_allclose(dot, 1.0, atol=1e-13)

    def test_gimbal_lock_stays_finite(self):
        q = Quaternion.from_euler_angles(EulerAngles(0.3, np.pi / 2, 0.2))
        rpy = EulerAngles.from_quaternion(q)
        assert np.all(np.isfinite(rpy.to_array()))
        assert_allclose(rpy.pitch, np.pi / 2, atol=1e-6)


# =============================================================================
# Test: Azimuth
# =============================================================================

class TestAzimuth:
    """Tests for the yaw-derived azimuth."""

    def test_positive_yaw(self):
        assert_allclose(EulerAngles(0.0, 0.0, 0.5).get_azimuth(),
                        2.0 * np.pi - 0.5, atol=1e-15)

    def test_negative_yaw(self):
        assert_allclose(EulerAngles(0.0, 0.0, -0.5).get_azimuth(), 0.5, atol=1e-15)

    def test_zero_yaw(self):
        assert EulerAngles(0.0, 0.0, 0.0).get_azimuth() == 0.0

    @pytest.mark.parametrize("yaw", [0.0, -0.0])
    def test_zero_yaw_has_no_sign(self, yaw):
        """Zero yaw gives +0.0, which prints without a minus sign."""
        azimuth = EulerAngles(0.0, 0.0, yaw).get_azimuth()
        assert np.copysign(1.0, azimuth) == 1.0
        assert f"{azimuth:.4f}" == "0.0000"

    def test_half_turn(self):
        assert_allclose(EulerAngles(0.0, 0.0, np.pi).get_azimuth(), np.pi, atol=1e-15)

    def test_ignores_roll_and_pitch(self):
        assert EulerAngles(1.0, -0.5, -0.25).get_azimuth() == 0.25

    @pytest.mark.parametrize("yaw", np.linspace(-np.pi, np.pi, 9))
    def test_range(self, yaw):
        azimuth = EulerAngles(0.0, 0.0, yaw).get_azimuth()
        assert 0.0 <= azimuth < 2.0 * np.pi
