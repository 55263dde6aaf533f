"""
Unit Tests for Frame Converter Module
=====================================

Tests for reference frame transformations (J2000, Earth-fixed, RIC) and geodetic height.

Tests:
------
TestRICFrameConversion
  - test_sanity_check_ric_axes_orthonormal : verify RIC rotation matrix is orthonormal (R @ R.T = I)
  - test_sanity_check_radial_direction     : verify R-axis points along position vector
  - test_sanity_check_crosstrack_direction : verify C-axis points along angular momentum
  - test_roundtrip_xyz_ric_xyz             : verify XYZ -> RIC -> XYZ returns original vector

TestEarthFixedFrame
  - test_sanity_check_rotation_orthonormal  : verify the J2000 -> Earth-fixed matrix is a proper rotation
  - test_sanity_check_inverse_is_transpose  : verify Earth-fixed -> J2000 is the transpose
  - test_known_solution_gmst_at_j2000       : verify the sidereal angle at J2000 (UT1)
  - test_known_solution_sidereal_day        : verify the sidereal angle repeats after one sidereal day
  - test_known_solution_no_precession_at_j2000 : verify the rotation is about z only at J2000

TestGeodeticHeight
  - test_known_solution_equator : verify height above the equator
  - test_known_solution_pole    : verify height above the pole
  - test_roundtrip_mid_latitude : verify geodetic (lat, height) -> position -> height

Usage:
------
  python -m pytest src/orbit_propagator/validation/test_frame_converter.py -v
"""
import pytest
import numpy as np

from orbit_propagator.model.constants       import CONVERTER, SOLARSYSTEMCONSTANTS
from orbit_propagator.model.frame_converter import FrameConverter, rot_z
from orbit_propagator.model.time_converter  import Epoch


class TestRICFrameConversion:
  """
  Tests for RIC (Radial-Intrack-Crosstrack) frame conversions.
  """

  def test_sanity_check_ric_axes_orthonormal(self):
    pos_vec = np.array([7000.0, 1000.0, 500.0])
    vel_vec = np.array([-0.5, 7.0, 1.0])

    R = FrameConverter.xyz_to_ric(pos_vec, vel_vec)

    assert np.allclose(R @ R.T, np.eye(3), atol=1e-14)
    assert np.isclose(np.linalg.det(R), 1.0, atol=1e-14)

  def test_sanity_check_radial_direction(self):
    """
    R-axis should point along position vector.
    """
    pos_vec = np.array([7000.0, 0.0, 0.0])
    vel_vec = np.array([0.0, 7.5, 0.0])

    rot_mat_xyz_to_ric = FrameConverter.xyz_to_ric(pos_vec, vel_vec)

    r_hat          = rot_mat_xyz_to_ric[0, :]
    expected_r_hat = pos_vec / np.linalg.norm(pos_vec)

    assert np.allclose(r_hat, expected_r_hat, atol=1e-14)

  def test_sanity_check_crosstrack_direction(self):
    """
    C-axis should be along angular momentum.
    """
    pos_vec = np.array([7000.0, 0.0, 0.0])
    vel_vec = np.array([0.0, 7.5, 0.0])

    rot_mat_xyz_to_ric = FrameConverter.xyz_to_ric(pos_vec, vel_vec)

    c_hat = rot_mat_xyz_to_ric[2, :]

    ang_mom_vec    = np.cross(pos_vec, vel_vec)
    expected_c_hat = ang_mom_vec / np.linalg.norm(ang_mom_vec)

    assert np.allclose(c_hat, expected_c_hat, atol=1e-14)

  def test_roundtrip_xyz_ric_xyz(self):
    pos_ref = np.array([7000.0, 1000.0, 500.0])
    vel_ref = np.array([-0.5, 7.0, 1.0])

    rot_mat_xyz_to_ric = FrameConverter.xyz_to_ric(pos_ref, vel_ref)
    rot_mat_ric_to_xyz = FrameConverter.ric_to_xyz(pos_ref, vel_ref)

    xyz_test_pos_vec      = np.array([1.0, 2.0, 0.5])
    ric_test_pos_vec      = rot_mat_xyz_to_ric @ xyz_test_pos_vec
    xyz_test_back_pos_vec = rot_mat_ric_to_xyz @ ric_test_pos_vec

    assert np.allclose(xyz_test_pos_vec, xyz_test_back_pos_vec, atol=1e-14)


class TestEarthFixedFrame:
  """
  Tests for the J2000 <-> Earth-fixed rotation.
  """

  def test_sanity_check_rotation_orthonormal(self):
    for seconds in (0.0, 1.0e8, 8.1e8):
      R = FrameConverter.j2000_to_itrf(Epoch(seconds))
      assert np.allclose(R @ R.T, np.eye(3), atol=1e-14)
      assert np.isclose(np.linalg.det(R), 1.0, atol=1e-14)

  def test_sanity_check_inverse_is_transpose(self):
    epoch   = Epoch(8.1e8)
    pos_vec = np.array([7000.0, -1200.0, 3400.0])

    itrf_pos_vec = FrameConverter.j2000_to_itrf(epoch) @ pos_vec
    back_pos_vec = FrameConverter.itrf_to_j2000(epoch) @ itrf_pos_vec

    assert np.allclose(back_pos_vec, pos_vec, atol=1e-9)

  def test_known_solution_gmst_at_j2000(self):
    """
    GMST at 2000-01-01 12:00:00 UT1 is 280.46061837 deg.
    """
    epoch = Epoch(69.184)  # TT epoch whose UT1 stand-in is J2000

    gmst = FrameConverter.gmst_angle(epoch)

    assert np.isclose(gmst, 280.46061837 * CONVERTER.RAD_PER_DEG, atol=1e-9)

  def test_known_solution_sidereal_day(self):
    sidereal_day = 2.0 * np.pi / SOLARSYSTEMCONSTANTS.EARTH.OMEGA

    gmst_o = FrameConverter.gmst_angle(Epoch(1.0e8))
    gmst_f = FrameConverter.gmst_angle(Epoch(1.0e8 + sidereal_day))

    delta = (gmst_f - gmst_o + np.pi) % (2.0 * np.pi) - np.pi
    assert abs(delta) < 1e-6

  def test_known_solution_no_precession_at_j2000(self):
    epoch = Epoch(0.0)

    R = FrameConverter.j2000_to_itrf(epoch)

    assert np.allclose(R, rot_z(FrameConverter.gmst_angle(epoch)), atol=1e-15)
    assert np.allclose(R[2], [0.0, 0.0, 1.0], atol=1e-15)


class TestGeodeticHeight:
  """
  Tests for geodetic height above the WGS-84 ellipsoid.
  """

  def test_known_solution_equator(self):
    radius = SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR

    height = FrameConverter.geodetic_height(np.array([radius + 400.0, 0.0, 0.0]))

    assert np.isclose(height, 400.0, atol=1e-9)

  def test_known_solution_pole(self):
    radius = SOLARSYSTEMCONSTANTS.EARTH.RADIUS.POLAR

    height = FrameConverter.geodetic_height(np.array([0.0, 0.0, radius + 300.0]))

    assert np.isclose(height, 300.0, atol=1e-3)

  def test_roundtrip_mid_latitude(self):
    sma = SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR
    flt = SOLARSYSTEMCONSTANTS.EARTH.FLATTENING
    esq = flt * (2.0 - flt)

    lat    = 45.0 * CONVERTER.RAD_PER_DEG
    lon    = 30.0 * CONVERTER.RAD_PER_DEG
    height = 550.0
    n_rad  = sma / np.sqrt(1.0 - esq * np.sin(lat)**2)

    itrf_pos_vec = np.array([
      (n_rad + height) * np.cos(lat) * np.cos(lon),
      (n_rad + height) * np.cos(lat) * np.sin(lon),
      (n_rad * (1.0 - esq) + height) * np.sin(lat),
    ])

    assert np.isclose(FrameConverter.geodetic_height(itrf_pos_vec), height, atol=1e-6)


if __name__ == "__main__":
  pytest.main([__file__, "-v"])
