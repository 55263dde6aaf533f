"""
Frame Converter Module
======================

Rotations between the J2000 inertial frame, the Earth-fixed frame, and the
local Radial-Intrack-Crosstrack (RIC) frame, plus geodetic height.

Notes:
------
- The Earth-fixed frame is the pseudo Earth-fixed frame of date: IAU-1976
  precession followed by the Greenwich mean sidereal angle. Nutation and
  polar motion are not applied.
- Sidereal angles are evaluated on UTC = TT - 69.184 s as a stand-in for UT1.

Sources:
--------
- Vallado, D. A. (2013). Fundamentals of Astrodynamics and Applications (4th ed.).
- Montenbruck, O., & Gill, E. (2000). Satellite Orbits. Springer.
"""
import numpy as np

from orbit_propagator.model.constants      import CONVERTER, SOLARSYSTEMCONSTANTS, TIMECONSTANTS
from orbit_propagator.model.time_converter import Epoch


def rot_x(angle: float) -> np.ndarray:
  """Passive (frame) rotation about the x-axis."""
  c, s = np.cos(angle), np.sin(angle)
  return np.array([
    [1.0, 0.0, 0.0],
    [0.0,   c,   s],
    [0.0,  -s,   c],
  ])


def rot_y(angle: float) -> np.ndarray:
  """Passive (frame) rotation about the y-axis."""
  c, s = np.cos(angle), np.sin(angle)
  return np.array([
    [  c, 0.0,  -s],
    [0.0, 1.0, 0.0],
    [  s, 0.0,   c],
  ])


def rot_z(angle: float) -> np.ndarray:
  """Passive (frame) rotation about the z-axis."""
  c, s = np.cos(angle), np.sin(angle)
  return np.array([
    [  c,   s, 0.0],
    [ -s,   c, 0.0],
    [0.0, 0.0, 1.0],
  ])


class FrameConverter:
  """
  Frame rotation matrices. All methods are static and side-effect free.
  """

  @staticmethod
  def gmst_angle(
    epoch : Epoch,
  ) -> float:
    """
    Greenwich mean sidereal angle (IAU-1982).

    Input:
    ------
      epoch : Epoch
        Epoch (TT).

    Output:
    -------
      gmst : float
        Sidereal angle in [0, 2pi) [rad].
    """
    jc = epoch.roll(-TIMECONSTANTS.TT_MINUS_UTC).julian_centuries
    gmst_sec = (
      67310.54841
      + (876600.0 * 3600.0 + 8640184.812866) * jc
      + 0.093104 * jc**2
      - 6.2e-6   * jc**3
    )
    return (gmst_sec / 240.0 * CONVERTER.RAD_PER_DEG) % (2.0 * np.pi)

  @staticmethod
  def precession_angles(
    epoch : Epoch,
  ) -> tuple[float, float, float]:
    """
    IAU-1976 precession angles (zeta, theta, zed) [rad].
    """
    jc = epoch.julian_centuries
    zeta  = (2306.2181 * jc + 0.30188 * jc**2 + 0.017998 * jc**3) * CONVERTER.RAD_PER_ARCSEC
    theta = (2004.3109 * jc - 0.42665 * jc**2 - 0.041833 * jc**3) * CONVERTER.RAD_PER_ARCSEC
    zed   = (2306.2181 * jc + 1.09468 * jc**2 + 0.018203 * jc**3) * CONVERTER.RAD_PER_ARCSEC
    return zeta, theta, zed

  @staticmethod
  def j2000_to_itrf(
    epoch : Epoch,
  ) -> np.ndarray:
    """
    Rotation matrix from J2000 to the Earth-fixed frame at an epoch.

    Input:
    ------
      epoch : Epoch
        Epoch (TT).

    Output:
    -------
      rot_mat_j2000_to_itrf : np.ndarray
        3x3 rotation matrix.

    Usage:
    ------
      itrf_pos_vec = FrameConverter.j2000_to_itrf(state.epoch) @ state.position
    """
    zeta, theta, zed = FrameConverter.precession_angles(epoch)
    rot_mat_j2000_to_mod = rot_z(-zed) @ rot_y(theta) @ rot_z(-zeta)
    return rot_z(FrameConverter.gmst_angle(epoch)) @ rot_mat_j2000_to_mod

  @staticmethod
  def itrf_to_j2000(
    epoch : Epoch,
  ) -> np.ndarray:
    """
    Rotation matrix from the Earth-fixed frame to J2000 at an epoch.
    """
    return FrameConverter.j2000_to_itrf(epoch).T

  @staticmethod
  def xyz_to_ric(
    xyz_ref_pos_vec : np.ndarray,
    xyz_ref_vel_vec : np.ndarray,
  ) -> np.ndarray:
    """
    Calculate the rotation matrix from Inertial (XYZ) to Radial-Intrack-Crosstrack (RIC) frame.

    Input:
    ------
      xyz_ref_pos_vec : np.ndarray
        Reference position vector in inertial frame [km].
      xyz_ref_vel_vec : np.ndarray
        Reference velocity vector in inertial frame [km/s].

    Output:
    -------
      rot_mat_xyz_to_ric : np.ndarray
        3x3 rotation matrix with rows r_hat, i_hat, c_hat.
    """
    r_hat = xyz_ref_pos_vec / np.linalg.norm(xyz_ref_pos_vec)

    ang_mom_vec = np.cross(xyz_ref_pos_vec, xyz_ref_vel_vec)
    c_hat       = ang_mom_vec / np.linalg.norm(ang_mom_vec)

    i_hat = np.cross(c_hat, r_hat)

    return np.vstack((r_hat, i_hat, c_hat))

  @staticmethod
  def ric_to_xyz(
    xyz_ref_pos_vec : np.ndarray,
    xyz_ref_vel_vec : np.ndarray,
  ) -> np.ndarray:
    """
    Calculate the rotation matrix from Radial-Intrack-Crosstrack (RIC) to Inertial (XYZ) frame.

    Input:
    ------
      xyz_ref_pos_vec : np.ndarray
        Reference position vector in inertial frame [km].
      xyz_ref_vel_vec : np.ndarray
        Reference velocity vector in inertial frame [km/s].

    Output:
    -------
      rot_mat_ric_to_xyz : np.ndarray
        3x3 rotation matrix (transpose of xyz_to_ric).
    """
    return FrameConverter.xyz_to_ric(xyz_ref_pos_vec, xyz_ref_vel_vec).T

  @staticmethod
  def geodetic_height(
    itrf_pos_vec : np.ndarray,
    n_iter       : int = 12,
  ) -> float:
    """
    Height above the reference ellipsoid of an Earth-fixed position.

    Input:
    ------
      itrf_pos_vec : np.ndarray
        Earth-fixed position vector [km].
      n_iter : int
        Fixed-point iterations on geodetic latitude.

    Output:
    -------
      height : float
        Geodetic height [km].
    """
    sma = SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR
    flt = SOLARSYSTEMCONSTANTS.EARTH.FLATTENING
    esq = flt * (2.0 - flt)

    pos_x, pos_y, pos_z = itrf_pos_vec[0], itrf_pos_vec[1], itrf_pos_vec[2]
    pos_xy_mag = np.sqrt(pos_x**2 + pos_y**2)

    lat   = np.arctan2(pos_z, pos_xy_mag)
    n_rad = sma
    for _ in range(n_iter):
      sin_lat = np.sin(lat)
      n_rad   = sma / np.sqrt(1.0 - esq * sin_lat**2)
      lat     = np.arctan2(pos_z + n_rad * esq * sin_lat, pos_xy_mag)

    cos_lat = np.cos(lat)
    if abs(cos_lat) < 1e-12:
      return float(abs(pos_z) - sma * np.sqrt(1.0 - esq))
    return float(pos_xy_mag / cos_lat - n_rad)
