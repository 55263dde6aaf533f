"""
Sun and Moon Ephemeris Module
=============================

Geocentric Sun and Moon positions in the J2000 frame, and the eclipse
geometry used by solar radiation pressure.

Summary:
--------
Two interchangeable ephemeris sources are provided:
  - AnalyticalEphemeris : low-precision series (Vallado), no external data.
  - SpiceEphemeris      : JPL planetary ephemerides through spiceypy,
                          for runs where SPICE kernels are available.

Both expose sun_position(epoch), sun_position_apparent(epoch), and
moon_position(epoch). They are read-only contexts injected into the
third-body, drag, and solar radiation pressure forces.

Units:
------
- Position : kilometers [km]
- Angles   : radians [rad]

Sources:
--------
- Vallado, D. A. (2013). Fundamentals of Astrodynamics and Applications
  (4th ed.), Algorithms 29 (Sun) and 31 (Moon).
- Montenbruck, O., & Gill, E. (2000). Satellite Orbits, Section 3.4.2.
"""
import numpy    as np
import spiceypy as spice

from pathlib import Path
from typing  import Optional, Union

from orbit_propagator.model.constants       import CONVERTER, NAIFIDS, PHYSICALCONSTANTS, SOLARSYSTEMCONSTANTS
from orbit_propagator.model.frame_converter import FrameConverter, rot_y, rot_z
from orbit_propagator.model.time_converter  import Epoch


def _mod_to_j2000(
  epoch       : Epoch,
  mod_pos_vec : np.ndarray,
) -> np.ndarray:
  zeta, theta, zed = FrameConverter.precession_angles(epoch)
  rot_mat_j2000_to_mod = rot_z(-zed) @ rot_y(theta) @ rot_z(-zeta)
  return rot_mat_j2000_to_mod.T @ mod_pos_vec


class AnalyticalEphemeris:
  """
  Low-precision analytical Sun and Moon positions.
  """

  def sun_position(
    self,
    epoch : Epoch,
  ) -> np.ndarray:
    """
    Geometric geocentric Sun position.

    Input:
    ------
      epoch : Epoch
        Evaluation epoch.

    Output:
    -------
      sun_pos_vec : np.ndarray
        Sun position in J2000 [km].
    """
    jc  = epoch.julian_centuries
    dtr = CONVERTER.RAD_PER_DEG

    lam_sun = 280.46 + 36000.77 * jc
    m_sun   = 357.5291092 + 35999.05034 * jc
    lam_ec  = lam_sun + 1.914666471 * np.sin(m_sun * dtr) + 0.019994643 * np.sin(2.0 * m_sun * dtr)
    obliq   = 23.439291 - 0.0130042 * jc
    r_mag   = 1.000140612 - 0.016708617 * np.cos(m_sun * dtr) - 0.000139589 * np.cos(2.0 * m_sun * dtr)

    mod_pos_vec = r_mag * CONVERTER.KM_PER_AU * np.array([
                           np.cos(lam_ec * dtr),
      np.cos(obliq * dtr) * np.sin(lam_ec * dtr),
      np.sin(obliq * dtr) * np.sin(lam_ec * dtr),
    ])
    return _mod_to_j2000(epoch, mod_pos_vec)

  def sun_position_apparent(
    self,
    epoch : Epoch,
  ) -> np.ndarray:
    """
    Sun position corrected for light time [km].
    """
    light_time = np.linalg.norm(self.sun_position(epoch)) / PHYSICALCONSTANTS.speed_of_light
    return self.sun_position(epoch.roll(-light_time))

  def moon_position(
    self,
    epoch : Epoch,
  ) -> np.ndarray:
    """
    Geocentric Moon position.

    Input:
    ------
      epoch : Epoch
        Evaluation epoch.

    Output:
    -------
      moon_pos_vec : np.ndarray
        Moon position in J2000 [km].
    """
    jc  = epoch.julian_centuries
    dtr = CONVERTER.RAD_PER_DEG

    lam_ecl = (
      218.32 + 481267.8813 * jc
      + 6.29 * np.sin((134.9 + 477198.85 * jc) * dtr)
      - 1.27 * np.sin((259.2 - 413335.38 * jc) * dtr)
      + 0.66 * np.sin((235.7 + 890534.23 * jc) * dtr)
      + 0.21 * np.sin((269.9 + 954397.70 * jc) * dtr)
      - 0.19 * np.sin((357.5 +  35999.05 * jc) * dtr)
      - 0.11 * np.sin((186.6 + 966404.05 * jc) * dtr)
    )
    phi_ecl = (
        5.13 * np.sin(( 93.3 + 483202.03 * jc) * dtr)
      + 0.28 * np.sin((228.2 + 960400.87 * jc) * dtr)
      - 0.28 * np.sin((318.3 +   6003.18 * jc) * dtr)
      - 0.17 * np.sin((217.6 - 407332.20 * jc) * dtr)
    )
    parallax = (
      0.9508
      + 0.0518 * np.cos((134.9 + 477198.85 * jc) * dtr)
      + 0.0095 * np.cos((259.2 - 413335.38 * jc) * dtr)
      + 0.0078 * np.cos((235.7 + 890534.23 * jc) * dtr)
      + 0.0028 * np.cos((269.9 + 954397.70 * jc) * dtr)
    )
    obliq = (23.439291 - 0.0130042 * jc) * dtr

    lam_ecl *= dtr
    phi_ecl *= dtr
    r_mag    = SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR / np.sin(parallax * dtr)

    mod_pos_vec = r_mag * np.array([
      np.cos(phi_ecl) * np.cos(lam_ecl),
      np.cos(obliq) * np.cos(phi_ecl) * np.sin(lam_ecl) - np.sin(obliq) * np.sin(phi_ecl),
      np.sin(obliq) * np.cos(phi_ecl) * np.sin(lam_ecl) + np.cos(obliq) * np.sin(phi_ecl),
    ])
    return _mod_to_j2000(epoch, mod_pos_vec)


class SpiceEphemeris:
  """
  Sun and Moon positions from SPICE kernels.

  Epochs are passed to SPICE as ephemeris time; TT and TDB differ by less
  than 2 ms, which is below the accuracy needed by the force models.
  """

  def __init__(
    self,
    kernel_dir : Union[str, Path],
  ):
    """
    Load the leap-second and planetary ephemeris kernels from a directory.

    Input:
    ------
      kernel_dir : str | Path
        Directory containing naif0012.tls (or another naif*.tls) and a de*.bsp file.

    Raises:
    -------
      FileNotFoundError
        If the directory or a required kernel is missing.
    """
    kernel_dir = Path(kernel_dir)
    if not kernel_dir.exists():
      raise FileNotFoundError(
        f"SPICE kernel directory not found: {kernel_dir}\n"
        f"Please download kernels from https://naif.jpl.nasa.gov/pub/naif/generic_kernels/\n"
        f"Required files:\n"
        f"  - lsk/naif0012.tls\n"
        f"  - spk/planets/de440.bsp (or de430.bsp)"
      )

    lsk_files = sorted(kernel_dir.glob('naif*.tls'))
    spk_files = sorted(kernel_dir.glob('de*.bsp'))
    if not lsk_files:
      raise FileNotFoundError(f"No LSK files (naif*.tls) found in {kernel_dir}")
    if not spk_files:
      raise FileNotFoundError(f"No SPK files (de*.bsp) found in {kernel_dir}")

    self.kernel_filepaths = [lsk_files[-1], spk_files[-1]]
    for filepath in self.kernel_filepaths:
      spice.furnsh(str(filepath))

  def _position(
    self,
    naif_id : int,
    epoch   : Epoch,
    abcorr  : str = 'NONE',
  ) -> np.ndarray:
    pos_vec, _ = spice.spkpos(str(naif_id), epoch.seconds, 'J2000', abcorr, str(NAIFIDS.EARTH))
    return np.array(pos_vec, dtype=float)

  def sun_position(self, epoch: Epoch) -> np.ndarray:
    return self._position(NAIFIDS.SUN, epoch)

  def sun_position_apparent(self, epoch: Epoch) -> np.ndarray:
    return self._position(NAIFIDS.SUN, epoch, abcorr='LT')

  def moon_position(self, epoch: Epoch) -> np.ndarray:
    return self._position(NAIFIDS.MOON, epoch)

  def close(self) -> None:
    """
    Unload the kernels loaded by this instance.
    """
    for filepath in self.kernel_filepaths:
      spice.unload(str(filepath))
    self.kernel_filepaths = []


def eclipse_angles(
  sat_pos_vec : np.ndarray,
  sun_pos_vec : np.ndarray,
) -> tuple[float, float, float]:
  """
  Angles describing the Earth/Sun geometry seen from the satellite.

  Input:
  ------
    sat_pos_vec : np.ndarray
      Satellite position in J2000 [km].
    sun_pos_vec : np.ndarray
      Sun position in J2000 [km].

  Output:
  -------
    sun_sat_angle : float
      Angle between the satellite-to-Sun and satellite-to-Earth directions [rad].
    earth_angle : float
      Apparent angular radius of the Earth [rad].
    sun_angle : float
      Apparent angular radius of the Sun [rad].
  """
  sat_sun_vec = sun_pos_vec - sat_pos_vec
  sat_sun_mag = np.linalg.norm(sat_sun_vec)
  sat_pos_mag = np.linalg.norm(sat_pos_vec)

  cos_angle     = np.dot(sat_sun_vec, -sat_pos_vec) / (sat_sun_mag * sat_pos_mag)
  sun_sat_angle = float(np.arccos(np.clip(cos_angle, -1.0, 1.0)))
  earth_angle   = float(np.arcsin(min(1.0, SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR / sat_pos_mag)))
  sun_angle     = float(np.arcsin(SOLARSYSTEMCONSTANTS.SUN.RADIUS.EQUATOR / sat_sun_mag))

  return sun_sat_angle, earth_angle, sun_angle


def lighting_ratio(
  sat_pos_vec : np.ndarray,
  sun_pos_vec : np.ndarray,
) -> float:
  """
  Fraction of the solar disk visible from the satellite.

  Input:
  ------
    sat_pos_vec : np.ndarray
      Satellite position in J2000 [km].
    sun_pos_vec : np.ndarray
      Sun position in J2000 [km].

  Output:
  -------
    ratio : float
      1 in full sunlight, 0 in umbra, the lens-overlap fraction in penumbra.
  """
  sun_sat_angle, earth_angle, sun_angle = eclipse_angles(sat_pos_vec, sun_pos_vec)

  # Umbra
  if sun_sat_angle - earth_angle + sun_angle <= 1e-10:
    return 0.0

  # Penumbra: area of the solar disk hidden behind the Earth disk
  if sun_sat_angle - earth_angle - sun_angle < -1e-10:
    ssa2      = sun_sat_angle * sun_sat_angle
    ssa_inv   = 1.0 / (2.0 * sun_sat_angle)
    ac2       = earth_angle * earth_angle
    as2       = sun_angle * sun_angle
    ac_as_dif = ac2 - as2

    a1 = (ssa2 - ac_as_dif) * ssa_inv
    a2 = (ssa2 + ac_as_dif) * ssa_inv

    p1 = as2 * np.arccos(np.clip(a1 / sun_angle,   -1.0, 1.0)) - a1 * np.sqrt(max(0.0, as2 - a1 * a1))
    p2 = ac2 * np.arccos(np.clip(a2 / earth_angle, -1.0, 1.0)) - a2 * np.sqrt(max(0.0, ac2 - a2 * a2))

    return float(1.0 - (p1 + p2) / (np.pi * as2))

  return 1.0


def in_shadow(
  sat_pos_vec : np.ndarray,
  sun_pos_vec : np.ndarray,
) -> bool:
  """
  True when any part of the solar disk is hidden by the Earth.
  """
  return lighting_ratio(sat_pos_vec, sun_pos_vec) < 1.0


_ANALYTICAL_EPHEMERIS: Optional[AnalyticalEphemeris] = None


def default_ephemeris() -> AnalyticalEphemeris:
  """
  Shared analytical ephemeris instance.
  """
  global _ANALYTICAL_EPHEMERIS
  if _ANALYTICAL_EPHEMERIS is None:
    _ANALYTICAL_EPHEMERIS = AnalyticalEphemeris()
  return _ANALYTICAL_EPHEMERIS
