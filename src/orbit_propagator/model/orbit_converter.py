"""
Orbit Converter Module
======================

Conversions between Cartesian states and classical orbital elements, plus
the Kepler equation solver used by the closed-form propagator.

Element dictionary keys:
------------------------
  sma  : semi-major axis [km]
  ecc  : eccentricity [-]
  inc  : inclination [rad]
  raan : right ascension of the ascending node [rad]
  aop  : argument of periapsis [rad]
  ta   : true anomaly [rad]
  ea   : eccentric anomaly [rad] (None unless elliptic)
  ma   : mean anomaly [rad]

Source:
-------
  Analytical Mechanics of Space Systems, Fourth Edition
  Hanspeter Schaub and John L. Junkins
  DOI: https://doi.org/10.2514/4.105210
"""
import warnings
import numpy as np

from orbit_propagator.model.constants import SOLARSYSTEMCONSTANTS


class TwoBody_RootSolvers:
  """
  Root solvers for two-body orbital mechanics.
  """

  @staticmethod
  def kepler(
    ma       : float,
    ecc      : float,
    tol      : float = 1e-12,
    max_iter : int   = 50,
  ) -> float:
    """
    Solve Kepler's equation ma = ea - ecc*sin(ea) for eccentric anomaly ea.

    Input:
    ------
      ma : float
        Mean anomaly [rad]
      ecc : float
        Eccentricity, 0 <= ecc < 1
      tol : float
        Convergence tolerance on the Newton correction [rad]
      max_iter : int
        Maximum iterations

    Output:
    -------
      ea : float
        Eccentric anomaly [rad]. The best estimate is returned, with a
        warning, if the iteration does not converge.
    """
    ma = ma % (2.0 * np.pi)
    ea = ma if ecc < 0.8 else np.pi

    # Newton-Raphson iteration
    for _ in range(max_iter):
      func       = ea - ecc * np.sin(ea) - ma
      func_prime = 1.0 - ecc * np.cos(ea)
      delta_ea   = -func / func_prime
      ea         = ea + delta_ea
      if abs(delta_ea) < tol:
        return ea

    warnings.warn(
      f"Kepler's equation not converged after {max_iter} iterations (ma={ma:.6e}, ecc={ecc:.6e})",
      UserWarning,
    )
    return ea


class OrbitConverter:
  """
  Cartesian state <-> classical orbital element conversions.
  """

  @staticmethod
  def pv_to_coe(
    pos_vec : np.ndarray,
    vel_vec : np.ndarray,
    gp      : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
  ) -> dict:
    """
    Convert Cartesian position and velocity vectors to classical orbital elements.

    Input:
    ------
      pos_vec : np.ndarray
        Position vector [km].
      vel_vec : np.ndarray
        Velocity vector [km/s].
      gp : float
        Gravitational parameter [km³/s²].

    Output:
    -------
      coe : dict
        Orbital elements (see module docstring).

    Notes:
    ------
      - For circular orbits the periapsis direction is taken along the
        position vector, so aop absorbs the argument of latitude and ta = 0.
      - For equatorial orbits raan is set to 0 and aop holds the longitude
        of periapsis (measured clockwise from +x for retrograde orbits), so
        that coe_to_pv reproduces the state.
      - Parabolic and rectilinear states are not supported.
    """
    eps = 1e-12

    pos_vec = np.asarray(pos_vec, dtype=float).flatten()
    vel_vec = np.asarray(vel_vec, dtype=float).flatten()

    pos_mag = np.linalg.norm(pos_vec)
    pos_dir = pos_vec / pos_mag

    ang_mom_vec = np.cross(pos_vec, vel_vec)
    ang_mom_mag = np.linalg.norm(ang_mom_vec)
    if ang_mom_mag < eps:
      raise ValueError("Rectilinear state: angular momentum is zero")

    ecc_vec = np.cross(vel_vec, ang_mom_vec) / gp - pos_dir
    ecc_mag = np.linalg.norm(ecc_vec)

    sma_inv = 2.0 / pos_mag - np.dot(vel_vec, vel_vec) / gp
    if abs(sma_inv) < eps:
      raise ValueError("Parabolic state: semi-major axis is unbounded")
    sma = 1.0 / sma_inv

    # Perifocal frame unit direction vectors
    ang_mom_dir   = ang_mom_vec / ang_mom_mag
    ecc_dir       = ecc_vec / ecc_mag if ecc_mag > eps else pos_dir.copy()
    periapsis_dir = np.cross(ang_mom_dir, ecc_dir)

    # 3-1-3 orbit plane orientation angles
    inc = np.arccos(np.clip(ang_mom_dir[2], -1.0, 1.0))
    if np.hypot(ang_mom_dir[0], ang_mom_dir[1]) < eps:
      # Equatorial: no line of nodes
      raan = 0.0
      aop  = np.arctan2(np.sign(ang_mom_dir[2]) * ecc_dir[1], ecc_dir[0]) % (2.0 * np.pi)
    else:
      raan = np.arctan2(ang_mom_dir[0], -ang_mom_dir[1]) % (2.0 * np.pi)
      aop  = np.arctan2(ecc_dir[2], periapsis_dir[2]) % (2.0 * np.pi)

    ta = np.arctan2(np.dot(np.cross(ecc_dir, pos_dir), ang_mom_dir), np.dot(ecc_dir, pos_dir))
    ta = ta % (2.0 * np.pi)

    ea = None
    if ecc_mag < 1.0:
      ea = OrbitConverter.ta_to_ea(ta, ecc_mag)
      ma = OrbitConverter.ea_to_ma(ea, ecc_mag)
    else:
      ha = 2.0 * np.arctanh(np.tan(ta / 2.0) * np.sqrt((ecc_mag - 1.0) / (ecc_mag + 1.0)))
      ma = ecc_mag * np.sinh(ha) - ha

    return {
      'sma'  : sma,
      'ecc'  : ecc_mag,
      'inc'  : inc,
      'raan' : raan,
      'aop'  : aop,
      'ta'   : ta,
      'ea'   : ea,
      'ma'   : ma,
    }

  @staticmethod
  def coe_to_pv(
    coe : dict,
    gp  : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
  ) -> tuple[np.ndarray, np.ndarray]:
    """
    Convert classical orbital elements to position and velocity vectors.

    Input:
    ------
      coe : dict
        sma, ecc, inc, raan, aop and either ta or ma (ta takes priority).
      gp : float
        Gravitational parameter [km³/s²].

    Output:
    -------
      pos_vec : np.ndarray
        Position vector [km].
      vel_vec : np.ndarray
        Velocity vector [km/s].
    """
    sma  = coe['sma' ]
    ecc  = coe['ecc' ]
    inc  = coe['inc' ]
    raan = coe['raan']
    aop  = coe['aop' ]

    ta = coe.get('ta', None)
    if ta is None:
      ma = coe.get('ma', None)
      if ma is None:
        raise ValueError("Either true anomaly 'ta' or mean anomaly 'ma' must be provided")
      if ecc >= 1.0:
        raise ValueError("Mean anomaly input is supported for elliptic orbits only")
      ta = OrbitConverter.ma_to_ta(ma, ecc)

    slr         = sma * (1.0 - ecc**2)          # semi-latus rectum
    pos_mag     = slr / (1.0 + ecc * np.cos(ta))
    theta       = aop + ta                      # true latitude angle
    ang_mom_mag = np.sqrt(gp * slr)

    cos_raan, sin_raan = np.cos(raan),  np.sin(raan)
    cos_inc,  sin_inc  = np.cos(inc),   np.sin(inc)
    cos_th,   sin_th   = np.cos(theta), np.sin(theta)

    pos_vec = pos_mag * np.array([
      cos_raan * cos_th - sin_raan * sin_th * cos_inc,
      sin_raan * cos_th + cos_raan * sin_th * cos_inc,
                                     sin_th * sin_inc,
    ])

    vel_vec = -gp / ang_mom_mag * np.array([
      cos_raan * (sin_th + ecc * np.sin(aop)) + sin_raan * (cos_th + ecc * np.cos(aop)) * cos_inc,
      sin_raan * (sin_th + ecc * np.sin(aop)) - cos_raan * (cos_th + ecc * np.cos(aop)) * cos_inc,
                                              -(cos_th + ecc * np.cos(aop)) * sin_inc,
    ])

    return pos_vec, vel_vec

  @staticmethod
  def pv_to_period(
    pos_vec : np.ndarray,
    vel_vec : np.ndarray,
    gp      : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
  ) -> float:
    """
    Orbital period [s] from Cartesian state. Returns np.inf for unbound orbits.
    """
    pos_mag         = np.linalg.norm(pos_vec)
    vel_mag         = np.linalg.norm(vel_vec)
    specific_energy = vel_mag**2 / 2.0 - gp / pos_mag
    if specific_energy >= 0.0:
      return np.inf
    sma = -gp / (2.0 * specific_energy)
    return float(2.0 * np.pi * np.sqrt(sma**3 / gp))

  @staticmethod
  def ea_to_ta(
    ea  : float,
    ecc : float,
  ) -> float:
    """
    Eccentric anomaly to true anomaly [rad], elliptic orbits.
    """
    if not 0.0 <= ecc < 1.0:
      raise ValueError(f"ea_to_ta requires 0 <= ecc < 1, received ecc = {ecc}")
    return 2.0 * np.arctan2(
      np.sqrt(1.0 + ecc) * np.sin(ea / 2.0),
      np.sqrt(1.0 - ecc) * np.cos(ea / 2.0),
    )

  @staticmethod
  def ta_to_ea(
    ta  : float,
    ecc : float,
  ) -> float:
    """
    True anomaly to eccentric anomaly [rad], elliptic orbits.
    """
    if not 0.0 <= ecc < 1.0:
      raise ValueError(f"ta_to_ea requires 0 <= ecc < 1, received ecc = {ecc}")
    return 2.0 * np.arctan2(
      np.sqrt(1.0 - ecc) * np.sin(ta / 2.0),
      np.sqrt(1.0 + ecc) * np.cos(ta / 2.0),
    )

  @staticmethod
  def ea_to_ma(
    ea  : float,
    ecc : float,
  ) -> float:
    return (ea - ecc * np.sin(ea)) % (2.0 * np.pi)

  @staticmethod
  def ma_to_ta(
    ma  : float,
    ecc : float,
  ) -> float:
    """
    Mean anomaly to true anomaly [rad] through Kepler's equation.
    """
    ea = TwoBody_RootSolvers.kepler(ma, ecc)
    return OrbitConverter.ea_to_ta(ea, ecc) % (2.0 * np.pi)
