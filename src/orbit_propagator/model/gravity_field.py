"""
Gravity Field Module
====================

Spherical harmonic gravity field coefficients and the body-fixed
acceleration they produce.

Summary:
--------
GravityFieldCoefficients is a read-only lookup context: it holds fully
normalized C/S coefficients and their de-normalized counterparts, and is
injected into the EarthGravity force (one instance may be shared by any
number of force models). SphericalHarmonicsGravity evaluates the
non-spherical part of the acceleration with the Legendre-derivative
recurrence of Lear (GTDS), working on de-normalized coefficients.

References:
-----------
- Montenbruck & Gill, "Satellite Orbits", Chapter 3.2
- Lear, W. M. (1988). The Programs TRAJ1 and TRAJ2. JSC-22512.
"""
import math
import numpy as np

from typing import Optional

from orbit_propagator.model.constants import SOLARSYSTEMCONSTANTS
from orbit_propagator.model.egm96     import EGM96_NORMALIZED


class GravityFieldCoefficients:
  """
  Container for spherical harmonic gravity field coefficients.
  """

  def __init__(
    self,
    max_degree : int,
    max_order  : int,
    gp         : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
    radius     : float = SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR,
  ):
    """
    Initialize coefficient arrays.

    Input:
    ------
      max_degree : int
        Maximum degree of expansion.
      max_order : int
        Maximum order of expansion (clipped to max_degree).
      gp : float
        Gravitational parameter of the field [km³/s²].
      radius : float
        Reference radius of the field [km].
    """
    if max_degree < 0 or max_order < 0:
      raise ValueError(f"Degree and order must be non-negative, received ({max_degree}, {max_order})")

    self.max_degree = max_degree
    self.max_order  = min(max_order, max_degree)
    self.gp         = gp
    self.radius     = radius

    # Normalized and de-normalized coefficient arrays, C[n, m] and S[n, m]
    self.C_norm = np.zeros((max_degree + 1, self.max_order + 1))
    self.S_norm = np.zeros((max_degree + 1, self.max_order + 1))
    self.C      = np.zeros((max_degree + 1, self.max_order + 1))
    self.S      = np.zeros((max_degree + 1, self.max_order + 1))

    self.set_coefficient(0, 0, 1.0, 0.0)

  @staticmethod
  def normalization_factor(
    degree : int,
    order  : int,
  ) -> float:
    """
    Full normalization factor N_nm such that C_norm = C / N_nm.

    Input:
    ------
      degree : int
        Degree (n)
      order : int
        Order (m)

    Output:
    -------
      factor : float
        sqrt((n+m)! / ((n-m)! k (2n+1))), with k = 1 for m = 0 and 2 otherwise.
    """
    k = 1 if order == 0 else 2
    return math.sqrt(math.factorial(degree + order) / (math.factorial(degree - order) * k * (2 * degree + 1)))

  def set_coefficient(
    self,
    degree : int,
    order  : int,
    Cnm    : float,
    Snm    : float,
  ) -> None:
    """
    Set a single normalized coefficient pair. Pairs outside the
    container's degree/order are ignored.
    """
    if degree <= self.max_degree and order <= self.max_order:
      factor = self.normalization_factor(degree, order)
      self.C_norm[degree, order] = Cnm
      self.S_norm[degree, order] = Snm
      self.C[degree, order]      = Cnm / factor
      self.S[degree, order]      = Snm / factor

  def coefficients(
    self,
    degree : int,
    order  : int,
  ) -> tuple[float, float]:
    """
    De-normalized (C, S) pair for a degree and order.
    """
    return float(self.C[degree, order]), float(self.S[degree, order])

  @classmethod
  def egm96(
    cls,
    max_degree : int = SOLARSYSTEMCONSTANTS.EARTH.GRAVITY_MAX_DEGREE,
    max_order  : int = SOLARSYSTEMCONSTANTS.EARTH.GRAVITY_MAX_ORDER,
  ) -> 'GravityFieldCoefficients':
    """
    Build the EGM-96 field truncated to a degree and order (at most 36).
    """
    if max_degree > SOLARSYSTEMCONSTANTS.EARTH.GRAVITY_MAX_DEGREE or max_order > SOLARSYSTEMCONSTANTS.EARTH.GRAVITY_MAX_ORDER:
      raise ValueError(
        f"EGM-96 table is complete to degree/order {SOLARSYSTEMCONSTANTS.EARTH.GRAVITY_MAX_DEGREE}, "
        f"received ({max_degree}, {max_order})"
      )
    coeffs = cls(max_degree, max_order)
    for degree, order, Cnm, Snm in EGM96_NORMALIZED:
      coeffs.set_coefficient(degree, order, Cnm, Snm)
    return coeffs


_EGM96_FULL: Optional[GravityFieldCoefficients] = None


def default_gravity_field() -> GravityFieldCoefficients:
  """
  Full degree-36 EGM-96 field, built once and shared read-only.
  """
  global _EGM96_FULL
  if _EGM96_FULL is None:
    _EGM96_FULL = GravityFieldCoefficients.egm96()
  return _EGM96_FULL


class SphericalHarmonicsGravity:
  """
  Non-spherical gravity acceleration from spherical harmonic coefficients.
  """

  def __init__(
    self,
    coefficients : GravityFieldCoefficients,
    degree       : int,
    order        : int,
  ):
    """
    Input:
    ------
      coefficients : GravityFieldCoefficients
        Coefficient lookup context.
      degree : int
        Maximum degree evaluated (clipped to the coefficient container).
      order : int
        Maximum order evaluated (clipped to the coefficient container).
    """
    self.coefficients = coefficients
    self.degree       = min(degree, coefficients.max_degree)
    self.order        = min(order,  coefficients.max_order)

    # Work arrays are over-allocated so the m+1 and n-indexed terms stay in range
    self._size = max(self.degree, self.order) + 4

  def compute(
    self,
    itrf_pos_vec : np.ndarray,
  ) -> np.ndarray:
    """
    Non-spherical acceleration in the body-fixed frame.

    Input:
    ------
      itrf_pos_vec : np.ndarray
        Body-fixed position vector [km].

    Output:
    -------
      itrf_acc_vec : np.ndarray
        Body-fixed acceleration vector [km/s²], point-mass term excluded.
    """
    C      = self.coefficients.C
    S      = self.coefficients.S
    size   = self._size
    degree = self.degree
    order  = self.order

    ri  = 1.0 / np.linalg.norm(itrf_pos_vec)
    xor = itrf_pos_vec[0] * ri
    yor = itrf_pos_vec[1] * ri
    zor = itrf_pos_vec[2] * ri

    ep    = zor
    reor  = self.coefficients.radius * ri
    reorn = reor
    muor2 = self.coefficients.gp * ri * ri

    sum_h  = 0.0
    sum_gm = 0.0
    sum_j  = 0.0
    sum_k  = 0.0

    # Legendre derivatives of degree n, n-1, n-2 and longitude terms cos(m lon), sin(m lon)
    p_n   = np.zeros(size)
    p_nm1 = np.zeros(size)
    p_nm2 = np.zeros(size)
    c_til = np.zeros(size)
    s_til = np.zeros(size)

    p_nm2[0] = 1.0
    p_nm1[0] = ep
    p_nm1[1] = 1.0
    c_til[0] = 1.0
    c_til[1] = xor
    s_til[1] = yor

    for n in range(2, degree + 1):
      twonm1 = 2.0 * n - 1.0
      reorn *= reor
      c_n0   = C[n, 0]

      p_n[0] = (twonm1 * ep * p_nm1[0] - (n - 1) * p_nm2[0]) / n
      p_n[1] = p_nm2[1] + twonm1 * p_nm1[0]
      p_n[2] = p_nm2[2] + twonm1 * p_nm1[1]

      sum_hn  = p_n[1] * c_n0
      sum_gmn = p_n[0] * c_n0 * (n + 1)

      if order > 0:
        sum_jn = 0.0
        sum_kn = 0.0

        c_til[n] = c_til[1] * c_til[n - 1] - s_til[1] * s_til[n - 1]
        s_til[n] = s_til[1] * c_til[n - 1] + c_til[1] * s_til[n - 1]

        for m in range(1, min(n, order) + 1):
          p_n[m + 1] = p_nm2[m + 1] + twonm1 * p_nm1[m]

          c_nm = C[n, m]
          s_nm = S[n, m]

          b_nm_til = c_nm * c_til[m]     + s_nm * s_til[m]
          b_nm_tm1 = c_nm * c_til[m - 1] + s_nm * s_til[m - 1]
          a_nm_tm1 = c_nm * s_til[m - 1] - s_nm * c_til[m - 1]

          sum_hn  += p_n[m + 1] * b_nm_til
          sum_gmn += (n + m + 1) * p_n[m] * b_nm_til
          sum_jn  += m * p_n[m] * b_nm_tm1
          sum_kn  -= m * p_n[m] * a_nm_tm1

        sum_j += reorn * sum_jn
        sum_k += reorn * sum_kn

      sum_h  += reorn * sum_hn
      sum_gm += reorn * sum_gmn

      if n < degree:
        p_nm2[:n + 1] = p_nm1[:n + 1]
        p_nm1[:n + 1] = p_n[:n + 1]

    lam = sum_gm + ep * sum_h
    return -muor2 * np.array([
      lam * xor - sum_j,
      lam * yor - sum_k,
      lam * zor - sum_h,
    ])
