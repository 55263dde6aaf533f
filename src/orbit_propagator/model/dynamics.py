"""
Spacecraft Orbital Dynamics Module
==================================

Force models and their composition into the state derivative integrated
by every propagator.

Summary:
--------
Each force is a small object whose only operation is
acceleration(state) -> acceleration vector. Forces hold parameters and
references to read-only data contexts (gravity coefficients, atmosphere
table, Sun/Moon ephemeris) and never mutate them, so a force instance may
be shared by several force models and propagators.

Class Structure:
----------------
Force Hierarchy:
    ForceModel (composition, state derivative)
    ├── central gravity (one of)
    │   ├── Gravity                 - point mass
    │   └── EarthGravity            - EGM-96 spherical harmonics to degree/order 36
    ├── ThirdBodyGravity            - Sun and/or Moon point masses
    ├── SolarRadiationPressure      - cannonball model with Earth eclipse
    ├── AtmosphericDrag             - Harris-Priester density, rotating atmosphere
    └── Thrust (maneuver slot)      - constant RIC acceleration during a finite burn

Usage Example:
--------------
  from orbit_propagator.model.dynamics import ForceModel

  force_model = ForceModel()
  force_model.set_earth_gravity(degree=8, order=8)
  force_model.set_third_body_gravity(moon=True, sun=True)
  force_model.set_atmospheric_drag(mass=1000.0, area=10.0)

  state_dot = force_model.derivative(state)

Units:
------
- Position     : kilometers [km]
- Velocity     : kilometers per second [km/s]
- Acceleration : kilometers per second squared [km/s²]
- Mass         : kilograms [kg]
- Area         : square meters [m²]
- Delta-v      : meters per second [m/s] (Thrust inputs only)

Sources:
--------
- Vallado, D. A. (2013). Fundamentals of Astrodynamics and Applications (4th ed.). Microcosm Press.
- Montenbruck, O., & Gill, E. (2000). Satellite Orbits: Models, Methods and Applications. Springer.
"""
import numpy as np

from abc    import ABC, abstractmethod
from typing import Optional, Union

from orbit_propagator.model.atmosphere      import HarrisPriesterAtmosphere, default_atmosphere
from orbit_propagator.model.constants       import CONVERTER, SOLARSYSTEMCONSTANTS
from orbit_propagator.model.ephemeris       import AnalyticalEphemeris, SpiceEphemeris, default_ephemeris, lighting_ratio
from orbit_propagator.model.frame_converter import FrameConverter, rot_z
from orbit_propagator.model.gravity_field   import GravityFieldCoefficients, SphericalHarmonicsGravity, default_gravity_field
from orbit_propagator.model.state           import State
from orbit_propagator.model.time_converter  import Epoch

Ephemeris = Union[AnalyticalEphemeris, SpiceEphemeris]


class Force(ABC):
  """
  Perturbing or central force acting on the spacecraft.
  """

  name = 'force'

  @abstractmethod
  def acceleration(
    self,
    state : State,
  ) -> np.ndarray:
    """
    Acceleration in J2000 [km/s²] at a state.
    """


# =============================================================================
# Central Gravity
# =============================================================================

class Gravity(Force):
  """
  Point-mass gravity of the central body.
  """

  name = 'point-mass gravity'

  def __init__(
    self,
    gp : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
  ):
    """
    Input:
    ------
      gp : float
        Gravitational parameter [km³/s²].
    """
    self.gp = gp

  def acceleration(
    self,
    state : State,
  ) -> np.ndarray:
    pos_mag = np.linalg.norm(state.position)
    return -self.gp * state.position / pos_mag**3


class EarthGravity(Force):
  """
  Earth gravity from spherical harmonics.

  Degree and order are clamped into [0, 36]. Below degree 2 the force is
  the point-mass term alone; otherwise the non-spherical part is evaluated
  in the Earth-fixed frame and rotated back to J2000.
  """

  name = 'spherical-harmonic gravity'

  def __init__(
    self,
    degree       : int,
    order        : int,
    coefficients : Optional[GravityFieldCoefficients] = None,
  ):
    """
    Input:
    ------
      degree : int
        Maximum degree of the expansion.
      order : int
        Maximum order of the expansion.
      coefficients : GravityFieldCoefficients | None
        Coefficient lookup context. Defaults to the embedded EGM-96 field.
    """
    max_degree = SOLARSYSTEMCONSTANTS.EARTH.GRAVITY_MAX_DEGREE
    max_order  = SOLARSYSTEMCONSTANTS.EARTH.GRAVITY_MAX_ORDER

    self.degree       = int(min(max(degree, 0), max_degree))
    self.order        = int(min(max(order,  0), max_order))
    self.coefficients = coefficients if coefficients is not None else default_gravity_field()
    self.gp           = self.coefficients.gp

    self.is_aspherical = self.degree >= 2
    self.harmonics     = SphericalHarmonicsGravity(self.coefficients, self.degree, self.order) if self.is_aspherical else None

  def _spherical(
    self,
    state : State,
  ) -> np.ndarray:
    pos_mag = np.linalg.norm(state.position)
    return -self.gp * state.position / pos_mag**3

  def _aspherical(
    self,
    state : State,
  ) -> np.ndarray:
    rot_mat_j2000_to_itrf = FrameConverter.j2000_to_itrf(state.epoch)
    itrf_pos_vec          = rot_mat_j2000_to_itrf @ state.position
    itrf_acc_vec          = self.harmonics.compute(itrf_pos_vec)
    return rot_mat_j2000_to_itrf.T @ itrf_acc_vec

  def acceleration(
    self,
    state : State,
  ) -> np.ndarray:
    acc_vec = self._spherical(state)
    if self.is_aspherical:
      acc_vec = acc_vec + self._aspherical(state)
    return acc_vec


# =============================================================================
# Perturbations
# =============================================================================

class ThirdBodyGravity(Force):
  """
  Third-body gravitational perturbations from the Sun and Moon.
  """

  name = 'third-body gravity'

  def __init__(
    self,
    moon      : bool                = False,
    sun       : bool                = False,
    ephemeris : Optional[Ephemeris] = None,
  ):
    """
    Input:
    ------
      moon : bool
        Include the Moon.
      sun : bool
        Include the Sun.
      ephemeris : AnalyticalEphemeris | SpiceEphemeris | None
        Sun/Moon position source. Defaults to the analytical ephemeris.
    """
    self.moon      = moon
    self.sun       = sun
    self.ephemeris = ephemeris if ephemeris is not None else default_ephemeris()

  @staticmethod
  def point_mass(
    pos_vec      : np.ndarray,
    body_pos_vec : np.ndarray,
    body_gp      : float,
  ) -> np.ndarray:
    """
    Direct minus indirect acceleration of one body.

    Input:
    ------
      pos_vec : np.ndarray
        Spacecraft position relative to Earth [km].
      body_pos_vec : np.ndarray
        Body position relative to Earth [km].
      body_gp : float
        Body gravitational parameter [km³/s²].

    Output:
    -------
      acc_vec : np.ndarray
        Acceleration [km/s²].
    """
    rel_pos_vec = body_pos_vec - pos_vec
    return body_gp * (
      rel_pos_vec / np.linalg.norm(rel_pos_vec)**3
      - body_pos_vec / np.linalg.norm(body_pos_vec)**3
    )

  def acceleration(
    self,
    state : State,
  ) -> np.ndarray:
    acc_vec = np.zeros(3)
    if self.moon:
      moon_pos_vec = self.ephemeris.moon_position(state.epoch)
      acc_vec      = acc_vec + self.point_mass(state.position, moon_pos_vec, SOLARSYSTEMCONSTANTS.MOON.GP)
    if self.sun:
      sun_pos_vec = self.ephemeris.sun_position_apparent(state.epoch)
      acc_vec     = acc_vec + self.point_mass(state.position, sun_pos_vec, SOLARSYSTEMCONSTANTS.SUN.GP)
    return acc_vec


class SolarRadiationPressure(Force):
  """
  Cannonball solar radiation pressure with Earth eclipse (umbra and penumbra).
  """

  name = 'solar radiation pressure'

  # Solar pressure scaled to 1 AU, divided by r² in km² to give N/m² at distance r
  K_REF = SOLARSYSTEMCONSTANTS.SUN.PRESSURE_SRP * CONVERTER.KM_PER_AU**2

  def __init__(
    self,
    mass          : float,
    area          : float,
    reflect_coeff : float               = 1.2,
    ephemeris     : Optional[Ephemeris] = None,
  ):
    """
    Input:
    ------
      mass : float
        Spacecraft mass [kg].
      area : float
        Sun-facing cross-sectional area [m²].
      reflect_coeff : float
        Reflectivity coefficient Cr [-].
      ephemeris : AnalyticalEphemeris | SpiceEphemeris | None
        Sun position source. Defaults to the analytical ephemeris.
    """
    if mass <= 0.0:
      raise ValueError(f"Spacecraft mass must be positive, received {mass}")
    if area < 0.0:
      raise ValueError(f"SRP area must be non-negative, received {area}")

    self.mass          = mass
    self.area          = area
    self.reflect_coeff = reflect_coeff
    self.ephemeris     = ephemeris if ephemeris is not None else default_ephemeris()

  def acceleration(
    self,
    state : State,
  ) -> np.ndarray:
    sun_pos_vec = self.ephemeris.sun_position_apparent(state.epoch)
    ratio       = lighting_ratio(state.position, sun_pos_vec)
    if ratio == 0.0:
      return np.zeros(3)

    # Sun-to-spacecraft direction and pressure at the spacecraft distance [N/m²]
    rel_pos_vec = state.position - sun_pos_vec
    rel_pos_mag = np.linalg.norm(rel_pos_vec)
    pressure    = ratio * self.K_REF / rel_pos_mag**2

    # N/kg = m/s², converted to km/s²
    return rel_pos_vec / rel_pos_mag * pressure * (self.area * self.reflect_coeff / self.mass) * CONVERTER.KM_PER_M


class AtmosphericDrag(Force):
  """
  Atmospheric drag with Harris-Priester density and a co-rotating atmosphere.
  """

  name = 'atmospheric drag'

  # Lag of the diurnal bulge apex behind the sub-solar point
  BULGE_LAG = 30.0 * CONVERTER.RAD_PER_DEG

  def __init__(
    self,
    mass       : float,
    area       : float,
    drag_coeff : float                              = 2.2,
    cosine     : int                                = 4,
    atmosphere : Optional[HarrisPriesterAtmosphere] = None,
    ephemeris  : Optional[Ephemeris]                = None,
  ):
    """
    Input:
    ------
      mass : float
        Spacecraft mass [kg].
      area : float
        Cross-sectional area [m²].
      drag_coeff : float
        Drag coefficient Cd [-].
      cosine : int
        Harris-Priester cosine power n (2 for low, 6 for polar inclinations).
      atmosphere : HarrisPriesterAtmosphere | None
        Density table context. Defaults to mean solar activity.
      ephemeris : AnalyticalEphemeris | SpiceEphemeris | None
        Sun position source for the diurnal bulge.
    """
    if mass <= 0.0:
      raise ValueError(f"Spacecraft mass must be positive, received {mass}")
    if area < 0.0:
      raise ValueError(f"Drag area must be non-negative, received {area}")

    self.mass       = mass
    self.area       = area
    self.drag_coeff = drag_coeff
    self.cosine     = cosine
    self.atmosphere = atmosphere if atmosphere is not None else default_atmosphere()
    self.ephemeris  = ephemeris  if ephemeris  is not None else default_ephemeris()

  def density(
    self,
    epoch                 : Epoch,
    itrf_pos_vec          : np.ndarray,
    rot_mat_j2000_to_itrf : np.ndarray,
  ) -> float:
    """
    Harris-Priester density at an Earth-fixed position.

    Input:
    ------
      epoch : Epoch
        Evaluation epoch.
      itrf_pos_vec : np.ndarray
        Earth-fixed position [km].
      rot_mat_j2000_to_itrf : np.ndarray
        Rotation from J2000 to the Earth-fixed frame at epoch.

    Output:
    -------
      rho : float
        Density [kg/m³]; zero outside the tabulated heights.
    """
    bracket = self.atmosphere.bracket(FrameConverter.geodetic_height(itrf_pos_vec))
    if bracket is None:
      return 0.0

    # Diurnal bulge direction: Sun direction rotated east by the lag angle
    sun_pos_vec  = self.ephemeris.sun_position_apparent(epoch)
    sun_dir_itrf = rot_mat_j2000_to_itrf @ (sun_pos_vec / np.linalg.norm(sun_pos_vec))
    bulge_dir    = rot_z(-self.BULGE_LAG) @ sun_dir_itrf

    cos_psi  = np.dot(bulge_dir / np.linalg.norm(bulge_dir), itrf_pos_vec / np.linalg.norm(itrf_pos_vec))
    c2_psi2  = 0.5 * (1.0 + cos_psi)
    c_psi2   = np.sqrt(max(c2_psi2, 0.0))
    cos_pow  = c2_psi2 * c_psi2**(self.cosine - 2) if c_psi2 > 1e-12 else 0.0

    # Exponential interpolation between table rows
    lower, upper = bracket.lower, bracket.upper
    d_height     = (lower.height - bracket.height) / (lower.height - upper.height)
    rho_min      = lower.density_min * (upper.density_min / lower.density_min)**d_height
    if cos_pow == 0.0:
      return float(rho_min)
    rho_max = lower.density_max * (upper.density_max / lower.density_max)**d_height

    return float(rho_min + (rho_max - rho_min) * cos_pow)

  def acceleration(
    self,
    state : State,
  ) -> np.ndarray:
    rot_mat_j2000_to_itrf = FrameConverter.j2000_to_itrf(state.epoch)
    itrf_pos_vec          = rot_mat_j2000_to_itrf @ state.position

    rho = self.density(state.epoch, itrf_pos_vec, rot_mat_j2000_to_itrf)
    if rho == 0.0:
      return np.zeros(3)

    # Velocity relative to the rotating atmosphere [m/s]
    earth_rot_vec = rot_mat_j2000_to_itrf.T @ np.array([0.0, 0.0, SOLARSYSTEMCONSTANTS.EARTH.OMEGA])
    vel_rel_vec   = (state.velocity - np.cross(earth_rot_vec, state.position)) * CONVERTER.M_PER_KM
    vel_rel_mag   = np.linalg.norm(vel_rel_vec)

    # m/s², converted to km/s²
    acc_vec = -0.5 * rho * (self.drag_coeff * self.area / self.mass) * vel_rel_mag * vel_rel_vec
    return acc_vec * CONVERTER.KM_PER_M


# =============================================================================
# Maneuvers
# =============================================================================

class Thrust(Force):
  """
  Maneuver expressed as a delta-v in the Radial-Intrack-Crosstrack frame.

  A thrust is impulsive when its duration is zero. Otherwise the delta-v is
  spread uniformly over [start, stop], centered on the maneuver epoch, as a
  constant RIC acceleration.
  """

  name = 'thrust'

  def __init__(
    self,
    center        : Epoch,
    radial        : float,
    intrack       : float,
    crosstrack    : float,
    duration_rate : float = 0.0,
  ):
    """
    Input:
    ------
      center : Epoch
        Burn center epoch.
      radial : float
        Radial delta-v [m/s].
      intrack : float
        In-track delta-v [m/s].
      crosstrack : float
        Cross-track delta-v [m/s].
      duration_rate : float
        Burn duration per unit delta-v [s per m/s]. Zero for an impulse.
    """
    if duration_rate < 0.0:
      raise ValueError(f"Thrust duration rate must be non-negative, received {duration_rate}")

    self.center        = center
    self.radial        = radial
    self.intrack       = intrack
    self.crosstrack    = crosstrack
    self.duration_rate = duration_rate
    self.delta_v       = np.array([radial, intrack, crosstrack]) * CONVERTER.KM_PER_M

  @property
  def magnitude(self) -> float:
    """Delta-v magnitude [m/s]."""
    return float(np.linalg.norm(self.delta_v) * CONVERTER.M_PER_KM)

  @property
  def duration(self) -> float:
    """Burn duration [s]."""
    return self.magnitude * self.duration_rate

  @property
  def start(self) -> Epoch:
    return self.center.roll(-0.5 * self.duration)

  @property
  def stop(self) -> Epoch:
    return self.center.roll(0.5 * self.duration)

  @property
  def is_impulsive(self) -> bool:
    return self.duration <= 0.0

  def overlaps(
    self,
    start : Epoch,
    stop  : Epoch,
  ) -> bool:
    """True when the burn window intersects [start, stop]."""
    return self.start <= stop and self.stop >= start

  def acceleration(
    self,
    state : State,
  ) -> np.ndarray:
    """
    Constant acceleration [km/s²] delivering the delta-v over the burn duration.
    """
    rot_mat_ric_to_xyz = FrameConverter.ric_to_xyz(state.position, state.velocity)
    return rot_mat_ric_to_xyz @ (self.delta_v / self.duration)

  def apply(
    self,
    state : State,
  ) -> State:
    """
    Add the full delta-v to a state instantaneously.
    """
    rot_mat_ric_to_xyz = FrameConverter.ric_to_xyz(state.position, state.velocity)
    return state.with_velocity(state.velocity + rot_mat_ric_to_xyz @ self.delta_v)

  def __repr__(self) -> str:
    return (
      f"Thrust(center={self.center.seconds:.3f}, radial={self.radial}, intrack={self.intrack}, "
      f"crosstrack={self.crosstrack}, duration_rate={self.duration_rate})"
    )


# =============================================================================
# Composition
# =============================================================================

class ForceModel:
  """
  Composition of at most one force per category plus an optional maneuver.

  Categories: central gravity, third-body gravity, solar radiation pressure,
  atmospheric drag. The maneuver slot is written only by a propagator while
  it integrates a finite burn, and is cleared before the propagator returns.
  """

  def __init__(
    self,
    ephemeris    : Optional[Ephemeris]                = None,
    atmosphere   : Optional[HarrisPriesterAtmosphere] = None,
    coefficients : Optional[GravityFieldCoefficients] = None,
  ):
    """
    Input:
    ------
      ephemeris : AnalyticalEphemeris | SpiceEphemeris | None
        Sun/Moon source handed to third-body, SRP, and drag forces.
      atmosphere : HarrisPriesterAtmosphere | None
        Density table handed to the drag force.
      coefficients : GravityFieldCoefficients | None
        Gravity field handed to the spherical-harmonic force.
    """
    self.ephemeris    = ephemeris
    self.atmosphere   = atmosphere
    self.coefficients = coefficients

    self.central_gravity          : Optional[Force]  = None
    self.third_body_gravity       : Optional[Force]  = None
    self.solar_radiation_pressure : Optional[Force]  = None
    self.atmospheric_drag         : Optional[Force]  = None
    self.maneuver_thrust          : Optional[Thrust] = None

  # Setters return the model so that calls can be chained

  def set_gravity(
    self,
    gp : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
  ) -> 'ForceModel':
    self.central_gravity = Gravity(gp)
    return self

  def set_earth_gravity(
    self,
    degree : int,
    order  : int,
  ) -> 'ForceModel':
    self.central_gravity = EarthGravity(degree, order, coefficients=self.coefficients)
    return self

  def set_third_body_gravity(
    self,
    moon : bool = False,
    sun  : bool = False,
  ) -> 'ForceModel':
    self.third_body_gravity = ThirdBodyGravity(moon=moon, sun=sun, ephemeris=self.ephemeris)
    return self

  def set_solar_radiation_pressure(
    self,
    mass  : float,
    area  : float,
    coeff : float = 1.2,
  ) -> 'ForceModel':
    self.solar_radiation_pressure = SolarRadiationPressure(mass, area, coeff, ephemeris=self.ephemeris)
    return self

  def set_atmospheric_drag(
    self,
    mass   : float,
    area   : float,
    coeff  : float = 2.2,
    cosine : int   = 4,
  ) -> 'ForceModel':
    self.atmospheric_drag = AtmosphericDrag(
      mass,
      area,
      coeff,
      cosine,
      atmosphere = self.atmosphere,
      ephemeris  = self.ephemeris,
    )
    return self

  def clear_gravity(self) -> 'ForceModel':
    self.central_gravity = None
    return self

  def clear_third_body_gravity(self) -> 'ForceModel':
    self.third_body_gravity = None
    return self

  def clear_solar_radiation_pressure(self) -> 'ForceModel':
    self.solar_radiation_pressure = None
    return self

  def clear_atmospheric_drag(self) -> 'ForceModel':
    self.atmospheric_drag = None
    return self

  def load_maneuver(
    self,
    maneuver : Thrust,
  ) -> None:
    self.maneuver_thrust = maneuver

  def clear_maneuver(self) -> None:
    self.maneuver_thrust = None

  @property
  def forces(self) -> list:
    """Enabled forces, maneuver last."""
    return [
      force for force in (
        self.central_gravity,
        self.third_body_gravity,
        self.solar_radiation_pressure,
        self.atmospheric_drag,
        self.maneuver_thrust,
      )
      if force is not None
    ]

  def describe(self) -> list[str]:
    """
    Human-readable names of the enabled forces.
    """
    names = []
    for force in self.forces:
      if isinstance(force, EarthGravity):
        names.append(f"{force.name} (degree {force.degree}, order {force.order})")
      elif isinstance(force, ThirdBodyGravity):
        bodies = [body for body, flag in (('moon', force.moon), ('sun', force.sun)) if flag]
        names.append(f"{force.name} ({', '.join(bodies) if bodies else 'none'})")
      else:
        names.append(force.name)
    return names

  def acceleration(
    self,
    state : State,
  ) -> np.ndarray:
    """
    Sum of the enabled accelerations [km/s²]; the zero vector when none is enabled.
    """
    acc_vec = np.zeros(3)
    for force in self.forces:
      acc_vec = acc_vec + force.acceleration(state)
    return acc_vec

  def derivative(
    self,
    state : State,
  ) -> np.ndarray:
    """
    State time derivative d/dt [r, v] = [v, a] as a 6-vector.
    """
    return np.concatenate((state.velocity, self.acceleration(state)))
