"""
Dynamics Module Tests
=====================

Regression tests for gravity, third-body, drag, SRP, thrust, and the force model.
"""
import pytest
import numpy as np

from orbit_propagator.model.atmosphere      import default_atmosphere
from orbit_propagator.model.constants       import CONVERTER, SOLARSYSTEMCONSTANTS
from orbit_propagator.model.dynamics        import (
  AtmosphericDrag,
  EarthGravity,
  ForceModel,
  Gravity,
  SolarRadiationPressure,
  ThirdBodyGravity,
  Thrust,
)
from orbit_propagator.model.ephemeris       import default_ephemeris
from orbit_propagator.model.frame_converter import FrameConverter
from orbit_propagator.model.state           import State
from orbit_propagator.model.time_converter  import Epoch
from orbit_propagator.validation.test_gravity_field import j2_acceleration


def circular_state(
  altitude : float,
  epoch    : Epoch = Epoch(0.0),
) -> State:
  """Circular equatorial state at an altitude above the equator [km]."""
  pos_mag = SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR + altitude
  vel_mag = np.sqrt(SOLARSYSTEMCONSTANTS.EARTH.GP / pos_mag)
  return State(epoch, [pos_mag, 0.0, 0.0], [0.0, vel_mag, 0.0])


class TestGravity:
  """Tests for Gravity class."""

  def test_sanity_check_point_mass_magnitude(self, leo_initial_state):
    """Test point-mass acceleration magnitude."""
    gravity = Gravity()

    acc_vec = gravity.acceleration(leo_initial_state)

    expected_mag = SOLARSYSTEMCONSTANTS.EARTH.GP / 7000.0**2
    assert np.isclose(np.linalg.norm(acc_vec), expected_mag, rtol=1e-12)

  def test_sanity_check_point_mass_direction(self, eccentric_initial_state):
    """Test that point-mass acceleration points toward the Earth center."""
    acc_vec = Gravity().acceleration(eccentric_initial_state)

    pos_dir = eccentric_initial_state.position / eccentric_initial_state.radius
    acc_dir = acc_vec / np.linalg.norm(acc_vec)
    assert np.allclose(acc_dir, -pos_dir, atol=1e-14)


class TestEarthGravity:
  """Tests for EarthGravity class."""

  def test_sanity_check_degree_order_clamped(self):
    """Test that degree and order are clamped into [0, 36]."""
    assert EarthGravity(50, 50).degree == 36
    assert EarthGravity(50, 50).order  == 36
    assert EarthGravity(-3, 2).degree  == 0

  def test_sanity_check_low_degree_is_point_mass(self, eccentric_initial_state):
    """Test that degree below 2 reduces to point-mass gravity."""
    gravity = EarthGravity(1, 1)

    assert not gravity.is_aspherical
    assert np.allclose(
      gravity.acceleration(eccentric_initial_state),
      Gravity(gravity.gp).acceleration(eccentric_initial_state),
      rtol = 1e-15,
    )

  def test_known_solution_j2_at_j2000(self):
    """Test degree-2 zonal gravity against point mass plus closed-form J2."""
    gravity = EarthGravity(2, 0)
    state   = State(Epoch(0.0), [3000.0, -4000.0, 5000.0], [0.0, 0.0, 0.0])
    j2      = -gravity.coefficients.coefficients(2, 0)[0]

    expected = Gravity(gravity.gp).acceleration(state) + j2_acceleration(state.position, j2)

    assert np.allclose(gravity.acceleration(state), expected, rtol=1e-10, atol=1e-18)

  def test_sanity_check_tesseral_terms_rotate_with_earth(self):
    """Test that tesseral terms make the acceleration depend on Earth rotation."""
    gravity = EarthGravity(8, 8)
    state_o = State(Epoch(    0.0), [7000.0, 0.0, 0.0], [0.0, 7.5, 0.0])
    state_f = State(Epoch(21600.0), [7000.0, 0.0, 0.0], [0.0, 7.5, 0.0])

    assert not np.allclose(gravity.acceleration(state_o), gravity.acceleration(state_f), rtol=1e-9, atol=0.0)


class TestThirdBodyGravity:
  """Tests for ThirdBodyGravity class."""

  def test_sanity_check_no_bodies(self, leo_initial_state):
    """Test zero acceleration with neither body enabled."""
    assert np.array_equal(ThirdBodyGravity().acceleration(leo_initial_state), np.zeros(3))

  def test_sanity_check_point_mass_at_center(self):
    """Test that the direct and indirect terms cancel at the Earth center."""
    body_pos_vec = np.array([384400.0, 0.0, 0.0])

    acc_vec = ThirdBodyGravity.point_mass(np.zeros(3), body_pos_vec, SOLARSYSTEMCONSTANTS.MOON.GP)

    assert np.allclose(acc_vec, np.zeros(3), atol=1e-25)

  def test_sanity_check_tidal_magnitudes(self, leo_initial_state):
    """Test third-body accelerations are of tidal order at LEO."""
    moon_acc = ThirdBodyGravity(moon=True).acceleration(leo_initial_state)
    sun_acc  = ThirdBodyGravity(sun=True ).acceleration(leo_initial_state)
    both_acc = ThirdBodyGravity(moon=True, sun=True).acceleration(leo_initial_state)

    assert 1e-10 < np.linalg.norm(moon_acc) < 1e-8
    assert 1e-10 < np.linalg.norm(sun_acc)  < 1e-8
    assert np.allclose(both_acc, moon_acc + sun_acc, rtol=1e-12)


class TestSolarRadiationPressure:
  """Tests for SolarRadiationPressure class."""

  def test_known_solution_sunlit_magnitude(self):
    """Test SRP magnitude and direction for a sunlit spacecraft."""
    srp         = SolarRadiationPressure(mass=1000.0, area=10.0, reflect_coeff=1.2)
    epoch       = Epoch(0.0)
    sun_pos_vec = default_ephemeris().sun_position_apparent(epoch)
    sun_dir     = sun_pos_vec / np.linalg.norm(sun_pos_vec)
    state       = State(epoch, 7000.0 * sun_dir, [0.0, 0.0, 7.5])

    acc_vec = srp.acceleration(state)

    rel_pos_vec  = state.position - sun_pos_vec
    distance_au  = np.linalg.norm(rel_pos_vec) / CONVERTER.KM_PER_AU
    expected_mag = 4.56e-6 / distance_au**2 * (10.0 * 1.2 / 1000.0) * 1e-3  # [km/s²]

    assert np.isclose(np.linalg.norm(acc_vec), expected_mag, rtol=1e-9)
    assert np.dot(acc_vec, sun_dir) < 0.0

  def test_sanity_check_zero_in_umbra(self):
    """Test zero SRP behind the Earth."""
    srp         = SolarRadiationPressure(mass=1000.0, area=10.0)
    epoch       = Epoch(0.0)
    sun_pos_vec = default_ephemeris().sun_position_apparent(epoch)
    sun_dir     = sun_pos_vec / np.linalg.norm(sun_pos_vec)
    state       = State(epoch, -7000.0 * sun_dir, [0.0, 0.0, 7.5])

    assert np.array_equal(srp.acceleration(state), np.zeros(3))

  def test_sanity_check_invalid_properties(self):
    """Test that non-physical mass and area are rejected."""
    with pytest.raises(ValueError):
      SolarRadiationPressure(mass=0.0, area=10.0)
    with pytest.raises(ValueError):
      SolarRadiationPressure(mass=100.0, area=-1.0)


class TestAtmosphericDrag:
  """Tests for AtmosphericDrag class."""

  def test_drag_zero_at_high_altitude(self, geo_initial_state):
    """Test that drag vanishes above the density table."""
    drag = AtmosphericDrag(mass=1000.0, area=10.0)

    assert np.array_equal(drag.acceleration(geo_initial_state), np.zeros(3))
    assert np.array_equal(drag.acceleration(circular_state(1100.0)), np.zeros(3))

  def test_drag_zero_below_table(self):
    """Test that drag vanishes below the density table."""
    drag = AtmosphericDrag(mass=1000.0, area=10.0)

    assert np.array_equal(drag.acceleration(circular_state(50.0)), np.zeros(3))

  def test_drag_opposes_velocity(self):
    """Test that drag acceleration opposes the velocity relative to the atmosphere."""
    drag  = AtmosphericDrag(mass=1000.0, area=10.0, drag_coeff=2.2)
    state = circular_state(400.0)

    acc_vec = drag.acceleration(state)

    earth_rot_vec = np.array([0.0, 0.0, SOLARSYSTEMCONSTANTS.EARTH.OMEGA])
    vel_rel_vec   = state.velocity - np.cross(earth_rot_vec, state.position)
    acc_dir       = acc_vec / np.linalg.norm(acc_vec)

    assert 1e-10 < np.linalg.norm(acc_vec) < 1e-7
    assert np.allclose(acc_dir, -vel_rel_vec / np.linalg.norm(vel_rel_vec), atol=1e-9)

  def test_drag_increases_with_lower_altitude(self):
    """Test that drag increases at lower altitudes."""
    drag = AtmosphericDrag(mass=1000.0, area=10.0)

    acc_high = drag.acceleration(circular_state(500.0))
    acc_low  = drag.acceleration(circular_state(300.0))

    assert np.linalg.norm(acc_low) > np.linalg.norm(acc_high)

  def test_density_within_table_bounds(self):
    """Test that density at a tabulated height lies between its min and max."""
    drag  = AtmosphericDrag(mass=1000.0, area=10.0)
    state = circular_state(400.0)
    entry = next(entry for entry in default_atmosphere().entries if entry.height == 400.0)

    rot_mat_j2000_to_itrf = FrameConverter.j2000_to_itrf(state.epoch)
    rho = drag.density(state.epoch, rot_mat_j2000_to_itrf @ state.position, rot_mat_j2000_to_itrf)

    assert entry.density_min * (1.0 - 1e-9) <= rho <= entry.density_max * (1.0 + 1e-9)


class TestThrust:
  """Tests for Thrust class."""

  def test_sanity_check_burn_window(self):
    """Test magnitude, duration, and burn window of a finite thrust."""
    thrust = Thrust(Epoch(100.0), 3.0, 4.0, 0.0, duration_rate=10.0)

    assert np.isclose(thrust.magnitude, 5.0)
    assert np.isclose(thrust.duration, 50.0)
    assert thrust.start == Epoch(75.0)
    assert thrust.stop  == Epoch(125.0)
    assert not thrust.is_impulsive
    assert np.allclose(thrust.delta_v, [0.003, 0.004, 0.0])

  def test_sanity_check_overlaps(self):
    """Test burn window intersection with a time span."""
    impulse = Thrust(Epoch(100.0), 0.0, 1.0, 0.0)
    burn    = Thrust(Epoch(100.0), 0.0, 5.0, 0.0, duration_rate=10.0)

    assert impulse.is_impulsive
    assert impulse.overlaps(Epoch(0.0), Epoch(100.0))
    assert not impulse.overlaps(Epoch(100.1), Epoch(200.0))
    assert burn.overlaps(Epoch(120.0), Epoch(200.0))
    assert not burn.overlaps(Epoch(126.0), Epoch(200.0))

  def test_sanity_check_negative_duration_rate(self):
    with pytest.raises(ValueError):
      Thrust(Epoch(0.0), 0.0, 1.0, 0.0, duration_rate=-1.0)

  def test_known_solution_intrack_impulse(self, leo_initial_state):
    """Test that an in-track impulse adds its magnitude to a circular speed."""
    thrust = Thrust(Epoch(0.0), 0.0, 1.0, 0.0)

    state = thrust.apply(leo_initial_state)

    assert state.epoch == leo_initial_state.epoch
    assert np.array_equal(state.position, leo_initial_state.position)
    assert np.isclose(
      np.linalg.norm(state.velocity),
      np.linalg.norm(leo_initial_state.velocity) + 1e-3,
      rtol = 1e-14,
    )

  def test_known_solution_acceleration_delivers_delta_v(self, eccentric_initial_state):
    """Test that acceleration times duration equals the inertial delta-v."""
    thrust = Thrust(Epoch(0.0), 0.5, -1.0, 2.0, duration_rate=30.0)

    acc_vec = thrust.acceleration(eccentric_initial_state)

    rot_mat_ric_to_xyz = FrameConverter.ric_to_xyz(eccentric_initial_state.position, eccentric_initial_state.velocity)
    assert np.allclose(acc_vec * thrust.duration, rot_mat_ric_to_xyz @ thrust.delta_v, rtol=1e-12)


class TestForceModel:
  """Tests for ForceModel class."""

  def test_sanity_check_empty_model(self, leo_initial_state):
    """Test that a model without forces produces zero acceleration."""
    force_model = ForceModel()

    assert force_model.forces == []
    assert np.array_equal(force_model.acceleration(leo_initial_state), np.zeros(3))

  def test_velocity_in_derivative(self, eccentric_initial_state):
    """Test that velocity appears in the position derivative."""
    force_model = ForceModel().set_gravity()

    state_dot = force_model.derivative(eccentric_initial_state)

    assert state_dot.shape == (6,)
    assert np.array_equal(state_dot[0:3], eccentric_initial_state.velocity)
    assert np.allclose(state_dot[3:6], Gravity().acceleration(eccentric_initial_state), rtol=1e-15)

  def test_sanity_check_one_force_per_category(self):
    """Test that setters replace the force of their category."""
    force_model = ForceModel().set_earth_gravity(4, 4).set_gravity()

    assert isinstance(force_model.central_gravity, Gravity)
    assert len(force_model.forces) == 1

    force_model.clear_gravity()
    assert force_model.central_gravity is None

  def test_sanity_check_sum_of_forces(self):
    """Test that the model acceleration is the sum of the enabled forces."""
    force_model = (
      ForceModel()
      .set_earth_gravity(4, 4)
      .set_third_body_gravity(moon=True, sun=True)
      .set_solar_radiation_pressure(500.0, 5.0)
      .set_atmospheric_drag(500.0, 5.0)
    )
    state = circular_state(350.0, Epoch(1.0e8))

    expected = sum(force.acceleration(state) for force in force_model.forces)

    assert np.allclose(force_model.acceleration(state), expected, rtol=1e-14)
    assert force_model.describe() == [
      'spherical-harmonic gravity (degree 4, order 4)',
      'third-body gravity (moon, sun)',
      'solar radiation pressure',
      'atmospheric drag',
    ]

  def test_sanity_check_maneuver_slot(self, leo_initial_state):
    """Test loading and clearing the maneuver slot."""
    force_model = ForceModel().set_gravity()
    thrust      = Thrust(Epoch(0.0), 0.0, 1.0, 0.0, duration_rate=100.0)

    force_model.load_maneuver(thrust)
    assert force_model.forces[-1] is thrust
    assert not np.allclose(force_model.acceleration(leo_initial_state), Gravity().acceleration(leo_initial_state))

    force_model.clear_maneuver()
    assert force_model.maneuver_thrust is None
    assert thrust not in force_model.forces

  def test_sanity_check_clear_perturbations(self):
    force_model = (
      ForceModel()
      .set_third_body_gravity(sun=True)
      .set_solar_radiation_pressure(500.0, 5.0)
      .set_atmospheric_drag(500.0, 5.0)
    )

    force_model.clear_third_body_gravity().clear_solar_radiation_pressure().clear_atmospheric_drag()

    assert force_model.forces == []


if __name__ == "__main__":
  pytest.main([__file__, "-v"])
