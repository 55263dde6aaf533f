"""
Tests for the Runge-Kutta Propagators
=====================================

Tests for the Butcher tableaux, the adaptive step control, fixed-step RK4,
and maneuvers flown by the Runge-Kutta propagators.

Tests:
------
TestButcherTableau
  - test_sanity_check_row_sums_equal_nodes   : verify each coupling row sums to its node
  - test_sanity_check_weights_sum_to_one     : verify propagated and embedded weights sum to one
  - test_sanity_check_lookup_by_name         : verify case- and separator-insensitive lookup
  - test_sanity_check_unknown_name           : verify an unknown tableau raises ValueError

TestRungeKuttaAdaptive
  - test_sanity_check_step_proposal_bounds   : verify growth/shrink factors and absolute step bounds
  - test_sanity_check_tolerance_floor        : verify the tolerance is floored and sign-free
  - test_sanity_check_requires_embedded      : verify a fixed-step tableau is rejected
  - test_sanity_check_integrate_is_pure      : verify a trial step leaves the cached state alone
  - test_sanity_check_rejected_steps_not_cached : verify only accepted steps advance the cache
  - test_sanity_check_exact_landing          : verify propagation lands exactly on the requested epoch
  - test_roundtrip_forward_backward          : verify forward then backward propagation returns to start
  - test_roundtrip_circular_orbit_period     : verify each embedded tableau returns to start after one period
  - test_known_solution_j2_matches_dop853    : verify agreement with scipy DOP853 under J2
  - test_sanity_check_set_force_model        : verify replacing the force model updates gp

TestRungeKutta4
  - test_roundtrip_circular_orbit_period     : verify RK4 returns to start after one period
  - test_sanity_check_step_size              : verify step size sign handling and zero rejection
  - test_sanity_check_exact_landing          : verify propagation lands exactly on a non-multiple epoch

TestManeuver
  - test_roundtrip_impulse_and_inverse       : verify an impulse followed by its inverse restores the state
  - test_sanity_check_finite_burn_samples    : verify finite burn samples span [start, stop]
  - test_known_solution_finite_matches_impulse : verify a short finite burn adds the impulsive energy
  - test_sanity_check_maneuver_cleared_on_error : verify the maneuver slot is cleared when integration fails
  - test_sanity_check_invalid_interval       : verify a non-positive burn sample interval is rejected

Usage:
------
  python -m pytest src/orbit_propagator/validation/test_runge_kutta.py -v
"""
import pytest
import numpy as np

from scipy.integrate import solve_ivp

from orbit_propagator.model.constants         import SOLARSYSTEMCONSTANTS
from orbit_propagator.model.dynamics          import ForceModel, Thrust
from orbit_propagator.model.state             import State
from orbit_propagator.model.time_converter    import Epoch
from orbit_propagator.propagation.runge_kutta import (
  BOGACKI_SHAMPINE_32,
  DORMAND_PRINCE_54,
  FEHLBERG_45,
  MAX_STEP_SIZE,
  MIN_STEP_SIZE,
  RUNGE_KUTTA_4,
  TABLEAUX,
  DormandPrince54Propagator,
  RungeKutta4Propagator,
  RungeKuttaAdaptive,
  get_tableau,
)


class RecordingPropagator(RungeKuttaAdaptive):
  """Adaptive propagator that records every trial step."""

  def __init__(self, *args, **kwargs):
    super().__init__(*args, **kwargs)
    self.trials = []

  def integrate(self, state, step, target_epoch=None):
    result = super().integrate(state, step, target_epoch)
    self.trials.append((state, result))
    return result


class FailingForceModel(ForceModel):
  """Force model that fails while a maneuver is loaded."""

  def acceleration(self, state):
    if self.maneuver_thrust is not None:
      raise RuntimeError("thrust model failure")
    return super().acceleration(state)


class TestButcherTableau:
  """
  Tests for the shipped Butcher tableaux.
  """

  def test_sanity_check_row_sums_equal_nodes(self):
    for tableau in TABLEAUX.values():
      matrix = tableau.coupling_matrix()
      assert len(tableau.coupling) == tableau.num_stages
      assert np.allclose(matrix.sum(axis=1), tableau.node, atol=1e-14), tableau.name
      assert np.allclose(np.triu(matrix), 0.0), tableau.name

  def test_sanity_check_weights_sum_to_one(self):
    for tableau in TABLEAUX.values():
      assert np.isclose(sum(tableau.weight_high), 1.0, atol=1e-14), tableau.name
      if tableau.is_embedded:
        assert np.isclose(sum(tableau.weight_low), 1.0, atol=1e-14), tableau.name

  def test_sanity_check_lookup_by_name(self):
    assert get_tableau('dormand_prince_54')   is DORMAND_PRINCE_54
    assert get_tableau('Dormand-Prince-54')   is DORMAND_PRINCE_54
    assert get_tableau(' FEHLBERG_45 ')       is FEHLBERG_45
    assert get_tableau('bogacki-shampine-32') is BOGACKI_SHAMPINE_32
    assert get_tableau('RK4')                 is RUNGE_KUTTA_4
    assert not RUNGE_KUTTA_4.is_embedded

  def test_sanity_check_unknown_name(self):
    with pytest.raises(ValueError):
      get_tableau('heun_21')


class TestRungeKuttaAdaptive:
  """
  Tests for the adaptive Runge-Kutta propagator.
  """

  def test_sanity_check_step_proposal_bounds(self, leo_initial_state):
    propagator = DormandPrince54Propagator(leo_initial_state, tolerance=1e-9)

    assert np.isclose(propagator.propose_step(  60.0, 0.0),   300.0)
    assert np.isclose(propagator.propose_step( 600.0, 0.0), MAX_STEP_SIZE)
    assert np.isclose(propagator.propose_step(  60.0, 1.0),    12.0)
    assert np.isclose(propagator.propose_step(  1e-5, 1.0), MIN_STEP_SIZE)
    assert np.isclose(propagator.propose_step( -60.0, 1e-9),   54.0)

  def test_sanity_check_tolerance_floor(self, leo_initial_state):
    assert RungeKuttaAdaptive(leo_initial_state, tolerance=0.0  ).tolerance == 1e-15
    assert RungeKuttaAdaptive(leo_initial_state, tolerance=-1e-8).tolerance == 1e-8

  def test_sanity_check_requires_embedded(self, leo_initial_state):
    with pytest.raises(ValueError):
      RungeKuttaAdaptive(leo_initial_state, tableau=RUNGE_KUTTA_4)

  def test_sanity_check_integrate_is_pure(self, leo_initial_state):
    propagator = DormandPrince54Propagator(leo_initial_state)

    result = propagator.integrate(propagator.state, 600.0)

    assert propagator.state is leo_initial_state
    assert result.state.epoch == Epoch(600.0)
    assert result.error > propagator.tolerance
    assert 0.0 < result.new_step < 600.0

  def test_sanity_check_rejected_steps_not_cached(self, leo_initial_state):
    """
    Each trial starts from the last accepted state; rejected trials exceed the tolerance.
    """
    propagator = RecordingPropagator(leo_initial_state, tolerance=1e-10)

    propagator.propagate(Epoch(600.0))

    trials     = propagator.trials
    rejections = [result for _, result in trials if result.error > propagator.tolerance]
    assert len(rejections) > 0

    for (state, result), (next_state, _) in zip(trials[:-1], trials[1:]):
      if result.error > propagator.tolerance:
        assert next_state is state
      else:
        assert next_state is result.state

    final_state, final_result = trials[-1]
    assert final_result.error <= propagator.tolerance
    assert propagator.state is final_result.state

  def test_sanity_check_exact_landing(self, leo_initial_state):
    propagator = DormandPrince54Propagator(leo_initial_state)

    state = propagator.propagate(Epoch(123.456))

    assert state.epoch == Epoch(123.456)
    assert propagator.state is state

  def test_roundtrip_forward_backward(self, eccentric_initial_state):
    propagator = DormandPrince54Propagator(eccentric_initial_state)

    propagator.propagate(Epoch(3000.0))
    state = propagator.propagate(Epoch(0.0))

    assert state.epoch == Epoch(0.0)
    assert state.allclose(eccentric_initial_state, pos_tol=1e-5, vel_tol=1e-8)

  @pytest.mark.parametrize("tableau, pos_tol, vel_tol", [
    (DORMAND_PRINCE_54,   1e-3, 1e-6),
    (FEHLBERG_45,         1e-3, 1e-6),
    (BOGACKI_SHAMPINE_32, 1e-2, 1e-5),
  ])
  def test_roundtrip_circular_orbit_period(self, leo_initial_state, tableau, pos_tol, vel_tol):
    propagator = RungeKuttaAdaptive(leo_initial_state, tolerance=1e-9, tableau=tableau)
    period     = leo_initial_state.period()

    state = propagator.propagate(Epoch(period))

    assert state.allclose(leo_initial_state, pos_tol=pos_tol, vel_tol=vel_tol, epoch_tol=None)

  def test_known_solution_j2_matches_dop853(self, eccentric_initial_state, j2_force_model):
    propagator = DormandPrince54Propagator(eccentric_initial_state, force_model=j2_force_model)
    duration   = eccentric_initial_state.period()

    def state_time_derivative(time, posvel):
      return j2_force_model.derivative(State.from_posvel(Epoch(time), posvel))

    solution = solve_ivp(
      state_time_derivative,
      (0.0, duration),
      eccentric_initial_state.posvel,
      method = 'DOP853',
      rtol   = 1e-12,
      atol   = 1e-12,
    )
    reference = solution.y[:, -1]

    state = propagator.propagate(Epoch(duration))

    assert solution.success
    assert np.allclose(state.position, reference[0:3], rtol=0.0, atol=1e-3)
    assert np.allclose(state.velocity, reference[3:6], rtol=0.0, atol=1e-6)

  def test_sanity_check_set_force_model(self, leo_initial_state):
    propagator = DormandPrince54Propagator(leo_initial_state)
    assert propagator.gp == SOLARSYSTEMCONSTANTS.EARTH.GP

    propagator.set_force_model(ForceModel().set_gravity(1000.0))

    assert propagator.gp == 1000.0


class TestRungeKutta4:
  """
  Tests for the fixed-step RK4 propagator.
  """

  def test_roundtrip_circular_orbit_period(self, leo_initial_state):
    propagator = RungeKutta4Propagator(leo_initial_state, step_size=15.0)
    period     = leo_initial_state.period()

    state = propagator.propagate(Epoch(period))

    assert state.allclose(leo_initial_state, pos_tol=1e-3, vel_tol=1e-6, epoch_tol=None)

  def test_sanity_check_step_size(self, leo_initial_state):
    propagator = RungeKutta4Propagator(leo_initial_state, step_size=-20.0)
    assert propagator.step_size == 20.0

    propagator.set_step_size(-5.0)
    assert propagator.step_size == 5.0

    with pytest.raises(ValueError):
      propagator.set_step_size(0.0)
    with pytest.raises(ValueError):
      RungeKutta4Propagator(leo_initial_state, step_size=0.0)

  def test_sanity_check_exact_landing(self, leo_initial_state):
    propagator = RungeKutta4Propagator(leo_initial_state, step_size=15.0)

    state = propagator.propagate(Epoch(100.0))

    assert state.epoch == Epoch(100.0)


class TestManeuver:
  """
  Tests for impulsive and finite maneuvers.
  """

  def test_roundtrip_impulse_and_inverse(self, leo_initial_state):
    propagator = DormandPrince54Propagator(leo_initial_state)
    state_pre  = propagator.propagate(Epoch(1000.0))

    burn    = propagator.maneuver(Thrust(Epoch(1000.0),  2.0,  10.0, 0.0))
    inverse = propagator.maneuver(Thrust(Epoch(1000.0), -2.0, -10.0, 0.0))

    assert len(burn) == 1
    assert not burn[0].allclose(state_pre)
    assert inverse[0].allclose(state_pre, pos_tol=0.0, vel_tol=1e-14)
    assert propagator.state is inverse[0]

  def test_sanity_check_finite_burn_samples(self, leo_initial_state):
    force_model = ForceModel().set_gravity()
    propagator  = DormandPrince54Propagator(leo_initial_state, force_model=force_model)
    thrust      = Thrust(Epoch(1000.0), 0.0, 1.0, 0.0, duration_rate=100.0)

    states = propagator.maneuver(thrust, interval=30.0)

    epochs = [state.epoch.seconds for state in states]
    assert np.allclose(epochs, [950.0, 980.0, 1010.0, 1040.0, 1050.0])
    assert states[0].epoch  == thrust.start
    assert states[-1].epoch == thrust.stop
    assert force_model.maneuver_thrust is None

  def test_known_solution_finite_matches_impulse(self, leo_initial_state):
    gp     = SOLARSYSTEMCONSTANTS.EARTH.GP
    finite = DormandPrince54Propagator(leo_initial_state)
    impuls = DormandPrince54Propagator(leo_initial_state)

    finite_states = finite.maneuver(Thrust(Epoch(1000.0), 0.0, 1.0, 0.0, duration_rate=20.0))
    impuls_states = impuls.maneuver(Thrust(Epoch(1000.0), 0.0, 1.0, 0.0))

    energy_o      = leo_initial_state.specific_energy(gp)
    finite_change = finite_states[-1].specific_energy(gp) - energy_o
    impuls_change = impuls_states[-1].specific_energy(gp) - energy_o

    assert impuls_change > 0.0
    assert np.isclose(finite_change, impuls_change, rtol=1e-3)

  def test_sanity_check_maneuver_cleared_on_error(self, leo_initial_state):
    force_model = FailingForceModel().set_gravity()
    propagator  = DormandPrince54Propagator(leo_initial_state, force_model=force_model)

    with pytest.raises(RuntimeError):
      propagator.maneuver(Thrust(Epoch(500.0), 0.0, 1.0, 0.0, duration_rate=60.0))

    assert force_model.maneuver_thrust is None

  def test_sanity_check_invalid_interval(self, leo_initial_state):
    propagator = DormandPrince54Propagator(leo_initial_state)

    with pytest.raises(ValueError):
      propagator.maneuver(Thrust(Epoch(500.0), 0.0, 1.0, 0.0, duration_rate=60.0), interval=0.0)


if __name__ == "__main__":
  pytest.main([__file__, "-v"])
