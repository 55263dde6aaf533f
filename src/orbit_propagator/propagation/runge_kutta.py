"""
Runge-Kutta Propagation Module
==============================

Explicit Runge-Kutta propagators driven by Butcher tableaux.

Summary:
--------
A single stage engine integrates the ForceModel state derivative for any
explicit tableau. RungeKuttaAdaptive pairs it with embedded error
control; RungeKutta4Propagator takes fixed steps.

Stage evaluation for a step h from (t, y):
  k_i = h f(t + node_i h, y + sum_{j<i} coupling_ij k_j)
  y_high = y + sum_i weight_high_i k_i
  y_low  = y + sum_i weight_low_i  k_i
  error  = ||y_high - y_low||

Step-size control (magnitudes, direction is applied separately):
  h_new = 0.9 |h| (tol / error)^(1/order)
  h_new = clip(h_new, 0.2 |h|, 5 |h|)
  h_new = clip(h_new, 1e-5, 1000)

Tableaux:
---------
  dormand_prince_54   : Dormand-Prince 5(4), propagates the 5th-order solution
  fehlberg_45         : Runge-Kutta-Fehlberg 4(5), propagates the 5th-order solution
  bogacki_shampine_32 : Bogacki-Shampine 3(2)
  rk4                 : classical fourth order, no embedded estimate

Sources:
--------
- Dormand, J. R., & Prince, P. J. (1980). A family of embedded Runge-Kutta formulae.
  Journal of Computational and Applied Mathematics, 6(1), 19-26.
- Fehlberg, E. (1969). Low-order classical Runge-Kutta formulas with stepsize control. NASA TR R-315.
- Bogacki, P., & Shampine, L. F. (1989). A 3(2) pair of Runge-Kutta formulas.
  Applied Mathematics Letters, 2(4), 321-325.
"""
import math
import numpy as np

from dataclasses import dataclass
from typing      import Optional

from orbit_propagator.model.constants        import SOLARSYSTEMCONSTANTS
from orbit_propagator.model.dynamics         import ForceModel, Thrust
from orbit_propagator.model.state            import State
from orbit_propagator.model.time_converter   import Epoch
from orbit_propagator.propagation.propagator import Propagator


MIN_TOLERANCE     = 1e-15
DEFAULT_TOLERANCE = 1e-9
DEFAULT_STEP_SIZE = 60.0  # [s] adaptive initial step
RK4_STEP_SIZE     = 15.0  # [s]
MIN_STEP_SIZE     = 1e-5  # [s]
MAX_STEP_SIZE     = 1000.0  # [s]
SAFETY_FACTOR     = 0.9
MIN_SCALE_FACTOR  = 0.2
MAX_SCALE_FACTOR  = 5.0


@dataclass(frozen=True)
class ButcherTableau:
  """
  Explicit Runge-Kutta coefficients.

  Attributes:
  -----------
    name : str
      Lookup name.
    node : tuple
      Stage time fractions.
    coupling : tuple of tuples
      Row i holds the i coefficients applied to the previous stages.
    weight_high : tuple
      Weights of the propagated solution.
    weight_low : tuple | None
      Weights of the embedded solution; None for fixed-step tableaux.
    order : int
      Exponent denominator of the step-size proposal.
  """
  name        : str
  node        : tuple
  coupling    : tuple
  weight_high : tuple
  weight_low  : Optional[tuple]
  order       : int

  @property
  def num_stages(self) -> int:
    return len(self.node)

  @property
  def is_embedded(self) -> bool:
    return self.weight_low is not None

  def coupling_matrix(self) -> np.ndarray:
    """
    Strictly lower-triangular stage coupling matrix.
    """
    matrix = np.zeros((self.num_stages, self.num_stages))
    for i_stage, row in enumerate(self.coupling):
      matrix[i_stage, :len(row)] = row
    return matrix


DORMAND_PRINCE_54 = ButcherTableau(
  name     = 'dormand_prince_54',
  node     = (0.0, 1.0/5.0, 3.0/10.0, 4.0/5.0, 8.0/9.0, 1.0, 1.0),
  coupling = (
    (),
    (1.0/5.0,),
    (3.0/40.0, 9.0/40.0),
    (44.0/45.0, -56.0/15.0, 32.0/9.0),
    (19372.0/6561.0, -25360.0/2187.0, 64448.0/6561.0, -212.0/729.0),
    (9017.0/3168.0, -355.0/33.0, 46732.0/5247.0, 49.0/176.0, -5103.0/18656.0),
    (35.0/384.0, 0.0, 500.0/1113.0, 125.0/192.0, -2187.0/6784.0, 11.0/84.0),
  ),
  weight_high = (35.0/384.0, 0.0, 500.0/1113.0, 125.0/192.0, -2187.0/6784.0, 11.0/84.0, 0.0),
  weight_low  = (5179.0/57600.0, 0.0, 7571.0/16695.0, 393.0/640.0, -92097.0/339200.0, 187.0/2100.0, 1.0/40.0),
  order       = 5,
)

FEHLBERG_45 = ButcherTableau(
  name     = 'fehlberg_45',
  node     = (0.0, 1.0/4.0, 3.0/8.0, 12.0/13.0, 1.0, 1.0/2.0),
  coupling = (
    (),
    (1.0/4.0,),
    (3.0/32.0, 9.0/32.0),
    (1932.0/2197.0, -7200.0/2197.0, 7296.0/2197.0),
    (439.0/216.0, -8.0, 3680.0/513.0, -845.0/4104.0),
    (-8.0/27.0, 2.0, -3544.0/2565.0, 1859.0/4104.0, -11.0/40.0),
  ),
  weight_high = (16.0/135.0, 0.0, 6656.0/12825.0, 28561.0/56430.0, -9.0/50.0, 2.0/55.0),
  weight_low  = (25.0/216.0, 0.0, 1408.0/2565.0, 2197.0/4104.0, -1.0/5.0, 0.0),
  order       = 5,
)

BOGACKI_SHAMPINE_32 = ButcherTableau(
  name     = 'bogacki_shampine_32',
  node     = (0.0, 1.0/2.0, 3.0/4.0, 1.0),
  coupling = (
    (),
    (1.0/2.0,),
    (0.0, 3.0/4.0),
    (2.0/9.0, 1.0/3.0, 4.0/9.0),
  ),
  weight_high = (2.0/9.0, 1.0/3.0, 4.0/9.0, 0.0),
  weight_low  = (7.0/24.0, 1.0/4.0, 1.0/3.0, 1.0/8.0),
  order       = 3,
)

RUNGE_KUTTA_4 = ButcherTableau(
  name     = 'rk4',
  node     = (0.0, 1.0/2.0, 1.0/2.0, 1.0),
  coupling = (
    (),
    (1.0/2.0,),
    (0.0, 1.0/2.0),
    (0.0, 0.0, 1.0),
  ),
  weight_high = (1.0/6.0, 1.0/3.0, 1.0/3.0, 1.0/6.0),
  weight_low  = None,
  order       = 4,
)

TABLEAUX = {
  tableau.name : tableau
  for tableau in (DORMAND_PRINCE_54, FEHLBERG_45, BOGACKI_SHAMPINE_32, RUNGE_KUTTA_4)
}


def get_tableau(
  name : str,
) -> ButcherTableau:
  """
  Look up a shipped tableau by name (case-insensitive, '-' and '_' equivalent).
  """
  key = name.strip().lower().replace('-', '_')
  if key not in TABLEAUX:
    raise ValueError(f"Unknown Runge-Kutta tableau '{name}'. Available: {', '.join(sorted(TABLEAUX))}")
  return TABLEAUX[key]


@dataclass(frozen=True)
class RkResult:
  """
  Outcome of a single trial step.
  """
  state    : State
  error    : float
  new_step : float


@dataclass(frozen=True)
class RkCheckpoint:
  state     : State
  step_size : float


class RungeKuttaPropagator(Propagator):
  """
  Shared machinery of the Runge-Kutta propagators: stage evaluation, force
  model handling, finite and impulsive maneuvers, and {state, step size}
  checkpoints.
  """

  def __init__(
    self,
    initial_state       : State,
    force_model         : Optional[ForceModel],
    tableau             : ButcherTableau,
    step_size           : float,
    checkpoint_capacity : Optional[int] = None,
  ):
    self.force_model       = force_model if force_model is not None else ForceModel().set_gravity()
    self.tableau           = tableau
    self.initial_step_size = abs(step_size)
    self._step_size        = abs(step_size)

    self._node        = np.array(tableau.node)
    self._coupling    = tableau.coupling_matrix()
    self._weight_high = np.array(tableau.weight_high)
    self._weight_low  = np.array(tableau.weight_low) if tableau.is_embedded else None

    super().__init__(initial_state, gp=self._central_gp(), checkpoint_capacity=checkpoint_capacity)

  def _central_gp(self) -> float:
    central = self.force_model.central_gravity
    return central.gp if central is not None else SOLARSYSTEMCONSTANTS.EARTH.GP

  @property
  def step_size(self) -> float:
    """Current integrator step size [s]."""
    return self._step_size

  def set_force_model(
    self,
    force_model : ForceModel,
  ) -> None:
    self.force_model = force_model
    self.gp          = self._central_gp()

  def _stages(
    self,
    state : State,
    step  : float,
  ) -> np.ndarray:
    """
    Stage increments k (num_stages x 6) for a signed step.
    """
    posvel = state.posvel
    k      = np.zeros((self.tableau.num_stages, 6))
    for i_stage in range(self.tableau.num_stages):
      stage_state = State.from_posvel(
        state.epoch.roll(self._node[i_stage] * step),
        posvel + self._coupling[i_stage, :i_stage] @ k[:i_stage],
      )
      k[i_stage] = step * self.force_model.derivative(stage_state)
    return k

  def reset(self) -> None:
    """
    Return to the construction-time state and step size. Checkpoints are kept.
    """
    super().reset()
    self._step_size = self.initial_step_size

  def _snapshot(self) -> RkCheckpoint:
    return RkCheckpoint(self._cache_state, self._step_size)

  def _resume(
    self,
    snapshot : RkCheckpoint,
  ) -> None:
    self._cache_state = snapshot.state
    self._step_size   = snapshot.step_size

  def maneuver(
    self,
    thrust   : Thrust,
    interval : float = 60.0,
  ) -> list[State]:
    """
    Fly a maneuver.

    Input:
    ------
      thrust : Thrust
        Maneuver to fly.
      interval : float
        Sample spacing inside a finite burn [s].

    Output:
    -------
      states : list of State
        The post-burn state for an impulse; otherwise the samples from the
        burn start to the burn stop, both included.

    Notes:
    ------
      The thrust occupies the force model's maneuver slot only while the
      burn is integrated and is removed even when integration fails.
    """
    if thrust.is_impulsive:
      self._cache_state = thrust.apply(self.propagate(thrust.center))
      return [self._cache_state]

    if interval <= 0.0:
      raise ValueError(f"Maneuver interval must be positive, received {interval}")

    states = [self.propagate(thrust.start)]
    self.force_model.load_maneuver(thrust)
    try:
      states.extend(self._coast(thrust.stop, interval))
    finally:
      self.force_model.clear_maneuver()
    return states


class RungeKuttaAdaptive(RungeKuttaPropagator):
  """
  Adaptive step Runge-Kutta propagator with embedded error control.
  """

  def __init__(
    self,
    initial_state       : State,
    force_model         : Optional[ForceModel] = None,
    tolerance           : float                = DEFAULT_TOLERANCE,
    tableau             : ButcherTableau       = DORMAND_PRINCE_54,
    checkpoint_capacity : Optional[int]        = None,
  ):
    """
    Input:
    ------
      initial_state : State
        Construction-time state.
      force_model : ForceModel | None
        Dynamics. Defaults to Earth point-mass gravity.
      tolerance : float
        Maximum accepted local error (6-space Euclidean norm), floored at 1e-15.
      tableau : ButcherTableau
        Embedded tableau.
      checkpoint_capacity : int | None
        Maximum number of stored checkpoints.
    """
    if not tableau.is_embedded:
      raise ValueError(f"Adaptive propagation requires an embedded tableau, '{tableau.name}' has none")

    super().__init__(initial_state, force_model, tableau, DEFAULT_STEP_SIZE, checkpoint_capacity)
    self.tolerance = max(MIN_TOLERANCE, abs(tolerance))

  def propose_step(
    self,
    step  : float,
    error : float,
  ) -> float:
    """
    Next step size magnitude [s] from the current step and its error.
    """
    step_old = abs(step)
    if error == 0.0:
      step_new = MAX_SCALE_FACTOR * step_old
    else:
      step_new = SAFETY_FACTOR * step_old * (self.tolerance / error)**(1.0 / self.tableau.order)
    step_new = max(MIN_SCALE_FACTOR * step_old, min(MAX_SCALE_FACTOR * step_old, step_new))
    return max(MIN_STEP_SIZE, min(MAX_STEP_SIZE, step_new))

  def integrate(
    self,
    state        : State,
    step         : float,
    target_epoch : Optional[Epoch] = None,
  ) -> RkResult:
    """
    Take one trial step without touching the cached state.

    Input:
    ------
      state : State
        Start of the step.
      step : float
        Signed step [s].
      target_epoch : Epoch | None
        Epoch stamped on the result; defaults to state.epoch + step.

    Output:
    -------
      result : RkResult
        Propagated (higher order) state, local error, proposed step size.
    """
    k      = self._stages(state, step)
    posvel = state.posvel
    y_high = posvel + self._weight_high @ k
    y_low  = posvel + self._weight_low  @ k
    error  = float(np.linalg.norm(y_high - y_low))
    epoch  = target_epoch if target_epoch is not None else state.epoch.roll(step)
    return RkResult(State.from_posvel(epoch, y_high), error, self.propose_step(step, error))

  def propagate(
    self,
    epoch : Epoch,
  ) -> State:
    delta = epoch.difference(self._cache_state.epoch)
    while delta != 0.0:
      landing = abs(delta) <= self._step_size
      step    = delta if landing else math.copysign(self._step_size, delta)
      result  = self.integrate(self._cache_state, step, epoch if landing else None)

      self._step_size = result.new_step
      if result.error > self.tolerance:
        continue

      self._cache_state = result.state
      delta             = epoch.difference(self._cache_state.epoch)
    return self._cache_state


class DormandPrince54Propagator(RungeKuttaAdaptive):
  """
  Dormand-Prince 5(4) adaptive propagator.
  """

  def __init__(
    self,
    initial_state       : State,
    force_model         : Optional[ForceModel] = None,
    tolerance           : float                = DEFAULT_TOLERANCE,
    checkpoint_capacity : Optional[int]        = None,
  ):
    super().__init__(initial_state, force_model, tolerance, DORMAND_PRINCE_54, checkpoint_capacity)


class RungeKutta4Propagator(RungeKuttaPropagator):
  """
  Classical fourth-order Runge-Kutta propagator with a fixed step.
  """

  def __init__(
    self,
    initial_state       : State,
    force_model         : Optional[ForceModel] = None,
    step_size           : float                = RK4_STEP_SIZE,
    checkpoint_capacity : Optional[int]        = None,
  ):
    """
    Input:
    ------
      initial_state : State
        Construction-time state.
      force_model : ForceModel | None
        Dynamics. Defaults to Earth point-mass gravity.
      step_size : float
        Fixed step magnitude [s]; the sign is ignored.
      checkpoint_capacity : int | None
        Maximum number of stored checkpoints.
    """
    if step_size == 0.0:
      raise ValueError("RK4 step size must be non-zero")
    super().__init__(initial_state, force_model, RUNGE_KUTTA_4, step_size, checkpoint_capacity)

  def set_step_size(
    self,
    seconds : float,
  ) -> None:
    if seconds == 0.0:
      raise ValueError("RK4 step size must be non-zero")
    self._step_size = abs(seconds)

  def integrate(
    self,
    state        : State,
    step         : float,
    target_epoch : Optional[Epoch] = None,
  ) -> State:
    """
    One fixed step from a state.
    """
    k     = self._stages(state, step)
    epoch = target_epoch if target_epoch is not None else state.epoch.roll(step)
    return State.from_posvel(epoch, state.posvel + self._weight_high @ k)

  def propagate(
    self,
    epoch : Epoch,
  ) -> State:
    delta = epoch.difference(self._cache_state.epoch)
    while delta != 0.0:
      landing           = abs(delta) <= self._step_size
      step              = delta if landing else math.copysign(self._step_size, delta)
      self._cache_state = self.integrate(self._cache_state, step, epoch if landing else None)
      delta             = epoch.difference(self._cache_state.epoch)
    return self._cache_state
