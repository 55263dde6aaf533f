"""
Kepler Propagator Module
========================

Closed-form two-body propagation of elliptic orbits.

Summary:
--------
The classical elements are fixed at a reference epoch; propagation
advances the mean anomaly by n*dt, solves Kepler's equation, and converts
back to Cartesian. Every maneuver is applied as an impulse at the maneuver
center, after which the elements are re-derived from the post-burn state.
"""
import numpy as np

from dataclasses import dataclass
from typing      import Optional

from orbit_propagator.model.constants        import SOLARSYSTEMCONSTANTS
from orbit_propagator.model.dynamics         import Thrust
from orbit_propagator.model.orbit_converter  import OrbitConverter
from orbit_propagator.model.state            import State
from orbit_propagator.model.time_converter   import Epoch
from orbit_propagator.propagation.propagator import Propagator


@dataclass(frozen=True)
class KeplerCheckpoint:
  state          : State
  elements       : dict
  elements_epoch : Epoch


class KeplerPropagator(Propagator):
  """
  Analytical two-body propagator.
  """

  def __init__(
    self,
    initial_state       : State,
    gp                  : float         = SOLARSYSTEMCONSTANTS.EARTH.GP,
    checkpoint_capacity : Optional[int] = None,
  ):
    """
    Input:
    ------
      initial_state : State
        Construction-time state; must describe an elliptic orbit.
      gp : float
        Gravitational parameter [km³/s²].
      checkpoint_capacity : int | None
        Maximum number of stored checkpoints.
    """
    super().__init__(initial_state, gp=gp, checkpoint_capacity=checkpoint_capacity)
    self._elements        = self._elliptic_elements(initial_state)
    self._elements_epoch  = initial_state.epoch
    self.initial_elements = dict(self._elements)

  @classmethod
  def from_elements(
    cls,
    epoch : Epoch,
    coe   : dict,
    gp    : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
    **kwargs,
  ) -> 'KeplerPropagator':
    """
    Build the propagator from classical orbital elements.

    Input:
    ------
      epoch : Epoch
        Element epoch.
      coe : dict
        sma, ecc, inc, raan, aop and ta or ma (radians, km).
      gp : float
        Gravitational parameter [km³/s²].

    Output:
    -------
      propagator : KeplerPropagator
    """
    pos_vec, vel_vec = OrbitConverter.coe_to_pv(coe, gp)
    return cls(State(epoch, pos_vec, vel_vec), gp=gp, **kwargs)

  def _elliptic_elements(
    self,
    state : State,
  ) -> dict:
    coe = OrbitConverter.pv_to_coe(state.position, state.velocity, self.gp)
    if not 0.0 <= coe['ecc'] < 1.0 or coe['sma'] <= 0.0:
      raise ValueError(f"Kepler propagation requires an elliptic orbit, received ecc = {coe['ecc']:.6f}")
    return coe

  @property
  def elements(self) -> dict:
    """Classical elements at the element epoch."""
    return dict(self._elements)

  @property
  def mean_motion(self) -> float:
    """Mean motion [rad/s]."""
    return float(np.sqrt(self.gp / self._elements['sma']**3))

  def propagate(
    self,
    epoch : Epoch,
  ) -> State:
    delta_time = epoch.difference(self._elements_epoch)
    ma         = (self._elements['ma'] + self.mean_motion * delta_time) % (2.0 * np.pi)

    pos_vec, vel_vec = OrbitConverter.coe_to_pv(
      {
        'sma'  : self._elements['sma'],
        'ecc'  : self._elements['ecc'],
        'inc'  : self._elements['inc'],
        'raan' : self._elements['raan'],
        'aop'  : self._elements['aop'],
        'ma'   : ma,
      },
      self.gp,
    )
    self._cache_state = State(epoch, pos_vec, vel_vec)
    return self._cache_state

  def maneuver(
    self,
    thrust   : Thrust,
    interval : float = 60.0,
  ) -> list[State]:
    """
    Apply the full delta-v at the maneuver center and re-derive the elements.
    The interval is unused: every maneuver is impulsive here.
    """
    post_burn_state      = thrust.apply(self.propagate(thrust.center))
    self._elements       = self._elliptic_elements(post_burn_state)
    self._elements_epoch = post_burn_state.epoch
    self._cache_state    = post_burn_state
    return [post_burn_state]

  def _maneuver_epoch(
    self,
    maneuver : Thrust,
  ) -> Epoch:
    return maneuver.center

  def reset(self) -> None:
    super().reset()
    self._elements       = dict(self.initial_elements)
    self._elements_epoch = self.initial_state.epoch

  def _snapshot(self) -> KeplerCheckpoint:
    return KeplerCheckpoint(self._cache_state, dict(self._elements), self._elements_epoch)

  def _resume(
    self,
    snapshot : KeplerCheckpoint,
  ) -> None:
    self._cache_state    = snapshot.state
    self._elements       = dict(snapshot.elements)
    self._elements_epoch = snapshot.elements_epoch
