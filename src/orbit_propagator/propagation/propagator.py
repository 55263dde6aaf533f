"""
Propagator Module
=================

Abstract propagator contract shared by the numerical and closed-form
propagators.

Summary:
--------
A propagator owns one mutable cached state and a stack of checkpoints.
propagate(epoch) advances the cache to any epoch, forward or backward;
maneuver(thrust) flies a burn; checkpoint/restore branch from a saved
baseline; reset returns to the construction-time state. Ephemeris
generation and node/apsis search are built on top of propagate.

Node and apsis search:
----------------------
One orbital period from the start epoch is sampled in 8 slices. Nodes are
detected by a sign change of z with a z-velocity of the matching sign and
refined by minimizing |z| over the bracketing slice; apsides are refined
in every slice and the extreme radius is kept. Refinement uses a bounded
scalar minimizer with a 1e-3 s tolerance. The search runs on a snapshot,
so the cached state and step size are untouched afterwards.
"""
import numpy as np

from abc    import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from scipy.optimize import minimize_scalar

from orbit_propagator.model.constants        import SOLARSYSTEMCONSTANTS
from orbit_propagator.model.dynamics         import Thrust
from orbit_propagator.model.state            import State
from orbit_propagator.model.time_converter   import Epoch
from orbit_propagator.propagation.trajectory import Ephemeris


NUM_SEARCH_SLICES = 8
SEARCH_TOLERANCE  = 1e-3  # [s]


class Propagator(ABC):
  """
  Base class for all propagators.
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
        Construction-time state, restored by reset().
      gp : float
        Gravitational parameter used for the orbital period in the
        node/apsis search [km³/s²].
      checkpoint_capacity : int | None
        Maximum number of stored checkpoints. None leaves the stack unbounded.
    """
    if checkpoint_capacity is not None and checkpoint_capacity < 1:
      raise ValueError(f"Checkpoint capacity must be at least 1, received {checkpoint_capacity}")

    self.initial_state       = initial_state
    self.gp                  = gp
    self.checkpoint_capacity = checkpoint_capacity
    self._cache_state        = initial_state
    self._checkpoints        : list = []

  @property
  def state(self) -> State:
    """Last propagated state."""
    return self._cache_state

  @abstractmethod
  def propagate(
    self,
    epoch : Epoch,
  ) -> State:
    """
    Advance the cached state to an epoch and return it.
    """

  @abstractmethod
  def maneuver(
    self,
    thrust   : Thrust,
    interval : float = 60.0,
  ) -> list[State]:
    """
    Fly a maneuver and return the states sampled across it.
    """

  @abstractmethod
  def _snapshot(self) -> Any:
    """Capture everything restore() needs to return to the current state."""

  @abstractmethod
  def _resume(
    self,
    snapshot : Any,
  ) -> None:
    """Return to a captured snapshot."""

  def reset(self) -> None:
    """
    Return the cached state to the construction-time state. Checkpoints are kept.
    """
    self._cache_state = self.initial_state

  # -------------------------------------------------------------------------
  # Checkpoints
  # -------------------------------------------------------------------------

  def checkpoint(self) -> int:
    """
    Store the current state and return its checkpoint index.
    """
    if self.checkpoint_capacity is not None and len(self._checkpoints) >= self.checkpoint_capacity:
      raise OverflowError(f"Checkpoint capacity of {self.checkpoint_capacity} reached")
    self._checkpoints.append(self._snapshot())
    return len(self._checkpoints) - 1

  def restore(
    self,
    index : int,
  ) -> None:
    """
    Restore the state stored at a checkpoint index.
    """
    if not 0 <= index < len(self._checkpoints):
      raise IndexError(f"Checkpoint index {index} out of range for {len(self._checkpoints)} checkpoint(s)")
    self._resume(self._checkpoints[index])

  def clear_checkpoints(self) -> None:
    self._checkpoints.clear()

  @property
  def num_checkpoints(self) -> int:
    return len(self._checkpoints)

  # -------------------------------------------------------------------------
  # Ephemeris generation
  # -------------------------------------------------------------------------

  def _coast(
    self,
    stop     : Epoch,
    interval : float,
  ) -> list[State]:
    """
    Step the cache toward stop in interval increments, the last step landing
    exactly on stop. Returns the states after each step.
    """
    states = []
    while self._cache_state.epoch < stop:
      remaining = stop.difference(self._cache_state.epoch)
      target    = stop if remaining <= interval else self._cache_state.epoch.roll(interval)
      states.append(self.propagate(target))
    return states

  def ephemeris(
    self,
    start    : Epoch,
    stop     : Epoch,
    interval : float = 60.0,
  ) -> Ephemeris:
    """
    Sample the trajectory from start to stop.

    Input:
    ------
      start : Epoch
        First sample epoch.
      stop : Epoch
        Last sample epoch, start <= stop.
      interval : float
        Sample spacing [s].

    Output:
    -------
      ephemeris : Ephemeris
        Samples at start, start + k*interval, and exactly at stop.
    """
    if interval <= 0.0:
      raise ValueError(f"Ephemeris interval must be positive, received {interval}")
    if stop < start:
      raise ValueError("Ephemeris stop epoch precedes the start epoch")

    states = [self.propagate(start)]
    states.extend(self._coast(stop, interval))
    return Ephemeris(states)

  def _maneuver_epoch(
    self,
    maneuver : Thrust,
  ) -> Epoch:
    """Epoch at which a maneuver takes over from coasting."""
    return maneuver.start

  def ephemeris_maneuver(
    self,
    start     : Epoch,
    finish    : Epoch,
    maneuvers : Sequence[Thrust],
    interval  : float = 60.0,
  ) -> Ephemeris:
    """
    Sample the trajectory from start to finish, flying every maneuver that
    overlaps the window.

    Input:
    ------
      start : Epoch
        First sample epoch.
      finish : Epoch
        Last sample epoch.
      maneuvers : sequence of Thrust
        Candidate maneuvers; they must not overlap one another.
      interval : float
        Sample spacing [s], also used inside finite burns.

    Output:
    -------
      ephemeris : Ephemeris
        Coast samples and maneuver samples in time order.

    Notes:
    ------
      - The pre-burn state at a maneuver start is replaced by the maneuver's
        own first sample (the post-burn state for an impulse). The same
        applies when a maneuver starts exactly where the previous one stops.
      - A maneuver that begins before start extends the ephemeris back to
        the maneuver start.
    """
    if interval <= 0.0:
      raise ValueError(f"Ephemeris interval must be positive, received {interval}")

    selected = sorted(
      (maneuver for maneuver in maneuvers if maneuver.overlaps(start, finish)),
      key = self._maneuver_epoch,
    )
    if not selected:
      return self.ephemeris(start, finish, interval)

    states = []
    first_epoch = self._maneuver_epoch(selected[0])
    if first_epoch > start:
      states.append(self.propagate(start))
    else:
      self.propagate(first_epoch)

    for maneuver in selected:
      states.extend(self._coast(self._maneuver_epoch(maneuver), interval))
      maneuver_states = self.maneuver(maneuver, interval)
      # Drop a collected sample at the maneuver's first epoch
      if states and states[-1].epoch == maneuver_states[0].epoch:
        states.pop()
      states.extend(maneuver_states)

    states.extend(self._coast(finish, interval))
    return Ephemeris(states)

  # -------------------------------------------------------------------------
  # Node and apsis search
  # -------------------------------------------------------------------------

  def _search_period(
    self,
    start : Epoch,
  ) -> float:
    period = self.propagate(start).period(self.gp)
    if not np.isfinite(period):
      raise ValueError("Node and apsis search requires a bound orbit")
    return period

  def _refine(
    self,
    objective : Callable[[State], float],
    lower     : float,
    upper     : float,
  ) -> tuple[Epoch, State]:
    """
    Minimize an objective of the propagated state over [lower, upper] seconds.
    """
    result = minimize_scalar(
      lambda seconds: objective(self.propagate(Epoch(seconds))),
      bounds  = (lower, upper),
      method  = 'bounded',
      options = {'xatol': SEARCH_TOLERANCE},
    )
    epoch = Epoch(float(result.x))
    return epoch, self.propagate(epoch)

  def _node_epoch(
    self,
    start     : Epoch,
    ascending : bool,
  ) -> tuple[Epoch, State]:
    snapshot = self._snapshot()
    try:
      period  = self._search_period(start)
      step    = period / NUM_SEARCH_SLICES
      stop    = start.roll(period + step)
      current = start

      previous_z = self.propagate(current).position[2]
      while True:
        if current > stop:
          raise ValueError(f"No {'ascending' if ascending else 'descending'} node found within one orbital period")
        current = current.roll(step)
        state   = self.propagate(current)
        pos_z   = state.position[2]
        vel_z   = state.velocity[2]
        crossed = np.sign(pos_z) == np.sign(-previous_z)
        if crossed and ((vel_z > 0.0) if ascending else (vel_z < 0.0)):
          break
        previous_z = pos_z

      return self._refine(
        lambda state: abs(state.position[2]),
        current.seconds - step,
        current.seconds,
      )
    finally:
      self._resume(snapshot)

  def _apsis_epoch(
    self,
    start  : Epoch,
    apogee : bool,
  ) -> tuple[Epoch, State]:
    snapshot = self._snapshot()
    try:
      period = self._search_period(start)
      step   = period / NUM_SEARCH_SLICES
      sign   = -1.0 if apogee else 1.0

      best = None
      for i_slice in range(NUM_SEARCH_SLICES):
        lower     = start.seconds + i_slice * step
        candidate = self._refine(lambda state: sign * state.radius, lower, lower + step)
        if best is None or sign * candidate[1].radius < sign * best[1].radius:
          best = candidate
      return best
    finally:
      self._resume(snapshot)

  def ascending_node_epoch(
    self,
    start : Epoch,
  ) -> tuple[Epoch, State]:
    """
    First ascending node (z = 0, vz > 0) after start.

    Output:
    -------
      epoch : Epoch
        Node epoch, within 1e-3 s.
      state : State
        State at the node.
    """
    return self._node_epoch(start, ascending=True)

  def descending_node_epoch(
    self,
    start : Epoch,
  ) -> tuple[Epoch, State]:
    """First descending node (z = 0, vz < 0) after start."""
    return self._node_epoch(start, ascending=False)

  def apogee_epoch(
    self,
    start : Epoch,
  ) -> tuple[Epoch, State]:
    """Maximum radius over one orbital period from start."""
    return self._apsis_epoch(start, apogee=True)

  def perigee_epoch(
    self,
    start : Epoch,
  ) -> tuple[Epoch, State]:
    """Minimum radius over one orbital period from start."""
    return self._apsis_epoch(start, apogee=False)
