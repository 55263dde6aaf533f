"""
Trajectory Module
=================

Ordered ephemeris of states produced by the propagators.

Summary:
--------
An Ephemeris holds states with strictly increasing epochs and interpolates
between them with a cubic Hermite spline on position, using the stored
velocities as the spline derivatives.
"""
import numpy as np

from typing import Iterator, Optional, Sequence

from scipy.interpolate import CubicHermiteSpline

from orbit_propagator.model.state          import State
from orbit_propagator.model.time_converter import Epoch


class Ephemeris:
  """
  Time-ordered sequence of states with Hermite interpolation.
  """

  def __init__(
    self,
    states : Sequence[State],
  ):
    """
    Input:
    ------
      states : sequence of State
        Samples ordered by strictly increasing epoch.
    """
    if len(states) == 0:
      raise ValueError("Ephemeris requires at least one state")

    seconds = np.array([state.epoch.seconds for state in states])
    if np.any(np.diff(seconds) <= 0.0):
      raise ValueError("Ephemeris epochs must be strictly increasing")

    self.states   = list(states)
    self._seconds = seconds
    self._spline  : Optional[CubicHermiteSpline] = None

  @property
  def start(self) -> Epoch:
    return self.states[0].epoch

  @property
  def stop(self) -> Epoch:
    return self.states[-1].epoch

  def __len__(self) -> int:
    return len(self.states)

  def __iter__(self) -> Iterator[State]:
    return iter(self.states)

  def __getitem__(self, index):
    return self.states[index]

  def _build_spline(self) -> CubicHermiteSpline:
    time_rel = self._seconds - self._seconds[0]
    pos_arr  = np.array([state.position for state in self.states])
    vel_arr  = np.array([state.velocity for state in self.states])
    return CubicHermiteSpline(time_rel, pos_arr, vel_arr, axis=0)

  def interpolate(
    self,
    epoch : Epoch,
  ) -> State:
    """
    State at an epoch inside the ephemeris span.

    Input:
    ------
      epoch : Epoch
        Requested epoch, start <= epoch <= stop.

    Output:
    -------
      state : State
        Stored sample on an exact match, otherwise the interpolated state.
    """
    if epoch < self.start or epoch > self.stop:
      raise ValueError(f"Epoch {epoch.seconds:.3f} s is outside the ephemeris span [{self.start.seconds:.3f}, {self.stop.seconds:.3f}] s")

    index = int(np.searchsorted(self._seconds, epoch.seconds))
    if index < len(self.states) and self._seconds[index] == epoch.seconds:
      return self.states[index]

    if self._spline is None:
      self._spline = self._build_spline()

    time_rel = epoch.seconds - self._seconds[0]
    pos_vec  = self._spline(time_rel)
    vel_vec  = self._spline(time_rel, 1)
    return State(epoch, pos_vec, vel_vec)
