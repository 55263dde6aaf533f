"""
State Module
============

Immutable Cartesian state in the J2000 inertial frame.

Summary:
--------
A State bundles an Epoch with a position and a velocity vector. The arrays
are copied on construction and marked read-only, so a State can be shared
freely between propagators; every operation returns a new State.

Units:
------
- Position : kilometers [km]
- Velocity : kilometers per second [km/s]
"""
import numpy as np

from typing import Optional

from orbit_propagator.model.constants      import SOLARSYSTEMCONSTANTS
from orbit_propagator.model.time_converter import Epoch


def _frozen_vector(
  values : np.ndarray,
  name   : str,
) -> np.ndarray:
  vec = np.array(values, dtype=float).flatten()
  if vec.shape != (3,):
    raise ValueError(f"{name} must have exactly 3 components, received shape {np.shape(values)}")
  vec.setflags(write=False)
  return vec


class State:
  """
  Position, velocity, and epoch in the J2000 inertial frame.
  """

  __slots__ = ('epoch', 'position', 'velocity')

  def __init__(
    self,
    epoch    : Epoch,
    position : np.ndarray,
    velocity : np.ndarray,
  ):
    """
    Input:
    ------
      epoch : Epoch
        State epoch.
      position : np.ndarray
        Position vector [km].
      velocity : np.ndarray
        Velocity vector [km/s].
    """
    object.__setattr__(self, 'epoch',    epoch)
    object.__setattr__(self, 'position', _frozen_vector(position, 'position'))
    object.__setattr__(self, 'velocity', _frozen_vector(velocity, 'velocity'))

  def __setattr__(self, name, value):
    raise AttributeError("State is immutable")

  @classmethod
  def from_posvel(
    cls,
    epoch  : Epoch,
    posvel : np.ndarray,
  ) -> 'State':
    """
    Build a state from a combined 6-vector [position, velocity].
    """
    posvel = np.asarray(posvel, dtype=float)
    return cls(epoch, posvel[0:3], posvel[3:6])

  @property
  def posvel(self) -> np.ndarray:
    """Combined 6-vector [position, velocity] (a fresh, writable array)."""
    return np.concatenate((self.position, self.velocity))

  @property
  def radius(self) -> float:
    return float(np.linalg.norm(self.position))

  def with_velocity(
    self,
    velocity : np.ndarray,
  ) -> 'State':
    return State(self.epoch, self.position, velocity)

  def specific_energy(
    self,
    gp : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
  ) -> float:
    """
    Specific mechanical energy [km²/s²].
    """
    vel_mag = np.linalg.norm(self.velocity)
    return float(0.5 * vel_mag**2 - gp / self.radius)

  def period(
    self,
    gp : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
  ) -> float:
    """
    Two-body orbital period [s]. Returns np.inf for unbound states.
    """
    specific_energy = self.specific_energy(gp)
    if specific_energy >= 0.0:
      return np.inf
    sma = -gp / (2.0 * specific_energy)
    return float(2.0 * np.pi * np.sqrt(sma**3 / gp))

  def allclose(
    self,
    other     : 'State',
    pos_tol   : float           = 1e-9,
    vel_tol   : float           = 1e-12,
    epoch_tol : Optional[float] = 0.0,
  ) -> bool:
    """
    Compare two states component-wise with absolute tolerances.

    Input:
    ------
      other : State
        State to compare against.
      pos_tol : float
        Position tolerance [km].
      vel_tol : float
        Velocity tolerance [km/s].
      epoch_tol : float | None
        Epoch tolerance [s]. None skips the epoch comparison.

    Output:
    -------
      is_close : bool
    """
    if epoch_tol is not None and abs(self.epoch.difference(other.epoch)) > epoch_tol:
      return False
    return bool(
      np.allclose(self.position, other.position, rtol=0.0, atol=pos_tol)
      and np.allclose(self.velocity, other.velocity, rtol=0.0, atol=vel_tol)
    )

  def __eq__(self, other) -> bool:
    if not isinstance(other, State):
      return NotImplemented
    return (
      self.epoch == other.epoch
      and np.array_equal(self.position, other.position)
      and np.array_equal(self.velocity, other.velocity)
    )

  def __hash__(self) -> int:
    return hash((self.epoch, self.position.tobytes(), self.velocity.tobytes()))

  def __repr__(self) -> str:
    return (
      f"State(epoch={self.epoch.seconds:.6f}, "
      f"position=[{self.position[0]:.6f}, {self.position[1]:.6f}, {self.position[2]:.6f}], "
      f"velocity=[{self.velocity[0]:.9f}, {self.velocity[1]:.9f}, {self.velocity[2]:.9f}])"
    )
