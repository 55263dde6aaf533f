"""
Orbit Propagation Package
=========================

Propagator contract, Runge-Kutta and Kepler propagators, and the ephemeris
container they produce.
"""

from .propagator        import Propagator
from .trajectory        import Ephemeris
from .runge_kutta       import (
  ButcherTableau,
  RkCheckpoint,
  RkResult,
  RungeKuttaAdaptive,
  DormandPrince54Propagator,
  RungeKutta4Propagator,
  get_tableau,
)
from .kepler_propagator import KeplerPropagator

__all__ = [
  'Propagator',
  'Ephemeris',
  'ButcherTableau',
  'RkCheckpoint',
  'RkResult',
  'RungeKuttaAdaptive',
  'DormandPrince54Propagator',
  'RungeKutta4Propagator',
  'get_tableau',
  'KeplerPropagator',
]
