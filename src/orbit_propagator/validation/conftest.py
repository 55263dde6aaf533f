"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for all validation tests.
"""
import pytest
import numpy as np

from pathlib import Path

from orbit_propagator.model.constants       import CONVERTER, SOLARSYSTEMCONSTANTS
from orbit_propagator.model.dynamics        import ForceModel
from orbit_propagator.model.orbit_converter import OrbitConverter
from orbit_propagator.model.state           import State
from orbit_propagator.model.time_converter  import Epoch


@pytest.fixture(scope="session")
def project_root():
  """Return the project root directory."""
  return Path(__file__).parent.parent.parent.parent


@pytest.fixture(scope="session")
def configs_path():
  """Return path to the shipped scenario files."""
  return Path(__file__).parent.parent / "data" / "configs"


@pytest.fixture(scope="session")
def spice_kernels_path(project_root):
  """Return path to SPICE kernels, skipping the test when they are absent."""
  kernels_path = project_root / "data" / "spice_kernels"
  if not (kernels_path.exists() and any(kernels_path.glob('de*.bsp')) and any(kernels_path.glob('naif*.tls'))):
    pytest.skip(f"SPICE kernels not available in {kernels_path}")
  return kernels_path


@pytest.fixture
def leo_initial_state():
  """Circular equatorial LEO state (7000 km) at J2000."""
  gp      = SOLARSYSTEMCONSTANTS.EARTH.GP
  sma     = 7000.0
  vel_mag = np.sqrt(gp / sma)
  return State(
    Epoch(0.0),
    [sma,     0.0, 0.0],  # [km]
    [0.0, vel_mag, 0.0],  # [km/s]
  )


@pytest.fixture
def eccentric_coe():
  """Inclined eccentric orbit elements."""
  return {
    'sma'  : 8000.0,                          # [km]
    'ecc'  : 0.1,
    'inc'  : 45.0 * CONVERTER.RAD_PER_DEG,
    'raan' : 30.0 * CONVERTER.RAD_PER_DEG,
    'aop'  : 60.0 * CONVERTER.RAD_PER_DEG,
    'ta'   : 10.0 * CONVERTER.RAD_PER_DEG,
  }


@pytest.fixture
def eccentric_initial_state(eccentric_coe):
  """Inclined eccentric state at J2000 built from eccentric_coe."""
  pos_vec, vel_vec = OrbitConverter.coe_to_pv(eccentric_coe)
  return State(Epoch(0.0), pos_vec, vel_vec)


@pytest.fixture
def geo_initial_state():
  """Geostationary state at J2000."""
  gp      = SOLARSYSTEMCONSTANTS.EARTH.GP
  sma     = 42164.0
  vel_mag = np.sqrt(gp / sma)
  return State(
    Epoch(0.0),
    [sma,     0.0, 0.0],  # [km]
    [0.0, vel_mag, 0.0],  # [km/s]
  )


@pytest.fixture
def point_mass_force_model():
  """Earth point-mass gravity only."""
  return ForceModel().set_gravity()


@pytest.fixture
def j2_force_model():
  """Earth gravity truncated to degree 2, order 0."""
  return ForceModel().set_earth_gravity(2, 0)
