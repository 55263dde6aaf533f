"""
Tests for Epochs, Time Parsing, and States
==========================================

Tests:
------
TestEpoch
  - test_sanity_check_roll_and_difference      : verify roll and difference are inverse operations
  - test_sanity_check_ordering                 : verify epochs compare by seconds
  - test_known_solution_j2000_utc              : verify 2000-01-01 11:58:55.816 UTC is the J2000 origin
  - test_known_solution_leap_second            : verify a UTC leap second lengthens the TT interval
  - test_roundtrip_datetime                    : verify UTC datetime -> epoch -> UTC datetime

TestTimeHelper
  - test_sanity_check_parse_formats            : verify every accepted time format parses to the same datetime
  - test_sanity_check_parse_invalid            : verify an unparseable string raises ValueError
  - test_known_solution_format_time_offset     : verify signed offset formatting

TestState
  - test_sanity_check_immutable                : verify states reject attribute and array writes
  - test_sanity_check_vector_shape             : verify non 3-vectors are rejected
  - test_roundtrip_posvel                      : verify from_posvel and posvel agree
  - test_known_solution_circular_period        : verify the two-body period of a circular orbit
  - test_sanity_check_unbound_period           : verify an escape state has an infinite period

Usage:
------
  python -m pytest src/orbit_propagator/validation/test_time_and_state.py -v
"""
import pytest
import numpy as np

from datetime import datetime

from orbit_propagator.model.constants      import SOLARSYSTEMCONSTANTS
from orbit_propagator.model.state          import State
from orbit_propagator.model.time_converter import Epoch
from orbit_propagator.utility.time_helper  import format_time_offset, parse_time


class TestEpoch:
  """
  Tests for the Epoch class.
  """

  def test_sanity_check_roll_and_difference(self):
    epoch_o = Epoch(1234.5)
    epoch_f = epoch_o.roll(-600.25)

    assert np.isclose(epoch_f.seconds, 634.25)
    assert np.isclose(epoch_f.difference(epoch_o), -600.25)
    assert epoch_f.roll(epoch_o.difference(epoch_f)) == epoch_o

  def test_sanity_check_ordering(self):
    assert Epoch(-1.0) < Epoch(0.0) < Epoch(1.0)
    assert max(Epoch(5.0), Epoch(2.0)) == Epoch(5.0)

  def test_known_solution_j2000_utc(self):
    """
    J2000 is 2000-01-01 12:00:00 TT, i.e. 11:58:55.816 UTC (TT - UTC = 64.184 s).
    """
    epoch = Epoch.from_iso("2000-01-01T11:58:55.816Z")

    assert abs(epoch.seconds) < 1e-6
    assert np.isclose(epoch.julian_date, 2451545.0, rtol=0.0, atol=1e-9)

  def test_known_solution_leap_second(self):
    """
    A leap second was inserted at the end of 2016.
    """
    epoch_o = Epoch.from_iso("2016-12-31T23:59:59Z")
    epoch_f = Epoch.from_iso("2017-01-01T00:00:00Z")

    assert np.isclose(epoch_f.difference(epoch_o), 2.0, rtol=0.0, atol=1e-6)

  def test_roundtrip_datetime(self):
    utc_dt = datetime(2025, 10, 1, 6, 30, 15)
    epoch  = Epoch.from_datetime(utc_dt)

    assert abs((epoch.to_datetime() - utc_dt).total_seconds()) < 1e-3


class TestTimeHelper:
  """
  Tests for time parsing and formatting helpers.
  """

  def test_sanity_check_parse_formats(self):
    expected = datetime(2025, 10, 1, 0, 0, 0)
    for time_str in (
      "2025-10-01T00:00:00",
      "2025-10-01T00:00:00Z",
      "2025-10-01T02:00:00+02:00",
      "2025-10-01 00:00:00",
      "2025-274T00:00:00",
    ):
      assert parse_time(time_str) == expected, time_str

  def test_sanity_check_parse_invalid(self):
    with pytest.raises(ValueError):
      parse_time("first of october")

  def test_known_solution_format_time_offset(self):
    assert format_time_offset(5828.452) == "+0d 01h 37m 08.452s"
    assert format_time_offset(-90061.5) == "-1d 01h 01m 01.500s"


class TestState:
  """
  Tests for the State class.
  """

  def test_sanity_check_immutable(self, leo_initial_state):
    with pytest.raises(AttributeError):
      leo_initial_state.epoch = Epoch(10.0)
    with pytest.raises(ValueError):
      leo_initial_state.position[0] = 0.0

  def test_sanity_check_vector_shape(self):
    with pytest.raises(ValueError):
      State(Epoch(0.0), [7000.0, 0.0], [0.0, 7.5, 0.0])

  def test_roundtrip_posvel(self, eccentric_initial_state):
    state = State.from_posvel(eccentric_initial_state.epoch, eccentric_initial_state.posvel)

    assert state == eccentric_initial_state
    assert state.allclose(eccentric_initial_state, pos_tol=0.0, vel_tol=0.0)

  def test_known_solution_circular_period(self, leo_initial_state):
    gp = SOLARSYSTEMCONSTANTS.EARTH.GP

    assert np.isclose(leo_initial_state.period(gp), 2.0 * np.pi * np.sqrt(7000.0**3 / gp), rtol=1e-12)
    assert np.isclose(leo_initial_state.specific_energy(gp), -gp / (2.0 * 7000.0), rtol=1e-12)

  def test_sanity_check_unbound_period(self, leo_initial_state):
    escape_state = leo_initial_state.with_velocity(leo_initial_state.velocity * 1.5)

    assert np.isinf(escape_state.period())


if __name__ == "__main__":
  pytest.main([__file__, "-v"])
