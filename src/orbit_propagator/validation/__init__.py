"""
Validation Package
==================

Test suite for the numerical orbit propagator.

Modules:
--------
- test_time_and_state      : Tests for epochs, time parsing, and immutable states
- test_orbit_converter     : Tests for orbital element conversions
- test_frame_converter     : Tests for reference frame transformations
- test_gravity_field       : Tests for the EGM-96 coefficients and spherical harmonics
- test_ephemeris           : Tests for Sun/Moon positions and eclipse geometry
- test_dynamics            : Unit tests for forces and the force model
- test_runge_kutta         : Tests for the Runge-Kutta propagators
- test_propagator          : Tests for checkpoints, ephemerides, and node/apsis search
- test_kepler_propagator   : Tests for the analytical two-body propagator
- test_configuration       : Tests for scenario loading and the command-line runner

Usage:
------
Run all tests:
  python -m pytest src/orbit_propagator/validation/ -v

Run a specific test module:
  python -m pytest src/orbit_propagator/validation/test_dynamics.py -v

Run a specific test class:
  python -m pytest src/orbit_propagator/validation/test_dynamics.py::TestGravity -v

Run a specific test:
  python -m pytest src/orbit_propagator/validation/test_dynamics.py::TestGravity::test_sanity_check_point_mass_direction -v
"""
