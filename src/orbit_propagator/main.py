"""
Numerical Orbit Propagator

Description:
  Propagates a spacecraft state read from a scenario YAML file and prints a
  configuration report and a results summary.

  The scenario selects:
  - the propagator (Dormand-Prince 5(4), Fehlberg 4(5), Bogacki-Shampine 3(2),
    fixed-step RK4, or closed-form Kepler)
  - the forces (EGM-96 gravity to degree/order 36, Sun/Moon third-body
    gravity, Harris-Priester drag, solar radiation pressure)
  - impulsive or finite maneuvers in the radial/intrack/crosstrack frame
  - the ephemeris span and sample interval

Usage:

  Argument      Required   Description
  ------------  --------   --------------------------------------------------
  --config      Yes        Scenario YAML file
  --duration    No         Propagation span [s] (overrides output.duration)
  --interval    No         Sample interval [s] (overrides output.interval)
  --log         No         Log file (overrides output.log_filepath)

  Example Commands:
    python -m orbit_propagator.main \
      --config src/orbit_propagator/data/configs/leo_drag.yaml

    orbit-propagator \
      --config src/orbit_propagator/data/configs/geo_maneuver.yaml \
      --duration 172800 \
      --interval 300 \
      --log output/geo_maneuver.log
"""
import sys

from typing import Optional, Sequence

from orbit_propagator.input.cli           import parse_command_line_arguments
from orbit_propagator.input.configuration import (
  apply_overrides,
  build_ephemeris_source,
  build_force_model,
  build_maneuvers,
  build_propagator,
  load_config,
  print_configuration,
)
from orbit_propagator.model.ephemeris     import SpiceEphemeris
from orbit_propagator.utility.logger      import start_logging, stop_logging
from orbit_propagator.utility.printer     import print_results_summary


def main(
  argv : Optional[Sequence[str]] = None,
) -> int:
  """
  Run a propagation scenario from the command line.

  Input:
  ------
    argv : sequence of str | None
      Command-line arguments. None reads sys.argv.

  Output:
  -------
    exit_code : int
      0 on success, 1 when the scenario cannot be loaded or built.
  """
  args = parse_command_line_arguments(argv)

  try:
    config = load_config(args.config_filepath)
    apply_overrides(config, args.duration, args.interval, args.log_filepath)
  except (FileNotFoundError, ValueError) as error:
    print(f"[ERROR] {error}", file=sys.stderr)
    return 1

  logger = start_logging(config.log_filepath) if config.log_filepath is not None else None
  try:
    try:
      ephemeris_source = build_ephemeris_source(config)
    except (FileNotFoundError, ValueError) as error:
      print(f"[ERROR] {error}", file=sys.stderr)
      return 1
    try:
      try:
        force_model = build_force_model(config, ephemeris_source) if config.propagator.type != 'kepler' else None
        propagator  = build_propagator(config, force_model)
        maneuvers   = build_maneuvers(config)
      except (FileNotFoundError, ValueError) as error:
        print(f"[ERROR] {error}", file=sys.stderr)
        return 1

      print_configuration(config, force_model)

      start  = config.initial_state.epoch
      finish = start.roll(config.duration)

      print("\nPropagation")
      print(f"  Compute ...", end='', flush=True)
      if maneuvers:
        ephemeris = propagator.ephemeris_maneuver(start, finish, maneuvers, config.interval)
      else:
        ephemeris = propagator.ephemeris(start, finish, config.interval)
      print(" Complete")

      print_results_summary(ephemeris, propagator.gp)
    finally:
      if isinstance(ephemeris_source, SpiceEphemeris):
        ephemeris_source.close()
  finally:
    stop_logging(logger)

  return 0


if __name__ == "__main__":
  sys.exit(main())
