import argparse

from pathlib import Path
from typing  import Optional, Sequence


def parse_command_line_arguments(
  argv : Optional[Sequence[str]] = None,
) -> argparse.Namespace:
  """
  Parse command-line arguments for the orbit propagator runner.

  Input:
  ------
    argv : sequence of str | None
      Arguments to parse. None reads sys.argv.

  Output:
  -------
    args : argparse.Namespace
      Parsed command-line arguments. Options left unset are None so that the
      scenario file values apply.
  """
  parser = argparse.ArgumentParser(
    description     = 'Numerical orbit propagator',
    formatter_class = argparse.RawDescriptionHelpFormatter,
  )

  parser.add_argument(
    '--config',
    dest     = 'config_filepath',
    type     = Path,
    required = True,
    help     = "Scenario YAML file (initial state, propagator, forces, maneuvers, output).",
  )
  parser.add_argument(
    '--duration',
    dest    = 'duration',
    type    = float,
    default = None,
    help    = "Propagation span from the initial epoch [s]. Overrides output.duration.",
  )
  parser.add_argument(
    '--interval',
    dest    = 'interval',
    type    = float,
    default = None,
    help    = "Ephemeris sample spacing [s]. Overrides output.interval.",
  )
  parser.add_argument(
    '--log',
    dest    = 'log_filepath',
    type    = Path,
    default = None,
    help    = "Copy the terminal report to this file. Overrides output.log_filepath.",
  )

  return parser.parse_args(argv)
