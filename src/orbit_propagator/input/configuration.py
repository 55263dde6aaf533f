import yaml

from datetime import datetime
from pathlib  import Path
from types    import SimpleNamespace
from typing   import Optional, Union

from orbit_propagator.model.dynamics                import ForceModel, Thrust
from orbit_propagator.model.ephemeris               import SpiceEphemeris, default_ephemeris
from orbit_propagator.model.state                   import State
from orbit_propagator.model.time_converter          import Epoch
from orbit_propagator.propagation.kepler_propagator import KeplerPropagator
from orbit_propagator.propagation.propagator        import Propagator
from orbit_propagator.propagation.runge_kutta       import (
  DEFAULT_TOLERANCE,
  RK4_STEP_SIZE,
  RungeKutta4Propagator,
  RungeKuttaAdaptive,
  get_tableau,
)


PROPAGATOR_TYPES  = ('dormand_prince_54', 'fehlberg_45', 'bogacki_shampine_32', 'rk4', 'kepler')
THIRD_BODIES      = ('sun', 'moon')
EPHEMERIS_SOURCES = ('analytical', 'spice')

DEFAULT_DURATION  = 86400.0  # [s]
DEFAULT_INTERVAL  = 60.0     # [s]


def _to_namespace(
  value : object,
) -> object:
  """
  Recursively convert parsed YAML mappings into SimpleNamespace objects.
  """
  if isinstance(value, dict):
    return SimpleNamespace(**{str(key): _to_namespace(item) for key, item in value.items()})
  if isinstance(value, list):
    return [_to_namespace(item) for item in value]
  return value


def _get(
  namespace : Optional[SimpleNamespace],
  name      : str,
  default   : object = None,
) -> object:
  if namespace is None:
    return default
  value = getattr(namespace, name, default)
  return default if value is None else value


def _vector(
  values : object,
  name   : str,
) -> list[float]:
  if not isinstance(values, (list, tuple)) or len(values) != 3:
    raise ValueError(f"'{name}' must be a list of 3 numbers, received {values!r}")
  return [float(value) for value in values]


def _epoch(
  value : object,
) -> Epoch:
  # YAML turns unquoted timestamps into datetime objects
  if isinstance(value, datetime):
    return Epoch.from_datetime(value)
  return Epoch.from_iso(str(value))


def _positive(
  value : object,
  name  : str,
) -> float:
  value = float(value)
  if value <= 0.0:
    raise ValueError(f"'{name}' must be positive, received {value}")
  return value


def _normalize_forces(
  raw_forces : Optional[SimpleNamespace],
) -> SimpleNamespace:
  gravity = _get(raw_forces, 'gravity')
  if gravity is not None:
    gravity = SimpleNamespace(
      degree = int(_get(gravity, 'degree', 0)),
      order  = int(_get(gravity, 'order',  0)),
    )

  third_bodies = [str(body).strip().lower() for body in _get(raw_forces, 'third_body', [])]
  for body in third_bodies:
    if body not in THIRD_BODIES:
      raise ValueError(f"Unknown third body '{body}'. Available: {', '.join(THIRD_BODIES)}")

  drag = _get(raw_forces, 'drag')
  if drag is not None:
    drag = SimpleNamespace(
      mass        = _positive(_get(drag, 'mass'), 'forces.drag.mass'),
      area        = float(_get(drag, 'area')),
      coefficient = float(_get(drag, 'coefficient', 2.2)),
      cosine      = int(_get(drag, 'cosine', 4)),
    )

  srp = _get(raw_forces, 'srp')
  if srp is not None:
    srp = SimpleNamespace(
      mass        = _positive(_get(srp, 'mass'), 'forces.srp.mass'),
      area        = float(_get(srp, 'area')),
      coefficient = float(_get(srp, 'coefficient', 1.2)),
    )

  return SimpleNamespace(
    gravity      = gravity,
    third_bodies = third_bodies,
    drag         = drag,
    srp          = srp,
  )


def load_config(
  config_filepath : Union[str, Path],
) -> SimpleNamespace:
  """
  Load and validate a scenario YAML file.

  Input:
  ------
    config_filepath : str | Path
      Scenario file.

  Output:
  -------
    config : SimpleNamespace
      Validated configuration with defaults filled in:
        config_filepath, epoch, initial_state, propagator (type, tolerance,
        step_size, checkpoint_capacity), ephemeris (source, kernel_dir),
        forces (gravity, third_bodies, drag, srp), maneuvers, duration,
        interval, log_filepath.

  Raises:
  -------
    FileNotFoundError
      If the file does not exist.
    ValueError
      If a required entry is missing or a value is invalid.
  """
  config_filepath = Path(config_filepath)
  if not config_filepath.is_file():
    raise FileNotFoundError(f"Configuration file not found: {config_filepath}")

  with open(config_filepath, 'r') as f:
    raw = _to_namespace(yaml.safe_load(f))
  if not isinstance(raw, SimpleNamespace):
    raise ValueError(f"Configuration file {config_filepath} must contain a mapping")

  # Initial state
  epoch_str = _get(raw, 'epoch')
  if epoch_str is None:
    raise ValueError("Configuration requires an 'epoch' entry")
  epoch     = _epoch(epoch_str)
  raw_state = _get(raw, 'state')
  if raw_state is None:
    raise ValueError("Configuration requires a 'state' entry with 'position' and 'velocity'")
  initial_state = State(
    epoch,
    _vector(_get(raw_state, 'position'), 'state.position'),
    _vector(_get(raw_state, 'velocity'), 'state.velocity'),
  )

  # Propagator
  raw_propagator  = _get(raw, 'propagator')
  propagator_type = str(_get(raw_propagator, 'type', 'dormand_prince_54')).strip().lower().replace('-', '_')
  if propagator_type not in PROPAGATOR_TYPES:
    raise ValueError(f"Unknown propagator type '{propagator_type}'. Available: {', '.join(PROPAGATOR_TYPES)}")
  checkpoint_capacity = _get(raw_propagator, 'checkpoint_capacity')
  propagator = SimpleNamespace(
    type                = propagator_type,
    tolerance           = float(_get(raw_propagator, 'tolerance', DEFAULT_TOLERANCE)),
    step_size           = _positive(_get(raw_propagator, 'step_size', RK4_STEP_SIZE), 'propagator.step_size'),
    checkpoint_capacity = int(checkpoint_capacity) if checkpoint_capacity is not None else None,
  )

  # Sun/Moon ephemeris source
  raw_ephemeris    = _get(raw, 'ephemeris')
  ephemeris_source = str(_get(raw_ephemeris, 'source', 'analytical')).strip().lower()
  if ephemeris_source not in EPHEMERIS_SOURCES:
    raise ValueError(f"Unknown ephemeris source '{ephemeris_source}'. Available: {', '.join(EPHEMERIS_SOURCES)}")
  kernel_dir = _get(raw_ephemeris, 'kernel_dir')
  if ephemeris_source == 'spice' and kernel_dir is None:
    raise ValueError("SPICE ephemeris requires 'ephemeris.kernel_dir'")
  ephemeris = SimpleNamespace(
    source     = ephemeris_source,
    kernel_dir = (config_filepath.parent / kernel_dir) if kernel_dir is not None else None,
  )

  # Maneuvers
  maneuvers = []
  for i_maneuver, raw_maneuver in enumerate(_get(raw, 'maneuvers', [])):
    maneuver_epoch = _get(raw_maneuver, 'epoch')
    if maneuver_epoch is None:
      raise ValueError(f"Maneuver {i_maneuver} requires an 'epoch' entry")
    maneuvers.append(SimpleNamespace(
      epoch         = _epoch(maneuver_epoch),
      radial        = float(_get(raw_maneuver, 'radial',     0.0)),
      intrack       = float(_get(raw_maneuver, 'intrack',    0.0)),
      crosstrack    = float(_get(raw_maneuver, 'crosstrack', 0.0)),
      duration_rate = float(_get(raw_maneuver, 'duration_rate', 0.0)),
    ))

  # Output
  raw_output   = _get(raw, 'output')
  log_filepath = _get(raw_output, 'log_filepath')

  return SimpleNamespace(
    config_filepath = config_filepath,
    epoch           = epoch,
    initial_state   = initial_state,
    propagator      = propagator,
    ephemeris       = ephemeris,
    forces          = _normalize_forces(_get(raw, 'forces')),
    maneuvers       = maneuvers,
    duration        = _positive(_get(raw_output, 'duration', DEFAULT_DURATION), 'output.duration'),
    interval        = _positive(_get(raw_output, 'interval', DEFAULT_INTERVAL), 'output.interval'),
    log_filepath    = Path(log_filepath) if log_filepath is not None else None,
  )


def apply_overrides(
  config       : SimpleNamespace,
  duration     : Optional[float] = None,
  interval     : Optional[float] = None,
  log_filepath : Optional[Path]  = None,
) -> SimpleNamespace:
  """
  Replace output settings with command-line values where given.
  """
  if duration is not None:
    config.duration = _positive(duration, '--duration')
  if interval is not None:
    config.interval = _positive(interval, '--interval')
  if log_filepath is not None:
    config.log_filepath = Path(log_filepath)
  return config


def build_ephemeris_source(
  config : SimpleNamespace,
):
  """
  Sun/Moon ephemeris selected by the configuration.
  """
  if config.ephemeris.source == 'spice':
    return SpiceEphemeris(config.ephemeris.kernel_dir)
  return default_ephemeris()


def build_force_model(
  config    : SimpleNamespace,
  ephemeris = None,
) -> ForceModel:
  """
  Assemble the force model described by config.forces.

  Input:
  ------
    config : SimpleNamespace
      Configuration from load_config.
    ephemeris : AnalyticalEphemeris | SpiceEphemeris | None
      Sun/Moon source; defaults to build_ephemeris_source(config).

  Output:
  -------
    force_model : ForceModel
      Point-mass gravity when no gravity entry is given.
  """
  forces      = config.forces
  force_model = ForceModel(ephemeris=ephemeris if ephemeris is not None else build_ephemeris_source(config))

  if forces.gravity is not None:
    force_model.set_earth_gravity(forces.gravity.degree, forces.gravity.order)
  else:
    force_model.set_gravity()

  if forces.third_bodies:
    force_model.set_third_body_gravity(
      moon = 'moon' in forces.third_bodies,
      sun  = 'sun'  in forces.third_bodies,
    )
  if forces.drag is not None:
    force_model.set_atmospheric_drag(forces.drag.mass, forces.drag.area, forces.drag.coefficient, forces.drag.cosine)
  if forces.srp is not None:
    force_model.set_solar_radiation_pressure(forces.srp.mass, forces.srp.area, forces.srp.coefficient)

  return force_model


def build_propagator(
  config      : SimpleNamespace,
  force_model : Optional[ForceModel] = None,
) -> Propagator:
  """
  Create the propagator described by config.propagator.
  """
  propagator_config = config.propagator

  if propagator_config.type == 'kepler':
    return KeplerPropagator(
      config.initial_state,
      checkpoint_capacity = propagator_config.checkpoint_capacity,
    )

  force_model = force_model if force_model is not None else build_force_model(config)
  if propagator_config.type == 'rk4':
    return RungeKutta4Propagator(
      config.initial_state,
      force_model         = force_model,
      step_size           = propagator_config.step_size,
      checkpoint_capacity = propagator_config.checkpoint_capacity,
    )

  return RungeKuttaAdaptive(
    config.initial_state,
    force_model         = force_model,
    tolerance           = propagator_config.tolerance,
    tableau             = get_tableau(propagator_config.type),
    checkpoint_capacity = propagator_config.checkpoint_capacity,
  )


def build_maneuvers(
  config : SimpleNamespace,
) -> list[Thrust]:
  return [
    Thrust(
      maneuver.epoch,
      maneuver.radial,
      maneuver.intrack,
      maneuver.crosstrack,
      maneuver.duration_rate,
    )
    for maneuver in config.maneuvers
  ]


def print_configuration(
  config      : SimpleNamespace,
  force_model : Optional[ForceModel] = None,
) -> None:
  """
  Print the scenario configuration.

  Input:
  ------
    config : SimpleNamespace
      Configuration from load_config.
    force_model : ForceModel | None
      Assembled force model, listed when given.
  """
  state = config.initial_state

  print("\nInput Configuration")
  print(f"  Config Filepath : {config.config_filepath}")
  print(f"  Initial State")
  print(f"    Epoch    : {state.epoch}")
  print(f"    Frame    : J2000")
  print(f"    Position : {state.position[0]:>19.12e}  {state.position[1]:>19.12e}  {state.position[2]:>19.12e} km")
  print(f"    Velocity : {state.velocity[0]:>19.12e}  {state.velocity[1]:>19.12e}  {state.velocity[2]:>19.12e} km/s")
  print(f"  Propagator")
  print(f"    Type      : {config.propagator.type}")
  if config.propagator.type == 'rk4':
    print(f"    Step Size : {config.propagator.step_size} s")
  elif config.propagator.type != 'kepler':
    print(f"    Tolerance : {config.propagator.tolerance:.3e}")
  print(f"  Ephemeris Source : {config.ephemeris.source}")
  if force_model is not None:
    print(f"  Forces")
    for name in force_model.describe():
      print(f"    - {name}")
  print(f"  Maneuvers : {len(config.maneuvers)}")
  for maneuver in config.maneuvers:
    print(
      f"    - {maneuver.epoch.to_datetime().isoformat()} UTC  "
      f"RIC [{maneuver.radial}, {maneuver.intrack}, {maneuver.crosstrack}] m/s  "
      f"duration rate {maneuver.duration_rate} s/(m/s)"
    )
  print(f"  Output")
  print(f"    Duration     : {config.duration} s")
  print(f"    Interval     : {config.interval} s")
  print(f"    Log Filepath : {config.log_filepath}")
