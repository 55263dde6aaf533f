from orbit_propagator.model.constants        import CONVERTER, SOLARSYSTEMCONSTANTS
from orbit_propagator.model.orbit_converter  import OrbitConverter
from orbit_propagator.propagation.trajectory import Ephemeris
from orbit_propagator.utility.time_helper    import format_time_offset


def print_results_summary(
  ephemeris : Ephemeris,
  gp        : float = SOLARSYSTEMCONSTANTS.EARTH.GP,
) -> None:
  """
  Print a summary of the propagation results.

  Input:
  ------
    ephemeris : Ephemeris
      Propagated trajectory.
    gp : float
      Gravitational parameter used for the classical elements [km³/s²].
  """
  state_o = ephemeris[0]
  state_f = ephemeris[-1]
  span    = state_f.epoch.difference(state_o.epoch)

  print("\nResults Summary")
  print(f"  Samples  : {len(ephemeris)}")
  print(f"  Timespan : {format_time_offset(span)}")

  pos_vec_f = state_f.position
  vel_vec_f = state_f.velocity

  print(f"  Final State")
  print(f"    Epoch : {state_f.epoch}")
  print(f"    Frame : J2000")
  print(f"    Cartesian State")
  print(f"      Position : {pos_vec_f[0]:>19.12e}  {pos_vec_f[1]:>19.12e}  {pos_vec_f[2]:>19.12e} km")
  print(f"      Velocity : {vel_vec_f[0]:>19.12e}  {vel_vec_f[1]:>19.12e}  {vel_vec_f[2]:>19.12e} km/s")

  try:
    coe = OrbitConverter.pv_to_coe(pos_vec_f, vel_vec_f, gp)
  except ValueError as error:
    print(f"    Classical Orbital Elements : unavailable ({error})")
    return

  sma  = coe['sma' ]
  ecc  = coe['ecc' ]
  inc  = coe['inc' ] * CONVERTER.DEG_PER_RAD
  raan = coe['raan'] * CONVERTER.DEG_PER_RAD
  aop  = coe['aop' ] * CONVERTER.DEG_PER_RAD
  ta   = coe['ta'  ] * CONVERTER.DEG_PER_RAD

  print(f"    Classical Orbital Elements")
  print(f"      SMA  : { sma:>19.12e} km")
  print(f"      ECC  : { ecc:>19.12e}")
  print(f"      INC  : { inc:>19.12e} deg")
  print(f"      RAAN : {raan:>19.12e} deg")
  print(f"      AOP  : { aop:>19.12e} deg")
  print(f"      TA   : {  ta:>19.12e} deg")
