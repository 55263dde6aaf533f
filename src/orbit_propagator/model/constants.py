class CONVERTER:
  # Angle Conversions
  RAD_PER_DEG    = 3.141592653589793 / 180.0  # [radian] per [degree]
  DEG_PER_RAD    = 180.0 / 3.141592653589793  # [degree] per [radian]
  RAD_PER_ARCSEC = RAD_PER_DEG / 3600.0       # [radian] per [arcsecond]

  # Time Conversions
  SEC_PER_DAY     = 86400.0                   # [seconds] per [day]
  SEC_PER_HOUR    = 3600.0                    # [seconds] per [hour]
  SEC_PER_MIN     = 60.0                      # [seconds] per [minute]
  DAY_PER_CENTURY = 36525.0                   # [days] per [julian century]

  # Distance Conversions
  M_PER_KM  = 1000.0                          # [meters] per [kilometer]
  KM_PER_M  = 1.0 / 1000.0                    # [kilometers] per [meter]
  KM_PER_AU = 149597870.0                     # [kilometers] per [astronomical unit]

  # Density Conversions
  KG_PER_M3__PER__G_PER_KM3 = 1.0e-12         # [kg/m³] per [g/km³]


class PHYSICALCONSTANTS:
  speed_of_light = 299792.458                 # Speed of light in vacuum [km/s]


class TIMECONSTANTS:
  """
  Reference epochs for the propagator time scale.

  Notes:
  ------
    Epochs are counted in seconds past J2000 in Terrestrial Time (TT).
  """
  JD_J2000  = 2451545.0                       # Julian date of 2000-01-01 12:00:00 TT [day]
  MJD_J2000 = 51544.5                         # Modified julian date of J2000 [day]

  # TT - UTC after the 2017-01-01 leap second; used to approximate UT1 for sidereal angles
  TT_MINUS_UTC = 69.184                       # [s]


class SOLARSYSTEMCONSTANTS:
  """
  Physical constants of the bodies used by the force models.
  Earth values follow EGM-96 / WGS-84; solar radiation pressure follows Montenbruck & Gill.
  """

  class SUN:
    class RADIUS:
      EQUATOR = 695500.0                      # Sun's radius [km]

    GP = 132712440017.99                      # Sun's gravitational parameter [km³/s²]

    # Solar radiation pressure at 1 AU [N/m²]. approx G_SC / c with G_SC = 1367 W/m².
    PRESSURE_SRP = 4.56e-6

  class EARTH:
    class RADIUS:
      EQUATOR = 6378.1363                     # Earth's EGM-96 equatorial radius [km]
      POLAR   = 6356.7516005                  # Earth's polar radius [km]

    GP         = 398600.4415                  # Earth's gravitational parameter [km³/s²]
    FLATTENING = 1.0 / 298.257223563          # Earth's flattening [-]
    OMEGA      = 7.292115146706979e-5         # Earth's rotation rate [rad/s]

    # Unnormalized zonal harmonics
    J2 =  1.08262668355315e-3                 # J2 coefficient
    J3 = -2.53265648533224e-6                 # J3 coefficient
    J4 = -1.619621591367e-6                   # J4 coefficient

    # Maximum degree and order of the embedded gravity model
    GRAVITY_MAX_DEGREE = 36
    GRAVITY_MAX_ORDER  = 36

  class MOON:
    class RADIUS:
      EQUATOR = 1738.0                        # Moon's equatorial radius [km]

    GP = 4902.799                             # Moon's gravitational parameter [km³/s²]


class NAIFIDS:
  """
  NAIF ID codes for the bodies queried through SPICE.
  Reference: https://naif.jpl.nasa.gov/pub/naif/toolkit_docs/C/req/naif_ids.html
  """
  SUN   = 10
  EARTH = 399
  MOON  = 301
