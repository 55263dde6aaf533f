"""
Harris-Priester Atmosphere Module
=================================

Tabulated minimum (antapex) and maximum (apex of the diurnal bulge)
atmospheric densities between 100 km and 1000 km for mean solar activity.

Summary:
--------
HarrisPriesterAtmosphere is a read-only lookup context injected into the
AtmosphericDrag force. bracket(height) returns the two table rows that
enclose a geodetic height, or None outside the tabulated range.

Units:
------
- Height  : kilometers [km]
- Density : kilograms per cubic meter [kg/m³]

Sources:
--------
- Montenbruck, O., & Gill, E. (2000). Satellite Orbits, Table 3.8
  (mean solar activity, densities given there in g/km³).
"""
import numpy as np

from typing import NamedTuple, Optional, Sequence

from orbit_propagator.model.constants import CONVERTER


# Height [km], minimum density [g/km³], maximum density [g/km³]
HARRIS_PRIESTER_MEAN_ACTIVITY = (
  ( 100.0, 497400.0,  497400.0 ),
  ( 120.0,  24900.0,   24900.0 ),
  ( 130.0,   8377.0,    8710.0 ),
  ( 140.0,   3899.0,    4059.0 ),
  ( 150.0,   2122.0,    2215.0 ),
  ( 160.0,   1263.0,    1344.0 ),
  ( 170.0,    800.8,     875.8 ),
  ( 180.0,    528.3,     601.0 ),
  ( 190.0,    361.7,     429.7 ),
  ( 200.0,    255.7,     316.2 ),
  ( 210.0,    183.9,     239.6 ),
  ( 220.0,    134.1,     185.3 ),
  ( 230.0,     99.49,    145.5 ),
  ( 240.0,     74.88,    115.7 ),
  ( 250.0,     57.09,     93.08 ),
  ( 260.0,     44.03,     75.55 ),
  ( 270.0,     34.30,     61.82 ),
  ( 280.0,     26.97,     50.95 ),
  ( 290.0,     21.39,     42.26 ),
  ( 300.0,     17.08,     35.26 ),
  ( 320.0,     10.99,     25.11 ),
  ( 340.0,      7.214,    18.19 ),
  ( 360.0,      4.824,    13.37 ),
  ( 380.0,      3.274,     9.955 ),
  ( 400.0,      2.249,     7.492 ),
  ( 420.0,      1.558,     5.684 ),
  ( 440.0,      1.091,     4.355 ),
  ( 460.0,      0.7701,    3.362 ),
  ( 480.0,      0.5474,    2.612 ),
  ( 500.0,      0.3916,    2.042 ),
  ( 520.0,      0.2819,    1.605 ),
  ( 540.0,      0.2042,    1.267 ),
  ( 560.0,      0.1488,    1.005 ),
  ( 580.0,      0.1092,    0.7997 ),
  ( 600.0,      0.08070,   0.6390 ),
  ( 620.0,      0.06012,   0.5123 ),
  ( 640.0,      0.04519,   0.4121 ),
  ( 660.0,      0.03430,   0.3325 ),
  ( 680.0,      0.02632,   0.2691 ),
  ( 700.0,      0.02043,   0.2185 ),
  ( 720.0,      0.01607,   0.1779 ),
  ( 740.0,      0.01281,   0.1452 ),
  ( 760.0,      0.01036,   0.1190 ),
  ( 780.0,      0.008496,  0.09776 ),
  ( 800.0,      0.007069,  0.08059 ),
  ( 840.0,      0.004680,  0.05741 ),
  ( 880.0,      0.003200,  0.04210 ),
  ( 920.0,      0.002210,  0.03130 ),
  ( 960.0,      0.001560,  0.02360 ),
  (1000.0,      0.001150,  0.01810 ),
)


class AtmosphereEntry(NamedTuple):
  height      : float  # [km]
  density_min : float  # [kg/m³]
  density_max : float  # [kg/m³]


class AtmosphereBracket(NamedTuple):
  height : float
  lower  : AtmosphereEntry
  upper  : AtmosphereEntry


class HarrisPriesterAtmosphere:
  """
  Harris-Priester density table with bracket lookup.
  """

  def __init__(
    self,
    table : Sequence[tuple[float, float, float]] = HARRIS_PRIESTER_MEAN_ACTIVITY,
    scale : float                                = CONVERTER.KG_PER_M3__PER__G_PER_KM3,
  ):
    """
    Input:
    ------
      table : sequence of (height, min density, max density)
        Rows sorted by increasing height.
      scale : float
        Factor converting the table densities to kg/m³.
    """
    if len(table) < 2:
      raise ValueError("Harris-Priester table needs at least two rows")

    heights = np.array([row[0] for row in table], dtype=float)
    if np.any(np.diff(heights) <= 0.0):
      raise ValueError("Harris-Priester table heights must be strictly increasing")

    self.entries = tuple(
      AtmosphereEntry(float(h), float(rho_min) * scale, float(rho_max) * scale)
      for h, rho_min, rho_max in table
    )
    self.height_min = self.entries[0].height
    self.height_max = self.entries[-1].height

  def bracket(
    self,
    height : float,
  ) -> Optional[AtmosphereBracket]:
    """
    Table rows enclosing a height.

    Input:
    ------
      height : float
        Geodetic height [km].

    Output:
    -------
      bracket : AtmosphereBracket | None
        Lower and upper rows, or None outside [height_min, height_max].
    """
    if height < self.height_min or height > self.height_max:
      return None

    index = 0
    while index < len(self.entries) - 2 and height > self.entries[index + 1].height:
      index += 1

    return AtmosphereBracket(height, self.entries[index], self.entries[index + 1])


_HARRIS_PRIESTER: Optional[HarrisPriesterAtmosphere] = None


def default_atmosphere() -> HarrisPriesterAtmosphere:
  """
  Mean-activity Harris-Priester table, built once and shared read-only.
  """
  global _HARRIS_PRIESTER
  if _HARRIS_PRIESTER is None:
    _HARRIS_PRIESTER = HarrisPriesterAtmosphere()
  return _HARRIS_PRIESTER
