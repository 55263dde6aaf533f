"""
Time Converter Module
=====================

Epoch value type used by every state, force, and propagator.

Summary:
--------
An Epoch is a scalar count of seconds past the J2000 reference epoch
(2000-01-01 12:00:00 TT). It is immutable and totally ordered, supports
rolling by a signed offset and differencing, and converts to and from
calendar UTC through astropy (leap seconds included).

Units:
------
- Time : seconds [s] past J2000, Terrestrial Time (TT)
"""
from dataclasses import dataclass
from datetime    import datetime, timezone

from astropy.time import Time as AstropyTime

from orbit_propagator.model.constants     import CONVERTER, TIMECONSTANTS
from orbit_propagator.utility.time_helper import parse_time


@dataclass(frozen=True, order=True)
class Epoch:
  """
  Seconds past J2000 (TT).
  """
  seconds : float = 0.0

  def roll(
    self,
    offset : float,
  ) -> 'Epoch':
    """
    Return a new epoch shifted by a signed offset.

    Input:
    ------
      offset : float
        Signed time offset [s].

    Output:
    -------
      epoch : Epoch
        Shifted epoch.
    """
    return Epoch(self.seconds + offset)

  def difference(
    self,
    other : 'Epoch',
  ) -> float:
    """
    Return the signed interval self - other [s].
    """
    return self.seconds - other.seconds

  @property
  def julian_date(self) -> float:
    return TIMECONSTANTS.JD_J2000 + self.seconds / CONVERTER.SEC_PER_DAY

  @property
  def julian_centuries(self) -> float:
    """Julian centuries past J2000 (TT)."""
    return self.seconds / (CONVERTER.SEC_PER_DAY * CONVERTER.DAY_PER_CENTURY)

  @classmethod
  def from_datetime(
    cls,
    utc_dt : datetime,
  ) -> 'Epoch':
    """
    Convert a UTC datetime to an epoch.

    Input:
    ------
      utc_dt : datetime
        UTC datetime. Naive datetimes are read as UTC; aware datetimes are
        converted to UTC first.

    Output:
    -------
      epoch : Epoch
        Seconds past J2000 (TT).
    """
    if utc_dt.tzinfo is not None:
      utc_dt = utc_dt.astimezone(timezone.utc).replace(tzinfo=None)

    time_tt = AstropyTime(utc_dt, scale='utc').tt
    return cls((time_tt.jd1 - TIMECONSTANTS.JD_J2000 + time_tt.jd2) * CONVERTER.SEC_PER_DAY)

  @classmethod
  def from_iso(
    cls,
    time_str : str,
  ) -> 'Epoch':
    """
    Convert an ISO 8601 UTC string (e.g. '2025-10-01T00:00:00Z') to an epoch.
    """
    return cls.from_datetime(parse_time(time_str))

  def to_datetime(self) -> datetime:
    """
    Convert the epoch to a naive UTC datetime.
    """
    time_tt = AstropyTime(TIMECONSTANTS.JD_J2000, self.seconds / CONVERTER.SEC_PER_DAY, format='jd', scale='tt')
    return time_tt.utc.to_datetime()

  def __str__(self) -> str:
    return f"{self.to_datetime().isoformat(timespec='milliseconds')} UTC ({self.seconds:.6f} s TT past J2000)"
