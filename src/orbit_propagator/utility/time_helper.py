"""
Time Utilities
==============

Parsing and formatting helpers for epochs given as text and for
propagation offsets shown in reports.
"""
from datetime import datetime, timezone


def format_time_offset(
  seconds : float,
) -> str:
  """
  Format a signed offset as days, hours, minutes, and seconds.

  Examples:
     5828.452 -> "+0d 01h 37m 08.452s"
    -90061.5  -> "-1d 01h 01m 01.500s"

  Input:
  ------
    seconds : float
      Time offset [s].

  Output:
  -------
    offset_str : str
      Formatted offset.
  """
  sign    = '+' if seconds >= 0 else '-'
  abs_sec = abs(seconds)

  days    = int(abs_sec // 86400)
  hours   = int((abs_sec % 86400) // 3600)
  minutes = int((abs_sec % 3600) // 60)
  secs    = abs_sec % 60

  return f"{sign}{days}d {hours:02d}h {minutes:02d}m {secs:06.3f}s"


def parse_time(
  time_str : str,
) -> datetime:
  """
  Parse a UTC time string into a naive UTC datetime.

  Accepted formats:
  - ISO 8601 with 'T' separator  : "2025-10-01T00:00:00"
  - ISO 8601 with 'Z' suffix     : "2025-10-01T00:00:00Z"
  - ISO 8601 with offset         : "2025-10-01T02:00:00+02:00"
  - Space separated              : "2025-10-01 00:00:00"
  - Day-of-year                  : "2025-274T00:00:00"

  Input:
  ------
    time_str : str
      Time string to parse.

  Output:
  -------
    utc_dt : datetime
      Naive datetime in UTC.

  Raises:
  -------
    ValueError
      If the string matches none of the accepted formats.
  """
  time_str = str(time_str).strip()
  if time_str.endswith('Z'):
    time_str = time_str[:-1]

  try:
    utc_dt = datetime.fromisoformat(time_str)
  except ValueError:
    utc_dt = None
    for fmt in ("%Y-%m-%d %H:%M:%S.%f", "%Y-%jT%H:%M:%S", "%Y-%jT%H:%M:%S.%f"):
      try:
        utc_dt = datetime.strptime(time_str, fmt)
        break
      except ValueError:
        continue
    if utc_dt is None:
      raise ValueError(f"Cannot parse time string: {time_str}")

  if utc_dt.tzinfo is not None:
    utc_dt = utc_dt.astimezone(timezone.utc).replace(tzinfo=None)

  return utc_dt
