"""
Logger Utility
==============

Mirrors the runner's terminal report (stdout and stderr) into a log file.
"""
import sys

from pathlib import Path
from typing  import Optional, TextIO


class TeeStream:
  """
  A stream that writes to a terminal stream and a shared log file.
  """
  def __init__(
    self,
    terminal : TextIO,
    log_file : TextIO,
  ):
    self.terminal = terminal
    self.log_file = log_file

  def write(self, message: str) -> int:
    self.terminal.write(message)
    self.log_file.write(message)
    self.log_file.flush()
    return len(message)

  def flush(self):
    self.terminal.flush()
    self.log_file.flush()


class LoggerContext:
  """
  Redirection state needed to undo start_logging.
  """
  def __init__(
    self,
    log_file        : TextIO,
    original_stdout : TextIO,
    original_stderr : TextIO,
  ):
    self.log_file        = log_file
    self.original_stdout = original_stdout
    self.original_stderr = original_stderr


def start_logging(
  log_filepath : Path,
) -> LoggerContext:
  """
  Start copying terminal output (stdout and stderr) to a file.

  Input:
  ------
    log_filepath : Path
      Log file path. Parent folders are created as needed.

  Output:
  -------
    context : LoggerContext
      Context object for stop_logging.
  """
  log_filepath = Path(log_filepath)
  log_filepath.parent.mkdir(parents=True, exist_ok=True)

  original_stdout = sys.stdout
  original_stderr = sys.stderr
  log_file        = open(log_filepath, 'w')

  sys.stdout = TeeStream(original_stdout, log_file)
  sys.stderr = TeeStream(original_stderr, log_file)

  return LoggerContext(log_file, original_stdout, original_stderr)


def stop_logging(
  context : Optional[LoggerContext],
) -> None:
  """
  Restore stdout/stderr and close the log file. A None context is ignored.
  """
  if context is None:
    return

  sys.stdout = context.original_stdout
  sys.stderr = context.original_stderr
  context.log_file.close()
