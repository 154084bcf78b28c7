#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Diagnostic logging for the minigrep command.

Logging is driven entirely by environment variables, so that the command
line keeps ``--ignore_case`` as its only flag:

- ``MINIGREP_LOG_LEVEL``: level name, ``WARNING`` when unset or unknown
- ``MINIGREP_LOG_FILE``: file that records are appended to as well
- ``MINIGREP_TRACE``: ``true``/``1``/``yes``/``on`` forces DEBUG and adds
  timestamps and logger names

Records only ever go to stderr (and the optional file); stdout is reserved
for matched lines.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from minigrep.constants import DEFAULT_LOG_LEVEL, LOG_FILE_ENV, LOG_LEVEL_ENV, TRACE_ENV, TRUTHY_ENV_VALUES

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"info"`` to its number, WARNING if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.getLevelName(DEFAULT_LOG_LEVEL)


@dataclass(frozen=True)
class LoggingSettings:
    """Logging choices for one minigrep run.

    Parameters
    ----------
    level : int
        Numeric level applied to the root logger and its handlers
    log_file : str, optional
        Path records are appended to in addition to stderr
    trace_mode : bool, default False
        Use the timestamped format with logger names

    """

    level: int = logging.WARNING
    log_file: Optional[str] = None
    trace_mode: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> LoggingSettings:
        """Read the ``MINIGREP_*`` variables; trace wins over an explicit level."""
        trace_mode = environ.get(TRACE_ENV, "").lower() in TRUTHY_ENV_VALUES
        level = logging.DEBUG if trace_mode else resolve_level(environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
        return cls(level=level, log_file=environ.get(LOG_FILE_ENV) or None, trace_mode=trace_mode)

    def formatter(self) -> logging.Formatter:
        """Build the formatter shared by every handler."""
        if self.trace_mode:
            return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
        return logging.Formatter(PLAIN_FORMAT)


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Install the stderr (and optional file) handlers on the root logger.

    Existing root handlers are replaced. A log file that cannot be opened is
    reported as a warning on stderr and otherwise ignored; it never stops a
    search from running.

    Parameters
    ----------
    settings : LoggingSettings
        Resolved logging choices

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.level)
    root_logger.handlers.clear()

    formatter = settings.formatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    file_error: OSError | None = None
    if settings.log_file:
        try:
            handlers.append(logging.FileHandler(settings.log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(settings.level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", settings.log_file, file_error)
    elif settings.log_file:
        root_logger.info("Logging to file: %s", settings.log_file)

    return root_logger


def configure_logging_from_environ(environ: Mapping[str, str]) -> logging.Logger:
    """Resolve :class:`LoggingSettings` from ``environ`` and apply them."""
    return configure_logging(LoggingSettings.from_environ(environ))
