#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for minigrep.

Usage::

    $ minigrep <query> <file_path> [--ignore_case]

Matching lines are printed to stdout, one per line, in file order. Errors
are reported on stderr and turned into a non-zero exit status.

Environment Variable Support
----------------------------
IGNORE_CASE
    ``true`` or ``false``; overrides ``--ignore_case``. Any other value is
    a fatal error.
MINIGREP_LOG_LEVEL
    Logging level name for diagnostics on stderr (default ``WARNING``).
MINIGREP_LOG_FILE
    Optional path that log records are appended to.
MINIGREP_TRACE
    Enable DEBUG logging with timestamps and logger names.

Examples
--------
Case-sensitive search::

    $ minigrep to poem.txt

Case-insensitive search::

    $ minigrep to poem.txt --ignore_case
    $ IGNORE_CASE=true minigrep to poem.txt

"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from minigrep.config import Config
from minigrep.constants import (
    EXIT_ARGUMENT_ERROR,
    EXIT_ENVIRONMENT_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    USAGE,
)
from minigrep.exceptions import ArgumentError, EnvironmentOverrideError, FileError, MinigrepError
from minigrep.logging_utils import configure_logging_from_environ
from minigrep.runner import run

logger = logging.getLogger(__name__)

__all__ = ["main"]


def _discard_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


def _report_error(message: str, show_usage: bool = False) -> None:
    console = Console(stderr=True)
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
    if show_usage:
        console.print(escape(USAGE), soft_wrap=True)


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Run minigrep and return the process exit status.

    Parameters
    ----------
    argv : Sequence[str], optional
        Full argument vector, program name first. Defaults to ``sys.argv``.
    environ : Mapping[str, str], optional
        Process environment. Defaults to ``os.environ``.

    Returns
    -------
    int
        ``EXIT_SUCCESS`` on success (including no matches), otherwise the
        exit code of the failure family

    """
    if argv is None:
        argv = sys.argv
    if environ is None:
        environ = os.environ

    configure_logging_from_environ(environ)

    try:
        config = Config.build(argv, environ)
    except ArgumentError as exc:
        _report_error(exc.message, show_usage=True)
        return EXIT_ARGUMENT_ERROR
    except EnvironmentOverrideError as exc:
        _report_error(exc.message)
        return EXIT_ENVIRONMENT_ERROR

    try:
        match_count = run(config)
    except BrokenPipeError:
        # reader went away early, e.g. piped into head
        _discard_stdout()
        return EXIT_SUCCESS
    except FileError as exc:
        logger.debug("Reading %s failed", exc.file_path, exc_info=exc.original_error)
        _report_error(exc.message)
        return EXIT_FILE_ERROR
    except MinigrepError as exc:
        _report_error(exc.message)
        return EXIT_ERROR

    logger.info("%d matching line(s) in %s", match_count, config.file_path)
    return EXIT_SUCCESS
