#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Run configuration for minigrep.

The configuration is resolved from the raw process arguments and the
process environment in one step, :meth:`Config.build`:

1. Tokens after the program name starting with ``--`` are flags, everything
   else is positional. At least two positionals (query, file path) are
   required; extra positionals are ignored.
2. ``--ignore_case`` is the only recognized flag.
3. When ``IGNORE_CASE`` is set in the environment it must read ``true`` or
   ``false`` and wins over the flag. When it is unset the flag decides.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Sequence

from minigrep.constants import FLAG_PREFIX, IGNORE_CASE_ENV, IGNORE_CASE_FLAG
from minigrep.exceptions import EnvironmentOverrideError, MissingArgumentError, UnrecognizedFlagError

logger = logging.getLogger(__name__)

_REQUIRED_POSITIONALS = ("query", "file_path")


def parse_bool(value: str, name: str) -> bool:
    """Parse an override value that must be exactly ``true`` or ``false``.

    Parameters
    ----------
    value : str
        Raw text read from the environment
    name : str
        Variable name, used in the error message

    Returns
    -------
    bool
        The parsed value

    Raises
    ------
    EnvironmentOverrideError
        If ``value`` is any other text, including other capitalizations

    """
    if value == "true":
        return True
    if value == "false":
        return False
    raise EnvironmentOverrideError(variable_name=name, value=value)


def partition_arguments(tokens: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split tokens into ``(positionals, flags)``, keeping their order."""
    positionals: list[str] = []
    flags: list[str] = []
    for token in tokens:
        if token.startswith(FLAG_PREFIX):
            flags.append(token)
        else:
            positionals.append(token)
    return positionals, flags


def parse_flags(flags: Sequence[str]) -> bool:
    """Return the ignore-case intent expressed by ``flags``.

    Raises
    ------
    UnrecognizedFlagError
        On the first flag other than ``--ignore_case``

    """
    ignore_case = False
    for flag in flags:
        if flag != IGNORE_CASE_FLAG:
            raise UnrecognizedFlagError(flag)
        ignore_case = True
    return ignore_case


@dataclass(frozen=True)
class Config:
    """Immutable configuration for a single search run.

    Parameters
    ----------
    query : str
        Substring to look for in each line
    file_path : str
        Path of the file to search; not checked until it is read
    ignore_case : bool, default False
        Whether matching folds letter case first

    """

    query: str
    file_path: str
    ignore_case: bool = False

    def create_updated(self, **kwargs: Any) -> Config:
        """Create a new instance with updated field values."""
        return replace(self, **kwargs)

    @classmethod
    def build(cls, args: Sequence[str], environ: Mapping[str, str] | None = None) -> Config:
        """Resolve a configuration from process arguments and environment.

        Parameters
        ----------
        args : Sequence[str]
            Full argument vector, program name first
        environ : Mapping[str, str], optional
            Environment to read ``IGNORE_CASE`` from. Defaults to ``os.environ``.

        Returns
        -------
        Config
            The resolved configuration

        Raises
        ------
        MissingArgumentError
            If the query or the file path is missing
        UnrecognizedFlagError
            If a ``--`` token other than ``--ignore_case`` is present
        EnvironmentOverrideError
            If ``IGNORE_CASE`` is set to something other than ``true``/``false``

        """
        if environ is None:
            environ = os.environ

        positionals, flags = partition_arguments(args[1:])
        if len(positionals) < len(_REQUIRED_POSITIONALS):
            raise MissingArgumentError(_REQUIRED_POSITIONALS[len(positionals)])

        query, file_path = positionals[0], positionals[1]
        if len(positionals) > 2:
            logger.debug("Ignoring extra positional arguments: %s", positionals[2:])

        ignore_case = parse_flags(flags)

        raw_override = environ.get(IGNORE_CASE_ENV)
        if raw_override is not None:
            override = parse_bool(raw_override, IGNORE_CASE_ENV)
            if override != ignore_case:
                logger.debug("%s=%s overrides the command-line setting", IGNORE_CASE_ENV, raw_override)
            ignore_case = override

        config = cls(query=query, file_path=file_path, ignore_case=ignore_case)
        logger.debug("Resolved configuration: %s", config)
        return config
