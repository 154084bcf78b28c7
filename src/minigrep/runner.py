#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Read the target file, search it and write the matching lines."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from minigrep.config import Config
from minigrep.exceptions import FileAccessError, FileDecodeError
from minigrep.exceptions import FileNotFoundError as MinigrepFileNotFoundError
from minigrep.search import select_search

logger = logging.getLogger(__name__)


def read_contents(file_path: str) -> str:
    """Read a whole file as UTF-8 text, keeping its line endings untouched.

    Parameters
    ----------
    file_path : str
        Path of the file to read

    Returns
    -------
    str
        The file contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist (minigrep's own exception class)
    FileAccessError
        If the file exists but cannot be opened or read
    FileDecodeError
        If the contents are not valid UTF-8

    """
    try:
        # newline="" so that \r\n reaches the line splitter verbatim
        with open(file_path, encoding="utf-8", newline="") as handle:
            contents = handle.read()
    except FileNotFoundError as exc:
        raise MinigrepFileNotFoundError(file_path=file_path, original_error=exc) from exc
    except PermissionError as exc:
        raise FileAccessError(
            file_path=file_path, message=f"Permission denied: {file_path}", original_error=exc
        ) from exc
    except UnicodeDecodeError as exc:
        raise FileDecodeError(file_path=file_path, original_error=exc) from exc
    except OSError as exc:
        raise FileAccessError(
            file_path=file_path, message=f"Cannot read file {file_path}: {exc.strerror or exc}", original_error=exc
        ) from exc

    logger.debug("Read %d characters from %s", len(contents), file_path)
    return contents


def run(config: Config, stream: TextIO | None = None) -> int:
    """Search the configured file and write each matching line to ``stream``.

    Returns the number of lines written. Read errors propagate unchanged.
    """
    out = stream if stream is not None else sys.stdout

    contents = read_contents(config.file_path)
    results = select_search(config.ignore_case)(config.query, contents)
    logger.debug("%d matching line(s) for %r (ignore_case=%s)", len(results), config.query, config.ignore_case)

    for line in results:
        out.write(line)
        out.write("\n")
    out.flush()

    return len(results)
