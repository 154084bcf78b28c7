#  Copyright (c) 2025 Tom Villani, Ph.D.
"""minigrep - print the lines of a text file that contain a query string.

The package is split into a pure search engine, a configuration resolver
and a small runner that ties them to the filesystem and stdout.

Examples
--------
Searching an in-memory text:

    >>> from minigrep import search, search_case_insensitive
    >>> search("Id", "Lorem ipsum\\nId adipisci")
    ['Id adipisci']
    >>> search_case_insensitive("lorem", "Lorem ipsum\\nId adipisci")
    ['Lorem ipsum']

Resolving a configuration and running it:

    >>> from minigrep import Config, run
    >>> config = Config.build(["minigrep", "dolor", "poem.txt", "--ignore_case"], environ={})
    >>> config.ignore_case
    True

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from minigrep.config import Config
from minigrep.exceptions import (
    ArgumentError,
    ConfigurationError,
    EnvironmentOverrideError,
    FileAccessError,
    FileDecodeError,
    FileError,
    MinigrepError,
    MissingArgumentError,
    UnrecognizedFlagError,
)
from minigrep.runner import read_contents, run
from minigrep.search import search, search_case_insensitive, select_search, split_lines

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Config",
    "run",
    "read_contents",
    "search",
    "search_case_insensitive",
    "select_search",
    "split_lines",
    "MinigrepError",
    "ConfigurationError",
    "ArgumentError",
    "MissingArgumentError",
    "UnrecognizedFlagError",
    "EnvironmentOverrideError",
    "FileError",
    "FileAccessError",
    "FileDecodeError",
]
