#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Line-filtering search over an in-memory text body.

Both variants return the matching lines of ``text`` verbatim and in their
original order. A line that contains the query several times is reported
once.
"""

from __future__ import annotations

from typing import Callable

SearchFunction = Callable[[str, str], list[str]]


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` into lines on ``\n``, accepting ``\r\n`` endings.

    A trailing separator does not produce an empty final line, and a last
    line without a separator is still returned verbatim, including a bare
    ``\r`` at its end. Only a ``\r`` directly before ``\n`` is dropped.
    Unlike ``str.splitlines``, no other characters are treated as line
    breaks.

    Parameters
    ----------
    text : str
        Full text body

    Returns
    -------
    list[str]
        Lines without their terminators

    """
    if not text:
        return []

    *terminated, last = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if last:
        lines.append(last)
    return lines


def search(query: str, text: str) -> list[str]:
    """Return the lines of ``text`` that contain ``query`` literally.

    An empty query matches every line.

    Examples
    --------
    >>> search("duct", "Rust:\\nsafe, fast, productive.\\nPick three.")
    ['safe, fast, productive.']

    """
    return [line for line in split_lines(text) if query in line]


def search_case_insensitive(query: str, text: str) -> list[str]:
    """Return the lines of ``text`` that contain ``query`` ignoring case.

    Both sides are lowercased for the comparison only; the original line is
    what gets returned.

    Examples
    --------
    >>> search_case_insensitive("rUsT", "Rust:\\nsafe, fast, productive.\\nTrust me.")
    ['Rust:', 'Trust me.']

    """
    lowered_query = query.lower()
    return [line for line in split_lines(text) if lowered_query in line.lower()]


def select_search(ignore_case: bool) -> SearchFunction:
    """Pick the search variant matching the ignore-case setting."""
    return search_case_insensitive if ignore_case else search
