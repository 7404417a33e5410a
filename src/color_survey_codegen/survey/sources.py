"""
sources
=======

Does: Provide the raw survey lines: a scoped read of a survey text file, or the
      XKCD color survey bundled with matplotlib rendered in the same line format.
Used By: Pipeline and CLI.
Returns: Lists of raw text lines; InputNotFound when a file cannot be read.
"""

from __future__ import annotations

import logging
import os
from typing import List

log = logging.getLogger(__name__)

__all__ = ["InputNotFound", "read_survey_lines", "builtin_xkcd_lines"]


class InputNotFound(FileNotFoundError):
    """Raise when no survey path is given or the file is missing/unreadable."""


def read_survey_lines(path: str | os.PathLike[str] | None, encoding: str = "utf-8") -> List[str]:
    """
    Does: Read every line of the survey file inside a single `with` scope.
    Returns: Lines without trailing newlines.
    Raises: InputNotFound for a missing path, a non-file, or an OS/decoding error.
    """
    if not path:
        raise InputNotFound("No survey file provided")
    if not os.path.isfile(path):
        raise InputNotFound(f"Survey file not found: {os.fspath(path)}")
    try:
        with open(path, "r", encoding=encoding, errors="strict") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputNotFound(f"Cannot read survey file {os.fspath(path)}: {e}") from e
    log.info("Loaded %s, %d lines to parse", os.fspath(path), len(lines))
    return lines


def builtin_xkcd_lines() -> List[str]:
    """
    Does: Render matplotlib's XKCD_COLORS as `<name>\\t<#hex>` lines (lazy import).
          Keys look like 'xkcd:cloudy blue'; the prefix is stripped.
    """
    from matplotlib.colors import XKCD_COLORS  # lazy import

    lines = [f"{key.replace('xkcd:', '', 1)}\t{hx}" for key, hx in XKCD_COLORS.items()]
    log.info("Loaded bundled XKCD survey, %d lines to parse", len(lines))
    return lines
