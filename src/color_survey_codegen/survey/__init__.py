"""
survey.
======

Does: Read raw color survey lines and turn them into uniquely named colors.
Used By: Pipeline and CLI.
"""

from .names import UniqueNames, to_identifier
from .parser import (
    COMMENT_MARKER,
    REJECT_REASONS,
    ParseResult,
    ParseStats,
    parse_line,
    parse_lines,
)
from .sources import InputNotFound, builtin_xkcd_lines, read_survey_lines

__all__ = [
    # names
    "UniqueNames",
    "to_identifier",
    # parser
    "COMMENT_MARKER",
    "REJECT_REASONS",
    "ParseResult",
    "ParseStats",
    "parse_line",
    "parse_lines",
    # sources
    "InputNotFound",
    "builtin_xkcd_lines",
    "read_survey_lines",
]
