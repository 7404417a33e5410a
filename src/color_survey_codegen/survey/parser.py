"""
parser.py

Does:
    Tolerant survey line parser. Extracts (name, hex) pairs, skips blank,
    comment and malformed lines, normalizes names into identifiers and renames
    collisions deterministically.
Returns:
    parse_lines() → ParseResult(colors in file order, ParseStats).
"""

from __future__ import annotations

# ── Imports & Public API ──────────────────────────────────────────────────────
import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from color_survey_codegen.color import HEX_DIGITS, NamedColor, hex_to_channels
from color_survey_codegen.utils import debug

from .names import UniqueNames, to_identifier

__all__ = [
    "COMMENT_MARKER",
    "REJECT_REASONS",
    "ParseStats",
    "ParseResult",
    "parse_line",
    "parse_lines",
]

log = logging.getLogger(__name__)

# ── Constants ────────────────────────────────────────────────────────────────
COMMENT_MARKER = "#"

REJECT_REASONS: Tuple[str, ...] = (
    "blank",
    "comment",
    "too_few_tokens",
    "missing_name",
    "short_hex",
    "invalid_hex",
)

# A hex token: optional '#', then at least six hex digits (extra chars ignored)
_HEX_HEAD_RE = re.compile(r"^#?[0-9a-fA-F]{%d}" % HEX_DIGITS)


# ── Results ──────────────────────────────────────────────────────────────────
@dataclass
class ParseStats:
    """Line counters. ``total == accepted + rejected`` always holds."""

    total: int = 0
    accepted: int = 0
    rejected: int = 0
    renamed: int = 0
    reasons: Counter = field(default_factory=Counter)

    def reject(self, reason: str) -> None:
        self.rejected += 1
        self.reasons[reason] += 1

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "accepted": self.accepted,
            "rejected": self.rejected,
            "renamed": self.renamed,
            "reasons": {r: self.reasons.get(r, 0) for r in REJECT_REASONS},
        }


@dataclass
class ParseResult:
    colors: List[NamedColor]
    stats: ParseStats


# ── Helpers (private) ────────────────────────────────────────────────────────
def _split_fields(line: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """
    Split a trimmed, non-comment line into (raw_name, hex_token, reason).
    The hex token is the last token past the leading one that starts with six
    hex digits; every token before it belongs to the name.
    """
    tokens = line.split()
    if len(tokens) < 2:
        return None, None, "too_few_tokens"

    for i in range(len(tokens) - 1, 0, -1):
        if _HEX_HEAD_RE.match(tokens[i]):
            return " ".join(tokens[:i]), tokens[i], None

    # No hex-looking token: classify by the second token
    digits = tokens[1].lstrip(COMMENT_MARKER)
    if len(digits) < HEX_DIGITS:
        return None, None, "short_hex"
    return None, None, "invalid_hex"


def parse_line(line: str) -> Tuple[Optional[Tuple[str, str]], Optional[str]]:
    """
    Does: Shape-check one raw line.
    Returns: ((identifier, six_hex_digits), None) on success, (None, reason) otherwise.
    """
    text = (line or "").strip()
    if not text:
        return None, "blank"
    if text.startswith(COMMENT_MARKER):
        return None, "comment"

    raw_name, hex_token, reason = _split_fields(text)
    if reason is not None:
        return None, reason

    ident = to_identifier(raw_name or "")
    if not ident:
        return None, "missing_name"

    code = hex_token.lstrip(COMMENT_MARKER)[:HEX_DIGITS]
    return (ident, code), None


# ── Core API (public) ────────────────────────────────────────────────────────
def parse_lines(lines: Iterable[str], reserved: Iterable[str] = ()) -> ParseResult:
    """
    Does:
        Parse every line; never raises on bad input. Accepted colors keep file
        order; a colliding identifier gets the next free numeric suffix.
        Names in `reserved` are never handed out (renamed like collisions).
    Returns:
        ParseResult with the colors and the accepted/rejected statistics.
    """
    stats = ParseStats()
    names = UniqueNames(reserved)
    colors: List[NamedColor] = []

    for lineno, line in enumerate(lines, start=1):
        stats.total += 1
        fields, reason = parse_line(line)
        if fields is None:
            stats.reject(reason)
            if reason not in ("blank", "comment"):
                log.debug("Line %d skipped (%s): %r", lineno, reason, line)
            continue

        ident, code = fields
        try:
            channels = hex_to_channels(code)
        except ValueError:
            stats.reject("invalid_hex")
            log.debug("Line %d skipped (invalid_hex): %r", lineno, line)
            continue

        name = names.claim(ident)
        if name != ident:
            stats.renamed += 1
            debug(f"Line {lineno}: '{ident}' already taken, renamed to '{name}'", topic="parse")

        colors.append(NamedColor(name, *channels))
        stats.accepted += 1

    log.info(
        "Parsed %d lines: %d accepted, %d rejected, %d renamed",
        stats.total, stats.accepted, stats.rejected, stats.renamed,
    )
    return ParseResult(colors=colors, stats=stats)
