# survey/names.py
# ──────────────────────────────────────────────────────────────
# Survey name → source identifier normalization
# ──────────────────────────────────────────────────────────────
"""
names.

Does: Turn raw survey names ("robin's egg", "blue/green", "yellow-ish green")
      into PascalCase identifiers and keep them unique with a deterministic
      counter suffix.
Returns: to_identifier(), UniqueNames.
Used by: Survey parser.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, Set

__all__ = ["to_identifier", "UniqueNames"]

# Characters that split words (slash is a word break in survey names like "blue/green")
_WORD_BREAKS_RE = re.compile(r"[/\-_\s]+")
# Apostrophes are dropped without splitting ("robin's" → "robins")
_APOSTROPHES = {"'", "‘", "’", "ʼ", "`"}
_NON_ALNUM_RE = re.compile(r"[^0-9a-zA-Z]")


# ──────────────────────────────────────────────────────────────
# 1) IDENTIFIER NORMALIZATION
# ──────────────────────────────────────────────────────────────


def _ascii_fold(s: str) -> str:
    """
    Does: NFKD fold and drop combining marks ("café" → "cafe").
    """
    s = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in s if not unicodedata.combining(ch))


def to_identifier(raw: str) -> str:
    """
    Does: Normalize a raw survey name:
          - apostrophes removed
          - '/', '-', '_' and whitespace become word breaks
          - remaining punctuation dropped
          - each word lowercased then capitalized, words glued
          - leading digit guarded with '_'
    Returns: Identifier string, or "" when nothing usable is left.
    """
    if not isinstance(raw, str):
        return ""
    s = _ascii_fold(raw)
    for ch in _APOSTROPHES:
        s = s.replace(ch, "")

    words = [_NON_ALNUM_RE.sub("", w) for w in _WORD_BREAKS_RE.split(s)]
    ident = "".join(w.capitalize() for w in words if w)
    if ident and ident[0].isdigit():
        ident = "_" + ident
    return ident


# ──────────────────────────────────────────────────────────────
# 2) UNIQUENESS
# ──────────────────────────────────────────────────────────────


class UniqueNames:
    """
    Seen-names registry. ``claim`` returns the name itself when free, otherwise
    the first of ``name1``, ``name2``, … not yet taken. Ordinal comparison.
    """

    def __init__(self, taken: Iterable[str] = ()) -> None:
        self._seen: Set[str] = set(taken)

    def claim(self, name: str) -> str:
        candidate = name
        counter = 0
        while candidate in self._seen:
            counter += 1
            candidate = f"{name}{counter}"
        self._seen.add(candidate)
        return candidate

    def __contains__(self, name: object) -> bool:
        return name in self._seen

    def __len__(self) -> int:
        return len(self._seen)
