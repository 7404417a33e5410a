"""
table.py

Does: Ordered name → NamedColor lookup table mirroring the generated map section,
      with a strict accessor (get) and a non-failing one (try_get).
Returns: ColorTable; missing names raise KeyError with fuzzy "did you mean" hints.
Used by: Pipeline (uniqueness guard before rendering) and the C# map renderer.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from rapidfuzz import fuzz, process  # performant, no numpy dependency

from .model import NamedColor

__all__ = ["ColorTable", "SUGGEST_LIMIT", "SUGGEST_CUTOFF"]

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_LIMIT = 3
SUGGEST_CUTOFF = 75


class ColorTable:
    """Insertion-ordered, name-unique collection of NamedColor."""

    def __init__(self, colors: Iterable[NamedColor] = ()) -> None:
        self._by_name: Dict[str, NamedColor] = {}
        for color in colors:
            self.add(color)

    def add(self, color: NamedColor) -> None:
        """Does: Insert `color`; a name already present is a ValueError."""
        if color.name in self._by_name:
            raise ValueError(f"Duplicate color name: {color.name!r}")
        self._by_name[color.name] = color

    # ── Accessors ────────────────────────────────────────────────────────────
    def get(self, name: str) -> NamedColor:
        """
        Does: Return the color registered under `name` (case-sensitive).
        Raises: KeyError naming the closest known names when absent.
        """
        try:
            return self._by_name[name]
        except KeyError:
            hints = self.suggest(name)
            log.debug("Lookup miss for %r (suggestions=%s)", name, hints)
            msg = f"Unknown color {name!r}"
            if hints:
                msg += f"; did you mean {', '.join(hints)}?"
            raise KeyError(msg) from None

    def try_get(self, name: str) -> Tuple[Optional[NamedColor], bool]:
        """Does: Never fails. Returns (color, True) when found, else (None, False)."""
        color = self._by_name.get(name)
        return color, color is not None

    def suggest(self, name: str, limit: int = SUGGEST_LIMIT) -> List[str]:
        """Does: Closest registered names by fuzzy ratio (best first)."""
        if not name or not self._by_name:
            return []
        matches = process.extract(
            name,
            list(self._by_name),
            scorer=fuzz.WRatio,
            limit=limit,
            score_cutoff=SUGGEST_CUTOFF,
        )
        return [choice for choice, _score, _idx in matches]

    # ── Container protocol ───────────────────────────────────────────────────
    def names(self) -> List[str]:
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[NamedColor]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
