"""
ordering.py

Does: Deterministic output ordering for survey colors: descending hue, then
      descending saturation, then descending value. Greys (no saturation but
      some value) have no hue and rank after every hued color and black.
Returns: hsv_sort_key() and sort_by_hsv() (stable, insertion order on full ties).
"""

from __future__ import annotations

from typing import Iterable, List, Protocol, Tuple, TypeVar

__all__ = ["HSVLike", "hsv_sort_key", "is_hueless", "sort_by_hsv"]


class HSVLike(Protocol):
    h: float
    s: float
    v: float


T = TypeVar("T", bound=HSVLike)


def is_hueless(color: HSVLike) -> bool:
    """Greys: zero saturation above black, where hue is undefined."""
    return color.s <= 0.0 and color.v > 0.0


def hsv_sort_key(color: HSVLike) -> Tuple[bool, float, float, float]:
    """Composite key; negated so an ascending sort yields descending H, S, V."""
    return is_hueless(color), -color.h, -color.s, -color.v


def sort_by_hsv(colors: Iterable[T]) -> List[T]:
    """
    Does: Sort colors by descending (h, s, v). Python's sort is stable, so entries
          with identical HSV keep their insertion order.
    Returns: New list; the input is left untouched.
    """
    return sorted(colors, key=hsv_sort_key)
