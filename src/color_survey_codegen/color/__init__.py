"""
color.
=====

Does: Aggregate the color-domain core: the NamedColor record with HSV derivation,
      the descending-HSV ordering and the name → color lookup table.
Used By: Survey parser, pipeline, renderers.
Returns: Pure data structures and functions; no side effects.
"""

# ── Model ────────────────────────────────────────────────────────────────────
from .model import (
    HEX_DIGITS,
    NamedColor,
    clamp01,
    hex_to_channels,
    rgb_to_hsv,
)

# ── Ordering & lookup ────────────────────────────────────────────────────────
from .ordering import hsv_sort_key, is_hueless, sort_by_hsv
from .table import ColorTable

__all__ = [
    # model
    "HEX_DIGITS",
    "NamedColor",
    "clamp01",
    "hex_to_channels",
    "rgb_to_hsv",
    # ordering
    "hsv_sort_key",
    "is_hueless",
    "sort_by_hsv",
    # lookup
    "ColorTable",
]
