"""
model.py
========

Does: Define the immutable NamedColor record (normalized RGB + derived HSV) and
      the hex → 0..1 channel conversion used by the survey parser.
Used By: Survey parser, ordering, lookup table, renderers.
Returns: NamedColor instances; pure helpers clamp01(), hex_to_channels(), rgb_to_hsv().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

import webcolors

__all__ = [
    "HEX_DIGITS",
    "Channels",
    "NamedColor",
    "clamp01",
    "hex_to_channels",
    "rgb_to_hsv",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types & constants ─────────────────────────────────────────────────────────
Channels = Tuple[float, float, float]

HEX_DIGITS = 6


# =============================================================================
# 1) CHANNEL HELPERS
# =============================================================================

def clamp01(f: float) -> float:
    """Does: Clamp a float into [0, 1]."""
    return max(0.0, min(1.0, f))


def hex_to_channels(code: str) -> Channels:
    """
    Does: Convert a 6-digit hex code (optional leading '#') into three 0..1 floats.
    Returns: (r, g, b), each byte divided by 255 and clamped.
    Raises: ValueError when the code is not exactly six hex digits.
    """
    digits = code[1:] if code.startswith("#") else code
    if len(digits) != HEX_DIGITS:
        raise ValueError(f"Expected {HEX_DIGITS} hex digits, got {code!r}")
    rgb = webcolors.hex_to_rgb(f"#{digits}")
    return clamp01(rgb.red / 255), clamp01(rgb.green / 255), clamp01(rgb.blue / 255)


def rgb_to_hsv(r: float, g: float, b: float) -> Channels:
    """
    Does: Derive (h, s, v) from normalized RGB with the max/min/delta formula.
          Hue is in (0, 360] for chromatic colors; black and greys get h = s = 0.
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    v = mx
    # black
    if mx <= 0.0:
        return 0.0, 0.0, v

    s = delta / mx
    # achromatic grey: the branch formulas would divide by zero
    if delta <= 0.0:
        return 0.0, 0.0, v

    if r >= mx:
        h = (g - b) / delta
    elif g >= mx:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta

    h *= 60.0
    if h <= 0.0:
        h += 360.0
    return h, s, v


# =============================================================================
# 2) RECORD
# =============================================================================

@dataclass(frozen=True, eq=False)
class NamedColor:
    """
    An immutable named survey color.

    Channels are clamped at construction; h/s/v are derived once and cannot be
    set by callers. Equality and hashing use ``name`` only (ordinal).
    """

    name: str
    r: float
    g: float
    b: float
    h: float = field(init=False)
    s: float = field(init=False)
    v: float = field(init=False)

    def __post_init__(self) -> None:
        r, g, b = clamp01(self.r), clamp01(self.g), clamp01(self.b)
        h, s, v = rgb_to_hsv(r, g, b)
        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "r", r)
        object.__setattr__(self, "g", g)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "h", h)
        object.__setattr__(self, "s", s)
        object.__setattr__(self, "v", v)

    @classmethod
    def from_hex(cls, name: str, code: str) -> NamedColor:
        """Does: Build a color from a 6-digit hex code (ValueError if malformed)."""
        return cls(name, *hex_to_channels(code))

    # ── Derived views ────────────────────────────────────────────────────────
    @property
    def rgb(self) -> Channels:
        return self.r, self.g, self.b

    @property
    def hsv(self) -> Channels:
        return self.h, self.s, self.v

    @property
    def rgb_bytes(self) -> Tuple[int, int, int]:
        """Does: Round each channel back to its nearest 0..255 byte."""
        return round(self.r * 255), round(self.g * 255), round(self.b * 255)

    @property
    def hex(self) -> str:
        return webcolors.rgb_to_hex(self.rgb_bytes)

    # ── Identity by name ─────────────────────────────────────────────────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedColor):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"({self.r}, {self.g}, {self.b})"
