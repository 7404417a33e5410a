# tests/test_color_model.py
"""
model tests
===========

Does: Validate hex → channel conversion, clamping, HSV derivation (black, grey,
      primary and wrap-around hues), name-only identity and immutability.
"""

from __future__ import annotations

import dataclasses
import importlib

import pytest

model = importlib.import_module("color_survey_codegen.color.model")
NamedColor = model.NamedColor


# ──────────────────────────────────────────────────────────────────────────────
# Hex conversion
# ──────────────────────────────────────────────────────────────────────────────
def test_every_byte_stays_in_unit_range_and_rounds_back():
    for v in range(256):
        code = f"{v:02x}{255 - v:02x}{(v * 7) % 256:02x}"
        r, g, b = model.hex_to_channels(code)
        assert all(0.0 <= c <= 1.0 for c in (r, g, b))
        color = NamedColor("Probe", r, g, b)
        assert color.rgb_bytes == (v, 255 - v, (v * 7) % 256)
        assert color.hex == f"#{code}"


def test_hex_accepts_leading_hash_and_uppercase():
    assert model.hex_to_channels("#FF0000") == (1.0, 0.0, 0.0)
    assert NamedColor.from_hex("CloudyBlue", "ACC2D9").hex == "#acc2d9"


@pytest.mark.parametrize("bad", ["ff00", "ff00000", "gg0000", "", "#12"])
def test_hex_rejects_malformed_codes(bad):
    with pytest.raises(ValueError):
        model.hex_to_channels(bad)


def test_channels_are_clamped_at_construction():
    c = NamedColor("Loud", 1.5, -0.25, 0.5)
    assert c.rgb == (1.0, 0.0, 0.5)
    assert model.clamp01(2.0) == 1.0 and model.clamp01(-3.0) == 0.0


# ──────────────────────────────────────────────────────────────────────────────
# HSV derivation
# ──────────────────────────────────────────────────────────────────────────────
def test_black_is_all_zero():
    c = NamedColor.from_hex("Black", "000000")
    assert c.hsv == (0.0, 0.0, 0.0)


def test_grey_has_no_hue_or_saturation():
    c = NamedColor.from_hex("Grey", "808080")
    assert c.h == 0.0 and c.s == 0.0
    assert c.v == pytest.approx(128 / 255)


@pytest.mark.parametrize(
    "code, hue",
    [
        ("ff0000", 360.0),  # red wraps from 0 into (0, 360]
        ("00ff00", 120.0),
        ("0000ff", 240.0),
        ("ff00ff", 300.0),
        ("ffff00", 60.0),
        ("00ffff", 180.0),
    ],
)
def test_primary_and_secondary_hues(code, hue):
    c = NamedColor.from_hex("Probe", code)
    assert c.h == pytest.approx(hue)
    assert c.s == pytest.approx(1.0)
    assert c.v == pytest.approx(1.0)


def test_partial_saturation_and_value():
    # r=0.8, g=0.4, b=0.2 → max 0.8, delta 0.6, hue 60*(0.2/0.6)
    h, s, v = model.rgb_to_hsv(0.8, 0.4, 0.2)
    assert v == pytest.approx(0.8)
    assert s == pytest.approx(0.75)
    assert h == pytest.approx(20.0)


# ──────────────────────────────────────────────────────────────────────────────
# Identity & immutability
# ──────────────────────────────────────────────────────────────────────────────
def test_equality_and_hash_use_name_only():
    a = NamedColor("Red", 1.0, 0.0, 0.0)
    b = NamedColor("Red", 0.0, 1.0, 0.0)
    c = NamedColor("red", 1.0, 0.0, 0.0)
    assert a == b and hash(a) == hash(b)
    assert a != c  # ordinal, case-sensitive
    assert len({a, b, c}) == 2


def test_record_is_frozen():
    c = NamedColor("Red", 1.0, 0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.h = 10.0  # type: ignore[misc]
    with pytest.raises(TypeError):
        NamedColor("Red", 1.0, 0.0, 0.0, h=3.0)  # type: ignore[call-arg]
