# tests/test_color_ordering_table.py
"""Tests for color/ordering.py (descending HSV) and color/table.py (get / try_get)."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from color_survey_codegen.color import ColorTable, NamedColor, hsv_sort_key, is_hueless, sort_by_hsv


def _hsv(name, h, s, v):
    return SimpleNamespace(name=name, h=h, s=s, v=v)


# ──────────────────────────────────────────────────────────────────────────────
# Ordering
# ──────────────────────────────────────────────────────────────────────────────
def test_sort_descending_hue_then_saturation_then_value():
    a = _hsv("A", 300, 0.5, 0.2)
    b = _hsv("B", 300, 0.9, 0.8)
    c = _hsv("C", 100, 0.5, 0.9)
    assert [x.name for x in sort_by_hsv([a, b, c])] == ["B", "A", "C"]


def test_value_breaks_hue_and_saturation_ties():
    lo = _hsv("Lo", 200, 0.5, 0.1)
    hi = _hsv("Hi", 200, 0.5, 0.7)
    assert [x.name for x in sort_by_hsv([lo, hi])] == ["Hi", "Lo"]


def test_full_ties_keep_insertion_order():
    items = [_hsv(n, 42, 0.3, 0.3) for n in ("First", "Second", "Third")]
    assert [x.name for x in sort_by_hsv(items)] == ["First", "Second", "Third"]
    assert [x.name for x in sort_by_hsv(reversed(items))] == ["Third", "Second", "First"]


def test_sort_does_not_mutate_input():
    items = [_hsv("A", 1, 0, 0), _hsv("B", 2, 0, 0)]
    out = sort_by_hsv(items)
    assert [x.name for x in items] == ["A", "B"]
    assert [x.name for x in out] == ["B", "A"]


def test_real_colors_order():
    colors = [
        NamedColor.from_hex("Grey", "808080"),
        NamedColor.from_hex("Green", "00ff00"),
        NamedColor.from_hex("Purple", "800080"),
        NamedColor.from_hex("Magenta", "ff00ff"),
    ]
    assert [c.name for c in sort_by_hsv(colors)] == ["Magenta", "Purple", "Green", "Grey"]
    assert hsv_sort_key(colors[1]) == (False, -120.0, -1.0, -1.0)


def test_greys_rank_after_black_then_by_value():
    colors = [
        NamedColor.from_hex("Grey", "808080"),
        NamedColor.from_hex("White", "ffffff"),
        NamedColor.from_hex("Black", "000000"),
        NamedColor.from_hex("Red", "ff0000"),
    ]
    assert [c.name for c in sort_by_hsv(colors)] == ["Red", "Black", "White", "Grey"]
    assert is_hueless(colors[0]) and not is_hueless(colors[2])


# ──────────────────────────────────────────────────────────────────────────────
# Lookup table
# ──────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def table():
    return ColorTable(
        [
            NamedColor.from_hex("Red", "ff0000"),
            NamedColor.from_hex("Green", "00ff00"),
            NamedColor.from_hex("Blue", "0000ff"),
        ]
    )


def test_table_keeps_insertion_order(table):
    assert table.names() == ["Red", "Green", "Blue"]
    assert [c.name for c in table] == ["Red", "Green", "Blue"]
    assert len(table) == 3
    assert "Red" in table and "red" not in table


def test_get_returns_color(table):
    assert table.get("Green").rgb == (0.0, 1.0, 0.0)


def test_get_missing_raises_with_suggestion(table):
    with pytest.raises(KeyError) as excinfo:
        table.get("Redd")
    msg = excinfo.value.args[0]
    assert "Unknown color 'Redd'" in msg
    assert "Red" in msg.split("did you mean", 1)[1]


def test_try_get_never_raises(table):
    color, found = table.try_get("Blue")
    assert found is True and color.name == "Blue"
    assert table.try_get("Nope") == (None, False)


def test_duplicate_names_are_rejected(table):
    with pytest.raises(ValueError):
        table.add(NamedColor("Red", 0.5, 0.5, 0.5))


def test_suggest_on_empty_table():
    assert ColorTable().suggest("Red") == []
