from __future__ import annotations

import pytest

from color_survey_codegen.survey import names as N

"""
Tests: survey/names.py

Objectifs :
- to_identifier() : PascalCase, slash/hyphen as word breaks, apostrophes dropped
- UniqueNames.claim() : deterministic numeric suffixes, never reuses a taken name
"""


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("red", "Red"),
        ("RED", "Red"),
        ("cloudy blue", "CloudyBlue"),
        ("robin's egg blue", "RobinsEggBlue"),
        ("blue/green", "BlueGreen"),
        ("yellow-ish green", "YellowIshGreen"),
        ("  light   pink ", "LightPink"),
        ("café au lait", "CafeAuLait"),
        ("7up green", "_7upGreen"),
        ("puke green!", "PukeGreen"),
    ],
)
def test_to_identifier(raw, expected):
    assert N.to_identifier(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "!!!", "'/'", None])
def test_to_identifier_empty_when_nothing_usable(raw):
    assert N.to_identifier(raw) == ""


def test_claim_appends_incrementing_counter():
    names = N.UniqueNames()
    assert names.claim("Red") == "Red"
    assert names.claim("Red") == "Red1"
    assert names.claim("Red") == "Red2"
    assert len(names) == 3


def test_claim_skips_names_already_taken_literally():
    names = N.UniqueNames(["Red", "Red1"])
    assert names.claim("Red") == "Red2"
    # a literal 'Red1' from the file collides with the generated one
    assert names.claim("Red1") == "Red11"
    assert "Red11" in names


def test_claim_is_deterministic():
    seq = ["Blue", "Blue", "Teal", "Blue", "Teal"]

    def run():
        n = N.UniqueNames()
        return [n.claim(s) for s in seq]

    assert run() == run() == ["Blue", "Blue1", "Teal", "Blue2", "Teal1"]
