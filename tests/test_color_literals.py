# tests/test_color_literals.py
from __future__ import annotations

import pytest

"""
literals tests
==============

Does: Validate color-literal classification, hex3 expansion, swatch computation,
      the left-to-right literal scan, and the hex-at-cursor rewrite.
"""

from css_assist.color import (
    ColorLiteralKind,
    InvalidFormat,
    classify_color_literal,
    expand_hex3,
    find_color_literals,
    hex_to_hsl_at,
    swatch_color,
)
from css_assist.color.literals import hex_token_at


# ──────────────────────────────────────────────────────────────────────────────
# Classification & swatches
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "span,kind",
    [
        ("#abc", ColorLiteralKind.HEX3),
        ("#AABBCC", ColorLiteralKind.HEX6),
        ("hsl(37,100%,91%)", ColorLiteralKind.HSL),
        ("hsl( 37 , 100% , 91% )", ColorLiteralKind.HSL),
        ("#abcd", ColorLiteralKind.NONE),
        ("abcdef", ColorLiteralKind.NONE),
        ("red", ColorLiteralKind.NONE),
    ],
)
def test_classify_color_literal(span, kind):
    assert classify_color_literal(span) is kind


def test_hex3_expansion_matches_hex6_swatch():
    assert expand_hex3("abc") == "aabbcc"
    assert expand_hex3("#F0a") == "FF00aa"
    assert swatch_color("#abc") == swatch_color("#aabbcc") == "#aabbcc"


def test_expand_hex3_rejects_other_lengths():
    with pytest.raises(InvalidFormat):
        expand_hex3("abcd")


@pytest.mark.parametrize("bad", ["a#b", "##ab", "#a#b", "ab#", "xyz"])
def test_expand_hex3_rejects_non_hex_digits(bad):
    with pytest.raises(InvalidFormat) as exc:
        expand_hex3(bad)
    assert repr(bad) in str(exc.value)


def test_swatch_for_hsl_and_non_literal():
    assert swatch_color("hsl(0,100%,50%)") == "#ff0000"
    assert swatch_color("#ABCDEF") == "#abcdef"
    assert swatch_color("blue") is None


# ──────────────────────────────────────────────────────────────────────────────
# Scan
# ──────────────────────────────────────────────────────────────────────────────
def test_find_color_literals_in_rule_block():
    css = "a{color:#fff;background:#123456;border-color:hsl(120, 100%, 50%)}"
    found = list(find_color_literals(css))

    assert [f.kind for f in found] == [
        ColorLiteralKind.HEX3,
        ColorLiteralKind.HEX6,
        ColorLiteralKind.HSL,
    ]
    assert [f.swatch for f in found] == ["#ffffff", "#123456", "#00ff00"]
    for f in found:
        assert css[f.start:f.end] == f.text


def test_find_color_literals_skips_overlong_hex_runs():
    assert list(find_color_literals("x #abcdef0 y #abcd z")) == []


# ──────────────────────────────────────────────────────────────────────────────
# Hex under cursor → HSL
# ──────────────────────────────────────────────────────────────────────────────
def test_hex_to_hsl_at_replaces_hash_token():
    text = "color: #ffefd5;"
    res = hex_to_hsl_at(text, 10)
    assert res.text == "color: hsl(37,100%,91%);"
    assert res.span_text == "hsl(37,100%,91%)"
    assert (res.start, res.end) == (7, 23)


def test_hex_to_hsl_at_without_hash_and_cursor_at_end():
    text = "a ffefd5 b"
    res = hex_to_hsl_at(text, 8)
    assert res.text == "a hsl(37,100%,91%) b"


def test_hex_token_at_bounds():
    assert hex_token_at("x:#0a0b0c;", 5) == (2, 9)
    assert hex_token_at("x: y", 2) == (2, 2)


def test_hex_to_hsl_at_invalid_token_raises():
    with pytest.raises(InvalidFormat):
        hex_to_hsl_at("color: red;", 8)
    with pytest.raises(InvalidFormat):
        hex_to_hsl_at("color: #fff;", 9)
