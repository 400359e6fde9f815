"""
color.
=====

Does: Aggregate the color model converter (hex ↔ HSL), literal recognition and
      swatches, and CSS named-color lookups.
Used By: highlight, the CLI, host command surfaces.
Returns: Pure functions and small frozen records; no side effects.
"""

# ── Conversion ───────────────────────────────────────────────────────────────
from .convert import (
    InvalidFormat,
    OutOfRangeNumeric,
    format_hsl,
    hex_to_hsl,
    hex_to_hsl_values,
    hex_to_rgb_fractions,
    hsl_to_rgb_hex,
    normalize_hsl,
    parse_hsl,
    random_hsl,
)

# ── Literals ─────────────────────────────────────────────────────────────────
from .literals import (
    ColorLiteral,
    ColorLiteralKind,
    classify_color_literal,
    expand_hex3,
    find_color_literals,
    hex_to_hsl_at,
    swatch_color,
)

# ── Named colors ─────────────────────────────────────────────────────────────
from .vocab import get_css3_color_names, named_color_swatch

__all__ = [
    # convert
    "InvalidFormat",
    "OutOfRangeNumeric",
    "hex_to_rgb_fractions",
    "hex_to_hsl_values",
    "hex_to_hsl",
    "format_hsl",
    "parse_hsl",
    "normalize_hsl",
    "hsl_to_rgb_hex",
    "random_hsl",
    # literals
    "ColorLiteral",
    "ColorLiteralKind",
    "classify_color_literal",
    "expand_hex3",
    "swatch_color",
    "find_color_literals",
    "hex_to_hsl_at",
    # named colors
    "get_css3_color_names",
    "named_color_swatch",
]
