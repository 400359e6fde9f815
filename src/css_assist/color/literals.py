"""
literals.py
===========

Does: Recognize color literals in CSS text (`#RRGGBB`, `#RGB`, `hsl(...)`), classify
      a matched span, compute its display swatch, and rewrite the hex token under
      a cursor into its HSL form.
Used By: highlight.highlight(), the CLI, host rendering passes.
Returns: Enum kinds, `ColorLiteral` records, swatch strings and RewriteResult values.
"""

from __future__ import annotations

import enum
import logging
import re
import string
from dataclasses import dataclass
from typing import Iterator, Optional

from css_assist.color.convert import (
    HSL_RE,
    InvalidFormat,
    hex_to_hsl,
    hsl_to_rgb_hex,
    parse_hsl,
)
from css_assist.general.types import RewriteResult

__all__ = [
    "ColorLiteralKind",
    "ColorLiteral",
    "classify_color_literal",
    "expand_hex3",
    "swatch_color",
    "find_color_literals",
    "hex_token_at",
    "hex_to_hsl_at",
]
__docformat__ = "google"

log = logging.getLogger(__name__)


class ColorLiteralKind(enum.Enum):
    HEX6 = "hex6"
    HEX3 = "hex3"
    HSL = "hsl"
    NONE = "none"


@dataclass(frozen=True)
class ColorLiteral:
    start: int
    end: int
    text: str
    kind: ColorLiteralKind
    swatch: Optional[str]  # '#rrggbb' background for the span


# Hex digits must not run on into more word characters ('#abcdef0', '#abcx')
_HEX6_LITERAL_RE = re.compile(r"#([0-9a-fA-F]{6})(?![\w-])")
_HEX3_LITERAL_RE = re.compile(r"#([0-9a-fA-F]{3})(?![\w-])")
_COLOR_SCAN_RE = re.compile(
    rf"{_HEX6_LITERAL_RE.pattern}|{_HEX3_LITERAL_RE.pattern}|{HSL_RE.pattern}",
    re.IGNORECASE,
)
_HEX_RUN_CHARS = frozenset("#0123456789abcdefABCDEF")


# ──────────────────────────────────────────────────────────────────────────────
# Classification & swatches
# ──────────────────────────────────────────────────────────────────────────────

def classify_color_literal(span: str) -> ColorLiteralKind:
    """Does: Decide which conversion path applies to a matched literal."""
    if not isinstance(span, str):
        return ColorLiteralKind.NONE
    if _HEX6_LITERAL_RE.fullmatch(span):
        return ColorLiteralKind.HEX6
    if _HEX3_LITERAL_RE.fullmatch(span):
        return ColorLiteralKind.HEX3
    if HSL_RE.fullmatch(span):
        return ColorLiteralKind.HSL
    return ColorLiteralKind.NONE


def expand_hex3(hex3: str) -> str:
    """Does: Duplicate each digit of a 3-digit shorthand ('abc' → 'aabbcc')."""
    digits = hex3[1:] if hex3.startswith("#") else hex3
    if len(digits) != 3 or not all(c in string.hexdigits for c in digits):
        raise InvalidFormat(f"expected 3 hex digits, got {hex3!r}")
    return "".join(c * 2 for c in digits)


def swatch_color(span: str) -> Optional[str]:
    """
    Does: Compute the display color of a color literal.
    Returns: '#rrggbb' (lowercase) or None when the span is not a color literal.
    """
    kind = classify_color_literal(span)
    if kind is ColorLiteralKind.HEX6:
        return "#" + span[1:].lower()
    if kind is ColorLiteralKind.HEX3:
        return "#" + expand_hex3(span).lower()
    if kind is ColorLiteralKind.HSL:
        return "#" + hsl_to_rgb_hex(*parse_hsl(span))
    return None


def find_color_literals(text: str) -> Iterator[ColorLiteral]:
    """Does: Scan left-to-right for non-overlapping color literals, with swatches."""
    for m in _COLOR_SCAN_RE.finditer(text):
        span = m.group(0)
        yield ColorLiteral(
            start=m.start(),
            end=m.end(),
            text=span,
            kind=classify_color_literal(span),
            swatch=swatch_color(span),
        )


# ──────────────────────────────────────────────────────────────────────────────
# Hex token under cursor → HSL
# ──────────────────────────────────────────────────────────────────────────────

def hex_token_at(text: str, pos: int) -> tuple[int, int]:
    """
    Does: Find the run of '#'/hex-digit characters touching `pos`.
    Returns: (start, end) offsets; an empty span when nothing touches the cursor.
    """
    pos = max(0, min(pos, len(text)))
    start = pos
    while start > 0 and text[start - 1] in _HEX_RUN_CHARS:
        start -= 1
    end = pos
    while end < len(text) and text[end] in _HEX_RUN_CHARS:
        end += 1
    return start, end


def hex_to_hsl_at(text: str, pos: int) -> RewriteResult:
    """
    Does: Replace the 6-digit hex color under the cursor (leading '#' optional)
          with its `hsl(H,S%,L%)` form.
    Returns: RewriteResult covering the inserted HSL string.
    Raises: InvalidFormat quoting the token when it is not 6 hex digits.
    """
    start, end = hex_token_at(text, pos)
    token = text[start:end]
    digits = token[1:] if token.startswith("#") else token
    hsl = hex_to_hsl(digits)  # raises InvalidFormat with the digits quoted
    new_text = text[:start] + hsl + text[end:]
    log.debug("hex_to_hsl_at: %r at [%d:%d] → %s", token, start, end, hsl)
    return RewriteResult(new_text, start, start + len(hsl))
