"""
convert.py
==========

Does: Convert between 6-digit hex RGB and HSL (`hsl(H,S%,L%)`) representations,
      with a lossless float path for round trips and a clamp-or-fail policy for
      out-of-range HSL components.
Used By: Color literal swatches, hex-at-cursor rewriting, the CLI `hsl` command.
Returns: Pure strings/tuples; no side effects.
"""

from __future__ import annotations

import logging
import math
import random
import re
from typing import Optional, Tuple

__all__ = [
    "InvalidFormat",
    "OutOfRangeNumeric",
    "RGBFractions",
    "HSLValues",
    "hex_to_rgb_fractions",
    "hex_to_hsl_values",
    "hex_to_hsl",
    "format_hsl",
    "parse_hsl",
    "normalize_hsl",
    "hsl_to_rgb_hex",
    "random_hsl",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGBFractions = Tuple[float, float, float]  # each channel in [0.0, 1.0]
HSLValues = Tuple[float, float, float]  # (degrees, percent, percent)


# ── Errors ────────────────────────────────────────────────────────────────────
class InvalidFormat(ValueError):
    """Raise when text is not the color notation the operation expects."""


class OutOfRangeNumeric(ValueError):
    """Raise (strict mode only) when an HSL component lies outside its range."""


_HEX6_RE = re.compile(r"[0-9a-fA-F]{6}")
_NUM = r"(\d+(?:\.\d+)?|\.\d+)"
HSL_RE = re.compile(
    rf"hsl\(\s*{_NUM}\s*,\s*{_NUM}\s*%\s*,\s*{_NUM}\s*%\s*\)",
    re.IGNORECASE,
)


# =============================================================================
# 1) HEX → RGB → HSL
# =============================================================================

def hex_to_rgb_fractions(hex6: str) -> RGBFractions:
    """Does: Split 'rrggbb' into byte pairs and scale each to [0, 1] (x / 255.0)."""
    if not isinstance(hex6, str) or not _HEX6_RE.fullmatch(hex6):
        raise InvalidFormat(f"expected 6 hex digits, got {hex6!r}")
    return (
        int(hex6[0:2], 16) / 255.0,
        int(hex6[2:4], 16) / 255.0,
        int(hex6[4:6], 16) / 255.0,
    )


def _rgb_to_hsl(r: float, g: float, b: float) -> HSLValues:
    hi = max(r, g, b)
    lo = min(r, g, b)
    lightness = (hi + lo) / 2
    delta = hi - lo

    # achromatic: hue and saturation are 0 by convention
    if delta == 0:
        return 0.0, 0.0, lightness * 100

    if lightness <= 0.5:
        saturation = delta / (hi + lo)
    else:
        saturation = delta / (2 - hi - lo)

    if hi == r:
        hue = 60 * ((g - b) / delta)
    elif hi == g:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)
    if hue < 0:
        hue += 360

    return hue, saturation * 100, lightness * 100


def hex_to_hsl_values(hex6: str) -> HSLValues:
    """Does: Unrounded (hue°, saturation%, lightness%) for a 6-digit hex string."""
    return _rgb_to_hsl(*hex_to_rgb_fractions(hex6))


def format_hsl(h: float, s: float, l: float) -> str:
    """Does: Render `hsl(H,S%,L%)` truncating each component to an integer."""
    return f"hsl({int(h) % 360},{int(s)}%,{int(l)}%)"


def hex_to_hsl(hex6: str) -> str:
    """
    Does: Convert 'ffefd5' → 'hsl(37,100%,91%)'.
    Returns: Compact HSL literal, no spaces, integer components.
    Raises: InvalidFormat when `hex6` is not exactly six hex digits (no '#').
    """
    out = format_hsl(*hex_to_hsl_values(hex6))
    log.debug("hex_to_hsl %s → %s", hex6, out)
    return out


# =============================================================================
# 2) HSL → RGB HEX
# =============================================================================

def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def normalize_hsl(h: float, s: float, l: float, *, strict: bool = False) -> HSLValues:
    """
    Does: Bring HSL components into range: hue wraps modulo 360, saturation and
          lightness clamp to [0, 100].
    Raises: OutOfRangeNumeric in strict mode instead of clamping.
    """
    if strict:
        if not 0 <= h < 360:
            raise OutOfRangeNumeric(f"hue {h} outside [0, 360)")
        for name, v in (("saturation", s), ("lightness", l)):
            if not 0 <= v <= 100:
                raise OutOfRangeNumeric(f"{name} {v} outside [0, 100]")
        return h, s, l

    clamped = (h % 360, min(max(s, 0.0), 100.0), min(max(l, 0.0), 100.0))
    if clamped != (h, s, l):
        log.debug("HSL clamped: %r → %r", (h, s, l), clamped)
    return clamped


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb_hex(h: float, s: float, l: float, *, strict: bool = False) -> str:
    """
    Does: Inverse transform of `hex_to_hsl_values`; hue in degrees, S/L in percent.
    Returns: 'rrggbb' lowercase, each channel rounded half away from zero.
    """
    h, s, l = normalize_hsl(h, s, l, strict=strict)
    hue, sat, light = h / 360, s / 100, l / 100

    if sat == 0:
        channels = (light, light, light)
    else:
        q = light * (1 + sat) if light < 0.5 else light + sat - light * sat
        p = 2 * light - q
        channels = (
            _hue_to_channel(p, q, hue + 1 / 3),
            _hue_to_channel(p, q, hue),
            _hue_to_channel(p, q, hue - 1 / 3),
        )
    return "".join(f"{_round_half_away(c * 255):02x}" for c in channels)


def parse_hsl(text: str, *, strict: bool = False) -> HSLValues:
    """
    Does: Read 'hsl(H, S%, L%)' (whitespace and decimals tolerated).
    Returns: (hue°, saturation%, lightness%) normalized per `normalize_hsl`.
    Raises: InvalidFormat when the text is not a single hsl() literal.
    """
    m = HSL_RE.fullmatch(text.strip()) if isinstance(text, str) else None
    if not m:
        raise InvalidFormat(f"not an hsl() color: {text!r}")
    h, s, l = (float(g) for g in m.groups())
    return normalize_hsl(h, s, l, strict=strict)


# =============================================================================
# 3) RANDOM LITERAL
# =============================================================================

def random_hsl(rng: Optional[random.Random] = None) -> str:
    """Does: Produce a random `hsl(H,S%,L%)` literal (full hue/saturation, lightness 0–100)."""
    rng = rng or random.Random()
    return format_hsl(rng.randrange(360), rng.randrange(101), rng.randrange(101))
