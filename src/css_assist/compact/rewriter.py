"""
rewriter.py
===========

Does: Apply ordered find/replace rules to text. Regex rules run first, each one a
      single left-to-right pass over the whole text. Literal rules then run as a
      simultaneous substitution: every find string is first swapped for a private
      placeholder code point, and only afterwards are placeholders swapped for
      their replacements, so no rule ever re-matches another rule's output.
Used By: css_rules.compact_css(), block.compact_block(), block.compact_region().
Returns: Rewritten strings; raises PlaceholderCollision on reserved code points.

Notes:
- Rules ('a'→'c', 'c'→'d') on 'abcd' give 'cbdd', never 'dbdd'.
- The placeholder band is Supplementary Private Use Area-A (U+F0000..U+FFFFD);
  input text and rule strings must stay out of it.
"""

from __future__ import annotations

import logging
import re
from re import Pattern
from typing import Sequence, Tuple, Union

from css_assist.general.utils import debug

__all__ = [
    "PLACEHOLDER_BASE",
    "PLACEHOLDER_LIMIT",
    "LiteralRule",
    "RegexRule",
    "PlaceholderCollision",
    "placeholder_for",
    "replace_pairs",
    "replace_regexp_pairs",
    "compact",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Placeholder band ─────────────────────────────────────────────────────────
PLACEHOLDER_BASE = 0xF0000
PLACEHOLDER_LIMIT = 0xFFFFD  # last assignable code point of the band
_BAND_RE = re.compile("[\U000F0000-\U000FFFFD]")

# ── Types ─────────────────────────────────────────────────────────────────────
LiteralRule = Tuple[str, str]
RegexRule = Tuple[Union[str, Pattern[str]], str]


class PlaceholderCollision(ValueError):
    """Raise when text or a rule already holds a code point from the placeholder band."""


def placeholder_for(index: int) -> str:
    """Does: The reserved marker standing in for rule `index` between the two phases."""
    cp = PLACEHOLDER_BASE + index
    if cp > PLACEHOLDER_LIMIT:
        raise ValueError(f"too many literal rules: {index + 1}")
    return chr(cp)


def _check_band(text: str, pairs: Sequence[LiteralRule]) -> None:
    m = _BAND_RE.search(text)
    if m:
        raise PlaceholderCollision(
            f"text holds reserved code point U+{ord(m.group(0)):05X} at offset {m.start()}"
        )
    for i, (find, rep) in enumerate(pairs):
        if _BAND_RE.search(find) or _BAND_RE.search(rep):
            raise PlaceholderCollision(f"rule #{i} ({find!r} → {rep!r}) holds a reserved code point")


# =============================================================================
# 1) LITERAL PAIRS (two-phase)
# =============================================================================

def replace_pairs(text: str, pairs: Sequence[LiteralRule]) -> str:
    """
    Does: Replace every occurrence of each find string with its replacement, all
          rules at once. Phase 1 maps finds → placeholders in declared order (an
          earlier rule consumes text before a later one sees it); phase 2 maps
          placeholders → replacements.
    Raises: PlaceholderCollision, ValueError on an empty find string.
    """
    _check_band(text, pairs)
    for i, (find, _) in enumerate(pairs):
        if not find:
            raise ValueError(f"rule #{i} has an empty find string")

    markers = [placeholder_for(i) for i in range(len(pairs))]

    for marker, (find, _) in zip(markers, pairs):
        hits = text.count(find)
        if hits:
            text = text.replace(find, marker)
            debug(f"phase1 {find!r}: {hits} hit(s)", topic="compact")

    for marker, (_, rep) in zip(markers, pairs):
        text = text.replace(marker, rep)

    return text


# =============================================================================
# 2) REGEX PAIRS (sequential)
# =============================================================================

def replace_regexp_pairs(text: str, pairs: Sequence[RegexRule]) -> str:
    """Does: Apply each (pattern, replacement) once over the whole text, in order."""
    for pattern, rep in pairs:
        text, n = re.subn(pattern, rep, text)
        if n:
            debug(f"regex {getattr(pattern, 'pattern', pattern)!r}: {n} hit(s)", topic="compact")
    return text


# =============================================================================
# 3) COMPACT
# =============================================================================

def compact(
    text: str,
    literal_rules: Sequence[LiteralRule],
    regex_rules: Sequence[RegexRule] = (),
) -> str:
    """Does: Regex rules first, then the simultaneous literal substitution."""
    before = len(text)
    out = replace_pairs(replace_regexp_pairs(text, regex_rules), literal_rules)
    log.debug("compact: %d → %d chars (%d literal, %d regex rules)",
              before, len(out), len(literal_rules), len(regex_rules))
    return out
