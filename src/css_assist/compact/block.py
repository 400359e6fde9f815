"""
block.py
========

Does: Locate the blank-line-delimited block around a cursor and fold it onto one
      line; compact an explicit range with the CSS rule set.
Used By: Host commands (compact block / compact region), the CLI.
Returns: (start, end) bounds and RewriteResult values; text outside the rewritten
         range is returned byte-for-byte unchanged.
"""

from __future__ import annotations

import logging
import re

from css_assist.compact.css_rules import compact_css
from css_assist.compact.rewriter import RegexRule, replace_regexp_pairs
from css_assist.general.types import RewriteResult

__all__ = ["BLOCK_REGEX_RULES", "block_bounds", "compact_block", "compact_region"]

log = logging.getLogger(__name__)

# one or more blank (whitespace-only) lines; LF or CRLF endings
_BLANK_LINES_RE = re.compile(r"\r?\n(?:[ \t\r]*\n)+")

BLOCK_REGEX_RULES: tuple[RegexRule, ...] = (
    (re.compile(r"\r?\n"), " "),
    (re.compile(r" {2,}"), " "),
)


def block_bounds(text: str, pos: int) -> tuple[int, int]:
    """
    Does: Find the maximal span around `pos` not crossing a blank-line separator.
    Returns: (start, end); start is just past the separator above (or 0), end is
             where the separator below begins (or len(text)). A cursor sitting on
             a blank line belongs to the block above it.
    """
    pos = max(0, min(pos, len(text)))
    start, end = 0, len(text)
    for m in _BLANK_LINES_RE.finditer(text):
        if m.end() <= pos:
            start = m.end()
            continue
        end = m.start()
        break
    return start, end


def compact_block(pos: int, text: str) -> RewriteResult:
    """Does: Fold newlines inside the block at `pos` to spaces and squeeze space runs."""
    start, end = block_bounds(text, pos)
    folded = replace_regexp_pairs(text[start:end], BLOCK_REGEX_RULES)
    log.debug("compact_block [%d:%d] → %d chars", start, end, len(folded))
    return RewriteResult(text[:start] + folded + text[end:], start, start + len(folded))


def compact_region(text: str, start: int, end: int) -> RewriteResult:
    """Does: Apply the default CSS compaction to text[start:end] only."""
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"bad region [{start}:{end}] for text of length {len(text)}")
    out = compact_css(text[start:end])
    return RewriteResult(text[:start] + out + text[end:], start, start + len(out))
