"""
compact.

Does: Expose the simultaneous find/replace rewriter, the default CSS compaction
      rule set, and block/region compaction helpers.
"""

from .block import BLOCK_REGEX_RULES, block_bounds, compact_block, compact_region
from .css_rules import CSS_LITERAL_RULES, CSS_REGEX_RULES, compact_css
from .rewriter import (
    PlaceholderCollision,
    compact,
    placeholder_for,
    replace_pairs,
    replace_regexp_pairs,
)

__all__ = [
    # rewriter
    "PlaceholderCollision",
    "placeholder_for",
    "replace_pairs",
    "replace_regexp_pairs",
    "compact",
    # css rules
    "CSS_REGEX_RULES",
    "CSS_LITERAL_RULES",
    "compact_css",
    # block
    "BLOCK_REGEX_RULES",
    "block_bounds",
    "compact_block",
    "compact_region",
]

__docformat__ = "google"
