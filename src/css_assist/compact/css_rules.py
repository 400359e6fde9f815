# css_rules.py
# ============

"""
css_rules.

Does: Define the default CSS whitespace-compaction rule set and apply it.
Used By: compact_css(), block.compact_region(), the CLI `compact` command.
Returns: Immutable rule tuples and compacted strings.

Notes:
- Regex rules fold every newline (with surrounding indentation) into one space,
  then squeeze runs of spaces; literal rules then run simultaneously.
- Space-padded forms (' { ', ' : ', '} ', ';} ') come before their one-sided forms
  so a padded token is consumed whole in phase 1.
- Every rule that consumes a '}' emits '}\n'; a brace claimed by ';}' is no longer
  visible to the plain '}' rule.
"""

from __future__ import annotations

import re

from css_assist.compact.rewriter import LiteralRule, RegexRule, compact

__all__ = ["CSS_REGEX_RULES", "CSS_LITERAL_RULES", "compact_css"]


CSS_REGEX_RULES: tuple[RegexRule, ...] = (
    (re.compile(r"\s*\n\s*"), " "),  # newline → space
    (re.compile(r" {2,}"), " "),  # collapse space runs
)

CSS_LITERAL_RULES: tuple[LiteralRule, ...] = (
    (" /* ", "/*"),
    (" */ ", "*/"),
    (" { ", "{"),
    (" {", "{"),
    ("{ ", "{"),
    ("; ", ";"),
    (" : ", ":"),
    (": ", ":"),
    (";} ", "}\n"),
    (";}", "}\n"),
    ("} ", "}\n"),
    ("}", "}\n"),  # exactly one newline after each closing brace
)


def compact_css(text: str) -> str:
    """Does: Minify whitespace in CSS text, one rule block per line."""
    return compact(text, CSS_LITERAL_RULES, CSS_REGEX_RULES)
