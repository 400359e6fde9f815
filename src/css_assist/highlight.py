"""
highlight.py
============

Does: One rendering-pass entry point: keyword classification spans plus the
      independent color-literal pass, each span carrying an optional background
      swatch ('#rrggbb'). Styling itself stays with the host.
Used By: Host rendering layers, the CLI `classify` command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from css_assist.color import find_color_literals, named_color_swatch
from css_assist.lexicon import Category, LexicalClassifier

__all__ = ["Highlight", "highlight"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Highlight:
    start: int
    end: int
    text: str
    category: Optional[Category]  # None for color literals
    background: Optional[str] = None


def highlight(text: str, classifier: Optional[LexicalClassifier] = None) -> List[Highlight]:
    """
    Does: Classify `text` and scan it for color literals.
    Returns: Highlights ordered by (start, end); a literal may share a range with
             a keyword span since the passes are independent.
    """
    classifier = classifier if classifier is not None else LexicalClassifier()
    out: List[Highlight] = []

    for span in classifier.classify(text):
        swatch = named_color_swatch(span.text) if span.category is Category.COLOR_NAME else None
        out.append(Highlight(span.start, span.end, span.text, span.category, swatch))

    for lit in find_color_literals(text):
        out.append(Highlight(lit.start, lit.end, lit.text, None, lit.swatch))

    out.sort(key=lambda h: (h.start, h.end))
    log.debug("highlight: %d spans over %d chars", len(out), len(text))
    return out
