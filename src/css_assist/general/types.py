# css_assist/general/types.py
from __future__ import annotations

"""
types.py.

Does: Define the pure result type returned by cursor/region rewrites, so the host
      editor can apply new text and selection to its own buffer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RewriteResult:
    """New full text plus the (start, end) of the rewritten span inside it."""

    text: str
    start: int
    end: int

    @property
    def span_text(self) -> str:
        return self.text[self.start:self.end]


__all__ = ["RewriteResult"]

__docformat__ = "google"
