# src/css_assist/lexicon/classifier.py
from __future__ import annotations

"""
classifier

Does: Compile one regex matcher per vocabulary and partition CSS text into
      non-overlapping classified spans, resolving overlaps by category priority
      (pseudo-selector > tag > property > value > color > unit > at-keyword).
Returns: build_vocabulary_matchers(), classify() generator, all_keywords(),
         and the LexicalClassifier facade bundling them around one VocabularySet.
Used by: highlight.highlight(), the CLI `classify` command, completion.
"""

import bisect
import logging
import re
from dataclasses import dataclass
from re import Pattern
from typing import Iterator, List, Optional, Tuple

from css_assist.lexicon.vocabulary import (
    Boundary,
    Category,
    Vocabulary,
    VocabularySet,
    default_vocabularies,
)

__all__ = [
    "ClassifiedSpan",
    "Matcher",
    "build_matcher",
    "build_vocabulary_matchers",
    "classify",
    "all_keywords",
    "LexicalClassifier",
]

log = logging.getLogger(__name__)

Matcher = Pattern[str]

# Characters that glue a CSS identifier together
_SYMBOL_CHARS = r"A-Za-z0-9_\-"
_LEFT = {
    Boundary.SYMBOL: rf"(?<![{_SYMBOL_CHARS}])",
    Boundary.NUMERIC_SUFFIX: r"(?<=[0-9])",
    Boundary.NONE: "",
}
_RIGHT = {
    Boundary.SYMBOL: rf"(?![{_SYMBOL_CHARS}])",
    Boundary.NUMERIC_SUFFIX: rf"(?![{_SYMBOL_CHARS}])",
    Boundary.NONE: "",
}
_IDENT_START = re.compile(r"[A-Za-z0-9_\-]")


@dataclass(frozen=True)
class ClassifiedSpan:
    start: int
    end: int
    text: str
    category: Category


# ─────────────────────────────────────────────────────────────────────────────
# Matcher construction
# ─────────────────────────────────────────────────────────────────────────────

def build_matcher(vocab: Vocabulary) -> Optional[Matcher]:
    """
    Does: Compile an alternation of the vocabulary's words, longest first so
          ':first-child' wins over ':first', wrapped in its boundary guards.
    Returns: Compiled pattern, or None for an empty vocabulary.

    Under Boundary.NONE only entries led by punctuation ('@media', ':hover') go
    unguarded; bare words ('and', 'print') get symbol guards each, so they never
    match inside an identifier like '.brand' or '.small-print'.
    """
    if not vocab.words:
        return None
    words = sorted(set(vocab.words), key=lambda w: (-len(w), w))
    flags = re.IGNORECASE if vocab.case_insensitive else 0

    if vocab.boundary is not Boundary.NONE:
        alternation = "|".join(re.escape(w) for w in words)
        return re.compile(f"{_LEFT[vocab.boundary]}(?:{alternation}){_RIGHT[vocab.boundary]}", flags)

    guarded = (Boundary.SYMBOL if _IDENT_START.match(w) else Boundary.NONE for w in words)
    alternation = "|".join(
        f"{_LEFT[b]}{re.escape(w)}{_RIGHT[b]}" for w, b in zip(words, guarded)
    )
    return re.compile(f"(?:{alternation})", flags)


def build_vocabulary_matchers(vocabularies: VocabularySet) -> List[Tuple[Category, Matcher]]:
    """Does: One (Category, Matcher) pair per non-empty vocabulary, in priority order."""
    matchers = []
    for vocab in sorted(vocabularies, key=lambda v: v.category.priority):
        m = build_matcher(vocab)
        if m is not None:
            matchers.append((vocab.category, m))
    log.debug("Built %d vocabulary matchers", len(matchers))
    return matchers


# ─────────────────────────────────────────────────────────────────────────────
# Classification
# ─────────────────────────────────────────────────────────────────────────────

class _ClaimedRanges:
    """Sorted, disjoint [start, end) ranges already owned by a stronger category."""

    def __init__(self) -> None:
        self._starts: List[int] = []
        self._ends: List[int] = []

    def overlaps(self, start: int, end: int) -> bool:
        i = bisect.bisect_right(self._starts, start)
        if i > 0 and self._ends[i - 1] > start:
            return True
        return i < len(self._starts) and self._starts[i] < end

    def add(self, start: int, end: int) -> None:
        i = bisect.bisect_right(self._starts, start)
        self._starts.insert(i, start)
        self._ends.insert(i, end)


def classify(
    text: str,
    matchers: List[Tuple[Category, Matcher]],
) -> Iterator[ClassifiedSpan]:
    """
    Does: Run each category pass (leftmost-first, non-overlapping) from strongest to
          weakest; a weaker match touching a claimed range is dropped.
    Returns: Spans ordered by start offset. Identifiers in no vocabulary get nothing.
    """
    claimed = _ClaimedRanges()
    found: List[ClassifiedSpan] = []
    for category, matcher in matchers:
        for m in matcher.finditer(text):
            if m.start() == m.end() or claimed.overlaps(m.start(), m.end()):
                continue
            claimed.add(m.start(), m.end())
            found.append(ClassifiedSpan(m.start(), m.end(), m.group(0), category))
    found.sort(key=lambda s: s.start)
    yield from found


def all_keywords(vocabularies: VocabularySet) -> frozenset:
    """Does: Completion dictionary: every keyword of every vocabulary, once."""
    return vocabularies.all_keywords()


class LexicalClassifier:
    """Compiled matchers bound to one immutable VocabularySet."""

    def __init__(self, vocabularies: Optional[VocabularySet] = None):
        self.vocabularies = vocabularies if vocabularies is not None else default_vocabularies()
        self.matchers = build_vocabulary_matchers(self.vocabularies)

    def classify(self, text: str) -> Iterator[ClassifiedSpan]:
        return classify(text, self.matchers)

    def all_keywords(self) -> frozenset:
        return all_keywords(self.vocabularies)

    def category_of(self, word: str) -> Optional[Category]:
        """Does: Strongest category whose vocabulary holds `word` verbatim."""
        for vocab in sorted(self.vocabularies, key=lambda v: v.category.priority):
            if word in vocab:
                return vocab.category
        return None
