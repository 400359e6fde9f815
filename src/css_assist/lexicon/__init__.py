# src/css_assist/lexicon/__init__.py
"""
lexicon.

Does: Facade over keyword vocabularies, the token-classifying scanner, and
keyword completion.

Returns: Public API for building matchers, classifying CSS text, and ranking
completion candidates.
Used by: highlight, the CLI, host rendering and completion layers.
"""

from __future__ import annotations

# ── Vocabularies ────────────────────────────────────────────────────────────
from .vocabulary import (
    Boundary,
    Category,
    Vocabulary,
    VocabularySet,
    default_vocabularies,
    load_vocabularies,
)

# ── Classifier ──────────────────────────────────────────────────────────────
from .classifier import (
    ClassifiedSpan,
    LexicalClassifier,
    all_keywords,
    build_matcher,
    build_vocabulary_matchers,
    classify,
)

# ── Completion ──────────────────────────────────────────────────────────────
from .completion import (
    accept_completion,
    complete,
    partial_word_at,
    rank_keywords,
)

__all__ = [
    # Vocabularies
    "Category",
    "Boundary",
    "Vocabulary",
    "VocabularySet",
    "load_vocabularies",
    "default_vocabularies",
    # Classifier
    "ClassifiedSpan",
    "LexicalClassifier",
    "build_matcher",
    "build_vocabulary_matchers",
    "classify",
    "all_keywords",
    # Completion
    "partial_word_at",
    "rank_keywords",
    "complete",
    "accept_completion",
]

__docformat__ = "google"
