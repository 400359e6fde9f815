# src/css_assist/lexicon/vocabulary.py
from __future__ import annotations

"""
vocabulary

Does: Define lexical categories (in match priority order), immutable keyword
      vocabularies, and loaders that build them from the JSON data directory.
Returns: Category enum, Boundary enum, Vocabulary / VocabularySet records,
         load_vocabularies() and the cached default_vocabularies().
Used by: classifier (matcher construction), completion (keyword dictionary), CLI.
"""

import enum
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Tuple

from css_assist.general.utils import load_config, on_cache_clear

__all__ = [
    "Category",
    "Boundary",
    "Vocabulary",
    "VocabularySet",
    "VOCABULARY_FILES",
    "load_vocabularies",
    "default_vocabularies",
]

log = logging.getLogger(__name__)


class Category(enum.Enum):
    """Lexical categories, declared from highest to lowest overlap priority."""

    PSEUDO_SELECTOR = "pseudo-selector"
    TAG_NAME = "tag-name"
    PROPERTY_NAME = "property-name"
    VALUE_KEYWORD = "value-keyword"
    COLOR_NAME = "color-name"
    UNIT_NAME = "unit-name"
    AT_KEYWORD = "at-keyword"

    @property
    def priority(self) -> int:
        """0 is strongest."""
        return _PRIORITY[self]


_PRIORITY: Dict[Category, int] = {c: i for i, c in enumerate(Category)}


class Boundary(enum.Enum):
    """How a keyword must be delimited from surrounding text to count as a match."""

    SYMBOL = "symbol"  # no [A-Za-z0-9_-] on either side
    NUMERIC_SUFFIX = "numeric-suffix"  # only right after a digit ('10px', '1.5em', '50%')
    NONE = "none"  # ':' / '@' entries unguarded; bare words still need symbol boundaries


# ── Per-category defaults ────────────────────────────────────────────────────
VOCABULARY_FILES: Dict[Category, str] = {
    Category.TAG_NAME: "css_html_tags",
    Category.PROPERTY_NAME: "css_property_names",
    Category.PSEUDO_SELECTOR: "css_pseudo_selectors",
    Category.AT_KEYWORD: "css_at_keywords",
    Category.UNIT_NAME: "css_units",
    Category.VALUE_KEYWORD: "css_value_keywords",
    Category.COLOR_NAME: "css_color_names",
}

_BOUNDARIES: Dict[Category, Boundary] = {
    Category.PSEUDO_SELECTOR: Boundary.NONE,
    Category.AT_KEYWORD: Boundary.NONE,
    Category.UNIT_NAME: Boundary.NUMERIC_SUFFIX,
}


@dataclass(frozen=True)
class Vocabulary:
    """A named, immutable run of keyword strings for one category."""

    category: Category
    words: Tuple[str, ...]
    boundary: Boundary = Boundary.SYMBOL
    case_insensitive: bool = False

    @classmethod
    def for_category(cls, category: Category, words) -> "Vocabulary":
        """Does: Build with the category's default boundary mode, dropping repeats."""
        return cls(
            category=category,
            words=tuple(dict.fromkeys(words)),
            boundary=_BOUNDARIES.get(category, Boundary.SYMBOL),
        )

    def __contains__(self, word: object) -> bool:
        if self.case_insensitive and isinstance(word, str):
            return word.lower() in {w.lower() for w in self.words}
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)


@dataclass(frozen=True)
class VocabularySet:
    """
    The injected keyword configuration: one Vocabulary per Category.
    Built once at startup and shared read-only.
    """

    vocabularies: Tuple[Vocabulary, ...]

    @classmethod
    def from_mapping(cls, words_by_category: Mapping[Category, object]) -> "VocabularySet":
        """Does: Build from {Category: iterable of words}, in priority order."""
        vocabs = tuple(
            Vocabulary.for_category(cat, words_by_category.get(cat, ()))
            for cat in Category
        )
        return cls(vocabs)

    def __iter__(self) -> Iterator[Vocabulary]:
        return iter(self.vocabularies)

    def get(self, category: Category) -> Optional[Vocabulary]:
        for v in self.vocabularies:
            if v.category is category:
                return v
        return None

    def all_keywords(self) -> FrozenSet[str]:
        """Does: Union of every vocabulary; repeats across categories collapse."""
        return frozenset(w for v in self.vocabularies for w in v.words)


def load_vocabularies(base_dir: Optional[Path] = None) -> VocabularySet:
    """
    Does: Read the seven keyword lists from <data>/css_*.json.
    Returns: VocabularySet; extending CSS keywords only needs a data edit.
    """
    words = {
        cat: load_config(fname, mode="words", base_dir=base_dir)
        for cat, fname in VOCABULARY_FILES.items()
    }
    vset = VocabularySet.from_mapping(words)
    log.debug(
        "Loaded vocabularies: %s",
        ", ".join(f"{v.category.value}={len(v)}" for v in vset),
    )
    return vset


@lru_cache(maxsize=1)
def default_vocabularies() -> VocabularySet:
    """Does: Packaged (or env-overridden) vocabularies, loaded on first use."""
    return load_vocabularies()


# Follow data-dir overrides and clear_config_cache()
on_cache_clear(default_vocabularies.cache_clear)
