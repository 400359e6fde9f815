# src/css_assist/lexicon/completion.py
from __future__ import annotations

"""
completion

Does: Keyword completion over the flattened CSS vocabulary: find the partial word
      at the cursor, rank candidates (prefix hits first, then rapidfuzz scores),
      and splice an accepted choice back into the text.
Returns: partial_word_at(), rank_keywords(), complete(), accept_completion().
Used by: Host completion UI, the CLI `complete` command.
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from rapidfuzz import fuzz, process

from css_assist.general.types import RewriteResult
from css_assist.lexicon.vocabulary import VocabularySet, default_vocabularies

__all__ = [
    "FUZZY_CUTOFF",
    "partial_word_at",
    "rank_keywords",
    "complete",
    "accept_completion",
]

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
FUZZY_CUTOFF = 70  # rapidfuzz WRatio floor for non-prefix candidates
DEFAULT_LIMIT = 20

_WORD_CHAR = re.compile(r"[A-Za-z0-9_-]")


def partial_word_at(text: str, pos: int) -> Tuple[int, int, str]:
    """
    Does: Longest run of [A-Za-z0-9_-] ending at `pos`.
    Returns: (start, pos, word); word is '' when the cursor follows no word char.
    """
    pos = max(0, min(pos, len(text)))
    start = pos
    while start > 0 and _WORD_CHAR.match(text[start - 1]):
        start -= 1
    return start, pos, text[start:pos]


def rank_keywords(
    partial: str,
    keywords: Iterable[str],
    *,
    limit: int = DEFAULT_LIMIT,
    cutoff: int = FUZZY_CUTOFF,
) -> List[str]:
    """
    Does: Order keywords for a partial word: exact-prefix matches (shortest, then
          alphabetical), then fuzzy matches by descending rapidfuzz WRatio.
    Returns: At most `limit` keywords; an empty partial lists keywords alphabetically.
    """
    pool = sorted(set(keywords))
    if not partial:
        return pool[:limit]

    prefix_hits = sorted((k for k in pool if k.startswith(partial)), key=lambda k: (len(k), k))
    if len(prefix_hits) >= limit:
        return prefix_hits[:limit]

    taken = set(prefix_hits)
    rest = [k for k in pool if k not in taken]
    fuzzy_hits = process.extract(
        partial,
        rest,
        scorer=fuzz.WRatio,
        limit=limit - len(prefix_hits),
        score_cutoff=cutoff,
    )
    log.debug("complete %r: %d prefix, %d fuzzy", partial, len(prefix_hits), len(fuzzy_hits))
    return prefix_hits + [choice for choice, _score, _idx in fuzzy_hits]


def complete(
    text: str,
    pos: int,
    vocabularies: Optional[VocabularySet] = None,
    *,
    limit: int = DEFAULT_LIMIT,
) -> List[str]:
    """Does: Ranked keyword candidates for the partial word ending at `pos`."""
    vocabularies = vocabularies if vocabularies is not None else default_vocabularies()
    _, _, partial = partial_word_at(text, pos)
    return rank_keywords(partial, vocabularies.all_keywords(), limit=limit)


def accept_completion(text: str, pos: int, choice: str) -> RewriteResult:
    """Does: Replace the partial word ending at `pos` with `choice` verbatim."""
    start, end, _ = partial_word_at(text, pos)
    new_text = text[:start] + choice + text[end:]
    return RewriteResult(new_text, start, start + len(choice))
