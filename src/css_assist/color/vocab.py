"""
vocab
=====

Does: Expose CSS named colors from webcolors (CSS3 set) and resolve a name to its
      display swatch, so color-name spans can be painted like hex literals.
Used By: highlight.highlight(), tests cross-checking the packaged color vocabulary.
Returns: Frozen sets and '#rrggbb' strings (lazy, cached).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import FrozenSet, Optional

import webcolors

log = logging.getLogger(__name__)

__all__ = ["get_css3_color_names", "named_color_swatch"]


@lru_cache(maxsize=1)
def get_css3_color_names() -> FrozenSet[str]:
    """Does: Return the CSS3 named colors known to webcolors (lowercase)."""
    return frozenset(n.lower() for n in webcolors.names(webcolors.CSS3))


@lru_cache(maxsize=512)
def named_color_swatch(name: str) -> Optional[str]:
    """
    Does: Map a CSS color keyword ('PapayaWhip', 'red') to '#rrggbb'.
    Returns: None for names outside the CSS3 table (e.g. 'transparent').
    """
    try:
        return webcolors.name_to_hex(name.lower(), spec=webcolors.CSS3)
    except ValueError:
        log.debug("No CSS3 swatch for color name %r", name)
        return None
