"""
log.py.

Does: Topic-gated debug printer controlled by CSS_ASSIST_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level to stderr. Used by the
         compaction rewriter when tracing rule application.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["DEBUG_TOPICS_ENV", "debug", "enabled", "reload_topics"]

DEBUG_TOPICS_ENV = "CSS_ASSIST_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(DEBUG_TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable CSS_ASSIST_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str) -> bool:
    """Does: Tell whether `topic` is switched on (unset env means nothing is)."""
    return bool(_DEBUG_TOPICS) and ("all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS)


def debug(
    msg: str,
    topic: str = "css",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level when the topic is enabled."""
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
