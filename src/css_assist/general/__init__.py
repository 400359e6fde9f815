"""
general.

Does: Shared, domain-neutral helpers (config loading, debug logging, result types).
"""

from .types import RewriteResult

__all__ = ["RewriteResult"]
__docformat__ = "google"
