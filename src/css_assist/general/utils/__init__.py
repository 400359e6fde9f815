# css_assist/general/utils/__init__.py
"""

Does: Provide vocabulary-file loading and topic-gated debug logging for the package.
Returns: Public API via load_config/clear_config_cache/resolve_data_dir and debug/reload_topics.
Used by: Vocabulary loaders, the compaction rewriter, the CLI error path, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    on_cache_clear,
    load_config,
    resolve_data_dir,
    temp_data_dir,
)
from .log import (
    debug,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "on_cache_clear",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
]
