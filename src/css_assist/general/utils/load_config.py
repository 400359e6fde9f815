# src/css_assist/general/utils/load_config.py

"""Load keyword vocabularies (JSON lists) from a <data/> directory with caching.

Modes:
- "raw"    -> return parsed JSON as-is
- "set"    -> return frozenset[str] (coerce scalars to str)
- "words"  -> return tuple[str, ...] of non-empty strings, first occurrence kept,
              file order preserved

Used by the vocabulary loaders, the CLI, and tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from types import TracebackType
from typing import Any, Callable, Literal

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "set", "words"]
__all__ = [
    "Mode",
    "DATA_DIR_ENV_VARS",
    "load_config",
    "clear_config_cache",
    "on_cache_clear",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

# Checked in order; first non-empty wins
DATA_DIR_ENV_VARS: tuple[str, ...] = ("CSS_ASSIST_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, mode, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, bool], Any] = {}
# caches built on top of loaded configs (e.g. the default vocabularies)
_DEPENDENT_CACHE_CLEARERS: list[Callable[[], None]] = []


def on_cache_clear(clearer: Callable[[], None]) -> Callable[[], None]:
    """Register a callback run by clear_config_cache(); returns it unchanged."""
    with _CACHE_LOCK:
        if clearer not in _DEPENDENT_CACHE_CLEARERS:
            _DEPENDENT_CACHE_CLEARERS.append(clearer)
    return clearer


def clear_config_cache() -> None:
    """Empty the in-memory config cache and every cache registered on top of it."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        clearers = list(_DEPENDENT_CACHE_CLEARERS)
    for clearer in clearers:
        clearer()
    log.debug("Config cache cleared (%d dependent caches).", len(clearers))


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def resolve_data_dir(base_dir: Path | str | None = None) -> Path:
    """
    Does: Pick the data directory: explicit base_dir > env override > the first
          'data/' found walking up from the installed package.
    Returns: Resolved Path; raises DataDirNotFound when discovery fails.
    """
    if base_dir is not None:
        return Path(base_dir).resolve()
    env_dir = _env_data_dir()
    if env_dir is not None:
        return env_dir
    tried = _candidate_data_dirs()
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in tried)
    )


def _parse(path: Path, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding="utf-8", errors="strict", newline="") as f:
            if not allow_comments:
                return json.load(f)
            try:
                import json5  # lazy: only vocab files with comments need it
            except ImportError as e:
                raise ConfigParseError(
                    "json5 requested (allow_comments=True) but not installed"
                ) from e
            return json5.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def _coerce(data: Any, mode: Mode, name: str) -> Any:
    if mode == "raw":
        return data

    if not isinstance(data, list):
        raise ConfigTypeError(
            f"{name}: expected list for mode '{mode}', got {type(data).__name__}"
        )

    if mode == "set":
        non_scalars = [
            x for x in data if not isinstance(x, (str, int, float, bool)) and x is not None
        ]
        if non_scalars:
            preview = ", ".join(type(x).__name__ for x in non_scalars[:3])
            raise ConfigTypeError(
                f"{name}: list must contain only scalars for 'set' (first bad types: {preview})"
            )
        return frozenset(map(str, data))

    if mode == "words":
        bad = [x for x in data if not isinstance(x, str) or not x.strip()]
        if bad:
            raise ConfigTypeError(f"{name}: keyword lists hold non-empty strings only, got {bad[:3]!r}")
        return tuple(dict.fromkeys(x.strip() for x in data))

    raise ValueError(f"Unknown mode '{mode}'")


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | str | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results."""
    data_dir = resolve_data_dir(base_dir)

    # Normalize file path and enforce staying under data_dir
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, allow_comments)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    result = _coerce(_parse(path, allow_comments), mode, path.name)

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily point CSS_ASSIST_DATA_DIR at another vocabulary directory.

    Entering and leaving clear dependent caches too, so default_vocabularies() (and a
    LexicalClassifier built inside the block) reads the overriding directory.
    """

    _VAR = DATA_DIR_ENV_VARS[0]

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(self._VAR)
        os.environ[self._VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(self._VAR, None)
        else:
            os.environ[self._VAR] = self._old
        clear_config_cache()
