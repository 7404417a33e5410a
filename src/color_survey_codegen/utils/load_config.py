# src/color_survey_codegen/utils/load_config.py

"""Load generator settings from JSON / JSON5 files with caching and typed coercions.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

Used by the CLI (``--config``) and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal, overload

import json5

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "ENV_CONFIG_VAR",
    "load_config",
    "clear_config_cache",
    "resolve_config_path",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_CONFIG_VAR = "COLOR_CODEGEN_CONFIG"


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, mode, encoding, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def resolve_config_path(explicit: str | os.PathLike[str] | None = None) -> Path | None:
    """Resolve the settings file: explicit argument > COLOR_CODEGEN_CONFIG > none."""
    if explicit:
        return Path(os.path.expanduser(os.fspath(explicit))).resolve()
    v = os.environ.get(ENV_CONFIG_VAR)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    encoding: str = "utf-8",
    validator: None = ...,
    allow_comments: bool | None = None,
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["validated_dict"] = "validated_dict",
    *,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = ...,
    allow_comments: bool | None = None,
) -> Any: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = None,
    allow_comments: bool | None = None,
) -> Any:
    """Load a settings file, parse, coerce by mode, and cache results.

    ``allow_comments=None`` picks JSON5 for ``*.json5`` files and strict JSON otherwise.
    """
    path = Path(os.fspath(file)).expanduser().resolve()
    if allow_comments is None:
        allow_comments = path.suffix.lower() == ".json5"

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding, allow_comments)

    # Cache hit (only when no validator is used, because validator may change output)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE and validator is None:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    # Read & parse
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                data = json5.load(f)  # allows comments/trailing commas
            else:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except ValueError as e:
        # json5 reports syntax errors as plain ValueError
        raise ConfigParseError(f"Invalid JSON5 in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    # Coerce by mode
    if mode == "raw":
        result: Any = data

    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except (TypeError, ValueError) as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data

    else:
        raise ValueError(f"Unknown mode '{mode}'")

    # Store in cache (skip if validator provided)
    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
            log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s (mode=%s)", path.name, mode)

    return result
