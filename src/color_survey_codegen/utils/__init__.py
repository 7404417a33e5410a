# color_survey_codegen/utils/__init__.py
"""

Does: Provide settings loading and lightweight debug logging utilities for the generator.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: CLI, pipeline, parser and renderer, tests.
"""

from __future__ import annotations

from .load_config import (
    ENV_CONFIG_VAR,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
    load_config,
    resolve_config_path,
)
from .log import (
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "ENV_CONFIG_VAR",
    "load_config",
    "clear_config_cache",
    "resolve_config_path",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
    "topic_enabled",
]
