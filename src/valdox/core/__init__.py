"""valdox core - configuration, errors, messages and the regex strategy.

Usage:
    from valdox.core import (
        # Errors
        ValdoxError,
        ValdoxValidationError,
        # Regex strategy
        PythonRegexEngine,
        RegexEngineFactory,
        get_regex_engine,
        set_regex_engine,
        match_regex,
        # Configuration
        ValdoxConfig,
        get_config,
    )
"""

from __future__ import annotations

from valdox.core.config import ValdoxConfig, get_config, reset_config
from valdox.core.errors import PACKAGE_NAME, ValdoxError, ValdoxValidationError
from valdox.core.factory import PluginFactory
from valdox.core.messages import format_error, index_path, join_path, render_list, render_value
from valdox.core.regex import (
    PythonRegexEngine,
    RegexEngineFactory,
    RegexStrategy,
    get_regex_engine,
    match_regex,
    set_regex_engine,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "ValdoxError",
    "ValdoxValidationError",
    # Configuration
    "ValdoxConfig",
    "get_config",
    "reset_config",
    # Factory
    "PluginFactory",
    # Messages and paths
    "format_error",
    "index_path",
    "join_path",
    "render_list",
    "render_value",
    # Regex strategy
    "PythonRegexEngine",
    "RegexEngineFactory",
    "RegexStrategy",
    "get_regex_engine",
    "match_regex",
    "set_regex_engine",
]
