"""Regex matching strategy.

Every pattern-based validator routes its matching through a single
strategy: a callable ``(pattern, value) -> RegexMatch``. The default
strategy uses the standard library ``re`` module with a full-string match.

An embedder can change the engine in two ways:

- per factory, by passing ``regex_engine=`` to ``valdox.Validator``;
- process-wide, with ``set_regex_engine()`` (or the ``VALDOX_REGEX_ENGINE``
  environment variable naming a registered engine). The process-wide engine
  should be configured once at startup and left alone afterwards, since
  validators read it on every call.

Usage:
    >>> from valdox.core.regex import match_regex
    >>> match_regex(r"([a-z]+)@([a-z]+)\\.com", "test@example.com")
    RegexMatch(matched=True, captures=['test', 'example'])
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from functools import lru_cache
from typing import ClassVar

from valdox.core.config import get_config
from valdox.core.factory import PluginFactory
from valdox.models.results import RegexMatch

logger = logging.getLogger(__name__)

RegexStrategy = Callable[[str, str], RegexMatch]


class PythonRegexEngine:
    """Default strategy backed by the standard library ``re`` module.

    Compiled patterns are kept in an LRU cache, which is safe to share
    between threads.
    """

    name = "re"

    def __init__(self, cache_size: int = 256) -> None:
        """Initialize the engine.

        Args:
            cache_size: Maximum number of compiled patterns kept.
        """
        self.cache_size = cache_size
        self._compile = lru_cache(maxsize=cache_size)(re.compile)

    def __call__(self, pattern: str, value: str) -> RegexMatch:
        """Match ``pattern`` against the whole of ``value``.

        Raises:
            re.error: If the pattern is malformed.
        """
        match = self._compile(pattern).fullmatch(value)
        if match is None:
            return RegexMatch.failed()
        return RegexMatch(True, ["" if group is None else group for group in match.groups()])

    def __repr__(self) -> str:
        return f"PythonRegexEngine(cache_size={self.cache_size})"


class RegexEngineFactory(PluginFactory[RegexStrategy]):
    """Factory for regex engines.

    Engines are constructed with a ``cache_size`` keyword argument.

    Example:
        >>> engine = RegexEngineFactory.create("re", cache_size=64)

        # Register a custom engine
        >>> RegexEngineFactory.register("pcre", PcreEngine)
        >>> engine = RegexEngineFactory.create("pcre", cache_size=64)
    """

    _defaults: ClassVar[dict[str, type[RegexStrategy]]] = {"re": PythonRegexEngine}
    _default_type: ClassVar[str] = "re"
    _entity_name: ClassVar[str] = "regex engine"


_default_engine: RegexStrategy | None = None


def get_regex_engine() -> RegexStrategy:
    """Get the process-wide regex strategy.

    Built lazily from ``ValdoxConfig`` on first use.

    Returns:
        The shared strategy callable.
    """
    global _default_engine
    if _default_engine is None:
        config = get_config()
        _default_engine = RegexEngineFactory.create(
            config.regex_engine, cache_size=config.regex_cache_size
        )
        logger.debug("Created default regex engine: %r", _default_engine)
    return _default_engine


def set_regex_engine(engine: RegexStrategy | None) -> None:
    """Replace the process-wide regex strategy.

    Args:
        engine: New strategy, or None to fall back to the configured default.
    """
    global _default_engine
    logger.debug("Replacing default regex engine %r with %r", _default_engine, engine)
    _default_engine = engine


def match_regex(pattern: str, value: str, engine: RegexStrategy | None = None) -> RegexMatch:
    """Match ``pattern`` against ``value`` with the given or default strategy."""
    strategy = engine if engine is not None else get_regex_engine()
    return strategy(pattern, value)
