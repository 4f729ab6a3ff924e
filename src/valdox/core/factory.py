"""Named plugin registries.

A ``PluginFactory`` subclass maps short names to implementation classes and
builds instances by name, so that a plugin can be selected from
configuration (an environment variable, a settings file) rather than
imported by the caller.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginFactory(Generic[T]):
    """Registry of implementation classes, created by name.

    Subclasses declare:
        - _defaults: Built-in implementations, always available
        - _default_type: Name used when ``create()`` is called without one
        - _entity_name: Human-readable name for error messages

    Every subclass gets its own registry, seeded from ``_defaults``.

    Example subclass:
        class RegexEngineFactory(PluginFactory[RegexStrategy]):
            _defaults: ClassVar[dict[str, type[RegexStrategy]]] = {"re": PythonRegexEngine}
            _default_type: ClassVar[str] = "re"
            _entity_name: ClassVar[str] = "regex engine"
    """

    _defaults: ClassVar[dict[str, type[Any]]] = {}
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str] = "plugin"
    _registry: ClassVar[dict[str, type[Any]]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry = dict(cls._defaults)

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register ``impl_class`` under ``name``, replacing any previous entry."""
        logger.debug("Registering %s %r: %s", cls._entity_name, name, impl_class.__qualname__)
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a registered name. Built-in names come back on ``clear_registry()``."""
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Instantiate the implementation registered under ``name``.

        Args:
            name: Registered name, or None for the default.
            **kwargs: Passed to the implementation's constructor.

        Raises:
            ValueError: If ``name`` is not registered.
        """
        type_name = cls._default_type if name is None else name
        impl_class = cls._registry.get(type_name)
        if impl_class is None:
            raise ValueError(
                f"Unknown {cls._entity_name} type: {type_name}. "
                f"Available types: {', '.join(cls.available_types())}"
            )
        logger.debug("Creating %s %r with %r", cls._entity_name, type_name, kwargs)
        return impl_class(**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        return sorted(cls._registry)

    @classmethod
    def clear_registry(cls) -> None:
        """Drop every registered name except the built-in defaults."""
        cls._registry = dict(cls._defaults)
