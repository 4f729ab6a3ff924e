"""Process configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class ValdoxConfig:
    """Configuration for the process-wide regex strategy."""

    regex_engine: str = field(default_factory=lambda: os.getenv("VALDOX_REGEX_ENGINE", "re"))
    regex_cache_size: int = field(
        default_factory=lambda: int(os.getenv("VALDOX_REGEX_CACHE_SIZE", "256"))
    )


_default_config: ValdoxConfig | None = None


def get_config() -> ValdoxConfig:
    """Get the ValdoxConfig singleton, creating it from the environment.

    Returns:
        Shared ValdoxConfig instance.
    """
    global _default_config
    if _default_config is None:
        _default_config = ValdoxConfig()
    return _default_config


def reset_config() -> None:
    """Drop the cached configuration so the next access re-reads the environment."""
    global _default_config
    _default_config = None
