"""Format validator option enumerations."""

from __future__ import annotations

from enum import Enum


class UrlProtocol(str, Enum):
    """URL scheme families accepted by the URL validator."""

    WS = "ws"
    HTTP = "http"
    ALL = "all"


class UrlSecurity(str, Enum):
    """Whether the secure (``s``-suffixed) scheme variant is accepted."""

    NON_SECURE = "non_secure"
    SECURE = "secure"
    ALL = "all"


class DateTimeOffset(str, Enum):
    """Offset handling for global date-time strings."""

    NONE = "none"
    """Only the ``Z`` designator is accepted."""

    OPTIONAL = "optional"
    """``Z``, a ``+hh:mm``/``-hh:mm`` offset, or nothing."""

    REQUIRED = "required"
    """``Z`` or a numeric offset must be present."""


class IpVersion(str, Enum):
    """IP address families."""

    V4 = "v4"
    V6 = "v6"
