"""Enumerations and result models shared across the package."""

from __future__ import annotations

from valdox.models.enums import DateTimeOffset, IpVersion, UrlProtocol, UrlSecurity
from valdox.models.results import RegexMatch, ValidationReport

__all__ = [
    # Enums
    "DateTimeOffset",
    "IpVersion",
    "UrlProtocol",
    "UrlSecurity",
    # Results
    "RegexMatch",
    "ValidationReport",
]
