"""Format validators.

String validators for fixed textual formats. Each derives its regular
expression from its parameters at construction time and otherwise behaves
exactly like ``StringRegexValidator``: full-string match through the regex
strategy, captures available via ``match()``.
"""

from __future__ import annotations

import re
from abc import abstractmethod
from dataclasses import dataclass, field

from valdox.models.enums import DateTimeOffset, IpVersion, UrlProtocol, UrlSecurity
from valdox.validation.strings import StringRegexValidator

# -----------------------------------------------------------------------------
# Pattern building blocks
# -----------------------------------------------------------------------------

EMAIL_PATTERN = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"

# Version nibble 1-8, variant nibble 8/9/a/b
UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-8][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"
)

_DATE = r"[0-9]{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12][0-9]|3[01])"
_HOUR = r"(?:[01][0-9]|2[0-3])"
_MINUTE = r"[0-5][0-9]"
_FRACTION = r"(?:\.[0-9]+)?"
_OFFSET = rf"(?:Z|[+-]{_HOUR}:{_MINUTE})"

DATE_PATTERN = rf"^{_DATE}$"
TIME_PATTERN = rf"^{_HOUR}:{_MINUTE}(?::{_MINUTE}{_FRACTION})?$"
LOCAL_DATE_TIME_PATTERN = rf"^{_DATE}T{_HOUR}:{_MINUTE}(?::{_MINUTE})?$"

_GLOBAL_DATE_TIME = rf"{_DATE}T{_HOUR}:{_MINUTE}:{_MINUTE}{_FRACTION}"
_GLOBAL_SUFFIX = {
    DateTimeOffset.NONE: "Z",
    DateTimeOffset.OPTIONAL: rf"{_OFFSET}?",
    DateTimeOffset.REQUIRED: _OFFSET,
}

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
_IPV4 = rf"{_OCTET}(?:\.{_OCTET}){{3}}"
_IPV4_PREFIX = r"/(?:3[0-2]|[12]?[0-9])"

_HEXTET = r"[0-9a-fA-F]{1,4}"
_IPV6 = (
    "(?:"
    rf"(?:{_HEXTET}:){{7}}{_HEXTET}"
    rf"|(?:{_HEXTET}:){{1,7}}:"
    rf"|(?:{_HEXTET}:){{1,6}}:{_HEXTET}"
    rf"|(?:{_HEXTET}:){{1,5}}(?::{_HEXTET}){{1,2}}"
    rf"|(?:{_HEXTET}:){{1,4}}(?::{_HEXTET}){{1,3}}"
    rf"|(?:{_HEXTET}:){{1,3}}(?::{_HEXTET}){{1,4}}"
    rf"|(?:{_HEXTET}:){{1,2}}(?::{_HEXTET}){{1,5}}"
    rf"|{_HEXTET}:(?::{_HEXTET}){{1,6}}"
    rf"|:(?:(?::{_HEXTET}){{1,7}}|:)"
    ")"
)
_IPV6_PREFIX = r"/(?:12[0-8]|1[01][0-9]|[1-9]?[0-9])"

_URL_SCHEMES = {
    UrlProtocol.WS: "ws",
    UrlProtocol.HTTP: "http",
    UrlProtocol.ALL: "(?:ws|http)",
}
_URL_SECURE_SUFFIX = {
    UrlSecurity.NON_SECURE: "",
    UrlSecurity.SECURE: "s",
    UrlSecurity.ALL: "s?",
}


@dataclass(frozen=True)
class FormatValidator(StringRegexValidator):
    """Base class for validators whose pattern is derived from parameters."""

    pattern: str = field(init=False, default="")

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", self.build_pattern())

    @abstractmethod
    def build_pattern(self) -> str:
        """Regular expression for the configured format, anchored at both ends."""
        ...

    @property
    def expected(self) -> str:
        return f"a valid {self.format_name}"

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the format, used after "a valid" in messages."""
        ...


@dataclass(frozen=True)
class EmailValidator(FormatValidator):
    """``local@domain.tld`` addresses."""

    def build_pattern(self) -> str:
        return EMAIL_PATTERN

    @property
    def format_name(self) -> str:
        return "email address"


@dataclass(frozen=True)
class UuidValidator(FormatValidator):
    """Canonical 8-4-4-4-12 hex UUIDs, versions 1-8, RFC variant."""

    def build_pattern(self) -> str:
        return UUID_PATTERN

    @property
    def format_name(self) -> str:
        return "UUID"


@dataclass(frozen=True)
class UrlValidator(FormatValidator):
    """``http``/``ws`` URLs, optionally secure, with a non-space authority and path."""

    protocol: UrlProtocol = UrlProtocol.ALL
    security: UrlSecurity = UrlSecurity.ALL

    def build_pattern(self) -> str:
        scheme = _URL_SCHEMES[UrlProtocol(self.protocol)]
        secure = _URL_SECURE_SUFFIX[UrlSecurity(self.security)]
        return rf"^{scheme}{secure}://[^\s/?#]+(?:[/?#]\S*)?$"

    @property
    def format_name(self) -> str:
        return "URL"


@dataclass(frozen=True)
class GlobalDateTimeValidator(FormatValidator):
    """``YYYY-MM-DDThh:mm:ss[.fraction]`` followed by a ``Z`` or numeric offset.

    ``offset`` decides whether the offset must be ``Z``, may be omitted, or
    must be present.
    """

    offset: DateTimeOffset = DateTimeOffset.NONE

    def build_pattern(self) -> str:
        return rf"^{_GLOBAL_DATE_TIME}{_GLOBAL_SUFFIX[DateTimeOffset(self.offset)]}$"

    @property
    def format_name(self) -> str:
        return "global date-time"


@dataclass(frozen=True)
class LocalDateTimeValidator(FormatValidator):
    """``YYYY-MM-DDThh:mm[:ss]`` without any offset."""

    def build_pattern(self) -> str:
        return LOCAL_DATE_TIME_PATTERN

    @property
    def format_name(self) -> str:
        return "local date-time"


@dataclass(frozen=True)
class DateValidator(FormatValidator):
    """``YYYY-MM-DD`` with month 01-12 and day 01-31.

    The day is not checked against the month length.
    """

    def build_pattern(self) -> str:
        return DATE_PATTERN

    @property
    def format_name(self) -> str:
        return "date"


@dataclass(frozen=True)
class TimeValidator(FormatValidator):
    """``hh:mm[:ss[.fraction]]`` on a 24-hour clock."""

    def build_pattern(self) -> str:
        return TIME_PATTERN

    @property
    def format_name(self) -> str:
        return "time"


@dataclass(frozen=True)
class IpValidator(FormatValidator):
    """IPv4 or IPv6 addresses, with an optional CIDR prefix length.

    IPv4-embedded IPv6 forms and zone identifiers are not accepted.
    """

    version: IpVersion = IpVersion.V4
    with_prefix_length: bool = False

    def build_pattern(self) -> str:
        if IpVersion(self.version) is IpVersion.V4:
            address, prefix = _IPV4, _IPV4_PREFIX
        else:
            address, prefix = _IPV6, _IPV6_PREFIX
        if self.with_prefix_length:
            return rf"^{address}(?:{prefix})?$"
        return rf"^{address}$"

    @property
    def format_name(self) -> str:
        label = "IPv4" if IpVersion(self.version) is IpVersion.V4 else "IPv6"
        if self.with_prefix_length:
            return f"{label} address with optional prefix length"
        return f"{label} address"


@dataclass(frozen=True)
class MacValidator(FormatValidator):
    """Six two-digit hex groups joined by ``separator`` (may be empty)."""

    separator: str = ":"

    def build_pattern(self) -> str:
        return rf"^[0-9A-Fa-f]{{2}}(?:{re.escape(self.separator)}[0-9A-Fa-f]{{2}}){{5}}$"

    @property
    def format_name(self) -> str:
        return "MAC address"
