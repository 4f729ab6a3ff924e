"""Value validator implementations.

This module provides the numeric, string and format validators. Build them
through ``valdox.Validator`` rather than instantiating them directly.
"""

from __future__ import annotations

from valdox.validation.base import BaseValidator
from valdox.validation.formats import (
    DateValidator,
    EmailValidator,
    FormatValidator,
    GlobalDateTimeValidator,
    IpValidator,
    LocalDateTimeValidator,
    MacValidator,
    TimeValidator,
    UrlValidator,
    UuidValidator,
)
from valdox.validation.numbers import (
    NumberBetweenValidator,
    NumberGreaterOrEqualValidator,
    NumberGreaterThanValidator,
    NumberLessOrEqualValidator,
    NumberLessThanValidator,
    NumberLiteralValidator,
    NumberMultipleOfValidator,
)
from valdox.validation.strings import (
    StringEndsWithValidator,
    StringIncludesValidator,
    StringLengthBetweenValidator,
    StringLengthMaxValidator,
    StringLengthMinValidator,
    StringLiteralValidator,
    StringRegexValidator,
    StringStartsWithValidator,
)

__all__ = [
    "BaseValidator",
    # Numbers
    "NumberBetweenValidator",
    "NumberGreaterThanValidator",
    "NumberGreaterOrEqualValidator",
    "NumberLessThanValidator",
    "NumberLessOrEqualValidator",
    "NumberMultipleOfValidator",
    "NumberLiteralValidator",
    # Strings
    "StringLengthBetweenValidator",
    "StringLengthMinValidator",
    "StringLengthMaxValidator",
    "StringLiteralValidator",
    "StringStartsWithValidator",
    "StringEndsWithValidator",
    "StringIncludesValidator",
    "StringRegexValidator",
    # Formats
    "FormatValidator",
    "EmailValidator",
    "UuidValidator",
    "UrlValidator",
    "GlobalDateTimeValidator",
    "LocalDateTimeValidator",
    "DateValidator",
    "TimeValidator",
    "IpValidator",
    "MacValidator",
]
