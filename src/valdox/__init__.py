"""valdox: composable value validators and a schema builder for records.

This package provides:
- Numeric validators (ranges, comparisons, multiples, literal sets) with clamping
- String validators (length, literals, prefix/suffix/substring, regex) with cropping
- Format validators (email, UUID, URL, date/time, IP, MAC)
- A pluggable regex matching strategy
- A schema builder producing ordered, path-qualified error lists

Quick Start:
    >>> from valdox import SchemaBuilder, v
    >>> v.number.between(5, 10).test(7)
    True
    >>> v.string.regex(r"^([a-z]+)@([a-z]+)\\.com$").match("test@example.com")
    RegexMatch(matched=True, captures=['test', 'example'])

    # Validate records
    >>> person = (
    ...     SchemaBuilder[Person]("person")
    ...     .add("age", "age", v.number.between(0, 120))
    ...     .add("name", "name", v.string.length.between(1, 50))
    ...     .add("email", "email", v.string.email())
    ... )
    >>> errors: list[str] = []
    >>> person.validate(Person(150, "", "nope"), "person", errors)
    False
    >>> len(errors)
    3
"""

from __future__ import annotations

from valdox.core import (
    PythonRegexEngine,
    RegexEngineFactory,
    ValdoxConfig,
    ValdoxError,
    ValdoxValidationError,
    get_config,
    get_regex_engine,
    match_regex,
    set_regex_engine,
)
from valdox.models import (
    DateTimeOffset,
    IpVersion,
    RegexMatch,
    UrlProtocol,
    UrlSecurity,
    ValidationReport,
)
from valdox.pandas_ext import register_accessor, validate_dataframe
from valdox.protocols import Checkable, RegexEngineProtocol, ValidatorProtocol
from valdox.schema import FieldBinding, SchemaBuilder
from valdox.validation import BaseValidator
from valdox.validator import Validator, v

__version__ = "0.1.0"
__package_name__ = "valdox"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "Validator",
    "v",
    "SchemaBuilder",
    "FieldBinding",
    "BaseValidator",
    # Options
    "DateTimeOffset",
    "IpVersion",
    "UrlProtocol",
    "UrlSecurity",
    # Results
    "RegexMatch",
    "ValidationReport",
    # Errors
    "ValdoxError",
    "ValdoxValidationError",
    # Protocols
    "Checkable",
    "ValidatorProtocol",
    "RegexEngineProtocol",
    # Regex strategy
    "PythonRegexEngine",
    "RegexEngineFactory",
    "get_regex_engine",
    "set_regex_engine",
    "match_regex",
    # Configuration
    "ValdoxConfig",
    "get_config",
    # Pandas integration
    "register_accessor",
    "validate_dataframe",
]
