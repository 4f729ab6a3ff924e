"""Top-level validator factory.

``Validator`` groups the validator constructors into ``number`` and
``string`` namespaces:

    >>> from valdox import Validator
    >>> v = Validator()
    >>> v.number.between(5, 10).test(7)
    True
    >>> errors: list[str] = []
    >>> v.string.literals(["apple", "banana"]).test("orange", "fruit", errors)
    False
    >>> errors[0]
    'ValidationError: \\'fruit\\' received "orange", expected one of ["apple", "banana"].'

A factory may carry its own regex strategy; every pattern-based validator
it creates then matches with that strategy instead of the process-wide one.
"""

from __future__ import annotations

from collections.abc import Iterable

from valdox.core.regex import RegexStrategy
from valdox.models.enums import DateTimeOffset, IpVersion, UrlProtocol, UrlSecurity
from valdox.validation.formats import (
    DateValidator,
    EmailValidator,
    GlobalDateTimeValidator,
    IpValidator,
    LocalDateTimeValidator,
    MacValidator,
    TimeValidator,
    UrlValidator,
    UuidValidator,
)
from valdox.validation.numbers import (
    Number,
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


class NumberValidators:
    """Constructors for numeric validators."""

    def between(
        self,
        min: Number,
        max: Number,
        include_min: bool = True,
        include_max: bool = True,
    ) -> NumberBetweenValidator:
        """Value within ``[min, max]``; either bound may be exclusive."""
        return NumberBetweenValidator(min, max, include_min, include_max)

    def greater_than(self, bound: Number) -> NumberGreaterThanValidator:
        return NumberGreaterThanValidator(bound)

    def greater_or_equal(self, bound: Number) -> NumberGreaterOrEqualValidator:
        return NumberGreaterOrEqualValidator(bound)

    def less_than(self, bound: Number) -> NumberLessThanValidator:
        return NumberLessThanValidator(bound)

    def less_or_equal(self, bound: Number) -> NumberLessOrEqualValidator:
        return NumberLessOrEqualValidator(bound)

    def multiple_of(self, divisor: Number) -> NumberMultipleOfValidator:
        """Value divisible by ``divisor``; a zero divisor is the caller's bug."""
        return NumberMultipleOfValidator(divisor)

    def literals(self, literals: Iterable[Number]) -> NumberLiteralValidator:
        return NumberLiteralValidator(tuple(literals))


class StringLengthValidators:
    """Constructors for string length validators (inclusive bounds)."""

    def between(self, min: int, max: int) -> StringLengthBetweenValidator:
        return StringLengthBetweenValidator(min, max)

    def min(self, min: int) -> StringLengthMinValidator:
        return StringLengthMinValidator(min)

    def max(self, max: int) -> StringLengthMaxValidator:
        return StringLengthMaxValidator(max)


class DateTimeValidators:
    """Constructors for ISO-8601 style date-time validators."""

    def __init__(self, regex_engine: RegexStrategy | None = None) -> None:
        self._engine = regex_engine

    def global_(self, offset: DateTimeOffset = DateTimeOffset.NONE) -> GlobalDateTimeValidator:
        """Date-time with seconds and a ``Z`` or numeric offset, per ``offset``.

        Named with a trailing underscore because ``global`` is a keyword.
        """
        return GlobalDateTimeValidator(engine=self._engine, offset=offset)

    def local(self) -> LocalDateTimeValidator:
        """Date-time without offset, seconds optional."""
        return LocalDateTimeValidator(engine=self._engine)


class StringValidators:
    """Constructors for string and format validators."""

    def __init__(self, regex_engine: RegexStrategy | None = None) -> None:
        self._engine = regex_engine
        self.length = StringLengthValidators()
        self.date_time = DateTimeValidators(regex_engine)

    def literals(self, literals: Iterable[str]) -> StringLiteralValidator:
        return StringLiteralValidator(tuple(literals))

    def starts_with(self, prefix: str) -> StringStartsWithValidator:
        return StringStartsWithValidator(prefix)

    def ends_with(self, suffix: str) -> StringEndsWithValidator:
        return StringEndsWithValidator(suffix)

    def includes(self, substring: str) -> StringIncludesValidator:
        return StringIncludesValidator(substring)

    def regex(self, pattern: str) -> StringRegexValidator:
        """Full-string match against ``pattern``; use ``match()`` for captures."""
        return StringRegexValidator(pattern, self._engine)

    def email(self) -> EmailValidator:
        return EmailValidator(engine=self._engine)

    def uuid(self) -> UuidValidator:
        return UuidValidator(engine=self._engine)

    def url(
        self,
        protocol: UrlProtocol = UrlProtocol.ALL,
        security: UrlSecurity = UrlSecurity.ALL,
    ) -> UrlValidator:
        return UrlValidator(engine=self._engine, protocol=protocol, security=security)

    def date(self) -> DateValidator:
        return DateValidator(engine=self._engine)

    def time(self) -> TimeValidator:
        return TimeValidator(engine=self._engine)

    def ip(
        self,
        version: IpVersion = IpVersion.V4,
        with_prefix_length: bool = False,
    ) -> IpValidator:
        return IpValidator(
            engine=self._engine, version=version, with_prefix_length=with_prefix_length
        )

    def mac(self, separator: str = ":") -> MacValidator:
        return MacValidator(engine=self._engine, separator=separator)


class Validator:
    """Validator factory with ``number`` and ``string`` namespaces.

    Args:
        regex_engine: Optional regex strategy for the pattern-based
            validators created by this factory. When None they use the
            process-wide strategy (see ``valdox.core.regex``).
    """

    def __init__(self, regex_engine: RegexStrategy | None = None) -> None:
        self.regex_engine = regex_engine
        self.number = NumberValidators()
        self.string = StringValidators(regex_engine)

    def __repr__(self) -> str:
        return f"Validator(regex_engine={self.regex_engine!r})"


# Module-level factory using the process-wide regex strategy
v = Validator()
