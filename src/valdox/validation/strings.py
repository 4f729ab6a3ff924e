"""String validators.

Length, literal-set, prefix/suffix/substring and regular expression checks.
Lengths count characters (``len(str)``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from valdox.core.messages import format_error, render_list, render_value
from valdox.core.regex import RegexStrategy, match_regex
from valdox.models.results import RegexMatch
from valdox.validation.base import BaseValidator, require_length


@dataclass(frozen=True)
class StringLengthBetweenValidator(BaseValidator[str]):
    """Validates ``min <= len(value) <= max``."""

    min: int
    max: int

    def __post_init__(self) -> None:
        require_length("min", self.min)
        require_length("max", self.max)

    @property
    def expected(self) -> str:
        return f"length between {self.min} and {self.max}"

    def is_valid(self, value: str) -> bool:
        return self.min <= len(value) <= self.max


@dataclass(frozen=True)
class StringLengthMinValidator(BaseValidator[str]):
    """Validates ``len(value) >= min``."""

    min: int

    def __post_init__(self) -> None:
        require_length("min", self.min)

    @property
    def expected(self) -> str:
        return f"length >= {self.min}"

    def is_valid(self, value: str) -> bool:
        return len(value) >= self.min


@dataclass(frozen=True)
class StringLengthMaxValidator(BaseValidator[str]):
    """Validates ``len(value) <= max``."""

    max: int

    def __post_init__(self) -> None:
        require_length("max", self.max)

    @property
    def expected(self) -> str:
        return f"length <= {self.max}"

    def is_valid(self, value: str) -> bool:
        return len(value) <= self.max

    def crop(self, value: str) -> str:
        """Truncate a value to its first ``max`` characters."""
        return value[: self.max]


@dataclass(frozen=True)
class StringLiteralValidator(BaseValidator[str]):
    """Validates an exact, case-sensitive match against a fixed set of strings."""

    literals: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "literals", tuple(self.literals))

    @property
    def expected(self) -> str:
        return f"one of {render_list(self.literals)}"

    def is_valid(self, value: str) -> bool:
        return any(value == literal for literal in self.literals)


@dataclass(frozen=True)
class StringStartsWithValidator(BaseValidator[str]):
    """Validates that a value starts with ``prefix``."""

    prefix: str

    @property
    def expected(self) -> str:
        return f"to start with {render_value(self.prefix)}"

    def is_valid(self, value: str) -> bool:
        return value.startswith(self.prefix)


@dataclass(frozen=True)
class StringEndsWithValidator(BaseValidator[str]):
    """Validates that a value ends with ``suffix``."""

    suffix: str

    @property
    def expected(self) -> str:
        return f"to end with {render_value(self.suffix)}"

    def is_valid(self, value: str) -> bool:
        return value.endswith(self.suffix)


@dataclass(frozen=True)
class StringIncludesValidator(BaseValidator[str]):
    """Validates that a value contains ``substring``."""

    substring: str

    @property
    def expected(self) -> str:
        return f"to include {render_value(self.substring)}"

    def is_valid(self, value: str) -> bool:
        return self.substring in value


@dataclass(frozen=True)
class StringRegexValidator(BaseValidator[str]):
    """Validates that a value fully matches a regular expression.

    Matching goes through the regex strategy: the ``engine`` given at
    construction, or the process-wide strategy when None.

    Example:
        >>> validator = StringRegexValidator(r"^([a-z]+)@([a-z]+)\\.com$")
        >>> validator.match("test@example.com")
        RegexMatch(matched=True, captures=['test', 'example'])
    """

    pattern: str
    engine: RegexStrategy | None = field(default=None, compare=False, repr=False)

    @property
    def expected(self) -> str:
        return f"to match regex /{self.pattern}/"

    def is_valid(self, value: str) -> bool:
        return match_regex(self.pattern, value, self.engine).matched

    def match(
        self,
        value: str,
        field: str | None = None,
        errors: list[str] | None = None,
    ) -> RegexMatch:
        """Match a value and return the capture groups.

        Args:
            value: Value to match.
            field: Field path used in the message.
            errors: If given, one message is appended when the value does not
                match. It shows the pattern in double quotes, where ``test()``
                shows it as ``/pattern/``.

        Returns:
            RegexMatch with the captures, empty when unmatched.
        """
        result = match_regex(self.pattern, value, self.engine)
        if not result.matched and errors is not None:
            errors.append(
                format_error(field or "", value, f"to match regex {render_value(self.pattern)}")
            )
        return result
