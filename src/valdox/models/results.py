"""Result types returned by validators and schema builders.

``RegexMatch`` is the value every regex strategy returns, and
``ValidationReport`` is the structured form of a schema validation run.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class RegexMatch(NamedTuple):
    """Outcome of matching a pattern against a whole string.

    Attributes:
        matched: True if the pattern matched the full value.
        captures: One entry per capturing group (group 0 excluded), in
            left-to-right, outer-to-inner order. Empty when not matched.
    """

    matched: bool
    captures: list[str]

    @classmethod
    def failed(cls) -> RegexMatch:
        """Build the result of an unsuccessful match."""
        return cls(False, [])

    def __bool__(self) -> bool:
        return self.matched


class ValidationReport(BaseModel):
    """Structured result of validating one record against a schema.

    Example:
        >>> report = schema.report(person, "person")
        >>> if not report.is_valid:
        ...     print(report.errors)
    """

    model_config = ConfigDict(frozen=True)

    root_label: str = ""
    errors: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        """True when no error was collected."""
        return not self.errors

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_count(self) -> int:
        """Number of collected errors."""
        return len(self.errors)
