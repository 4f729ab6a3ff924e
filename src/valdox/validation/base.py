"""Abstract base validator class.

Every leaf validator derives from ``BaseValidator`` and is declared as a
frozen dataclass, so its configuration cannot change after construction
and a single instance can be shared between callers and threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, Generic, TypeVar

from valdox.core.errors import ValdoxError
from valdox.core.messages import format_error

T = TypeVar("T")


class BaseValidator(ABC, Generic[T]):
    """Abstract base class for value validators.

    Generic over T, the type of value being validated. Subclasses implement
    the predicate and describe their constraint; message rendering and the
    error-list variants are shared.

    Example:
        @dataclass(frozen=True)
        class EvenValidator(BaseValidator[int]):
            @property
            def expected(self) -> str:
                return "even number"

            def is_valid(self, value: int) -> bool:
                return value % 2 == 0
    """

    @property
    @abstractmethod
    def expected(self) -> str:
        """Description of the constraint, used after "expected" in messages."""
        ...

    @abstractmethod
    def is_valid(self, value: T) -> bool:
        """Pure predicate: True if the value satisfies the constraint."""
        ...

    def explain(self, value: T, field: str = "") -> str | None:
        """Describe why a value is invalid.

        Args:
            value: Value to check.
            field: Field path to report in the message.

        Returns:
            The error message, or None if the value is valid.
        """
        if self.is_valid(value):
            return None
        return format_error(field, value, self.expected)

    def test(self, value: T, field: str | None = None, errors: list[str] | None = None) -> bool:
        """Test a value, optionally recording a message on failure.

        Args:
            value: Value to check.
            field: Field path used in the message.
            errors: If given, one message is appended when the value is invalid.

        Returns:
            True if the value is valid.
        """
        if errors is None:
            return self.is_valid(value)
        message = self.explain(value, field or "")
        if message is None:
            return True
        errors.append(message)
        return False

    def check(
        self,
        value: T,
        path: str,
        errors: list[str] | None,
        stop_on_error: bool = False,
    ) -> bool:
        """Uniform entry point used by schema builders.

        A leaf check appends at most one message, so ``stop_on_error`` has
        nothing to cut short here.
        """
        return self.test(value, path, errors)


def require_number(name: str, value: Any) -> None:
    """Reject bounds that are not real numbers, including booleans.

    Raises:
        ValdoxError: If the value is not an acceptable number.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValdoxError.invalid_number(name, value)


def require_length(name: str, value: Any) -> None:
    """Reject string length bounds that are not non-negative integers.

    Raises:
        ValdoxError: If the value is not an acceptable length.
    """
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
        raise ValdoxError.invalid_length(name, value)
