"""Numeric validators.

Range, one-sided comparison, multiple-of and literal-set checks for any
real number type (int, float, Decimal, Fraction). Booleans are rejected as
bounds. Values are compared with their native ordering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import Any

from valdox.core.errors import ValdoxError
from valdox.core.messages import render_list
from valdox.validation.base import BaseValidator, require_number

Number = Any


def _above(bound: Number) -> Number:
    """Smallest value strictly greater than an integral bound."""
    if isinstance(bound, Integral):
        return bound + 1
    raise ValdoxError.unsupported_clamp(bound)


def _below(bound: Number) -> Number:
    """Largest value strictly less than an integral bound."""
    if isinstance(bound, Integral):
        return bound - 1
    raise ValdoxError.unsupported_clamp(bound)


def _bound_label(bound: Number, inclusive: bool) -> str:
    return str(bound) if inclusive else f"{bound} (exclusive)"


@dataclass(frozen=True)
class NumberBetweenValidator(BaseValidator[Number]):
    """Validates that a number lies within ``[min, max]``.

    Either bound can be made exclusive. ``min <= max`` is the caller's
    responsibility and is not checked.
    """

    min: Number
    max: Number
    include_min: bool = True
    include_max: bool = True

    def __post_init__(self) -> None:
        require_number("min", self.min)
        require_number("max", self.max)

    @property
    def expected(self) -> str:
        return (
            f"value between {_bound_label(self.min, self.include_min)}"
            f" and {_bound_label(self.max, self.include_max)}"
        )

    def _above_min(self, value: Number) -> bool:
        return value >= self.min if self.include_min else value > self.min

    def _below_max(self, value: Number) -> bool:
        return value <= self.max if self.include_max else value < self.max

    def is_valid(self, value: Number) -> bool:
        # Unordered values such as NaN fail both comparisons
        return self._above_min(value) and self._below_max(value)

    def clamp(self, value: Number) -> Number:
        """Move an out-of-range value to the nearest value inside the range.

        An exclusive bound is replaced by its neighbour (``min + 1`` or
        ``max - 1``), which only exists for integral bounds. NaN is moved
        to the lower bound.

        Raises:
            ValdoxError: If the value must be moved to an exclusive,
                non-integral bound.
        """
        if not self._above_min(value):
            return self.min if self.include_min else _above(self.min)
        if not self._below_max(value):
            return self.max if self.include_max else _below(self.max)
        return value


@dataclass(frozen=True)
class NumberGreaterThanValidator(BaseValidator[Number]):
    """Validates ``value > bound``."""

    bound: Number

    def __post_init__(self) -> None:
        require_number("bound", self.bound)

    @property
    def expected(self) -> str:
        return f"value greater than {self.bound}"

    def is_valid(self, value: Number) -> bool:
        return value > self.bound

    def clamp(self, value: Number) -> Number:
        """Raise a value to ``bound + 1`` when it is not above the bound."""
        return value if self.is_valid(value) else _above(self.bound)


@dataclass(frozen=True)
class NumberGreaterOrEqualValidator(BaseValidator[Number]):
    """Validates ``value >= bound``."""

    bound: Number

    def __post_init__(self) -> None:
        require_number("bound", self.bound)

    @property
    def expected(self) -> str:
        return f"value >= {self.bound}"

    def is_valid(self, value: Number) -> bool:
        return value >= self.bound

    def clamp(self, value: Number) -> Number:
        """Raise a value to the bound when it is below it."""
        return value if self.is_valid(value) else self.bound


@dataclass(frozen=True)
class NumberLessThanValidator(BaseValidator[Number]):
    """Validates ``value < bound``."""

    bound: Number

    def __post_init__(self) -> None:
        require_number("bound", self.bound)

    @property
    def expected(self) -> str:
        return f"value less than {self.bound}"

    def is_valid(self, value: Number) -> bool:
        return value < self.bound

    def clamp(self, value: Number) -> Number:
        """Lower a value to ``bound - 1`` when it is not below the bound."""
        return value if self.is_valid(value) else _below(self.bound)


@dataclass(frozen=True)
class NumberLessOrEqualValidator(BaseValidator[Number]):
    """Validates ``value <= bound``."""

    bound: Number

    def __post_init__(self) -> None:
        require_number("bound", self.bound)

    @property
    def expected(self) -> str:
        return f"value <= {self.bound}"

    def is_valid(self, value: Number) -> bool:
        return value <= self.bound

    def clamp(self, value: Number) -> Number:
        """Lower a value to the bound when it is above it."""
        return value if self.is_valid(value) else self.bound


@dataclass(frozen=True)
class NumberMultipleOfValidator(BaseValidator[Number]):
    """Validates that ``value % divisor == 0``.

    Uses Python's floored modulo. Only a zero remainder is observed, so the
    result matches truncating-remainder semantics for negative operands.
    A zero divisor raises ZeroDivisionError when a value is checked.
    """

    divisor: Number

    def __post_init__(self) -> None:
        require_number("divisor", self.divisor)

    @property
    def expected(self) -> str:
        return f"multiple of {self.divisor}"

    def is_valid(self, value: Number) -> bool:
        return value % self.divisor == 0


@dataclass(frozen=True)
class NumberLiteralValidator(BaseValidator[Number]):
    """Validates that a number equals one of a fixed set of values."""

    literals: tuple[Number, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable, store an immutable tuple
        object.__setattr__(self, "literals", tuple(self.literals))
        for literal in self.literals:
            require_number("literal", literal)

    @property
    def expected(self) -> str:
        return f"one of {render_list(self.literals)}"

    def is_valid(self, value: Number) -> bool:
        return any(value == literal for literal in self.literals)
