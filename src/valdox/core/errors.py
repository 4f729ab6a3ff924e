"""Error classes with package identification.

Invalid input is never an exception in valdox: validators return False and
append messages. These classes cover the two remaining cases, programmer
errors in validator configuration and the opt-in raising entry point of
the schema builder.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "valdox"


class ValdoxError(PydanticCustomError):
    """Configuration or usage error raised by valdox.

    Inherits from PydanticCustomError so it can be raised from inside
    pydantic validators and surface as a regular pydantic error.

    Construct it through the classmethods below so the context always
    carries the package identifier.
    """

    @classmethod
    def with_context(
        cls,
        error_type: str,
        message_template: str,
        context: dict[str, Any] | None = None,
    ) -> ValdoxError:
        """Create an error whose context is tagged with the package name.

        Args:
            error_type: Type/category of the error (e.g. "invalid_number").
            message_template: Error message (can include {placeholders}).
            context: Additional context dict merged into error context.

        Returns:
            ValdoxError instance.
        """
        return cls(error_type, message_template, {"package": PACKAGE_NAME, **(context or {})})

    @classmethod
    def invalid_number(cls, name: str, value: Any) -> ValdoxError:
        """Error for a bound that is not a real, non-boolean number."""
        return cls.with_context(
            "invalid_number",
            "{name} must be a real, non-boolean number, got {value_type}",
            {"name": name, "value": repr(value), "value_type": type(value).__name__},
        )

    @classmethod
    def invalid_length(cls, name: str, value: Any) -> ValdoxError:
        """Error for a string length bound that is not a non-negative int."""
        return cls.with_context(
            "invalid_length",
            "{name} must be a non-negative integer, got {value}",
            {"name": name, "value": repr(value)},
        )

    @classmethod
    def unsupported_clamp(cls, bound: Any) -> ValdoxError:
        """Error for clamping against an exclusive, non-integral bound."""
        return cls.with_context(
            "unsupported_clamp",
            "cannot clamp to exclusive bound {bound}: no adjacent value exists for {bound_type}",
            {"bound": repr(bound), "bound_type": type(bound).__name__},
        )


class ValdoxValidationError(Exception):
    """Raised by ``SchemaBuilder.ensure_valid`` when a record is invalid.

    Provides access to the ordered, path-qualified error messages.
    """

    def __init__(self, errors: list[str], root_label: str = "") -> None:
        """Initialize ValdoxValidationError.

        Args:
            errors: Collected validation messages, in evaluation order.
            root_label: Root label the record was validated under.
        """
        self.errors_list = list(errors)
        self.root_label = root_label
        self.context = {"package": PACKAGE_NAME, "root_label": root_label}
        super().__init__("; ".join(self.errors_list))

    def errors(self) -> list[str]:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"ValdoxValidationError({self.errors_list!r}, root_label={self.root_label!r})"
