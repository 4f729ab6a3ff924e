"""Schema builder for record types.

A ``SchemaBuilder`` binds field names and accessors of a record type to
validators and evaluates the bindings, in registration order, against a
record instance. Builders can be nested as the validator of another
builder's field, and list-typed fields are validated element by element.

Example:
    >>> from valdox import SchemaBuilder, v
    >>> address = (
    ...     SchemaBuilder[Address]("address")
    ...     .add("street", "street", v.string.length.min(5))
    ...     .add("zip_code", "zip_code", v.string.regex(r"^[0-9]{5}$"))
    ... )
    >>> company = (
    ...     SchemaBuilder[Company]("company")
    ...     .add("name", lambda c: c.name, v.string.length.between(1, 100))
    ...     .add("address", lambda c: c.address, address)
    ...     .add_vector("tags", lambda c: c.tags, v.number.between(1, 100))
    ... )
    >>> errors: list[str] = []
    >>> company.validate(acme, "company", errors)
    False
    >>> errors
    ["ValidationError: 'company.address.street' received \"123\", expected length >= 5.", ...]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Generic, Self, TypeVar

from valdox.core.errors import ValdoxError, ValdoxValidationError
from valdox.core.messages import index_path, join_path
from valdox.models.results import ValidationReport
from valdox.protocols import Checkable

logger = logging.getLogger(__name__)

T = TypeVar("T")

Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class FieldBinding:
    """Association of a field name, an accessor and a validator.

    Attributes:
        name: Field name, appended to the parent path.
        accessor: Read-only function from record to field value.
        target: Leaf validator or nested schema builder.
        repeated: If True, the field holds a sequence and ``target`` is
            applied to every element, with ``[index]`` appended to the path.
    """

    name: str
    accessor: Accessor
    target: Checkable
    repeated: bool = False

    def check(
        self,
        instance: Any,
        root: str,
        errors: list[str] | None,
        stop_on_error: bool,
    ) -> bool:
        """Evaluate this binding against a record."""
        path = join_path(root, self.name)
        value = self.accessor(instance)
        if not self.repeated:
            return self.target.check(value, path, errors, stop_on_error)

        valid = True
        for index, element in enumerate(value):
            if self.target.check(element, index_path(path, index), errors, stop_on_error):
                continue
            valid = False
            if stop_on_error or errors is None:
                return False
        return valid


def _resolve_accessor(accessor: str | Accessor) -> Accessor:
    if isinstance(accessor, str):
        return attrgetter(accessor)
    return accessor


class SchemaBuilder(Generic[T]):
    """Ordered collection of field bindings for one record type.

    The builder is mutated only while it is being defined; validation reads
    the bindings and never changes them, so a built schema can be shared.
    """

    def __init__(self, name: str = "schema") -> None:
        """Initialize an empty schema.

        Args:
            name: Label used in logs and reprs. Not part of error paths.
        """
        self.name = name
        self._bindings: list[FieldBinding] = []

    def _bind(self, field: str, accessor: str | Accessor, target: Any, repeated: bool) -> Self:
        if not isinstance(target, Checkable):
            raise ValdoxError.with_context(
                "invalid_validator",
                "field {field} must be bound to a validator or schema builder, got {target_type}",
                {"field": field, "target_type": type(target).__name__},
            )
        self._bindings.append(FieldBinding(field, _resolve_accessor(accessor), target, repeated))
        logger.debug(
            "Schema %s: bound %s%s to %r", self.name, field, "[]" if repeated else "", target
        )
        return self

    def add(self, field: str, accessor: str | Accessor, validator: Checkable) -> Self:
        """Register a scalar field.

        Args:
            field: Field name used in error paths.
            accessor: Function returning the field value, or an attribute name.
            validator: Leaf validator, or a nested SchemaBuilder.

        Returns:
            The builder, for chaining.
        """
        return self._bind(field, accessor, validator, repeated=False)

    def add_vector(
        self,
        field: str,
        accessor: str | Accessor,
        element_validator: Checkable,
    ) -> Self:
        """Register a field holding a sequence, validated element by element.

        Args:
            field: Field name used in error paths.
            accessor: Function returning the sequence, or an attribute name.
            element_validator: Validator (or nested SchemaBuilder) applied to
                each element; failures are reported as ``field[index]``.

        Returns:
            The builder, for chaining.
        """
        return self._bind(field, accessor, element_validator, repeated=True)

    def check(
        self,
        value: T,
        path: str,
        errors: list[str] | None,
        stop_on_error: bool = False,
    ) -> bool:
        """Evaluate every binding against ``value`` with ``path`` as root label."""
        valid = True
        for binding in self._bindings:
            if binding.check(value, path, errors, stop_on_error):
                continue
            valid = False
            if stop_on_error or errors is None:
                return False
        return valid

    def validate(
        self,
        instance: T,
        root_label: str = "",
        errors: list[str] | None = None,
        stop_on_error: bool = False,
    ) -> bool:
        """Validate a record.

        Args:
            instance: Record to validate.
            root_label: Path prefix for every message (no leading dot when empty).
            errors: Caller-owned list that messages are appended to. When
                omitted, evaluation stops at the first failure since no
                message is needed.
            stop_on_error: If True, abort the whole traversal, nested
                schemas and list elements included, at the first failure.

        Returns:
            True if every binding passed. With an error list, True iff no
            message was appended by this call.
        """
        if errors is None:
            return self.check(instance, root_label, None, True)

        start = len(errors)
        self.check(instance, root_label, errors, stop_on_error)
        added = len(errors) - start
        logger.debug(
            "Schema %s validated %r: %d error(s), stop_on_error=%s",
            self.name,
            root_label,
            added,
            stop_on_error,
        )
        return added == 0

    def report(
        self,
        instance: T,
        root_label: str = "",
        stop_on_error: bool = False,
    ) -> ValidationReport:
        """Validate a record and return the collected errors as a report."""
        errors: list[str] = []
        self.validate(instance, root_label, errors, stop_on_error)
        return ValidationReport(root_label=root_label, errors=errors)

    def ensure_valid(
        self,
        instance: T,
        root_label: str = "",
        stop_on_error: bool = False,
    ) -> T:
        """Validate a record and raise if it is invalid.

        Returns:
            The instance, unchanged.

        Raises:
            ValdoxValidationError: If any binding failed.
        """
        errors: list[str] = []
        if not self.validate(instance, root_label, errors, stop_on_error):
            raise ValdoxValidationError(errors, root_label)
        return instance

    def validate_many(
        self,
        instances: Iterable[T],
        root_label: str = "",
        stop_on_error: bool = False,
    ) -> list[list[str]]:
        """Validate several records, each under ``root_label[index]``.

        Returns:
            One error list per record, in input order.
        """
        results: list[list[str]] = []
        for index, instance in enumerate(instances):
            errors: list[str] = []
            self.validate(instance, index_path(root_label, index), errors, stop_on_error)
            results.append(errors)
        return results

    @property
    def fields(self) -> list[str]:
        """Bound field names, in registration order."""
        return [binding.name for binding in self._bindings]

    @property
    def bindings(self) -> list[FieldBinding]:
        """Copy of the bindings list."""
        return self._bindings.copy()

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"SchemaBuilder({self.name!r}, fields={self.fields!r})"
