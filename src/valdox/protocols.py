from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from valdox.models.results import RegexMatch


@runtime_checkable
class Checkable(Protocol):
    """Anything a schema builder can bind to a field.

    Leaf validators and schema builders both implement it, which lets a
    builder hold validators of unrelated types in one ordered list and nest
    builders inside builders.
    """

    def check(
        self,
        value: Any,
        path: str,
        errors: list[str] | None,
        stop_on_error: bool = False,
    ) -> bool:
        """Check a value found at ``path``.

        Args:
            value: Value to check.
            path: Fully qualified path of the value, used in messages.
            errors: Error list to append to, or None to only compute the result.
            stop_on_error: If True, stop at the first failure.

        Returns:
            True if the value is valid.
        """
        ...


@runtime_checkable
class ValidatorProtocol(Checkable, Protocol):
    """Protocol for leaf value validators."""

    def test(self, value: Any, field: str | None = None, errors: list[str] | None = None) -> bool:
        """Test a value, appending one message to ``errors`` on failure."""
        ...

    def explain(self, value: Any, field: str = "") -> str | None:
        """Return the error message for a value, or None if it is valid."""
        ...


@runtime_checkable
class RegexEngineProtocol(Protocol):
    """Protocol for regex matching strategies.

    Implementations match the whole value and report capture groups 1..n.
    They must be safe to call from several threads at once.
    """

    def __call__(self, pattern: str, value: str) -> RegexMatch:
        """Match ``pattern`` against the whole of ``value``."""
        ...
