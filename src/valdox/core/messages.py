"""Error message rendering and field path composition.

Every failing leaf check produces exactly one message of the form::

    ValidationError: '<field path>' received <value>, expected <constraint>.

Field paths are dotted for nested fields and indexed for list elements,
e.g. ``company.owner.email`` or ``product.tags[1]``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def join_path(root: str, field: str) -> str:
    """Append a field name to a path, omitting the dot for an empty root."""
    if not root:
        return field
    return f"{root}.{field}"


def index_path(path: str, index: int) -> str:
    """Append a 0-based element index to a path."""
    return f"{path}[{index}]"


def render_value(value: Any) -> str:
    """Render a value for a message: strings quoted, numbers as-is."""
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def render_list(values: Iterable[Any]) -> str:
    """Render a literal set as ``[a, b, c]``."""
    return "[" + ", ".join(render_value(v) for v in values) + "]"


def format_error(path: str, value: Any, expected: str) -> str:
    """Build the message for a failed check.

    Args:
        path: Fully qualified field path.
        value: The rejected value.
        expected: Description of the constraint, without trailing period.

    Returns:
        The formatted message.
    """
    return f"ValidationError: '{path}' received {render_value(value)}, expected {expected}."
