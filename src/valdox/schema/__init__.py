"""Field binding and schema composition."""

from __future__ import annotations

from valdox.schema.builder import FieldBinding, SchemaBuilder

__all__ = ["FieldBinding", "SchemaBuilder"]
