"""Pandas integration: validate DataFrame rows against a schema.

Each row is handed to the schema as a pandas Series, so attribute-name
accessors (``"age"``) and callables (``lambda row: row["age"]``) both work.
pandas is imported lazily; this module can be imported without it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from valdox.core.messages import index_path

if TYPE_CHECKING:
    import pandas as pd

    from valdox.schema.builder import SchemaBuilder


def validate_dataframe(
    df: pd.DataFrame,
    schema: SchemaBuilder,
    root_label: str = "rows",
    stop_on_error: bool = False,
) -> pd.Series:
    """Validate every row of a DataFrame.

    Args:
        df: DataFrame whose rows are the records to validate.
        schema: Schema the rows are validated against.
        root_label: Path prefix; each row is reported as ``root_label[index]``.
        stop_on_error: If True, stop each row at its first failure.

    Returns:
        Series of error lists, aligned with the DataFrame index.
    """
    import pandas as pd

    results: list[list[str]] = []
    for index, row in df.iterrows():
        errors: list[str] = []
        schema.validate(row, index_path(root_label, index), errors, stop_on_error)
        results.append(errors)
    return pd.Series(results, index=df.index, dtype=object, name="errors")


class SchemaAccessor:
    """Pandas accessor for schema validation.

    Usage:
        >>> from valdox.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"age": [25, 150]})
        >>> df.valdox.is_valid(person_schema)
    """

    def __init__(self, pandas_obj: pd.DataFrame) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The DataFrame this accessor is attached to.
        """
        self._obj = pandas_obj

    def validate(
        self,
        schema: SchemaBuilder,
        root_label: str = "rows",
        stop_on_error: bool = False,
    ) -> pd.Series:
        """Error list per row; see ``validate_dataframe``."""
        return validate_dataframe(self._obj, schema, root_label, stop_on_error)

    def is_valid(self, schema: SchemaBuilder) -> pd.Series:
        """Boolean Series, True for rows without errors."""
        import pandas as pd

        return pd.Series(
            [schema.validate(row) for _, row in self._obj.iterrows()],
            index=self._obj.index,
            dtype=bool,
            name="is_valid",
        )


def register_accessor(name: str = "valdox") -> None:
    """Register the schema accessor on pandas DataFrames.

    After calling this, you can use:
        >>> df.valdox.validate(schema)

    Args:
        name: Name for the accessor (default: "valdox").
    """
    import pandas as pd

    if not hasattr(pd.DataFrame, name):
        pd.api.extensions.register_dataframe_accessor(name)(SchemaAccessor)
